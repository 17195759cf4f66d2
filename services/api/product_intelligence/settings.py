import os

from pydantic import BaseModel


class Settings(BaseModel):
    app_title: str = os.getenv("APP_TITLE", "product-intelligence-api")
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
