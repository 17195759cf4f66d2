import time

from fastapi import FastAPI, Request
from loguru import logger

import product_intelligence.routes.search as search
import product_intelligence.routes.summarize as summarize
import product_intelligence.routes.ui as ui
from product_intelligence.errors import InvalidPayloadError, invalid_payload_handler
from product_intelligence.logs import configure_logging
from product_intelligence.settings import settings


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.exception("{} {} -> unhandled error ({:.1f} ms)", request.method, request.url.path, elapsed_ms)
        raise
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "{} {} -> {} ({:.1f} ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


def create_app() -> FastAPI:
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_title)
    app.include_router(search.router, prefix="/api/search", tags=["search"])
    app.include_router(summarize.router, prefix="/api/summarize", tags=["summarize"])
    app.include_router(ui.router, tags=["ui"])
    app.add_exception_handler(InvalidPayloadError, invalid_payload_handler)
    app.middleware("http")(log_requests)
    return app


app = create_app()
