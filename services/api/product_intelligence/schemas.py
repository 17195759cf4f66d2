from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    error: str


class SearchResponse(BaseModel):
    query: Any
    message: str


class SummaryScores(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    quality: int = Field(ge=0, le=10)
    durability: int = Field(ge=0, le=10)
    value_for_money: int = Field(ge=0, le=10, alias="valueForMoney")


class SummaryResponse(BaseModel):
    pros: list[str]
    cons: list[str]
    scores: SummaryScores
