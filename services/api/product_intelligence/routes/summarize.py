from fastapi import APIRouter, Request
from loguru import logger

from product_intelligence.errors import read_json_body
from product_intelligence.schemas import ErrorResponse, SummaryResponse, SummaryScores

router = APIRouter()


def canned_summary() -> SummaryResponse:
    return SummaryResponse(
        pros=["Example pro"],
        cons=["Example con"],
        scores=SummaryScores(quality=8, durability=7, value_for_money=6),
    )


@router.post("", response_model=SummaryResponse, responses={400: {"model": ErrorResponse}})
async def summarize(request: Request):
    # Body must parse, but its contents are not used.
    await read_json_body(request)
    logger.debug("serving canned summary")
    return canned_summary()
