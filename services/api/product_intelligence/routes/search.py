from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from loguru import logger

from product_intelligence.errors import read_json_body
from product_intelligence.schemas import ErrorResponse, SearchResponse

router = APIRouter()

SEARCH_ACK = "Search endpoint working"
MISSING_QUERY = "Missing query"


@router.post("", response_model=SearchResponse, responses={400: {"model": ErrorResponse}})
async def search(request: Request):
    body = await read_json_body(request)
    query = body.get("query") if isinstance(body, dict) else None
    # Python truthiness: empty lists and objects count as missing too.
    if not query:
        logger.debug("search rejected, query={!r}", query)
        return JSONResponse({"error": MISSING_QUERY}, status_code=400)

    logger.debug("search accepted, query={!r}", query)
    return SearchResponse(query=query, message=SEARCH_ACK)
