from __future__ import annotations

import json
import math

from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger

INVALID_BODY = "Invalid JSON body"


class InvalidPayloadError(Exception):
    """Request body could not be decoded as JSON."""


def _reject_constant(token: str):
    raise ValueError(f"{token} is not valid JSON")


def _finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"number {token} is out of range")
    return value


async def read_json_body(request: Request):
    """Decode the body as strict JSON; NaN, Infinity and overflowing numbers are refused."""
    body = await request.body()
    try:
        return json.loads(body, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError as exc:
        # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        raise InvalidPayloadError(str(exc)) from exc


async def invalid_payload_handler(request: Request, exc: InvalidPayloadError) -> JSONResponse:
    logger.warning("rejected malformed body on {} {}: {}", request.method, request.url.path, exc)
    return JSONResponse({"error": INVALID_BODY}, status_code=400)
