"""Error payloads and handlers for the HTTP API."""
from __future__ import annotations

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from scandalscope.errors import InvalidRequestError
from scandalscope.models.schemas import ErrorResponse

SEARCH_FAILED_MESSAGE = "Search failed"
MISSING_NAME_MESSAGE = "influencerName is required"


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    payload = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(exclude_none=True),
    )


async def invalid_request_handler(request: Request, exc: InvalidRequestError) -> JSONResponse:
    return error_response(400, str(exc) or MISSING_NAME_MESSAGE)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed bodies as a client error instead of FastAPI's 422."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    logger.info(f"Rejected request to {request.url.path}: {details}")
    return error_response(400, "Invalid request body", details or None)
