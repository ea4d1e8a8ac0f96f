from __future__ import annotations

import json as _json

from fastapi import APIRouter, Depends
from loguru import logger
from sse_starlette.sse import EventSourceResponse

from scandalscope.agents.orchestrator import ScandalOrchestrator
from scandalscope.api.deps import get_orchestrator
from scandalscope.api.errors import MISSING_NAME_MESSAGE, SEARCH_FAILED_MESSAGE, error_response
from scandalscope.errors import InvalidRequestError
from scandalscope.models.schemas import ErrorResponse, SearchRequest, SearchResponse
from scandalscope.services import logger as log_service
from scandalscope.services import streaming

router = APIRouter(prefix="/api/search", tags=["search"])


def _require_name(request: SearchRequest | None) -> str:
    name = request.influencer_name if request is not None else None
    if not name or not name.strip():
        raise InvalidRequestError(MISSING_NAME_MESSAGE)
    return name.strip()


@router.post(
    "",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search_scandals(
    request: SearchRequest | None = None,
    orchestrator: ScandalOrchestrator = Depends(get_orchestrator),
):
    """Scan news coverage of one person and return their controversy report."""
    name = _require_name(request)
    logger.info(f"Search request received: {name!r}")

    try:
        report = await orchestrator.run(name)
    except Exception as e:
        logger.exception(f"Search failed for {name!r}")
        return error_response(500, SEARCH_FAILED_MESSAGE, str(e))

    return SearchResponse(data=report)


@router.post("/stream")
async def stream_search(
    request: SearchRequest | None = None,
    orchestrator: ScandalOrchestrator = Depends(get_orchestrator),
):
    """SSE endpoint that streams scan progress and the final report."""
    name = _require_name(request)

    async def event_generator():
        try:
            async for event in orchestrator.scan(name):
                yield {
                    "event": event.event.value,
                    "data": _json.dumps(event.data, ensure_ascii=False),
                }
        except Exception as e:
            log_service.log_event(
                event_type="stream_error",
                message="Scan stream failed",
                error=str(e),
                influencer_name=name,
            )
            error_event = streaming.error(SEARCH_FAILED_MESSAGE, str(e))
            yield {
                "event": error_event.event.value,
                "data": _json.dumps(error_event.data, ensure_ascii=False),
            }

    return EventSourceResponse(event_generator())
