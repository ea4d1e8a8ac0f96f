from __future__ import annotations

from typing import Any

from scandalscope.models.events import EventType, SSEEvent
from scandalscope.models.report import ScandalReport


def scan_started(subject_name: str, queries: list[str]) -> SSEEvent:
    return SSEEvent(
        event=EventType.SCAN_STARTED,
        data={"influencer_name": subject_name, "queries": queries, "total": len(queries)},
    )


def search_started(index: int, query: str) -> SSEEvent:
    return SSEEvent(event=EventType.SEARCH_STARTED, data={"index": index, "query": query})


def search_result(index: int, query: str, results: list[dict[str, Any]], provider: str) -> SSEEvent:
    return SSEEvent(
        event=EventType.SEARCH_RESULT,
        data={
            "index": index,
            "query": query,
            "provider": provider,
            "results_count": len(results),
            "results": results,
        },
    )


def search_failed(index: int, query: str, reason: str) -> SSEEvent:
    return SSEEvent(
        event=EventType.SEARCH_FAILED,
        data={"index": index, "query": query, "reason": reason},
    )


def synthesis_started(evidence_count: int, model: str) -> SSEEvent:
    return SSEEvent(
        event=EventType.SYNTHESIS_STARTED,
        data={"evidence_count": evidence_count, "model": model},
    )


def scan_complete(report: ScandalReport, runtime_ms: int) -> SSEEvent:
    """Emit the final report. Keys follow the HTTP response shape."""
    return SSEEvent(
        event=EventType.SCAN_COMPLETE,
        data={
            "data": report.model_dump(by_alias=True),
            "risk_score": report.max_risk_score,
            "runtime_ms": runtime_ms,
        },
    )


def error(message: str, details: str | None = None) -> SSEEvent:
    data: dict[str, Any] = {"message": message}
    if details is not None:
        data["details"] = details
    return SSEEvent(event=EventType.ERROR, data=data)
