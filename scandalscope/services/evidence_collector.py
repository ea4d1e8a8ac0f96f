from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field

from loguru import logger

from scandalscope.config import Settings
from scandalscope.errors import UpstreamSearchError
from scandalscope.models.events import SSEEvent
from scandalscope.models.report import SearchResult
from scandalscope.services import logger as log_service
from scandalscope.services import streaming
from scandalscope.tools import search_provider


@dataclass(slots=True)
class QueryOutcome:
    index: int
    query: str
    results: list[SearchResult] = field(default_factory=list)
    provider: str | None = None
    error: UpstreamSearchError | None = None


async def _run_query(index: int, query: str, settings: Settings) -> QueryOutcome:
    outcome = QueryOutcome(index=index, query=query)
    t0 = time.monotonic()
    try:
        response = await search_provider.search(
            query,
            settings=settings,
            max_results=settings.search_max_results_per_query,
        )
    except Exception as e:
        outcome.error = UpstreamSearchError(query, str(e) or type(e).__name__)
        log_service.log_search_call(
            provider=settings.search_provider,
            query=query,
            duration_ms=int((time.monotonic() - t0) * 1000),
            error=outcome.error.reason,
        )
        return outcome

    outcome.results = response.results
    outcome.provider = response.provider
    log_service.log_search_call(
        provider=response.provider,
        query=query,
        results_count=len(response.results),
        duration_ms=int((time.monotonic() - t0) * 1000),
    )
    return outcome


async def run_searches(
    queries: list[str],
    *,
    settings: Settings,
) -> tuple[list[SearchResult], list[SSEEvent]]:
    """Search every query and concatenate results in query order.

    A failed query contributes nothing; the rest still run. Results are not
    deduplicated.
    """
    search_provider.check_configured(settings)

    events: list[SSEEvent] = []
    max_parallel = max(settings.search_max_parallel_requests, 1)

    if max_parallel == 1:
        outcomes = [await _run_query(index, query, settings) for index, query in enumerate(queries)]
    else:
        semaphore = asyncio.Semaphore(max_parallel)

        async def bounded(index: int, query: str) -> QueryOutcome:
            async with semaphore:
                return await _run_query(index, query, settings)

        outcomes = await asyncio.gather(
            *(bounded(index, query) for index, query in enumerate(queries))
        )

    evidence: list[SearchResult] = []
    failed = 0
    for outcome in outcomes:
        events.append(streaming.search_started(outcome.index, outcome.query))
        if outcome.error is not None:
            failed += 1
            events.append(streaming.search_failed(outcome.index, outcome.query, outcome.error.reason))
            continue
        evidence.extend(outcome.results)
        events.append(
            streaming.search_result(
                outcome.index,
                outcome.query,
                search_provider.results_to_dicts(outcome.results),
                provider=outcome.provider or settings.search_provider,
            )
        )

    if failed:
        logger.warning(f"{failed}/{len(queries)} search queries failed; continuing with {len(evidence)} results")
    return evidence, events


async def collect_evidence(queries: list[str], *, settings: Settings) -> list[SearchResult]:
    evidence, _ = await run_searches(queries, settings=settings)
    return evidence
