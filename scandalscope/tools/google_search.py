from __future__ import annotations

from typing import Any

import httpx

from scandalscope.config import Settings
from scandalscope.models.report import SearchResult

GOOGLE_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"


async def search(
    query: str,
    *,
    settings: Settings,
    max_results: int = 5,
    language: str | None = None,
) -> list[SearchResult]:
    """Execute a Google Custom Search request and normalize results."""
    if not settings.google_api_key or not settings.search_engine_id:
        raise RuntimeError("GOOGLE_API_KEY and SEARCH_ENGINE_ID must be configured")

    params: dict[str, Any] = {
        "q": query,
        "key": settings.google_api_key,
        "cx": settings.search_engine_id,
        # The API rejects num > 10.
        "num": max(1, min(max_results, 10)),
    }
    if language:
        params["lr"] = language

    async with httpx.AsyncClient(timeout=settings.search_timeout_seconds) as client:
        response = await client.get(GOOGLE_SEARCH_URL, params=params)
        response.raise_for_status()
        payload = response.json()

    items = payload.get("items") or []
    return [
        SearchResult(
            title=item.get("title", ""),
            link=item.get("link", ""),
            summary=item.get("snippet", ""),
        )
        for item in items[:max_results]
    ]
