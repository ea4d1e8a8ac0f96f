from __future__ import annotations

from typing import Any

import httpx

from scandalscope.config import Settings
from scandalscope.models.report import SearchResult

BRAVE_SEARCH_URL = "https://api.search.brave.com/res/v1/web/search"

# Google-style "lang_xx" restrictions mapped onto Brave's search_lang codes.
LANGUAGE_MAP = {
    "lang_ja": "jp",
    "lang_en": "en",
    "lang_ko": "ko",
    "lang_zh-CN": "zh-hans",
    "lang_zh-TW": "zh-hant",
}


async def search(
    query: str,
    *,
    settings: Settings,
    max_results: int = 5,
    language: str | None = None,
) -> list[SearchResult]:
    """Execute a Brave web search and normalize results."""
    if not settings.brave_api_key:
        raise RuntimeError("BRAVE_API_KEY is not configured")

    params: dict[str, Any] = {
        "q": query,
        "count": max_results,
    }
    if language and language in LANGUAGE_MAP:
        params["search_lang"] = LANGUAGE_MAP[language]

    async with httpx.AsyncClient(timeout=settings.search_timeout_seconds) as client:
        response = await client.get(
            BRAVE_SEARCH_URL,
            params=params,
            headers={
                "Accept": "application/json",
                "X-Subscription-Token": settings.brave_api_key,
            },
        )
        response.raise_for_status()
        payload = response.json()

    raw_results = payload.get("web", {}).get("results", [])
    mapped: list[SearchResult] = []
    for item in raw_results[:max_results]:
        snippets = item.get("extra_snippets", []) or []
        description = item.get("description", "") or ""
        mapped.append(
            SearchResult(
                title=item.get("title", ""),
                link=item.get("url", ""),
                summary=description.strip() or " ".join(snippets).strip(),
            )
        )
    return mapped
