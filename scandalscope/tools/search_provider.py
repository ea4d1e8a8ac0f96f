from __future__ import annotations

from dataclasses import dataclass

from scandalscope.config import Settings
from scandalscope.models.report import SearchResult
from scandalscope.tools import brave_search, google_search

SUPPORTED_PROVIDERS = ("google", "brave")


@dataclass
class SearchResponse:
    results: list[SearchResult]
    provider: str


def check_configured(settings: Settings) -> str:
    """Return the active provider name, raising if it cannot be used."""
    provider = settings.search_provider.lower().strip()
    if provider not in SUPPORTED_PROVIDERS:
        raise ValueError(f"Unsupported SEARCH_PROVIDER: {settings.search_provider}")
    if provider == "google" and not (settings.google_api_key and settings.search_engine_id):
        raise RuntimeError("GOOGLE_API_KEY and SEARCH_ENGINE_ID must be configured")
    if provider == "brave" and not settings.brave_api_key:
        raise RuntimeError("BRAVE_API_KEY is not configured")
    return provider


async def search(
    query: str,
    *,
    settings: Settings,
    max_results: int | None = None,
) -> SearchResponse:
    provider = settings.search_provider.lower().strip()
    if provider not in SUPPORTED_PROVIDERS:
        raise ValueError(f"Unsupported SEARCH_PROVIDER: {settings.search_provider}")

    search_fn = google_search.search if provider == "google" else brave_search.search
    results = await search_fn(
        query,
        settings=settings,
        max_results=max_results or settings.search_max_results_per_query,
        language=settings.search_language or None,
    )
    return SearchResponse(results=results, provider=provider)


def results_to_dicts(results: list[SearchResult]) -> list[dict]:
    """Convert SearchResult list to JSON-serializable dicts."""
    return [r.model_dump() for r in results]
