from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from scandalscope.config import Settings
from scandalscope.llm_client import Completion, Usage
from scandalscope.models.report import SearchResult


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        search_provider="google",
        google_api_key="google-key",
        search_engine_id="engine-id",
        brave_api_key="",
        search_language="lang_ja",
        search_max_results_per_query=5,
        search_max_parallel_requests=1,
        llm_api_key="llm-key",
        default_model="gpt-4-turbo",
        synthesis_temperature=0.1,
        synthesis_max_tokens=4000,
    )


@pytest.fixture
def make_llm():
    """Build a fake completion client returning the given text."""

    def _make(text: str | None = None, *, choices: int = 1, error: Exception | None = None) -> MagicMock:
        llm = MagicMock()
        if error is not None:
            llm.complete = AsyncMock(side_effect=error)
        else:
            llm.complete = AsyncMock(
                return_value=Completion(text=text, usage=Usage(input_tokens=10, output_tokens=20), choices=choices)
            )
        return llm

    return _make


@pytest.fixture
def make_results():
    """Build numbered evidence records for one query."""

    def _make(prefix: str, count: int) -> list[SearchResult]:
        return [
            SearchResult(
                title=f"{prefix} title {i}",
                link=f"https://news.example.com/{prefix}/{i}",
                summary=f"{prefix} summary {i}",
            )
            for i in range(count)
        ]

    return _make
