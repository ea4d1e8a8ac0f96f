from __future__ import annotations

import json
import time

from loguru import logger

from scandalscope.config import Settings
from scandalscope.errors import UpstreamCompletionError
from scandalscope.llm_client import CompletionClient, get_client, get_model
from scandalscope.models.report import SearchResult
from scandalscope.services import logger as log_service
from scandalscope.services.prompt_store import get_prompt, render_prompt


def format_evidence_lines(evidence: list[SearchResult]) -> str:
    if not evidence:
        return get_prompt("synthesis.no_evidence_line")
    return "\n".join(f"- {item.title}: {item.summary}" for item in evidence)


def build_prompt(subject_name: str, evidence: list[SearchResult]) -> str:
    """Render the single-turn instruction for one subject.

    The evidence is embedded twice: as bullet lines for analysis and as the
    JSON list the model is asked to echo back in ``relatedNews``.
    """
    related_news = json.dumps([item.model_dump() for item in evidence], ensure_ascii=False)
    return render_prompt(
        "synthesis.system_prompt",
        subject_name=subject_name,
        evidence_lines=format_evidence_lines(evidence),
        related_news_json=related_news,
    )


class SynthesisAgent:
    """Ask the completion service to turn evidence into an incident report."""

    name = "synthesis"

    def __init__(
        self,
        settings: Settings,
        *,
        client: CompletionClient | None = None,
        model: str | None = None,
    ):
        self.settings = settings
        self.model = get_model(settings, model)
        self.client = client

    def _client(self) -> CompletionClient:
        if self.client is None:
            self.client = get_client(self.settings)
        return self.client

    async def synthesize(self, subject_name: str, evidence: list[SearchResult]) -> str:
        """Return the stripped text of the first completion choice."""
        prompt = build_prompt(subject_name, evidence)
        logger.info(f"Requesting synthesis for {subject_name!r} with {len(evidence)} evidence records")

        t0 = time.monotonic()
        try:
            completion = await self._client().complete(
                model=self.model,
                system=prompt,
                temperature=self.settings.synthesis_temperature,
                max_tokens=self.settings.synthesis_max_tokens,
            )
        except Exception as e:
            log_service.log_llm_call(
                model=self.model,
                caller=self.name,
                duration_ms=int((time.monotonic() - t0) * 1000),
                status="error",
                error=str(e),
            )
            raise UpstreamCompletionError(f"Completion request failed: {e}") from e

        log_service.log_llm_call(
            model=self.model,
            caller=self.name,
            input_tokens=completion.usage.input_tokens,
            output_tokens=completion.usage.output_tokens,
            duration_ms=int((time.monotonic() - t0) * 1000),
        )

        if completion.choices == 0:
            raise UpstreamCompletionError("Completion returned no choices")
        text = (completion.text or "").strip()
        if not text:
            raise UpstreamCompletionError("Completion returned empty content")
        return text
