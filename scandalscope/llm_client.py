"""OpenAI-compatible completion client factory."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from scandalscope.config import Settings


@dataclass
class Usage:
    input_tokens: int = 0
    output_tokens: int = 0


@dataclass
class Completion:
    text: str | None
    usage: Usage
    choices: int = 0


class CompletionClient:
    """Thin adapter over the chat-completions endpoint.

    Only the single-turn, non-streaming shape used by synthesis is exposed.
    """

    def __init__(self, openai_client: Any):
        self._client = openai_client

    @staticmethod
    def _from_openai_response(response: Any) -> Completion:
        choices = getattr(response, "choices", None) or []
        text: str | None = None
        if choices:
            message = getattr(choices[0], "message", None)
            text = getattr(message, "content", None)

        usage = getattr(response, "usage", None)
        return Completion(
            text=text,
            usage=Usage(
                input_tokens=getattr(usage, "prompt_tokens", 0) or 0,
                output_tokens=getattr(usage, "completion_tokens", 0) or 0,
            ),
            choices=len(choices),
        )

    async def complete(
        self,
        *,
        model: str,
        system: str,
        temperature: float,
        max_tokens: int,
    ) -> Completion:
        response = await self._client.chat.completions.create(
            model=model,
            messages=[{"role": "system", "content": system}],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return self._from_openai_response(response)


def get_client(settings: Settings) -> CompletionClient:
    """Build a completion client via the OpenAI SDK."""
    from openai import AsyncOpenAI

    if not settings.llm_api_key:
        raise RuntimeError("LLM_API_KEY is not configured")

    base_url = settings.llm_base_url.strip() or "https://api.openai.com/v1"
    openai_client = AsyncOpenAI(
        api_key=settings.llm_api_key,
        base_url=base_url,
    )
    return CompletionClient(openai_client)


def get_model(settings: Settings, override: str | None = None) -> str:
    """Get the active model id."""
    return override or settings.default_model
