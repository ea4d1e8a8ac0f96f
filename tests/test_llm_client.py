"""Tests for the completion client factory and adapter."""
import sys
import types
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from scandalscope.llm_client import CompletionClient, get_client, get_model


class TestGetModel:
    def test_get_model_returns_default_when_no_override(self, settings):
        assert get_model(settings) == "gpt-4-turbo"

    def test_get_model_returns_override(self, settings):
        assert get_model(settings, "gpt-4o-mini") == "gpt-4o-mini"


class TestGetClient:
    def test_get_client_uses_configured_key_and_base_url(self, settings):
        settings.llm_base_url = "https://openrouter.ai/api/v1"

        openai_module = types.ModuleType("openai")
        mock_openai = MagicMock()
        openai_module.AsyncOpenAI = mock_openai

        with patch.dict(sys.modules, {"openai": openai_module}):
            client = get_client(settings)

        assert isinstance(client, CompletionClient)
        mock_openai.assert_called_once_with(
            api_key="llm-key",
            base_url="https://openrouter.ai/api/v1",
        )

    def test_get_client_requires_api_key(self, settings):
        settings.llm_api_key = ""
        with pytest.raises(RuntimeError):
            get_client(settings)


class TestCompletionClient:
    def test_from_openai_response_maps_first_choice_and_usage(self):
        response = SimpleNamespace(
            choices=[
                SimpleNamespace(message=SimpleNamespace(content="first")),
                SimpleNamespace(message=SimpleNamespace(content="second")),
            ],
            usage=SimpleNamespace(prompt_tokens=12, completion_tokens=34),
        )

        completion = CompletionClient._from_openai_response(response)

        assert completion.text == "first"
        assert completion.choices == 2
        assert completion.usage.input_tokens == 12
        assert completion.usage.output_tokens == 34

    def test_from_openai_response_without_choices(self):
        completion = CompletionClient._from_openai_response(SimpleNamespace(choices=[], usage=None))

        assert completion.text is None
        assert completion.choices == 0
        assert completion.usage.input_tokens == 0

    @pytest.mark.asyncio
    async def test_complete_sends_single_system_message(self):
        openai_client = MagicMock()
        openai_client.chat.completions.create = AsyncMock(return_value=SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content="{}"))],
            usage=None,
        ))

        completion = await CompletionClient(openai_client).complete(
            model="gpt-4-turbo",
            system="analyse this",
            temperature=0.1,
            max_tokens=4000,
        )

        assert completion.text == "{}"
        openai_client.chat.completions.create.assert_awaited_once_with(
            model="gpt-4-turbo",
            messages=[{"role": "system", "content": "analyse this"}],
            temperature=0.1,
            max_tokens=4000,
        )
