from __future__ import annotations

import pytest

from scandalscope.services.prompt_store import clear_prompt_cache, get_prompt, render_prompt


def test_render_prompt_substitutes_template_values():
    prompt = render_prompt(
        "synthesis.system_prompt",
        subject_name="Test Person",
        evidence_lines="- headline: snippet",
        related_news_json="[]",
    )
    assert "Test Person" in prompt
    assert "- headline: snippet" in prompt
    assert "$" not in prompt


def test_render_prompt_reports_missing_values():
    with pytest.raises(KeyError) as exc_info:
        render_prompt("synthesis.system_prompt", subject_name="Test Person")
    assert "synthesis.system_prompt" in str(exc_info.value)


def test_render_prompt_raises_for_unknown_key():
    with pytest.raises(KeyError):
        render_prompt("missing.prompt.key")


def test_get_prompt_rejects_non_string_nodes():
    clear_prompt_cache()
    with pytest.raises(TypeError):
        get_prompt("synthesis")
