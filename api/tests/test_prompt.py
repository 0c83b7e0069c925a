from __future__ import annotations

from app.services.prompt import (
    EVALUATION_FIELDS,
    PROMPT_SEPARATOR,
    build_prompt,
    build_system_prompt,
    refusal_text,
)


def test_evaluate_prompt_lists_all_fields():
    prompt = build_system_prompt("evaluate", "en", "general")
    for field in EVALUATION_FIELDS:
        assert field in prompt
    assert "ONLY a JSON object" in prompt


def test_evaluate_prompt_ignores_language_and_topic():
    assert build_system_prompt("evaluate", "ur", "food") == build_system_prompt(
        "evaluate", "en", "general"
    )


def test_chat_prompt_uses_urdu_refusal():
    prompt = build_system_prompt("chat", "ur", "cricket")
    assert refusal_text("ur", "cricket") in prompt
    assert "معذرت" in prompt
    assert refusal_text("en", "cricket") not in prompt


def test_chat_prompt_uses_english_refusal_by_default():
    for language in ("en", "fr", ""):
        prompt = build_system_prompt("chat", language, "travel")
        assert refusal_text("en", "travel") in prompt
        assert "معذرت" not in prompt


def test_unknown_mode_gets_chat_persona():
    assert build_system_prompt("quiz", "en", "travel") == build_system_prompt(
        "chat", "en", "travel"
    )


def test_refusal_parameterized_by_topic():
    assert "travel" in refusal_text("en", "travel")
    assert "travel" in refusal_text("ur", "travel")


def test_build_prompt_appends_message():
    prompt = build_prompt("SYSTEM", "Hello")
    assert prompt == f"SYSTEM{PROMPT_SEPARATOR}Hello"
    assert prompt.endswith("Hello")
