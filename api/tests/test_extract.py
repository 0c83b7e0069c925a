from __future__ import annotations

import pytest

from app.errors import ParseError
from app.services.extract import extract_json_object, find_json_object


def test_object_surrounded_by_prose():
    text = 'Here you go:\n{"a": 1}\nHope that helps.'
    assert find_json_object(text) == '{"a": 1}'


def test_markdown_fence():
    text = '```json\n{"fluency_score": 80, "new_words": []}\n```'
    assert extract_json_object(text) == {"fluency_score": 80, "new_words": []}


def test_nested_braces():
    text = 'Result: {"a": {"b": {"c": 1}}, "d": 2} trailing {"e": 3}'
    assert extract_json_object(text) == {"a": {"b": {"c": 1}}, "d": 2}


def test_braces_inside_strings_ignored():
    text = '{"ai_feedback": "use } and { carefully", "x": "\\"}"}'
    assert extract_json_object(text) == {
        "ai_feedback": "use } and { carefully",
        "x": '"}',
    }


def test_unclosed_brace_skipped():
    text = 'oops { not closed {"a": 1}'
    assert find_json_object(text) == '{"a": 1}'


def test_no_object():
    assert find_json_object("no json here") is None
    with pytest.raises(ParseError) as exc:
        extract_json_object("no json here")
    assert exc.value.raw == "no json here"
    assert exc.value.status_code == 500


def test_malformed_object_is_not_repaired():
    text = "Scores: {fluency_score: 80,}"
    with pytest.raises(ParseError) as exc:
        extract_json_object(text)
    assert exc.value.to_dict() == {
        "error": "Failed to parse evaluation response",
        "raw": text,
    }


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_non_json_constants_rejected(constant):
    text = '{"fluency_score": %s, "grammar_score": 75}' % constant
    with pytest.raises(ParseError) as exc:
        extract_json_object(text)
    assert exc.value.raw == text


def test_too_deep_nesting_is_parse_error():
    depth = 50000
    text = '{"a":' * depth + "1" + "}" * depth
    with pytest.raises(ParseError) as exc:
        extract_json_object(text)
    assert exc.value.raw == text


def test_unclosed_run_returns_none():
    assert find_json_object("{" * 200000) is None


def test_earliest_closed_pair_inside_unclosed_brace():
    text = 'start { {"a": 1} then {"b": 2}'
    assert find_json_object(text) == '{"a": 1}'
