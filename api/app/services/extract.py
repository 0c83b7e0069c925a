import json
import logging

from app.errors import ParseError

logger = logging.getLogger("lingo")


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def find_json_object(text: str) -> str | None:
    """Return the first balanced {...} span in text, in a single pass.

    Braces inside JSON string literals are ignored. Opening braces that never
    close are skipped, so the earliest-starting closed pair wins.
    """
    opened: list[int] = []
    best: tuple[int, int] | None = None
    in_string = False
    escaped = False
    start = text.find("{")
    if start == -1:
        return None
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == "{":
            opened.append(i)
        elif ch == "}" and opened:
            begin = opened.pop()
            if not opened:
                return text[begin:i + 1]
            if best is None or begin < best[0]:
                best = (begin, i + 1)
    if best is None:
        return None
    return text[best[0]:best[1]]


def extract_json_object(text: str) -> dict:
    span = find_json_object(text)
    if span is None:
        logger.warning("No JSON object in model output (%d chars)", len(text))
        raise ParseError(text)
    try:
        return json.loads(span, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.warning("Malformed JSON in model output: %s", e)
        raise ParseError(text) from e
