import logging
from typing import Any

from app.errors import InvalidRequest
from app.schemas.chat import DEFAULT_LANGUAGE, DEFAULT_MODE, DEFAULT_TOPIC, ChatInput

logger = logging.getLogger("lingo")


def _field(body: dict, name: str, default: str) -> str:
    value = body.get(name)
    if value is None or value == "":
        return default
    return value if isinstance(value, str) else str(value)


def _message(body: dict) -> str:
    # `user_input` is what older clients send
    for name in ("message", "user_input"):
        value = body.get(name)
        if isinstance(value, str) and value:
            return value.strip()
    return ""


def normalize_request(body: Any) -> ChatInput:
    """Resolve message/topic/language/mode from a decoded JSON body.

    Raises InvalidRequest when no non-blank message is present.
    """
    if not isinstance(body, dict):
        body = {}

    message = _message(body)
    if not message:
        raise InvalidRequest("Message is required in body")

    req = ChatInput(
        message=message,
        topic=_field(body, "topic", DEFAULT_TOPIC),
        language=_field(body, "language", DEFAULT_LANGUAGE),
        mode=_field(body, "mode", DEFAULT_MODE),
    )
    logger.info(
        "Chat request: message=%.100r topic=%s language=%s mode=%s",
        req.message, req.topic, req.language, req.mode,
    )
    return req
