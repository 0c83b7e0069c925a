import logging
import time

from app.errors import ParseError, UpstreamError
from app.middleware.metrics import LLM_DURATION, LLM_REQUESTS, PARSE_FAILURES
from app.models.llm_cloud import CompletionClient
from app.schemas.chat import ChatInput, ChatReply
from app.services.extract import extract_json_object
from app.services.prompt import build_prompt, build_system_prompt

logger = logging.getLogger("lingo")

FALLBACK_REPLY = "Sorry, I could not generate a response."


async def run_llm(prompt: str, mode: str, llm: CompletionClient) -> tuple[str, float]:
    """Call the upstream model once. Returns (text, processing_ms)."""
    start = time.perf_counter()
    try:
        text = await llm.complete(prompt)
    except UpstreamError:
        LLM_REQUESTS.labels(mode=mode, outcome="error").inc()
        raise
    elapsed = (time.perf_counter() - start) * 1000
    LLM_DURATION.labels(mode=mode).observe(elapsed / 1000)
    LLM_REQUESTS.labels(mode=mode, outcome="ok").inc()
    return text or "", elapsed


def shape_chat(text: str, req: ChatInput) -> ChatReply:
    return ChatReply(
        reply=text.strip() or FALLBACK_REPLY,
        topic=req.topic,
        language=req.language,
        mode=req.mode,
    )


def shape_evaluation(text: str) -> dict:
    try:
        return extract_json_object(text)
    except ParseError:
        PARSE_FAILURES.inc()
        raise


async def run_chat(req: ChatInput, llm: CompletionClient) -> dict:
    """Chat/evaluate pipeline: system prompt -> LLM -> response shaped by mode."""
    system_prompt = build_system_prompt(req.mode, req.language, req.topic)
    text, processing_ms = await run_llm(
        build_prompt(system_prompt, req.message), req.mode, llm
    )
    logger.info(
        "[PIPELINE] LLM (%s): %d chars (%dms)", req.mode, len(text), round(processing_ms)
    )

    if req.mode == "evaluate":
        return shape_evaluation(text)
    return shape_chat(text, req).model_dump()
