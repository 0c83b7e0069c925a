import asyncio
import logging
from typing import Protocol

import anthropic

from app.config import Settings
from app.errors import UpstreamError

logger = logging.getLogger("lingo")


class CompletionClient(Protocol):
    async def complete(self, prompt: str) -> str: ...


def _response_text(response) -> str:
    """Join the text blocks of a Messages API response, "" when there are none."""
    parts = []
    for block in getattr(response, "content", None) or []:
        if getattr(block, "type", None) == "text" and getattr(block, "text", None):
            parts.append(block.text)
    return "".join(parts)


class ClaudeLLM:
    def __init__(
        self,
        client: anthropic.AsyncAnthropic,
        model: str,
        timeout_s: float = 30.0,
        max_tokens: int = 1024,
        api_key: str = "",
    ):
        self.client = client
        self.model = model
        self.timeout_s = timeout_s
        self.max_tokens = max_tokens
        self._api_key = api_key

    def _sanitize(self, detail: str) -> str:
        if self._api_key:
            detail = detail.replace(self._api_key, "***")
        return detail

    async def complete(self, prompt: str) -> str:
        """Single non-streaming completion with timeout. Errors become UpstreamError."""
        try:
            response = await asyncio.wait_for(
                self.client.messages.create(
                    model=self.model,
                    max_tokens=self.max_tokens,
                    messages=[{"role": "user", "content": prompt}],
                ),
                timeout=self.timeout_s,
            )
        except asyncio.TimeoutError as e:
            logger.error("Claude request timed out after %.1fs", self.timeout_s)
            raise UpstreamError(
                f"Upstream request timed out after {self.timeout_s:g}s"
            ) from e
        except Exception as e:
            detail = self._sanitize(f"{type(e).__name__}: {e}")
            logger.error("Claude request failed: %s", detail)
            raise UpstreamError(detail) from e

        return _response_text(response)


def load_llm_cloud(settings: Settings) -> ClaudeLLM:
    logger.info("Initializing Claude LLM client (model=%s)", settings.llm_model)
    client = anthropic.AsyncAnthropic(
        api_key=settings.anthropic_api_key,
        max_retries=0,
    )
    return ClaudeLLM(
        client,
        model=settings.llm_model,
        timeout_s=settings.llm_timeout_s,
        max_tokens=settings.llm_max_tokens,
        api_key=settings.anthropic_api_key,
    )
