"""Shared pytest fixtures for relay tests."""

from __future__ import annotations

from typing import Callable

import pytest
from fastapi.testclient import TestClient

from app.errors import UpstreamError
from app.main import create_app


class StubLLM:
    """Records prompts and answers with a canned reply or error."""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def make_client() -> Callable[..., tuple[TestClient, StubLLM]]:
    def _make(reply: str = "", error: Exception | None = None):
        llm = StubLLM(reply=reply, error=error)
        app = create_app(llm=llm, enable_metrics=False)
        return TestClient(app), llm

    return _make


@pytest.fixture
def upstream_down(make_client):
    return make_client(error=UpstreamError("ConnectionError: network unreachable"))
