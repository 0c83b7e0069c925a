from typing import Annotated

from fastapi import Depends, Request

from app.models.llm_cloud import CompletionClient


def get_llm(request: Request) -> CompletionClient:
    return request.app.state.llm


LLMDep = Annotated[CompletionClient, Depends(get_llm)]
