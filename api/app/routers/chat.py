import logging

from fastapi import APIRouter, Request

from app.dependencies import LLMDep
from app.errors import InvalidRequest, RelayError, UnexpectedError
from app.schemas.chat import ChatReply, ChatRequest, ErrorResponse, EvaluationResult
from app.services.normalizer import normalize_request
from app.services.pipeline import run_chat

logger = logging.getLogger("lingo")
router = APIRouter()


@router.post(
    "/chat",
    summary="Chat or evaluate a learner message",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": ChatRequest.model_json_schema()}
            },
        }
    },
    responses={
        200: {
            "description": "Chat reply, or the evaluation object when mode=evaluate",
            "content": {
                "application/json": {
                    "schema": {
                        "oneOf": [
                            ChatReply.model_json_schema(),
                            EvaluationResult.model_json_schema(),
                        ]
                    }
                }
            },
        },
        400: {"model": ErrorResponse, "description": "Missing or blank message"},
        500: {"model": ErrorResponse, "description": "Upstream or parse failure"},
    },
)
async def chat(request: Request, llm: LLMDep):
    """Forward a topic-scoped message to the language model.

    With `mode=evaluate` the reply is the model's JSON score object.

    **Example:** `{"message": "Hello", "topic": "travel", "language": "en"}`
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/x-www-form-urlencoded"):
        form = await request.form()
        body = dict(form)
    else:
        try:
            body = await request.json()
        except ValueError:
            raise InvalidRequest("Message is required in body")

    req = normalize_request(body)

    try:
        return await run_chat(req, llm)
    except RelayError:
        raise
    except Exception as e:
        logger.exception("Chat pipeline failed")
        raise UnexpectedError(str(e)) from e
