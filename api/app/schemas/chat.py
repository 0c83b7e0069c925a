from pydantic import BaseModel, Field

DEFAULT_TOPIC = "general"
DEFAULT_LANGUAGE = "en"
DEFAULT_MODE = "chat"


class ChatRequest(BaseModel):
    """Documented request body. Parsing itself goes through the normalizer."""

    message: str | None = Field(default=None, description="User message")
    user_input: str | None = Field(
        default=None, description="Legacy alias of `message` for older clients"
    )
    topic: str = Field(default=DEFAULT_TOPIC, description="Conversation scope")
    language: str = Field(default=DEFAULT_LANGUAGE, description="en or ur")
    mode: str = Field(default=DEFAULT_MODE, description="chat or evaluate")


class ChatInput(BaseModel):
    message: str
    topic: str = DEFAULT_TOPIC
    language: str = DEFAULT_LANGUAGE
    mode: str = DEFAULT_MODE


class ChatReply(BaseModel):
    reply: str
    topic: str
    language: str
    mode: str


class EvaluationResult(BaseModel):
    fluency_score: float = Field(ge=0, le=100)
    grammar_score: float = Field(ge=0, le=100)
    pronunciation_score: float = Field(ge=0, le=100)
    new_words: list[str]
    ai_feedback: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
    raw: str | None = None
