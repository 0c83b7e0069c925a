import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.errors import RelayError
from app.models.llm_cloud import CompletionClient, load_llm_cloud
from app.routers import chat

logger = logging.getLogger("lingo")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("Lingo Relay starting up")

    if app.state.llm is None:
        app.state.llm = load_llm_cloud(settings)

    yield

    logger.info("Lingo Relay shutting down")


API_DESCRIPTION = """
# Lingo Relay API

Relays topic-scoped practice messages to a language model so that clients
never hold the API key.

## Modes

| Mode | Response |
|------|----------|
| `chat` | `{reply, topic, language, mode}` |
| `evaluate` | `{fluency_score, grammar_score, pronunciation_score, new_words, ai_feedback}` |

## Languages

| Code | Language |
|------|----------|
| `en` | English (default) |
| `ur` | Urdu |
"""


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app(
    llm: CompletionClient | None = None,
    enable_metrics: bool | None = None,
) -> FastAPI:
    """Build the relay app. `llm` defaults to the Claude client built at startup."""
    app = FastAPI(
        title="Lingo Relay API",
        description=API_DESCRIPTION,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {"name": "chat", "description": "Topic-scoped chat and evaluation"},
        ],
    )
    app.state.llm = llm

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.prometheus_enabled if enable_metrics is None else enable_metrics:
        from app.middleware.metrics import setup_metrics

        setup_metrics(app)

    app.add_exception_handler(RelayError, relay_error_handler)
    app.include_router(chat.router, tags=["chat"])
    return app


app = create_app()


def run():
    import uvicorn

    print(f"Lingo Relay on http://{settings.host}:{settings.port}")
    print(f"Docs: http://{settings.host}:{settings.port}/docs")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    run()
