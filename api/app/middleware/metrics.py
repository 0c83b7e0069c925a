from prometheus_client import Counter, Histogram
from prometheus_fastapi_instrumentator import Instrumentator

LLM_REQUESTS = Counter(
    "lingo_llm_requests_total",
    "Total upstream LLM requests",
    ["mode", "outcome"],
)

LLM_DURATION = Histogram(
    "lingo_llm_duration_seconds",
    "Upstream LLM call duration in seconds",
    ["mode"],
    buckets=[0.25, 0.5, 1.0, 2.0, 3.0, 5.0, 10.0, 20.0, 30.0],
)

PARSE_FAILURES = Counter(
    "lingo_parse_failures_total",
    "Evaluate-mode responses without a parseable JSON object",
)


def setup_metrics(app):
    Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        excluded_handlers=["/metrics", "/docs", "/openapi.json"],
    ).instrument(app).expose(app, endpoint="/metrics")
