from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # API
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "info"

    # Upstream LLM (Claude API)
    anthropic_api_key: str = ""
    llm_model: str = "claude-3-5-haiku-20241022"
    llm_timeout_s: float = 30.0
    llm_max_tokens: int = 1024

    # Monitoring
    prometheus_enabled: bool = True

    # CORS: any client may call the relay
    cors_origins: List[str] = ["*"]

    model_config = {
        "env_file": ["../.env", ".env"],
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
