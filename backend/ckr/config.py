"""Application configuration."""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings from env."""

    openai_api_key: str = ""

    model_judgment: str = "gpt-4o-mini"  # cheap and stable for yes/no + short lists
    judgment_temperature: float = 0.0
    judgment_timeout_seconds: float = 30.0

    report_filename_prefix: str = "chatgptkwr_bulk"
    report_timezone: str = "Asia/Kolkata"
    report_generated_by: str = "ChatGPTKeyword.com"

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
