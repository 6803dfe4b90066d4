"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strongly typed application configuration."""

    groq_api_key: str | None = Field(default=None, alias="GROQ_API_KEY")
    groq_base_url: str = Field(
        default="https://api.groq.com/openai/v1", alias="GROQ_BASE_URL"
    )
    chat_model: str = Field(default="llama-3.3-70b-versatile", alias="CHAT_MODEL")
    chat_temperature: float = Field(default=0.7, ge=0.0, alias="CHAT_TEMPERATURE")
    chat_max_tokens: int = Field(default=1024, ge=1, alias="CHAT_MAX_TOKENS")
    chat_timeout: float = Field(
        default=30.0, gt=0.0, alias="CHAT_TIMEOUT", description="Seconds"
    )
    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="info", alias="LOG_LEVEL"
    )

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, populate_by_name=True, extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of settings."""

    return Settings()
