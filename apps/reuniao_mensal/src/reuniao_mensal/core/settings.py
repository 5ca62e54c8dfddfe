"""Application settings loaded from environment variables."""

from datetime import time
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for API, CLI and MCP layers."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_timezone: str = Field(default="America/Sao_Paulo", alias="APP_TIMEZONE")
    default_ordinal: int = Field(default=3, alias="DEFAULT_ORDINAL", ge=1, le=5)
    default_weekday: str = Field(default="wednesday", alias="DEFAULT_WEEKDAY")
    default_time_of_day: time = Field(
        default=time(12, 0),
        alias="DEFAULT_TIME_OF_DAY",
    )
    max_occurrences: int = Field(default=24, alias="MAX_OCCURRENCES", gt=0)
    mcp_api_base_url: str = Field(
        default="http://127.0.0.1:8000",
        alias="MCP_API_BASE_URL",
    )
    mcp_api_timeout_seconds: float = Field(
        default=10.0,
        alias="MCP_API_TIMEOUT_SECONDS",
        gt=0,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance for the current process."""

    return Settings()
