"""Application configuration using pydantic-settings pattern."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Meeting Cost Dashboard"
    app_version: str = "0.1.0"
    app_env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Key-value store (Turso/libSQL)
    turso_database_url: str | None = Field(default=None)
    turso_auth_token: str | None = Field(default=None)
    store_retry_attempts: int = Field(
        default=3,
        ge=1,
        description="Attempts for a store read/write before giving up",
    )
    store_retry_wait_seconds: float = Field(
        default=0.5,
        ge=0.0,
        description="Base backoff between store retries",
    )

    # Dashboard
    default_meeting_limit: int = Field(
        default=50,
        ge=1,
        description="Meetings returned by list operations when no limit is given",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
