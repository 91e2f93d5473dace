"""Environment settings powered by Pydantic BaseSettings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fetchkit.fetch.config import FetchConfig
from fetchkit.fetch.constants import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_WORKERS,
    DEFAULT_TIMEOUT_SECONDS,
)
from fetchkit.fetch.models import RetryPolicy
from fetchkit.observability.logging import configure_logging


class FetchSettings(BaseSettings):
    """Settings read from ``FETCHKIT_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="FETCHKIT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, ge=1.0, le=300.0)
    max_attempts: int = Field(default=DEFAULT_MAX_ATTEMPTS, ge=1, le=10)
    max_workers: int = Field(default=DEFAULT_MAX_WORKERS, ge=1, le=64)
    follow_redirects: bool = True
    user_agent: str | None = None
    log_level: str = "INFO"
    log_json: bool = True

    def to_fetch_config(self) -> FetchConfig:
        """Build the fetch configuration described by these settings."""
        return FetchConfig(
            timeout_seconds=self.timeout_seconds,
            retry_policy=RetryPolicy(max_attempts=self.max_attempts),
            max_workers=self.max_workers,
            follow_redirects=self.follow_redirects,
            user_agent=self.user_agent or None,
        )

    def configure_logging(self) -> None:
        """Configure structured logging from ``log_level`` and ``log_json``."""
        configure_logging(level=self.log_level, json_format=self.log_json)


def get_settings() -> FetchSettings:
    """Get a settings instance."""
    return FetchSettings()
