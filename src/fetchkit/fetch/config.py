"""Configuration models for the fetch layer."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from fetchkit.fetch.constants import DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT_SECONDS
from fetchkit.fetch.models import RetryPolicy


class FetchConfig(BaseModel):
    """Configuration for fetch operations.

    Defaults give a 60 second timeout per attempt and three attempts per call.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    timeout_seconds: Annotated[float, Field(ge=1.0, le=300.0)] = (
        DEFAULT_TIMEOUT_SECONDS
    )
    retry_policy: RetryPolicy = Field(default_factory=RetryPolicy)
    max_workers: Annotated[int, Field(ge=1, le=64)] = DEFAULT_MAX_WORKERS
    follow_redirects: bool = True
    user_agent: Annotated[str | None, Field(min_length=1, max_length=500)] = None

    @property
    def max_attempts(self) -> int:
        """Number of attempts per fetch call."""
        return self.retry_policy.max_attempts
