"""Retry policy for the fetch layer."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from fetchkit.fetch.constants import DEFAULT_MAX_ATTEMPTS
from fetchkit.fetch.response import Response


class RetryPolicy(BaseModel):
    """Configuration for retry behavior.

    Every attempt that does not produce a 2xx response is retried until
    ``max_attempts`` is used up. Transport errors and HTTP error statuses are
    treated the same way and there is no delay between attempts.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_attempts: Annotated[int, Field(ge=1, le=10)] = DEFAULT_MAX_ATTEMPTS

    def should_retry(self, response: Response, attempt: int) -> bool:
        """Determine if another attempt should be made.

        Args:
            response: Response produced by the attempt.
            attempt: Current attempt number (0-indexed).

        Returns:
            True if the request should be issued again.
        """
        if response.ok:
            return False
        return attempt + 1 < self.max_attempts
