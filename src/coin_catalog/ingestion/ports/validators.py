"""Retry decision abstraction.

Keeps the choice of which responses to retry, and how long to wait, out of
the client so each API can tune it.
"""

from typing import Protocol


class IRetryHandler(Protocol):
    """Abstraction for retry decisions."""

    def should_retry(self, status_code: int) -> bool:
        """Whether a response with this status is worth retrying."""
        ...

    def get_retry_delay(
        self,
        attempt_number: int,
        status_code: int,
        response_headers: dict[str, str] | None = None,
    ) -> float:
        """Seconds to wait before attempt ``attempt_number + 1``."""
        ...
