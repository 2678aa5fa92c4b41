"""Retry handler for catalog API requests."""

from coin_catalog.ingestion.config.value_objects import RetryConfig
from coin_catalog.ingestion.ports.validators import IRetryHandler


class CatalogRetryHandler(IRetryHandler):
    """Exponential backoff on throttling and server errors."""

    def __init__(self, config: RetryConfig):
        self.config = config

    def should_retry(self, status_code: int) -> bool:
        return status_code in self.config.retryable_status_codes

    def get_retry_delay(
        self,
        attempt_number: int,
        status_code: int,
        response_headers: dict[str, str] | None = None,
    ) -> float:
        """Calculate delay before retry.

        Respects Retry-After header if present (429 responses).

        Args:
            attempt_number: Current attempt (1-indexed)
            status_code: HTTP status code (0 for transport failures)
            response_headers: Response headers that may have Retry-After

        Returns:
            Delay in seconds
        """
        if response_headers and "Retry-After" in response_headers:
            try:
                return min(float(response_headers["Retry-After"]), self.config.max_delay)
            except (ValueError, TypeError):
                pass

        # base_delay * multiplier^(attempt - 1)
        delay = self.config.base_delay * (
            self.config.backoff_multiplier ** (attempt_number - 1)
        )
        return min(delay, self.config.max_delay)
