"""Configuration value objects for dependency injection.

Instead of injecting the global settings object, inject specific
configuration dataclasses into each component. Enables:
- Easy testing with different configurations
- Clear constructor contracts
- Validation at composition root
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuration for HTTP client."""

    timeout: float = 30.0
    connect_timeout: float = 10.0


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior."""

    max_attempts: int = 3
    base_delay: float = 1.0
    max_delay: float = 60.0
    backoff_multiplier: float = 2.0
    retryable_status_codes: tuple[int, ...] = (429, 500, 502, 503, 504)


@dataclass(frozen=True)
class CatalogApiConfig:
    """Configuration for the remote catalog API client."""

    base_url: str
    app_version: str
    app_platform: str = "python"
    app_id: str | None = None
    api_key: str | None = None
    http_config: HttpClientConfig = None
    retry_config: RetryConfig = None

    def __post_init__(self):
        """Set defaults for nested configs."""
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if self.http_config is None:
            object.__setattr__(self, "http_config", HttpClientConfig())
        if self.retry_config is None:
            object.__setattr__(self, "retry_config", RetryConfig())
