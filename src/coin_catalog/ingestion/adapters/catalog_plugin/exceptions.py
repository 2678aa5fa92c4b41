"""
Catalog API Exception Hierarchy

Provides specific exception types for the different ways a catalog request
can fail, so callers can classify and log them.
"""


class CatalogAPIError(Exception):
    """Base exception for all catalog API errors."""

    def __init__(
        self, message: str, status_code: int | None = None, endpoint: str | None = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.endpoint = endpoint


class BadRequestError(CatalogAPIError):
    """400 - Bad parameter(s) in the request."""


class AuthenticationError(CatalogAPIError):
    """401/403 - Invalid or missing API key."""


class NotFoundError(CatalogAPIError):
    """404 - Endpoint or resource not found."""


class RateLimitError(CatalogAPIError):
    """429 - Too many requests, rate limit exceeded."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(CatalogAPIError):
    """500+ - Server-side error."""


class TransportError(CatalogAPIError):
    """Connection failure or timeout before a response was received."""


class ResponseFormatError(CatalogAPIError):
    """Response body did not match the expected record structure."""
