"""
Catalog Error Mapper

Turns a non-200 catalog response into the matching CatalogAPIError subclass.
"""

from typing import Any

from .exceptions import (
    AuthenticationError,
    BadRequestError,
    CatalogAPIError,
    NotFoundError,
    RateLimitError,
    ServerError,
)

_STATUS_ERRORS: dict[int, tuple[type[CatalogAPIError], str]] = {
    400: (BadRequestError, "Bad parameters for"),
    401: (AuthenticationError, "Not authorized for"),
    403: (AuthenticationError, "Not authorized for"),
    404: (NotFoundError, "Resource not found for"),
}


class CatalogErrorMapper:
    """Maps HTTP status codes to appropriate exception types."""

    @staticmethod
    def extract_error_message(response_body: Any) -> str:
        """The catalog reports errors as ``{"error": ...}`` or ``{"message": ...}``."""
        if isinstance(response_body, dict):
            return str(
                response_body.get("error")
                or response_body.get("message")
                or response_body
            )
        return str(response_body)

    @staticmethod
    def map_error(
        status_code: int,
        response_body: Any,
        endpoint: str,
        retry_after: str | None = None,
    ) -> CatalogAPIError:
        """
        Build the exception for a failed catalog request.

        Args:
            status_code: HTTP status code
            response_body: Decoded JSON body or raw text
            endpoint: Catalog endpoint, e.g. ``v1/tokens/list``
            retry_after: Retry-After header value if present
        """
        detail = CatalogErrorMapper.extract_error_message(response_body)
        context = {"status_code": status_code, "endpoint": endpoint}

        if status_code in _STATUS_ERRORS:
            error_cls, prefix = _STATUS_ERRORS[status_code]
            return error_cls(f"{prefix} {endpoint}: {detail}", **context)

        if status_code == 429:
            return RateLimitError(
                f"Rate limit exceeded for {endpoint}: {detail}",
                retry_after=_parse_retry_after(retry_after),
                **context,
            )

        if status_code >= 500:
            return ServerError(
                f"Catalog server error {status_code} for {endpoint}: {detail}", **context
            )

        return CatalogAPIError(
            f"Unexpected status {status_code} for {endpoint}: {detail}", **context
        )


def _parse_retry_after(value: str | None) -> int | None:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None
