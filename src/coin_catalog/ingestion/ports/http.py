"""HTTP communication abstractions.

Separates HTTP transport from catalog API logic (status handling, retries,
error mapping). Allows easy mocking and swapping of HTTP implementations in
tests.
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass
class HttpResponse:
    """HTTP response data container."""

    status_code: int
    body: Any  # JSON-decoded body (list or dict), or raw text on non-JSON responses
    headers: dict[str, str]
    url: str


class IHttpClient(Protocol):
    """Abstraction for HTTP client.

    Single Responsibility: Execute HTTP requests and return responses.
    Does NOT handle:
    - Status code interpretation
    - Error mapping
    - Retry logic
    - Header assembly
    """

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """Execute GET request.

        Args:
            url: Full URL to request
            params: Query parameters
            headers: HTTP headers
            timeout: Request timeout in seconds

        Raises:
            aiohttp.ClientError / asyncio.TimeoutError: On network or connection errors
            ValueError: JSON content type with an undecodable body
        """
        ...

    async def close(self) -> None:
        """Release the underlying connection pool."""
        ...
