"""aiohttp transport for the catalog client.

Only GET is needed: every catalog endpoint is a list or status read.
"""

from typing import Any

import aiohttp

from coin_catalog.ingestion.config.value_objects import HttpClientConfig
from coin_catalog.ingestion.ports.http import HttpResponse, IHttpClient


class AiohttpClient(IHttpClient):
    """IHttpClient backed by one lazily created aiohttp session."""

    def __init__(self, config: HttpClientConfig):
        self.config = config
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout())
        return self._session

    def _timeout(self, total: float | None = None) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(
            total=total or self.config.timeout, connect=self.config.connect_timeout
        )

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """GET ``url``; JSON responses are decoded, anything else is returned as text.

        Raises:
            aiohttp.ClientError / asyncio.TimeoutError: transport failures
            ValueError: JSON content type with an undecodable body
        """
        session = await self._get_session()
        async with session.get(
            url, params=params, headers=headers, timeout=self._timeout(timeout)
        ) as resp:
            if resp.content_type == "application/json":
                body = await resp.json()
            else:
                body = await resp.text()
            return HttpResponse(
                status_code=resp.status,
                body=body,
                headers=dict(resp.headers),
                url=str(resp.url),
            )

    async def close(self) -> None:
        if self._session:
            await self._session.close()
            self._session = None
