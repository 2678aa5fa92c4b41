import asyncio
from typing import Any

import aiohttp
from pydantic import TypeAdapter, ValidationError

from coin_catalog.infrastructure.observability import get_ingestion_logger
from coin_catalog.ingestion.config.value_objects import CatalogApiConfig
from coin_catalog.ingestion.ports import ICatalogProvider, IHttpClient, IRetryHandler
from coin_catalog.shared.models.catalog import (
    BlockchainRecord,
    CatalogStatus,
    Coin,
    TokenRecord,
)

from .error_mapper import CatalogErrorMapper
from .exceptions import ResponseFormatError, TransportError

log = get_ingestion_logger("catalog-client")

_COINS = TypeAdapter(list[Coin])
_BLOCKCHAINS = TypeAdapter(list[BlockchainRecord])
_TOKENS = TypeAdapter(list[TokenRecord])
_STATUS = TypeAdapter(CatalogStatus)


class CatalogClient(ICatalogProvider):
    """Async client for the remote coin catalog API.

    Single Responsibility: Coordinate HTTP requests with proper headers,
    status handling and retry logic, and decode the record lists.

    Dependencies injected (not instantiated):
    - http_client: Executes HTTP requests
    - retry_handler: Decides retry eligibility and delays
    """

    COINS_ENDPOINT = "v1/coins/list"
    BLOCKCHAINS_ENDPOINT = "v1/blockchains/list"
    TOKENS_ENDPOINT = "v1/tokens/list"
    STATUS_ENDPOINT = "v1/status/updates"

    def __init__(
        self,
        config: CatalogApiConfig,
        http_client: IHttpClient,
        retry_handler: IRetryHandler,
    ):
        self.config = config
        self.http_client = http_client
        self.retry_handler = retry_handler
        self.base_url = config.base_url

    async def fetch_coins(self) -> list[Coin]:
        return self._decode(self.COINS_ENDPOINT, _COINS, await self._get(self.COINS_ENDPOINT))

    async def fetch_blockchains(self) -> list[BlockchainRecord]:
        body = await self._get(self.BLOCKCHAINS_ENDPOINT)
        return self._decode(self.BLOCKCHAINS_ENDPOINT, _BLOCKCHAINS, body)

    async def fetch_tokens(self) -> list[TokenRecord]:
        return self._decode(self.TOKENS_ENDPOINT, _TOKENS, await self._get(self.TOKENS_ENDPOINT))

    async def fetch_status(self) -> CatalogStatus:
        return self._decode(self.STATUS_ENDPOINT, _STATUS, await self._get(self.STATUS_ENDPOINT))

    async def close(self) -> None:
        await self.http_client.close()

    def headers(self) -> dict[str, str]:
        headers = {
            "app_platform": self.config.app_platform,
            "app_version": self.config.app_version,
        }
        if self.config.app_id:
            headers["app_id"] = self.config.app_id
        if self.config.api_key:
            headers["apikey"] = self.config.api_key
        return headers

    async def _get(self, endpoint: str) -> Any:
        """GET an endpoint, retrying throttling, server and transport errors.

        Raises:
            TransportError: connection failure/timeout after the last attempt
            ResponseFormatError: JSON response whose body does not decode
            CatalogAPIError subclass: non-200 response after the last attempt
        """
        url = f"{self.base_url}/{endpoint}"
        max_attempts = self.config.retry_config.max_attempts

        for attempt_number in range(1, max_attempts + 1):
            try:
                response = await self.http_client.get(
                    url,
                    headers=self.headers(),
                    timeout=self.config.http_config.timeout,
                )
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                if attempt_number < max_attempts:
                    sleep_time = self.retry_handler.get_retry_delay(attempt_number, 0)
                    log.warning(
                        "catalog_request_retry",
                        endpoint=endpoint,
                        attempt=attempt_number,
                        max_attempts=max_attempts,
                        sleep_s=sleep_time,
                        error=repr(e),
                    )
                    await asyncio.sleep(sleep_time)
                    continue
                raise TransportError(
                    f"Failed to fetch {endpoint} after {max_attempts} attempts: {e!r}",
                    endpoint=endpoint,
                ) from e
            except ValueError as e:
                # JSON content type with an undecodable body
                log.error("catalog_response_undecodable", endpoint=endpoint, error=str(e))
                raise ResponseFormatError(
                    f"Undecodable response body for {endpoint}: {e}",
                    endpoint=endpoint,
                ) from e

            if response.status_code == 200:
                log.debug("catalog_request_ok", endpoint=endpoint)
                return response.body

            if (
                self.retry_handler.should_retry(response.status_code)
                and attempt_number < max_attempts
            ):
                sleep_time = self.retry_handler.get_retry_delay(
                    attempt_number, response.status_code, response.headers
                )
                log.warning(
                    "catalog_request_retry",
                    endpoint=endpoint,
                    status_code=response.status_code,
                    attempt=attempt_number,
                    max_attempts=max_attempts,
                    sleep_s=sleep_time,
                )
                await asyncio.sleep(sleep_time)
                continue

            error = CatalogErrorMapper.map_error(
                response.status_code,
                response.body,
                endpoint,
                retry_after=response.headers.get("Retry-After"),
            )
            log.error(
                "catalog_request_failed",
                endpoint=endpoint,
                status_code=response.status_code,
                attempt=attempt_number,
            )
            raise error

        raise TransportError(f"Failed to fetch {endpoint}: no attempts made", endpoint=endpoint)

    @staticmethod
    def _decode(endpoint: str, adapter: TypeAdapter[Any], body: Any) -> Any:
        try:
            return adapter.validate_python(body)
        except ValidationError as e:
            raise ResponseFormatError(
                f"Unexpected response structure for {endpoint}: {e}",
                status_code=200,
                endpoint=endpoint,
            ) from e
