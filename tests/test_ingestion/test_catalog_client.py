"""
Tests for CatalogClient: headers, decoding, retries and error mapping.

The HTTP transport is replaced by an AsyncMock returning HttpResponse objects.
"""

import asyncio
import json
from unittest.mock import AsyncMock, patch

import aiohttp
import pytest

from coin_catalog.ingestion.adapters.catalog_plugin import (
    AuthenticationError,
    CatalogClient,
    CatalogRetryHandler,
    NotFoundError,
    RateLimitError,
    ResponseFormatError,
    ServerError,
    TransportError,
)
from coin_catalog.ingestion.config.value_objects import CatalogApiConfig, RetryConfig
from coin_catalog.ingestion.ports.http import HttpResponse

SLEEP = "coin_catalog.ingestion.adapters.catalog_plugin.client.asyncio.sleep"


def ok(body):
    return HttpResponse(status_code=200, body=body, headers={}, url="")


def status(code, body=None, headers=None):
    return HttpResponse(status_code=code, body=body or {}, headers=headers or {}, url="")


@pytest.fixture
def config():
    return CatalogApiConfig(
        base_url="https://catalog.example.com/",
        app_version="0.3.0",
        app_platform="python",
        app_id="test-app",
        api_key="secret",
        retry_config=RetryConfig(max_attempts=3, base_delay=1.0),
    )


@pytest.fixture
def http_client():
    client = AsyncMock()
    client.get = AsyncMock()
    client.close = AsyncMock()
    return client


@pytest.fixture
def client(config, http_client):
    return CatalogClient(config, http_client, CatalogRetryHandler(config.retry_config))


# ============================================================================
# REQUESTS
# ============================================================================


class TestRequests:
    def test_headers(self, client):
        assert client.headers() == {
            "app_platform": "python",
            "app_version": "0.3.0",
            "app_id": "test-app",
            "apikey": "secret",
        }

    def test_optional_headers_omitted(self, http_client):
        config = CatalogApiConfig(base_url="https://catalog.example.com", app_version="1.0")
        client = CatalogClient(config, http_client, CatalogRetryHandler(config.retry_config))

        assert client.headers() == {"app_platform": "python", "app_version": "1.0"}

    @pytest.mark.asyncio
    async def test_fetch_coins(self, client, http_client):
        http_client.get.return_value = ok(
            [{"uid": "bitcoin", "name": "Bitcoin", "code": "BTC", "market_cap_rank": 1, "extra": "x"}]
        )

        coins = await client.fetch_coins()

        assert [c.uid for c in coins] == ["bitcoin"]
        args, kwargs = http_client.get.call_args
        assert args[0] == "https://catalog.example.com/v1/coins/list"
        assert kwargs["headers"]["apikey"] == "secret"

    @pytest.mark.asyncio
    async def test_fetch_blockchains_and_tokens(self, client, http_client):
        http_client.get.side_effect = [
            ok([{"uid": "solana", "name": "Solana"}]),
            ok([{"coin_uid": "solana", "blockchain_uid": "solana", "type": "native", "decimals": 9}]),
        ]

        blockchains = await client.fetch_blockchains()
        tokens = await client.fetch_tokens()

        assert blockchains[0].uid == "solana"
        assert tokens[0].decimals == 9
        urls = [c.args[0] for c in http_client.get.call_args_list]
        assert urls == [
            "https://catalog.example.com/v1/blockchains/list",
            "https://catalog.example.com/v1/tokens/list",
        ]

    @pytest.mark.asyncio
    async def test_fetch_status(self, client, http_client):
        http_client.get.return_value = ok(
            {"coins": 1700000000, "blockchains": 1700000001, "tokens": 1700000002}
        )

        result = await client.fetch_status()

        assert (result.coins, result.blockchains, result.tokens) == (
            1700000000,
            1700000001,
            1700000002,
        )
        assert http_client.get.call_args.args[0].endswith("/v1/status/updates")

    @pytest.mark.asyncio
    async def test_close_closes_transport(self, client, http_client):
        await client.close()

        http_client.close.assert_awaited_once()


# ============================================================================
# RETRIES
# ============================================================================


class TestRetries:
    @pytest.mark.asyncio
    async def test_retries_server_error_then_succeeds(self, client, http_client):
        http_client.get.side_effect = [status(503), status(502), ok([])]

        with patch(SLEEP, new_callable=AsyncMock) as sleep:
            result = await client.fetch_coins()

        assert result == []
        assert http_client.get.await_count == 3
        assert [c.args[0] for c in sleep.await_args_list] == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_retry_after_header_respected(self, client, http_client):
        http_client.get.side_effect = [status(429, headers={"Retry-After": "7"}), ok([])]

        with patch(SLEEP, new_callable=AsyncMock) as sleep:
            await client.fetch_tokens()

        sleep.assert_awaited_once_with(7.0)

    @pytest.mark.asyncio
    async def test_server_error_after_last_attempt(self, client, http_client):
        http_client.get.return_value = status(500, {"error": "down"})

        with patch(SLEEP, new_callable=AsyncMock):
            with pytest.raises(ServerError) as exc_info:
                await client.fetch_coins()

        assert exc_info.value.status_code == 500
        assert exc_info.value.endpoint == "v1/coins/list"
        assert http_client.get.await_count == 3

    @pytest.mark.asyncio
    async def test_rate_limit_after_last_attempt(self, client, http_client):
        http_client.get.return_value = status(429, headers={"Retry-After": "30"})

        with patch(SLEEP, new_callable=AsyncMock):
            with pytest.raises(RateLimitError) as exc_info:
                await client.fetch_coins()

        assert exc_info.value.retry_after == 30

    @pytest.mark.asyncio
    async def test_transport_errors_retried(self, client, http_client):
        http_client.get.side_effect = [aiohttp.ClientConnectionError("reset"), ok([])]

        with patch(SLEEP, new_callable=AsyncMock) as sleep:
            assert await client.fetch_blockchains() == []

        sleep.assert_awaited_once_with(1.0)

    @pytest.mark.asyncio
    async def test_transport_error_after_last_attempt(self, client, http_client):
        http_client.get.side_effect = asyncio.TimeoutError()

        with patch(SLEEP, new_callable=AsyncMock):
            with pytest.raises(TransportError) as exc_info:
                await client.fetch_tokens()

        assert exc_info.value.endpoint == "v1/tokens/list"
        assert http_client.get.await_count == 3


# ============================================================================
# ERROR MAPPING
# ============================================================================


class TestErrorMapping:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", [401, 403])
    async def test_auth_errors_not_retried(self, client, http_client, code):
        http_client.get.return_value = status(code, {"message": "bad key"})

        with pytest.raises(AuthenticationError, match="bad key"):
            await client.fetch_coins()

        assert http_client.get.await_count == 1

    @pytest.mark.asyncio
    async def test_not_found(self, client, http_client):
        http_client.get.return_value = status(404, "no such route")

        with pytest.raises(NotFoundError):
            await client.fetch_blockchains()

    @pytest.mark.asyncio
    async def test_unexpected_shape(self, client, http_client):
        http_client.get.return_value = ok({"coins": []})

        with pytest.raises(ResponseFormatError) as exc_info:
            await client.fetch_coins()

        assert exc_info.value.endpoint == "v1/coins/list"

    @pytest.mark.asyncio
    async def test_invalid_token_record(self, client, http_client):
        http_client.get.return_value = ok(
            [{"coin_uid": "x", "blockchain_uid": "y", "type": "native", "decimals": -2}]
        )

        with pytest.raises(ResponseFormatError):
            await client.fetch_tokens()

    @pytest.mark.asyncio
    async def test_undecodable_json_not_retried(self, client, http_client):
        http_client.get.side_effect = json.JSONDecodeError("Expecting value", "[{", 2)

        with pytest.raises(ResponseFormatError) as exc_info:
            await client.fetch_blockchains()

        assert exc_info.value.endpoint == "v1/blockchains/list"
        assert http_client.get.await_count == 1
