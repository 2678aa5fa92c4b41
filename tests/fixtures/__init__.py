"""Test doubles shared across the suite."""

import asyncio

from coin_catalog.infrastructure.state import InMemoryStateStore, StateStoreError
from coin_catalog.shared.models.catalog import (
    BlockchainRecord,
    CatalogStatus,
    Coin,
    TokenRecord,
)
from coin_catalog.storage.ports import StorageError
from coin_catalog.storage.repositories import InMemoryCoinStorage


class FakeCatalogProvider:
    """In-process ICatalogProvider that records every call."""

    def __init__(
        self,
        coins: list[Coin] | None = None,
        blockchains: list[BlockchainRecord] | None = None,
        tokens: list[TokenRecord] | None = None,
        status: CatalogStatus | None = None,
        fail: dict[str, Exception] | None = None,
    ):
        self.coins = coins or []
        self.blockchains = blockchains or []
        self.tokens = tokens or []
        self.status = status
        self.fail = fail or {}
        self.calls: list[str] = []

    async def _respond(self, name: str, value):
        self.calls.append(name)
        await asyncio.sleep(0)
        if name in self.fail:
            raise self.fail[name]
        return value

    async def fetch_coins(self) -> list[Coin]:
        return await self._respond("coins", list(self.coins))

    async def fetch_blockchains(self) -> list[BlockchainRecord]:
        return await self._respond("blockchains", list(self.blockchains))

    async def fetch_tokens(self) -> list[TokenRecord]:
        return await self._respond("tokens", list(self.tokens))

    async def fetch_status(self) -> CatalogStatus:
        return await self._respond("status", self.status)


class FailingCoinStorage(InMemoryCoinStorage):
    """Dataset store whose writes always fail."""

    def update(self, coins, blockchains, tokens) -> None:
        self.update_count += 1
        raise StorageError("disk full")


class FlakyStateStore(InMemoryStateStore):
    """State store that fails for selected keys and operations."""

    def __init__(self, initial=None, fail_get=(), fail_set=(), fail_delete=()):
        super().__init__(initial)
        self.fail_get = set(fail_get)
        self.fail_set = set(fail_set)
        self.fail_delete = set(fail_delete)

    def get(self, key):
        if key in self.fail_get:
            raise StateStoreError("read failed", key=key)
        return super().get(key)

    def set(self, key, value):
        if key in self.fail_set:
            raise StateStoreError("write failed", key=key)
        super().set(key, value)

    def delete(self, key):
        if key in self.fail_delete:
            raise StateStoreError("delete failed", key=key)
        super().delete(key)


class StalledCatalogProvider(FakeCatalogProvider):
    """Provider whose coins fetch never completes unless cancelled."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.coins_cancelled = False

    async def fetch_coins(self) -> list[Coin]:
        self.calls.append("coins")
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.coins_cancelled = True
            raise
        return list(self.coins)
