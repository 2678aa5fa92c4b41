"""Remote catalog provider interface consumed by the sync orchestrator."""

from typing import Protocol

from coin_catalog.shared.models.catalog import (
    BlockchainRecord,
    CatalogStatus,
    Coin,
    TokenRecord,
)


class ICatalogProvider(Protocol):
    """Full-list reads of the remote catalog.

    Every method raises on transport or parse failure; the caller treats any
    failure as fatal for the current sync attempt.
    """

    async def fetch_coins(self) -> list[Coin]:
        ...

    async def fetch_blockchains(self) -> list[BlockchainRecord]:
        ...

    async def fetch_tokens(self) -> list[TokenRecord]:
        ...

    async def fetch_status(self) -> CatalogStatus:
        """Remote dataset timestamps, used to decide whether to sync."""
        ...
