"""
Dataset store interface.
Provides abstraction over persistence for dependency injection.
"""

from collections.abc import Sequence
from typing import Protocol

from coin_catalog.shared.models.catalog import BlockchainRecord, Coin, TokenRecord


class StorageError(Exception):
    """Raised when the dataset cannot be read or written."""


class ICoinStorage(Protocol):
    """
    Protocol for the local coin/blockchain/token dataset.

    ``update`` is a single atomic replacement of all three record sets:
    after it returns either every set is the new one or (on error) none is.
    """

    def update(
        self,
        coins: Sequence[Coin],
        blockchains: Sequence[BlockchainRecord],
        tokens: Sequence[TokenRecord],
    ) -> None:
        """Replace the whole dataset. Raises StorageError on failure."""
        ...

    def all_coins(self) -> list[Coin]:
        ...

    def all_blockchains(self) -> list[BlockchainRecord]:
        ...

    def all_tokens(self) -> list[TokenRecord]:
        ...
