"""Storage layer for the coin catalog.

- Dataset store: coins, blockchains and tokens replaced together in one write
- Snapshots: bundled JSON dumps used to seed a fresh install
"""

from .ports import ICoinStorage, StorageError
from .repositories import InMemoryCoinStorage, JsonFileCoinStorage
from .snapshots import SnapshotError, SnapshotSource

__all__ = [
    "ICoinStorage",
    "StorageError",
    "InMemoryCoinStorage",
    "JsonFileCoinStorage",
    "SnapshotError",
    "SnapshotSource",
]
