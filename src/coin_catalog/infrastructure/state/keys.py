"""Key names for the sync state store.

Centralizes key conventions so the tracker, loader and CLI do not drift.
"""

from __future__ import annotations

from coin_catalog.shared.models.enums import Dataset


class SyncStateKeys:
    """Builds the persisted key for each piece of sync state."""

    PREFIX = "coin-syncer"
    INITIAL_SYNC_VERSION = f"{PREFIX}-initial-sync-version"

    @classmethod
    def last_sync_timestamp(cls, dataset: Dataset | str) -> str:
        """Key holding the last synced remote timestamp of a dataset."""
        name = Dataset(dataset).value
        return f"{cls.PREFIX}-{name}-last-sync-timestamp"

    @classmethod
    def all_timestamps(cls) -> list[str]:
        return [cls.last_sync_timestamp(dataset) for dataset in Dataset]
