"""Per-dataset staleness markers and the bootstrap version marker.

A dataset is stale when its stored timestamp is absent or differs from the
remote one. This is plain equality, not "newer than": a remote timestamp
that goes backwards still counts as a change.
"""

from __future__ import annotations

from coin_catalog.infrastructure.observability import get_orchestration_logger
from coin_catalog.infrastructure.state import IStateStore, StateStoreError, SyncStateKeys
from coin_catalog.shared.models.catalog import SyncInfo
from coin_catalog.shared.models.enums import Dataset

log = get_orchestration_logger("sync-state-tracker")


class SyncStateTracker:
    """Reads and writes sync state through an IStateStore.

    Timestamp writes and deletes are best effort: each key is handled on its
    own and failures are logged, never raised.
    """

    def __init__(self, store: IStateStore):
        self.store = store

    # ------------------------------------------------------------------
    # Dataset timestamps
    # ------------------------------------------------------------------
    def is_stale(self, dataset: Dataset | str, remote_timestamp: int) -> bool:
        stored = self._stored_timestamp(Dataset(dataset))
        return stored is None or stored != remote_timestamp

    def record_synced(
        self, coins_timestamp: int, blockchains_timestamp: int, tokens_timestamp: int
    ) -> None:
        for dataset, timestamp in (
            (Dataset.COINS, coins_timestamp),
            (Dataset.BLOCKCHAINS, blockchains_timestamp),
            (Dataset.TOKENS, tokens_timestamp),
        ):
            key = SyncStateKeys.last_sync_timestamp(dataset)
            try:
                self.store.set(key, str(timestamp))
            except StateStoreError as e:
                log.error("timestamp_write_failed", key=key, error=str(e))

    def clear(self) -> None:
        """Forget every dataset timestamp so the next sync treats all as changed."""
        for key in SyncStateKeys.all_timestamps():
            try:
                self.store.delete(key)
            except StateStoreError as e:
                log.error("timestamp_delete_failed", key=key, error=str(e))

    def sync_info(self) -> SyncInfo:
        return SyncInfo(
            coins_timestamp=self._raw(SyncStateKeys.last_sync_timestamp(Dataset.COINS)),
            blockchains_timestamp=self._raw(
                SyncStateKeys.last_sync_timestamp(Dataset.BLOCKCHAINS)
            ),
            tokens_timestamp=self._raw(SyncStateKeys.last_sync_timestamp(Dataset.TOKENS)),
        )

    # ------------------------------------------------------------------
    # Bootstrap version
    # ------------------------------------------------------------------
    def bootstrap_version(self) -> int | None:
        """Stored bootstrap version; raises StateStoreError if it cannot be read."""
        return _parse_int(self.store.get(SyncStateKeys.INITIAL_SYNC_VERSION))

    def record_bootstrap_version(self, version: int) -> None:
        """Persist the bootstrap version; raises StateStoreError on failure."""
        self.store.set(SyncStateKeys.INITIAL_SYNC_VERSION, str(version))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _stored_timestamp(self, dataset: Dataset) -> int | None:
        return _parse_int(self._raw(SyncStateKeys.last_sync_timestamp(dataset)))

    def _raw(self, key: str) -> str | None:
        try:
            return self.store.get(key)
        except StateStoreError as e:
            log.warning("state_read_failed", key=key, error=str(e))
            return None


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None
