"""One-time seed of the dataset from the bundled snapshot.

Gated by a persisted version marker: when the stored version equals the
current one the load is skipped. Any failure leaves the marker untouched so
the next startup retries.
"""

from __future__ import annotations

from coin_catalog.infrastructure.observability import get_orchestration_logger
from coin_catalog.infrastructure.state import StateStoreError
from coin_catalog.orchestration.sync_state import SyncStateTracker
from coin_catalog.storage.ports import ICoinStorage, StorageError
from coin_catalog.storage.snapshots import SnapshotError, SnapshotSource
from coin_catalog.transformation.overrides import OverrideTable
from coin_catalog.transformation.token_transformer import TokenTransformer

CURRENT_BOOTSTRAP_VERSION = 3

log = get_orchestration_logger("bootstrap-loader")


class BootstrapLoader:
    """Seeds storage from a SnapshotSource once per bootstrap version."""

    def __init__(
        self,
        storage: ICoinStorage,
        tracker: SyncStateTracker,
        snapshots: SnapshotSource,
        overrides: OverrideTable,
        transformer: TokenTransformer,
        version: int = CURRENT_BOOTSTRAP_VERSION,
    ):
        self.storage = storage
        self.tracker = tracker
        self.snapshots = snapshots
        self.overrides = overrides
        self.transformer = transformer
        self.version = version

    def run(self) -> bool:
        """Apply the snapshot if needed. Returns True when a load was applied."""
        try:
            stored_version = self.tracker.bootstrap_version()
        except StateStoreError as e:
            log.error("bootstrap_version_read_failed", error=str(e))
            return False

        if stored_version == self.version:
            log.debug("bootstrap_skipped", version=self.version)
            return False

        try:
            coins = self.snapshots.load_coins()
            blockchains = self.snapshots.load_blockchains()
            tokens = self.snapshots.load_tokens()
        except SnapshotError as e:
            log.error("bootstrap_snapshot_failed", resource=e.resource, error=str(e))
            return False

        coins, blockchains, tokens = self.overrides.apply(coins, blockchains, tokens)
        tokens = self.transformer.transform(tokens)

        try:
            self.storage.update(coins, blockchains, tokens)
        except StorageError as e:
            log.error("bootstrap_persist_failed", error=str(e))
            return False

        try:
            self.tracker.record_bootstrap_version(self.version)
        except StateStoreError as e:
            log.error("bootstrap_version_write_failed", error=str(e))
            return False

        self.tracker.clear()

        log.info(
            "bootstrap_applied",
            previous_version=stored_version,
            version=self.version,
            coins=len(coins),
            blockchains=len(blockchains),
            tokens=len(tokens),
        )
        return True
