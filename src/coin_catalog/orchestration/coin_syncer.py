"""Sync orchestrator for the coin / blockchain / token dataset.

Flow of ``sync``:
1. Compare the remote timestamps with the stored ones.
2. If any dataset is stale, fetch all three concurrently (fail fast).
3. Merge overrides, expand native tokens, persist in one write.
4. After a confirmed persist, record the timestamps and notify subscribers.

Nothing is raised to the caller: each failure ends the attempt, is logged,
and is reported through the returned SyncOutcome. Overlapping calls are not
serialized here.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from enum import Enum

from coin_catalog.infrastructure.observability import get_orchestration_logger
from coin_catalog.ingestion.ports import ICatalogProvider
from coin_catalog.orchestration.notifications import ChangeCallback, ChangeNotifier
from coin_catalog.orchestration.sync_state import SyncStateTracker
from coin_catalog.shared.models.catalog import SyncInfo
from coin_catalog.shared.models.enums import Dataset
from coin_catalog.storage.ports import ICoinStorage, StorageError
from coin_catalog.storage.repositories.coin_storage import records_to_json
from coin_catalog.transformation.overrides import OverrideTable
from coin_catalog.transformation.token_transformer import TokenTransformer

log = get_orchestration_logger("coin-syncer")


class SyncOutcome(str, Enum):
    """Result of one sync attempt."""

    UP_TO_DATE = "up_to_date"
    SYNCED = "synced"
    FETCH_FAILED = "fetch_failed"
    PERSIST_FAILED = "persist_failed"

    @property
    def ok(self) -> bool:
        return self in (SyncOutcome.UP_TO_DATE, SyncOutcome.SYNCED)


class CoinSyncer:
    """Keeps local storage in step with the remote catalog."""

    def __init__(
        self,
        storage: ICoinStorage,
        provider: ICatalogProvider,
        tracker: SyncStateTracker,
        overrides: OverrideTable,
        transformer: TokenTransformer,
        notifier: ChangeNotifier | None = None,
    ):
        self.storage = storage
        self.provider = provider
        self.tracker = tracker
        self.overrides = overrides
        self.transformer = transformer
        self.notifier = notifier or ChangeNotifier()

    # ------------------------------------------------------------------
    # Sync
    # ------------------------------------------------------------------
    async def sync(
        self, coins_timestamp: int, blockchains_timestamp: int, tokens_timestamp: int
    ) -> SyncOutcome:
        stale = [
            dataset.value
            for dataset, timestamp in (
                (Dataset.COINS, coins_timestamp),
                (Dataset.BLOCKCHAINS, blockchains_timestamp),
                (Dataset.TOKENS, tokens_timestamp),
            )
            if self.tracker.is_stale(dataset, timestamp)
        ]
        if not stale:
            log.debug("sync_not_needed")
            return SyncOutcome.UP_TO_DATE

        log.info("sync_started", stale=stale)

        try:
            async with asyncio.TaskGroup() as tg:
                coins_task = tg.create_task(self.provider.fetch_coins())
                blockchains_task = tg.create_task(self.provider.fetch_blockchains())
                tokens_task = tg.create_task(self.provider.fetch_tokens())
        except ExceptionGroup as eg:
            log.error(
                "catalog_fetch_failed",
                errors=[repr(e) for e in eg.exceptions],
            )
            return SyncOutcome.FETCH_FAILED

        coins, blockchains, tokens = self.overrides.apply(
            coins_task.result(), blockchains_task.result(), tokens_task.result()
        )
        tokens = self.transformer.transform(tokens)

        try:
            self.storage.update(coins, blockchains, tokens)
        except StorageError as e:
            log.error("dataset_persist_failed", error=str(e))
            return SyncOutcome.PERSIST_FAILED

        self.tracker.record_synced(coins_timestamp, blockchains_timestamp, tokens_timestamp)
        log.info(
            "sync_completed",
            coins=len(coins),
            blockchains=len(blockchains),
            tokens=len(tokens),
        )
        await self.notifier.notify()
        return SyncOutcome.SYNCED

    async def sync_from_status(self) -> SyncOutcome:
        """Ask the catalog for its dataset timestamps, then sync against them."""
        try:
            status = await self.provider.fetch_status()
        except Exception as e:
            log.error("catalog_status_failed", error=repr(e))
            return SyncOutcome.FETCH_FAILED

        return await self.sync(status.coins, status.blockchains, status.tokens)

    # ------------------------------------------------------------------
    # Subscriptions / diagnostics
    # ------------------------------------------------------------------
    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Get called (without arguments) each time the dataset is replaced."""
        return self.notifier.subscribe(callback)

    def sync_info(self) -> SyncInfo:
        return self.tracker.sync_info()

    def coins_dump(self) -> str:
        return records_to_json(self.storage.all_coins())

    def blockchains_dump(self) -> str:
        return records_to_json(self.storage.all_blockchains())

    def tokens_dump(self) -> str:
        return records_to_json(self.storage.all_tokens())
