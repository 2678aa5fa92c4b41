"""Tests for BootstrapLoader."""

import json

import pytest

from coin_catalog.infrastructure.state import InMemoryStateStore
from coin_catalog.orchestration.bootstrap import CURRENT_BOOTSTRAP_VERSION, BootstrapLoader
from coin_catalog.orchestration.sync_state import SyncStateTracker
from coin_catalog.storage.repositories import InMemoryCoinStorage
from coin_catalog.storage.snapshots import SnapshotSource
from tests.fixtures import FailingCoinStorage, FlakyStateStore

VERSION_KEY = "coin-syncer-initial-sync-version"
TIMESTAMPS = {
    "coin-syncer-coins-last-sync-timestamp": "100",
    "coin-syncer-blockchains-last-sync-timestamp": "100",
    "coin-syncer-tokens-last-sync-timestamp": "100",
}


def make_loader(storage, store, overrides, transformer, snapshots=None):
    return BootstrapLoader(
        storage=storage,
        tracker=SyncStateTracker(store),
        snapshots=snapshots or SnapshotSource(),
        overrides=overrides,
        transformer=transformer,
    )


@pytest.fixture
def snapshot_dir(tmp_path):
    (tmp_path / "coins.json").write_text(
        json.dumps([{"uid": "litecoin", "name": "Litecoin", "code": "LTC"}])
    )
    (tmp_path / "blockchains.json").write_text(
        json.dumps([{"uid": "litecoin", "name": "Litecoin"}])
    )
    (tmp_path / "tokens.json").write_text(
        json.dumps(
            [{"coin_uid": "litecoin", "blockchain_uid": "litecoin", "type": "native", "decimals": 8}]
        )
    )
    return tmp_path


# ============================================================================
# VERSION GATE
# ============================================================================


class TestVersionGate:
    def test_current_version(self):
        assert CURRENT_BOOTSTRAP_VERSION == 3

    def test_upgrade_from_older_version(self, overrides, transformer):
        store = InMemoryStateStore({VERSION_KEY: "2", **TIMESTAMPS})
        storage = InMemoryCoinStorage()

        applied = make_loader(storage, store, overrides, transformer).run()

        assert applied is True
        assert store.snapshot() == {VERSION_KEY: "3"}

        coin_uids = {c.uid for c in storage.all_coins()}
        assert {"bitcoin", "ethereum", "xdce-crowd-sale"} <= coin_uids
        assert len(storage.all_coins()) == 9
        assert len(storage.all_blockchains()) == 7

        tokens = storage.all_tokens()
        assert len(tokens) == 18
        btc_types = [t.type for t in tokens if t.blockchain_uid == "bitcoin"]
        assert btc_types == ["derived:bip44", "derived:bip49", "derived:bip84", "derived:bip86"]
        assert not any(
            t.type == "native" and t.blockchain_uid in ("bitcoin", "litecoin", "bitcoin-cash")
            for t in tokens
        )

    def test_fresh_install(self, overrides, transformer):
        store = InMemoryStateStore()
        storage = InMemoryCoinStorage()

        assert make_loader(storage, store, overrides, transformer).run() is True
        assert store.get(VERSION_KEY) == "3"
        assert storage.update_count == 1

    def test_same_version_is_skipped(self, overrides, transformer):
        store = InMemoryStateStore({VERSION_KEY: "3", **TIMESTAMPS})
        storage = InMemoryCoinStorage()

        assert make_loader(storage, store, overrides, transformer).run() is False
        assert storage.update_count == 0
        assert store.snapshot() == {VERSION_KEY: "3", **TIMESTAMPS}

    def test_second_run_is_noop(self, overrides, transformer):
        store = InMemoryStateStore()
        storage = InMemoryCoinStorage()
        loader = make_loader(storage, store, overrides, transformer)

        assert loader.run() is True
        assert loader.run() is False
        assert storage.update_count == 1

    def test_unreadable_version_skips_load(self, overrides, transformer):
        storage = InMemoryCoinStorage()
        store = FlakyStateStore(fail_get=[VERSION_KEY])

        assert make_loader(storage, store, overrides, transformer).run() is False
        assert storage.update_count == 0


# ============================================================================
# FAILURES
# ============================================================================


class TestFailures:
    def test_missing_snapshot_leaves_state_untouched(self, tmp_path, overrides, transformer):
        store = InMemoryStateStore({VERSION_KEY: "2", **TIMESTAMPS})
        storage = InMemoryCoinStorage()
        loader = make_loader(
            storage, store, overrides, transformer, snapshots=SnapshotSource(tmp_path)
        )

        assert loader.run() is False
        assert storage.update_count == 0
        assert store.snapshot() == {VERSION_KEY: "2", **TIMESTAMPS}

    def test_malformed_snapshot(self, snapshot_dir, overrides, transformer):
        (snapshot_dir / "tokens.json").write_text("[{")
        store = InMemoryStateStore()
        storage = InMemoryCoinStorage()
        loader = make_loader(
            storage, store, overrides, transformer, snapshots=SnapshotSource(snapshot_dir)
        )

        assert loader.run() is False
        assert store.get(VERSION_KEY) is None

    def test_persist_failure_keeps_version(self, overrides, transformer):
        store = InMemoryStateStore({VERSION_KEY: "2", **TIMESTAMPS})
        storage = FailingCoinStorage()

        assert make_loader(storage, store, overrides, transformer).run() is False
        assert storage.update_count == 1
        assert store.snapshot() == {VERSION_KEY: "2", **TIMESTAMPS}

    def test_version_write_failure_keeps_timestamps(self, overrides, transformer):
        store = FlakyStateStore({VERSION_KEY: "2", **TIMESTAMPS}, fail_set=[VERSION_KEY])
        storage = InMemoryCoinStorage()

        assert make_loader(storage, store, overrides, transformer).run() is False
        assert store.snapshot() == {VERSION_KEY: "2", **TIMESTAMPS}


# ============================================================================
# SNAPSHOT CONTENT
# ============================================================================


class TestSnapshotContent:
    def test_custom_snapshot_directory(self, snapshot_dir, overrides, transformer):
        storage = InMemoryCoinStorage()
        loader = make_loader(
            storage,
            InMemoryStateStore(),
            overrides,
            transformer,
            snapshots=SnapshotSource(snapshot_dir),
        )

        assert loader.run() is True
        assert [c.uid for c in storage.all_coins()] == ["litecoin", "xdce-crowd-sale"]
        assert [(t.coin_uid, t.type) for t in storage.all_tokens()] == [
            ("xdce-crowd-sale", "native"),
            ("litecoin", "derived:bip44"),
            ("litecoin", "derived:bip49"),
            ("litecoin", "derived:bip84"),
            ("litecoin", "derived:bip86"),
        ]
