"""Fixtures for the coin catalog test suite."""

import pytest

from coin_catalog.infrastructure.state import InMemoryStateStore
from coin_catalog.orchestration.notifications import ChangeNotifier
from coin_catalog.orchestration.sync_state import SyncStateTracker
from coin_catalog.shared.models.catalog import BlockchainRecord, Coin, TokenRecord
from coin_catalog.storage.repositories import InMemoryCoinStorage
from coin_catalog.transformation.overrides import OverrideTable
from coin_catalog.transformation.token_transformer import TokenTransformer
from tests.fixtures import FakeCatalogProvider

# ============================================================================
# RECORDS
# ============================================================================


@pytest.fixture
def remote_coins():
    return [
        Coin(uid="bitcoin", name="Bitcoin", code="BTC", market_cap_rank=1),
        Coin(uid="ethereum", name="Ethereum", code="ETH", market_cap_rank=2),
    ]


@pytest.fixture
def remote_blockchains():
    return [
        BlockchainRecord(uid="bitcoin", name="Bitcoin"),
        BlockchainRecord(uid="ethereum", name="Ethereum"),
    ]


@pytest.fixture
def remote_tokens():
    return [
        TokenRecord(coin_uid="bitcoin", blockchain_uid="bitcoin", type="native", decimals=8),
        TokenRecord(coin_uid="ethereum", blockchain_uid="ethereum", type="native", decimals=18),
    ]


@pytest.fixture
def overrides():
    return OverrideTable(
        coins=(Coin(uid="xdce-crowd-sale", name="XDC Network", code="XDC"),),
        blockchains=(BlockchainRecord(uid="xdc-network", name="xdc-network"),),
        tokens=(
            TokenRecord(
                coin_uid="xdce-crowd-sale",
                blockchain_uid="xdc-network",
                type="native",
                decimals=18,
            ),
        ),
    )


# ============================================================================
# COLLABORATORS
# ============================================================================


@pytest.fixture
def state_store():
    return InMemoryStateStore()


@pytest.fixture
def tracker(state_store):
    return SyncStateTracker(state_store)


@pytest.fixture
def storage():
    return InMemoryCoinStorage()


@pytest.fixture
def transformer():
    return TokenTransformer()


@pytest.fixture
def notifier():
    return ChangeNotifier()


@pytest.fixture
def provider(remote_coins, remote_blockchains, remote_tokens):
    return FakeCatalogProvider(
        coins=remote_coins, blockchains=remote_blockchains, tokens=remote_tokens
    )
