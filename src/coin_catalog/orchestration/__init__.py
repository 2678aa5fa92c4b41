"""
Orchestration layer: bootstrap, staleness tracking and the sync flow.
"""

from .bootstrap import CURRENT_BOOTSTRAP_VERSION, BootstrapLoader
from .coin_syncer import CoinSyncer, SyncOutcome
from .notifications import ChangeNotifier
from .sync_state import SyncStateTracker

__all__ = [
    "CURRENT_BOOTSTRAP_VERSION",
    "BootstrapLoader",
    "ChangeNotifier",
    "CoinSyncer",
    "SyncOutcome",
    "SyncStateTracker",
]
