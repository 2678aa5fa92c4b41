from .keys import SyncStateKeys
from .store import FileStateStore, InMemoryStateStore, IStateStore, StateStoreError

__all__ = [
    "SyncStateKeys",
    "FileStateStore",
    "InMemoryStateStore",
    "IStateStore",
    "StateStoreError",
]
