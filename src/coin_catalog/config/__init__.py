from .state import (
    CatalogConfig,
    ConfigLoader,
    ConfigState,
    LoggingConfig,
    StorageConfig,
    SyncConfig,
    get_config,
)

__all__ = [
    "CatalogConfig",
    "ConfigLoader",
    "ConfigState",
    "LoggingConfig",
    "StorageConfig",
    "SyncConfig",
    "get_config",
]
