"""Shared domain models."""

from coin_catalog.shared.models.catalog import (
    BlockchainRecord,
    CatalogStatus,
    Coin,
    SyncInfo,
    TokenRecord,
)
from coin_catalog.shared.models.enums import (
    NATIVE_TOKEN_TYPE,
    AddressType,
    BlockchainUid,
    Dataset,
    Derivation,
)

__all__ = [
    # Enums
    "AddressType",
    "BlockchainUid",
    "Dataset",
    "Derivation",
    "NATIVE_TOKEN_TYPE",
    # Models
    "BlockchainRecord",
    "CatalogStatus",
    "Coin",
    "SyncInfo",
    "TokenRecord",
]
