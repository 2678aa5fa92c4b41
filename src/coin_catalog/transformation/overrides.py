"""Override table: records injected into every dataset regardless of remote content.

Overrides shadow remote records with the same identity (``uid`` for coins
and blockchains, ``(coin_uid, blockchain_uid, type)`` for tokens), so each
override ends up in the merged dataset exactly once.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, TypeVar

import yaml

from coin_catalog.shared.models.catalog import BlockchainRecord, Coin, TokenRecord

R = TypeVar("R", Coin, BlockchainRecord, TokenRecord)

DEFAULT_OVERRIDES_RESOURCE = "overrides.yaml"


@dataclass(frozen=True)
class OverrideTable:
    """Fixed supplemental coins, blockchains and tokens."""

    coins: tuple[Coin, ...] = field(default_factory=tuple)
    blockchains: tuple[BlockchainRecord, ...] = field(default_factory=tuple)
    tokens: tuple[TokenRecord, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> OverrideTable:
        return cls()

    @classmethod
    def from_dict(cls, raw: dict[str, Any] | None) -> OverrideTable:
        raw = raw or {}
        return cls(
            coins=tuple(Coin.model_validate(c) for c in raw.get("coins") or []),
            blockchains=tuple(
                BlockchainRecord.model_validate(b) for b in raw.get("blockchains") or []
            ),
            tokens=tuple(TokenRecord.model_validate(t) for t in raw.get("tokens") or []),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> OverrideTable:
        """Load an override table from a YAML file with coins/blockchains/tokens lists."""
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(yaml.safe_load(f))

    @classmethod
    def default(cls) -> OverrideTable:
        """The override table shipped with the package."""
        text = (
            resources.files("coin_catalog.transformation")
            .joinpath(DEFAULT_OVERRIDES_RESOURCE)
            .read_text(encoding="utf-8")
        )
        return cls.from_dict(yaml.safe_load(text))

    def apply(
        self,
        coins: Iterable[Coin],
        blockchains: Iterable[BlockchainRecord],
        tokens: Iterable[TokenRecord],
    ) -> tuple[list[Coin], list[BlockchainRecord], list[TokenRecord]]:
        """Merge the overrides into fetched or bootstrapped records."""
        return (
            _shadow(coins, self.coins),
            _shadow(blockchains, self.blockchains),
            _shadow(tokens, self.tokens),
        )


def _shadow(records: Iterable[R], overrides: Sequence[R]) -> list[R]:
    overridden = {o.identity for o in overrides}
    merged = [r for r in records if r.identity not in overridden]
    merged.extend(overrides)
    return merged
