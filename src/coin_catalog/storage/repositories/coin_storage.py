"""Dataset store implementations.

InMemoryCoinStorage keeps the records in process; JsonFileCoinStorage keeps
them in a single JSON document that is replaced atomically on every update:

    {
        "coins": [{"uid": ..., "name": ..., "code": ...}, ...],
        "blockchains": [{"uid": ..., "name": ...}, ...],
        "tokens": [{"coin_uid": ..., "blockchain_uid": ..., "type": ..., "decimals": ...}, ...]
    }
"""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from coin_catalog.infrastructure.observability import get_storage_logger
from coin_catalog.shared.models.catalog import BlockchainRecord, Coin, TokenRecord
from coin_catalog.storage.ports import StorageError

log = get_storage_logger("coin-storage")


class InMemoryCoinStorage:
    """Holds the dataset as three lists swapped together."""

    def __init__(self) -> None:
        self._dataset: tuple[list[Coin], list[BlockchainRecord], list[TokenRecord]] = (
            [],
            [],
            [],
        )
        self.update_count = 0

    def update(
        self,
        coins: Sequence[Coin],
        blockchains: Sequence[BlockchainRecord],
        tokens: Sequence[TokenRecord],
    ) -> None:
        self._dataset = (list(coins), list(blockchains), list(tokens))
        self.update_count += 1

    def all_coins(self) -> list[Coin]:
        return list(self._dataset[0])

    def all_blockchains(self) -> list[BlockchainRecord]:
        return list(self._dataset[1])

    def all_tokens(self) -> list[TokenRecord]:
        return list(self._dataset[2])


class JsonFileCoinStorage:
    """Single-file JSON store; a missing file reads as an empty dataset."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def update(
        self,
        coins: Sequence[Coin],
        blockchains: Sequence[BlockchainRecord],
        tokens: Sequence[TokenRecord],
    ) -> None:
        document = {
            "coins": [c.model_dump(exclude_none=True) for c in coins],
            "blockchains": [b.model_dump(exclude_none=True) for b in blockchains],
            "tokens": [t.model_dump(exclude_none=True) for t in tokens],
        }
        payload = json.dumps(document, ensure_ascii=False)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write dataset to {self.path}: {e}") from e

        log.info(
            "dataset_written",
            path=str(self.path),
            coins=len(document["coins"]),
            blockchains=len(document["blockchains"]),
            tokens=len(document["tokens"]),
        )

    def all_coins(self) -> list[Coin]:
        return self._load("coins", Coin)

    def all_blockchains(self) -> list[BlockchainRecord]:
        return self._load("blockchains", BlockchainRecord)

    def all_tokens(self) -> list[TokenRecord]:
        return self._load("tokens", TokenRecord)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _load(self, section: str, model: type[Any]) -> list[Any]:
        try:
            return [model.model_validate(raw) for raw in self._read().get(section, [])]
        except ValidationError as e:
            raise StorageError(f"Invalid {section} in {self.path}: {e}") from e

    def _read(self) -> dict[str, Any]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Failed to read dataset from {self.path}: {e}") from e

        if not isinstance(raw, dict):
            raise StorageError(f"Dataset file {self.path} is not a JSON object")
        return raw


def records_to_json(records: Sequence[Coin | BlockchainRecord | TokenRecord]) -> str:
    """Serialize records as a JSON array (``None`` fields omitted)."""
    return json.dumps(
        [r.model_dump(exclude_none=True) for r in records], ensure_ascii=False
    )
