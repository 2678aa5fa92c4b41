"""Bundled snapshot of the catalog used to seed a fresh install.

The package ships ``dumps/coins.json``, ``dumps/blockchains.json`` and
``dumps/tokens.json``. A directory with the same three files can be
configured instead.
"""

from __future__ import annotations

import json
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from coin_catalog.shared.models.catalog import BlockchainRecord, Coin, TokenRecord

_COINS = TypeAdapter(list[Coin])
_BLOCKCHAINS = TypeAdapter(list[BlockchainRecord])
_TOKENS = TypeAdapter(list[TokenRecord])


class SnapshotError(Exception):
    """A bundled snapshot document is missing, unreadable or malformed."""

    def __init__(self, message: str, resource: str | None = None):
        super().__init__(message)
        self.resource = resource


class SnapshotSource:
    """Reads the three snapshot documents."""

    RESOURCE_DIR = "dumps"

    def __init__(self, directory: str | Path | None = None):
        self.directory = Path(directory) if directory else None

    def load_coins(self) -> list[Coin]:
        return self._load("coins.json", _COINS)

    def load_blockchains(self) -> list[BlockchainRecord]:
        return self._load("blockchains.json", _BLOCKCHAINS)

    def load_tokens(self) -> list[TokenRecord]:
        return self._load("tokens.json", _TOKENS)

    def _resource(self, name: str) -> Path | Traversable:
        if self.directory is not None:
            return self.directory / name
        return (
            resources.files("coin_catalog.storage").joinpath(self.RESOURCE_DIR).joinpath(name)
        )

    def _load(self, name: str, adapter: TypeAdapter[Any]) -> Any:
        resource = self._resource(name)
        if not resource.is_file():
            raise SnapshotError(f"Snapshot resource not found: {name}", resource=name)

        try:
            return adapter.validate_python(json.loads(resource.read_text(encoding="utf-8")))
        except (OSError, UnicodeDecodeError) as e:
            raise SnapshotError(f"Failed to read snapshot {name}: {e}", resource=name) from e
        except json.JSONDecodeError as e:
            raise SnapshotError(f"Snapshot {name} is not valid JSON: {e}", resource=name) from e
        except ValidationError as e:
            raise SnapshotError(f"Snapshot {name} has invalid records: {e}", resource=name) from e
