"""Key-value store for sync state (dataset timestamps, bootstrap version).

Values are plain strings. Each key is independent: a failure on one key
never affects another.
"""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Protocol


class StateStoreError(Exception):
    """Raised when a state value cannot be read, written or deleted."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class IStateStore(Protocol):
    """Abstraction over the persisted sync state."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove ``key``. Deleting an absent key is not an error."""
        ...


class InMemoryStateStore:
    """Dict-backed state store for tests and ephemeral runs."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        return dict(self._values)


class FileStateStore:
    """One text file per key under ``root``, replaced atomically on write."""

    _SAFE_KEY = re.compile(r"^[A-Za-z0-9._-]+$")

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get(self, key: str) -> str | None:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StateStoreError(f"Failed to read state {key}: {e}", key=key) from e

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{key}.")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StateStoreError(f"Failed to write state {key}: {e}", key=key) from e

    def delete(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as e:
            raise StateStoreError(f"Failed to delete state {key}: {e}", key=key) from e

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _path(self, key: str) -> Path:
        if not self._SAFE_KEY.match(key):
            raise StateStoreError(f"Invalid state key: {key!r}", key=key)
        return self.root / key
