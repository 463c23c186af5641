"""
In-memory key/value store.

Ephemeral; used for tests and for running without a data directory.
"""

from __future__ import annotations

from linkvault.storage.base import BaseKVStore


class DictKVStore(BaseKVStore):
    """Dictionary-backed store. Contents vanish with the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})
        self.write_count = 0

    def initialize(self) -> None:
        pass

    def close(self) -> None:
        pass

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self.write_count += 1

    def remove(self, key: str) -> bool:
        if key in self._data:
            del self._data[key]
            return True
        return False
