"""
Base key/value storage interface for vault persistence.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseKVStore(ABC):
    """
    Abstract base class for string-valued key/value backends.

    Backends hold opaque strings and never inspect them; encoding and
    decoding belong to the persistence adapter.
    """

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the backend (create files, tables, etc.)."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release any resources held by the backend."""
        pass

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        pass

    @abstractmethod
    def remove(self, key: str) -> bool:
        """Remove ``key``. Returns True if it existed."""
        pass

    def __enter__(self) -> BaseKVStore:
        self.initialize()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
