"""Storage backends and persistence for the link vault."""

from linkvault.storage.base import BaseKVStore
from linkvault.storage.dict_store import DictKVStore
from linkvault.storage.persistence import (
    DEFAULT_THEME,
    LINKS_KEY,
    THEME_KEY,
    PersistenceAdapter,
    parse_links,
    serialize_links,
)
from linkvault.storage.sqlite_store import SQLiteKVStore

__all__ = [
    "BaseKVStore",
    "DictKVStore",
    "SQLiteKVStore",
    "PersistenceAdapter",
    "parse_links",
    "serialize_links",
    "LINKS_KEY",
    "THEME_KEY",
    "DEFAULT_THEME",
]
