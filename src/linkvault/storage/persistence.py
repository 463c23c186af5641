"""
Persistence adapter: maps the vault's state onto a key/value backend.

Layout (string values):
- ``links``  -> JSON array of link records (camelCase fields)
- ``theme``  -> one of dark, light, oled, cute

The adapter performs no business logic; it neither validates nor
transforms records beyond (de)serialization.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from pydantic import TypeAdapter, ValidationError

from linkvault.errors import PersistenceParseFailure
from linkvault.schema.link_record import LinkRecord, Theme
from linkvault.storage.base import BaseKVStore

logger = logging.getLogger(__name__)

LINKS_KEY = "links"
THEME_KEY = "theme"
DEFAULT_THEME = Theme.DARK

_links_adapter = TypeAdapter(list[LinkRecord])


def serialize_links(links: Iterable[LinkRecord]) -> str:
    """Encode records in the stored JSON layout."""
    return json.dumps([link.model_dump(by_alias=True) for link in links])


def parse_links(raw: str) -> list[LinkRecord]:
    """Decode the stored JSON layout. Raises PersistenceParseFailure."""
    try:
        return _links_adapter.validate_json(raw)
    except ValidationError as exc:
        raise PersistenceParseFailure(f"Stored links are unreadable: {exc.error_count()} error(s)") from exc


class PersistenceAdapter:
    """Reads and writes the link collection and theme preference."""

    def __init__(self, store: BaseKVStore):
        self._store = store

    @property
    def store(self) -> BaseKVStore:
        return self._store

    def load_links(self) -> list[LinkRecord]:
        """
        Read the stored collection.

        Missing data yields an empty list; malformed data is logged and
        also yields an empty list.
        """
        raw = self._store.get(LINKS_KEY)
        if raw is None:
            return []
        try:
            return parse_links(raw)
        except PersistenceParseFailure as exc:
            logger.warning("Failed to parse saved links, starting empty: %s", exc)
            return []

    def save_links(self, links: Iterable[LinkRecord]) -> None:
        """Write the full collection."""
        self._store.set(LINKS_KEY, serialize_links(links))

    def load_theme(self) -> Theme:
        raw = self._store.get(THEME_KEY)
        if raw is None:
            return DEFAULT_THEME
        try:
            return Theme(raw)
        except ValueError:
            logger.warning("Ignoring unknown stored theme %r", raw)
            return DEFAULT_THEME

    def save_theme(self, theme: Theme) -> None:
        self._store.set(THEME_KEY, theme.value)
