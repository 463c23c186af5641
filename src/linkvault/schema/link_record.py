"""
Link record schema - a single saved bookmark in the vault.
"""

from __future__ import annotations

import time
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field

UNCATEGORIZED_TAG = "uncategorized"


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


class Theme(str, Enum):
    """Visual theme preference stored alongside the vault."""

    DARK = "dark"
    LIGHT = "light"
    OLED = "oled"
    CUTE = "cute"


class LinkRecord(BaseModel):
    """
    A saved bookmark.

    Records are immutable once created: the vault only ever adds or
    removes them. Field names serialize in camelCase (``createdAt``) so the
    stored layout matches what the browser front end reads.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    url: str
    title: str
    description: str
    tags: tuple[str, ...] = (UNCATEGORIZED_TAG,)
    created_at: int = Field(default_factory=now_ms, alias="createdAt")

    model_config = {"frozen": True, "populate_by_name": True}

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive tag membership."""
        wanted = tag.lower()
        return any(t.lower() == wanted for t in self.tags)

    def matches_text(self, query: str) -> bool:
        """True if ``query`` is a case-insensitive substring of title, description or a tag."""
        needle = query.lower()
        return (
            needle in self.title.lower()
            or needle in self.description.lower()
            or any(needle in t.lower() for t in self.tags)
        )

    def to_context_string(self) -> str:
        """Format the record as one line of model context."""
        return (
            f"ID: {self.id}, Title: {self.title}, Desc: {self.description}, "
            f"URL: {self.url}, Tags: {', '.join(self.tags)}"
        )
