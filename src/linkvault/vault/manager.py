"""
Vault manager - owns the canonical, most-recent-first collection of links.

Every mutation is written through to the persistence adapter before the
call returns.
"""

from __future__ import annotations

import logging
import re

from linkvault.errors import AnnotationFailure
from linkvault.llm.annotation import AnnotationClient
from linkvault.schema.link_record import UNCATEGORIZED_TAG, LinkRecord
from linkvault.storage.persistence import PersistenceAdapter

logger = logging.getLogger(__name__)

FALLBACK_DESCRIPTION = "Metadata fetch failed."
DEFAULT_DESCRIPTION = "Link saved successfully."

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.\-]*://", re.IGNORECASE)


def normalize_url(raw: str) -> str:
    """Trim and prepend ``https://`` when no scheme is present. Empty stays empty."""
    url = raw.strip()
    if url and not _SCHEME_RE.match(url):
        url = "https://" + url
    return url


class VaultManager:
    """
    The user's link collection.

    Handles:
    - Adding links with AI annotation (never failing on annotation errors)
    - Deleting links
    - Tag and text filtering
    - The computed tag index
    """

    def __init__(self, annotator: AnnotationClient, persistence: PersistenceAdapter):
        self._annotator = annotator
        self._persistence = persistence
        self._links: list[LinkRecord] = persistence.load_links()

    @property
    def links(self) -> tuple[LinkRecord, ...]:
        """Snapshot of the collection, most recent first."""
        return tuple(self._links)

    def __len__(self) -> int:
        return len(self._links)

    def get(self, link_id: str) -> LinkRecord | None:
        for link in self._links:
            if link.id == link_id:
                return link
        return None

    async def add_link(self, raw_input: str) -> LinkRecord | None:
        """
        Annotate and save a URL.

        Returns None (and changes nothing) for blank input. Otherwise a
        record is always created: annotation failures fall back to the URL
        as title, a placeholder description and the ``uncategorized`` tag.
        """
        url = normalize_url(raw_input)
        if not url:
            return None

        try:
            annotation = await self._annotator.annotate(url)
        except AnnotationFailure as exc:
            logger.warning("Failed to fetch metadata for %s: %s", url, exc)
            record = LinkRecord(
                url=url,
                title=url,
                description=FALLBACK_DESCRIPTION,
                tags=[UNCATEGORIZED_TAG],
            )
        else:
            tags = [t.strip() for t in annotation.tags if t.strip()]
            record = LinkRecord(
                url=url,
                title=annotation.title.strip() or url,
                description=annotation.description.strip() or DEFAULT_DESCRIPTION,
                tags=tags or [UNCATEGORIZED_TAG],
            )

        self._links.insert(0, record)
        self._persist()
        return record

    def delete_link(self, link_id: str) -> None:
        """Remove the record with ``link_id``; unknown ids are ignored."""
        self._links = [link for link in self._links if link.id != link_id]
        self._persist()

    def filter(self, search_query: str = "", selected_tag: str | None = None) -> list[LinkRecord]:
        """Records matching both the tag and the text filter, in collection order."""
        return [
            link
            for link in self._links
            if (not selected_tag or link.has_tag(selected_tag)) and link.matches_text(search_query)
        ]

    def list_tags(self) -> list[str]:
        """Lower-cased, deduplicated, sorted union of every record's tags."""
        return sorted({tag.lower() for link in self._links for tag in link.tags})

    def _persist(self) -> None:
        self._persistence.save_links(self._links)
