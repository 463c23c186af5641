"""
Exception hierarchy for the link vault.

Every failure below has a defined fallback in its caller; none of them is
meant to reach the user as a hard error.
"""

from __future__ import annotations


class LinkVaultError(Exception):
    """Base class for all link vault errors."""


class LLMError(LinkVaultError):
    """The model API could not be reached or returned an unusable envelope."""


class AnnotationFailure(LinkVaultError):
    """A URL could not be annotated (transport error or malformed response)."""


class QueryFailure(LinkVaultError):
    """A chat question could not be answered (transport error or malformed response)."""


class PersistenceParseFailure(LinkVaultError):
    """Stored link data could not be decoded."""
