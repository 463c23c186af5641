"""The link vault."""

from linkvault.vault.manager import (
    DEFAULT_DESCRIPTION,
    FALLBACK_DESCRIPTION,
    VaultManager,
    normalize_url,
)

__all__ = ["VaultManager", "normalize_url", "FALLBACK_DESCRIPTION", "DEFAULT_DESCRIPTION"]
