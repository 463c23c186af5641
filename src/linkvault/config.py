"""
Runtime configuration, read from the environment (and a ``.env`` file).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from linkvault.llm.provider import DEFAULT_MODEL

ENV_LOCATIONS = [
    Path(__file__).parent.parent.parent / ".env",
    Path.cwd() / ".env",
    Path.home() / "linkvault" / ".env",
]

_TRUTHY = {"1", "true", "yes", "on"}


def load_env_file() -> Path | None:
    """Load the first ``.env`` found. Existing variables win."""
    for env_path in ENV_LOCATIONS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


@dataclass
class VaultConfig:
    """Settings for building a vault and its model clients."""

    api_key: str = ""
    model: str = DEFAULT_MODEL
    provider: str = "gemini"
    data_dir: Path = Path("~/linkvault/data").expanduser()
    search_grounding: bool = True

    @property
    def db_path(self) -> Path:
        return self.data_dir / "vault.sqlite"

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> VaultConfig:
        if load_dotenv_file:
            load_env_file()

        return cls(
            api_key=os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY", ""),
            model=os.environ.get("LINKVAULT_MODEL", DEFAULT_MODEL),
            provider=os.environ.get("LINKVAULT_PROVIDER", "gemini"),
            data_dir=Path(os.environ.get("LINKVAULT_DATA_DIR", "~/linkvault/data")).expanduser(),
            search_grounding=os.environ.get("LINKVAULT_SEARCH_GROUNDING", "true").lower() in _TRUTHY,
        )

    def describe(self) -> dict[str, str]:
        """Human-readable summary; never includes the key itself."""
        return {
            "provider": self.provider,
            "model": self.model,
            "api_key": "set" if self.api_key else "not set",
            "data_dir": str(self.data_dir),
            "search_grounding": "on" if self.search_grounding else "off",
        }
