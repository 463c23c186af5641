"""
Pytest configuration and shared fixtures for link vault tests.
"""

import asyncio
import json
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from linkvault.errors import LLMError
from linkvault.llm.provider import LLMProvider


class ScriptedProvider(LLMProvider):
    """Returns canned replies in order, or raises a fixed error."""

    def __init__(self, responses: list[str] | None = None, error: Exception | None = None):
        self.responses = list(responses or [])
        self.error = error
        self.calls: list[dict[str, Any]] = []

    @property
    def model_name(self) -> str:
        return "scripted"

    async def generate_json(self, prompt, response_schema, search_grounding=False):
        self.calls.append(
            {"prompt": prompt, "schema": response_schema, "search_grounding": search_grounding}
        )
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


class GatedProvider(ScriptedProvider):
    """Like ScriptedProvider, but each call waits until ``release()``."""

    def __init__(self, responses: list[str] | None = None, error: Exception | None = None):
        super().__init__(responses, error)
        self.gate = asyncio.Event()
        self.entered = asyncio.Event()

    def release(self) -> None:
        self.gate.set()

    async def generate_json(self, prompt, response_schema, search_grounding=False):
        self.entered.set()
        await self.gate.wait()
        return await super().generate_json(prompt, response_schema, search_grounding)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def kv_store():
    """An in-memory key/value store."""
    from linkvault.storage import DictKVStore

    return DictKVStore()


@pytest.fixture
def persistence(kv_store):
    from linkvault.storage import PersistenceAdapter

    return PersistenceAdapter(kv_store)


@pytest.fixture
def scripted_provider():
    """Factory for providers replying with the given payloads (dicts are JSON-encoded)."""

    def _make(*replies: Any, error: Exception | None = None) -> ScriptedProvider:
        encoded = [r if isinstance(r, str) else json.dumps(r) for r in replies]
        return ScriptedProvider(encoded, error=error)

    return _make


@pytest.fixture
def failing_provider() -> ScriptedProvider:
    return ScriptedProvider(error=LLMError("connection refused"))


@pytest.fixture
def gated_provider():
    def _make(*replies: Any, error: Exception | None = None) -> GatedProvider:
        encoded = [r if isinstance(r, str) else json.dumps(r) for r in replies]
        return GatedProvider(encoded, error=error)

    return _make


@pytest.fixture
def make_vault(persistence):
    """Build a VaultManager over the shared in-memory persistence."""
    from linkvault.llm import AnnotationClient
    from linkvault.vault import VaultManager

    def _make(provider: LLMProvider) -> VaultManager:
        return VaultManager(AnnotationClient(provider), persistence)

    return _make


@pytest.fixture
def sample_links():
    """A small vault, most recent first."""
    from linkvault.schema import LinkRecord

    return [
        LinkRecord(
            id="py-tut",
            url="https://docs.python.org/3/tutorial/",
            title="The Python Tutorial",
            description="Official introduction to Python.",
            tags=["Python", "Tutorial"],
            created_at=1_700_000_300_000,
        ),
        LinkRecord(
            id="rust-book",
            url="https://doc.rust-lang.org/book/",
            title="The Rust Programming Language",
            description="The Rust book.",
            tags=["rust", "books"],
            created_at=1_700_000_200_000,
        ),
        LinkRecord(
            id="pasta",
            url="https://example.com/recipes/carbonara",
            title="Carbonara",
            description="A classic Roman pasta dish.",
            tags=["cooking"],
            created_at=1_700_000_100_000,
        ),
    ]


@pytest.fixture
def seeded_persistence(persistence, sample_links):
    """Persistence already holding ``sample_links``."""
    persistence.save_links(sample_links)
    return persistence


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: marks tests that wire several components together")
