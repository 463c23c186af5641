"""
Wiring: builds the vault and conversation managers from a config.
"""

from __future__ import annotations

from dataclasses import dataclass

from linkvault.chat.conversation import ConversationManager
from linkvault.config import VaultConfig
from linkvault.llm.annotation import AnnotationClient
from linkvault.llm.provider import LLMProvider, get_llm_provider
from linkvault.llm.query import QueryClient
from linkvault.storage.base import BaseKVStore
from linkvault.storage.persistence import PersistenceAdapter
from linkvault.storage.sqlite_store import SQLiteKVStore
from linkvault.vault.manager import VaultManager


@dataclass
class LinkVaultApp:
    """Everything a front end needs, sharing one store and one provider."""

    store: BaseKVStore
    persistence: PersistenceAdapter
    vault: VaultManager
    conversation: ConversationManager

    def close(self) -> None:
        self.store.close()


def build_provider(config: VaultConfig) -> LLMProvider:
    if config.provider == "gemini":
        return get_llm_provider("gemini", model=config.model, api_key=config.api_key)
    return get_llm_provider(config.provider, model=config.model)


def create_app(
    config: VaultConfig,
    store: BaseKVStore | None = None,
    provider: LLMProvider | None = None,
) -> LinkVaultApp:
    """Open the store and assemble the managers."""
    provider = provider if provider is not None else build_provider(config)

    store = store if store is not None else SQLiteKVStore(config.db_path)
    store.initialize()

    persistence = PersistenceAdapter(store)
    vault = VaultManager(
        AnnotationClient(provider, search_grounding=config.search_grounding),
        persistence,
    )
    conversation = ConversationManager(QueryClient(provider), vault)
    return LinkVaultApp(store=store, persistence=persistence, vault=vault, conversation=conversation)
