"""
Link Vault

A personal bookmark vault with AI annotation and conversational search.

The system provides:
- Saving URLs with model-generated title, description and tags
- Tag and text filtering over the saved links
- A chat that answers questions about the vault and highlights matches
- Durable local storage of the links and the theme preference

Quick Start:
    from linkvault import VaultConfig, create_app

    app = create_app(VaultConfig.from_env())

    # Save a link
    record = await app.vault.add_link("docs.python.org/3/tutorial")

    # Filter the vault
    tutorials = app.vault.filter("tutorial", selected_tag="python")

    # Ask about it
    await app.conversation.submit("What's my Python tutorial?")
"""

__version__ = "0.1.0"

from linkvault.app import LinkVaultApp, create_app
from linkvault.chat.conversation import ConversationManager, ConversationState
from linkvault.config import VaultConfig
from linkvault.errors import (
    AnnotationFailure,
    LinkVaultError,
    LLMError,
    PersistenceParseFailure,
    QueryFailure,
)
from linkvault.llm import AnnotationClient, GeminiProvider, LLMProvider, MockProvider, QueryClient
from linkvault.schema import ChatMessage, ChatRole, LinkAnnotation, LinkRecord, QueryAnswer, Theme
from linkvault.storage import DictKVStore, PersistenceAdapter, SQLiteKVStore
from linkvault.vault import VaultManager

__all__ = [
    # Version
    "__version__",
    # Schema
    "LinkRecord",
    "ChatMessage",
    "ChatRole",
    "Theme",
    "LinkAnnotation",
    "QueryAnswer",
    # Errors
    "LinkVaultError",
    "LLMError",
    "AnnotationFailure",
    "QueryFailure",
    "PersistenceParseFailure",
    # Storage
    "DictKVStore",
    "SQLiteKVStore",
    "PersistenceAdapter",
    # Model clients
    "LLMProvider",
    "GeminiProvider",
    "MockProvider",
    "AnnotationClient",
    "QueryClient",
    # Managers
    "VaultManager",
    "ConversationManager",
    "ConversationState",
    # Wiring
    "VaultConfig",
    "LinkVaultApp",
    "create_app",
]
