"""Conversational queries over the vault."""

from linkvault.chat.conversation import ERROR_REPLY, ConversationManager, ConversationState

__all__ = ["ConversationManager", "ConversationState", "ERROR_REPLY"]
