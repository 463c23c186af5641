"""
Conversation manager - a session-scoped chat over the vault.

Only one question may be outstanding at a time; a submit made while a
reply is pending is rejected, not queued.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from linkvault.errors import QueryFailure
from linkvault.llm.query import QueryClient
from linkvault.schema.chat_message import ChatMessage, ChatRole
from linkvault.vault.manager import VaultManager

logger = logging.getLogger(__name__)

ERROR_REPLY = "I had trouble scanning the vault context. Check your link status."

TranscriptListener = Callable[[ChatMessage], None]
HighlightListener = Callable[[list[str]], None]


def _discard(listeners: list, listener: Callable) -> None:
    if listener in listeners:
        listeners.remove(listener)


class ConversationState(str, Enum):
    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"


class ConversationManager:
    """
    Owns the transcript and mediates between the user and the query client.

    The vault is read for each question, never modified.
    """

    def __init__(self, query_client: QueryClient, vault: VaultManager):
        self._query_client = query_client
        self._vault = vault
        self._messages: list[ChatMessage] = []
        self._state = ConversationState.IDLE
        self._transcript_listeners: list[TranscriptListener] = []
        self._highlight_listeners: list[HighlightListener] = []

    @property
    def state(self) -> ConversationState:
        return self._state

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    def add_transcript_listener(self, listener: TranscriptListener) -> Callable[[], None]:
        """Call ``listener`` with every appended message. Returns an unsubscribe callable."""
        self._transcript_listeners.append(listener)
        return lambda: _discard(self._transcript_listeners, listener)

    def add_highlight_listener(self, listener: HighlightListener) -> Callable[[], None]:
        """Call ``listener`` with the related link ids of each matching reply."""
        self._highlight_listeners.append(listener)
        return lambda: _discard(self._highlight_listeners, listener)

    async def submit(self, question: str) -> bool:
        """
        Ask a question about the vault.

        Returns False without touching the transcript if the question is
        blank or another question is still awaiting its reply. Query
        failures become an apology message; they are never raised.
        """
        if not question.strip() or self._state is ConversationState.AWAITING_REPLY:
            return False

        self._append(ChatMessage(role=ChatRole.USER, text=question))
        self._state = ConversationState.AWAITING_REPLY

        snapshot = self._vault.links
        try:
            result = await self._query_client.query(question, snapshot)
        except QueryFailure as exc:
            logger.warning("Vault query failed: %s", exc)
            self._append(ChatMessage(role=ChatRole.MODEL, text=ERROR_REPLY))
            return True
        finally:
            self._state = ConversationState.IDLE

        known = {link.id for link in snapshot}
        related = [link_id for link_id in result.related_link_ids if link_id in known]
        dropped = len(result.related_link_ids) - len(related)
        if dropped:
            logger.debug("Ignoring %d unknown link id(s) in reply", dropped)

        self._append(
            ChatMessage(
                role=ChatRole.MODEL,
                text=result.answer,
                related_link_ids=related or None,
            )
        )
        if related:
            for listener in list(self._highlight_listeners):
                listener(list(related))
        return True

    def _append(self, message: ChatMessage) -> None:
        self._messages.append(message)
        for listener in list(self._transcript_listeners):
            listener(message)
