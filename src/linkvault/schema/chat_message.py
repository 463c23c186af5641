"""
Chat transcript schema.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from linkvault.schema.link_record import now_ms


class ChatRole(str, Enum):
    """Who authored a chat turn."""

    USER = "user"
    MODEL = "model"


class ChatMessage(BaseModel):
    """One turn of conversation. Session-scoped, never persisted."""

    role: ChatRole
    text: str
    timestamp: int = Field(default_factory=now_ms)
    related_link_ids: list[str] | None = Field(default=None, alias="relatedLinkIds")

    model_config = {"frozen": True, "populate_by_name": True}
