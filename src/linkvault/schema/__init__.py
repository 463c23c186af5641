"""Link vault schema definitions."""

from linkvault.schema.ai_models import (
    ANNOTATION_RESPONSE_SCHEMA,
    QUERY_RESPONSE_SCHEMA,
    LinkAnnotation,
    QueryAnswer,
)
from linkvault.schema.chat_message import ChatMessage, ChatRole
from linkvault.schema.link_record import UNCATEGORIZED_TAG, LinkRecord, Theme, now_ms

__all__ = [
    "LinkRecord",
    "Theme",
    "UNCATEGORIZED_TAG",
    "now_ms",
    "ChatMessage",
    "ChatRole",
    "LinkAnnotation",
    "QueryAnswer",
    "ANNOTATION_RESPONSE_SCHEMA",
    "QUERY_RESPONSE_SCHEMA",
]
