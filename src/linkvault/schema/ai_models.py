"""
Structured shapes the model is asked to return.

The request side declares every field as required; the parse side
tolerates missing or null fields and leaves defaulting to the caller.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

ANNOTATION_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "title": {"type": "STRING"},
        "description": {"type": "STRING"},
        "tags": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": ["title", "description", "tags"],
}

QUERY_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "answer": {
            "type": "STRING",
            "description": "Your conversational answer to the user's question.",
        },
        "relatedLinkIds": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "List of link IDs that directly relate to the query.",
        },
    },
    "required": ["answer", "relatedLinkIds"],
}


class LinkAnnotation(BaseModel):
    """Title, description and tags proposed for a URL."""

    title: str = ""
    description: str = ""
    tags: list[str] = Field(default_factory=list)

    @field_validator("title", "description", mode="before")
    @classmethod
    def _none_as_empty_str(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def _none_as_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value


class QueryAnswer(BaseModel):
    """The model's reply to a chat question."""

    answer: str = ""
    related_link_ids: list[str] = Field(default_factory=list, alias="relatedLinkIds")

    model_config = {"populate_by_name": True}

    @field_validator("answer", mode="before")
    @classmethod
    def _none_as_empty_str(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("related_link_ids", mode="before")
    @classmethod
    def _none_as_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value
