"""Tests for schema models."""

import pytest
from pydantic import ValidationError


class TestLinkRecord:
    def test_defaults(self):
        from linkvault.schema import LinkRecord

        a = LinkRecord(url="https://a.example", title="A", description="d")
        b = LinkRecord(url="https://b.example", title="B", description="d")

        assert a.id != b.id
        assert a.tags == ("uncategorized",)
        assert a.created_at > 0

    def test_serializes_camel_case(self):
        from linkvault.schema import LinkRecord

        record = LinkRecord(id="x", url="https://a.example", title="A", description="d", created_at=5)
        dumped = record.model_dump(by_alias=True)

        assert dumped["createdAt"] == 5
        assert "created_at" not in dumped

    def test_accepts_camel_case(self):
        from linkvault.schema import LinkRecord

        record = LinkRecord.model_validate(
            {"id": "x", "url": "u", "title": "t", "description": "d", "tags": [], "createdAt": 7}
        )
        assert record.created_at == 7

    def test_is_immutable(self, sample_links):
        with pytest.raises(ValidationError):
            sample_links[0].title = "changed"

    def test_has_tag_ignores_case(self, sample_links):
        assert sample_links[0].has_tag("python")
        assert sample_links[0].has_tag("TUTORIAL")
        assert not sample_links[0].has_tag("rust")

    def test_matches_text(self, sample_links):
        tutorial = sample_links[0]

        assert tutorial.matches_text("python tut")
        assert tutorial.matches_text("OFFICIAL")
        assert tutorial.matches_text("tutor")
        assert tutorial.matches_text("")
        # The URL itself is not searched
        assert not tutorial.matches_text("docs.python.org")

    def test_context_string(self, sample_links):
        line = sample_links[1].to_context_string()
        assert line == (
            "ID: rust-book, Title: The Rust Programming Language, Desc: The Rust book., "
            "URL: https://doc.rust-lang.org/book/, Tags: rust, books"
        )


class TestChatMessage:
    def test_related_ids_optional(self):
        from linkvault.schema import ChatMessage, ChatRole

        message = ChatMessage(role=ChatRole.USER, text="hi")
        assert message.related_link_ids is None
        assert message.timestamp > 0

    def test_alias(self):
        from linkvault.schema import ChatMessage

        message = ChatMessage.model_validate({"role": "model", "text": "ok", "relatedLinkIds": ["a"]})
        assert message.related_link_ids == ["a"]


class TestAIModels:
    def test_annotation_tolerates_missing_and_null(self):
        from linkvault.schema import LinkAnnotation

        parsed = LinkAnnotation.model_validate_json('{"title": null, "tags": ["a"]}')
        assert parsed.title == ""
        assert parsed.description == ""
        assert parsed.tags == ["a"]

    def test_annotation_rejects_wrong_shape(self):
        from linkvault.schema import LinkAnnotation

        with pytest.raises(ValidationError):
            LinkAnnotation.model_validate_json('{"tags": "not-a-list"}')

    def test_request_schema_requires_all_fields(self):
        from linkvault.schema import ANNOTATION_RESPONSE_SCHEMA, QUERY_RESPONSE_SCHEMA

        assert ANNOTATION_RESPONSE_SCHEMA["required"] == ["title", "description", "tags"]
        assert QUERY_RESPONSE_SCHEMA["required"] == ["answer", "relatedLinkIds"]

    def test_query_answer_alias(self):
        from linkvault.schema import QueryAnswer

        parsed = QueryAnswer.model_validate_json('{"answer": "yes", "relatedLinkIds": ["a", "b"]}')
        assert parsed.related_link_ids == ["a", "b"]
