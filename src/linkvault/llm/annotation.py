"""
Link annotation client.

Asks the model for a title, description and tags for a URL. Parsing is
structural only: a well-formed reply with missing fields is a success
with empty values.
"""

from __future__ import annotations

from pydantic import ValidationError

from linkvault.errors import AnnotationFailure, LLMError
from linkvault.llm.provider import LLMProvider
from linkvault.schema.ai_models import ANNOTATION_RESPONSE_SCHEMA, LinkAnnotation


def build_annotation_prompt(url: str) -> str:
    return (
        "Analyze this URL and provide a concise title, a 1-sentence description, "
        f"and 3-5 relevant tags. URL: {url}"
    )


def parse_annotation(text: str) -> LinkAnnotation:
    """Validate model output. Raises AnnotationFailure on malformed JSON or wrong shape."""
    try:
        return LinkAnnotation.model_validate_json(text)
    except ValidationError as exc:
        raise AnnotationFailure(f"Malformed annotation response: {exc.error_count()} error(s)") from exc


class AnnotationClient:
    """Single-attempt annotation of one URL."""

    def __init__(self, provider: LLMProvider, search_grounding: bool = True):
        self._provider = provider
        self._search_grounding = search_grounding

    async def annotate(self, url: str) -> LinkAnnotation:
        try:
            text = await self._provider.generate_json(
                build_annotation_prompt(url),
                ANNOTATION_RESPONSE_SCHEMA,
                search_grounding=self._search_grounding,
            )
        except LLMError as exc:
            raise AnnotationFailure(str(exc)) from exc
        return parse_annotation(text)
