"""Model access: providers plus the annotation and query clients."""

from linkvault.llm.annotation import AnnotationClient, build_annotation_prompt, parse_annotation
from linkvault.llm.provider import (
    DEFAULT_MODEL,
    GeminiProvider,
    LLMProvider,
    MockProvider,
    get_llm_provider,
)
from linkvault.llm.query import QueryClient, build_query_prompt, parse_query_answer

__all__ = [
    "LLMProvider",
    "GeminiProvider",
    "MockProvider",
    "get_llm_provider",
    "DEFAULT_MODEL",
    "AnnotationClient",
    "build_annotation_prompt",
    "parse_annotation",
    "QueryClient",
    "build_query_prompt",
    "parse_query_answer",
]
