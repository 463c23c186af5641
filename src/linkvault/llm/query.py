"""
Vault query client.

Sends a question together with the entire vault as context. There is no
truncation: large vaults produce large prompts.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import ValidationError

from linkvault.errors import LLMError, QueryFailure
from linkvault.llm.provider import LLMProvider
from linkvault.schema.ai_models import QUERY_RESPONSE_SCHEMA, QueryAnswer
from linkvault.schema.link_record import LinkRecord


def build_query_prompt(question: str, links: Sequence[LinkRecord]) -> str:
    context = "\n".join(link.to_context_string() for link in links)
    return f"""You are an intelligent link assistant. Based on the user's query and the list of links below, answer their question and identify which links (by ID) are most relevant.

Query: "{question}"

Links Context:
{context}

Format your response as JSON."""


def parse_query_answer(text: str) -> QueryAnswer:
    """Validate model output. Raises QueryFailure on malformed JSON or wrong shape."""
    try:
        return QueryAnswer.model_validate_json(text)
    except ValidationError as exc:
        raise QueryFailure(f"Malformed query response: {exc.error_count()} error(s)") from exc


class QueryClient:
    """Single-attempt question answering over a vault snapshot."""

    def __init__(self, provider: LLMProvider):
        self._provider = provider

    async def query(self, question: str, links: Sequence[LinkRecord]) -> QueryAnswer:
        try:
            text = await self._provider.generate_json(
                build_query_prompt(question, links),
                QUERY_RESPONSE_SCHEMA,
            )
        except LLMError as exc:
            raise QueryFailure(str(exc)) from exc
        return parse_query_answer(text)
