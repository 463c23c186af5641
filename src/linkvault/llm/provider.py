"""
Model providers for link annotation and vault queries.

A provider turns a prompt plus a response schema into the raw JSON text
the model produced. Parsing that text is the job of the clients built on
top of it.
"""

from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import urlparse

import httpx

from linkvault.errors import LLMError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-3-flash-preview"
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class LLMProvider(ABC):
    """Abstract base class for structured-output model providers."""

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Return the model name."""
        pass

    @abstractmethod
    async def generate_json(
        self,
        prompt: str,
        response_schema: dict[str, Any],
        search_grounding: bool = False,
    ) -> str:
        """
        Run one generation constrained to ``response_schema``.

        Returns the model's text (expected to be JSON). Raises LLMError on
        transport failure, non-2xx status, or an envelope with no text.
        Exactly one attempt is made.
        """
        pass


class GeminiProvider(LLMProvider):
    """
    Google Gemini provider over the public REST API.

    Uses ``generateContent`` with ``responseMimeType=application/json`` and a
    declared ``responseSchema``.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_MODEL,
        base_url: str = GEMINI_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key
        self._model_name = model_name
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    @property
    def model_name(self) -> str:
        return self._model_name

    async def generate_json(
        self,
        prompt: str,
        response_schema: dict[str, Any],
        search_grounding: bool = False,
    ) -> str:
        if not self._api_key:
            raise LLMError("GEMINI_API_KEY not set")

        payload: dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": response_schema,
            },
        }
        if search_grounding:
            payload["tools"] = [{"google_search": {}}]

        url = f"{self._base_url}/models/{self._model_name}:generateContent"

        try:
            async with httpx.AsyncClient(timeout=60.0, transport=self._transport) as client:
                response = await client.post(
                    url,
                    headers={
                        "x-goog-api-key": self._api_key,
                        "Content-Type": "application/json",
                    },
                    json=payload,
                )
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as exc:
            raise LLMError(
                f"API error: {exc.response.status_code} - {exc.response.text[:200]}"
            ) from exc
        except httpx.HTTPError as exc:
            raise LLMError(f"Request to {self._model_name} failed: {exc}") from exc
        except ValueError as exc:
            raise LLMError("Response body is not JSON") from exc

        return _candidate_text(body)


def _candidate_text(body: Any) -> str:
    """Concatenate the text parts of the first candidate."""
    try:
        parts = body["candidates"][0]["content"]["parts"]
        text = "".join(part.get("text", "") for part in parts)
    except (KeyError, IndexError, TypeError, AttributeError) as exc:
        raise LLMError("Response has no candidate content") from exc
    if not text:
        raise LLMError("Response candidate is empty")
    return text


class MockProvider(LLMProvider):
    """
    Offline provider for demos and tests.

    Uses simple heuristics on the prompt instead of a model.
    """

    @property
    def model_name(self) -> str:
        return "mock"

    async def generate_json(
        self,
        prompt: str,
        response_schema: dict[str, Any],
        search_grounding: bool = False,
    ) -> str:
        properties = response_schema.get("properties", {})
        if "answer" in properties:
            return json.dumps(self._answer(prompt))
        return json.dumps(self._annotate(prompt))

    def _annotate(self, prompt: str) -> dict[str, Any]:
        match = re.search(r"URL:\s*(\S+)", prompt)
        url = match.group(1) if match else ""
        parsed = urlparse(url)
        host = parsed.netloc.removeprefix("www.")

        tags = [host.split(".")[0]] if host else []
        tags.extend(seg.lower() for seg in parsed.path.split("/") if seg.isalpha())
        return {
            "title": host or url,
            "description": f"A page saved from {host}." if host else "",
            "tags": tags[:5],
        }

    def _answer(self, prompt: str) -> dict[str, Any]:
        match = re.search(r'Query:\s*"(.*)"', prompt)
        question = match.group(1) if match else ""
        words = {w for w in re.findall(r"[a-z0-9]+", question.lower()) if len(w) > 2}

        related = []
        for line in prompt.splitlines():
            line = line.strip()
            if not line.startswith("ID: "):
                continue
            link_id = line[4:].split(",", 1)[0]
            if words and any(w in line.lower() for w in words):
                related.append(link_id)

        if related:
            answer = f"I found {len(related)} matching link(s) in your vault."
        else:
            answer = "Nothing in your vault seems to match that."
        return {"answer": answer, "relatedLinkIds": related}


def get_llm_provider(
    provider: str = "gemini",
    model: str = DEFAULT_MODEL,
    **kwargs: Any,
) -> LLMProvider:
    """
    Factory function to create a model provider.

    Args:
        provider: Provider type ("gemini" or "mock")
        model: Model name
        **kwargs: Additional provider-specific arguments (``api_key`` for Gemini)

    Returns:
        Configured provider
    """
    if provider == "gemini":
        return GeminiProvider(model_name=model, **kwargs)
    elif provider == "mock":
        return MockProvider()
    else:
        raise ValueError(f"Unknown LLM provider: {provider}")
