"""Boundary around the external text-completion provider.

Everything the provider returns is untrusted text. Callers go through
``extract_text`` and ``parse_json_or_default`` so that a missing field or
malformed JSON never turns into an exception inside a request handler.
"""

import json
import logging
from typing import Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CompletionClient(Protocol):
    """Interface for a single JSON-mode completion call."""

    async def complete(
        self, messages: list[dict[str, str]], *, temperature: float
    ) -> str:
        """Send chat messages once and return the raw response text."""


def chat_messages(system_prompt: str, prompt: str) -> list[dict[str, str]]:
    """Build the system and user message pair sent to the provider."""
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": prompt},
    ]


def extract_text(response: object) -> str:
    """Return the first choice's message content, stripped, or ``""``."""
    try:
        content = response.choices[0].message.content  # type: ignore[attr-defined]
    except (AttributeError, IndexError, KeyError, TypeError):
        return ""
    if not isinstance(content, str):
        return ""
    return content.strip()


def parse_json_or_default(text: str, default: T) -> object | T:
    """Parse ``text`` as JSON, logging the raw text and returning ``default`` on failure."""
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        logger.warning("JSON parse failed, raw text from AI: %r", text)
        return default
