"""Shared LLM helpers for the judgment source (OpenAI client, JSON parsing)."""

import json
from typing import Any

from openai import OpenAI

from ckr.config import Settings
from ckr.errors import ConfigurationError


def get_client(settings: Settings) -> OpenAI:
    if not settings.openai_api_key:
        raise ConfigurationError("OPENAI_API_KEY environment variable is required")
    # No automatic retries: a failed judgment is reported, never silently repeated
    return OpenAI(
        api_key=settings.openai_api_key,
        timeout=settings.judgment_timeout_seconds,
        max_retries=0,
    )


def parse_llm_response(content: str) -> Any:
    """Parse JSON from LLM response, stripping markdown code blocks if present."""
    text = content.strip()
    if text.startswith("```"):
        lines = text.split("\n")
        if lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        text = "\n".join(lines)
    return json.loads(text)
