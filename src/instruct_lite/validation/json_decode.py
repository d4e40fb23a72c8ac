"""
JSON decoding for text-mode responses.

Providers without native tool calling return the structured output as a
JSON string. Adapters decode it here; failures become ResponseParseError
so the retry engine treats them as validation failures.
"""

import json
from typing import Any

import structlog

from .exceptions import ResponseParseError

logger = structlog.get_logger(__name__)


def decode_json_object(content: str | None, response: Any = None) -> dict:
    """
    Parse JSON content from an LLM response.

    Args:
        content: Raw JSON string from the response
        response: Full provider response, attached to the error for retries

    Returns:
        Parsed dict representation

    Raises:
        ResponseParseError: If content is empty, malformed or not a JSON object
    """
    if not content or not content.strip():
        raise ResponseParseError(
            "LLM response content is empty or whitespace-only",
            reason="empty_content",
            response=response,
            raw_content=content,
        )

    try:
        parsed = json.loads(content)
    except json.JSONDecodeError as e:
        raise ResponseParseError(
            f"Failed to parse LLM response as JSON: {e.msg} at line {e.lineno} col {e.colno}",
            reason="json_decode_error",
            response=response,
            raw_content=content,
        ) from e

    if not isinstance(parsed, dict):
        raise ResponseParseError(
            f"LLM response is not a JSON object (got {type(parsed).__name__})",
            reason="not_json_object",
            response=response,
            raw_content=content,
        )

    logger.debug("Decoded JSON response", top_level_keys=len(parsed))
    return parsed
