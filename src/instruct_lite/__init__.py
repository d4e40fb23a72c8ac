"""
instruct-lite: structured output from LLMs with validation and retries.

Sends prompts through a provider adapter, validates the structured JSON
response against a pydantic model, field mapping or JSON Schema, retries
with corrective feedback on validation failure, and optionally aggregates
token usage across attempts.

Architecture: adapter hooks + retry engine + response validation
"""

__version__ = "0.1.0"

from instruct_lite.adapters import (
    AdapterError,
    BaseAdapter,
    TransportError,
    UnexpectedResponseError,
)
from instruct_lite.core import consume_response, instruct, prepare_prompt
from instruct_lite.logging_config import configure_logging
from instruct_lite.models import InstructOptions
from instruct_lite.retry import RetryExhausted, UsageMetadata
from instruct_lite.validation import (
    ResponseParseError,
    SchemaValidationError,
    ValidationError,
)

__all__ = [
    "instruct",
    "prepare_prompt",
    "consume_response",
    "configure_logging",
    "BaseAdapter",
    "InstructOptions",
    "UsageMetadata",
    # Exceptions
    "AdapterError",
    "TransportError",
    "UnexpectedResponseError",
    "RetryExhausted",
    "ValidationError",
    "ResponseParseError",
    "SchemaValidationError",
]
