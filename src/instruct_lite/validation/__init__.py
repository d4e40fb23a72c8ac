"""
Response parsing and validation.

- pipeline.py: ResponseValidator (pydantic models, field mappings, JSON Schema)
- json_decode.py: JSON text decoding for adapters (ResponseParseError on failure)
- json_schema.py: jsonschema-backed validator
- formatting.py: error text fed back to the model on retry
"""

from .exceptions import (
    ResponseParseError,
    SchemaValidationError,
    ValidationError,
)
from .formatting import format_errors
from .json_decode import decode_json_object
from .pipeline import ResponseValidator

__all__ = [
    "ResponseValidator",
    "decode_json_object",
    "format_errors",
    # Exceptions (for retry engine / callers)
    "ValidationError",
    "ResponseParseError",
    "SchemaValidationError",
]
