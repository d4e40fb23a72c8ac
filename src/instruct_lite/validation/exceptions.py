"""
Validation-specific exceptions.

These exceptions are caught by the retry engine, which will:
- Build a corrective prompt and retry while attempts remain
- Surface the last error through RetryExhausted once retries are exhausted
"""

from typing import Any


class ValidationError(Exception):
    """
    Base exception for all validation errors.

    Raised when a response cannot be turned into a valid result. Every
    subclass drives the retry loop the same way.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize validation error.

        Args:
            message: Human-readable error description
            details: Structured error data for logging/metrics
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ResponseParseError(ValidationError):
    """
    The adapter could not locate the expected structure in a response.

    Raised by adapters from parse_response (missing tool call, malformed
    JSON, empty content). Retried like any other validation failure.
    """

    def __init__(
        self,
        message: str,
        reason: str = "unexpected_response",
        response: Any = None,
        raw_content: str | None = None,
    ):
        """
        Initialize response parse error.

        Args:
            message: Error description
            reason: Short machine-readable reason (e.g. "unexpected_response")
            response: Raw provider response that failed to parse
            raw_content: Text content that failed to decode (truncated in details)
        """
        details: dict[str, Any] = {"reason": reason}
        if raw_content:
            # Avoid excessive logging
            details["content_snippet"] = raw_content[:500]

        super().__init__(message, details)
        self.reason = reason
        self.response = response


class SchemaValidationError(ValidationError):
    """
    Decoded value does not conform to the response model.

    `errors` holds one {"field": ..., "message": ...} entry per failed check.
    """

    def __init__(
        self,
        message: str,
        errors: list[dict[str, str]] | None = None,
        value: Any = None,
    ):
        """
        Initialize schema validation error.

        Args:
            message: Error description
            errors: Field-level errors ({"field": "name", "message": "too short"})
            value: The decoded value that failed validation
        """
        details: dict[str, Any] = {}
        if errors:
            details["validation_errors"] = errors

        super().__init__(message, details)
        self.errors = errors or []
        self.value = value
