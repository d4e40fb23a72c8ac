"""
Retry engine exceptions.

This module defines the exception raised when the last attempt of an
instruct() call still fails validation.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from instruct_lite.retry.metadata import UsageMetadata
    from instruct_lite.validation.exceptions import ValidationError


class RetryExhausted(Exception):
    """
    Raised when validation still fails after max_retries retries.

    Attributes:
        error: Final ValidationError (parse or schema failure)
        metadata: Usage across all attempts, or None when usage was not requested
        attempts: Number of attempts made
    """

    def __init__(
        self,
        error: "ValidationError",
        attempts: int,
        metadata: Optional["UsageMetadata"] = None,
    ) -> None:
        """
        Initialize RetryExhausted exception.

        Args:
            error: Final ValidationError
            attempts: Number of attempts made
            metadata: Usage metadata (only when include_usage was requested)
        """
        self.error = error
        self.attempts = attempts
        self.metadata = metadata

        super().__init__(
            f"Validation failed after {attempts} attempt(s). "
            f"Final error: {type(error).__name__}: {error.message}"
        )
