"""
Retry engine with corrective feedback.

Main Components:
    - RetryEngine: Request/validate/retry loop driving an adapter
    - UsageMetadata: Per-attempt token usage and its key-wise total
    - RetryExhausted: Exception raised when the last attempt still fails

Usage:
    >>> from instruct_lite.retry import RetryEngine
    >>> engine = RetryEngine(adapter, validator, settings)
    >>> value, metadata = engine.execute(params, opts)
"""

from instruct_lite.retry.engine import RetryEngine
from instruct_lite.retry.exceptions import RetryExhausted
from instruct_lite.retry.metadata import UsageMetadata, merge_usage

__all__ = [
    "RetryEngine",
    "RetryExhausted",
    "UsageMetadata",
    "merge_usage",
]
