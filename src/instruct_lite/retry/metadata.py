"""
Usage metadata tracking.

This module defines the UsageMetadata dataclass that captures token usage
for every attempt of one instruct() call, plus their key-wise sum.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def merge_usage(total: Mapping[str, Any], usage: Mapping[str, Any]) -> dict[str, Any]:
    """
    Key-wise sum of two usage records.

    Numbers are added, nested mappings are merged recursively and any other
    value keeps the most recent one. Neither input is mutated.

    Examples:
        >>> merge_usage({"input_tokens": 100}, {"input_tokens": 20, "output_tokens": 5})
        {'input_tokens': 120, 'output_tokens': 5}
    """
    merged = dict(total)
    for key, value in usage.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_usage(current, value)
        elif _is_number(current) and _is_number(value):
            merged[key] = current + value
        else:
            merged[key] = value
    return merged


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class UsageMetadata:
    """
    Token usage across all attempts of one instruct() call.

    Returned alongside the result (or attached to RetryExhausted) when the
    caller asks for usage. Adapters without usage extraction contribute an
    empty record per attempt, so `total` stays empty.

    Attributes:
        total: Key-wise sum of all attempt records
        attempts: Per-attempt usage records, oldest first
    """

    total: dict[str, Any] = field(default_factory=dict)
    attempts: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_attempts(cls, attempts: list[dict[str, Any]]) -> "UsageMetadata":
        """Build metadata from per-attempt records, computing the total."""
        total: dict[str, Any] = {}
        for usage in attempts:
            total = merge_usage(total, usage)
        return cls(total=total, attempts=list(attempts))

    @property
    def attempt_count(self) -> int:
        return len(self.attempts)
