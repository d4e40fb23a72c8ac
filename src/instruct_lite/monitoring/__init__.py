"""Monitoring and metrics instrumentation for instruct-lite.

Exports Prometheus counters for attempts, retries, validation failures and
token usage.
"""

from instruct_lite.monitoring.metrics import (
    attempts_total,
    retries_total,
    tokens_total,
    validation_failures_total,
)

__all__ = [
    "attempts_total",
    "retries_total",
    "tokens_total",
    "validation_failures_total",
]
