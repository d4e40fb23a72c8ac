"""Prometheus metrics for instruct-lite.

Counters live in the default registry; applications expose them through
whatever /metrics endpoint they already run.
"""

from prometheus_client import Counter

# === Attempt Metrics ===

attempts_total = Counter(
    "instruct_attempts_total",
    "Total request/parse/validate attempts by adapter and outcome",
    ["adapter", "outcome"],
)
"""
Attempts counter.

Labels:
- adapter: Adapter class name
- outcome: success, validation_failed, parse_failed
"""

# === Validation Metrics ===

validation_failures_total = Counter(
    "instruct_validation_failures_total",
    "Total validation failures by error type",
    ["error_type"],
)
"""
Validation failures counter.

Labels:
- error_type: ResponseParseError, SchemaValidationError, ValidationError
"""

# === Retry Metrics ===

retries_total = Counter(
    "instruct_retries_total",
    "Total corrective retries issued by adapter",
    ["adapter"],
)

# === Usage Metrics ===

tokens_total = Counter(
    "instruct_tokens_total",
    "Total tokens reported by adapters, by token key",
    ["adapter", "token_type"],
)
"""
Token consumption counter.

Labels:
- adapter: Adapter class name
- token_type: Provider-defined usage key (input_tokens, output_tokens, ...)

Only top-level integer usage entries are counted.
"""
