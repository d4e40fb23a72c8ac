"""
Adapter contract for LLM providers.

Components:
- BaseAdapter: Abstract base class with the hook contract and prompt helpers
- exceptions: Transport-level errors adapters raise from send_request
"""

from instruct_lite.adapters.base import BaseAdapter
from instruct_lite.adapters.exceptions import (
    AdapterError,
    TransportError,
    UnexpectedResponseError,
)

__all__ = [
    "BaseAdapter",
    "AdapterError",
    "TransportError",
    "UnexpectedResponseError",
]
