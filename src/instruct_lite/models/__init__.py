"""
Pydantic data models for instruct-lite.
"""

from instruct_lite.models.options import InstructOptions

__all__ = [
    "InstructOptions",
]
