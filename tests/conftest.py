"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across the unit tests.
"""

from typing import Any, Dict

import pytest
from pydantic import BaseModel, field_validator

from instruct_lite.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.DEFAULT_MAX_RETRIES = 2
    """
    return Settings(
        APP_NAME="instruct-lite (Test)",
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        DEFAULT_MAX_RETRIES=0,
        MAX_ERRORS_IN_RETRY=20,
        PROMETHEUS_ENABLED=False,  # Disable metrics in tests unless explicitly needed
    )


@pytest.fixture
def user_params() -> Dict[str, Any]:
    """Minimal caller params with a single user message."""
    return {"messages": [{"role": "user", "content": "test"}]}


@pytest.fixture
def tool_response():
    """Factory fixture building a tool-use style provider response.

    Usage:
        def test_something(tool_response):
            response = tool_response({"name": "John", "age": 25}, usage={"input_tokens": 100})
    """
    def _create(
        decoded: Any,
        usage: Dict[str, Any] | None = None,
        stop_reason: str = "tool_use",
    ) -> Dict[str, Any]:
        response = {
            "content": [{"input": decoded}],
            "stop_reason": stop_reason,
        }
        if usage is not None:
            response["usage"] = usage
        return response

    return _create


class Person(BaseModel):
    """Person with a name of at least two characters."""

    name: str
    age: int

    @field_validator("name")
    @classmethod
    def name_not_too_short(cls, value: str) -> str:
        if len(value) < 2:
            raise ValueError("too short")
        return value


@pytest.fixture
def person_model() -> type[Person]:
    """Pydantic response model rejecting one-letter names."""
    return Person
