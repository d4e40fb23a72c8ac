"""
Unit tests for format_errors.
"""

from instruct_lite.validation.exceptions import (
    ResponseParseError,
    SchemaValidationError,
    ValidationError,
)
from instruct_lite.validation.formatting import format_errors


def test_schema_errors_one_bullet_per_field():
    error = SchemaValidationError(
        "Model validation failed: 2 error(s)",
        errors=[
            {"field": "name", "message": "too short"},
            {"field": "age", "message": "Field required"},
        ],
    )

    assert format_errors(error) == "- name: too short\n- age: Field required"


def test_parse_error_uses_message():
    error = ResponseParseError("Tool call not found in response")

    assert format_errors(error) == "- Tool call not found in response"


def test_generic_validation_error_uses_message():
    assert format_errors(ValidationError("Unexpected validation error: boom")) == (
        "- Unexpected validation error: boom"
    )


def test_schema_error_without_field_errors_uses_message():
    assert format_errors(SchemaValidationError("Schema mismatch")) == "- Schema mismatch"


def test_limit_summarizes_remaining_errors():
    error = SchemaValidationError(
        "failed",
        errors=[{"field": f"f{i}", "message": "bad"} for i in range(5)],
    )

    assert format_errors(error, limit=2) == "- f0: bad\n- f1: bad\n- ... and 3 more error(s)"


def test_limit_not_reached():
    error = SchemaValidationError("failed", errors=[{"field": "a", "message": "bad"}])

    assert format_errors(error, limit=20) == "- a: bad"
