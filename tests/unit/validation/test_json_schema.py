"""
Unit tests for JSONSchemaValidator.
"""

import pytest
from jsonschema.exceptions import SchemaError

from instruct_lite.validation.exceptions import SchemaValidationError
from instruct_lite.validation.json_schema import JSONSchemaValidator


class TestJSONSchemaValidator:
    """Test suite for jsonschema-backed validation."""

    def setup_method(self):
        """Setup test fixtures."""
        self.validator = JSONSchemaValidator(
            {
                "type": "object",
                "properties": {
                    "sentiment": {"type": "string", "enum": ["positive", "neutral", "negative"]},
                    "confidence": {"type": "number", "minimum": 0, "maximum": 1},
                    "tags": {"type": "array", "items": {"type": "string"}},
                },
                "required": ["sentiment", "confidence"],
                "additionalProperties": False,
            }
        )

    def test_valid_data_is_returned_unchanged(self):
        data = {"sentiment": "neutral", "confidence": 0.8}

        assert self.validator.validate(data) is data

    def test_missing_required_field_raises_error(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            self.validator.validate({"sentiment": "neutral"})

        assert "validation failed" in str(exc_info.value).lower()
        assert exc_info.value.errors == [
            {"field": "root", "message": "'confidence' is a required property"}
        ]

    def test_invalid_enum_value_raises_error(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            self.validator.validate({"sentiment": "ecstatic", "confidence": 0.8})

        assert exc_info.value.errors[0]["field"] == "sentiment"

    def test_nested_error_path_is_dotted(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            self.validator.validate({"sentiment": "neutral", "confidence": 0.8, "tags": ["ok", 3]})

        assert exc_info.value.errors[0]["field"] == "tags.1"

    def test_all_errors_are_collected(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            self.validator.validate({"sentiment": "ecstatic", "confidence": 2, "extra": True})

        assert len(exc_info.value.errors) == 3

    def test_invalid_schema_is_rejected(self):
        with pytest.raises(SchemaError):
            JSONSchemaValidator({"type": "object", "properties": {"a": {"type": "not-a-type"}}})
