"""
JSON Schema validation for schema-dict response models.

Used when the caller describes the expected output as a raw JSON Schema
instead of a pydantic model.
"""

from typing import Any

import structlog
from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError

from .exceptions import SchemaValidationError

logger = structlog.get_logger(__name__)


class JSONSchemaValidator:
    """
    Validate decoded values against a JSON Schema (Draft 7).

    Raises SchemaValidationError on schema violations.
    """

    def __init__(self, schema: dict[str, Any]):
        """
        Initialize schema validator.

        Args:
            schema: JSON Schema dict

        Raises:
            SchemaError: If the schema itself is invalid
        """
        try:
            Draft7Validator.check_schema(schema)
        except SchemaError:
            logger.error("Invalid JSON Schema supplied as response model")
            raise
        self.schema = schema
        self._validator = Draft7Validator(schema)

    def validate(self, data: Any) -> dict:
        """
        Validate data against the JSON Schema.

        Args:
            data: Decoded value to validate

        Returns:
            The same value, unchanged

        Raises:
            SchemaValidationError: If data doesn't conform to schema
        """
        errors = list(self._validator.iter_errors(data))

        if errors:
            field_errors = [
                {
                    "field": ".".join(str(p) for p in error.path) if error.path else "root",
                    "message": error.message,
                }
                for error in errors
            ]
            raise SchemaValidationError(
                f"JSON Schema validation failed with {len(errors)} error(s)",
                errors=field_errors,
                value=data,
            )

        logger.debug("Validated against JSON Schema")
        return data
