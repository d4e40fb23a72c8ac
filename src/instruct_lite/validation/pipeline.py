"""
Response validation: turn a decoded value into a typed result.

Three response model kinds are supported:
- pydantic BaseModel subclass: validated with model_validate (result is the instance)
- field mapping ({"name": str, "age": int}): a model is built on the fly
  (result is a plain dict of the validated fields)
- JSON Schema dict: validated with jsonschema (result is the decoded dict)

Pydantic and jsonschema failures are converted to SchemaValidationError so the
retry engine only ever sees this package's ValidationError hierarchy.
"""

import typing
from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import BaseModel, create_model
from pydantic import ValidationError as PydanticValidationError

from .exceptions import SchemaValidationError, ValidationError
from .json_schema import JSONSchemaValidator

logger = structlog.get_logger(__name__)

PYDANTIC_MODEL = "pydantic_model"
FIELD_MAP = "field_map"
JSON_SCHEMA = "json_schema"


def _is_type_like(value: Any) -> bool:
    return isinstance(value, type) or typing.get_origin(value) is not None


def _is_json_schema(mapping: Mapping) -> bool:
    return "properties" in mapping or isinstance(mapping.get("type"), str)


def _field_definition(value: Any) -> tuple:
    # (type, default) pairs pass through; bare types become required fields
    if isinstance(value, tuple):
        return value
    return (value, ...)


class ResponseValidator:
    """
    Validator bound to a single response model.

    Attributes:
        response_model: The model descriptor as given by the caller
        kind: One of "pydantic_model", "field_map", "json_schema"
        model: Pydantic model used for validation (None for JSON Schema)
    """

    def __init__(self, response_model: Any):
        """
        Initialize validator for a response model.

        Args:
            response_model: Pydantic model class, field mapping or JSON Schema dict

        Raises:
            TypeError: If the descriptor is none of the supported kinds
        """
        self.response_model = response_model
        self.model: type[BaseModel] | None = None
        self._schema_validator: JSONSchemaValidator | None = None

        if isinstance(response_model, type) and issubclass(response_model, BaseModel):
            self.kind = PYDANTIC_MODEL
            self.model = response_model
        elif isinstance(response_model, Mapping) and _is_json_schema(response_model):
            self.kind = JSON_SCHEMA
            self._schema_validator = JSONSchemaValidator(dict(response_model))
        elif isinstance(response_model, Mapping) and response_model and all(
            _is_type_like(v) or isinstance(v, tuple) for v in response_model.values()
        ):
            self.kind = FIELD_MAP
            self.model = create_model(
                "ResponseModel",
                **{name: _field_definition(tp) for name, tp in response_model.items()},
            )
        else:
            raise TypeError(
                "response_model must be a pydantic BaseModel subclass, a mapping of "
                f"field names to types, or a JSON Schema dict (got {response_model!r})"
            )

        logger.debug("ResponseValidator initialized", kind=self.kind)

    @property
    def json_schema(self) -> dict[str, Any]:
        """JSON Schema describing the expected output, for adapters."""
        if self._schema_validator is not None:
            return self._schema_validator.schema
        return self.model.model_json_schema()

    def validate(self, data: Any, context: dict[str, Any] | None = None) -> Any:
        """
        Validate a decoded value against the response model.

        Args:
            data: Value returned by the adapter's parse_response
            context: Validation context passed to pydantic validators

        Returns:
            Model instance (pydantic), dict (field mapping, JSON Schema)

        Raises:
            SchemaValidationError: If data doesn't conform to the model
            ValidationError: If validation failed unexpectedly
        """
        try:
            if self._schema_validator is not None:
                return self._schema_validator.validate(data)

            try:
                instance = self.model.model_validate(data, context=context)
            except PydanticValidationError as e:
                field_errors = [
                    {
                        "field": ".".join(str(loc) for loc in err["loc"]) or "root",
                        "message": err["msg"],
                    }
                    for err in e.errors()
                ]
                raise SchemaValidationError(
                    f"Model validation failed: {len(field_errors)} error(s)",
                    errors=field_errors,
                    value=data,
                ) from e

            if self.kind == FIELD_MAP:
                return instance.model_dump()
            return instance

        except ValidationError:
            raise
        except Exception as e:
            logger.exception("Unexpected error during validation", error=str(e))
            raise ValidationError(
                f"Unexpected validation error: {str(e)}",
                details={"error_type": type(e).__name__},
            ) from e
