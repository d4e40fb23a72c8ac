"""
Top-level entry points.

- instruct(): full request/validate/retry loop
- prepare_prompt(): build the first request without sending it
- consume_response(): parse and validate a response obtained elsewhere

The last two let callers keep control of transport (batching, streaming,
their own HTTP client) while reusing the adapter and validation logic.
"""

from typing import Any, Optional

import structlog

from instruct_lite.config import Settings, settings as default_settings
from instruct_lite.models.options import InstructOptions
from instruct_lite.retry.engine import RetryEngine
from instruct_lite.validation.pipeline import ResponseValidator

logger = structlog.get_logger(__name__)


def _build_options(
    validator: ResponseValidator,
    settings: Settings,
    *,
    include_usage: bool = False,
    max_retries: Optional[int] = None,
    adapter_context: Optional[dict[str, Any]] = None,
    validation_context: Optional[dict[str, Any]] = None,
    json_schema: Optional[dict[str, Any]] = None,
    notes: Optional[str] = None,
) -> InstructOptions:
    if max_retries is None:
        max_retries = settings.DEFAULT_MAX_RETRIES
    if max_retries < 0:
        raise ValueError(f"max_retries must be >= 0 (got {max_retries})")

    return InstructOptions(
        response_model=validator.response_model,
        json_schema=json_schema if json_schema is not None else validator.json_schema,
        notes=notes,
        max_retries=max_retries,
        include_usage=include_usage,
        adapter_context=adapter_context or {},
        validation_context=validation_context,
    )


def instruct(
    params: dict[str, Any],
    *,
    response_model: Any,
    adapter: Any,
    include_usage: bool = False,
    max_retries: Optional[int] = None,
    adapter_context: Optional[dict[str, Any]] = None,
    validation_context: Optional[dict[str, Any]] = None,
    json_schema: Optional[dict[str, Any]] = None,
    notes: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Any:
    """
    Ask an LLM for structured output and validate it, retrying on failure.

    Args:
        params: Provider params (messages, model, sampling options, ...)
        response_model: Pydantic model class, field mapping or JSON Schema dict
        adapter: Provider adapter (BaseAdapter subclass or duck-typed equivalent)
        include_usage: Also return token usage across all attempts
        max_retries: Corrective retries after the first attempt
            (default: Settings.DEFAULT_MAX_RETRIES)
        adapter_context: Adapter-specific settings, exposed as opts.adapter_context
        validation_context: Context passed to pydantic validators
        json_schema: Override for the JSON Schema sent to the provider
        notes: Extra instructions about the schema for the system prompt
        settings: Library settings (defaults to the global instance)

    Returns:
        The validated value, or (value, UsageMetadata) when include_usage is True

    Raises:
        RetryExhausted: Validation failed on every attempt. `.error` holds the
            last validation error; `.metadata` holds UsageMetadata when
            include_usage is True and None otherwise.
        ValueError: If max_retries is negative
        Exception: Transport errors from adapter.send_request, unchanged

    Example:
        >>> user = instruct(
        ...     {"messages": [{"role": "user", "content": "John is 25 years old"}]},
        ...     response_model={"name": str, "age": int},
        ...     adapter=MyProviderAdapter(),
        ... )
    """
    settings = settings or default_settings
    validator = ResponseValidator(response_model)
    opts = _build_options(
        validator,
        settings,
        include_usage=include_usage,
        max_retries=max_retries,
        adapter_context=adapter_context,
        validation_context=validation_context,
        json_schema=json_schema,
        notes=notes,
    )

    engine = RetryEngine(adapter, validator, settings)
    value, metadata = engine.execute(params, opts)

    if include_usage:
        return value, metadata
    return value


def prepare_prompt(
    params: dict[str, Any],
    *,
    response_model: Any,
    adapter: Any,
    adapter_context: Optional[dict[str, Any]] = None,
    json_schema: Optional[dict[str, Any]] = None,
    notes: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> dict[str, Any]:
    """
    Build the first request params without sending anything.

    Returns:
        Params produced by adapter.initial_prompt
    """
    settings = settings or default_settings
    validator = ResponseValidator(response_model)
    opts = _build_options(
        validator,
        settings,
        adapter_context=adapter_context,
        json_schema=json_schema,
        notes=notes,
    )
    return adapter.initial_prompt(params, opts)


def consume_response(
    response: Any,
    *,
    response_model: Any,
    adapter: Any,
    adapter_context: Optional[dict[str, Any]] = None,
    validation_context: Optional[dict[str, Any]] = None,
    settings: Optional[Settings] = None,
) -> Any:
    """
    Parse a provider response with the adapter and validate it.

    Returns:
        The validated value

    Raises:
        ResponseParseError: The adapter could not find the structured output
        SchemaValidationError: The output does not match the response model
    """
    settings = settings or default_settings
    validator = ResponseValidator(response_model)
    opts = _build_options(
        validator,
        settings,
        adapter_context=adapter_context,
        validation_context=validation_context,
    )
    resp_params = adapter.parse_response(response, opts)
    logger.debug("Consuming response", adapter=type(adapter).__name__)
    return validator.validate(resp_params, opts.validation_context)
