"""Render validation errors as text the model can act on."""

from .exceptions import SchemaValidationError, ValidationError


def format_errors(error: ValidationError, limit: int | None = None) -> str:
    """
    Format a validation error as one bullet per problem.

    Args:
        error: Error raised while parsing or validating a response
        limit: Maximum number of bullets (the rest are summarized)

    Returns:
        Newline-separated bullets, e.g. "- name: too short"

    Examples:
        >>> format_errors(SchemaValidationError("bad", errors=[{"field": "age", "message": "Field required"}]))
        '- age: Field required'
    """
    if isinstance(error, SchemaValidationError) and error.errors:
        lines = [f"- {e['field']}: {e['message']}" for e in error.errors]
    else:
        lines = [f"- {error.message}"]

    if limit is not None and len(lines) > limit:
        hidden = len(lines) - limit
        lines = lines[:limit] + [f"- ... and {hidden} more error(s)"]

    return "\n".join(lines)
