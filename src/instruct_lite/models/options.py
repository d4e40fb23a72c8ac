"""
Per-call options handed to every adapter hook.

This is the standardized `opts` argument adapters receive. It abstracts away
how the caller spelled the options and carries the resolved JSON Schema so
adapters never have to inspect the response model themselves.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class InstructOptions(BaseModel):
    """
    Resolved options for one instruct() call.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    response_model: Any = Field(..., description="Pydantic model, field mapping or JSON Schema")
    json_schema: dict[str, Any] = Field(..., description="JSON Schema adapters attach to the request")
    notes: Optional[str] = Field(default=None, description="Extra instructions appended to the system prompt")
    max_retries: int = Field(default=0, ge=0, description="Retries after the first attempt")
    include_usage: bool = Field(default=False, description="Whether usage metadata is returned")
    adapter_context: dict[str, Any] = Field(
        default_factory=dict,
        description="Adapter-specific settings (api key, model name, endpoint, ...)"
    )
    validation_context: Optional[dict[str, Any]] = Field(
        default=None,
        description="Context passed to pydantic validators"
    )
