"""
Abstract base adapter for LLM providers.

Defines the hook contract the retry engine drives. One concrete adapter per
provider turns generic params into that provider's request payload and back.
The library ships no provider adapters; applications implement the four
required hooks (and optionally extract_usage) for the API they call.
"""

from abc import ABC, abstractmethod
from typing import Any

import structlog

from instruct_lite.models.options import InstructOptions
from instruct_lite.prompts.builder import PromptBuilder
from instruct_lite.validation.json_decode import decode_json_object

logger = structlog.get_logger(__name__)


class BaseAdapter(ABC):
    """
    Abstract base class for provider adapters.

    Responsibilities:
    - Attach the JSON Schema / tool definition to the request params
    - Send the request to the provider
    - Append corrective feedback to the params on retry
    - Locate the structured output in the provider response
    - Report token usage (optional)

    Does NOT handle:
    - Schema validation (that's ResponseValidator's job)
    - Retry decisions (that's RetryEngine's job)

    Connection-level retries (network errors) MAY be handled internally
    by send_request.
    """

    _prompt_builder: PromptBuilder | None = None

    @property
    def prompt_builder(self) -> PromptBuilder:
        # Lazy so subclasses are free to define their own __init__
        if self._prompt_builder is None:
            self._prompt_builder = PromptBuilder()
        return self._prompt_builder

    @abstractmethod
    def initial_prompt(self, params: dict[str, Any], opts: InstructOptions) -> dict[str, Any]:
        """
        Build the first request from the caller's params.

        Typically attaches opts.json_schema as a tool/format definition and
        prepends the system prompt. Must return a new dict.

        Args:
            params: Caller params (messages, model, sampling options, ...)
            opts: Resolved call options

        Returns:
            Params ready for send_request
        """

    @abstractmethod
    def send_request(self, params: dict[str, Any], opts: InstructOptions) -> Any:
        """
        Send the request to the provider.

        Args:
            params: Provider request params
            opts: Resolved call options (opts.adapter_context carries credentials)

        Returns:
            Raw provider response

        Raises:
            TransportError: Network/HTTP errors (never retried by the engine)
        """

    @abstractmethod
    def retry_prompt(
        self,
        params: dict[str, Any],
        resp_params: Any,
        errors: str,
        response: Any,
        opts: InstructOptions,
    ) -> dict[str, Any]:
        """
        Build the corrective request after a validation failure.

        Args:
            params: Params of the attempt that failed
            resp_params: Decoded value that failed validation (None if parsing failed)
            errors: Formatted validation errors
            response: Raw provider response of the failed attempt
            opts: Resolved call options

        Returns:
            New params for the next attempt
        """

    @abstractmethod
    def parse_response(self, response: Any, opts: InstructOptions) -> Any:
        """
        Locate the structured output in a provider response.

        Args:
            response: Raw provider response
            opts: Resolved call options

        Returns:
            Decoded value (usually a dict) to validate

        Raises:
            ResponseParseError: If the expected structure is missing
        """

    def extract_usage(self, response: Any) -> dict[str, Any]:
        """
        Report token usage for one response.

        Default implementation reports nothing. Subclasses override to
        return the provider's usage mapping (e.g. input_tokens/output_tokens).
        """
        return {}

    # Helpers for concrete adapters

    def system_prompt(self, opts: InstructOptions) -> str:
        """Render the structured-output system prompt for opts.json_schema."""
        return self.prompt_builder.build_system_prompt(opts.json_schema, opts.notes)

    def retry_message(self, errors: str) -> str:
        """Render the corrective follow-up message for formatted errors."""
        return self.prompt_builder.build_retry_prompt(errors)

    def decode_json(self, content: str | None, response: Any = None) -> dict:
        """Decode a JSON text payload, raising ResponseParseError on failure."""
        return decode_json_object(content, response=response)

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
