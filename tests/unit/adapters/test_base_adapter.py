"""Unit tests for the BaseAdapter contract and helpers."""

import pytest

from instruct_lite.adapters.base import BaseAdapter
from instruct_lite.adapters.exceptions import (
    AdapterError,
    TransportError,
    UnexpectedResponseError,
)
from instruct_lite.models.options import InstructOptions
from instruct_lite.validation.exceptions import ResponseParseError


class MinimalAdapter(BaseAdapter):
    """Adapter implementing only the required hooks."""

    def initial_prompt(self, params, opts):
        return params

    def send_request(self, params, opts):
        return {}

    def retry_prompt(self, params, resp_params, errors, response, opts):
        return params

    def parse_response(self, response, opts):
        return response


@pytest.fixture
def options():
    return InstructOptions(
        response_model={"name": str},
        json_schema={"type": "object", "properties": {"name": {"type": "string"}}},
        notes="Use the full name.",
    )


def test_cannot_instantiate_without_required_hooks():
    class Incomplete(BaseAdapter):
        def initial_prompt(self, params, opts):
            return params

    with pytest.raises(TypeError):
        Incomplete()


def test_extract_usage_defaults_to_empty_record():
    assert MinimalAdapter().extract_usage({"usage": {"input_tokens": 1}}) == {}


def test_system_prompt_uses_options(options):
    prompt = MinimalAdapter().system_prompt(options)

    assert '"name"' in prompt
    assert "Use the full name." in prompt


def test_retry_message():
    message = MinimalAdapter().retry_message("- name: too short")

    assert "did not pass validation" in message
    assert "- name: too short" in message


def test_decode_json_helper():
    adapter = MinimalAdapter()

    assert adapter.decode_json('{"name": "John"}') == {"name": "John"}
    with pytest.raises(ResponseParseError):
        adapter.decode_json("I could not do that", response={"raw": True})


def test_prompt_builder_is_shared_per_instance():
    adapter = MinimalAdapter()

    assert adapter.prompt_builder is adapter.prompt_builder


def test_subclass_with_own_init_still_gets_helpers():
    class ConfiguredAdapter(MinimalAdapter):
        def __init__(self, model: str):
            self.model = model

    adapter = ConfiguredAdapter("test-model")

    assert "did not pass validation" in adapter.retry_message("- x: bad")
    assert adapter.name == "ConfiguredAdapter"


def test_adapter_errors_carry_details():
    error = TransportError("HTTP 503 from provider", {"status": 503})

    assert isinstance(error, AdapterError)
    assert error.message == "HTTP 503 from provider"
    assert error.details == {"status": 503}
    assert UnexpectedResponseError("bad envelope").details == {}
