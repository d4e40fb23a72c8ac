"""Unit test fixtures (scripted adapters).

Provides adapters that replay canned provider responses so the retry
engine can be exercised without any network access.
"""

from typing import Any

import pytest

from instruct_lite.adapters.base import BaseAdapter
from instruct_lite.validation.exceptions import ResponseParseError


class ScriptedAdapter(BaseAdapter):
    """Tool-use adapter replaying `responses` in order (last one repeats).

    Does not override extract_usage, so it reports no usage.
    """

    def __init__(self, responses: list[Any]):
        self.responses = list(responses)
        self.sent_params: list[dict] = []
        self.retry_calls: list[dict] = []

    def initial_prompt(self, params, opts):
        return {**params, "tools": [{"name": "Schema", "input_schema": opts.json_schema}]}

    def send_request(self, params, opts):
        self.sent_params.append(params)
        index = min(len(self.sent_params), len(self.responses)) - 1
        return self.responses[index]

    def retry_prompt(self, params, resp_params, errors, response, opts):
        self.retry_calls.append(
            {
                "params": params,
                "resp_params": resp_params,
                "errors": errors,
                "response": response,
            }
        )
        messages = params["messages"] + [
            {"role": "user", "content": self.retry_message(errors)}
        ]
        return {**params, "messages": messages, "retry": True}

    def parse_response(self, response, opts):
        try:
            return response["content"][0]["input"]
        except (KeyError, IndexError, TypeError) as e:
            raise ResponseParseError(
                "Tool call not found in response",
                reason="unexpected_response",
                response=response,
            ) from e


class UsageReportingAdapter(ScriptedAdapter):
    """ScriptedAdapter that also reports the response's `usage` mapping."""

    def extract_usage(self, response):
        return response.get("usage")


@pytest.fixture
def scripted_adapter():
    """Factory fixture for ScriptedAdapter (no usage extraction)."""
    def _create(*responses: Any) -> ScriptedAdapter:
        return ScriptedAdapter(list(responses))

    return _create


@pytest.fixture
def usage_adapter():
    """Factory fixture for UsageReportingAdapter."""
    def _create(*responses: Any) -> UsageReportingAdapter:
        return UsageReportingAdapter(list(responses))

    return _create
