"""
Retry engine: request, validate, retry with corrective feedback.

Retry Policy:
    1. Build the initial prompt (adapter.initial_prompt)
    2. Send it (adapter.send_request); transport errors propagate immediately
    3. Parse (adapter.parse_response) and validate (ResponseValidator)
    4. On parse/validation failure, build a corrective prompt
       (adapter.retry_prompt) and go to 2, at most max_retries times
    5. When retries are exhausted, raise RetryExhausted

Usage:
    engine = RetryEngine(adapter, validator, settings)
    value, metadata = engine.execute(params, opts)
"""

from typing import Any, Optional

import structlog

from instruct_lite.config import Settings, settings as default_settings
from instruct_lite.models.options import InstructOptions
from instruct_lite.monitoring.metrics import (
    attempts_total,
    retries_total,
    tokens_total,
    validation_failures_total,
)
from instruct_lite.retry.exceptions import RetryExhausted
from instruct_lite.retry.metadata import UsageMetadata
from instruct_lite.validation.exceptions import ResponseParseError, ValidationError
from instruct_lite.validation.formatting import format_errors
from instruct_lite.validation.pipeline import ResponseValidator

logger = structlog.get_logger(__name__)


class RetryEngine:
    """
    Sequential request/validate/retry loop for one adapter and response model.

    The engine makes at most `opts.max_retries + 1` attempts. Each attempt
    sends the current params, optionally records usage, parses and validates
    the response. Usage records are kept in attempt order and summed into
    UsageMetadata on both the success and the failure path.

    Attributes:
        adapter: Provider adapter implementing the hook contract
        validator: Validator for the response model
        settings: Library settings
    """

    def __init__(
        self,
        adapter: Any,
        validator: ResponseValidator,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize retry engine.

        Args:
            adapter: BaseAdapter subclass instance, or any object with the same hooks
            validator: Validator for the response model
            settings: Library settings (defaults to the global instance)
        """
        self.adapter = adapter
        self.validator = validator
        self.settings = settings or default_settings
        self.adapter_name = type(adapter).__name__

        # Usage extraction is optional per adapter, not per attempt
        self._usage_extractor = getattr(adapter, "extract_usage", None)

        logger.debug(
            "RetryEngine initialized",
            adapter=self.adapter_name,
            response_model_kind=validator.kind,
            extracts_usage=self._usage_extractor is not None,
        )

    def execute(
        self, params: dict[str, Any], opts: InstructOptions
    ) -> tuple[Any, Optional[UsageMetadata]]:
        """
        Run the full request/validate/retry loop.

        Args:
            params: Caller params, before adapter.initial_prompt
            opts: Resolved call options

        Returns:
            Tuple of (validated value, usage metadata or None if not requested)

        Raises:
            RetryExhausted: Validation still failing after max_retries retries
            Exception: Whatever adapter.send_request raises (never retried)
        """
        attempt = 0
        usage_attempts: list[dict[str, Any]] = []
        current_params = self.adapter.initial_prompt(params, opts)

        logger.info(
            "Starting instruct execution",
            adapter=self.adapter_name,
            max_retries=opts.max_retries,
            include_usage=opts.include_usage,
        )

        while True:
            response = self.adapter.send_request(current_params, opts)

            if opts.include_usage:
                usage_attempts.append(self._extract_usage(response))

            resp_params = None
            try:
                resp_params = self.adapter.parse_response(response, opts)
                value = self.validator.validate(resp_params, opts.validation_context)

            except ValidationError as e:
                self._record_failure(e)

                logger.warning(
                    f"Validation failed on attempt {attempt + 1}",
                    adapter=self.adapter_name,
                    attempt=attempt + 1,
                    error_type=type(e).__name__,
                    error_details=e.details,
                )

                if attempt >= opts.max_retries:
                    metadata = self._build_metadata(usage_attempts, opts)
                    logger.error(
                        "Retries exhausted",
                        adapter=self.adapter_name,
                        total_attempts=attempt + 1,
                        final_error_type=type(e).__name__,
                    )
                    raise RetryExhausted(error=e, attempts=attempt + 1, metadata=metadata) from e

                errors = format_errors(e, limit=self.settings.MAX_ERRORS_IN_RETRY)
                current_params = self.adapter.retry_prompt(
                    current_params, resp_params, errors, response, opts
                )
                attempt += 1

                if self.settings.PROMETHEUS_ENABLED:
                    retries_total.labels(adapter=self.adapter_name).inc()
                logger.info(
                    f"Retrying (attempt {attempt + 1}/{opts.max_retries + 1})",
                    adapter=self.adapter_name,
                    next_attempt=attempt + 1,
                )
                continue

            if self.settings.PROMETHEUS_ENABLED:
                attempts_total.labels(adapter=self.adapter_name, outcome="success").inc()

            logger.info(
                "Instruct succeeded",
                adapter=self.adapter_name,
                total_attempts=attempt + 1,
            )
            return value, self._build_metadata(usage_attempts, opts)

    def _extract_usage(self, response: Any) -> dict[str, Any]:
        if self._usage_extractor is None:
            return {}

        usage = self._usage_extractor(response) or {}

        if self.settings.PROMETHEUS_ENABLED:
            for token_type, count in usage.items():
                if isinstance(count, int) and not isinstance(count, bool) and count >= 0:
                    tokens_total.labels(adapter=self.adapter_name, token_type=token_type).inc(count)

        return dict(usage)

    def _record_failure(self, error: ValidationError) -> None:
        if not self.settings.PROMETHEUS_ENABLED:
            return
        outcome = "parse_failed" if isinstance(error, ResponseParseError) else "validation_failed"
        attempts_total.labels(adapter=self.adapter_name, outcome=outcome).inc()
        validation_failures_total.labels(error_type=type(error).__name__).inc()

    @staticmethod
    def _build_metadata(
        usage_attempts: list[dict[str, Any]], opts: InstructOptions
    ) -> Optional[UsageMetadata]:
        if not opts.include_usage:
            return None
        return UsageMetadata.from_attempts(usage_attempts)
