"""
Exceptions adapters raise for transport-level failures.

The retry engine never retries these: anything raised from send_request
propagates to the caller untouched. Only ResponseParseError (raised from
parse_response) and validation failures drive corrective retries.
"""


class AdapterError(Exception):
    """
    Base exception for all adapter errors.

    Catch this to handle any provider failure with a single except clause.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransportError(AdapterError):
    """
    Raised when the provider could not be reached or answered with an error.

    Examples:
    - Network errors, DNS failures, timeouts
    - HTTP 4xx/5xx from the provider API
    """
    pass


class UnexpectedResponseError(AdapterError):
    """
    Raised when the provider answered with a payload the adapter cannot use
    at all (e.g. an error envelope in a 200 response).
    """
    pass
