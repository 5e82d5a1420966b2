"""Errors raised by the client.

Every failure surfaces as an :class:`ApiError` subclass. ``retryable`` tells
callers whether backing off and sending the same request again can succeed;
the library itself never retries.
"""
from __future__ import annotations


class ApiError(Exception):
    """Base class for all client errors."""

    retryable = False


class TooManyRequestsError(ApiError):
    """HTTP 429: the caller exceeded its current task quota."""

    retryable = True

    def __init__(self) -> None:
        super().__init__(
            "You are trying to send too many requests to the API in too short an interval. "
            "Slow down a bit, otherwise these errors will persist."
        )


class BusyError(ApiError):
    """HTTP 503: the requested model is overloaded right now."""

    retryable = True

    def __init__(self) -> None:
        super().__init__(
            "The request has been rejected because the requested model is very busy at the "
            "moment. It was rejected right away rather than making you wait. You are welcome "
            "to retry your request any time."
        )


class HttpError(ApiError):
    """Any other non-success status. ``body`` keeps the raw response text."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"HTTP request failed with status code {status}. Body:\n{body}")
        self.status = status
        self.body = body


class ClientError(ApiError):
    """Connection, TLS or IO failure below the HTTP layer."""

    retryable = True


class DeserializeError(ApiError):
    """Response body is not valid JSON or does not match the expected shape."""


class EmptyCompletionsError(DeserializeError):
    """A completion response carried no completions."""


class TokenizerError(ApiError):
    """Downloaded tokenizer blob could not be loaded."""
