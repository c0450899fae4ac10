"""Exception hierarchy for the completion client.

Every failure of a completion call is raised as a subclass of
``CompletionError`` so callers can catch a single type.
"""
from typing import Optional


class CompletionError(Exception):
    """Base class for completion failures."""
    pass


class ConfigurationError(CompletionError):
    """Exception raised for configuration-related errors (missing credential, bad config)."""
    pass


class SerializationError(CompletionError):
    """The outgoing request could not be encoded."""
    pass


class NetworkError(CompletionError):
    """Transport-level failure: connection refused, DNS, timeout."""
    pass


class HTTPStatusError(CompletionError):
    """The API answered with a non-success status code."""

    def __init__(self, status_code: int, reason: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        msg = f"received non-success status code: {status_code}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class DecodeError(CompletionError):
    """The response body was not a valid completion response."""
    pass


class NoChoicesError(CompletionError):
    """The response parsed fine but carried no choices."""

    def __init__(self, message: str = "completion response contained no choices"):
        super().__init__(message)
