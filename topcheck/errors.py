"""Exceptions used inside the TopCheck client.

None of these reach callers of :class:`~topcheck.TopcheckApiClient`; the client
turns them into error envelopes.
"""

from __future__ import annotations


class TopcheckError(Exception):
    """Base class for client-internal errors."""


class TransportError(TopcheckError):
    """Raised when every attempt to reach the server failed."""

    def __init__(self, method: str, url: str, attempts: int, cause: BaseException | None):
        self.method = method
        self.url = url
        self.attempts = attempts
        self.cause = cause
        super().__init__(f"{method} {url} failed after {attempts} attempts: {cause}")


class PayloadEncodingError(TopcheckError):
    """Raised when a request payload cannot be JSON-encoded."""


__all__ = ["PayloadEncodingError", "TopcheckError", "TransportError"]
