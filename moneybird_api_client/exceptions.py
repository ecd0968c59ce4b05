"""
Custom exception types for the Moneybird API client.

These exceptions allow callers to distinguish between configuration
mistakes, network failures and responses whose status code does not
match what the requested operation expects.
"""

from __future__ import annotations


class MoneybirdError(Exception):
    """Base exception for all Moneybird client errors."""


class ConfigurationError(MoneybirdError):
    """Raised when a call is attempted without an access token."""


class IncompatiblePlatformError(MoneybirdError):
    """Raised when the interpreter lacks what the client needs to talk HTTPS."""


class UnknownResourceError(MoneybirdError):
    """Raised when a resource name outside the supported set is requested."""


class TransportError(MoneybirdError):
    """Raised when the HTTP request could not be completed.

    ``code`` identifies the underlying failure (DNS, connect, TLS,
    timeout) and ``message`` carries the human readable detail.
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class UnexpectedStatusError(MoneybirdError):
    """Raised when a response status differs from the one the operation expects."""

    def __init__(self, status_code: int, body: bytes, message: str = "") -> None:
        if not message:
            message = f"Unexpected HTTP status {status_code}: {_preview(body)}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class NotFoundError(UnexpectedStatusError):
    """Raised when the requested entity does not exist (HTTP 404)."""


class ResponseDecodeError(MoneybirdError):
    """Raised when a response body expected to hold JSON cannot be decoded."""

    def __init__(self, body: bytes, message: str) -> None:
        super().__init__(message)
        self.body = body


def _preview(body: bytes, limit: int = 200) -> str:
    text = body.decode("utf-8", errors="replace") if body else ""
    if len(text) > limit:
        return text[:limit] + "..."
    return text
