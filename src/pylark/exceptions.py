"""Custom exceptions for the pylark client."""

from __future__ import annotations


class PylarkError(Exception):
    """Base exception for all pylark client errors."""


class PylarkURLError(PylarkError):
    """Raised when a request cannot be turned into a valid absolute URL."""


class PylarkConnectionError(PylarkError):
    """Raised when the client cannot connect to the API."""


class PylarkTimeoutError(PylarkError, TimeoutError):
    """Raised when a request exceeds its deadline."""


class PylarkHTTPError(PylarkError):
    """Raised for any non-2xx answer.

    Catch this type to tell a rejected request from connection or timeout
    failures. ``message`` is the response body exactly as received, so API
    error payloads such as ``{"error": "..."}`` can be inspected.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class PylarkValidationError(PylarkError):
    """Raised when response data does not fit the requested shape."""
