"""
Errors raised while fetching world-state data.

Every failure of a fetch surfaces as a FetchError subclass. The response
cache passes these through untouched, so callers only ever need to catch
FetchError to handle a failed refresh.
"""

from __future__ import annotations

from typing import Any


class FetchError(Exception):
    """Base exception for failed world-state fetches."""

    def __init__(
        self,
        message: str,
        *,
        resource: str | None = None,
        platform: Any = None,
        language: Any = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.resource = resource
        self.platform = platform
        self.language = language
        self.details = details or {}
        super().__init__(message)


class TransportError(FetchError):
    """The request could not be sent or no response was received."""


class HTTPStatusError(FetchError):
    """The endpoint answered with a non-success status code."""

    def __init__(self, message: str, *, status: int, **kwargs: Any):
        self.status = status
        super().__init__(message, **kwargs)


class DecodeError(FetchError):
    """The response body was not JSON or did not match the expected shape."""


__all__ = ["DecodeError", "FetchError", "HTTPStatusError", "TransportError"]
