"""Error taxonomy raised by Cloudinary API client operations."""

from __future__ import annotations

from typing import Any


class CloudinaryError(RuntimeError):
    """Base error raised by Cloudinary client operations."""


class ConfigurationError(CloudinaryError, ValueError):
    """Raised when account credentials or connection options are malformed."""


class TransportError(CloudinaryError):
    """Raised when the network call cannot complete."""


class CancelledError(CloudinaryError):
    """Raised when the caller's context is cancelled or its deadline passes mid-call."""


class DecodeError(CloudinaryError):
    """Raised when a response body is not valid JSON or does not match the result shape.

    ``result`` holds whatever could be decoded before the failure.
    """

    def __init__(self, message: str, *, result: Any = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.result = result
        self.status_code = status_code


class ServiceError(CloudinaryError):
    """Raised when the service processed the request but reported a failure.

    The decoded result stays available on ``result``: the service may return a
    partially populated payload next to its error record.
    """

    def __init__(self, *, message: str, status_code: int, result: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.result = result

    def __str__(self) -> str:
        return f"{self.message} (status {self.status_code})"
