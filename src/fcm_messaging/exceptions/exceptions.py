"""Custom exceptions for message encoding, validation and delivery."""

from __future__ import annotations

from typing import Any


class FcmError(Exception):
    """Base exception for FCM messaging errors."""

    pass


class MissingRequiredConfigError(FcmError):
    """Raised when a required configuration value is missing."""

    pass


class FormatError(FcmError):
    """Raised when a wire value cannot be decoded (bad micro-format, unknown token, wrong type)."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class ValidationError(FcmError):
    """Raised when a message is well-formed but violates a cross-field rule."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class FcmAPIError(FcmError):
    """Raised when the FCM send request fails (network, auth or non-200 response)."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        error_code: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.error_code = error_code
        self.cause = cause
