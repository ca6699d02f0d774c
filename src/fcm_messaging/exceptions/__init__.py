"""Exceptions subpackage."""

from fcm_messaging.exceptions.exceptions import (
    FcmAPIError,
    FcmError,
    FormatError,
    MissingRequiredConfigError,
    ValidationError,
)

__all__ = [
    "FcmAPIError",
    "FcmError",
    "FormatError",
    "MissingRequiredConfigError",
    "ValidationError",
]
