"""Message validation."""

from fcm_messaging.validation.validator import validate_message

__all__ = ["validate_message"]
