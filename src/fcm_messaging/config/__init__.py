"""Configuration subpackage."""

from fcm_messaging.config.config import (
    AppSettings,
    FcmSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "FcmSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
