# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, FCM__PROJECT_ID.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "fcm-messaging"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Local outputs
    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/fcm_messaging.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    # Logfire integration via structlog
    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class FcmSettings(BaseSettings):
    """Firebase Cloud Messaging HTTP v1 endpoint and credentials (from env FCM__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    project_id: Optional[str] = Field(
        default=None,
        description="Firebase project ID used to build the send URL.",
    )
    endpoint: str = Field(
        default="https://fcm.googleapis.com/v1",
        description="FCM API base URL (without /projects/...).",
    )
    access_token: Optional[str] = Field(
        default=None,
        description="OAuth2 bearer token used by the static token provider.",
    )
    timeout_seconds: float = Field(
        default=15.0,
        ge=1.0,
        le=120.0,
        description="HTTP request timeout in seconds.",
    )
    validate_only: bool = Field(
        default=False,
        description="Ask FCM to validate the message without delivering it.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, FCM__PROJECT_ID.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    fcm: FcmSettings = Field(default_factory=FcmSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.:
        - from_env(fcm={"project_id": "my-project"})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from fcm_messaging.config import get_settings

        settings = get_settings()
        project_id = settings.fcm.project_id
    """
    return Settings()
