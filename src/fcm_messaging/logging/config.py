# -*- coding: utf-8 -*-
"""Logging configuration for structlog + Logfire."""

from __future__ import annotations

import logging
import logfire
import structlog
from typing import Any, Optional
from structlog.types import EventDict, Processor
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from fcm_messaging.config import Settings, get_settings

# Map standard logging levels to Logfire levels
LOG_LEVEL_TO_LOGFIRE: dict[str, str] = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARNING": "warn",
    "ERROR": "error",
    "CRITICAL": "fatal",
}

# Event keys whose values are credentials and must never reach a handler.
REDACTED_KEYS: frozenset[str] = frozenset(
    {"access_token", "authorization", "token_value", "logfire_token"}
)


def _redact_credentials(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Replace credential values with a fixed marker."""
    for key in event_dict.keys() & REDACTED_KEYS:
        event_dict[key] = "***"
    return event_dict


def _service_context_processor(settings: Settings) -> Processor:
    """Return a processor attaching logger name and app/service identity to every event."""

    def _add_service_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        stdlib_logger = getattr(logger, "_logger", None)
        event_dict["logger"] = (
            getattr(stdlib_logger, "name", None) or getattr(logger, "name", "") or ""
        )
        app_settings = settings.app
        event_dict["app_name"] = app_settings.app_name
        if app_settings.service_name:
            event_dict["service_name"] = app_settings.service_name
        if app_settings.service_version:
            event_dict["service_version"] = app_settings.service_version
        event_dict["environment"] = app_settings.environment
        return event_dict

    return _add_service_context


def _build_handlers(settings: Settings) -> list[logging.Handler]:
    """Create stdlib handlers for the enabled local outputs (console, rotating file)."""
    logging_settings = settings.logging
    handlers: list[logging.Handler] = []

    if logging_settings.log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(
            getattr(logging, logging_settings.console_level.upper(), logging.INFO)
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    if logging_settings.log_to_file:
        log_file_path = Path(logging_settings.log_file_path)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            log_file_path,
            when=logging_settings.log_file_when,
            interval=logging_settings.log_file_interval,
            backupCount=logging_settings.log_file_backup_count,
            encoding="utf-8",
            utc=logging_settings.log_file_utc,
        )
        file_handler.setLevel(
            getattr(logging, logging_settings.file_level.upper(), logging.INFO)
        )
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    return handlers


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure stdlib handlers, structlog and (optionally) Logfire.

    Args:
        settings: Settings to use; defaults to the cached get_settings().
    """
    settings = settings or get_settings()
    app_settings = settings.app
    logging_settings = settings.logging

    handlers = _build_handlers(settings)
    if handlers:
        logging.basicConfig(
            level=min(h.level for h in handlers),
            handlers=handlers,
            force=True,
        )

    if logging_settings.logfire_enabled:
        logfire.configure(
            token=logging_settings.logfire_token,
            service_name=app_settings.service_name or app_settings.app_name,
            service_version=app_settings.service_version,
            min_level=LOG_LEVEL_TO_LOGFIRE.get(logging_settings.logfire_level, "info"),  # type: ignore[arg-type]
            environment=app_settings.environment,
        )

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _service_context_processor(settings),
        _redact_credentials,
    ]

    if logging_settings.logfire_enabled:
        processors.append(logfire.StructlogProcessor())  # type: ignore[arg-type]

    # File output is always structured JSON; console uses json_format unless file is also enabled.
    use_json = logging_settings.log_to_file or logging_settings.json_format
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer()
    )
    processors.append(renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
