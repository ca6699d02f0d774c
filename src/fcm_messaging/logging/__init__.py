"""Logging subpackage (structlog configuration)."""
