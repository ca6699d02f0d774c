"""Dependency injection."""

from fcm_messaging.DI.container import Container

__all__ = ["Container"]
