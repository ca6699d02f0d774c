# -*- coding: utf-8 -*-
"""WebPush-specific message options."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class WebpushNotificationAction:
    """An action offered to the user on a WebPush notification."""

    action: Optional[str] = None
    title: Optional[str] = None
    icon: Optional[str] = None


@dataclass(frozen=True, slots=True)
class WebpushNotification:
    """Notification sent via the WebPush protocol.

    Extensible record: custom_data entries are merged flat next to the standard
    fields on the wire, and recovered on decode from whatever keys are not
    standard. A custom key must not reuse a standard key name.
    """

    actions: list[WebpushNotificationAction] = field(default_factory=list)
    title: Optional[str] = None
    body: Optional[str] = None
    icon: Optional[str] = None
    badge: Optional[str] = None
    direction: Optional[str] = None
    """One of "auto", "ltr" or "rtl" (wire key "dir")."""
    data: Any = None
    image: Optional[str] = None
    language: Optional[str] = None
    renotify: bool = False
    require_interaction: bool = False
    silent: bool = False
    tag: Optional[str] = None
    timestamp_millis: Optional[int] = None
    vibrate: list[int] = field(default_factory=list)
    custom_data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class WebpushFcmOptions:
    link: Optional[str] = None
    """HTTPS URL opened when the user clicks the notification."""


@dataclass(frozen=True, slots=True)
class WebpushConfig:
    """Messaging options specific to the WebPush protocol (RFC 8030)."""

    headers: dict[str, str] = field(default_factory=dict)
    data: dict[str, str] = field(default_factory=dict)
    notification: Optional[WebpushNotification] = None
    fcm_options: Optional[WebpushFcmOptions] = None
