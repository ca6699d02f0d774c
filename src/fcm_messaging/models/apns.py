# -*- coding: utf-8 -*-
"""APNs-specific message options: APNSConfig, APNSPayload and the aps dictionary.

Two unions are modelled as pairs of fields, of which at most one may be set:
alert_string / alert and sound / critical_sound. Both are written under a
single wire key ("alert", "sound").
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class ApsAlert:
    """Structured alert of the aps dictionary."""

    title: Optional[str] = None
    subtitle: Optional[str] = None
    body: Optional[str] = None
    loc_key: Optional[str] = None
    loc_args: list[str] = field(default_factory=list)
    title_loc_key: Optional[str] = None
    title_loc_args: list[str] = field(default_factory=list)
    subtitle_loc_key: Optional[str] = None
    subtitle_loc_args: list[str] = field(default_factory=list)
    action_loc_key: Optional[str] = None
    launch_image: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CriticalSound:
    """Structured sound of the aps dictionary (critical alerts)."""

    critical: bool = False
    """Sent as integer 1 on the wire; omitted when False."""
    name: Optional[str] = None
    volume: Optional[float] = None
    """Between 0 and 1 inclusive."""


@dataclass(frozen=True, slots=True)
class Aps:
    """The aps dictionary.

    Extensible record: custom_data is merged flat beside the standard keys.
    content_available and mutable_content travel as integer 1 (omitted when False).
    """

    alert_string: Optional[str] = None
    alert: Optional[ApsAlert] = None
    badge: Optional[int] = None
    sound: Optional[str] = None
    critical_sound: Optional[CriticalSound] = None
    content_available: bool = False
    mutable_content: bool = False
    category: Optional[str] = None
    thread_id: Optional[str] = None
    custom_data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class APNSPayload:
    """APNs payload: the aps dictionary plus arbitrary top-level custom keys."""

    aps: Optional[Aps] = None
    custom_data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class APNSFcmOptions:
    analytics_label: Optional[str] = None
    image: Optional[str] = None


@dataclass(frozen=True, slots=True)
class APNSConfig:
    """Messaging options specific to the Apple Push Notification Service."""

    headers: dict[str, str] = field(default_factory=dict)
    payload: Optional[APNSPayload] = None
    fcm_options: Optional[APNSFcmOptions] = None
    live_activity_token: Optional[str] = None
