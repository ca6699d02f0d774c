# -*- coding: utf-8 -*-
"""Android-specific message options: AndroidConfig, AndroidNotification, LightSettings."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from enum import IntEnum
from typing import Optional

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?")


class AndroidNotificationPriority(IntEnum):
    """Priority of an Android notification (UNSPECIFIED is never sent)."""

    UNSPECIFIED = 0
    MIN = 1
    LOW = 2
    DEFAULT = 3
    HIGH = 4
    MAX = 5


class AndroidNotificationVisibility(IntEnum):
    """Lockscreen visibility of an Android notification."""

    UNSPECIFIED = 0
    PRIVATE = 1
    PUBLIC = 2
    SECRET = 3


class AndroidNotificationProxy(IntEnum):
    """When a notification may be proxied."""

    UNSPECIFIED = 0
    ALLOW = 1
    DENY = 2
    IF_PRIORITY_LOWERED = 3
    """Proxy only if the AndroidConfig priority was lowered from high to normal on the device."""


@dataclass(frozen=True, slots=True)
class LightSettings:
    """Notification LED settings.

    color is "#RRGGBB" or "#RRGGBBAA"; on the wire it becomes an RGBA object
    with channels normalized to 0..1. Well-formed colors are stored upper-case,
    with an opaque "FF" alpha dropped.
    """

    color: str
    light_on_duration: timedelta
    light_off_duration: timedelta

    def __post_init__(self) -> None:
        if isinstance(self.color, str) and _HEX_COLOR.fullmatch(self.color):
            color = self.color.upper()
            if color.endswith("FF") and len(color) == 9:
                color = color[:7]
            object.__setattr__(self, "color", color)


@dataclass(frozen=True, slots=True)
class AndroidFcmOptions:
    analytics_label: Optional[str] = None


@dataclass(frozen=True, slots=True)
class AndroidNotification:
    """Notification override sent to Android devices.

    title/body, when set, override the base Notification's title/body.
    """

    title: Optional[str] = None
    body: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    """Color in #RRGGBB form."""
    sound: Optional[str] = None
    tag: Optional[str] = None
    click_action: Optional[str] = None
    body_loc_key: Optional[str] = None
    body_loc_args: list[str] = field(default_factory=list)
    title_loc_key: Optional[str] = None
    title_loc_args: list[str] = field(default_factory=list)
    channel_id: Optional[str] = None
    ticker: Optional[str] = None
    sticky: bool = False
    event_timestamp: Optional[datetime] = None
    """Naive datetimes are taken as UTC and stored timezone-aware."""
    local_only: bool = False
    priority: AndroidNotificationPriority = AndroidNotificationPriority.UNSPECIFIED
    default_sound: bool = False
    default_vibrate_timings: bool = False
    default_light_settings: bool = False
    vibrate_timings: list[timedelta] = field(default_factory=list)
    visibility: AndroidNotificationVisibility = AndroidNotificationVisibility.UNSPECIFIED
    notification_count: Optional[int] = None
    light_settings: Optional[LightSettings] = None
    image: Optional[str] = None
    proxy: AndroidNotificationProxy = AndroidNotificationProxy.UNSPECIFIED

    def __post_init__(self) -> None:
        ts = self.event_timestamp
        if isinstance(ts, datetime) and ts.tzinfo is None:
            object.__setattr__(self, "event_timestamp", ts.replace(tzinfo=UTC))


@dataclass(frozen=True, slots=True)
class AndroidConfig:
    """Messaging options specific to the Android platform."""

    collapse_key: Optional[str] = None
    priority: Optional[str] = None
    """Delivery priority: "normal" or "high"."""
    ttl: Optional[timedelta] = None
    restricted_package_name: Optional[str] = None
    data: dict[str, str] = field(default_factory=dict)
    """If non-empty, overrides Message.data on Android."""
    notification: Optional[AndroidNotification] = None
    fcm_options: Optional[AndroidFcmOptions] = None
    direct_boot_ok: bool = False
