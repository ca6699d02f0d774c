"""Wire document shapes (FCM HTTP v1 message resource). Keys match the API exactly.

Shapes with hyphenated keys use the functional TypedDict form. Extensible
records (webpush notification, APNs payload, aps) may carry extra keys beyond
those declared here.
"""

from __future__ import annotations

from typing import Any, TypedDict


class NotificationSchema(TypedDict, total=False):
    title: str
    body: str
    image: str


class FcmOptionsSchema(TypedDict, total=False):
    analytics_label: str


class ColorSchema(TypedDict):
    red: float
    green: float
    blue: float
    alpha: float


class LightSettingsSchema(TypedDict):
    color: ColorSchema
    light_on_duration: str
    light_off_duration: str


class AndroidNotificationSchema(TypedDict, total=False):
    title: str
    body: str
    icon: str
    color: str
    sound: str
    tag: str
    click_action: str
    body_loc_key: str
    body_loc_args: list[str]
    title_loc_key: str
    title_loc_args: list[str]
    channel_id: str
    ticker: str
    sticky: bool
    event_time: str
    local_only: bool
    notification_priority: str
    default_sound: bool
    default_vibrate_timings: bool
    default_light_settings: bool
    vibrate_timings: list[str]
    visibility: str
    notification_count: int
    light_settings: LightSettingsSchema
    image: str
    proxy: str


class AndroidConfigSchema(TypedDict, total=False):
    collapse_key: str
    priority: str
    ttl: str
    restricted_package_name: str
    data: dict[str, str]
    notification: AndroidNotificationSchema
    fcm_options: FcmOptionsSchema
    direct_boot_ok: bool


class WebpushNotificationActionSchema(TypedDict, total=False):
    action: str
    title: str
    icon: str


WebpushNotificationSchema = TypedDict(
    "WebpushNotificationSchema",
    {
        "actions": list[WebpushNotificationActionSchema],
        "title": str,
        "body": str,
        "icon": str,
        "badge": str,
        "dir": str,
        "data": Any,
        "image": str,
        "lang": str,
        "renotify": bool,
        "requireInteraction": bool,
        "silent": bool,
        "tag": str,
        "timestamp": int,
        "vibrate": list[int],
    },
    total=False,
)


class WebpushFcmOptionsSchema(TypedDict, total=False):
    link: str


class WebpushConfigSchema(TypedDict, total=False):
    headers: dict[str, str]
    data: dict[str, str]
    notification: WebpushNotificationSchema
    fcm_options: WebpushFcmOptionsSchema


ApsAlertSchema = TypedDict(
    "ApsAlertSchema",
    {
        "title": str,
        "subtitle": str,
        "body": str,
        "loc-key": str,
        "loc-args": list[str],
        "title-loc-key": str,
        "title-loc-args": list[str],
        "subtitle-loc-key": str,
        "subtitle-loc-args": list[str],
        "action-loc-key": str,
        "launch-image": str,
    },
    total=False,
)


class CriticalSoundSchema(TypedDict, total=False):
    critical: int
    name: str
    volume: float


ApsSchema = TypedDict(
    "ApsSchema",
    {
        "alert": ApsAlertSchema | str,
        "badge": int,
        "sound": CriticalSoundSchema | str,
        "content-available": int,
        "mutable-content": int,
        "category": str,
        "thread-id": str,
    },
    total=False,
)


class APNSPayloadSchema(TypedDict, total=False):
    aps: ApsSchema


class APNSFcmOptionsSchema(TypedDict, total=False):
    analytics_label: str
    image: str


class APNSConfigSchema(TypedDict, total=False):
    headers: dict[str, str]
    payload: APNSPayloadSchema
    fcm_options: APNSFcmOptionsSchema
    live_activity_token: str


class MessageSchema(TypedDict, total=False):
    """The message resource. Exactly one of token/topic/condition is present."""

    data: dict[str, str]
    notification: NotificationSchema
    android: AndroidConfigSchema
    webpush: WebpushConfigSchema
    apns: APNSConfigSchema
    fcm_options: FcmOptionsSchema
    token: str
    topic: str
    condition: str
