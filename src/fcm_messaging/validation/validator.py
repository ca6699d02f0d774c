# -*- coding: utf-8 -*-
"""Message validation: pure checks run once on a fully built Message before sending.

No I/O. Rules are evaluated in a fixed order and the first failure is raised
as ValidationError; later rules are not evaluated.

Order:
1. message present
2. exactly one of token / topic / condition
3. bare topic name matches [a-zA-Z0-9-_.~%]+
4. notification image URL
5. android, webpush, apns blocks (each skipped when absent)
6. message fcm_options analytics label
"""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Any, Optional

from fcm_messaging.codec.extensible import (
    APNS_PAYLOAD_CODEC,
    APS_CODEC,
    WEBPUSH_NOTIFICATION_CODEC,
    ExtensibleRecordCodec,
)
from fcm_messaging.exceptions import ValidationError
from fcm_messaging.models import (
    APNSConfig,
    APNSPayload,
    AndroidConfig,
    AndroidNotification,
    Aps,
    ApsAlert,
    LightSettings,
    Message,
    Notification,
    WebpushConfig,
    bare_topic,
)
from fcm_messaging.utils.validation import is_absolute_url, parse_absolute_url

BARE_TOPIC_NAME_PATTERN = re.compile(r"[a-zA-Z0-9\-_.~%]+")
COLOR_PATTERN = re.compile(r"#[0-9a-fA-F]{6}")
COLOR_WITH_ALPHA_PATTERN = re.compile(r"#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?")
ANALYTICS_LABEL_PATTERN = re.compile(r"[a-zA-Z0-9\-_.~%]{1,50}")

ANDROID_PRIORITIES = ("normal", "high")
WEBPUSH_DIRECTIONS = ("auto", "ltr", "rtl")


def validate_message(message: Optional[Message]) -> None:
    """Validate message; raise ValidationError describing the first violated rule."""
    if message is None:
        raise ValidationError("message must not be None", field="message")

    targets = message.targets()
    if len(targets) != 1:
        raise ValidationError(
            "exactly one of token, topic or condition must be specified",
            field="message",
            value=targets,
        )

    if message.topic:
        if not BARE_TOPIC_NAME_PATTERN.fullmatch(bare_topic(message.topic) or ""):
            raise ValidationError(
                f"malformed topic name: {message.topic!r}",
                field="message.topic",
                value=message.topic,
            )

    _validate_notification(message.notification)
    _validate_android_config(message.android)
    _validate_webpush_config(message.webpush)
    _validate_apns_config(message.apns)
    if message.fcm_options is not None:
        _validate_analytics_label(
            message.fcm_options.analytics_label, field="message.fcm_options.analytics_label"
        )


def _validate_image_url(image: Optional[str], *, field: str) -> None:
    if image and not is_absolute_url(image):
        raise ValidationError(f"invalid image URL: {image!r}", field=field, value=image)


def _validate_analytics_label(label: Optional[str], *, field: str) -> None:
    if label and not ANALYTICS_LABEL_PATTERN.fullmatch(label):
        raise ValidationError(f"malformed analytics label: {label!r}", field=field, value=label)


def _validate_custom_keys(
    codec: ExtensibleRecordCodec, custom_data: dict[str, Any], *, field: str
) -> None:
    collisions = codec.collisions(custom_data)
    if collisions:
        key = collisions[0]
        raise ValidationError(
            f"multiple specifications for the key {key!r} in {codec.name}",
            field=f"{field}.custom_data",
            value=key,
        )


def _validate_notification(notification: Optional[Notification]) -> None:
    if notification is None:
        return
    _validate_image_url(notification.image, field="notification.image")


# --- android ----------------------------------------------------------------


def _validate_android_config(config: Optional[AndroidConfig]) -> None:
    if config is None:
        return
    if config.ttl is not None and config.ttl < timedelta(0):
        raise ValidationError(
            "ttl duration must not be negative", field="android.ttl", value=config.ttl
        )
    if config.priority and config.priority not in ANDROID_PRIORITIES:
        raise ValidationError(
            "priority must be 'normal' or 'high'",
            field="android.priority",
            value=config.priority,
        )
    _validate_android_notification(config.notification)
    if config.fcm_options is not None:
        _validate_analytics_label(
            config.fcm_options.analytics_label, field="android.fcm_options.analytics_label"
        )


def _validate_android_notification(notification: Optional[AndroidNotification]) -> None:
    if notification is None:
        return
    path = "android.notification"
    if notification.color and not COLOR_PATTERN.fullmatch(notification.color):
        raise ValidationError(
            "color must be in the #RRGGBB form",
            field=f"{path}.color",
            value=notification.color,
        )
    if notification.title_loc_args and not notification.title_loc_key:
        raise ValidationError(
            "title_loc_key is required when specifying title_loc_args",
            field=f"{path}.title_loc_key",
        )
    if notification.body_loc_args and not notification.body_loc_key:
        raise ValidationError(
            "body_loc_key is required when specifying body_loc_args",
            field=f"{path}.body_loc_key",
        )
    _validate_image_url(notification.image, field=f"{path}.image")
    for timing in notification.vibrate_timings:
        if timing < timedelta(0):
            raise ValidationError(
                "vibrate_timings must not be negative",
                field=f"{path}.vibrate_timings",
                value=timing,
            )
    _validate_light_settings(notification.light_settings)


def _validate_light_settings(light: Optional[LightSettings]) -> None:
    if light is None:
        return
    path = "android.notification.light_settings"
    if not isinstance(light.color, str) or not COLOR_WITH_ALPHA_PATTERN.fullmatch(light.color):
        raise ValidationError(
            "color must be in #RRGGBB or #RRGGBBAA form",
            field=f"{path}.color",
            value=light.color,
        )
    if light.light_on_duration < timedelta(0):
        raise ValidationError(
            "light_on_duration must not be negative",
            field=f"{path}.light_on_duration",
            value=light.light_on_duration,
        )
    if light.light_off_duration < timedelta(0):
        raise ValidationError(
            "light_off_duration must not be negative",
            field=f"{path}.light_off_duration",
            value=light.light_off_duration,
        )


# --- webpush ----------------------------------------------------------------


def _validate_webpush_config(config: Optional[WebpushConfig]) -> None:
    if config is None:
        return
    notification = config.notification
    if notification is not None:
        if notification.direction and notification.direction not in WEBPUSH_DIRECTIONS:
            raise ValidationError(
                "direction must be 'ltr', 'rtl' or 'auto'",
                field="webpush.notification.direction",
                value=notification.direction,
            )
        _validate_custom_keys(
            WEBPUSH_NOTIFICATION_CODEC, notification.custom_data, field="webpush.notification"
        )

    if config.fcm_options is not None and config.fcm_options.link:
        link = config.fcm_options.link
        parsed = parse_absolute_url(link)
        if parsed is None:
            raise ValidationError(
                f"invalid link URL: {link!r}", field="webpush.fcm_options.link", value=link
            )
        if parsed.scheme != "https":
            raise ValidationError(
                f"invalid link URL: {link!r}; want scheme: 'https'",
                field="webpush.fcm_options.link",
                value=link,
            )


# --- apns -------------------------------------------------------------------


def _validate_apns_config(config: Optional[APNSConfig]) -> None:
    if config is None:
        return
    if config.fcm_options is not None:
        _validate_image_url(config.fcm_options.image, field="apns.fcm_options.image")
    _validate_apns_payload(config.payload)
    if config.fcm_options is not None:
        _validate_analytics_label(
            config.fcm_options.analytics_label, field="apns.fcm_options.analytics_label"
        )


def _validate_apns_payload(payload: Optional[APNSPayload]) -> None:
    if payload is None:
        return
    _validate_custom_keys(APNS_PAYLOAD_CODEC, payload.custom_data, field="apns.payload")
    _validate_aps(payload.aps)


def _validate_aps(aps: Optional[Aps]) -> None:
    if aps is None:
        return
    path = "apns.payload.aps"
    if aps.alert is not None and aps.alert_string:
        raise ValidationError("multiple alert specifications", field=f"{path}.alert")

    if aps.critical_sound is not None:
        if aps.sound:
            raise ValidationError("multiple sound specifications", field=f"{path}.sound")
        volume = aps.critical_sound.volume
        if volume is not None and not 0.0 <= volume <= 1.0:
            raise ValidationError(
                "critical sound volume must be in the interval [0, 1]",
                field=f"{path}.sound.volume",
                value=volume,
            )

    _validate_custom_keys(APS_CODEC, aps.custom_data, field=path)
    _validate_aps_alert(aps.alert)


def _validate_aps_alert(alert: Optional[ApsAlert]) -> None:
    if alert is None:
        return
    path = "apns.payload.aps.alert"
    if alert.title_loc_args and not alert.title_loc_key:
        raise ValidationError(
            "title_loc_key is required when specifying title_loc_args",
            field=f"{path}.title_loc_key",
        )
    if alert.subtitle_loc_args and not alert.subtitle_loc_key:
        raise ValidationError(
            "subtitle_loc_key is required when specifying subtitle_loc_args",
            field=f"{path}.subtitle_loc_key",
        )
    if alert.loc_args and not alert.loc_key:
        raise ValidationError(
            "loc_key is required when specifying loc_args",
            field=f"{path}.loc_key",
        )
