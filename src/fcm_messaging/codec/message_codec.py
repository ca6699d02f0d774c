# -*- coding: utf-8 -*-
"""Message aggregate codec: Message <-> FCM wire document.

Each block has an encode_* / decode_* pair doing an explicit field-by-field
copy between the dataclass and its wire shape (see codec.schema). Encoding
omits empty values; decoding is strict about types and raises FormatError
naming the offending field. Encoding does not validate: call
validate_message() first.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Callable, Mapping
from datetime import timedelta
from typing import Any, Optional, TypeVar, cast

from fcm_messaging.codec.enums import PRIORITY_CODEC, PROXY_CODEC, VISIBILITY_CODEC
from fcm_messaging.codec.extensible import (
    APNS_PAYLOAD_CODEC,
    APS_CODEC,
    WEBPUSH_NOTIFICATION_CODEC,
)
from fcm_messaging.codec.fields import (
    omit_empty,
    put_if_present,
    read_bool,
    read_flag,
    read_int,
    read_int_list,
    read_list,
    read_nested,
    read_number,
    read_object,
    read_str,
    read_str_list,
    read_str_map,
    require_object,
)
from fcm_messaging.codec.formats import (
    Rgba,
    color_to_rgba,
    duration_to_string,
    rgba_to_color,
    string_to_duration,
    string_to_timestamp,
    timestamp_to_string,
)
from fcm_messaging.codec.schema import (
    APNSConfigSchema,
    AndroidConfigSchema,
    AndroidNotificationSchema,
    ApsAlertSchema,
    CriticalSoundSchema,
    LightSettingsSchema,
    MessageSchema,
    NotificationSchema,
    WebpushConfigSchema,
    WebpushNotificationSchema,
)
from fcm_messaging.exceptions import FormatError
from fcm_messaging.models import (
    APNSConfig,
    APNSFcmOptions,
    APNSPayload,
    AndroidConfig,
    AndroidFcmOptions,
    AndroidNotification,
    Aps,
    ApsAlert,
    CriticalSound,
    FcmOptions,
    LightSettings,
    Message,
    Notification,
    WebpushConfig,
    WebpushFcmOptions,
    WebpushNotification,
    WebpushNotificationAction,
    bare_topic,
)


# --- encode -----------------------------------------------------------------


def encode_message(message: Message) -> MessageSchema:
    """Encode a Message into the wire document (topic is written in bare form)."""
    result = omit_empty(
        {
            "data": dict(message.data),
            "token": message.token,
            "topic": bare_topic(message.topic),
            "condition": message.condition,
        }
    )
    put_if_present(result, "notification", encode_notification(message.notification))
    put_if_present(result, "android", encode_android_config(message.android))
    put_if_present(result, "webpush", encode_webpush_config(message.webpush))
    put_if_present(result, "apns", encode_apns_config(message.apns))
    put_if_present(result, "fcm_options", encode_fcm_options(message.fcm_options))
    return cast(MessageSchema, result)


def encode_notification(notification: Optional[Notification]) -> Optional[NotificationSchema]:
    if notification is None:
        return None
    return cast(
        NotificationSchema,
        omit_empty(
            {
                "title": notification.title,
                "body": notification.body,
                "image": notification.image,
            }
        ),
    )


def encode_fcm_options(options: Optional[FcmOptions | AndroidFcmOptions]) -> Optional[dict[str, Any]]:
    if options is None:
        return None
    return omit_empty({"analytics_label": options.analytics_label})


def encode_android_config(config: Optional[AndroidConfig]) -> Optional[AndroidConfigSchema]:
    if config is None:
        return None
    ttl = (
        duration_to_string(config.ttl, field="android.ttl") if config.ttl is not None else None
    )
    result = omit_empty(
        {
            "collapse_key": config.collapse_key,
            "priority": config.priority,
            "ttl": ttl,
            "restricted_package_name": config.restricted_package_name,
            "data": dict(config.data),
            "direct_boot_ok": config.direct_boot_ok,
        }
    )
    put_if_present(result, "notification", encode_android_notification(config.notification))
    put_if_present(result, "fcm_options", encode_fcm_options(config.fcm_options))
    return cast(AndroidConfigSchema, result)


def encode_android_notification(
    notification: Optional[AndroidNotification],
) -> Optional[AndroidNotificationSchema]:
    if notification is None:
        return None
    event_time = (
        timestamp_to_string(notification.event_timestamp, field="android.notification.event_time")
        if notification.event_timestamp is not None
        else None
    )
    result = omit_empty(
        {
            "title": notification.title,
            "body": notification.body,
            "icon": notification.icon,
            "color": notification.color,
            "sound": notification.sound,
            "tag": notification.tag,
            "click_action": notification.click_action,
            "body_loc_key": notification.body_loc_key,
            "body_loc_args": list(notification.body_loc_args),
            "title_loc_key": notification.title_loc_key,
            "title_loc_args": list(notification.title_loc_args),
            "channel_id": notification.channel_id,
            "ticker": notification.ticker,
            "sticky": notification.sticky,
            "event_time": event_time,
            "local_only": notification.local_only,
            "notification_priority": PRIORITY_CODEC.encode(notification.priority),
            "default_sound": notification.default_sound,
            "default_vibrate_timings": notification.default_vibrate_timings,
            "default_light_settings": notification.default_light_settings,
            "vibrate_timings": [
                duration_to_string(t, field="android.notification.vibrate_timings")
                for t in notification.vibrate_timings
            ],
            "visibility": VISIBILITY_CODEC.encode(notification.visibility),
            "image": notification.image,
            "proxy": PROXY_CODEC.encode(notification.proxy),
        }
    )
    put_if_present(result, "notification_count", notification.notification_count)
    put_if_present(result, "light_settings", encode_light_settings(notification.light_settings))
    return cast(AndroidNotificationSchema, result)


def encode_light_settings(light: Optional[LightSettings]) -> Optional[LightSettingsSchema]:
    """Encode LightSettings; all three wire fields are always present."""
    if light is None:
        return None
    path = "android.notification.light_settings"
    rgba = color_to_rgba(light.color, field=f"{path}.color")
    return {
        "color": {
            "red": rgba.red,
            "green": rgba.green,
            "blue": rgba.blue,
            "alpha": rgba.alpha,
        },
        "light_on_duration": duration_to_string(
            light.light_on_duration, field=f"{path}.light_on_duration"
        ),
        "light_off_duration": duration_to_string(
            light.light_off_duration, field=f"{path}.light_off_duration"
        ),
    }


def encode_webpush_config(config: Optional[WebpushConfig]) -> Optional[WebpushConfigSchema]:
    if config is None:
        return None
    result = omit_empty({"headers": dict(config.headers), "data": dict(config.data)})
    put_if_present(result, "notification", encode_webpush_notification(config.notification))
    if config.fcm_options is not None:
        result["fcm_options"] = omit_empty({"link": config.fcm_options.link})
    return cast(WebpushConfigSchema, result)


def encode_webpush_notification(
    notification: Optional[WebpushNotification],
) -> Optional[WebpushNotificationSchema]:
    """Encode the standard fields, then merge custom_data flat on top."""
    if notification is None:
        return None
    standard = omit_empty(
        {
            "actions": [
                omit_empty({"action": a.action, "title": a.title, "icon": a.icon})
                for a in notification.actions
            ],
            "title": notification.title,
            "body": notification.body,
            "icon": notification.icon,
            "badge": notification.badge,
            "dir": notification.direction,
            "image": notification.image,
            "lang": notification.language,
            "renotify": notification.renotify,
            "requireInteraction": notification.require_interaction,
            "silent": notification.silent,
            "tag": notification.tag,
            "vibrate": list(notification.vibrate),
        }
    )
    put_if_present(standard, "data", copy.deepcopy(notification.data))
    put_if_present(standard, "timestamp", notification.timestamp_millis)
    return cast(
        WebpushNotificationSchema,
        WEBPUSH_NOTIFICATION_CODEC.merge(standard, notification.custom_data),
    )


def encode_apns_config(config: Optional[APNSConfig]) -> Optional[APNSConfigSchema]:
    if config is None:
        return None
    result = omit_empty(
        {
            "headers": dict(config.headers),
            "live_activity_token": config.live_activity_token,
        }
    )
    put_if_present(result, "payload", encode_apns_payload(config.payload))
    if config.fcm_options is not None:
        result["fcm_options"] = omit_empty(
            {
                "analytics_label": config.fcm_options.analytics_label,
                "image": config.fcm_options.image,
            }
        )
    return cast(APNSConfigSchema, result)


def encode_apns_payload(payload: Optional[APNSPayload]) -> Optional[dict[str, Any]]:
    if payload is None:
        return None
    standard: dict[str, Any] = {}
    put_if_present(standard, "aps", encode_aps(payload.aps))
    return APNS_PAYLOAD_CODEC.merge(standard, payload.custom_data)


def encode_aps(aps: Optional[Aps]) -> Optional[dict[str, Any]]:
    """Encode the aps dictionary.

    The structured alert/sound wins over the plain string when both are set;
    validate_message() rejects that combination before sending.
    """
    if aps is None:
        return None
    standard = omit_empty(
        {
            "alert": aps.alert_string,
            "sound": aps.sound,
            "content-available": 1 if aps.content_available else None,
            "mutable-content": 1 if aps.mutable_content else None,
            "category": aps.category,
            "thread-id": aps.thread_id,
        }
    )
    if aps.alert is not None:
        standard["alert"] = encode_aps_alert(aps.alert)
    if aps.critical_sound is not None:
        standard["sound"] = encode_critical_sound(aps.critical_sound)
    put_if_present(standard, "badge", aps.badge)
    return APS_CODEC.merge(standard, aps.custom_data)


def encode_aps_alert(alert: ApsAlert) -> ApsAlertSchema:
    return cast(
        ApsAlertSchema,
        omit_empty(
            {
                "title": alert.title,
                "subtitle": alert.subtitle,
                "body": alert.body,
                "loc-key": alert.loc_key,
                "loc-args": list(alert.loc_args),
                "title-loc-key": alert.title_loc_key,
                "title-loc-args": list(alert.title_loc_args),
                "subtitle-loc-key": alert.subtitle_loc_key,
                "subtitle-loc-args": list(alert.subtitle_loc_args),
                "action-loc-key": alert.action_loc_key,
                "launch-image": alert.launch_image,
            }
        ),
    )


def encode_critical_sound(sound: CriticalSound) -> CriticalSoundSchema:
    result = omit_empty(
        {
            "critical": 1 if sound.critical else None,
            "name": sound.name,
        }
    )
    put_if_present(result, "volume", sound.volume)
    return cast(CriticalSoundSchema, result)


def dumps_message(message: Message, **kwargs: Any) -> str:
    """Encode a Message and serialize it to JSON text (kwargs go to json.dumps)."""
    return json.dumps(encode_message(message), **kwargs)


# --- decode -----------------------------------------------------------------


def decode_message(document: Mapping[str, Any]) -> Message:
    """Decode a wire document into a Message (topic prefix is stripped).

    Raises:
        FormatError: If any field has the wrong type or a malformed micro-format.
    """
    doc = require_object(document, path="message")
    path = "message"
    return Message(
        data=read_str_map(doc, "data", path=path),
        notification=read_nested(doc, "notification", decode_notification, path=path),
        android=read_nested(doc, "android", decode_android_config, path=path),
        webpush=read_nested(doc, "webpush", decode_webpush_config, path=path),
        apns=read_nested(doc, "apns", decode_apns_config, path=path),
        fcm_options=read_nested(doc, "fcm_options", decode_fcm_options, path=path),
        token=read_str(doc, "token", path=path),
        topic=bare_topic(read_str(doc, "topic", path=path)),
        condition=read_str(doc, "condition", path=path),
    )


def loads_message(text: str | bytes) -> Message:
    """Parse JSON text and decode it into a Message."""
    try:
        document = json.loads(text)
    except ValueError as e:
        raise FormatError(f"message is not valid JSON: {e}", field="message", value=text) from e
    return decode_message(document)


def decode_notification(obj: Mapping[str, Any], *, path: str) -> Notification:
    return Notification(
        title=read_str(obj, "title", path=path),
        body=read_str(obj, "body", path=path),
        image=read_str(obj, "image", path=path),
    )


def decode_fcm_options(obj: Mapping[str, Any], *, path: str) -> FcmOptions:
    return FcmOptions(analytics_label=read_str(obj, "analytics_label", path=path))


def decode_android_config(obj: Mapping[str, Any], *, path: str) -> AndroidConfig:
    ttl = read_str(obj, "ttl", path=path)
    return AndroidConfig(
        collapse_key=read_str(obj, "collapse_key", path=path),
        priority=read_str(obj, "priority", path=path),
        ttl=string_to_duration(ttl, field=f"{path}.ttl") if ttl else None,
        restricted_package_name=read_str(obj, "restricted_package_name", path=path),
        data=read_str_map(obj, "data", path=path),
        notification=read_nested(obj, "notification", decode_android_notification, path=path),
        fcm_options=read_nested(obj, "fcm_options", _decode_android_fcm_options, path=path),
        direct_boot_ok=read_bool(obj, "direct_boot_ok", path=path),
    )


def _decode_android_fcm_options(obj: Mapping[str, Any], *, path: str) -> AndroidFcmOptions:
    return AndroidFcmOptions(analytics_label=read_str(obj, "analytics_label", path=path))


def decode_android_notification(obj: Mapping[str, Any], *, path: str) -> AndroidNotification:
    event_time = read_str(obj, "event_time", path=path)
    return AndroidNotification(
        title=read_str(obj, "title", path=path),
        body=read_str(obj, "body", path=path),
        icon=read_str(obj, "icon", path=path),
        color=read_str(obj, "color", path=path),
        sound=read_str(obj, "sound", path=path),
        tag=read_str(obj, "tag", path=path),
        click_action=read_str(obj, "click_action", path=path),
        body_loc_key=read_str(obj, "body_loc_key", path=path),
        body_loc_args=read_str_list(obj, "body_loc_args", path=path),
        title_loc_key=read_str(obj, "title_loc_key", path=path),
        title_loc_args=read_str_list(obj, "title_loc_args", path=path),
        channel_id=read_str(obj, "channel_id", path=path),
        ticker=read_str(obj, "ticker", path=path),
        sticky=read_bool(obj, "sticky", path=path),
        event_timestamp=(
            string_to_timestamp(event_time, field=f"{path}.event_time") if event_time else None
        ),
        local_only=read_bool(obj, "local_only", path=path),
        priority=PRIORITY_CODEC.decode(obj.get("notification_priority")),
        default_sound=read_bool(obj, "default_sound", path=path),
        default_vibrate_timings=read_bool(obj, "default_vibrate_timings", path=path),
        default_light_settings=read_bool(obj, "default_light_settings", path=path),
        vibrate_timings=[
            string_to_duration(t, field=f"{path}.vibrate_timings")
            for t in read_list(obj, "vibrate_timings", path=path)
        ],
        visibility=VISIBILITY_CODEC.decode(obj.get("visibility")),
        notification_count=read_int(obj, "notification_count", path=path),
        light_settings=read_nested(obj, "light_settings", decode_light_settings, path=path),
        image=read_str(obj, "image", path=path),
        proxy=PROXY_CODEC.decode(obj.get("proxy")),
    )


def decode_light_settings(obj: Mapping[str, Any], *, path: str) -> LightSettings:
    color = read_object(obj, "color", path=path)
    if color is None:
        raise FormatError(f"{path}.color is required", field=f"{path}.color")
    channel_path = f"{path}.color"
    alpha = read_number(color, "alpha", path=channel_path)
    rgba = Rgba(
        red=read_number(color, "red", path=channel_path) or 0.0,
        green=read_number(color, "green", path=channel_path) or 0.0,
        blue=read_number(color, "blue", path=channel_path) or 0.0,
        alpha=1.0 if alpha is None else alpha,
    )
    durations: dict[str, timedelta] = {}
    for key in ("light_on_duration", "light_off_duration"):
        value = read_str(obj, key, path=path)
        if value is None:
            raise FormatError(f"{path}.{key} is required", field=f"{path}.{key}")
        durations[key] = string_to_duration(value, field=f"{path}.{key}")
    return LightSettings(
        color=rgba_to_color(rgba, field=channel_path),
        light_on_duration=durations["light_on_duration"],
        light_off_duration=durations["light_off_duration"],
    )


def decode_webpush_config(obj: Mapping[str, Any], *, path: str) -> WebpushConfig:
    return WebpushConfig(
        headers=read_str_map(obj, "headers", path=path),
        data=read_str_map(obj, "data", path=path),
        notification=read_nested(obj, "notification", decode_webpush_notification, path=path),
        fcm_options=read_nested(obj, "fcm_options", _decode_webpush_fcm_options, path=path),
    )


def _decode_webpush_fcm_options(obj: Mapping[str, Any], *, path: str) -> WebpushFcmOptions:
    return WebpushFcmOptions(link=read_str(obj, "link", path=path))


def _decode_webpush_action(obj: Any, *, path: str) -> WebpushNotificationAction:
    action = require_object(obj, path=path)
    return WebpushNotificationAction(
        action=read_str(action, "action", path=path),
        title=read_str(action, "title", path=path),
        icon=read_str(action, "icon", path=path),
    )


def decode_webpush_notification(obj: Mapping[str, Any], *, path: str) -> WebpushNotification:
    """Decode standard fields; every non-standard key goes to custom_data."""
    return WebpushNotification(
        actions=[
            _decode_webpush_action(item, path=f"{path}.actions[{i}]")
            for i, item in enumerate(read_list(obj, "actions", path=path))
        ],
        title=read_str(obj, "title", path=path),
        body=read_str(obj, "body", path=path),
        icon=read_str(obj, "icon", path=path),
        badge=read_str(obj, "badge", path=path),
        direction=read_str(obj, "dir", path=path),
        data=copy.deepcopy(obj.get("data")),
        image=read_str(obj, "image", path=path),
        language=read_str(obj, "lang", path=path),
        renotify=read_bool(obj, "renotify", path=path),
        require_interaction=read_bool(obj, "requireInteraction", path=path),
        silent=read_bool(obj, "silent", path=path),
        tag=read_str(obj, "tag", path=path),
        timestamp_millis=read_int(obj, "timestamp", path=path),
        vibrate=read_int_list(obj, "vibrate", path=path),
        custom_data=WEBPUSH_NOTIFICATION_CODEC.split(obj),
    )


def decode_apns_config(obj: Mapping[str, Any], *, path: str) -> APNSConfig:
    return APNSConfig(
        headers=read_str_map(obj, "headers", path=path),
        payload=read_nested(obj, "payload", decode_apns_payload, path=path),
        fcm_options=read_nested(obj, "fcm_options", _decode_apns_fcm_options, path=path),
        live_activity_token=read_str(obj, "live_activity_token", path=path),
    )


def _decode_apns_fcm_options(obj: Mapping[str, Any], *, path: str) -> APNSFcmOptions:
    return APNSFcmOptions(
        analytics_label=read_str(obj, "analytics_label", path=path),
        image=read_str(obj, "image", path=path),
    )


def decode_apns_payload(obj: Mapping[str, Any], *, path: str) -> APNSPayload:
    return APNSPayload(
        aps=read_nested(obj, "aps", decode_aps, path=path),
        custom_data=APNS_PAYLOAD_CODEC.split(obj),
    )


S = TypeVar("S")
P = TypeVar("P")


def _decode_either(
    value: Any,
    *,
    field: str,
    structured: Callable[[Any], S],
    plain: Callable[[Any], P],
) -> tuple[Optional[S], Optional[P]]:
    """Decode a value that is either a structured object or a plain string.

    The structured form is tried first; on FormatError the plain form is tried.
    If both fail, the error names both causes.
    """
    try:
        return structured(value), None
    except FormatError as structured_error:
        try:
            return None, plain(value)
        except FormatError as plain_error:
            raise FormatError(
                f"failed to decode {field} as an object ({structured_error}) "
                f"or a string ({plain_error})",
                field=field,
                value=value,
            ) from plain_error


def _plain_string(value: Any, *, field: str) -> str:
    if not isinstance(value, str):
        raise FormatError(f"{field} must be a string", field=field, value=value)
    return value


def decode_aps(obj: Mapping[str, Any], *, path: str) -> Aps:
    alert: Optional[ApsAlert] = None
    alert_string: Optional[str] = None
    if obj.get("alert") is not None:
        field = f"{path}.alert"
        alert, alert_string = _decode_either(
            obj["alert"],
            field=field,
            structured=lambda v: decode_aps_alert(require_object(v, path=field), path=field),
            plain=lambda v: _plain_string(v, field=field),
        )

    sound: Optional[str] = None
    critical_sound: Optional[CriticalSound] = None
    if obj.get("sound") is not None:
        field = f"{path}.sound"
        critical_sound, sound = _decode_either(
            obj["sound"],
            field=field,
            structured=lambda v: decode_critical_sound(require_object(v, path=field), path=field),
            plain=lambda v: _plain_string(v, field=field),
        )

    return Aps(
        alert_string=alert_string,
        alert=alert,
        badge=read_int(obj, "badge", path=path),
        sound=sound,
        critical_sound=critical_sound,
        content_available=read_flag(obj, "content-available"),
        mutable_content=read_flag(obj, "mutable-content"),
        category=read_str(obj, "category", path=path),
        thread_id=read_str(obj, "thread-id", path=path),
        custom_data=APS_CODEC.split(obj),
    )


def decode_aps_alert(obj: Mapping[str, Any], *, path: str) -> ApsAlert:
    return ApsAlert(
        title=read_str(obj, "title", path=path),
        subtitle=read_str(obj, "subtitle", path=path),
        body=read_str(obj, "body", path=path),
        loc_key=read_str(obj, "loc-key", path=path),
        loc_args=read_str_list(obj, "loc-args", path=path),
        title_loc_key=read_str(obj, "title-loc-key", path=path),
        title_loc_args=read_str_list(obj, "title-loc-args", path=path),
        subtitle_loc_key=read_str(obj, "subtitle-loc-key", path=path),
        subtitle_loc_args=read_str_list(obj, "subtitle-loc-args", path=path),
        action_loc_key=read_str(obj, "action-loc-key", path=path),
        launch_image=read_str(obj, "launch-image", path=path),
    )


def decode_critical_sound(obj: Mapping[str, Any], *, path: str) -> CriticalSound:
    return CriticalSound(
        critical=read_flag(obj, "critical"),
        name=read_str(obj, "name", path=path),
        volume=read_number(obj, "volume", path=path),
    )
