# -*- coding: utf-8 -*-
"""Unit tests for the Message <-> wire document codec."""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest

from fcm_messaging.codec import decode_message, dumps_message, encode_message, loads_message
from fcm_messaging.exceptions import FormatError
from fcm_messaging.models import (
    APNSConfig,
    APNSPayload,
    AndroidConfig,
    AndroidNotification,
    AndroidNotificationPriority,
    Aps,
    ApsAlert,
    CriticalSound,
    LightSettings,
    Message,
    Notification,
    WebpushConfig,
    WebpushNotification,
)


def _aps_message(message_factory: Callable[..., Message], aps: Aps) -> Message:
    return message_factory(apns=APNSConfig(payload=APNSPayload(aps=aps)))


def _aps_document(aps: dict[str, object]) -> dict[str, object]:
    return {"token": "abc", "apns": {"payload": {"aps": aps}}}


def test_encode_minimal_token_message() -> None:
    message = Message(token="abc", notification=Notification(title="Test", body="Push"))
    assert encode_message(message) == {
        "token": "abc",
        "notification": {"title": "Test", "body": "Push"},
    }


def test_encode_omits_empty_values_and_keeps_empty_blocks() -> None:
    message = Message(token="abc", data={}, android=AndroidConfig())
    assert encode_message(message) == {"token": "abc", "android": {}}


def test_encode_writes_bare_topic() -> None:
    assert encode_message(Message(topic="/topics/news")) == {"topic": "news"}
    assert encode_message(Message(topic="news")) == {"topic": "news"}


def test_decode_strips_topic_prefix() -> None:
    assert decode_message({"topic": "/topics/news"}).topic == "news"


def test_encode_android_config(
    message_factory: Callable[..., Message],
    android_notification_factory: Callable[..., AndroidNotification],
) -> None:
    message = message_factory(
        android=AndroidConfig(
            priority="high",
            ttl=timedelta(hours=1, milliseconds=500),
            notification=android_notification_factory(),
        )
    )

    android = encode_message(message)["android"]

    assert android["priority"] == "high"
    assert android["ttl"] == "3600.500000000s"
    notification = android["notification"]
    assert notification["notification_priority"] == "PRIORITY_HIGH"
    assert notification["visibility"] == "PUBLIC"
    assert notification["proxy"] == "DENY"
    assert notification["event_time"] == "2026-02-13T12:00:00.123456000Z"
    assert notification["vibrate_timings"] == ["1s", "0.500000000s"]
    assert notification["notification_count"] == 3
    assert notification["sticky"] is True
    assert "default_vibrate_timings" not in notification
    assert notification["light_settings"] == {
        "color": {"red": 1.0, "green": 0.0, "blue": 0.0, "alpha": 1.0},
        "light_on_duration": "0.300000000s",
        "light_off_duration": "2s",
    }


def test_encode_android_unspecified_enums_are_omitted(message_factory: Callable[..., Message]) -> None:
    message = message_factory(android=AndroidConfig(notification=AndroidNotification(title="t")))
    assert encode_message(message)["android"] == {"notification": {"title": "t"}}


def test_encode_negative_ttl_is_format_error(message_factory: Callable[..., Message]) -> None:
    message = message_factory(android=AndroidConfig(ttl=timedelta(seconds=-5)))
    with pytest.raises(FormatError) as exc_info:
        encode_message(message)
    assert exc_info.value.field == "android.ttl"


def test_decode_light_settings_defaults_missing_alpha() -> None:
    document = {
        "token": "abc",
        "android": {
            "notification": {
                "light_settings": {
                    "color": {"red": 1.0, "green": 0.5},
                    "light_on_duration": "1s",
                    "light_off_duration": "0.5s",
                }
            }
        },
    }
    light = decode_message(document).android.notification.light_settings  # type: ignore[union-attr]
    assert light == LightSettings(
        color="#FF8000",
        light_on_duration=timedelta(seconds=1),
        light_off_duration=timedelta(milliseconds=500),
    )


def test_decode_light_settings_keeps_translucent_alpha() -> None:
    document = {
        "token": "abc",
        "android": {
            "notification": {
                "light_settings": {
                    "color": {"red": 1.0, "green": 0.0, "blue": 0.0, "alpha": 0.5},
                    "light_on_duration": "1s",
                    "light_off_duration": "1s",
                }
            }
        },
    }
    light = decode_message(document).android.notification.light_settings  # type: ignore[union-attr]
    assert light is not None
    assert light.color == "#FF000080"


def test_decode_unknown_priority_token_is_format_error() -> None:
    document = {"token": "abc", "android": {"notification": {"notification_priority": "URGENT"}}}
    with pytest.raises(FormatError) as exc_info:
        decode_message(document)
    assert exc_info.value.value == "URGENT"


def test_decode_bad_ttl_names_field() -> None:
    with pytest.raises(FormatError) as exc_info:
        decode_message({"token": "abc", "android": {"ttl": "soon"}})
    assert exc_info.value.field == "message.android.ttl"


def test_webpush_custom_data_is_merged_flat(message_factory: Callable[..., Message]) -> None:
    message = message_factory(
        webpush=WebpushConfig(
            notification=WebpushNotification(title="T", custom_data={"foo": "bar"})
        )
    )

    document = encode_message(message)

    assert document["webpush"]["notification"] == {"title": "T", "foo": "bar"}
    decoded = decode_message(document).webpush.notification  # type: ignore[union-attr]
    assert decoded is not None
    assert decoded.title == "T"
    assert decoded.custom_data == {"foo": "bar"}


def test_webpush_notification_wire_names() -> None:
    document = {
        "token": "abc",
        "webpush": {
            "notification": {
                "dir": "rtl",
                "lang": "ar",
                "requireInteraction": True,
                "timestamp": 1700000000000,
                "vibrate": [200, 100],
            }
        },
    }
    notification = decode_message(document).webpush.notification  # type: ignore[union-attr]
    assert notification is not None
    assert notification.direction == "rtl"
    assert notification.language == "ar"
    assert notification.require_interaction is True
    assert notification.timestamp_millis == 1700000000000
    assert notification.vibrate == [200, 100]
    assert notification.custom_data == {}


@pytest.mark.parametrize(
    ("aps", "expected_alert"),
    [
        (Aps(alert_string="hello"), "hello"),
        (Aps(alert=ApsAlert(title="T", loc_args=["a"], loc_key="k")), {"title": "T", "loc-key": "k", "loc-args": ["a"]}),
    ],
)
def test_encode_aps_alert_union(
    message_factory: Callable[..., Message], aps: Aps, expected_alert: object
) -> None:
    document = encode_message(_aps_message(message_factory, aps))
    assert document["apns"]["payload"]["aps"] == {"alert": expected_alert}


def test_decode_aps_alert_string_and_object() -> None:
    aps = decode_message(_aps_document({"alert": "hello"})).apns.payload.aps  # type: ignore[union-attr]
    assert aps is not None
    assert aps.alert_string == "hello"
    assert aps.alert is None

    aps = decode_message(_aps_document({"alert": {"title": "T"}})).apns.payload.aps  # type: ignore[union-attr]
    assert aps is not None
    assert aps.alert == ApsAlert(title="T")
    assert aps.alert_string is None


def test_decode_aps_alert_of_neither_form_names_both_causes() -> None:
    with pytest.raises(FormatError) as exc_info:
        decode_message(_aps_document({"alert": 5}))
    assert exc_info.value.field == "message.apns.payload.aps.alert"
    assert "object" in str(exc_info.value)
    assert "string" in str(exc_info.value)


def test_decode_malformed_alert_object_is_not_masked() -> None:
    with pytest.raises(FormatError) as exc_info:
        decode_message(_aps_document({"alert": {"title": 5}}))
    assert "message.apns.payload.aps.alert.title" in str(exc_info.value)


def test_aps_sound_union(message_factory: Callable[..., Message]) -> None:
    critical = Aps(critical_sound=CriticalSound(critical=True, name="alarm", volume=0.5))
    document = encode_message(_aps_message(message_factory, critical))
    assert document["apns"]["payload"]["aps"] == {
        "sound": {"critical": 1, "name": "alarm", "volume": 0.5}
    }

    aps = decode_message(_aps_document({"sound": "default"})).apns.payload.aps  # type: ignore[union-attr]
    assert aps is not None
    assert aps.sound == "default"
    assert aps.critical_sound is None


def test_aps_boolean_flags_are_integers(message_factory: Callable[..., Message]) -> None:
    aps = Aps(content_available=True, mutable_content=True, badge=0)
    document = encode_message(_aps_message(message_factory, aps))
    assert document["apns"]["payload"]["aps"] == {
        "content-available": 1,
        "mutable-content": 1,
        "badge": 0,
    }


@pytest.mark.parametrize("wire", [{}, {"content-available": 0}, {"content-available": 2}, {"content-available": True}])
def test_decode_content_available_only_one_is_true(wire: dict[str, object]) -> None:
    aps = decode_message(_aps_document(wire)).apns.payload.aps  # type: ignore[union-attr]
    assert aps is not None
    assert aps.content_available is False


def test_apns_custom_keys_are_split_from_standard_keys() -> None:
    document = {
        "token": "abc",
        "apns": {"payload": {"aps": {"badge": 2, "acme": 1}, "extra": {"x": "y"}}},
    }
    payload = decode_message(document).apns.payload  # type: ignore[union-attr]
    assert payload is not None
    assert payload.custom_data == {"extra": {"x": "y"}}
    assert payload.aps is not None
    assert payload.aps.badge == 2
    assert payload.aps.custom_data == {"acme": 1}


def test_round_trip_full_message(full_message: Message) -> None:
    assert decode_message(encode_message(full_message)) == full_message


def test_round_trip_through_json_text(full_message: Message) -> None:
    text = dumps_message(full_message)
    assert json.loads(text)["token"] == full_message.token
    assert loads_message(text) == full_message


def test_loads_message_rejects_invalid_json() -> None:
    with pytest.raises(FormatError) as exc_info:
        loads_message("{not json")
    assert exc_info.value.field == "message"


def test_decode_requires_object() -> None:
    with pytest.raises(FormatError):
        decode_message(["token"])  # type: ignore[arg-type]


def test_decode_priority_token_into_enum() -> None:
    document = {"token": "abc", "android": {"notification": {"notification_priority": "PRIORITY_MIN"}}}
    notification = decode_message(document).android.notification  # type: ignore[union-attr]
    assert notification is not None
    assert notification.priority is AndroidNotificationPriority.MIN


def test_decode_out_of_range_ttl_is_format_error() -> None:
    with pytest.raises(FormatError) as exc_info:
        decode_message({"token": "abc", "android": {"ttl": "999999999999999999s"}})
    assert exc_info.value.field == "message.android.ttl"


def test_naive_event_timestamp_round_trips(message_factory: Callable[..., Message]) -> None:
    naive = datetime(2026, 2, 13, 12, 0, 0, 250000)
    message = message_factory(
        android=AndroidConfig(notification=AndroidNotification(event_timestamp=naive))
    )

    assert message.android.notification.event_timestamp == naive.replace(tzinfo=timezone.utc)  # type: ignore[union-attr]
    document = encode_message(message)
    assert document["android"]["notification"]["event_time"] == "2026-02-13T12:00:00.250000000Z"
    assert decode_message(document) == message


@pytest.mark.parametrize(
    ("color", "stored"),
    [("#ff0000", "#FF0000"), ("#ff0000FF", "#FF0000"), ("#ff000080", "#FF000080")],
)
def test_light_settings_color_is_normalized_and_round_trips(
    message_factory: Callable[..., Message], color: str, stored: str
) -> None:
    light = LightSettings(
        color=color,
        light_on_duration=timedelta(seconds=1),
        light_off_duration=timedelta(seconds=1),
    )
    message = message_factory(
        android=AndroidConfig(notification=AndroidNotification(light_settings=light))
    )

    assert light.color == stored
    assert decode_message(encode_message(message)) == message
