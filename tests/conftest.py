# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from fcm_messaging.config import Settings
from fcm_messaging.models import (
    APNSConfig,
    APNSFcmOptions,
    APNSPayload,
    AndroidConfig,
    AndroidFcmOptions,
    AndroidNotification,
    AndroidNotificationPriority,
    AndroidNotificationProxy,
    AndroidNotificationVisibility,
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
)


@pytest.fixture
def registration_token() -> str:
    """Default device registration token used by tests."""
    return "dGVzdC1yZWdpc3RyYXRpb24tdG9rZW4tOXhZdw"


@pytest.fixture
def event_time() -> datetime:
    """Stable UTC timestamp for deterministic assertions."""
    return datetime(2026, 2, 13, 12, 0, 0, 123456, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> Settings:
    """Settings with a project and token configured, independent of the environment."""
    return Settings(
        fcm={
            "project_id": "demo-project",
            "endpoint": "https://fcm.example.test/v1",
            "access_token": "ya29.test-access-token",
            "timeout_seconds": 5.0,
        },
        logging={"log_to_console": False, "log_to_file": False},
    )


@pytest.fixture
def message_factory(registration_token: str) -> Callable[..., Message]:
    """Build a token-targeted Message; overrides replace any field."""

    def _build(**overrides: Any) -> Message:
        fields: dict[str, Any] = {"token": registration_token}
        fields.update(overrides)
        return Message(**fields)

    return _build


@pytest.fixture
def android_notification_factory(event_time: datetime) -> Callable[..., AndroidNotification]:
    """Build an AndroidNotification with every field populated."""

    def _build(**overrides: Any) -> AndroidNotification:
        fields: dict[str, Any] = {
            "title": "Title",
            "body": "Body",
            "icon": "ic_notification",
            "color": "#336699",
            "sound": "chime",
            "tag": "orders",
            "click_action": "OPEN_ORDER",
            "body_loc_key": "order_body",
            "body_loc_args": ["42"],
            "title_loc_key": "order_title",
            "title_loc_args": ["Alice"],
            "channel_id": "orders",
            "ticker": "New order",
            "sticky": True,
            "event_timestamp": event_time,
            "local_only": True,
            "priority": AndroidNotificationPriority.HIGH,
            "default_sound": True,
            "vibrate_timings": [timedelta(seconds=1), timedelta(milliseconds=500)],
            "visibility": AndroidNotificationVisibility.PUBLIC,
            "notification_count": 3,
            "light_settings": LightSettings(
                color="#FF0000",
                light_on_duration=timedelta(milliseconds=300),
                light_off_duration=timedelta(seconds=2),
            ),
            "image": "https://example.com/order.png",
            "proxy": AndroidNotificationProxy.DENY,
        }
        fields.update(overrides)
        return AndroidNotification(**fields)

    return _build


@pytest.fixture
def full_message(
    message_factory: Callable[..., Message],
    android_notification_factory: Callable[..., AndroidNotification],
) -> Message:
    """A valid message exercising every block (no custom/standard key collisions)."""
    return message_factory(
        data={"order_id": "42"},
        notification=Notification(title="Hello", body="World", image="https://example.com/a.png"),
        android=AndroidConfig(
            collapse_key="orders",
            priority="high",
            ttl=timedelta(hours=1, milliseconds=500),
            restricted_package_name="com.example.app",
            data={"screen": "orders"},
            notification=android_notification_factory(),
            fcm_options=AndroidFcmOptions(analytics_label="android-label"),
            direct_boot_ok=True,
        ),
        webpush=WebpushConfig(
            headers={"TTL": "60"},
            data={"k": "v"},
            notification=WebpushNotification(
                actions=[WebpushNotificationAction(action="open", title="Open", icon="o.png")],
                title="T",
                body="B",
                icon="https://example.com/i.png",
                direction="ltr",
                data={"nested": [1, 2]},
                language="en",
                renotify=True,
                tag="t",
                timestamp_millis=1700000000000,
                vibrate=[100, 50, 100],
                custom_data={"foo": "bar"},
            ),
            fcm_options=WebpushFcmOptions(link="https://example.com/orders"),
        ),
        apns=APNSConfig(
            headers={"apns-priority": "10"},
            payload=APNSPayload(
                aps=Aps(
                    alert=ApsAlert(
                        title="T",
                        subtitle="S",
                        body="B",
                        loc_key="lk",
                        loc_args=["a"],
                        launch_image="launch.png",
                    ),
                    badge=0,
                    critical_sound=CriticalSound(critical=True, name="alarm", volume=0.5),
                    content_available=True,
                    mutable_content=True,
                    category="ORDER",
                    thread_id="orders",
                    custom_data={"acme": {"x": 1}},
                ),
                custom_data={"extra": "value"},
            ),
            fcm_options=APNSFcmOptions(analytics_label="ios", image="https://example.com/i.png"),
            live_activity_token="live-token",
        ),
        fcm_options=FcmOptions(analytics_label="campaign_1"),
    )
