# -*- coding: utf-8 -*-
"""Message: the root value sent to FCM, plus the cross-platform notification template.

A Message must target exactly one of token, topic or condition. Topic names are
kept in bare form (without the "/topics/" prefix); the prefix is stripped at the
wire boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from fcm_messaging.models.android import AndroidConfig
    from fcm_messaging.models.apns import APNSConfig
    from fcm_messaging.models.webpush import WebpushConfig

TOPIC_PREFIX = "/topics/"


def bare_topic(topic: Optional[str]) -> Optional[str]:
    """Return topic without the "/topics/" prefix (None stays None)."""
    if topic is None:
        return None
    return topic.removeprefix(TOPIC_PREFIX)


@dataclass(frozen=True, slots=True)
class Notification:
    """Basic notification template used across all platforms."""

    title: Optional[str] = None
    body: Optional[str] = None
    image: Optional[str] = None
    """Absolute URL of an image shown in the notification."""


@dataclass(frozen=True, slots=True)
class FcmOptions:
    """Platform-independent FCM options."""

    analytics_label: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Message:
    """Message to be sent via Firebase Cloud Messaging.

    Targeting: exactly one of token, topic, condition must be non-empty at
    validation time. Platform blocks (android, webpush, apns) override the
    base notification/data for their platform.
    """

    data: dict[str, str] = field(default_factory=dict)
    notification: Optional[Notification] = None
    android: Optional["AndroidConfig"] = None
    webpush: Optional["WebpushConfig"] = None
    apns: Optional["APNSConfig"] = None
    fcm_options: Optional[FcmOptions] = None

    token: Optional[str] = None
    """Registration token of the target device."""
    topic: Optional[str] = None
    """Topic name, stored bare; a leading "/topics/" is tolerated and stripped on encode."""
    condition: Optional[str] = None
    """Topic condition expression, e.g. "'a' in topics && 'b' in topics"."""

    def targets(self) -> list[str]:
        """Return the names of the non-empty targeting fields."""
        return [
            name
            for name, value in (
                ("token", self.token),
                ("topic", self.topic),
                ("condition", self.condition),
            )
            if value
        ]
