# -*- coding: utf-8 -*-
"""Domain models."""

from fcm_messaging.models.android import (
    AndroidConfig,
    AndroidFcmOptions,
    AndroidNotification,
    AndroidNotificationPriority,
    AndroidNotificationProxy,
    AndroidNotificationVisibility,
    LightSettings,
)
from fcm_messaging.models.apns import (
    APNSConfig,
    APNSFcmOptions,
    APNSPayload,
    Aps,
    ApsAlert,
    CriticalSound,
)
from fcm_messaging.models.message import (
    TOPIC_PREFIX,
    FcmOptions,
    Message,
    Notification,
    bare_topic,
)
from fcm_messaging.models.webpush import (
    WebpushConfig,
    WebpushFcmOptions,
    WebpushNotification,
    WebpushNotificationAction,
)

__all__ = [
    "APNSConfig",
    "APNSFcmOptions",
    "APNSPayload",
    "AndroidConfig",
    "AndroidFcmOptions",
    "AndroidNotification",
    "AndroidNotificationPriority",
    "AndroidNotificationProxy",
    "AndroidNotificationVisibility",
    "Aps",
    "ApsAlert",
    "CriticalSound",
    "FcmOptions",
    "LightSettings",
    "Message",
    "Notification",
    "TOPIC_PREFIX",
    "WebpushConfig",
    "WebpushFcmOptions",
    "WebpushNotification",
    "WebpushNotificationAction",
    "bare_topic",
]
