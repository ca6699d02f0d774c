# -*- coding: utf-8 -*-
"""Wire codecs: micro-formats, enum tokens, extensible records and the message document."""

from fcm_messaging.codec.enums import PRIORITY_CODEC, PROXY_CODEC, VISIBILITY_CODEC, EnumCodec
from fcm_messaging.codec.extensible import (
    APNS_PAYLOAD_CODEC,
    APS_CODEC,
    WEBPUSH_NOTIFICATION_CODEC,
    ExtensibleRecordCodec,
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
from fcm_messaging.codec.message_codec import (
    decode_message,
    dumps_message,
    encode_message,
    loads_message,
)

__all__ = [
    "APNS_PAYLOAD_CODEC",
    "APS_CODEC",
    "EnumCodec",
    "ExtensibleRecordCodec",
    "PRIORITY_CODEC",
    "PROXY_CODEC",
    "Rgba",
    "VISIBILITY_CODEC",
    "WEBPUSH_NOTIFICATION_CODEC",
    "color_to_rgba",
    "decode_message",
    "dumps_message",
    "duration_to_string",
    "encode_message",
    "loads_message",
    "rgba_to_color",
    "string_to_duration",
    "string_to_timestamp",
    "timestamp_to_string",
]
