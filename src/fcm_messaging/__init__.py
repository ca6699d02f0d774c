"""FCM messaging: message model, wire codec, validation and an async send client."""

from fcm_messaging.clients import AsyncHttpClient, FcmClient, StaticTokenProvider
from fcm_messaging.codec import decode_message, dumps_message, encode_message, loads_message
from fcm_messaging.config import get_settings
from fcm_messaging.DI import Container
from fcm_messaging.models import Message
from fcm_messaging.validation import validate_message

__version__ = "0.0.1"
__all__ = [
    "AsyncHttpClient",
    "Container",
    "FcmClient",
    "Message",
    "StaticTokenProvider",
    "decode_message",
    "dumps_message",
    "encode_message",
    "get_settings",
    "loads_message",
    "validate_message",
]
