"""HTTP and FCM clients."""

from fcm_messaging.clients.auth import ITokenProvider, StaticTokenProvider
from fcm_messaging.clients.fcm_client import FcmClient, parse_error_response
from fcm_messaging.clients.http import AsyncHttpClient, HttpResponse

__all__ = [
    "AsyncHttpClient",
    "FcmClient",
    "HttpResponse",
    "ITokenProvider",
    "StaticTokenProvider",
    "parse_error_response",
]
