"""Access-token providers for the FCM HTTP v1 API."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fcm_messaging.config import Settings
from fcm_messaging.exceptions import MissingRequiredConfigError


class ITokenProvider(ABC):
    """Interface for supplying the OAuth2 bearer token used on each send."""

    @abstractmethod
    async def get_token(self) -> str:
        """Return a currently valid access token."""
        ...


class StaticTokenProvider(ITokenProvider):
    """Token provider returning a pre-acquired access token (FCM__ACCESS_TOKEN)."""

    def __init__(self, token: str | None) -> None:
        if not token:
            raise MissingRequiredConfigError("FCM__ACCESS_TOKEN")
        self._token = token

    @classmethod
    def from_settings(cls, settings: Settings) -> StaticTokenProvider:
        return cls(settings.fcm.access_token)

    async def get_token(self) -> str:
        return self._token
