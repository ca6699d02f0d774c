# -*- coding: utf-8 -*-
"""Bidirectional mapping between enum members and their wire tokens.

The zero member of each enum means "unspecified": it is never written to the
wire and is what a missing token decodes to. Unknown tokens are errors.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Generic, Optional, TypeVar

from fcm_messaging.exceptions import FormatError
from fcm_messaging.models.android import (
    AndroidNotificationPriority,
    AndroidNotificationProxy,
    AndroidNotificationVisibility,
)


E = TypeVar("E", bound=IntEnum)


class EnumCodec(Generic[E]):
    """Encode/decode one closed set of enum members to string tokens."""

    def __init__(self, enum_type: type[E], tokens: Mapping[E, str], *, field: str) -> None:
        self._enum_type = enum_type
        self._to_wire: Mapping[E, str] = MappingProxyType(dict(tokens))
        self._from_wire: Mapping[str, E] = MappingProxyType({t: v for v, t in tokens.items()})
        self.field = field

    @property
    def unspecified(self) -> E:
        return self._enum_type(0)

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(self._from_wire)

    def encode(self, value: E) -> Optional[str]:
        """Return the wire token, or None for the unspecified member."""
        if value == self.unspecified:
            return None
        token = self._to_wire.get(value)
        if token is None:
            raise FormatError(f"unknown {self.field} value: {value!r}", field=self.field, value=value)
        return token

    def decode(self, token: Any) -> E:
        """Return the member for token; None or "" decode to the unspecified member.

        Raises:
            FormatError: If token is not one of the known tokens.
        """
        if token is None or token == "":
            return self.unspecified
        member = self._from_wire.get(token) if isinstance(token, str) else None
        if member is None:
            raise FormatError(f"unknown {self.field} value: {token!r}", field=self.field, value=token)
        return member


PRIORITY_CODEC = EnumCodec(
    AndroidNotificationPriority,
    {
        AndroidNotificationPriority.MIN: "PRIORITY_MIN",
        AndroidNotificationPriority.LOW: "PRIORITY_LOW",
        AndroidNotificationPriority.DEFAULT: "PRIORITY_DEFAULT",
        AndroidNotificationPriority.HIGH: "PRIORITY_HIGH",
        AndroidNotificationPriority.MAX: "PRIORITY_MAX",
    },
    field="android.notification.notification_priority",
)

VISIBILITY_CODEC = EnumCodec(
    AndroidNotificationVisibility,
    {
        AndroidNotificationVisibility.PRIVATE: "PRIVATE",
        AndroidNotificationVisibility.PUBLIC: "PUBLIC",
        AndroidNotificationVisibility.SECRET: "SECRET",
    },
    field="android.notification.visibility",
)

PROXY_CODEC = EnumCodec(
    AndroidNotificationProxy,
    {
        AndroidNotificationProxy.ALLOW: "ALLOW",
        AndroidNotificationProxy.DENY: "DENY",
        AndroidNotificationProxy.IF_PRIORITY_LOWERED: "IF_PRIORITY_LOWERED",
    },
    field="android.notification.proxy",
)
