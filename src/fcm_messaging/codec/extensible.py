# -*- coding: utf-8 -*-
"""Codec for extensible records: fixed standard keys plus a flat bag of custom keys.

On encode the custom bag is laid over the standard object (last write wins).
On decode every standard key name is removed from the wire object and the
remainder becomes the custom bag. Collisions are reported, not resolved here;
the validator turns them into errors.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any


class ExtensibleRecordCodec:
    """Merge/split helper for one extensible record type."""

    def __init__(self, name: str, standard_keys: Iterable[str]) -> None:
        self.name = name
        self.standard_keys: frozenset[str] = frozenset(standard_keys)

    def merge(self, standard: Mapping[str, Any], custom: Mapping[str, Any]) -> dict[str, Any]:
        """Return standard with custom entries overlaid (custom values are deep-copied)."""
        merged = dict(standard)
        for key, value in custom.items():
            merged[key] = copy.deepcopy(value)
        return merged

    def split(self, wire: Mapping[str, Any]) -> dict[str, Any]:
        """Return the wire entries whose keys are not standard (deep-copied)."""
        return {
            key: copy.deepcopy(value)
            for key, value in wire.items()
            if key not in self.standard_keys
        }

    def collisions(self, custom: Mapping[str, Any]) -> list[str]:
        """Return custom keys that reuse a standard key name, in custom order."""
        return [key for key in custom if key in self.standard_keys]

    def __repr__(self) -> str:
        return f"ExtensibleRecordCodec({self.name!r}, {sorted(self.standard_keys)!r})"


WEBPUSH_NOTIFICATION_CODEC = ExtensibleRecordCodec(
    "webpush.notification",
    (
        "actions",
        "title",
        "body",
        "icon",
        "badge",
        "dir",
        "data",
        "image",
        "lang",
        "renotify",
        "requireInteraction",
        "silent",
        "tag",
        "timestamp",
        "vibrate",
    ),
)

APNS_PAYLOAD_CODEC = ExtensibleRecordCodec("apns.payload", ("aps",))

APS_CODEC = ExtensibleRecordCodec(
    "apns.payload.aps",
    (
        "alert",
        "badge",
        "sound",
        "content-available",
        "mutable-content",
        "category",
        "thread-id",
    ),
)
