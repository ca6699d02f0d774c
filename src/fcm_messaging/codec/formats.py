# -*- coding: utf-8 -*-
"""Micro-format codecs used inside the wire document.

- Durations: "<seconds>s" or "<seconds>.<9-digit nanos>s" (protobuf Duration JSON form).
- Colors: "#RRGGBB" / "#RRGGBBAA" <-> RGBA channels normalized to 0..1.
- Event timestamps: RFC 3339 in UTC with nine fractional digits and a "Z" suffix.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta
from typing import Any, NamedTuple

from fcm_messaging.exceptions import FormatError

_NANOS_PER_SECOND = 1_000_000_000
_MICROS_PER_SECOND = 1_000_000

_DIGITS = re.compile(r"[0-9]+")
_FRACTION = re.compile(r"[0-9]{1,9}")
_COLOR = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})?")
_TIMESTAMP = re.compile(r"(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.([0-9]{1,9}))?Z")


class Rgba(NamedTuple):
    """Color channels normalized to 0.0 - 1.0."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0


def duration_to_string(value: timedelta, *, field: str = "duration") -> str:
    """Format a non-negative duration as "90s" or "1.500000000s".

    Raises:
        FormatError: If value is not a timedelta or is negative.
    """
    if not isinstance(value, timedelta):
        raise FormatError(f"{field} must be a timedelta", field=field, value=value)
    total_micros = (value.days * 86_400 + value.seconds) * _MICROS_PER_SECOND + value.microseconds
    if total_micros < 0:
        raise FormatError(f"{field} must not be negative", field=field, value=value)
    seconds, micros = divmod(total_micros, _MICROS_PER_SECOND)
    nanos = micros * 1000
    if nanos:
        return f"{seconds}.{nanos:09d}s"
    return f"{seconds}s"


def string_to_duration(value: Any, *, field: str = "duration") -> timedelta:
    """Parse "<s>s" or "<s>.<fraction>s" into a timedelta.

    The fractional part is read as a decimal fraction of a second (up to nine
    digits); precision below one microsecond is truncated.

    Raises:
        FormatError: On wrong type, wrong number of segments or non-numeric segments,
            or a value too large for timedelta.
    """
    if not isinstance(value, str):
        raise FormatError(f"{field} must be a string", field=field, value=value)
    segments = value.removesuffix("s").split(".")
    if len(segments) not in (1, 2):
        raise FormatError(
            f"incorrect number of segments in {field}: {value!r}", field=field, value=value
        )
    if not _DIGITS.fullmatch(segments[0]):
        raise FormatError(f"failed to parse {field}: {value!r}", field=field, value=value)
    nanos = 0
    if len(segments) == 2:
        if not _FRACTION.fullmatch(segments[1]):
            raise FormatError(f"failed to parse {field}: {value!r}", field=field, value=value)
        nanos = int(segments[1].ljust(9, "0"))
    try:
        return timedelta(seconds=int(segments[0]), microseconds=nanos // 1000)
    except (OverflowError, ValueError) as e:
        raise FormatError(f"{field} out of range: {value!r}", field=field, value=value) from e


def color_to_rgba(value: Any, *, field: str = "color") -> Rgba:
    """Parse "#RRGGBB" or "#RRGGBBAA" into normalized channels (alpha defaults to opaque)."""
    match = _COLOR.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise FormatError(
            f"{field} must be in #RRGGBB or #RRGGBBAA form: {value!r}", field=field, value=value
        )
    red, green, blue, alpha = match.groups()
    return Rgba(
        red=int(red, 16) / 255.0,
        green=int(green, 16) / 255.0,
        blue=int(blue, 16) / 255.0,
        alpha=int(alpha, 16) / 255.0 if alpha is not None else 1.0,
    )


def rgba_to_color(value: Rgba, *, field: str = "color") -> str:
    """Format normalized channels as "#RRGGBB", or "#RRGGBBAA" when not fully opaque."""
    channels: list[int] = []
    for name, channel in zip(Rgba._fields, value):
        if isinstance(channel, bool) or not isinstance(channel, (int, float)) or not 0.0 <= channel <= 1.0:
            raise FormatError(
                f"{field}.{name} must be a number in [0, 1]", field=f"{field}.{name}", value=channel
            )
        channels.append(round(channel * 255.0))
    if channels[3] == 255:
        channels = channels[:3]
    return "#" + "".join(f"{c:02X}" for c in channels)


def timestamp_to_string(value: datetime, *, field: str = "timestamp") -> str:
    """Format a datetime as "YYYY-MM-DDTHH:MM:SS.nnnnnnnnnZ" (naive values are taken as UTC)."""
    if not isinstance(value, datetime):
        raise FormatError(f"{field} must be a datetime", field=field, value=value)
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond:06d}000Z"


def string_to_timestamp(value: Any, *, field: str = "timestamp") -> datetime:
    """Parse an RFC 3339 UTC timestamp ending in "Z" into an aware UTC datetime."""
    match = _TIMESTAMP.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise FormatError(f"failed to parse {field}: {value!r}", field=field, value=value)
    base, fraction = match.groups()
    try:
        parsed = datetime.strptime(base, "%Y-%m-%dT%H:%M:%S")
    except ValueError as e:
        raise FormatError(f"failed to parse {field}: {value!r}", field=field, value=value) from e
    micros = int(fraction.ljust(9, "0")) // 1000 if fraction else 0
    return parsed.replace(microsecond=micros, tzinfo=UTC)
