# -*- coding: utf-8 -*-
"""Unit tests for duration, color and timestamp micro-formats."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from fcm_messaging.codec.formats import (
    Rgba,
    color_to_rgba,
    duration_to_string,
    rgba_to_color,
    string_to_duration,
    string_to_timestamp,
    timestamp_to_string,
)
from fcm_messaging.exceptions import FormatError


def test_duration_to_string_whole_seconds() -> None:
    assert duration_to_string(timedelta(seconds=90)) == "90s"
    assert duration_to_string(timedelta(0)) == "0s"


def test_duration_to_string_uses_nine_fraction_digits() -> None:
    assert duration_to_string(timedelta(seconds=1.5)) == "1.500000000s"
    assert duration_to_string(timedelta(microseconds=1)) == "0.000001000s"


def test_duration_to_string_rejects_negative() -> None:
    with pytest.raises(FormatError) as exc_info:
        duration_to_string(timedelta(seconds=-1), field="android.ttl")
    assert exc_info.value.field == "android.ttl"


@pytest.mark.parametrize(
    "duration",
    [timedelta(0), timedelta(seconds=90), timedelta(seconds=1.5), timedelta(days=2, microseconds=7)],
)
def test_duration_round_trip(duration: timedelta) -> None:
    assert string_to_duration(duration_to_string(duration)) == duration


def test_string_to_duration_reads_fraction_as_decimal() -> None:
    assert string_to_duration("1.5s") == timedelta(seconds=1.5)
    assert string_to_duration("0.050s") == timedelta(milliseconds=50)
    assert string_to_duration("3s") == timedelta(seconds=3)


def test_string_to_duration_truncates_below_microseconds() -> None:
    assert string_to_duration("0.000000999s") == timedelta(0)


@pytest.mark.parametrize("value", ["1.2.3s", "abcs", "-1s", "1.s", "1.1234567890s", "", 5])
def test_string_to_duration_rejects_malformed(value: object) -> None:
    with pytest.raises(FormatError) as exc_info:
        string_to_duration(value, field="ttl")
    assert exc_info.value.field == "ttl"
    assert exc_info.value.value == value


def test_color_to_rgba_opaque() -> None:
    assert color_to_rgba("#FF0000") == Rgba(1.0, 0.0, 0.0, 1.0)


def test_color_to_rgba_with_alpha() -> None:
    rgba = color_to_rgba("#FF000080")
    assert rgba.red == 1.0
    assert rgba.alpha == pytest.approx(0.502, abs=1e-3)


@pytest.mark.parametrize("value", ["FF0000", "#FF00", "#GG0000", "#FF0000F", None])
def test_color_to_rgba_rejects_malformed(value: object) -> None:
    with pytest.raises(FormatError):
        color_to_rgba(value)


def test_rgba_to_color_omits_opaque_alpha() -> None:
    assert rgba_to_color(Rgba(1.0, 0.0, 0.0, 1.0)) == "#FF0000"
    assert rgba_to_color(Rgba(0.2, 0.4, 0.6)) == "#336699"


def test_rgba_to_color_keeps_translucent_alpha() -> None:
    assert rgba_to_color(Rgba(1.0, 0.0, 0.0, 128 / 255)) == "#FF000080"


def test_color_round_trip_is_case_normalized() -> None:
    assert rgba_to_color(color_to_rgba("#ff00aa")) == "#FF00AA"


def test_rgba_to_color_rejects_out_of_range_channel() -> None:
    with pytest.raises(FormatError) as exc_info:
        rgba_to_color(Rgba(1.5, 0.0, 0.0), field="light.color")
    assert exc_info.value.field == "light.color.red"


def test_timestamp_to_string_has_nine_digits_and_z() -> None:
    value = datetime(2026, 2, 13, 12, 0, 0, 123456, tzinfo=timezone.utc)
    assert timestamp_to_string(value) == "2026-02-13T12:00:00.123456000Z"


def test_timestamp_to_string_converts_to_utc() -> None:
    value = datetime(2026, 2, 13, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert timestamp_to_string(value) == "2026-02-13T12:00:00.000000000Z"


def test_string_to_timestamp_returns_aware_utc() -> None:
    parsed = string_to_timestamp("2026-02-13T12:00:00.5Z")
    assert parsed == datetime(2026, 2, 13, 12, 0, 0, 500000, tzinfo=timezone.utc)
    assert parsed.tzinfo is not None


@pytest.mark.parametrize("value", ["2026-02-13T12:00:00", "2026-13-40T12:00:00Z", "yesterday"])
def test_string_to_timestamp_rejects_malformed(value: str) -> None:
    with pytest.raises(FormatError):
        string_to_timestamp(value, field="event_time")


@pytest.mark.parametrize("value", ["100000000000000s", "999999999999999999s", "9" * 5000 + "s"])
def test_string_to_duration_out_of_range_is_format_error(value: str) -> None:
    with pytest.raises(FormatError) as exc_info:
        string_to_duration(value, field="android.ttl")
    assert exc_info.value.field == "android.ttl"
    assert exc_info.value.value == value
