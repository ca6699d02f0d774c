# -*- coding: utf-8 -*-
"""Unit tests for wire field readers and omit-empty helpers."""

from __future__ import annotations

import pytest

from fcm_messaging.codec.fields import (
    omit_empty,
    put_if_present,
    read_bool,
    read_flag,
    read_int,
    read_str,
    read_str_map,
)
from fcm_messaging.exceptions import FormatError


def test_omit_empty_drops_empty_but_keeps_zero() -> None:
    values = {"a": None, "b": False, "c": "", "d": [], "e": {}, "f": 0, "g": "x", "h": True}
    assert omit_empty(values) == {"f": 0, "g": "x", "h": True}


def test_put_if_present_keeps_empty_objects() -> None:
    target: dict[str, object] = {}
    put_if_present(target, "a", None)
    put_if_present(target, "b", {})
    assert target == {"b": {}}


def test_read_str_names_field_on_type_mismatch() -> None:
    with pytest.raises(FormatError) as exc_info:
        read_str({"title": 1}, "title", path="message.notification")
    assert exc_info.value.field == "message.notification.title"
    assert exc_info.value.value == 1


def test_read_bool_absent_is_false() -> None:
    assert read_bool({}, "sticky", path="x") is False
    with pytest.raises(FormatError):
        read_bool({"sticky": 1}, "sticky", path="x")


@pytest.mark.parametrize(("value", "expected"), [(1, True), (0, False), (2, False), (True, False), ("1", False), (None, False)])
def test_read_flag_only_one_is_true(value: object, expected: bool) -> None:
    assert read_flag({"content-available": value}, "content-available") is expected


def test_read_int_rejects_bool_and_float() -> None:
    with pytest.raises(FormatError):
        read_int({"badge": True}, "badge", path="aps")
    with pytest.raises(FormatError):
        read_int({"badge": 1.5}, "badge", path="aps")
    assert read_int({"badge": 0}, "badge", path="aps") == 0


def test_read_str_map_requires_string_values() -> None:
    assert read_str_map({"data": {"k": "v"}}, "data", path="message") == {"k": "v"}
    with pytest.raises(FormatError) as exc_info:
        read_str_map({"data": {"k": 1}}, "data", path="message")
    assert exc_info.value.field == "message.data"
