# -*- coding: utf-8 -*-
"""Typed readers for wire values and the omit-empty helpers shared by the codecs.

Every reader takes the containing object, the wire key and a dotted path used
in error messages, and raises FormatError naming the field on a type mismatch.
Absent keys and JSON null read as "empty" (None, False, [] or {}).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Optional, TypeVar

from fcm_messaging.exceptions import FormatError

T = TypeVar("T")


def is_empty(value: Any) -> bool:
    """Return True for values omitted from the wire: None, False, "", [] and {}."""
    if value is None or value is False:
        return True
    return isinstance(value, (str, list, dict)) and not value


def omit_empty(values: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of values without empty entries (0 is kept)."""
    return {k: v for k, v in values.items() if not is_empty(v)}


def put_if_present(target: dict[str, Any], key: str, value: Any) -> None:
    """Set target[key] unless value is None (empty objects are kept)."""
    if value is not None:
        target[key] = value


def _label(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def require_object(value: Any, *, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise FormatError(f"{path} must be an object", field=path, value=value)
    return value


def read_object(doc: Mapping[str, Any], key: str, *, path: str) -> Optional[Mapping[str, Any]]:
    value = doc.get(key)
    if value is None:
        return None
    return require_object(value, path=_label(path, key))


def read_nested(
    doc: Mapping[str, Any],
    key: str,
    decoder: Callable[..., T],
    *,
    path: str,
) -> Optional[T]:
    """Decode doc[key] with decoder(obj, path=...) when present."""
    obj = read_object(doc, key, path=path)
    if obj is None:
        return None
    return decoder(obj, path=_label(path, key))


def read_str(doc: Mapping[str, Any], key: str, *, path: str) -> Optional[str]:
    value = doc.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        label = _label(path, key)
        raise FormatError(f"{label} must be a string", field=label, value=value)
    return value


def read_bool(doc: Mapping[str, Any], key: str, *, path: str) -> bool:
    value = doc.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        label = _label(path, key)
        raise FormatError(f"{label} must be a boolean", field=label, value=value)
    return value


def read_flag(doc: Mapping[str, Any], key: str) -> bool:
    """Read a boolean carried as an integer: only 1 means True; anything else is False."""
    value = doc.get(key)
    return isinstance(value, int) and not isinstance(value, bool) and value == 1


def read_int(doc: Mapping[str, Any], key: str, *, path: str) -> Optional[int]:
    value = doc.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        label = _label(path, key)
        raise FormatError(f"{label} must be an integer", field=label, value=value)
    return value


def read_number(doc: Mapping[str, Any], key: str, *, path: str) -> Optional[float]:
    value = doc.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        label = _label(path, key)
        raise FormatError(f"{label} must be a number", field=label, value=value)
    return float(value)


def read_list(doc: Mapping[str, Any], key: str, *, path: str) -> list[Any]:
    value = doc.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        label = _label(path, key)
        raise FormatError(f"{label} must be a list", field=label, value=value)
    return list(value)


def read_str_list(doc: Mapping[str, Any], key: str, *, path: str) -> list[str]:
    items = read_list(doc, key, path=path)
    if any(not isinstance(item, str) for item in items):
        label = _label(path, key)
        raise FormatError(f"{label} must contain only strings", field=label, value=items)
    return items


def read_int_list(doc: Mapping[str, Any], key: str, *, path: str) -> list[int]:
    items = read_list(doc, key, path=path)
    if any(isinstance(item, bool) or not isinstance(item, int) for item in items):
        label = _label(path, key)
        raise FormatError(f"{label} must contain only integers", field=label, value=items)
    return items


def read_str_map(doc: Mapping[str, Any], key: str, *, path: str) -> dict[str, str]:
    obj = read_object(doc, key, path=path)
    if obj is None:
        return {}
    if any(not isinstance(k, str) or not isinstance(v, str) for k, v in obj.items()):
        label = _label(path, key)
        raise FormatError(f"{label} must map strings to strings", field=label, value=dict(obj))
    return dict(obj)
