"""Validation helpers for URLs and registration tokens."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def parse_absolute_url(link: Any) -> Optional[AnyUrl]:
    """Return the parsed URL if link is an absolute, well-formed URL, else None."""
    if not isinstance(link, str) or not link.strip():
        return None
    try:
        return _URL_ADAPTER.validate_python(link)
    except PydanticValidationError:
        return None


def is_absolute_url(link: Any) -> bool:
    """Return True if link parses as an absolute URL (scheme required)."""
    return parse_absolute_url(link) is not None


def is_https_url(link: Any) -> bool:
    """Return True if link is an absolute URL with scheme exactly "https"."""
    parsed = parse_absolute_url(link)
    return parsed is not None and parsed.scheme == "https"


def mask_token(token: str | None) -> str:
    """Return a masked registration token for logging (e.g. dGVz...9xYw)."""
    if not token or len(token) < 12:
        return "***"
    return f"{token[:4]}...{token[-4:]}"
