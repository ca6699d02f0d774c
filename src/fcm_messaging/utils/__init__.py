# -*- coding: utf-8 -*-
"""Utility modules."""

from fcm_messaging.utils.validation import (
    is_absolute_url,
    is_https_url,
    mask_token,
    parse_absolute_url,
)

__all__ = ["is_absolute_url", "is_https_url", "mask_token", "parse_absolute_url"]
