"""Shared utility functions for the dice engine."""
from __future__ import annotations

import re

_LEADING_DIGITS = re.compile(r"\s*(\d+)")


def safe_count(value, default: int) -> int:
    """Coerce a regex capture to a positive int, or return default.

    Handles the common pattern where an optional group either did not
    participate (None), matched nothing (""), or matched a zero.
    """
    if value is None:
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
        try:
            value = int(value)
        except ValueError:
            return default
    if value < 1:
        return default
    return value


def leading_int(text: str) -> int:
    """Return the leading digits of text as an int, 0 if there are none."""
    m = _LEADING_DIGITS.match(text)
    return int(m.group(1)) if m else 0
