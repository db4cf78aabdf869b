"""Normalization helpers for operator input.

Centralizes lenient parsing of free-form text typed at a prompt.
"""

from __future__ import annotations

import math
from typing import Any


def safe_float(value: Any) -> float | None:
    """Parse *value* as a finite float, or return ``None``."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    if isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    """Parse *value* as an integer, or return ``None``.

    Only integral text is accepted: ``"3"`` parses, ``"3.5"`` and ``"3x"`` do not.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        return None


def non_negative(value: Any) -> float | None:
    """Parse *value* as a finite float that is ``>= 0``, or return ``None``."""
    parsed = safe_float(value)
    if parsed is None or parsed < 0:
        return None
    return parsed
