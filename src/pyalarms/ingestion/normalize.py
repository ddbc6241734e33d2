"""Normalization helpers.

Lenient parsing of the loosely typed telemetry payload.
"""

from __future__ import annotations

import math
from typing import Any


def safe_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if value in ("", "--"):
            return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    parsed = safe_float(value)
    if parsed is None:
        return None
    return int(parsed)


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text else None


def normalize_epoch_seconds(value: Any) -> int | None:
    """Normalize a change timestamp to whole epoch seconds.

    - Empty/missing/unparseable -> None
    - <= 0 -> None
    """
    seconds = safe_int(value)
    if seconds is None or seconds <= 0:
        return None
    return seconds


def seconds_to_millis(value: int | None) -> int | None:
    if value is None:
        return None
    return value * 1000
