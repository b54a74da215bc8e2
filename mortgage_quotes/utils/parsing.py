"""Lenient number parsing for form inputs and CMS-sourced product fields."""

from __future__ import annotations

import math
import re
from typing import Any, Optional

_STRIP_PATTERN = re.compile(r"[£$€,%\s]")


def parse_number(value: Any) -> Optional[float]:
    """Return ``value`` as a float, or ``None`` when it carries no usable number.

    Accepts plain numbers and strings such as ``"£250,000"`` or ``"4.85%"``.
    Booleans, ``NaN`` and infinities are treated as absent.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        cleaned = _STRIP_PATTERN.sub("", value)
        if not cleaned:
            return None
        try:
            number = float(cleaned)
        except ValueError:
            return None
    else:
        return None

    if math.isnan(number) or math.isinf(number):
        return None
    return number


def format_currency(amount: float, symbol: str = "£") -> str:
    """Format ``amount`` as e.g. ``£1,151.77``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_percent(value: Optional[float], placeholder: str = "N/A") -> str:
    """Format a percentage like ``4.85%`` while keeping short values short (``90%``)."""
    if value is None:
        return placeholder
    return f"{value:.2f}".rstrip("0").rstrip(".") + "%"
