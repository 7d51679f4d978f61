"""Input sanitizing for form values.

Every helper here is total: malformed text, ``None``, NaN and infinities all
degrade to ``0`` instead of raising, so the calculators never see a value they
cannot do arithmetic on.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Any

logger = logging.getLogger(__name__)

_DISALLOWED_CHARS = re.compile(r"[^\d.]")
_LEADING_NUMBER = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)")


def _to_float(raw: Any) -> float:
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return 0.0
    else:
        # Only a leading minus counts as a sign, so negative entries are floored
        # rather than flipped. Every other non-numeric character is dropped.
        text = str(raw).strip()
        cleaned = _DISALLOWED_CHARS.sub("", text)
        match = _LEADING_NUMBER.match(cleaned)
        if not match:
            if cleaned:
                logger.debug("Unparseable numeric input %r, using 0", raw)
            return 0.0
        value = float(match.group(0))
        if text.startswith("-"):
            value = -value
    return value if math.isfinite(value) else 0.0


def parse_currency(raw: Any) -> float:
    return max(0.0, _to_float(raw))


def parse_percentage(raw: Any, upper: float = 100.0) -> float:
    """Parse a percentage and clamp it to ``[0, upper]``."""
    return min(max(0.0, _to_float(raw)), upper)


def parse_years(raw: Any, lower: int, upper: int) -> int:
    value = _to_float(raw)
    return int(min(max(float(lower), math.floor(value + 0.5)), float(upper)))


def clamp_slider_value(value: Any, maximum: float) -> float:
    number = _to_float(value)
    if not math.isfinite(maximum) or maximum <= 0:
        return 0.0
    return max(0.0, min(maximum, number))


def slider_fill_pct(value: Any, maximum: float) -> float:
    if not math.isfinite(maximum) or maximum <= 0:
        return 0.0
    return clamp_slider_value(value, maximum) / maximum * 100.0
