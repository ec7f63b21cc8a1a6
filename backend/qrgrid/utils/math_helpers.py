"""Math helpers — percent clamping, rounding. No engine imports."""

from __future__ import annotations

import math


def clamp_percent(percent: float) -> float:
    """Clamp to [0, 100]. Non-finite or non-numeric input counts as 0."""
    try:
        value = float(percent)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return min(100.0, max(0.0, value))


def round_half_away(value: float) -> int:
    """Round to nearest integer, ties away from zero (2.5 → 3, -2.5 → -3)."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value)) if whole else 0
