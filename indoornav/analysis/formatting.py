"""Human-readable time and distance strings."""

from __future__ import annotations

import math


def format_time(minutes: float) -> str:
    """``'< 1 min'``, ``'12 min'`` or ``'1h 5m'``."""
    if minutes < 1:
        return "< 1 min"
    if minutes < 60:
        return f"{math.ceil(minutes)} min"
    hours = int(minutes // 60)
    remaining = math.ceil(minutes % 60)
    return f"{hours}h {remaining}m"


def format_distance(distance: float) -> str:
    """Round short distances to the unit, medium ones to tens, long ones to km."""
    if distance < 100:
        return f"{math.ceil(distance)}m"
    if distance < 1000:
        return f"{math.ceil(distance / 10) * 10}m"
    return f"{distance / 1000:.1f}km"
