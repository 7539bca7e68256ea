"""Circle geometry and scalar helpers."""

from __future__ import annotations

import math

from ..models.types import MeasureType


def clamp(value: float, low: float, high: float) -> float:
    """Limit a value to the closed interval [low, high]."""
    return max(low, min(high, value))


def circle_area(radius: float) -> float:
    """
    Calculate the area of a circle.

    Args:
        radius: Circle radius (must be finite and non-negative)

    Returns:
        pi * r^2, or NaN if the radius is negative or not finite
    """
    if not math.isfinite(radius) or radius < 0:
        return math.nan
    return math.pi * radius * radius


def circumference(radius: float) -> float:
    """
    Calculate the circumference of a circle.

    Args:
        radius: Circle radius (must be finite and non-negative)

    Returns:
        2 * pi * r, or NaN if the radius is negative or not finite
    """
    if not math.isfinite(radius) or radius < 0:
        return math.nan
    return 2 * math.pi * radius


def radius_from_measurement(value: float, measure_type: MeasureType) -> float:
    """Return the radius for a measured radius or diameter."""
    if measure_type == 'diameter':
        return value / 2
    return value
