"""
Screen-space helpers. Angles are in degrees, 0 at 12 o'clock, growing clockwise;
y grows downwards.
"""

from __future__ import annotations

import math
from typing import Tuple


def polar_to_cartesian(radius: float, degrees: float, y_offset: float = 0.0) -> Tuple[float, float]:
    """Position on a circle of ``radius`` around the centre, nudged down by ``y_offset``."""
    rad = math.radians(degrees)
    return radius * math.sin(rad), -radius * math.cos(rad) + y_offset


def rotate_point(x: float, y: float, degrees: float) -> Tuple[float, float]:
    """Rotates ``(x, y)`` clockwise around the origin, like SVG ``rotate()``."""
    rad = math.radians(degrees)
    cos_a, sin_a = math.cos(rad), math.sin(rad)
    return x * cos_a - y * sin_a, x * sin_a + y * cos_a


def shortest_target(current: float, target: float) -> float:
    """
    Returns ``target`` shifted by whole turns so that the way from ``current``
    is at most half a turn.
    """
    delta = (target - current) % 360.0
    if delta > 180.0:
        delta -= 360.0
    return current + delta
