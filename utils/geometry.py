"""geometry.py - Small 2D vector helpers shared by the simulation steps."""

from __future__ import annotations

import math


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* into ``[lo, hi]``."""
    return lo if value < lo else hi if value > hi else value


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def normalize(x: float, y: float) -> tuple[float, float]:
    """Return the unit vector for (x, y), or (0, 0) for the zero vector."""
    length = math.hypot(x, y)
    if length == 0:
        return 0.0, 0.0
    return x / length, y / length


def point_in_circle(px: float, py: float,
                    cx: float, cy: float, radius: float) -> bool:
    """True when the point lies strictly inside the circle."""
    return distance(px, py, cx, cy) < radius
