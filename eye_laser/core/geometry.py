"""
Plane geometry helpers used by the beam and collision checks.
"""
import math
from typing import Optional, Tuple

Point = Tuple[float, float]


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def midpoint(a: Point, b: Point) -> Point:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def normalize(dx: float, dy: float) -> Optional[Point]:
    """
    Scale a vector to unit length.

    Args:
        dx: X component
        dy: Y component

    Returns:
        The unit vector, or None for a zero-length vector.
    """
    mag = math.hypot(dx, dy)
    if mag == 0:
        return None
    return (dx / mag, dy / mag)


def point_segment_distance(p: Point, a: Point, b: Point) -> float:
    """
    Shortest distance from point p to the segment a-b.

    The projection of p onto the segment is clamped to the endpoints. A
    zero-length segment is measured from a.
    """
    seg_x = b[0] - a[0]
    seg_y = b[1] - a[1]
    len_sq = seg_x * seg_x + seg_y * seg_y

    if len_sq == 0:
        return distance(p, a)

    t = ((p[0] - a[0]) * seg_x + (p[1] - a[1]) * seg_y) / len_sq
    t = max(0.0, min(1.0, t))

    closest = (a[0] + t * seg_x, a[1] + t * seg_y)
    return distance(p, closest)
