"""
Planar helpers shared by the vertex model and the polygon engines.
"""

import math
from typing import Sequence

from ..models.config import EPSILON


def doubles_equal(a: float, b: float) -> bool:
    """True if ``a`` and ``b`` differ by less than EPSILON."""
    return abs(a - b) < EPSILON


def euclidean_distance(origin, destination) -> float:
    return math.hypot(origin.x - destination.x, origin.y - destination.y)


def planar_bearing(origin, destination) -> float:
    """
    Angle in degrees, in [0, 360), from ``origin`` to ``destination``,
    counter-clockwise from the positive x-axis.
    """
    angle = math.degrees(math.atan2(destination.y - origin.y, destination.x - origin.x))
    if angle < 0:
        angle += 360.0
    # -tiny + 360 rounds up to 360
    return 0.0 if angle >= 360.0 else angle


def winding_direction(vertices: Sequence) -> int:
    """
    Direction of a vertex sequence from the sum of every consecutive
    triangle's shoelace term.

    Returns 1 for clockwise, -1 for counter-clockwise and 0 for fewer than
    three vertices or a degenerate (collinear) sequence.
    """
    n = len(vertices)
    if n < 3:
        return 0
    total = 0.0
    for i in range(n):
        v1 = vertices[i]
        v2 = vertices[(i + 1) % n]
        v3 = vertices[(i + 2) % n]
        total += (
            (v2.x - v1.x) * (v2.y + v1.y)
            + (v3.x - v2.x) * (v3.y + v2.y)
            + (v1.x - v3.x) * (v1.y + v3.y)
        )
    if doubles_equal(total, 0):
        return 0
    return 1 if total > 0 else -1
