"""
Measurements over a wound vertex sequence: shoelace area, ray-casting
containment and point-to-boundary distance.

⚠️  Every helper assumes the sequence already went through the polygon
    builder: at least 3 distinct vertices, consistently wound, no closing
    duplicate of the first vertex.
"""

import math
from typing import Callable, Optional, Sequence, Tuple
import numpy as np

from .planar_utils import doubles_equal, euclidean_distance


# ──────────────────────────────────────────────────────────────────────────────
#  Area
# ──────────────────────────────────────────────────────────────────────────────
def shoelace_area(vertices: Sequence) -> float:
    """Planar area (square units) of the polygon, whatever its winding."""
    xs = np.array([v.x for v in vertices], dtype=float)
    ys = np.array([v.y for v in vertices], dtype=float)
    forward = float(np.dot(xs, np.roll(ys, -1)))
    backward = float(np.dot(np.roll(xs, -1), ys))
    return abs((forward - backward) / 2.0)


# ──────────────────────────────────────────────────────────────────────────────
#  Containment
# ──────────────────────────────────────────────────────────────────────────────
def point_in_polygon(point, vertices: Sequence) -> bool:
    """
    PNPOLY (W. Randolph Franklin) even-odd test.

    Each edge counts with its upper endpoint inclusive and lower endpoint
    exclusive, so a shared vertex is crossed once. Points exactly on an edge
    are not guaranteed a stable answer.
    """
    if point is None:
        return False
    inside = False
    n = len(vertices)
    j = n - 1
    for i in range(n):
        vi, vj = vertices[i], vertices[j]
        if (vi.y >= point.y) != (vj.y >= point.y):          # edge straddles scan-line
            xinters = (vj.x - vi.x) * (point.y - vi.y) / (vj.y - vi.y) + vi.x
            if point.x <= xinters:
                inside = not inside
        j = i
    return inside


# ──────────────────────────────────────────────────────────────────────────────
#  Boundary distance
# ──────────────────────────────────────────────────────────────────────────────
def _line_through(v1, v2) -> Tuple[float, float, float]:
    """Coefficients (a, b, c) of a*x + b*y + c = 0 through v1 and v2."""
    dx = v2.x - v1.x
    dy = v2.y - v1.y
    if dx == 0:
        a, b = 1.0, 0.0                 # vertical: x + c = 0
    else:
        a, b = dy / dx, -1.0
    return a, b, -(a * v1.x + b * v1.y)


def _perpendicular_through(point, v1, v2) -> Tuple[float, float, float]:
    """Coefficients of the line through ``point`` perpendicular to v1-v2."""
    dx = v2.x - v1.x
    dy = v2.y - v1.y
    if dy == 0:
        aa, bb = 1.0, 0.0               # edge horizontal, perpendicular vertical
    elif dx == 0:
        aa, bb = 0.0, -1.0              # edge vertical, perpendicular horizontal
    else:
        aa, bb = -1.0 / (dy / dx), -1.0
    return aa, bb, -(aa * point.x + bb * point.y)


def project_onto_line(point, v1, v2) -> Tuple[float, float]:
    """
    Foot of the perpendicular from ``point`` to the infinite line through
    v1 and v2, solved by eliminating y from the two line equations.
    """
    a, b, c = _line_through(v1, v2)
    aa, bb, cc = _perpendicular_through(point, v1, v2)
    if doubles_equal(bb, 0):
        xx = -cc
        yy = -(a * xx + c) / b
    else:
        xx = -(c * bb - cc * b) / (a * bb - aa * b)
        yy = -(aa * xx + cc) / bb
    return xx, yy


def boundary_distance(
    point,
    vertices: Sequence,
    distance: Callable = euclidean_distance,
    accepts: Optional[Callable[[float, float], bool]] = None,
) -> float:
    """
    Smallest distance from ``point`` to any edge of the polygon.

    The projection onto each edge is always planar; ``distance`` measures
    the result (Euclidean or geodesic). Edges whose projection ``accepts``
    rejects (e.g. a latitude past the pole) are skipped. Containment is not
    checked here.
    """
    best = math.inf
    n = len(vertices)
    for i in range(n):
        v1 = vertices[i]
        v2 = vertices[(i + 1) % n]
        xx, yy = project_onto_line(point, v1, v2)
        if accepts is not None and not accepts(xx, yy):
            continue
        foot = type(v1)(xx, yy)

        edge = distance(v1, v2)
        d1 = distance(foot, v1)
        d2 = distance(foot, v2)
        if d1 < edge and d2 < edge:
            # foot lies on the segment
            candidate = distance(point, foot)
        else:
            candidate = min(distance(point, v1), distance(point, v2))
        best = min(best, candidate)
    return best
