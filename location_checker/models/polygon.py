"""
Polygon model: area, containment and boundary distance over an immutable,
consistently wound vertex sequence.
"""
import enum
import logging
from typing import Iterable, Tuple

from .builder import build_winding
from .vertex import CoordinateSpace, Vertex, PLANAR, GEOGRAPHIC
from ..utils.formatting import format_vertices
from ..utils.geo_utils import geodesic_polygon_area
from ..utils.planar_utils import winding_direction
from ..utils.polygon_utils import shoelace_area, point_in_polygon, boundary_distance

logger = logging.getLogger(__name__)


class Winding(enum.Enum):
    """Traversal direction of a polygon's vertices."""
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = -1
    DEGENERATE = 0


class Polygon:
    """
    A simple polygon measured in a coordinate space (planar by default,
    or geographic with longitude/latitude vertices).

    The vertex sequence is fixed at construction; every query is read-only,
    so one instance can be shared between threads.
    """

    def __init__(self, vertices: Iterable, auto_order: bool = False, space: CoordinateSpace = PLANAR):
        """
        Args:
            vertices: Vertex objects, (x, y) pairs or None entries (skipped).
                      Geographic pairs are (longitude, latitude).
            auto_order: Arrange the vertices counter-clockwise. Otherwise
                        they must already be given clockwise or
                        counter-clockwise.
            space: PLANAR or GEOGRAPHIC.

        Raises:
            DegenerateInputError: fewer than 3 distinct vertices, or no area.
            RangeValidationError: geographic coordinates out of range.
        """
        self._space = space
        self._vertices: Tuple[Vertex, ...] = build_winding(vertices, auto_order, space)

    @classmethod
    def planar(cls, *vertices, auto_order: bool = False) -> "Polygon":
        return cls(vertices, auto_order=auto_order, space=PLANAR)

    @classmethod
    def geographic(cls, *vertices, auto_order: bool = False) -> "Polygon":
        return cls(vertices, auto_order=auto_order, space=GEOGRAPHIC)

    @property
    def space(self) -> CoordinateSpace:
        return self._space

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        """The wound vertices, as a new tuple."""
        return tuple(self._vertices)

    def get_vertices(self) -> list:
        """The wound vertices as a list the caller may modify freely."""
        return list(self._vertices)

    @property
    def winding(self) -> Winding:
        return Winding(winding_direction(self._vertices))

    def area(self) -> float:
        """
        Planar: square units from the shoelace formula.
        Geographic: square kilometers on the WGS84 ellipsoid.
        """
        if self._space is GEOGRAPHIC:
            return geodesic_polygon_area(self._vertices)
        return shoelace_area(self._vertices)

    def contains(self, point) -> bool:
        """True if ``point`` is inside the polygon. None is never inside."""
        if point is None:
            return False
        return point_in_polygon(self._space.coerce(point), self._vertices)

    def distance_to(self, point) -> float:
        """
        Distance from ``point`` to the polygon (kilometers when geographic).
        0 for points inside.
        """
        point = self._space.coerce(point)
        if point is None:
            raise ValueError("Cannot measure the distance to a missing point")
        if point_in_polygon(point, self._vertices):
            return 0.0
        return boundary_distance(point, self._vertices, self._space.distance, self._space.accepts)

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self):
        return iter(self._vertices)

    def __repr__(self) -> str:
        return f"Polygon({list(self._vertices)!r}, space={self._space.name!r})"

    def __str__(self) -> str:
        return f"{format_vertices(self._vertices)}: {self.area():f}"
