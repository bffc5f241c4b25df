"""
Vertex value type and the coordinate spaces a polygon can be measured in.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .config import LONGITUDE_MIN, LONGITUDE_MAX, LATITUDE_MIN, LATITUDE_MAX, DEFAULT_DECIMAL_DIGITS
from .errors import RangeValidationError
from ..utils.planar_utils import euclidean_distance, planar_bearing
from ..utils.geo_utils import vincenty_distance
from ..utils.formatting import format_vertex, split_lat_lon

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Vertex:
    """
    Immutable 2D point. Geographic vertices keep the longitude in ``x`` and
    the latitude in ``y``.

    Equality is exact on both coordinates; ordering is by ``x`` then ``y``.
    """
    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vertex":
        return cls(0.0, 0.0)

    @property
    def longitude(self) -> float:
        return self.x

    @property
    def latitude(self) -> float:
        return self.y

    def distance_to(self, other: "Vertex") -> float:
        """
        Euclidean distance to ``other``. Geographic vertices measure in
        kilometers through ``GEOGRAPHIC.distance`` instead.
        """
        return euclidean_distance(self, other)

    def bearing_to(self, other: "Vertex") -> float:
        """Angle in [0, 360) from this vertex to ``other``, 0 along +x."""
        return planar_bearing(self, other)

    def offset(self, delta: "Vertex") -> "Vertex":
        """Translate by ``delta``."""
        return Vertex(self.x + delta.x, self.y + delta.y)

    def format(self, digits: int = DEFAULT_DECIMAL_DIGITS) -> str:
        return format_vertex(self, digits)

    def __str__(self) -> str:
        return self.format()


def _accept_any(x: float, y: float) -> None:
    return None


def _check_geographic_range(longitude: float, latitude: float) -> None:
    # ✅ boundary values (±90 / ±180) are valid
    if not LONGITUDE_MIN <= longitude <= LONGITUDE_MAX:
        raise RangeValidationError(f"The range of longitude is {LONGITUDE_MIN:g} ~ {LONGITUDE_MAX:g}, got {longitude}")
    if not LATITUDE_MIN <= latitude <= LATITUDE_MAX:
        raise RangeValidationError(f"The range of latitude is {LATITUDE_MIN:g} ~ {LATITUDE_MAX:g}, got {latitude}")


@dataclass(frozen=True)
class CoordinateSpace:
    """
    The capabilities a polygon needs from its coordinates: how to measure
    distance, how to measure bearing and which coordinate pairs are valid.
    """
    name: str
    distance: Callable[[Vertex, Vertex], float]
    bearing: Callable[[Vertex, Vertex], float]
    validate: Callable[[float, float], None] = _accept_any
    distance_unit: str = "units"
    area_unit: str = "square units"

    def accepts(self, x: float, y: float) -> bool:
        """True if (x, y) is a valid coordinate pair in this space."""
        try:
            self.validate(x, y)
        except RangeValidationError:
            return False
        return True

    def _checked(self, x: float, y: float) -> None:
        try:
            self.validate(x, y)
        except RangeValidationError:
            logger.error(f"Coordinates out of range in {self.name} space: x={x}, y={y}")
            raise

    def vertex(self, x: float, y: float) -> Vertex:
        """Create a vertex, raising RangeValidationError if it is invalid here."""
        try:
            x, y = float(x), float(y)
        except (TypeError, ValueError):
            logger.error(f"Invalid coordinate types: x={type(x)}, y={type(y)}")
            raise ValueError("Coordinates must be numeric")
        self._checked(x, y)
        return Vertex(x, y)

    def coerce(self, value) -> Optional[Vertex]:
        """
        Accept a Vertex, an (x, y) pair or None and return a validated
        Vertex (or None).
        """
        if value is None:
            return None
        if isinstance(value, Vertex):
            self._checked(value.x, value.y)
            return value
        try:
            x, y = value
        except (TypeError, ValueError):
            logger.error(f"Cannot interpret {value!r} as a coordinate pair")
            raise ValueError(f"Expected a Vertex or an (x, y) pair, got {value!r}")
        return self.vertex(x, y)

    def offset(self, vertex: Vertex, delta: Vertex) -> Vertex:
        """Translate ``vertex`` by ``delta``, re-validating the result."""
        moved = vertex.offset(delta)
        self._checked(moved.x, moved.y)
        return moved


PLANAR = CoordinateSpace(
    name="planar",
    distance=euclidean_distance,
    bearing=planar_bearing,
)

GEOGRAPHIC = CoordinateSpace(
    name="geographic",
    distance=vincenty_distance,
    bearing=planar_bearing,
    validate=_check_geographic_range,
    distance_unit="km",
    area_unit="km²",
)


def vertex(x: float, y: float) -> Vertex:
    return PLANAR.vertex(x, y)


def geo_vertex(longitude: float, latitude: float) -> Vertex:
    """Geographic vertex; longitude in [-180, 180], latitude in [-90, 90]."""
    return GEOGRAPHIC.vertex(longitude, latitude)


def parse_lat_lon(text: str) -> Vertex:
    """Geographic vertex from "lat,lon" text, e.g. "25.013232, 121.542081"."""
    lat, lon = split_lat_lon(text)
    return geo_vertex(lon, lat)
