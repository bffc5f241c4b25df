"""
Polygon model: vertices, coordinate spaces, the winding builder and the
Polygon queries.
"""

from .errors import (
    LocationCheckerError,
    DegenerateInputError,
    RangeValidationError,
    GeodesicConvergenceError,
)
from .vertex import (
    Vertex,
    CoordinateSpace,
    PLANAR,
    GEOGRAPHIC,
    vertex,
    geo_vertex,
    parse_lat_lon,
)
from .builder import build_winding
from .polygon import Polygon, Winding

__all__ = [
    "LocationCheckerError", "DegenerateInputError", "RangeValidationError",
    "GeodesicConvergenceError", "Vertex", "CoordinateSpace", "PLANAR",
    "GEOGRAPHIC", "vertex", "geo_vertex", "parse_lat_lon", "build_winding",
    "Polygon", "Winding",
]
