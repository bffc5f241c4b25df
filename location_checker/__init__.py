"""
Public interface – area, containment and boundary distance for planar and
geographic (longitude/latitude) polygons.
"""

from .models import (
    Vertex,
    CoordinateSpace,
    PLANAR,
    GEOGRAPHIC,
    Polygon,
    Winding,
    vertex,
    geo_vertex,
    parse_lat_lon,
    build_winding,
    LocationCheckerError,
    DegenerateInputError,
    RangeValidationError,
    GeodesicConvergenceError,
)
from .utils.geo_utils import vincenty_distance, geodesic_polygon_area

__version__ = "0.1"

__all__ = [
    "Vertex", "CoordinateSpace", "PLANAR", "GEOGRAPHIC", "Polygon", "Winding",
    "vertex", "geo_vertex", "parse_lat_lon", "build_winding",
    "vincenty_distance", "geodesic_polygon_area",
    "LocationCheckerError", "DegenerateInputError", "RangeValidationError",
    "GeodesicConvergenceError",
]
