import pytest
import math
from location_checker.utils.geo_utils import (
    vincenty_distance,
    geodesic_polygon_area,
    FLATTENING,
)
from location_checker.models.config import EARTH_EQUATOR_RADIUS_KM, EARTH_POLE_RADIUS_KM
from location_checker.models.errors import GeodesicConvergenceError
from location_checker.models.vertex import geo_vertex, parse_lat_lon

def test_vincenty_same_point():
    """Test distance calculation for same point."""
    v = parse_lat_lon("25.013232,121.542081")
    assert vincenty_distance(v, v) == 0.0

def test_vincenty_short_distance_in_taipei():
    """Test distance between two nearby points given as 'lat,lon'."""
    origin = parse_lat_lon("25.013232,121.542081")
    destination = parse_lat_lon("25.017423,121.539731")
    distance = vincenty_distance(origin, destination)
    assert distance == pytest.approx(0.5213, abs=1e-3)

def test_vincenty_is_symmetric():
    """Test that swapping the endpoints does not change the distance."""
    a = geo_vertex(121.542081, 25.013232)
    b = geo_vertex(-73.9857, 40.7484)
    assert vincenty_distance(a, b) == pytest.approx(vincenty_distance(b, a), rel=1e-9)

def test_vincenty_along_equator():
    """Test one degree of longitude on the equator equals the equatorial arc."""
    distance = vincenty_distance(geo_vertex(0, 0), geo_vertex(1, 0))
    assert distance == pytest.approx(EARTH_EQUATOR_RADIUS_KM * math.radians(1), rel=1e-9)

def test_vincenty_along_meridian():
    """Test one degree of latitude from the equator (≈110.574 km on WGS84)."""
    distance = vincenty_distance(geo_vertex(0, 0), geo_vertex(0, 1))
    assert distance == pytest.approx(110.574, rel=1e-4)

def test_vincenty_long_distance():
    """Test a long-haul distance against the known WGS84 value (JFK to LHR ≈ 5555 km)."""
    jfk = geo_vertex(-73.7781, 40.6413)
    lhr = geo_vertex(-0.4543, 51.4700)
    assert vincenty_distance(jfk, lhr) == pytest.approx(5555, rel=5e-3)

def test_vincenty_iteration_cap():
    """Test that a configured iteration cap raises instead of looping."""
    with pytest.raises(GeodesicConvergenceError) as excinfo:
        vincenty_distance(geo_vertex(0, 0), geo_vertex(10, 10), max_iterations=1)
    assert excinfo.value.iterations == 1

def test_vincenty_cap_not_hit_for_ordinary_points():
    """Test that ordinary points converge well within a generous cap."""
    distance = vincenty_distance(geo_vertex(0, 0), geo_vertex(10, 10), max_iterations=200)
    assert distance > 0

def test_flattening_matches_radii():
    """Test the flattening derived from the two radii."""
    assert FLATTENING == pytest.approx(1 / 298.257223563, rel=1e-6)
    assert EARTH_POLE_RADIUS_KM < EARTH_EQUATOR_RADIUS_KM

def test_geodesic_polygon_area_small_square():
    """Test geodesic area of a 0.01 degree square near Taipei (≈1.118 km²)."""
    vertices = [
        geo_vertex(121.54, 25.01),
        geo_vertex(121.55, 25.01),
        geo_vertex(121.55, 25.02),
        geo_vertex(121.54, 25.02),
    ]
    assert geodesic_polygon_area(vertices) == pytest.approx(1.118, rel=1e-3)

def test_geodesic_polygon_area_ignores_direction():
    """Test that clockwise and counter-clockwise rings give the same area."""
    ring = [geo_vertex(0, 0), geo_vertex(1, 0), geo_vertex(1, 1), geo_vertex(0, 1)]
    assert geodesic_polygon_area(ring) == pytest.approx(geodesic_polygon_area(list(reversed(ring))))
    assert geodesic_polygon_area(ring) > 12000
