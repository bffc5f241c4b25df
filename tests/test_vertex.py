import pytest
from location_checker.models.vertex import (
    Vertex,
    PLANAR,
    GEOGRAPHIC,
    vertex,
    geo_vertex,
    parse_lat_lon,
)
from location_checker.models.errors import RangeValidationError, LocationCheckerError

def test_distance_three_four_five():
    """Test the Euclidean distance of a 3-4-5 triangle."""
    assert Vertex(0, 0).distance_to(Vertex(3, 4)) == 5.0

def test_bearing_diagonal():
    """Test bearing towards the first diagonal."""
    assert Vertex(0, 0).bearing_to(Vertex(1, 1)) == 45.0

def test_bearing_quadrants():
    """Test bearings stay in [0, 360) and are measured counter-clockwise from +x."""
    origin = Vertex.zero()
    assert origin.bearing_to(Vertex(1, 0)) == 0.0
    assert origin.bearing_to(Vertex(0, 1)) == pytest.approx(90.0)
    assert origin.bearing_to(Vertex(-1, 0)) == pytest.approx(180.0)
    assert origin.bearing_to(Vertex(0, -1)) == pytest.approx(270.0)
    assert origin.bearing_to(Vertex(1, -1)) == pytest.approx(315.0)

def test_equality_is_exact():
    """Test that vertices are only equal when both coordinates match exactly."""
    assert Vertex(1.0, 2.0) == Vertex(1, 2)
    assert Vertex(1.0, 2.0) != Vertex(1.0, 2.0 + 1e-15)
    assert len({Vertex(1, 2), Vertex(1.0, 2.0), Vertex(2, 1)}) == 2

def test_ordering_by_x_then_y():
    """Test that vertices sort by x first, then by y."""
    unordered = [Vertex(2, 0), Vertex(1, 5), Vertex(1, -3)]
    assert sorted(unordered) == [Vertex(1, -3), Vertex(1, 5), Vertex(2, 0)]

def test_vertex_is_immutable():
    """Test that vertex coordinates cannot be reassigned."""
    v = Vertex(1, 2)
    with pytest.raises(AttributeError):
        v.x = 3

def test_offset_and_zero():
    """Test translation by another vertex."""
    assert Vertex(1, 2).offset(Vertex(-1, 0.5)) == Vertex(0, 2.5)
    assert Vertex.zero() == Vertex(0, 0)

def test_str_drops_trailing_zeros():
    """Test the default text form of a vertex."""
    assert str(Vertex(5, 7)) == "(5, 7)"
    assert str(Vertex(0.1, -2.5)) == "(0.1, -2.5)"
    assert Vertex(1 / 3, 2).format(3) == "(0.333, 2)"

def test_planar_vertex_rejects_non_numeric():
    """Test that non-numeric coordinates are refused."""
    with pytest.raises(ValueError):
        vertex("a", 1)

def test_planar_coerce_accepts_pairs_and_none():
    """Test the accepted input forms for polygon vertices."""
    assert PLANAR.coerce((3, 4)) == Vertex(3.0, 4.0)
    assert PLANAR.coerce(Vertex(3, 4)) == Vertex(3, 4)
    assert PLANAR.coerce(None) is None
    with pytest.raises(ValueError):
        PLANAR.coerce((1, 2, 3))

def test_geo_vertex_names():
    """Test longitude/latitude accessors on geographic vertices."""
    v = geo_vertex(121.5, 25.0)
    assert v.longitude == 121.5
    assert v.latitude == 25.0
    assert (v.x, v.y) == (121.5, 25.0)

@pytest.mark.parametrize("lon, lat", [(-180, -90), (180, 90), (0, 0)])
def test_geo_vertex_boundaries_are_valid(lon, lat):
    """Test that boundary values (±180 / ±90) are accepted."""
    v = geo_vertex(lon, lat)
    assert v == Vertex(lon, lat)

@pytest.mark.parametrize("lon, lat", [(180.5, 0), (-181, 0), (0, 90.01), (0, -91)])
def test_geo_vertex_out_of_range(lon, lat):
    """Test that out-of-range coordinates raise RangeValidationError."""
    with pytest.raises(RangeValidationError):
        geo_vertex(lon, lat)

def test_range_error_is_a_location_checker_error():
    """Test the error hierarchy."""
    with pytest.raises(LocationCheckerError):
        geo_vertex(200, 0)
    with pytest.raises(ValueError):
        geo_vertex(200, 0)

def test_geographic_accepts():
    """Test the non-raising validity check of the geographic space."""
    assert GEOGRAPHIC.accepts(10, 10)
    assert not GEOGRAPHIC.accepts(10, 100)
    assert PLANAR.accepts(10, 100)

def test_geographic_offset_revalidates():
    """Test that moving a geographic vertex out of range fails."""
    assert GEOGRAPHIC.offset(geo_vertex(170, 0), Vertex(5, 5)) == Vertex(175, 5)
    with pytest.raises(RangeValidationError):
        GEOGRAPHIC.offset(geo_vertex(179, 0), Vertex(2, 0))

def test_parse_lat_lon():
    """Test parsing a 'lat,lon' token into a geographic vertex."""
    v = parse_lat_lon("25.013232, 121.542081")
    assert v.latitude == 25.013232
    assert v.longitude == 121.542081

def test_parse_lat_lon_out_of_range():
    """Test that 'lat,lon' tokens are range checked (lat first)."""
    with pytest.raises(RangeValidationError):
        parse_lat_lon("121.542081,25.013232")
