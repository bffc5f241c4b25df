import pytest
from location_checker.models.polygon import Polygon
from location_checker.models.vertex import Vertex, geo_vertex

@pytest.fixture
def triangle():
    """Fixture providing a triangle already given in a valid winding."""
    return Polygon.planar(Vertex(5, 7), Vertex(9, 2), Vertex(-4, 8))

@pytest.fixture
def square():
    """Fixture providing an axis-aligned 2x2 square (vertical and horizontal edges)."""
    return Polygon.planar((0, 0), (2, 0), (2, 2), (0, 2))

@pytest.fixture
def pentagon_points():
    """Fixture providing the corners of a convex pentagon, unordered."""
    return [(2, 5), (0, 0), (5, 3), (-1, 3), (4, 0)]

@pytest.fixture
def taipei_block():
    """Fixture providing a 0.01 x 0.01 degree geographic square near Taipei."""
    return Polygon.geographic(
        geo_vertex(121.54, 25.01),
        geo_vertex(121.55, 25.01),
        geo_vertex(121.55, 25.02),
        geo_vertex(121.54, 25.02),
    )
