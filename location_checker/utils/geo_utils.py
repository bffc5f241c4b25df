import math
import logging
from typing import Iterable, Optional
from pyproj import Geod

from ..models.config import (
    EPSILON,
    EARTH_EQUATOR_RADIUS_KM,
    EARTH_POLE_RADIUS_KM,
    GEODESIC_AREA_ELLIPSOID,
    SQUARE_METERS_PER_SQUARE_KM,
    VINCENTY_MAX_ITERATIONS,
)
from ..models.errors import GeodesicConvergenceError

logger = logging.getLogger(__name__)

FLATTENING = (EARTH_EQUATOR_RADIUS_KM - EARTH_POLE_RADIUS_KM) / EARTH_EQUATOR_RADIUS_KM

_GEOD = Geod(ellps=GEODESIC_AREA_ELLIPSOID)


def vincenty_distance(origin, destination, max_iterations: Optional[int] = VINCENTY_MAX_ITERATIONS) -> float:
    """
    Ellipsoidal distance in kilometers between two vertices whose x is the
    longitude and y the latitude (degrees).

    Inverse solution from T. Vincenty, "Direct and Inverse Solutions of
    Geodesics on the Ellipsoid with application of nested equations",
    Survey Review XXIII no. 176, 1975.

    The lambda iteration runs until successive values differ by at most
    EPSILON. With ``max_iterations=None`` there is no cap, so near-antipodal
    points may never return; with a cap, GeodesicConvergenceError is raised.
    """
    a = EARTH_EQUATOR_RADIUS_KM
    b = EARTH_POLE_RADIUS_KM
    f = FLATTENING
    rf = 1.0 - f

    L = math.radians(destination.x - origin.x)
    tan_u1 = rf * math.tan(math.radians(origin.y))
    tan_u2 = rf * math.tan(math.radians(destination.y))
    cos_u1 = 1.0 / math.sqrt(1.0 + tan_u1 ** 2)
    cos_u2 = 1.0 / math.sqrt(1.0 + tan_u2 ** 2)
    sin_u1 = tan_u1 * cos_u1
    sin_u2 = tan_u2 * cos_u2

    lam = L
    iterations = 0
    while True:
        sin_lam = math.sin(lam)
        cos_lam = math.cos(lam)
        sin_sigma = math.hypot(cos_u2 * sin_lam, cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam)
        if sin_sigma == 0:
            # coincident points
            return 0.0
        cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
        sigma = math.atan2(sin_sigma, cos_sigma)
        sin_alpha = cos_u1 * cos_u2 * sin_lam / sin_sigma
        cos_alpha2 = 1.0 - sin_alpha ** 2
        if cos_alpha2 == 0:
            # equatorial line
            cos_2sigma_m = 0.0
        else:
            cos_2sigma_m = cos_sigma - 2.0 * sin_u1 * sin_u2 / cos_alpha2
        cos_2sigma_m2 = cos_2sigma_m ** 2
        C = f / 16.0 * cos_alpha2 * (4.0 + f * (4.0 - 3.0 * cos_alpha2))
        lam_prev = lam
        lam = L + (1.0 - C) * f * sin_alpha * (
            sigma + C * sin_sigma * (cos_2sigma_m + C * cos_sigma * (-1.0 + 2.0 * cos_2sigma_m2))
        )
        iterations += 1
        if abs(lam - lam_prev) <= EPSILON:
            break
        if max_iterations is not None and iterations >= max_iterations:
            logger.warning(
                "Vincenty did not converge between (%s, %s) and (%s, %s)",
                origin.x, origin.y, destination.x, destination.y,
            )
            raise GeodesicConvergenceError(iterations)

    sin_sigma2 = sin_sigma ** 2
    u2 = cos_alpha2 * (a ** 2 - b ** 2) / b ** 2
    A = 1.0 + u2 / 16384.0 * (4096.0 + u2 * (-768.0 + u2 * (320.0 - 175.0 * u2)))
    B = u2 / 1024.0 * (256.0 + u2 * (-128.0 + u2 * (74.0 - 47.0 * u2)))
    delta_sigma = B * sin_sigma * (
        cos_2sigma_m + B / 4.0 * (
            cos_sigma * (-1.0 + 2.0 * cos_2sigma_m2)
            - B / 6.0 * cos_2sigma_m * (-3.0 + 4.0 * sin_sigma2) * (-3.0 + 4.0 * cos_2sigma_m2)
        )
    )
    return b * A * (sigma - delta_sigma)


def geodesic_polygon_area(vertices: Iterable) -> float:
    """
    Area in square kilometers of the polygon traced by ``vertices``
    (x = longitude, y = latitude) on the WGS84 ellipsoid.

    pyproj returns a signed area (positive when counter-clockwise); only its
    magnitude is kept.
    """
    vertices = list(vertices)
    lons = [v.x for v in vertices]
    lats = [v.y for v in vertices]
    area, _perimeter = _GEOD.polygon_area_perimeter(lons, lats)
    return abs(area) / SQUARE_METERS_PER_SQUARE_KM
