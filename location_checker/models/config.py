"""Configuration constants for the location checker."""

import os
from dotenv import load_dotenv

load_dotenv()

# ────────────────────────────────────────────────────────────────────
#  Numeric tolerances
# ────────────────────────────────────────────────────────────────────
# Two floats closer than this are treated as equal (bearings, distances)
EPSILON = 1e-12

# ────────────────────────────────────────────────────────────────────
#  Geographic Constants
# ────────────────────────────────────────────────────────────────────
# Reference ellipsoid for geodesic distance (kilometers)
EARTH_EQUATOR_RADIUS_KM = 6378.1370
EARTH_POLE_RADIUS_KM = 6356.752314245

# Ellipsoid handed to pyproj for geodesic polygon area
GEODESIC_AREA_ELLIPSOID = "WGS84"
SQUARE_METERS_PER_SQUARE_KM = 1_000_000.0

# Valid coordinate ranges (degrees)
LONGITUDE_MIN, LONGITUDE_MAX = -180.0, 180.0
LATITUDE_MIN, LATITUDE_MAX = -90.0, 90.0

# ────────────────────────────────────────────────────────────────────
#  Display
# ────────────────────────────────────────────────────────────────────
MAX_DECIMAL_DIGITS = 15
DEFAULT_DECIMAL_DIGITS = 15

# ────────────────────────────────────────────────────────────────────
#  Environment overrides
# ────────────────────────────────────────────────────────────────────
def _int_from_env(name: str, default: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e

# 0 keeps the Vincenty loop unbounded
VINCENTY_MAX_ITERATIONS = _int_from_env("LOCATION_CHECKER_VINCENTY_MAX_ITERATIONS") or None

LOG_LEVEL = os.getenv("LOCATION_CHECKER_LOG_LEVEL", "INFO").upper()
