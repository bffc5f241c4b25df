"""
Ingestion of polygon vertices from CSV tables, WKT text and vector files
(GeoJSON, shapefile, GeoPackage).
"""
import logging
from pathlib import Path
from typing import List, Tuple, Union

import pandas as pd
import geopandas as gpd
from shapely import wkt
from shapely.errors import ShapelyError
from shapely.geometry import MultiPolygon, Polygon as ShapelyPolygon

from ..models.polygon import Polygon
from ..models.vertex import PLANAR, GEOGRAPHIC, CoordinateSpace

# Configure logging
logger = logging.getLogger(__name__)

# --- constants ---------------------------------------------------------------
CSV_SUFFIXES = {".csv", ".txt"}
VECTOR_SUFFIXES = {".geojson", ".json", ".shp", ".gpkg"}

_PLANAR_COLUMNS = ("x", "y")
_GEOGRAPHIC_COLUMNS = ("longitude", "latitude")


def _standardize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Map the usual aliases onto x/y or longitude/latitude."""
    df = df.rename(columns={c: c.strip().lower() for c in df.columns})
    if 'lat' in df.columns and 'latitude' not in df.columns:
        df = df.rename(columns={'lat': 'latitude'})
    if 'lon' in df.columns and 'longitude' not in df.columns:
        df = df.rename(columns={'lon': 'longitude'})
    if 'lng' in df.columns and 'longitude' not in df.columns:
        df = df.rename(columns={'lng': 'longitude'})
    return df


def load_vertices_csv(csv_path: Union[str, Path], space: CoordinateSpace = PLANAR) -> List[Tuple[float, float]]:
    """
    Read polygon vertices from a CSV file, one vertex per row, in file order.

    Planar files need 'x' and 'y' columns; geographic files need
    'longitude'/'latitude' (or 'lon'/'lat'). Rows with a missing coordinate
    are dropped.

    Parameters:
        csv_path: Path to the CSV file.
        space: PLANAR or GEOGRAPHIC; picks the expected columns.

    Returns:
        List of (x, y) pairs, (longitude, latitude) when geographic.
    """
    try:
        df = pd.read_csv(csv_path)
    except Exception as e:
        raise RuntimeError(f"Failed to read CSV file {csv_path}: {e}") from e

    df = _standardize_columns(df)
    columns = _GEOGRAPHIC_COLUMNS if space is GEOGRAPHIC else _PLANAR_COLUMNS
    missing_cols = [col for col in columns if col not in df.columns]
    if missing_cols:
        raise ValueError(f"Missing required columns: {missing_cols}")

    before = len(df)
    df = df.dropna(subset=list(columns))
    if len(df) < before:
        logger.warning(f"Dropped {before - len(df)} rows with missing coordinates from {csv_path}")

    vertices = [(float(a), float(b)) for a, b in df[list(columns)].itertuples(index=False)]
    logger.info(f"Loaded {len(vertices)} vertices from {csv_path}")
    return vertices


def _exterior_vertices(geometry) -> List[Tuple[float, float]]:
    if isinstance(geometry, MultiPolygon):
        geometry = max(geometry.geoms, key=lambda g: g.area)
    if not isinstance(geometry, ShapelyPolygon):
        raise ValueError(f"Expected a polygon geometry, got {geometry.geom_type}")
    if len(geometry.interiors):
        logger.warning("Ignoring %d holes in polygon geometry", len(geometry.interiors))
    coords = [(float(c[0]), float(c[1])) for c in geometry.exterior.coords]
    # shapely rings repeat the first vertex at the end
    if len(coords) > 1 and coords[0] == coords[-1]:
        coords = coords[:-1]
    return coords


def vertices_from_wkt(text: str) -> List[Tuple[float, float]]:
    """Exterior ring of a WKT POLYGON (or the largest part of a MULTIPOLYGON)."""
    try:
        geometry = wkt.loads(text)
    except ShapelyError as e:
        raise ValueError(f"Invalid WKT: {e}") from e
    return _exterior_vertices(geometry)


def load_vertices_file(file_path: Union[str, Path]) -> List[Tuple[float, float]]:
    """
    Exterior ring of the first polygon feature in a vector file. Coordinates
    are returned as stored, (longitude, latitude) for EPSG:4326 data.
    """
    try:
        gdf = gpd.read_file(file_path)
    except Exception as e:
        raise RuntimeError(f"Failed to read vector file {file_path}: {e}") from e

    polygons = gdf[gdf.geometry.notna() & gdf.geometry.geom_type.isin(["Polygon", "MultiPolygon"])]
    if polygons.empty:
        raise ValueError(f"No polygon geometry found in {file_path}")
    if len(polygons) > 1:
        logger.info(f"{file_path} holds {len(polygons)} polygons; using the first")

    vertices = _exterior_vertices(polygons.geometry.iloc[0])
    logger.info(f"Loaded {len(vertices)} vertices from {file_path}")
    return vertices


def load_polygon(file_path: Union[str, Path], auto_order: bool = False, geographic: bool = False) -> Polygon:
    """Build a Polygon from a CSV, WKT (.wkt) or vector file."""
    path = Path(file_path)
    space = GEOGRAPHIC if geographic else PLANAR
    suffix = path.suffix.lower()
    if suffix in CSV_SUFFIXES:
        vertices = load_vertices_csv(path, space)
    elif suffix == ".wkt":
        try:
            text = path.read_text()
        except OSError as e:
            raise RuntimeError(f"Failed to read WKT file {path}: {e}") from e
        vertices = vertices_from_wkt(text)
    elif suffix in VECTOR_SUFFIXES:
        vertices = load_vertices_file(path)
    else:
        raise ValueError(f"Unsupported polygon file type: {suffix or path.name}")
    return Polygon(vertices, auto_order=auto_order, space=space)
