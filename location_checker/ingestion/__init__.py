"""
Public ingestion interface – re-export loaders with *stable* names
so tests and main() can import from `location_checker.ingestion`.
"""

from .data_loader import (
    load_vertices_csv,
    load_vertices_file,
    vertices_from_wkt,
    load_polygon,
)

__all__ = [
    "load_vertices_csv", "load_vertices_file", "vertices_from_wkt", "load_polygon",
]
