"""
Visualization module for geographic polygons and query points.
"""
import os
from .folium_mapper import create_polygon_map

def visualize(polygon, points=None, output_path=None):
    """
    Save an HTML map of a geographic polygon and query points.

    Args:
        polygon: Geographic Polygon
        points: Optional query points (Vertex or (longitude, latitude))
        output_path: Optional path to save the visualization HTML file.
                    Defaults to data/output/polygon_map.html

    Returns:
        The path the map was written to.
    """
    if output_path is None:
        output_path = os.path.join("data", "output", "polygon_map.html")

    # Ensure output directory exists
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    create_polygon_map(polygon, points).save(output_path)
    return output_path

__all__ = ["create_polygon_map", "visualize"]
