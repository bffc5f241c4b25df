import folium
from typing import Iterable, Optional, Tuple

from ..models.polygon import Polygon
from ..models.vertex import GEOGRAPHIC
from ..utils.formatting import format_coordinate

INSIDE_COLOR = "green"
OUTSIDE_COLOR = "red"
POLYGON_COLOR = "blue"


def create_polygon_map(polygon: Polygon, points: Optional[Iterable] = None,
                       center: Optional[Tuple[float, float]] = None, zoom_start: int = 14) -> folium.Map:
    """
    Create a map of a geographic polygon and, optionally, query points.

    Args:
        polygon: Polygon built in the GEOGRAPHIC space.
        points: Vertices or (longitude, latitude) pairs to mark. Points inside
                the polygon are green, points outside red with their distance
                to the boundary in the tooltip.
        center: (lat, lon) tuple for map center. If None, centers on the
                polygon's vertices.
        zoom_start: Initial zoom level.

    Returns:
        Folium Map object.
    """
    if polygon.space is not GEOGRAPHIC:
        raise ValueError("Only geographic polygons can be drawn on a map")

    vertices = polygon.vertices
    if center is None:
        center = [
            sum(v.latitude for v in vertices) / len(vertices),
            sum(v.longitude for v in vertices) / len(vertices),
        ]

    m = folium.Map(location=list(center), zoom_start=zoom_start)

    area_layer = folium.FeatureGroup(name='Area')
    folium.Polygon(
        locations=[(v.latitude, v.longitude) for v in vertices],
        color=POLYGON_COLOR,
        weight=2,
        fill=True,
        fill_opacity=0.15,
        tooltip=f"Area: {polygon.area():.4f} km²",
    ).add_to(area_layer)
    for i, v in enumerate(vertices):
        folium.CircleMarker(
            location=(v.latitude, v.longitude),
            radius=3,
            color=POLYGON_COLOR,
            fill=True,
            tooltip=f"Vertex {i}: {format_coordinate(v.latitude, 6)}, {format_coordinate(v.longitude, 6)}",
        ).add_to(area_layer)
    m.add_child(area_layer)

    if points:
        points_layer = folium.FeatureGroup(name='Points')
        for raw in points:
            point = GEOGRAPHIC.coerce(raw)
            if point is None:
                continue
            inside = polygon.contains(point)
            if inside:
                label = "Inside"
            else:
                label = f"Outside, {polygon.distance_to(point):.3f} km from the boundary"
            folium.Marker(
                [point.latitude, point.longitude],
                popup=folium.Popup(
                    f"<b>{label}</b><br>Position: {point.latitude:.6f}, {point.longitude:.6f}",
                    max_width=300,
                ),
                icon=folium.Icon(color=INSIDE_COLOR if inside else OUTSIDE_COLOR, icon="map-marker", prefix="fa"),
                tooltip=label,
            ).add_to(points_layer)
        m.add_child(points_layer)

    folium.LayerControl().add_to(m)
    return m
