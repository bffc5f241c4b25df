"""
Command line entry point: build a polygon, report its area and check query
points against it.
"""
import argparse
import logging
from typing import List, Optional

from location_checker.models.config import LOG_LEVEL
from location_checker.models.errors import LocationCheckerError
from location_checker.models.polygon import Polygon
from location_checker.models.vertex import PLANAR, GEOGRAPHIC, Vertex, parse_lat_lon
from location_checker.utils.formatting import split_x_y

# Configure logging
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
log = logging.getLogger(__name__)


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Polygon area, containment and distance checker")
    parser.add_argument("--vertex", action="append", default=[],
                        help="Polygon vertex, 'x,y' (or 'lat,lon' with --geographic). Repeatable.")
    parser.add_argument("--input", type=str, default=None,
                        help="CSV, WKT or vector file holding the polygon vertices")
    parser.add_argument("--geographic", action="store_true",
                        help="Treat vertices as longitude/latitude and measure in kilometers")
    parser.add_argument("--auto-order", action="store_true",
                        help="Arrange the vertices counter-clockwise automatically")
    parser.add_argument("--point", action="append", default=[],
                        help="Point to check, same format as --vertex. Repeatable.")
    parser.add_argument("--map", type=str, default=None,
                        help="Write an HTML map to this path (geographic only)")
    return parser.parse_args(argv)


def _parse_point(text: str, geographic: bool) -> Vertex:
    if geographic:
        return parse_lat_lon(text)
    x, y = split_x_y(text)
    return PLANAR.vertex(x, y)


def build_polygon(args) -> Polygon:
    """Polygon from --input or the --vertex list."""
    if args.input:
        from location_checker.ingestion import load_polygon
        return load_polygon(args.input, auto_order=args.auto_order, geographic=args.geographic)
    vertices = [_parse_point(text, args.geographic) for text in args.vertex]
    space = GEOGRAPHIC if args.geographic else PLANAR
    return Polygon(vertices, auto_order=args.auto_order, space=space)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    log.info("Starting location checker with args: %s", args)

    if not args.input and not args.vertex:
        log.error("No polygon given; use --input or --vertex")
        return 2

    # ---------- polygon ----------
    try:
        polygon = build_polygon(args)
        points = [_parse_point(text, args.geographic) for text in args.point]
    except (LocationCheckerError, ValueError, RuntimeError) as e:
        log.error("Could not build polygon: %s", e)
        return 1

    unit = polygon.space.distance_unit
    log.info("Polygon vertices: %s", ", ".join(str(v) for v in polygon.vertices))
    log.info("Area: %f %s", polygon.area(), polygon.space.area_unit)

    # ---------- queries ----------
    for point in points:
        try:
            inside = polygon.contains(point)
            distance = polygon.distance_to(point)
        except LocationCheckerError as e:
            log.error("Could not check point %s: %s", point, e)
            return 1
        log.info("%s inside=%s distance=%f %s", point, inside, distance, unit)

    # ---------- visualization ----------
    if args.map:
        if not args.geographic:
            log.error("--map needs --geographic")
            return 2
        from location_checker.visualization import visualize
        path = visualize(polygon, points, args.map)
        log.info("Map written to %s", path)

    log.info("Processing completed successfully")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
