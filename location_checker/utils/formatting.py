"""
Text in and out of the core: "lat,lon" tokens and human-readable vertices.
"""
from typing import Iterable, Tuple

from ..models.config import MAX_DECIMAL_DIGITS, DEFAULT_DECIMAL_DIGITS


def format_coordinate(value: float, digits: int = DEFAULT_DECIMAL_DIGITS) -> str:
    """
    At most ``digits`` decimals (clamped to 15), trailing zeros dropped.

    >>> format_coordinate(121.5420810, 4)
    '121.5421'
    >>> format_coordinate(2.0)
    '2'
    """
    digits = max(0, min(int(digits), MAX_DECIMAL_DIGITS))
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def format_vertex(vertex, digits: int = DEFAULT_DECIMAL_DIGITS) -> str:
    return f"({format_coordinate(vertex.x, digits)}, {format_coordinate(vertex.y, digits)})"


def format_vertices(vertices: Iterable, digits: int = DEFAULT_DECIMAL_DIGITS) -> str:
    return "[" + ", ".join(format_vertex(v, digits) for v in vertices) + "]"


def _split_pair(text: str, label: str) -> Tuple[float, float]:
    tokens = text.replace(" ", "").split(",")
    if len(tokens) != 2:
        raise ValueError(f"Expected '{label}', got {text!r}")
    try:
        return float(tokens[0]), float(tokens[1])
    except ValueError as e:
        raise ValueError(f"Invalid coordinate text: {text!r}") from e


def split_lat_lon(text: str) -> Tuple[float, float]:
    """
    Split a "lat,lon" token into (latitude, longitude). Spaces are ignored.

    Raises ValueError if the text is not exactly two numbers.
    """
    return _split_pair(text, "lat,lon")


def split_x_y(text: str) -> Tuple[float, float]:
    return _split_pair(text, "x,y")
