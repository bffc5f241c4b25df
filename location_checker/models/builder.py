"""
Turns raw vertex input into a consistently wound vertex sequence.
"""
import logging
import struct
from functools import cmp_to_key
from typing import Iterable, List, NamedTuple, Optional, Tuple

from .errors import DegenerateInputError
from .vertex import CoordinateSpace, Vertex, PLANAR
from ..utils.planar_utils import doubles_equal

logger = logging.getLogger(__name__)


class _SweepEntry(NamedTuple):
    index: int
    vertex: Vertex
    bearing: float
    distance: float


def _compare_sweep(first: _SweepEntry, second: _SweepEntry) -> int:
    # bearing first, then distance; both with EPSILON tolerance
    if doubles_equal(first.bearing, second.bearing):
        if doubles_equal(first.distance, second.distance):
            return 0
        return 1 if first.distance > second.distance else -1
    return 1 if first.bearing > second.bearing else -1


_sweep_key = cmp_to_key(_compare_sweep)


def _not_an_area(reason: str) -> DegenerateInputError:
    logger.error(f"Vertices do not form an area: {reason}")
    return DegenerateInputError(f"Not an area: {reason}")


def _bits(v: Vertex) -> bytes:
    # duplicates must be bit-identical; 0.0 and -0.0 stay distinct
    return struct.pack("<dd", v.x, v.y)


def _index_of(vertices: List[Vertex], target: Vertex) -> int:
    return next(i for i, v in enumerate(vertices) if v is target)


def distinct_vertices(vertices: Iterable, space: CoordinateSpace = PLANAR) -> List[Vertex]:
    """
    Validated vertices with None entries and exact duplicates dropped
    (first occurrence wins), input order otherwise preserved.
    """
    distinct: List[Vertex] = []
    seen = set()
    for raw in vertices:
        v = space.coerce(raw)
        if v is None:
            continue
        key = _bits(v)
        if key in seen:
            continue
        seen.add(key)
        distinct.append(v)
    return distinct


def find_pivots(vertices: List[Vertex]) -> Tuple[Optional[Vertex], Optional[Vertex]]:
    """
    The anchor (lowest y, then highest x) and the apex (highest y, then
    lowest x). Equal y values are compared with EPSILON tolerance.
    """
    anchor = apex = None
    for v in vertices:
        if anchor is None or (doubles_equal(anchor.y, v.y) and anchor.x < v.x) or anchor.y > v.y:
            anchor = v
        if apex is None or (doubles_equal(apex.y, v.y) and apex.x > v.x) or apex.y < v.y:
            apex = v
    return anchor, apex


def _sweep(pivot: Vertex, entries: List[Tuple[int, Vertex]], space: CoordinateSpace) -> List[_SweepEntry]:
    return [
        _SweepEntry(index, v, space.bearing(pivot, v), space.distance(pivot, v))
        for index, v in entries
    ]


def build_winding(
    vertices: Iterable,
    auto_order: bool = False,
    space: CoordinateSpace = PLANAR,
) -> Tuple[Vertex, ...]:
    """
    Build the wound vertex sequence of a polygon.

    With ``auto_order`` the vertices are arranged counter-clockwise by a
    two-phase angular sweep: first around the anchor up to the apex, then
    around the apex for the rest. Without it the caller's order is kept and
    only checked for not being collinear.

    Raises:
        DegenerateInputError: fewer than 3 distinct vertices, or no area.
        RangeValidationError: a vertex is invalid in ``space``.
    """
    distinct = distinct_vertices(vertices, space)
    n = len(distinct)
    if n < 3:
        logger.error(f"Only {n} distinct vertices given")
        raise DegenerateInputError(f"The number of vertices is smaller than 3 ({n})")

    anchor, apex = find_pivots(distinct)
    if anchor == apex:
        raise _not_an_area("every vertex is the same point")

    anchor_index = _index_of(distinct, anchor)
    base_bearing = space.bearing(anchor, apex)
    around_anchor = [
        (index, distinct[index])
        for index in ((anchor_index + i) % n for i in range(1, n))
    ]

    if not auto_order:
        if all(doubles_equal(space.bearing(anchor, v), base_bearing) for _, v in around_anchor):
            raise _not_an_area("the vertices are collinear")
        logger.debug("Accepted %d vertices in caller order", n)
        return tuple(distinct)

    # Phase A: sweep around the anchor up to and including the apex
    bottom_up = _sweep(anchor, around_anchor, space)
    if all(doubles_equal(entry.bearing, base_bearing) for entry in bottom_up):
        raise _not_an_area("the vertices are collinear")
    bottom_up.sort(key=_sweep_key)

    apex_index = _index_of(distinct, apex)
    wound = [anchor]
    chosen = {anchor_index}
    for entry in bottom_up:
        wound.append(entry.vertex)
        chosen.add(entry.index)
        if entry.index == apex_index:
            break

    # Phase B: sweep the remaining vertices around the apex
    around_apex = [
        (index, distinct[index])
        for index in ((apex_index + i) % n for i in range(1, n))
        if index not in chosen
    ]
    top_down = _sweep(apex, around_apex, space)
    top_down.sort(key=_sweep_key)
    wound.extend(entry.vertex for entry in top_down)

    logger.debug("Wound %d vertices counter-clockwise", len(wound))
    return tuple(wound)
