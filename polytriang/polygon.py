"""
Polygon validity predicates.

A polygon is a sequence of (x, y) vertices with an implied closing edge from
the last vertex back to the first. All comparisons are exact floating point.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Sequence, Tuple

from polytriang.sweepline import Segment, sweep_intersections
from polytriang.vector import Point2, PointLike, as_point

logger = logging.getLogger(__name__)


class WindingOrder(Enum):
    INVALID = -1
    CLOCKWISE = 0
    COUNTER_CLOCKWISE = 1


def as_points(vertices: Sequence[PointLike]) -> List[Point2]:
    return [as_point(p) for p in vertices]


def polygon_edges(vertices: Sequence[PointLike]) -> List[Segment]:
    """One segment per edge, closing edge last; segment id == edge index."""
    pts = as_points(vertices)
    n = len(pts)
    return [Segment(i, pts[i], pts[(i + 1) % n]) for i in range(n)]


def _edges_adjacent(i: int, j: int, n: int) -> bool:
    return (i - j) % n in (1, n - 1)


def is_simple_polygon(vertices: Sequence[PointLike]) -> bool:
    """
    True if the polygon boundary does not cross itself.

    Consecutive duplicate vertices (including last/first) fail fast. Two
    neighbouring edges always meet at their shared vertex; that contact is
    not counted as a crossing.
    """
    pts = as_points(vertices)
    n = len(pts)
    if n < 3:
        return False

    for i in range(n):
        if pts[i] == pts[i - 1]:
            logger.debug("vertices %d and %d overlap", (i - 1) % n, i)
            return False

    for hit in sweep_intersections(polygon_edges(pts)):
        if not _edges_adjacent(hit.first.id, hit.second.id, n):
            logger.debug("edges %d and %d cross at (%g, %g)",
                         hit.first.id, hit.second.id, hit.point.x, hit.point.y)
            return False
    return True


def has_collinear_edges(vertices: Sequence[PointLike], tolerance: float = 0.0) -> bool:
    """
    True if some consecutive triple (a, b, c) is collinear with b between a and c.

    Uses the distance formula |ab| + |bc| == |ac|; the closing edge is not
    checked. With the default tolerance the test is exact equality.
    """
    pts = as_points(vertices)
    for i in range(len(pts) - 2):
        a, b, c = pts[i], pts[i + 1], pts[i + 2]
        ab = a.distance(b)
        cb = c.distance(b)
        ac = a.distance(c)
        if abs((ab + cb) - ac) <= tolerance:
            logger.debug("vertices %d, %d, %d are collinear", i, i + 1, i + 2)
            return True
    return False


def shoelace_sum(vertices: Sequence[PointLike]) -> float:
    """Sum of (x[i+1] - x[i]) * (y[i+1] + y[i]) over all edges; twice the signed area."""
    pts = as_points(vertices)
    total = 0.0
    for i in range(1, len(pts)):
        start, end = pts[i - 1], pts[i]
        total += (end.x - start.x) * (end.y + start.y)
    if pts:
        start, end = pts[-1], pts[0]
        total += (end.x - start.x) * (end.y + start.y)
    return total


def _winding(total: float) -> WindingOrder:
    if total > 0:
        return WindingOrder.CLOCKWISE
    if total < 0:
        return WindingOrder.COUNTER_CLOCKWISE
    return WindingOrder.INVALID


def signed_area_and_winding(vertices: Sequence[PointLike]) -> Tuple[float, WindingOrder]:
    """Signed area (positive when clockwise) and the winding order."""
    total = shoelace_sum(vertices)
    return total / 2, _winding(total)


def compute_polygon_area(vertices: Sequence[PointLike]) -> Tuple[float, WindingOrder]:
    """Unsigned area and winding order; (0.0, INVALID) below 3 vertices."""
    if len(vertices) < 3:
        return 0.0, WindingOrder.INVALID
    total = shoelace_sum(vertices)
    return abs(total / 2), _winding(total)


def is_point_in_triangle(p: PointLike, a: PointLike, b: PointLike, c: PointLike) -> bool:
    """
    Point-in-triangle test for a clockwise triangle abc.

    Inside unless one of the edge cross products is positive, so points on
    the boundary count as inside.
    """
    p, a, b, c = as_point(p), as_point(a), as_point(b), as_point(c)
    if a.to(b).cross(a.to(p)) > 0:
        return False
    if b.to(c).cross(b.to(p)) > 0:
        return False
    if c.to(a).cross(c.to(p)) > 0:
        return False
    return True
