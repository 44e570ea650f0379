"""
Ear-clipping triangulation of simple polygons.

The polygon is validated first (vertex count, simplicity, collinear edges,
winding order), normalized to clockwise order and then clipped one ear at a
time until a single triangle is left. O(n^3) worst case: up to n scans, each
testing n candidates against n vertices.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from polytriang.errors import (
    CollinearEdges,
    ExceededVertices,
    InsufficientVertices,
    InvalidWindingOrder,
    NilOrMissingVertices,
    NotSimplePolygon,
    TriangulationStalled,
)
from polytriang.polygon import (
    WindingOrder,
    compute_polygon_area,
    has_collinear_edges,
    is_point_in_triangle,
    is_simple_polygon,
)
from polytriang.vector import Point2, PointLike, as_point

logger = logging.getLogger(__name__)

# Upper bound on the vertex count accepted by triangulate().
MAX_VERTICES = 1000


@dataclass(frozen=True)
class TriangulationOptions:
    skip_simple_check: bool = False      # skip the sweep-line self-intersection test
    skip_collinear_check: bool = False   # skip the consecutive collinear triple test
    skip_winding_check: bool = False     # skip area/winding; input must then be clockwise
    max_vertices: int = MAX_VERTICES
    collinear_tolerance: float = 0.0


@dataclass
class Triangulation:
    """Result of triangulate(); indices refer to ``vertices`` (clockwise)."""

    vertices: List[Point2]
    indices: List[int]
    area: Optional[float] = None
    winding: Optional[WindingOrder] = None
    iterations: int = 0

    @property
    def triangles(self) -> List[Tuple[int, int, int]]:
        idx = self.indices
        return [(idx[i], idx[i + 1], idx[i + 2]) for i in range(0, len(idx), 3)]

    def __len__(self) -> int:
        return len(self.indices) // 3


class EarClipper:
    """
    Clips ears from a clockwise vertex loop.

    The loop is a circular doubly linked list stored as ``prev``/``next``
    arrays addressed by vertex index. Its front is the smallest remaining
    index, and every scan starts there.
    """

    def __init__(self, pts: Sequence[Point2]):
        self.pts = list(pts)
        self.n = len(self.pts)
        self.prev = [(i - 1) % self.n for i in range(self.n)]
        self.next = [(i + 1) % self.n for i in range(self.n)]
        self.head = 0
        self.remaining = self.n
        self.iterations = 0

    def order(self) -> List[int]:
        """Remaining indices in list order."""
        out = []
        v = self.head
        for _ in range(self.remaining):
            out.append(v)
            v = self.next[v]
        return out

    def is_convex(self, i: int) -> bool:
        cur = self.pts[i]
        to_prev = cur.to(self.pts[self.prev[i]])
        to_next = cur.to(self.pts[self.next[i]])
        return to_prev.cross(to_next) > 0

    def is_ear(self, i: int) -> bool:
        if not self.is_convex(i):
            return False
        p, n = self.prev[i], self.next[i]
        a, b, c = self.pts[p], self.pts[i], self.pts[n]
        j = self.next[n]
        while j != p:
            if is_point_in_triangle(self.pts[j], a, b, c):
                return False
            j = self.next[j]
        return True

    def _unlink(self, i: int) -> None:
        p, n = self.prev[i], self.next[i]
        self.next[p] = n
        self.prev[n] = p
        if self.head == i:
            self.head = n
        self.remaining -= 1

    def _find_ear(self) -> int:
        v = self.head
        for _ in range(self.remaining):
            if self.is_ear(v):
                return v
            v = self.next[v]
        raise TriangulationStalled(self.order())

    def triangulate(self) -> List[int]:
        """Flat list of 3 * (n - 2) vertex indices."""
        triangles: List[int] = []
        while self.remaining > 3:
            ear = self._find_ear()
            triangles.extend((self.prev[ear], ear, self.next[ear]))
            self._unlink(ear)
            self.iterations += 1
            logger.debug("clipped ear %d (%d vertices left)", ear, self.remaining)
        triangles.extend(self.order())
        return triangles


def validate_polygon(pts: Sequence[Point2], options: TriangulationOptions) -> None:
    """Raise the matching TriangulationError for the first failed check."""
    n = len(pts)
    if n < 3:
        raise InsufficientVertices(n)
    if n > options.max_vertices:
        raise ExceededVertices(n, options.max_vertices)
    if not options.skip_simple_check and not is_simple_polygon(pts):
        raise NotSimplePolygon()
    if not options.skip_collinear_check and has_collinear_edges(pts, options.collinear_tolerance):
        raise CollinearEdges()


def triangulate(vertices: Optional[Sequence[PointLike]],
                options: Optional[TriangulationOptions] = None) -> Triangulation:
    """
    Decompose a simple polygon into n - 2 triangles.

    The input is copied, never modified. A counter-clockwise polygon is
    reversed before clipping, so the returned indices refer to
    ``result.vertices``. When the winding check is skipped the polygon must
    already be clockwise and no area is computed.
    """
    if vertices is None:
        raise NilOrMissingVertices()
    if options is None:
        options = TriangulationOptions()

    pts = [as_point(p) for p in vertices]
    validate_polygon(pts, options)

    area: Optional[float] = None
    winding: Optional[WindingOrder] = None
    if not options.skip_winding_check:
        area, winding = compute_polygon_area(pts)
        if winding is WindingOrder.INVALID:
            raise InvalidWindingOrder()
        if winding is WindingOrder.COUNTER_CLOCKWISE:
            logger.debug("reversing counter-clockwise polygon of %d vertices", len(pts))
            pts.reverse()

    clipper = EarClipper(pts)
    indices = clipper.triangulate()
    logger.debug("triangulated %d vertices into %d triangles (%d ears clipped)",
                 len(pts), len(indices) // 3, clipper.iterations)
    return Triangulation(pts, indices, area, winding, clipper.iterations)
