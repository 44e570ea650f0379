"""
Correctness checks for triangulations and polygons.

1. Triangle count: n - 2 triangles for an n-vertex polygon
2. Valid indices: all triangle vertices are valid polygon indices
3. No degenerate triangles: all triangles have positive area
4. Area preservation: sum of triangle areas == polygon area
"""

from __future__ import annotations

from typing import Sequence, Tuple

from polytriang.vector import PointLike


def polygon_area(pts: Sequence[PointLike]) -> float:
    """Unsigned polygon area (shoelace)."""
    n = len(pts)
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += pts[i][0] * pts[j][1] - pts[j][0] * pts[i][1]
    return abs(area) / 2


def triangle_area(pts: Sequence[PointLike], tri: Tuple[int, int, int]) -> float:
    a, b, c = pts[tri[0]], pts[tri[1]], pts[tri[2]]
    return abs((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])) / 2


def verify_triangulation(pts: Sequence[PointLike],
                         tris: Sequence[Tuple[int, int, int]]) -> Tuple[bool, str]:
    """Return (ok, message) for a triangulation of ``pts``."""
    n = len(pts)

    expected = n - 2
    if len(tris) != expected:
        return False, f"Wrong count: {len(tris)} != {expected}"

    for tri in tris:
        for v in tri:
            if v < 0 or v >= n:
                return False, f"Invalid vertex index: {v}"

    for tri in tris:
        if triangle_area(pts, tri) < 1e-12:
            return False, f"Degenerate triangle: {tri}"

    poly_a = polygon_area(pts)
    tri_a = sum(triangle_area(pts, tri) for tri in tris)
    if abs(poly_a - tri_a) > 1e-6 * max(1, poly_a):
        return False, f"Area mismatch: {poly_a:.6f} vs {tri_a:.6f}"

    return True, "OK"


def _ccw(a: PointLike, b: PointLike, c: PointLike) -> bool:
    return (c[1] - a[1]) * (b[0] - a[0]) > (b[1] - a[1]) * (c[0] - a[0])


def _proper_crossing(a: PointLike, b: PointLike, c: PointLike, d: PointLike) -> bool:
    return _ccw(a, c, d) != _ccw(b, c, d) and _ccw(a, b, c) != _ccw(a, b, d)


def count_self_intersections(pts: Sequence[PointLike]) -> int:
    """Brute-force O(n^2) count of crossings between non-adjacent edges."""
    n = len(pts)
    count = 0
    for i in range(n):
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            if _proper_crossing(pts[i], pts[(i + 1) % n], pts[j], pts[(j + 1) % n]):
                count += 1
    return count
