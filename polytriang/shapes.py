"""
Deterministic polygon generators used by the tests, the CLI and the benchmark.

All generators return counter-clockwise vertex lists of (x, y) tuples.
"""

from __future__ import annotations

import math
import random
from typing import List, Tuple

Polygon = List[Tuple[float, float]]

# Fixed rotation (radians) to keep generated datasets off axis-aligned ties.
ROT_ANGLE = 0.123456789


def rotate_points(points: Polygon, angle_rad: float) -> Polygon:
    ca = math.cos(angle_rad)
    sa = math.sin(angle_rad)
    return [(ca * x - sa * y, sa * x + ca * y) for (x, y) in points]


def convex_polygon(n: int = 6, radius: float = 1.0) -> Polygon:
    return [(radius * math.cos(2 * math.pi * i / n + math.pi / 2),
             radius * math.sin(2 * math.pi * i / n + math.pi / 2)) for i in range(n)]


def star_polygon(points: int = 5, outer: float = 2.0, inner: float = 0.8) -> Polygon:
    pts = []
    for i in range(points * 2):
        angle = math.pi / 2 + i * math.pi / points
        r = outer if i % 2 == 0 else inner
        pts.append((r * math.cos(angle), r * math.sin(angle)))
    return pts


def comb_polygon(teeth: int = 3) -> Polygon:
    pts = [(0.0, 0.0), (teeth * 2.0, 0.0), (teeth * 2.0, 1.0)]
    for i in range(teeth - 1, -1, -1):
        x = i * 2 + 1
        pts.extend([(x + 0.5, 1.0), (float(x), 2.0), (x - 0.5, 1.0)])
    pts.append((0.0, 1.0))
    return pts


def l_shape() -> Polygon:
    return [(0.0, 0.0), (2.0, 0.0), (2.0, 1.0), (1.0, 1.0), (1.0, 2.0), (0.0, 2.0)]


def arrow_shape() -> Polygon:
    return [(0.0, 1.0), (2.0, 1.0), (2.0, 0.0), (4.0, 1.5), (2.0, 3.0), (2.0, 2.0), (0.0, 2.0)]


def paper_example() -> Polygon:
    """Twelve-vertex polygon with three reflex vertices."""
    return [
        (0.0, 2.5), (1.2, 5.5), (2.5, 3.8), (4.0, 6.5),
        (5.5, 4.8), (7.0, 7.0), (8.0, 5.5), (6.5, 3.5),
        (8.0, 1.5), (5.0, 2.5), (3.0, 0.0), (1.5, 1.5),
    ]


def random_polygon(n: int, radius: float = 100.0, seed: int = 42) -> Polygon:
    """Star-shaped polygon: sorted random angles, random radii in [0.4, 1] * radius."""
    rng = random.Random(seed + n)
    angles = sorted(rng.random() * 2 * math.pi for _ in range(n))
    points = []
    for angle in angles:
        r = radius * (0.4 + 0.6 * rng.random())
        points.append((r * math.cos(angle), r * math.sin(angle)))
    return points


SHAPES = {
    "convex": convex_polygon,
    "random": random_polygon,
    "star": lambda n: star_polygon(max(3, n // 2), 100.0, 30.0),
    "comb": lambda n: comb_polygon(max(1, (n - 4) // 3)),
}
