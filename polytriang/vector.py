"""
2D point / vector value type.

Point2 is a NamedTuple so plain ``(x, y)`` tuples can be used wherever the
geometry code expects a point.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence, Tuple, Union


class Point2(NamedTuple):
    x: float
    y: float

    def to(self, other: "Point2") -> "Point2":
        """Vector from this point to ``other``."""
        return Point2(other[0] - self.x, other[1] - self.y)

    def cross(self, other: "Point2") -> float:
        """Z component of the 3D cross product (x1*y2 - y1*x2)."""
        return self.x * other[1] - self.y * other[0]

    def distance(self, other: "Point2") -> float:
        dx = other[0] - self.x
        dy = other[1] - self.y
        return math.sqrt(dx * dx + dy * dy)


PointLike = Union[Point2, Tuple[float, float], Sequence[float]]


def as_point(p: PointLike) -> Point2:
    if isinstance(p, Point2):
        return p
    x, y = p
    return Point2(float(x), float(y))
