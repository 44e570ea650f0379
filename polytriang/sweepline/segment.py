"""Line segments swept by the intersection engine."""

from __future__ import annotations

import math
from dataclasses import dataclass

from polytriang.vector import Point2, PointLike, as_point


@dataclass(frozen=True)
class Segment:
    """
    A line piece between two points.

    Identity is the stable ``id`` (usually the edge index). The current sweep
    value is owned by the status structure and is recomputed with
    ``value_at`` every time the sweep line advances.
    """

    id: int
    a: Point2
    b: Point2

    @classmethod
    def of(cls, id: int, a: PointLike, b: PointLike) -> "Segment":
        return cls(id, as_point(a), as_point(b))

    def first(self) -> Point2:
        """Endpoint with the smaller x (ties keep ``a``)."""
        return self.a if self.a.x <= self.b.x else self.b

    def second(self) -> Point2:
        return self.b if self.a.x <= self.b.x else self.a

    @property
    def is_vertical(self) -> bool:
        return self.a.x == self.b.x

    @property
    def slope(self) -> float:
        if self.is_vertical:
            return math.inf
        p, q = self.first(), self.second()
        return (q.y - p.y) / (q.x - p.x)

    def value_at(self, x: float) -> float:
        """y-coordinate of the supporting line at sweep position x."""
        p, q = self.first(), self.second()
        if p.x == q.x:
            # Spans a single sweep position; use its lower end.
            return min(p.y, q.y)
        return p.y + ((q.y - p.y) / (q.x - p.x)) * (x - p.x)

    def __repr__(self) -> str:
        return f"Segment({self.id}, ({self.a.x:g}, {self.a.y:g}) -> ({self.b.x:g}, {self.b.y:g}))"
