"""Errors raised while validating or triangulating a polygon."""

from __future__ import annotations

from typing import List, Sequence


class TriangulationError(ValueError):
    """Base class; every triangulation failure is fatal to the call."""


class NilOrMissingVertices(TriangulationError):
    def __init__(self):
        super().__init__("The vertex list is missing.")


class InsufficientVertices(TriangulationError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"The vertex list must have at least 3 vertices (got {count}).")


class ExceededVertices(TriangulationError):
    def __init__(self, count: int, max_vertices: int):
        self.count = count
        self.max_vertices = max_vertices
        super().__init__(f"The max vertex list length is {max_vertices} (got {count}).")


class NotSimplePolygon(TriangulationError):
    def __init__(self):
        super().__init__("The vertex list does not define a simple polygon.")


class CollinearEdges(TriangulationError):
    def __init__(self):
        super().__init__("The vertex list contains collinear edges.")


class InvalidWindingOrder(TriangulationError):
    def __init__(self):
        super().__init__("The vertex list does not contain a valid polygon (zero area).")


class TriangulationStalled(TriangulationError):
    """A full scan of the remaining vertices found no ear."""

    def __init__(self, remaining: Sequence[int]):
        self.remaining: List[int] = list(remaining)
        super().__init__(
            f"No ear found among {len(self.remaining)} remaining vertices; "
            "the polygon is not simple or not clockwise."
        )


class PolyFormatError(ValueError):
    """Malformed .poly, .tri or .seg file."""
