"""
polytriang: sweep-line segment intersection and ear-clipping triangulation.
"""

from polytriang.earclipping import (
    MAX_VERTICES,
    EarClipper,
    Triangulation,
    TriangulationOptions,
    triangulate,
)
from polytriang.errors import (
    CollinearEdges,
    ExceededVertices,
    InsufficientVertices,
    InvalidWindingOrder,
    NilOrMissingVertices,
    NotSimplePolygon,
    PolyFormatError,
    TriangulationError,
    TriangulationStalled,
)
from polytriang.polygon import (
    WindingOrder,
    compute_polygon_area,
    has_collinear_edges,
    is_point_in_triangle,
    is_simple_polygon,
    signed_area_and_winding,
)
from polytriang.sweepline import Segment, find_intersections, sweep_intersections
from polytriang.vector import Point2

__version__ = "0.1.0"

__all__ = [
    "MAX_VERTICES",
    "CollinearEdges",
    "EarClipper",
    "ExceededVertices",
    "InsufficientVertices",
    "InvalidWindingOrder",
    "NilOrMissingVertices",
    "NotSimplePolygon",
    "Point2",
    "PolyFormatError",
    "Segment",
    "Triangulation",
    "TriangulationError",
    "TriangulationOptions",
    "TriangulationStalled",
    "WindingOrder",
    "compute_polygon_area",
    "find_intersections",
    "has_collinear_edges",
    "is_point_in_triangle",
    "is_simple_polygon",
    "signed_area_and_winding",
    "sweep_intersections",
    "triangulate",
]
