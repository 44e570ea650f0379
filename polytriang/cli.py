"""
Command line entry point.

    polytriang triangulate --input poly.poly --output out.tri
    polytriang intersections --input segs.seg --plot hits.png
    polytriang check --input poly.poly
    polytriang generate --output polygons/generated --sizes 10 50 100
    polytriang plot --input out.tri --output out.png
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from polytriang.earclipping import MAX_VERTICES, TriangulationOptions, triangulate
from polytriang.errors import PolyFormatError, TriangulationError
from polytriang.polygon import (
    WindingOrder,
    compute_polygon_area,
    has_collinear_edges,
    is_simple_polygon,
)
from polytriang.polyio import read_poly, read_segments, read_tri, write_poly, write_tri
from polytriang.shapes import ROT_ANGLE, SHAPES, rotate_points
from polytriang.sweepline import find_intersections

logger = logging.getLogger("polytriang")


def cmd_triangulate(args: argparse.Namespace) -> int:
    vertices = read_poly(args.input)
    options = TriangulationOptions(
        skip_simple_check=args.skip_simple_check,
        skip_collinear_check=args.skip_collinear_check,
        skip_winding_check=args.skip_winding_check,
        max_vertices=args.max_vertices,
    )

    start = time.perf_counter()
    result = triangulate(vertices, options)
    elapsed_ms = (time.perf_counter() - start) * 1000

    write_tri(result.vertices, result.triangles, args.output)
    print(f"earclip,vertices={len(vertices)},triangles={len(result)},time_ms={elapsed_ms}")
    return 0


def cmd_intersections(args: argparse.Namespace) -> int:
    segments = read_segments(args.input)
    points = find_intersections(segments)
    for p in points:
        print(f"{p.x:.17g} {p.y:.17g}")
    print(f"Total intersections: {len(points)}")

    if args.plot:
        from polytriang.plot import save_intersections

        print(f"Saved {save_intersections(segments, points, args.plot)}")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    pts = read_poly(args.input)
    simple = is_simple_polygon(pts)
    collinear = has_collinear_edges(pts)
    area, winding = compute_polygon_area(pts)

    print(f"Polygon vertices: {len(pts)}")
    print(f"Simple: {simple}")
    print(f"Collinear edges: {collinear}")
    print(f"Area: {area:.10g}")
    print(f"Winding: {winding.name}")

    ok = (3 <= len(pts) <= MAX_VERTICES and simple and not collinear
          and winding is not WindingOrder.INVALID)
    return 0 if ok else 1


def cmd_generate(args: argparse.Namespace) -> int:
    for n in args.sizes:
        for name, gen in SHAPES.items():
            write_poly(rotate_points(gen(n), ROT_ANGLE), args.output / f"{name}_{n}.poly")
    print(f"Generated polygons in {args.output}")
    return 0


def cmd_plot(args: argparse.Namespace) -> int:
    # matplotlib is only needed here
    from polytriang.plot import save_triangulation

    pts, tris = read_tri(args.input)
    out = save_triangulation(pts, tris, args.output, title=args.title)
    print(f"Saved {out}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="polytriang",
                                     description="Sweep-line intersections and ear-clipping triangulation")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("triangulate", help="triangulate a .poly file into a .tri file")
    p.add_argument("--input", "-i", required=True, type=Path, help="input polygon file")
    p.add_argument("--output", "-o", required=True, type=Path, help="output triangulation file")
    p.add_argument("--skip-simple-check", action="store_true")
    p.add_argument("--skip-collinear-check", action="store_true")
    p.add_argument("--skip-winding-check", action="store_true")
    p.add_argument("--max-vertices", type=int, default=MAX_VERTICES)
    p.set_defaults(func=cmd_triangulate)

    p = sub.add_parser("intersections", help="report segment intersections of a .seg file")
    p.add_argument("--input", "-i", required=True, type=Path)
    p.add_argument("--plot", type=Path, default=None, help="also render segments and hits to this image")
    p.set_defaults(func=cmd_intersections)

    p = sub.add_parser("check", help="run the polygon validity predicates")
    p.add_argument("--input", "-i", required=True, type=Path)
    p.set_defaults(func=cmd_check)

    p = sub.add_parser("generate", help="write generated .poly datasets")
    p.add_argument("--output", default=Path("polygons/generated"), type=Path)
    p.add_argument("--sizes", nargs="+", type=int, default=[10, 50, 100, 500, 1000])
    p.set_defaults(func=cmd_generate)

    p = sub.add_parser("plot", help="render a .tri file")
    p.add_argument("--input", "-i", required=True, type=Path)
    p.add_argument("--output", "-o", required=True, type=Path)
    p.add_argument("--title", default=None)
    p.set_defaults(func=cmd_plot)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    try:
        return args.func(args)
    except TriangulationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except (PolyFormatError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
