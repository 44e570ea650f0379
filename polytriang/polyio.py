"""
Plain-text polygon, triangulation and segment files.

.poly:  N, then N lines "x y"
.tri:   "# vertices", N, N lines "x y", "# triangles", M, M lines "i j k"
.seg:   N, then N lines "x1 y1 x2 y2"

Lines starting with '#' are skipped on read.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple, Union

from polytriang.errors import PolyFormatError
from polytriang.vector import Point2, PointLike

PathLike = Union[str, Path]


def _data_lines(path: PathLike) -> List[str]:
    text = Path(path).read_text(encoding="utf-8")
    return [ln.strip() for ln in text.splitlines() if ln.strip() and not ln.strip().startswith("#")]


def _parse_count(lines: List[str], i: int, path: PathLike) -> int:
    if i >= len(lines):
        raise PolyFormatError(f"{path}: missing count line")
    try:
        return int(lines[i])
    except ValueError:
        raise PolyFormatError(f"{path}: expected a count, got {lines[i]!r}") from None


def _parse_row(line: str, width: int, kind: type, path: PathLike) -> Tuple:
    parts = line.split()
    if len(parts) != width:
        raise PolyFormatError(f"{path}: expected {width} values, got {line!r}")
    try:
        return tuple(kind(p) for p in parts)
    except ValueError:
        raise PolyFormatError(f"{path}: bad value in {line!r}") from None


def _parse_block(lines: List[str], i: int, width: int, kind: type, path: PathLike):
    n = _parse_count(lines, i, path)
    rows = lines[i + 1:i + 1 + n]
    if len(rows) != n:
        raise PolyFormatError(f"{path}: expected {n} rows, found {len(rows)}")
    return [_parse_row(r, width, kind, path) for r in rows], i + 1 + n


def write_poly(points: Sequence[PointLike], path: PathLike) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{len(points)}\n")
        for x, y in points:
            # High precision so reading back gives the same doubles.
            f.write(f"{x:.17g} {y:.17g}\n")


def read_poly(path: PathLike) -> List[Point2]:
    rows, _ = _parse_block(_data_lines(path), 0, 2, float, path)
    return [Point2(x, y) for x, y in rows]


def write_tri(vertices: Sequence[PointLike], triangles: Sequence[Tuple[int, int, int]],
              path: PathLike) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# vertices\n")
        f.write(f"{len(vertices)}\n")
        for x, y in vertices:
            f.write(f"{x:.17g} {y:.17g}\n")
        f.write("# triangles\n")
        f.write(f"{len(triangles)}\n")
        for t in triangles:
            f.write(f"{t[0]} {t[1]} {t[2]}\n")


def read_tri(path: PathLike) -> Tuple[List[Point2], List[Tuple[int, int, int]]]:
    lines = _data_lines(path)
    rows, i = _parse_block(lines, 0, 2, float, path)
    pts = [Point2(x, y) for x, y in rows]
    tris: List[Tuple[int, int, int]] = []
    if i < len(lines):
        tris, _ = _parse_block(lines, i, 3, int, path)
    return pts, tris


def write_segments(segments: Sequence[Tuple[PointLike, PointLike]], path: PathLike) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{len(segments)}\n")
        for (x1, y1), (x2, y2) in segments:
            f.write(f"{x1:.17g} {y1:.17g} {x2:.17g} {y2:.17g}\n")


def read_segments(path: PathLike) -> List[Tuple[Point2, Point2]]:
    rows, _ = _parse_block(_data_lines(path), 0, 4, float, path)
    return [(Point2(x1, y1), Point2(x2, y2)) for x1, y1, x2, y2 in rows]
