#!/usr/bin/env python3
"""
Benchmark for the sweep-line simplicity test and ear-clipping triangulation.

Times each phase on the generated polygon families and prints a pandas
summary (median over runs) per family and size.

Usage:
    python3 scripts/benchmark.py [--sizes N1 N2 ...] [--runs R] [--csv out.csv]
"""

from __future__ import annotations

import argparse
import statistics
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List

import numpy as np
import pandas as pd

from polytriang import TriangulationOptions, is_simple_polygon, triangulate
from polytriang.shapes import ROT_ANGLE, SHAPES, rotate_points
from polytriang.validate import verify_triangulation


def log(msg: str) -> None:
    """Print timestamped log message."""
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {msg}")


def time_ms(fn: Callable[[], object], runs: int) -> float:
    samples = []
    for _ in range(runs):
        start = time.perf_counter()
        fn()
        samples.append((time.perf_counter() - start) * 1000)
    return statistics.median(samples)


def run(sizes: List[int], runs: int) -> pd.DataFrame:
    rows: List[Dict[str, object]] = []
    skip_all = TriangulationOptions(skip_simple_check=True, skip_collinear_check=True)
    for n in sizes:
        for name, gen in SHAPES.items():
            pts = rotate_points(gen(n), ROT_ANGLE)
            result = triangulate(pts)
            ok, msg = verify_triangulation(result.vertices, result.triangles)
            if not ok:
                log(f"FAIL [{name}_{n}]: {msg}")

            rows.append({
                "polygon": name,
                "num_vertices": len(pts),
                "simple_ms": time_ms(lambda: is_simple_polygon(pts), runs),
                "earclip_ms": time_ms(lambda: triangulate(pts, skip_all), runs),
                "total_ms": time_ms(lambda: triangulate(pts), runs),
                "valid": ok,
            })
            log(f"{name}_{len(pts)}: {rows[-1]['total_ms']:.2f} ms")
    return pd.DataFrame(rows)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--sizes", nargs="+", type=int, default=[10, 50, 100, 250, 500, 1000])
    parser.add_argument("--runs", type=int, default=3)
    parser.add_argument("--csv", type=Path, default=None)
    args = parser.parse_args()

    df = run(args.sizes, args.runs)
    summary = df.pivot_table(index="num_vertices", columns="polygon", values="total_ms", aggfunc="median")
    print(summary.round(2).to_string())

    # growth exponent of total time per family (log-log slope)
    for name, group in df.groupby("polygon"):
        if len(group) >= 2:
            slope = np.polyfit(np.log(group["num_vertices"]), np.log(group["total_ms"].clip(lower=1e-6)), 1)[0]
            print(f"{name}: time ~ n^{slope:.2f}")

    if args.csv:
        args.csv.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(args.csv, index=False)
        log(f"Wrote {args.csv}")
    return 0 if df["valid"].all() else 1


if __name__ == "__main__":
    raise SystemExit(main())
