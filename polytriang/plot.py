"""
Matplotlib rendering of polygons, triangulations and segment intersections.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection, PatchCollection
from matplotlib.patches import Polygon as MplPolygon

from polytriang.vector import PointLike

COLORS = {
    'triangles': '#377eb8',
    'boundary': '#333333',
    'intersections': '#e41a1c',
    'segments': '#4daf4a',
}


def plot_polygon(vertices: Sequence[PointLike], ax, color: str = COLORS['boundary']):
    """Draw the closed boundary and the vertices."""
    verts = np.asarray(vertices, dtype=float)
    poly_closed = np.vstack([verts, verts[0]])
    ax.plot(poly_closed[:, 0], poly_closed[:, 1], '-', color=color, linewidth=1.5)
    ax.scatter(verts[:, 0], verts[:, 1], c='black', s=20, zorder=5)
    ax.set_aspect('equal')
    return ax


def plot_triangulation(vertices: Sequence[PointLike], triangles: Sequence[Tuple[int, int, int]],
                       title: str, ax, color: str = COLORS['triangles']):
    """Plot a single triangulation"""
    verts = np.asarray(vertices, dtype=float)
    patches = [MplPolygon(verts[list(tri)], closed=True) for tri in triangles]

    p = PatchCollection(patches, alpha=0.4, facecolor=color, edgecolor='#333333', linewidth=0.5)
    ax.add_collection(p)
    plot_polygon(verts, ax)
    ax.set_title(title)
    return ax


def plot_intersections(segments: Sequence[Tuple[PointLike, PointLike]],
                       points: Sequence[PointLike], ax, title: Optional[str] = None):
    lines = np.asarray([[a, b] for a, b in segments], dtype=float)
    ax.add_collection(LineCollection(lines, colors=COLORS['segments'], linewidths=1.2))
    if len(points):
        hits = np.asarray(points, dtype=float)
        ax.scatter(hits[:, 0], hits[:, 1], c=COLORS['intersections'], s=30, zorder=5)
    ax.autoscale()
    ax.set_aspect('equal')
    if title:
        ax.set_title(title)
    return ax


def save_triangulation(vertices: Sequence[PointLike], triangles: Sequence[Tuple[int, int, int]],
                       output: Union[str, Path], title: Optional[str] = None) -> Path:
    """Render a triangulation to an image file and return its path."""
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(6, 6))
    plot_triangulation(vertices, triangles, title or f'{len(triangles)} triangles', ax)
    plt.tight_layout()
    fig.savefig(output, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return output


def save_intersections(segments: Sequence[Tuple[PointLike, PointLike]], points: Sequence[PointLike],
                       output: Union[str, Path], title: Optional[str] = None) -> Path:
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(6, 6))
    plot_intersections(segments, points, ax, title=title or f'{len(points)} intersections')
    plt.tight_layout()
    fig.savefig(output, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return output
