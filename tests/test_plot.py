import matplotlib.pyplot as plt

from polytriang import find_intersections, triangulate
from polytriang.plot import (
    plot_intersections,
    plot_triangulation,
    save_intersections,
    save_triangulation,
)
from polytriang.shapes import star_polygon


def test_save_triangulation(tmp_path):
    result = triangulate(star_polygon(5))
    out = save_triangulation(result.vertices, result.triangles, tmp_path / "figs" / "star.png")
    assert out.exists()
    assert out.suffix == ".png"


def test_plot_triangulation_adds_patches():
    result = triangulate(star_polygon(5))
    fig, ax = plt.subplots()
    plot_triangulation(result.vertices, result.triangles, "5-star", ax)
    assert ax.get_title() == "5-star"
    assert len(ax.collections[0].get_paths()) == len(result)
    plt.close(fig)


def test_plot_intersections():
    segments = [((0, 0), (2, 2)), ((0, 2), (2, 0))]
    fig, ax = plt.subplots()
    plot_intersections(segments, find_intersections(segments), ax, title="crossing")
    assert ax.get_title() == "crossing"
    assert len(ax.collections) == 2
    plt.close(fig)


def test_plot_intersections_without_hits():
    fig, ax = plt.subplots()
    plot_intersections([((0, 0), (1, 0))], [], ax)
    assert len(ax.collections) == 1
    plt.close(fig)


def test_save_intersections(tmp_path):
    segments = [((1, -1), (1, 1)), ((0, 0), (2, 0.1))]
    out = save_intersections(segments, find_intersections(segments), tmp_path / "vertical.png")
    assert out.exists()
