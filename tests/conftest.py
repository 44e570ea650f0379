import matplotlib
import pytest

from polytriang.shapes import (
    arrow_shape,
    comb_polygon,
    convex_polygon,
    l_shape,
    paper_example,
    random_polygon,
    star_polygon,
)

matplotlib.use("Agg")

SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
BOWTIE = [(0.0, 0.0), (1.0, 1.0), (1.0, 0.0), (0.0, 1.0)]

SIMPLE_CASES = [
    ("Triangle", [(0, 0), (1, 0), (0.5, 1)]),
    ("Square", SQUARE),
    ("Pentagon", convex_polygon(5)),
    ("Hexagon", convex_polygon(6)),
    ("L-shape", l_shape()),
    ("Arrow", arrow_shape()),
    ("Paper example", paper_example()),
    ("5-star", star_polygon(5)),
    ("7-star", star_polygon(7)),
    ("Comb-3", comb_polygon(3)),
    ("Convex 50", convex_polygon(50)),
    ("Random 50", random_polygon(50)),
    ("Random 200", random_polygon(200)),
]


@pytest.fixture
def square():
    return list(SQUARE)


@pytest.fixture
def bowtie():
    return list(BOWTIE)
