from __future__ import annotations

import math
import random
from pathlib import Path
from typing import Callable

import pytest

from polydecomp.geometry.primitives import Point, Polygon
from polydecomp.parser.polygon_file import load_polygon_file


FIXTURES = Path(__file__).parent / "fixtures" / "polygons"


@pytest.fixture
def fixture_path() -> Callable[[str], Path]:
    def _path(name: str) -> Path:
        return FIXTURES / f"{name}.txt"

    return _path


@pytest.fixture
def load_polygon() -> Callable[[str], Polygon]:
    def _load(name: str) -> Polygon:
        return load_polygon_file(FIXTURES / f"{name}.txt")

    return _load


def random_star(seed: int, n: int = 24) -> Polygon:
    """Star-shaped about the origin, so simple and counter-clockwise by construction."""
    rng = random.Random(seed)
    step = 2.0 * math.pi / n
    points = []
    for k in range(n):
        theta = k * step + rng.uniform(0.1, 0.9) * step
        r = rng.uniform(1.0, 4.0)
        points.append(Point(r * math.cos(theta), r * math.sin(theta)))
    return Polygon(points)


@pytest.fixture
def make_star() -> Callable[..., Polygon]:
    return random_star
