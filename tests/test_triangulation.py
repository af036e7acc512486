from __future__ import annotations

import logging

import pytest
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.ops import unary_union

from polydecomp.geometry.errors import NoEarFoundError, NonSimplePolygonError
from polydecomp.geometry.predicates import polygon_area2, signed_area2
from polydecomp.geometry.primitives import Diagonal, Point, Polygon
from polydecomp.geometry.triangulate import diagonal, diagonalie, ear_init, ear_triangles, in_cone, triangulate


def test_square_triangulates_along_one_diagonal() -> None:
    square = Polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
    assert polygon_area2(square) == 32.0
    diagonals = triangulate(square.copy())
    assert diagonals == [Diagonal(Point(0.0, 4.0), Point(4.0, 0.0))]


def test_triangle_has_no_diagonals() -> None:
    tri = Polygon([(0, 0), (2, 0), (1, 2)])
    assert triangulate(tri) == []
    assert len(tri) == 3


def test_triangulate_consumes_its_argument(load_polygon) -> None:
    comb = load_polygon("comb")
    triangulate(comb)
    assert len(comb) == 3


def test_ear_init_on_comb(load_polygon) -> None:
    comb = load_polygon("comb")
    ear_init(comb)
    # Notch tips (3 and 5) are reflex; the chords at 0 and 1 cross a notch.
    assert comb.ears == (False, False, True, False, True, False, True)


def test_in_cone_and_diagonalie_on_notched_polygon(load_polygon) -> None:
    hourglass = load_polygon("hourglass")
    # (2,3) to (2.5,5) joins the two notch tips through the interior.
    assert in_cone(hourglass, 1, 4)
    assert in_cone(hourglass, 4, 1)
    assert diagonalie(hourglass, 1, 4)
    assert diagonal(hourglass, 1, 4)
    # (0,0) to (4,0.5) passes under the merge notch, outside the polygon.
    assert diagonalie(hourglass, 0, 2)
    assert not diagonal(hourglass, 0, 2)
    # Adjacent vertices are never diagonals.
    assert not diagonal(hourglass, 2, 3)


@pytest.mark.parametrize("name", ["triangle", "square", "hexagon", "hourglass", "comb"])
def test_triangulation_counts_and_area(load_polygon, name: str) -> None:
    polygon = load_polygon(name)
    n = len(polygon)
    diagonals = triangulate(polygon.copy())
    triangles = ear_triangles(polygon.copy())
    assert len(diagonals) == n - 3
    assert len(triangles) == n - 2
    assert all(signed_area2(a, b, c) > 0.0 for a, b, c in triangles)
    assert sum(signed_area2(a, b, c) for a, b, c in triangles) == pytest.approx(polygon_area2(polygon))


@pytest.mark.parametrize("seed", [1, 7, 42, 2024])
def test_star_triangulation_diagonals_are_interior(make_star, seed: int) -> None:
    polygon = make_star(seed)
    diagonals = triangulate(polygon.copy())
    assert len(diagonals) == len(polygon) - 3

    shape = ShapelyPolygon([p.as_tuple() for p in polygon])
    for d in diagonals:
        mid = ShapelyPoint((d.p1.x + d.p2.x) / 2.0, (d.p1.y + d.p2.y) / 2.0)
        assert shape.contains(mid)

    triangles = ear_triangles(polygon.copy())
    union = unary_union([ShapelyPolygon([a.as_tuple(), b.as_tuple(), c.as_tuple()]) for a, b, c in triangles])
    assert union.area == pytest.approx(shape.area)


def test_each_diagonal_is_valid_when_emitted(load_polygon) -> None:
    polygon = load_polygon("comb")
    diagonals = triangulate(polygon.copy())
    work = polygon.copy()
    for d in diagonals:
        i = work.index_of(d.p1)
        j = work.index_of(d.p2)
        assert diagonal(work, i, j)
        # The clipped ear sits between the two endpoints.
        assert work.wrap(i + 2) == j
        work.remove_vertex(i + 1)
    assert len(work) == 3


def test_triangulation_is_deterministic(make_star) -> None:
    first = triangulate(make_star(5).copy())
    second = triangulate(make_star(5).copy())
    assert first == second


def test_self_intersecting_polygon_is_rejected(load_polygon) -> None:
    with pytest.raises(NonSimplePolygonError):
        triangulate(load_polygon("bowtie"))


def test_clockwise_polygon_reports_missing_ear() -> None:
    cw_square = Polygon([(0, 0), (0, 4), (4, 4), (4, 0)])
    with pytest.raises(NoEarFoundError):
        triangulate(cw_square)


def test_triangulation_logs_clipped_ears(caplog, load_polygon) -> None:
    caplog.set_level(logging.DEBUG, logger="polydecomp.geometry.triangulate")
    triangulate(load_polygon("hexagon"))
    assert "clip ear" in caplog.text
