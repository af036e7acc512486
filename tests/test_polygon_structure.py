from __future__ import annotations

import pytest

from polydecomp.geometry.errors import TooFewVerticesError
from polydecomp.geometry.primitives import Diagonal, Point, Polygon, Segment


def test_point_equality_is_exact_value_equality() -> None:
    assert Point(1.0, 2.0) == Point(1.0, 2.0)
    assert Point(1.0, 2.0) != Point(1.0, 2.0000000001)
    assert len({Point(0.0, 0.0), Point(0.0, 0.0), Point(0.0, 1.0)}) == 2


def test_segment_equality_ignores_endpoint_order() -> None:
    a, b = Point(0.0, 0.0), Point(1.0, 2.0)
    assert Segment(a, b) == Segment(b, a)
    assert hash(Segment(a, b)) == hash(Segment(b, a))
    assert [Segment(Point(5.0, 5.0), a), Segment(a, b)].index(Segment(b, a)) == 1
    assert Segment(a, b) != Segment(a, Point(1.0, 3.0))
    assert Segment(a, Point(3.0, 0.0)).is_horizontal


def test_diagonal_is_ordered() -> None:
    a, b = Point(0.0, 0.0), Point(1.0, 2.0)
    assert Diagonal(a, b) == Diagonal(a, b)
    assert Diagonal(a, b) != Diagonal(b, a)
    assert Diagonal(a, b).as_segment() == Diagonal(b, a).as_segment()


def test_polygon_cyclic_indexing() -> None:
    poly = Polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
    assert poly.point(0) == Point(0.0, 0.0)
    assert poly.point(4) == Point(0.0, 0.0)
    assert poly.point(-1) == Point(0.0, 4.0)
    assert poly.point(-5) == Point(0.0, 4.0)
    assert poly[9] == Point(4.0, 0.0)
    assert poly.wrap(-6) == 2


def test_polygon_requires_three_vertices() -> None:
    with pytest.raises(TooFewVerticesError):
        Polygon([(0, 0), (1, 1)])


def test_ear_flags_start_false_and_follow_vertex_removal() -> None:
    poly = Polygon([(0, 0), (4, 0), (4, 4), (0, 4), (-1, 2)])
    assert poly.ears == (False,) * 5
    poly.set_ear(-1, True)
    poly.set_ear(2, True)
    poly.remove_vertex(1)
    assert poly.points == (Point(0.0, 0.0), Point(4.0, 4.0), Point(0.0, 4.0), Point(-1.0, 2.0))
    assert poly.ears == (False, True, False, True)
    assert len(poly.ears) == len(poly)


def test_remove_vertex_keeps_at_least_a_triangle() -> None:
    poly = Polygon([(0, 0), (2, 0), (1, 2)])
    with pytest.raises(TooFewVerticesError):
        poly.remove_vertex(0)


def test_copy_is_independent() -> None:
    poly = Polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
    poly.set_ear(0, True)
    dup = poly.copy()
    dup.remove_vertex(0)
    dup.set_ear(0, True)
    assert len(poly) == 4
    assert poly.ears == (True, False, False, False)
    assert Polygon.from_polygon(poly) == poly


def test_index_of_sub_polygon_and_edges() -> None:
    poly = Polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
    assert poly.index_of(Point(4.0, 4.0)) == 2
    with pytest.raises(ValueError):
        poly.index_of(Point(9.0, 9.0))
    sub = poly.sub_polygon(1, 3)
    assert sub.points == (Point(4.0, 0.0), Point(4.0, 4.0), Point(0.0, 4.0))
    edges = list(poly.edges())
    assert len(edges) == 4
    assert edges[-1] == Segment(Point(0.0, 0.0), Point(0.0, 4.0))
