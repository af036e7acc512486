from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from polydecomp.geometry.errors import NoEarFoundError
from polydecomp.geometry.polygon2d import require_simple
from polydecomp.geometry.predicates import intersect, left, left_on
from polydecomp.geometry.primitives import Diagonal, Point, Polygon


logger = logging.getLogger(__name__)

Triangle = Tuple[Point, Point, Point]


def diagonalie(polygon: Polygon, v1: int, v2: int) -> bool:
    """Segment v1-v2 meets no polygon edge that is not incident to v1 or v2."""
    a = polygon.point(v1)
    b = polygon.point(v2)
    for i in range(len(polygon)):
        c = polygon.point(i)
        c1 = polygon.point(i + 1)
        if c in (a, b) or c1 in (a, b):
            continue
        if intersect(a, b, c, c1):
            return False
    return True


def in_cone(polygon: Polygon, v1: int, v2: int) -> bool:
    a = polygon.point(v1)
    b = polygon.point(v2)
    a0 = polygon.point(v1 - 1)
    a1 = polygon.point(v1 + 1)
    if left_on(a, a1, a0):
        return left(a, b, a0) and left(b, a, a1)
    return not (left_on(a, b, a1) and left_on(b, a, a0))


def diagonal(polygon: Polygon, v1: int, v2: int) -> bool:
    """v1-v2 is a chord strictly inside the polygon."""
    return in_cone(polygon, v1, v2) and in_cone(polygon, v2, v1) and diagonalie(polygon, v1, v2)


def ear_init(polygon: Polygon) -> None:
    for i in range(len(polygon)):
        polygon.set_ear(i, diagonal(polygon, i - 1, i + 1))


def _first_ear(polygon: Polygon) -> int:
    for i in range(len(polygon)):
        if polygon.ear(i):
            return i
    raise NoEarFoundError(f"No ear among {len(polygon)} remaining vertices; polygon is not simple or not counter-clockwise")


def _clip_ears(polygon: Polygon) -> Iterator[Triangle]:
    """Yield each clipped ear as (prev, ear, next) before it is removed."""
    ear_init(polygon)
    while len(polygon) > 3:
        v2 = _first_ear(polygon)
        prv = polygon.point(v2 - 1)
        nxt = polygon.point(v2 + 1)
        yield (prv, polygon.point(v2), nxt)
        # Only the two neighbours' cones change when v2 goes away.
        polygon.set_ear(v2 - 1, diagonal(polygon, v2 - 2, v2 + 1))
        polygon.set_ear(v2 + 1, diagonal(polygon, v2 - 1, v2 + 2))
        polygon.remove_vertex(v2)


def triangulate(polygon: Polygon) -> List[Diagonal]:
    """
    Ear-clipping triangulation.

    Consumes ``polygon``: clipped vertices are removed in place until three
    remain. Pass ``polygon.copy()`` if the original is still needed.
    Returns ``len(polygon) - 3`` diagonals; a triangle yields none.
    """
    require_simple(polygon)
    diagonals: List[Diagonal] = []
    for prv, ear, nxt in _clip_ears(polygon):
        logger.debug("clip ear %s, diagonal %s-%s", ear, prv, nxt)
        diagonals.append(Diagonal(prv, nxt))
    return diagonals


def ear_triangles(polygon: Polygon) -> List[Triangle]:
    """Same clipping as :func:`triangulate`, returning the ``n - 2`` triangles instead. Consumes ``polygon``."""
    require_simple(polygon)
    triangles = list(_clip_ears(polygon))
    triangles.append((polygon.point(0), polygon.point(1), polygon.point(2)))
    return triangles
