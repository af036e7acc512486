from __future__ import annotations

from polydecomp.geometry.primitives import Point, Polygon


# All predicates compare against exact zero. Combinatorial code downstream
# relies on identical inputs producing identical sign decisions.


def signed_area2(a: Point, b: Point, c: Point) -> float:
    """Twice the signed area of triangle abc; positive when a, b, c turn counter-clockwise."""
    return (b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)


def left(a: Point, b: Point, c: Point) -> bool:
    return signed_area2(a, b, c) > 0.0


def left_on(a: Point, b: Point, c: Point) -> bool:
    return signed_area2(a, b, c) >= 0.0


def collinear(a: Point, b: Point, c: Point) -> bool:
    return signed_area2(a, b, c) == 0.0


def is_reflex(v: Point, nxt: Point, prv: Point) -> bool:
    """Interior angle at ``v`` exceeds 180 degrees (counter-clockwise boundary)."""
    return not left_on(v, nxt, prv)


def between(a: Point, b: Point, c: Point) -> bool:
    """``c`` lies on the closed segment a-b."""
    if not collinear(a, b, c):
        return False
    if a.x != b.x:
        return (a.x <= c.x <= b.x) or (a.x >= c.x >= b.x)
    return (a.y <= c.y <= b.y) or (a.y >= c.y >= b.y)


def proper_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    if collinear(a, b, c) or collinear(a, b, d) or collinear(c, d, a) or collinear(c, d, b):
        return False
    return (left(a, b, c) ^ left(a, b, d)) and (left(c, d, a) ^ left(c, d, b))


def intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    if proper_intersect(a, b, c, d):
        return True
    return between(a, b, c) or between(a, b, d) or between(c, d, a) or between(c, d, b)


def polygon_area2(polygon: Polygon) -> float:
    """Twice the signed polygon area, as a fan of triangles from vertex 0."""
    p0 = polygon.point(0)
    total = 0.0
    for i in range(1, len(polygon) - 1):
        total += signed_area2(p0, polygon.point(i), polygon.point(i + 1))
    return total
