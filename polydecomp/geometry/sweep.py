from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from polydecomp.geometry.errors import NonSimplePolygonError
from polydecomp.geometry.polygon2d import require_distinct_y, require_simple
from polydecomp.geometry.predicates import is_reflex
from polydecomp.geometry.primitives import Point, Polygon, Segment


class VertexKind(Enum):
    START = auto()
    SPLIT = auto()
    END = auto()
    MERGE = auto()
    LEFT_CHAIN = auto()
    RIGHT_CHAIN = auto()


@dataclass(frozen=True)
class VertexEvent:
    """
    One vertex of the upward sweep, classified against the pierced edges.

    ``s0`` is the edge arriving at the vertex, ``s1`` the edge leaving it.
    ``slot0``/``slot1`` are their positions in the pierced list, or None
    when the edge has not been reached by the sweep yet.
    """

    vertex: int
    point: Point
    prev: Point
    next: Point
    s0: Segment
    s1: Segment
    slot0: Optional[int]
    slot1: Optional[int]
    reflex: bool
    kind: VertexKind


def require_sweepable(polygon: Polygon) -> None:
    require_simple(polygon)
    require_distinct_y(polygon)


def sort_vertices_y(polygon: Polygon) -> List[int]:
    """Vertex indices in sweep order: ascending y, then ascending x."""
    return sorted(range(len(polygon)), key=lambda i: (polygon.point(i).y, polygon.point(i).x))


def find_intersection_x(segment: Segment, y: float) -> float:
    """x where the horizontal line at height ``y`` meets the segment's supporting line."""
    p1, p2 = segment.p1, segment.p2
    if p1.x == p2.x:
        return p1.x
    # Endpoints are returned exactly so a vertex sorts onto its own edges.
    if y == p1.y:
        return p1.x
    if y == p2.y:
        return p2.x
    return p1.x + (y - p1.y) * (p2.x - p1.x) / (p2.y - p1.y)


def find_vertex(pierced: List[Segment], p: Point) -> int:
    """Insertion position of ``p`` in the left-to-right pierced list."""
    for i, s in enumerate(pierced):
        if p.x <= find_intersection_x(s, p.y):
            return i
    return len(pierced)


def edge_at(pierced: List[Segment], index: int, p: Point) -> Segment:
    if index < 0 or index >= len(pierced):
        raise NonSimplePolygonError(
            f"No boundary edge bounds vertex {p} on the sweep line; "
            "polygon is not simple or not counter-clockwise"
        )
    return pierced[index]


def _slot(pierced: List[Segment], s: Segment) -> Optional[int]:
    try:
        return pierced.index(s)
    except ValueError:
        return None


def classify(polygon: Polygon, pierced: List[Segment], v: int) -> VertexEvent:
    p = polygon.point(v)
    p0 = polygon.point(v - 1)
    p1 = polygon.point(v + 1)
    s0 = Segment(p0, p)
    s1 = Segment(p, p1)
    slot0 = _slot(pierced, s0)
    slot1 = _slot(pierced, s1)
    reflex = is_reflex(p, p1, p0)

    if slot0 is None and slot1 is None:
        kind = VertexKind.SPLIT if reflex else VertexKind.START
    elif slot0 is None:
        # Arriving edge is new, leaving edge goes down: descending (left) chain.
        kind = VertexKind.LEFT_CHAIN
    elif slot1 is None:
        kind = VertexKind.RIGHT_CHAIN
    else:
        kind = VertexKind.MERGE if reflex else VertexKind.END

    return VertexEvent(
        vertex=v,
        point=p,
        prev=p0,
        next=p1,
        s0=s0,
        s1=s1,
        slot0=slot0,
        slot1=slot1,
        reflex=reflex,
        kind=kind,
    )


def update_pierced(pierced: List[Segment], event: VertexEvent) -> None:
    kind = event.kind
    if kind in (VertexKind.START, VertexKind.SPLIT):
        index = find_vertex(pierced, event.point)
        # Just above a convex start the arriving edge is the left one; a split vertex is the mirror.
        if event.reflex:
            pierced[index:index] = [event.s1, event.s0]
        else:
            pierced[index:index] = [event.s0, event.s1]
    elif kind is VertexKind.LEFT_CHAIN:
        pierced[event.slot1] = event.s0
    elif kind is VertexKind.RIGHT_CHAIN:
        pierced[event.slot0] = event.s1
    else:
        for slot in sorted((event.slot0, event.slot1), reverse=True):
            del pierced[slot]
