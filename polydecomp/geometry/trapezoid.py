from __future__ import annotations

import logging
from typing import List

from polydecomp.geometry.primitives import Point, Polygon, Segment
from polydecomp.geometry.sweep import (
    VertexKind,
    classify,
    edge_at,
    find_intersection_x,
    find_vertex,
    require_sweepable,
    sort_vertices_y,
    update_pierced,
)


logger = logging.getLogger(__name__)


def horizontal(pierced: List[Segment], p: Point, index: int) -> Segment:
    """Cut from vertex ``p`` across to the pierced edge at ``index``."""
    x = find_intersection_x(edge_at(pierced, index, p), p.y)
    return Segment(p, Point(x, p.y))


def horizontal_between(pierced: List[Segment], p: Point, index: int) -> Segment:
    """Cut at ``p``'s height spanning the pierced edges at ``index - 1`` and ``index``."""
    xl = find_intersection_x(edge_at(pierced, index - 1, p), p.y)
    xr = find_intersection_x(edge_at(pierced, index, p), p.y)
    return Segment(Point(xl, p.y), Point(xr, p.y))


def trapezoidalize(polygon: Polygon) -> List[Segment]:
    """
    Horizontal cuts that split ``polygon`` into trapezoids and triangles.

    Requires a simple counter-clockwise polygon whose vertices have distinct
    y-coordinates. The polygon is not modified.
    """
    require_sweepable(polygon)
    segments: List[Segment] = []
    pierced: List[Segment] = []
    for v in sort_vertices_y(polygon):
        event = classify(polygon, pierced, v)
        p = event.point
        kind = event.kind
        cut = None
        if kind is VertexKind.SPLIT:
            cut = horizontal_between(pierced, p, find_vertex(pierced, p))
        elif kind is VertexKind.LEFT_CHAIN:
            cut = horizontal(pierced, p, event.slot1 + 1)
        elif kind is VertexKind.RIGHT_CHAIN:
            cut = horizontal(pierced, p, event.slot0 - 1)
        update_pierced(pierced, event)
        if kind is VertexKind.MERGE:
            cut = horizontal_between(pierced, p, min(event.slot0, event.slot1))
        logger.debug("vertex %d %s: %s cut=%s", v, p, kind.name, cut)
        if cut is not None:
            segments.append(cut)
    return segments
