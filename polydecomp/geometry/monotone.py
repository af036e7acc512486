from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Set, Tuple

from polydecomp.geometry.errors import NoDiagonalFoundError
from polydecomp.geometry.primitives import Diagonal, Point, Polygon, Segment
from polydecomp.geometry.sweep import VertexKind, classify, require_sweepable, sort_vertices_y, update_pierced
from polydecomp.geometry.triangulate import diagonal


logger = logging.getLogger(__name__)


def partition_diagonal(polygon: Polygon, order: Sequence[int], position: int, downward: bool) -> Diagonal:
    """
    Nearest valid diagonal from ``order[position]`` in sweep order.

    Split vertices look down (earlier in the sweep), merge vertices look up.
    """
    v = order[position]
    candidates = range(position - 1, -1, -1) if downward else range(position + 1, len(order))
    for k in candidates:
        vp = order[k]
        if diagonal(polygon, v, vp):
            return Diagonal(polygon.point(v), polygon.point(vp))
    direction = "below" if downward else "above"
    raise NoDiagonalFoundError(f"No vertex {direction} {polygon.point(v)} forms a valid diagonal")


def monotone_partition(polygon: Polygon) -> List[Diagonal]:
    """
    Diagonals splitting ``polygon`` into y-monotone pieces.

    One diagonal per split or merge vertex; a chord already found from its
    other endpoint is not repeated. The polygon is not modified.
    """
    require_sweepable(polygon)
    order = sort_vertices_y(polygon)
    diagonals: List[Diagonal] = []
    seen: Set[Segment] = set()
    pierced: List[Segment] = []
    for i, v in enumerate(order):
        event = classify(polygon, pierced, v)
        update_pierced(pierced, event)
        if event.kind is VertexKind.SPLIT:
            d = partition_diagonal(polygon, order, i, downward=True)
        elif event.kind is VertexKind.MERGE:
            d = partition_diagonal(polygon, order, i, downward=False)
        else:
            continue
        logger.debug("vertex %d %s: %s diagonal=%s", v, event.point, event.kind.name, d)
        if d.as_segment() in seen:
            continue
        seen.add(d.as_segment())
        diagonals.append(d)
    return diagonals


def _split_piece(piece: Polygon, a: Point, b: Point) -> Tuple[Polygon, Polygon]:
    i, j = sorted((piece.index_of(a), piece.index_of(b)))
    inner = piece.sub_polygon(i, j)
    outer = piece.copy()
    for _ in range(j - i - 1):
        outer.remove_vertex(i + 1)
    return inner, outer


def monotone_decompose(polygon: Polygon, diagonals: Optional[Sequence[Diagonal]] = None) -> List[Polygon]:
    """
    Cut ``polygon`` along its monotone partition diagonals.

    ``diagonals`` defaults to ``monotone_partition(polygon)``. Each diagonal
    cuts the vertex range between its endpoints out of the piece holding both
    endpoints. Cut-out pieces come first, in diagonal order; the piece keeping
    vertex 0 comes last.
    """
    if diagonals is None:
        diagonals = monotone_partition(polygon)
    remainder = polygon.copy()
    pieces: List[Polygon] = []
    for d in diagonals:
        if d.p1 in remainder.points and d.p2 in remainder.points:
            inner, remainder = _split_piece(remainder, d.p1, d.p2)
            pieces.append(inner)
            continue
        for k, piece in enumerate(pieces):
            if d.p1 in piece.points and d.p2 in piece.points:
                inner, pieces[k] = _split_piece(piece, d.p1, d.p2)
                pieces.append(inner)
                break
        else:
            raise NoDiagonalFoundError(f"No piece of the polygon has both endpoints of {d}")
    pieces.append(remainder)
    return pieces


def is_y_monotone(polygon: Polygon) -> bool:
    """Both boundary chains from the topmost to the bottommost vertex are non-increasing in y."""
    n = len(polygon)
    top = max(range(n), key=lambda i: (polygon.point(i).y, -polygon.point(i).x))
    bottom = min(range(n), key=lambda i: (polygon.point(i).y, polygon.point(i).x))
    for step in (1, -1):
        i = top
        while i != bottom:
            nxt = (i + step) % n
            if polygon.point(nxt).y > polygon.point(i).y:
                return False
            i = nxt
    return True
