from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from polydecomp.geometry.errors import DuplicateYCoordinateError, NonSimplePolygonError, TooFewVerticesError
from polydecomp.geometry.predicates import between, collinear, intersect, polygon_area2
from polydecomp.geometry.primitives import Point, Polygon


@dataclass(frozen=True)
class PolygonValidityReport:
    valid: bool
    vertex_count: int = 0
    self_intersections: int = 0
    duplicate_y: int = 0
    winding: str = "CCW"
    warnings: List[str] = field(default_factory=list)

    @property
    def sweepable(self) -> bool:
        return self.valid and self.duplicate_y == 0

    def to_dict(self) -> dict:
        return {
            "valid": bool(self.valid),
            "vertex_count": int(self.vertex_count),
            "self_intersections": int(self.self_intersections),
            "duplicate_y": int(self.duplicate_y),
            "winding": str(self.winding),
            "warnings": list(self.warnings),
        }


def _adjacent_overlap(a: Point, b: Point, c: Point) -> bool:
    # Edges a-b and b-c share b; they overlap only if they fold back on each other.
    if not collinear(a, b, c):
        return False
    return between(a, b, c) or between(b, c, a)


def _crossing_edge_pairs(points: Tuple[Point, ...]) -> List[Tuple[int, int]]:
    n = len(points)
    pairs: List[Tuple[int, int]] = []
    for i in range(n):
        a, b = points[i], points[(i + 1) % n]
        if _adjacent_overlap(a, b, points[(i + 2) % n]):
            pairs.append((i, (i + 1) % n))
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            c, d = points[j], points[(j + 1) % n]
            if intersect(a, b, c, d):
                pairs.append((i, j))
    return pairs


def _duplicate_y_count(points: Tuple[Point, ...]) -> int:
    seen = set()
    dup = 0
    for p in points:
        if p.y in seen:
            dup += 1
        seen.add(p.y)
    return dup


def validate_polygon(polygon: Polygon) -> PolygonValidityReport:
    points = polygon.points
    warnings: List[str] = []
    crossings = _crossing_edge_pairs(points)
    for i, j in crossings[:5]:
        warnings.append(f"Edges {i} and {j} intersect.")

    area2 = polygon_area2(polygon)
    if area2 == 0.0:
        warnings.append("Polygon has zero area.")
    winding = "CCW" if area2 > 0.0 else "CW"
    if winding == "CW":
        warnings.append("Vertices are in clockwise order; algorithms expect counter-clockwise.")

    dup_y = _duplicate_y_count(points)
    if dup_y:
        warnings.append(f"{dup_y} vertex(es) share a y-coordinate with an earlier vertex.")

    return PolygonValidityReport(
        valid=not crossings and area2 != 0.0,
        vertex_count=len(points),
        self_intersections=len(crossings),
        duplicate_y=dup_y,
        winding=winding,
        warnings=warnings,
    )


def require_simple(polygon: Polygon) -> None:
    if len(polygon) < 3:
        raise TooFewVerticesError(f"Polygon requires at least 3 vertices, got {len(polygon)}")
    crossings = _crossing_edge_pairs(polygon.points)
    if crossings:
        i, j = crossings[0]
        raise NonSimplePolygonError(
            f"Polygon boundary is not simple: edges {i} and {j} intersect "
            f"({len(crossings)} intersecting edge pair(s))"
        )


def require_distinct_y(polygon: Polygon) -> None:
    seen: dict[float, int] = {}
    for i, p in enumerate(polygon.points):
        if p.y in seen:
            raise DuplicateYCoordinateError(
                f"Vertices {seen[p.y]} and {i} share y={p.y:g}; sweep algorithms need distinct y-coordinates"
            )
        seen[p.y] = i


def orient_ccw(polygon: Polygon) -> Polygon:
    """Copy of ``polygon`` in counter-clockwise order."""
    if polygon_area2(polygon) < 0.0:
        return Polygon(reversed(polygon.points))
    return polygon.copy()
