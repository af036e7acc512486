from __future__ import annotations

from pathlib import Path
from typing import List

from polydecomp.geometry.errors import TooFewVerticesError
from polydecomp.geometry.primitives import Point, Polygon


class PolygonFileError(ValueError):
    pass


def _parse_vertex_line(line: str, lineno: int) -> Point:
    fields = [f.strip() for f in line.split(",")]
    if len(fields) != 2:
        raise PolygonFileError(f"Expected 'x,y' on line {lineno}, found {len(fields)} field(s)")
    try:
        return Point(float(fields[0]), float(fields[1]))
    except ValueError as e:
        raise PolygonFileError(f"Invalid coordinate on line {lineno}: {line.strip()!r}") from e


def parse_polygon_text(text: str) -> Polygon:
    """One ``x,y`` vertex per line in counter-clockwise order; ``#`` starts a comment line."""
    points: List[Point] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        s = raw.strip()
        if not s or s.startswith("#"):
            continue
        points.append(_parse_vertex_line(s, lineno))
    if not points:
        raise PolygonFileError("Polygon file has no vertices")
    try:
        return Polygon(points)
    except TooFewVerticesError as e:
        raise PolygonFileError(str(e)) from e


def load_polygon_file(path: Path) -> Polygon:
    p = Path(path).expanduser().resolve()
    if not p.exists() or not p.is_file():
        raise PolygonFileError(f"Polygon file not found: {p}")
    return parse_polygon_text(p.read_text(encoding="utf-8", errors="replace"))


def format_polygon_text(polygon: Polygon) -> str:
    return "".join(f"{p.x!r},{p.y!r}\n" for p in polygon)
