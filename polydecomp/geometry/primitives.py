from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from polydecomp.geometry.errors import TooFewVerticesError


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x:g},{self.y:g})"


@dataclass(frozen=True, eq=False)
class Segment:
    """Unordered pair of points. Segment(a, b) == Segment(b, a)."""

    p1: Point
    p2: Point

    @property
    def is_horizontal(self) -> bool:
        return self.p1.y == self.p2.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return (self.p1 == other.p1 and self.p2 == other.p2) or (self.p1 == other.p2 and self.p2 == other.p1)

    def __hash__(self) -> int:
        return hash(frozenset((self.p1, self.p2)))

    def __str__(self) -> str:
        return f"[{self.p1}, {self.p2}]"


@dataclass(frozen=True)
class Diagonal:
    """Interior chord emitted by triangulation or partitioning; ordered."""

    p1: Point
    p2: Point

    def as_segment(self) -> Segment:
        return Segment(self.p1, self.p2)

    def __str__(self) -> str:
        return f"[{self.p1}, {self.p2}]"


def as_point(p: Point | Sequence[float]) -> Point:
    if isinstance(p, Point):
        return p
    return Point(float(p[0]), float(p[1]))


class Polygon:
    """
    Counter-clockwise vertex sequence with one ear flag per vertex.

    Index access is cyclic: ``polygon.point(-1)`` is the last vertex and
    ``polygon.point(n)`` the first. Points and ear flags are kept in two
    index-aligned lists that only ever shrink together.
    """

    __slots__ = ("_points", "_ears")

    def __init__(self, points: Iterable[Point | Sequence[float]]) -> None:
        self._points: List[Point] = [as_point(p) for p in points]
        if len(self._points) < 3:
            raise TooFewVerticesError(f"Polygon requires at least 3 vertices, got {len(self._points)}")
        self._ears: List[bool] = [False] * len(self._points)

    @classmethod
    def from_polygon(cls, other: Polygon) -> Polygon:
        out = cls.__new__(cls)
        out._points = list(other._points)
        out._ears = list(other._ears)
        return out

    def copy(self) -> Polygon:
        return Polygon.from_polygon(self)

    @property
    def size(self) -> int:
        return len(self._points)

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(self._points)

    @property
    def ears(self) -> Tuple[bool, ...]:
        return tuple(self._ears)

    def wrap(self, index: int) -> int:
        # Python's modulo is already non-negative for a positive divisor.
        return index % len(self._points)

    def point(self, index: int) -> Point:
        return self._points[self.wrap(index)]

    def ear(self, index: int) -> bool:
        return self._ears[self.wrap(index)]

    def set_ear(self, index: int, ear: bool) -> None:
        self._ears[self.wrap(index)] = bool(ear)

    def index_of(self, p: Point) -> int:
        return self._points.index(p)

    def remove_vertex(self, index: int) -> None:
        if len(self._points) <= 3:
            raise TooFewVerticesError("Cannot remove a vertex from a triangle")
        i = self.wrap(index)
        del self._points[i]
        del self._ears[i]

    def sub_polygon(self, lo: int, hi: int) -> Polygon:
        """Inclusive slice ``[lo, hi]`` of the vertex list as a new polygon."""
        return Polygon(self._points[lo : hi + 1])

    def edges(self) -> Iterator[Segment]:
        n = len(self._points)
        for i in range(n):
            yield Segment(self._points[i], self._points[(i + 1) % n])

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Point:
        return self.point(index)

    def __iter__(self) -> Iterator[Point]:
        return iter(list(self._points))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._points == other._points

    def __repr__(self) -> str:
        return f"Polygon({[p.as_tuple() for p in self._points]!r})"
