from __future__ import annotations


class PolygonError(ValueError):
    pass


class TooFewVerticesError(PolygonError):
    pass


class NonSimplePolygonError(PolygonError):
    pass


class DuplicateYCoordinateError(PolygonError):
    pass


class NoEarFoundError(PolygonError):
    """Ear scan covered every vertex without finding one to clip."""


class NoDiagonalFoundError(PolygonError):
    """Diagonal search ran off the end of the sweep order."""
