"""
Polydecomp Geometry Module

Exact predicates and sweep/ear-clipping decompositions of simple polygons.
"""

from polydecomp.geometry.errors import (
    DuplicateYCoordinateError,
    NoDiagonalFoundError,
    NoEarFoundError,
    NonSimplePolygonError,
    PolygonError,
    TooFewVerticesError,
)
from polydecomp.geometry.monotone import is_y_monotone, monotone_decompose, monotone_partition
from polydecomp.geometry.predicates import polygon_area2, signed_area2
from polydecomp.geometry.primitives import Diagonal, Point, Polygon, Segment
from polydecomp.geometry.trapezoid import trapezoidalize
from polydecomp.geometry.triangulate import diagonal, ear_triangles, triangulate

__all__ = [
    "Point",
    "Segment",
    "Diagonal",
    "Polygon",
    "signed_area2",
    "polygon_area2",
    "diagonal",
    "triangulate",
    "ear_triangles",
    "trapezoidalize",
    "monotone_partition",
    "monotone_decompose",
    "is_y_monotone",
    "PolygonError",
    "TooFewVerticesError",
    "NonSimplePolygonError",
    "DuplicateYCoordinateError",
    "NoEarFoundError",
    "NoDiagonalFoundError",
]
