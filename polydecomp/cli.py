from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from polydecomp.geometry import (
    PolygonError,
    monotone_decompose,
    monotone_partition,
    polygon_area2,
    trapezoidalize,
    triangulate,
)
from polydecomp.geometry.polygon2d import orient_ccw, validate_polygon
from polydecomp.geometry.primitives import Diagonal, Polygon, Segment
from polydecomp.parser.polygon_file import PolygonFileError, load_polygon_file


def _seg_dict(s: Segment | Diagonal) -> List[List[float]]:
    return [[s.p1.x, s.p1.y], [s.p2.x, s.p2.y]]


def _load(args: argparse.Namespace) -> Polygon | None:
    try:
        polygon = load_polygon_file(Path(args.file))
    except PolygonFileError as e:
        print(f"[ERROR] {e}")
        return None
    return orient_ccw(polygon)


def _emit(args: argparse.Namespace, polygon: Polygon, payload: Dict[str, Any], lines: List[str]) -> None:
    area = polygon_area2(polygon) / 2.0
    if args.json:
        doc = {"file": str(args.file), "vertices": len(polygon), "area": area}
        doc.update(payload)
        print(json.dumps(doc, indent=2, sort_keys=True))
        return
    print(f"The polygon's area is {area:g}")
    for line in lines:
        print(f"  {line}")


def _plot(
    args: argparse.Namespace,
    polygon: Polygon,
    segments: Sequence[Segment | Diagonal],
    pieces: Optional[Sequence[Polygon]] = None,
) -> None:
    if not args.plot:
        return
    from polydecomp.plotting.plots import plot_polygon

    out = plot_polygon(polygon, Path(args.plot), segments=segments, pieces=pieces, title=args.cmd.capitalize())
    if not args.json:
        print(f"  Saved: {out}")


def _cmd_area(args: argparse.Namespace) -> int:
    polygon = _load(args)
    if polygon is None:
        return 2
    report = validate_polygon(polygon)
    lines = [f"Vertices: {len(polygon)}", f"Valid: {report.valid}"]
    lines.extend(f"Warning: {w}" for w in report.warnings)
    _emit(args, polygon, {"report": report.to_dict()}, lines)
    _plot(args, polygon, [])
    return 0


def _cmd_triangulate(args: argparse.Namespace) -> int:
    polygon = _load(args)
    if polygon is None:
        return 2
    try:
        diagonals = triangulate(polygon.copy())
    except PolygonError as e:
        print(f"[ERROR] {e}")
        return 3
    lines = [f"Diagonals: {len(diagonals)}"] + [str(d) for d in diagonals]
    _emit(args, polygon, {"diagonals": [_seg_dict(d) for d in diagonals]}, lines)
    _plot(args, polygon, diagonals)
    return 0


def _cmd_trapezoidalize(args: argparse.Namespace) -> int:
    polygon = _load(args)
    if polygon is None:
        return 2
    try:
        cuts = trapezoidalize(polygon)
    except PolygonError as e:
        print(f"[ERROR] {e}")
        return 3
    lines = [f"Horizontal cuts: {len(cuts)}"] + [str(s) for s in cuts]
    _emit(args, polygon, {"segments": [_seg_dict(s) for s in cuts]}, lines)
    _plot(args, polygon, cuts)
    return 0


def _cmd_monotone(args: argparse.Namespace) -> int:
    polygon = _load(args)
    if polygon is None:
        return 2
    try:
        diagonals = monotone_partition(polygon)
        pieces = monotone_decompose(polygon, diagonals)
    except PolygonError as e:
        print(f"[ERROR] {e}")
        return 3
    lines = [f"Diagonals: {len(diagonals)}", f"Monotone pieces: {len(pieces)}"]
    lines.extend(f"Piece {k}: {len(piece)} vertices" for k, piece in enumerate(pieces))
    payload = {
        "diagonals": [_seg_dict(d) for d in diagonals],
        "pieces": [[[p.x, p.y] for p in piece] for piece in pieces],
    }
    _emit(args, polygon, payload, lines)
    _plot(args, polygon, diagonals, pieces=pieces)
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="polydecomp")
    p.add_argument("-v", "--verbose", action="store_true", help="Log sweep and ear-clipping steps")
    sub = p.add_subparsers(dest="cmd", required=True)

    commands = [
        ("area", "Print the polygon area and a validity report.", _cmd_area),
        ("triangulate", "Ear-clipping triangulation.", _cmd_triangulate),
        ("trapezoidalize", "Horizontal sweep trapezoidalization.", _cmd_trapezoidalize),
        ("monotone", "Partition into y-monotone pieces.", _cmd_monotone),
    ]
    for name, help_text, func in commands:
        c = sub.add_parser(name, help=help_text)
        c.add_argument("file", help="Polygon file, one 'x,y' vertex per line")
        c.add_argument("--json", action="store_true", help="Print a JSON document instead of text")
        c.add_argument("--plot", default=None, help="Save a PNG drawing to this path")
        c.set_defaults(func=func)

    args = p.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
