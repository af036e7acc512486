from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence

import matplotlib
matplotlib.use("Agg")  # headless-safe for servers/CI
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from polydecomp.geometry.primitives import Diagonal, Polygon, Segment


def _closed_xy(polygon: Polygon) -> np.ndarray:
    xy = np.array([p.as_tuple() for p in polygon], dtype=float)
    return np.vstack([xy, xy[:1]])


def plot_polygon(
    polygon: Polygon,
    outpath: Path,
    segments: Iterable[Segment | Diagonal] = (),
    pieces: Optional[Sequence[Polygon]] = None,
    title: str = "Polygon",
) -> Path:
    """
    Save a PNG of the polygon boundary with overlay segments and optional sub-polygons.

    The y axis points up, matching the counter-clockwise convention of the geometry core.
    """
    outpath = Path(outpath)
    outpath.parent.mkdir(parents=True, exist_ok=True)

    fig = plt.figure()
    ax = fig.add_subplot(111)
    if pieces:
        cmap = plt.get_cmap("tab10")
        for k, piece in enumerate(pieces):
            xy = _closed_xy(piece)
            ax.fill(xy[:, 0], xy[:, 1], color=cmap(k % 10), alpha=0.3, linewidth=0)

    xy = _closed_xy(polygon)
    ax.plot(xy[:, 0], xy[:, 1], color="black", linewidth=2)
    ax.scatter(xy[:-1, 0], xy[:-1, 1], color="black", s=10, zorder=3)

    for s in segments:
        ax.plot([s.p1.x, s.p2.x], [s.p1.y, s.p2.y], color="tab:red", linewidth=1)

    ax.set_aspect("equal", adjustable="datalim")
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(outpath, dpi=150)
    plt.close(fig)
    return outpath
