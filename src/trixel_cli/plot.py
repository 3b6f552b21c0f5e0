"""Flat-map rendering of trixel boundaries.

Draws boundary rings in a plain longitude/latitude (plate carrée) frame and writes an
image file. Used by the `trixel plot` command only; matplotlib and numpy are imported
lazily there so the rest of the CLI stays lightweight.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import matplotlib

# In headless environments, force a non-interactive backend.
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from trixel_cli.paths import trixel_home  # noqa: E402
from trixel_core.boundary import DEFAULT_SEGMENTS_PER_EDGE, CornerCache, boundary  # noqa: E402
from trixel_core.region import ViewRect  # noqa: E402


PLOTS_SUBDIR = "plots"


def default_plot_path(name: str) -> Path:
    return trixel_home() / PLOTS_SUBDIR / name


@dataclass(frozen=True)
class PlotConfig:
    edge_color: str = "#B000FF"  # neon purple
    fill_color: str = "#2E86FF"
    fill_alpha: float = 0.15
    region_color: str = "#FF6A00"
    line_width: float = 0.6
    label_size: int = 6
    dpi: int = 150
    width_in: float = 12.0
    height_in: float = 6.0


def _ring_copies(lons: np.ndarray) -> List[float]:
    """Longitude shifts needed so an unwrapped ring is drawn inside [-180, 180]."""
    shifts = [0.0]
    if lons.max() > 180.0:
        shifts.append(-360.0)
    if lons.min() < -180.0:
        shifts.append(360.0)
    return shifts


def ring_arrays(ring: Iterable[Tuple[float, float]]) -> Tuple[np.ndarray, np.ndarray]:
    pts = np.asarray(list(ring), dtype=float)
    if pts.size == 0:
        return np.empty(0), np.empty(0)
    return pts[:, 0], pts[:, 1]


def render_trixels(
    ids: Iterable[int],
    out_path: Path,
    *,
    segments: int = DEFAULT_SEGMENTS_PER_EDGE,
    region: Optional[ViewRect] = None,
    title: str = "",
    labels: bool = False,
    cfg: PlotConfig = PlotConfig(),
) -> Tuple[Path, int]:
    """Render trixel boundaries to `out_path`. Returns (path, number of rings drawn)."""

    fig, ax = plt.subplots(figsize=(cfg.width_in, cfg.height_in))
    cache = CornerCache()
    drawn = 0

    try:
        for id in ids:
            b = boundary(id, segments, cache)
            if b.is_empty:
                continue
            lons, lats = ring_arrays(b.ring)
            for shift in _ring_copies(lons):
                xs = lons + shift
                ax.fill(xs, lats, color=cfg.fill_color, alpha=cfg.fill_alpha, linewidth=0)
                ax.plot(xs, lats, color=cfg.edge_color, linewidth=cfg.line_width)
            if labels:
                c = b.centroid()
                ax.text(c.lon, c.lat, str(b.id), fontsize=cfg.label_size, ha="center", va="center")
            drawn += 1

        if region is not None:
            w, e = region.span()
            xs = np.array([w, e, e, w, w])
            ys = np.array([region.south, region.south, region.north, region.north, region.south])
            for shift in (0.0, -360.0):
                ax.plot(xs + shift, ys, color=cfg.region_color, linewidth=1.2, linestyle="--")

        ax.set_xlim(-180, 180)
        ax.set_ylim(-90, 90)
        ax.set_aspect("equal")
        ax.set_xticks(np.arange(-180, 181, 45))
        ax.set_yticks(np.arange(-90, 91, 30))
        ax.grid(True, linewidth=0.3, alpha=0.5)
        ax.set_xlabel("longitude (deg)")
        ax.set_ylabel("latitude (deg)")
        if title:
            ax.set_title(title)

        out_path = Path(out_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out_path, dpi=cfg.dpi, bbox_inches="tight")
    finally:
        plt.close(fig)

    return out_path, drawn
