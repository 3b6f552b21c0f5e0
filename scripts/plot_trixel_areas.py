#!/usr/bin/env python3

# Usage:
# source .venv/bin/activate
# PYTHONPATH=src python3 scripts/plot_trixel_areas.py \
#   --depth 4 \
#   --out-dir out/trixel-areas/d4

from __future__ import annotations

import argparse
import math
from pathlib import Path

import matplotlib

# In headless environments, force a non-interactive backend.
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from trixel_cli.plot import render_trixels
from trixel_core.boundary import CornerCache, centroid, corners
from trixel_core.stats import EARTH_SURFACE_AREA_KM2, trixel_area_km2
from trixel_core.vectors import v_cross, v_dot
from trixel_core.view import select_view

EARTH_RADIUS_KM = math.sqrt(EARTH_SURFACE_AREA_KM2 / (4.0 * math.pi))


def spherical_excess(a, b, c) -> float:
    """Solid angle (steradians) of the spherical triangle a, b, c (unit vectors)."""
    num = abs(v_dot(a, v_cross(b, c)))
    den = 1.0 + v_dot(a, b) + v_dot(b, c) + v_dot(c, a)
    return 2.0 * math.atan2(num, den)


def trixel_areas(depth: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """(ids, centroid latitudes, areas in km^2) for every trixel at `depth`."""
    ids = select_view(depth)
    cache = CornerCache()
    lats = np.empty(len(ids))
    areas = np.empty(len(ids))
    for i, id in enumerate(ids):
        a, b, c = corners(id, cache)
        areas[i] = spherical_excess(a, b, c) * EARTH_RADIUS_KM**2
        lats[i] = centroid(id, cache).lat
    return np.asarray(ids), lats, areas


def main() -> int:
    p = argparse.ArgumentParser(description="Plot how far trixel areas drift from the mean at one depth.")
    p.add_argument("--depth", type=int, default=4, help="Subdivision depth (0-8 is practical here).")
    p.add_argument(
        "--out-dir",
        type=str,
        default="./out",
        help="Output directory for PNGs.",
    )

    args = p.parse_args()
    if args.depth < 0 or args.depth > 8:
        raise SystemExit("--depth must be within [0, 8]")

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    ids, lats, areas = trixel_areas(args.depth)
    mean = trixel_area_km2(args.depth)
    ratio = areas / mean

    title = (
        f"trixel areas  depth={args.depth} count={ids.size}\n"
        f"mean={mean:,.1f} km^2  min/mean={ratio.min():.3f}  max/mean={ratio.max():.3f}"
    )

    # --- Area vs latitude ---
    plt.figure(figsize=(9, 5), dpi=150)
    plt.scatter(lats, ratio, s=6, alpha=0.7)
    plt.axhline(1.0, color="#cc0000", linewidth=1.5, label="mean area")
    plt.title(title)
    plt.xlabel("centroid latitude (deg)")
    plt.ylabel("area / mean")
    plt.legend()
    plt.grid(True, alpha=0.2)
    scatter_path = out_dir / "trixel_area_vs_lat.png"
    plt.tight_layout()
    plt.savefig(scatter_path)
    plt.close()

    # --- Histogram ---
    plt.figure(figsize=(9, 5), dpi=150)
    plt.hist(ratio, bins=40, alpha=0.85)
    plt.title(title)
    plt.xlabel("area / mean")
    plt.ylabel("count")
    plt.grid(True, alpha=0.2)
    hist_path = out_dir / "trixel_area_hist.png"
    plt.tight_layout()
    plt.savefig(hist_path)
    plt.close()

    # --- Map ---
    map_path, _ = render_trixels(ids.tolist(), out_dir / "trixel_map.png", title=f"depth {args.depth}")

    # Summary to stdout for quick inspection.
    print(title)
    print(f"out: {scatter_path}")
    print(f"out: {hist_path}")
    print(f"out: {map_path}")
    # Total should be the whole sphere.
    print(f"sum(area)/earth = {areas.sum() / EARTH_SURFACE_AREA_KM2:.9f}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
