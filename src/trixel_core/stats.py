from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidDepth
from .trixel_id import MAX_DEPTH

EARTH_SURFACE_AREA_KM2 = 510_100_000


def _check(depth: int) -> int:
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise InvalidDepth(f"depth must be an integer, got {depth!r}")
    if depth < 0 or depth > MAX_DEPTH:
        raise InvalidDepth(f"depth must be within [0, {MAX_DEPTH}], got {depth}")
    return depth


def trixel_count(depth: int) -> int:
    """Number of trixels tiling the sphere at `depth`: 8 * 4^depth."""
    return 8 * (4 ** _check(depth))


def trixel_area_km2(depth: int) -> float:
    """Mean trixel area on Earth at `depth` (trixels are not exactly equal-area)."""
    return EARTH_SURFACE_AREA_KM2 / trixel_count(depth)


@dataclass(frozen=True)
class ResolutionStats:
    depth: int
    count: int
    mean_area_km2: float
    largest_area_km2: float

    def to_dict(self) -> dict:
        return {
            "depth": self.depth,
            "count": self.count,
            "mean_area_km2": self.mean_area_km2,
            "largest_area_km2": self.largest_area_km2,
        }


def resolution_stats(depth: int) -> ResolutionStats:
    return ResolutionStats(
        depth=depth,
        count=trixel_count(depth),
        mean_area_km2=trixel_area_km2(depth),
        largest_area_km2=trixel_area_km2(0),
    )
