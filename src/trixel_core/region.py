from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .errors import InvalidCoordinate

LonLat = Tuple[float, float]

_SHIFTS = (0.0, 360.0, -360.0)


@dataclass(frozen=True)
class ViewRect:
    """A longitude/latitude rectangle in degrees.

    `west > east` means the rectangle crosses the antimeridian (e.g. west=170,
    east=-170 is a 20° wide box centered on 180°). Longitudes outside [-180, 180] are
    allowed; polygon bounding boxes built from unwrapped rings use them.
    """

    west: float
    south: float
    east: float
    north: float

    def __post_init__(self) -> None:
        if self.south > self.north:
            raise InvalidCoordinate(f"south {self.south} is north of north {self.north}")

    @staticmethod
    def world() -> "ViewRect":
        return ViewRect(-180.0, -90.0, 180.0, 90.0)

    @property
    def crosses_antimeridian(self) -> bool:
        return self.west > self.east

    def span(self) -> Tuple[float, float]:
        """(west, east) with east >= west, adding 360 to east for crossing boxes."""
        if self.crosses_antimeridian:
            return (self.west, self.east + 360.0)
        return (self.west, self.east)

    def expanded(self, degrees: float) -> "ViewRect":
        """A copy grown by `degrees` on each side (latitude clamped to the poles)."""
        w, e = self.span()
        return ViewRect(
            w - degrees,
            max(-90.0, self.south - degrees),
            e + degrees,
            min(90.0, self.north + degrees),
        )

    def intersects(self, other: "ViewRect") -> bool:
        """Overlap test that also tries the other box shifted by ±360° of longitude.

        Touching edges and zero-width boxes count as overlapping.
        """
        if self.north < other.south or self.south > other.north:
            return False
        aw, ae = self.span()
        bw, be = other.span()
        for shift in _SHIFTS:
            if max(aw, bw + shift) <= min(ae, be + shift):
                return True
        for shift in _SHIFTS:
            if max(bw, aw + shift) <= min(be, ae + shift):
                return True
        return False


def bbox_of_ring(ring: Iterable[LonLat]) -> ViewRect:
    """Bounding box of a (lon, lat) ring. The ring must not be empty."""
    it = iter(ring)
    try:
        lon0, lat0 = next(it)
    except StopIteration:
        raise ValueError("cannot take the bounding box of an empty ring") from None
    min_lon = max_lon = lon0
    min_lat = max_lat = lat0
    for lon, lat in it:
        min_lon = min(min_lon, lon)
        max_lon = max(max_lon, lon)
        min_lat = min(min_lat, lat)
        max_lat = max(max_lat, lat)
    return ViewRect(min_lon, min_lat, max_lon, max_lat)
