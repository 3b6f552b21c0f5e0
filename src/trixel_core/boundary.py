"""Trixel corners and renderable boundary polygons.

Corners are re-derived from an identifier by replaying the subdivision from its root.
Nothing is memoized globally; a caller that wants to avoid repeated replays passes an
explicit `CornerCache`.

A boundary is a closed ring of (lon, lat) points:

1. each of the three edges is densified along its great-circle arc (slerp)
2. points are converted to (lon, lat), consecutive duplicates are dropped
3. longitudes are unwrapped so that consecutive points never jump more than 180°
4. the first point is repeated at the end

Root trixels touching a pole are drawn as a quadrilateral whose polar corner is split
into two points at ±POLE_LAT_CLAMP, one under each equatorial corner. Deeper trixels
that still have an exact pole corner keep it at ±90°, split the same way under the
longitudes of its two neighbours.

Too few points after deduplication is not an error: an empty `Boundary` comes back
and callers skip it.
"""

from __future__ import annotations

import logging
import math
from collections import OrderedDict
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .coords import SphericalCoord, to_spherical, vector_to_lonlat, wrap_lon, normalize_lon
from .mesh import Corners, is_north_root, pole_index, root_corners
from .region import LonLat, ViewRect, bbox_of_ring
from .subdivide import subdivide
from .trixel_id import IdLike, TrixelId
from .vectors import Vec3, slerp, v_add, v_normalize

logger = logging.getLogger(__name__)

DEFAULT_SEGMENTS_PER_EDGE = 16
POINT_EQ_TOLERANCE_DEG = 1e-9
POLE_LAT_CLAMP = 89.99
MIN_RING_POINTS = 4
POLE_LAT_EPS = 1e-9

DEFAULT_CACHE_SIZE = 4096


class CornerCache:
    """Bounded LRU map from identifier to corner triple.

    Owned by the caller; pass the same instance to repeated `corners`/`boundary`
    calls so replays resume from the deepest cached ancestor.
    """

    def __init__(self, maxsize: int = DEFAULT_CACHE_SIZE) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be >= 1")
        self.maxsize = maxsize
        self._data: "OrderedDict[int, Corners]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, id: int) -> bool:
        return id in self._data

    def get(self, id: int) -> Optional[Corners]:
        c = self._data.get(id)
        if c is None:
            self.misses += 1
            return None
        self._data.move_to_end(id)
        self.hits += 1
        return c

    def put(self, id: int, corners: Corners) -> None:
        self._data[id] = corners
        self._data.move_to_end(id)
        while len(self._data) > self.maxsize:
            self._data.popitem(last=False)

    def clear(self) -> None:
        self._data.clear()
        self.hits = 0
        self.misses = 0


def corners(id: IdLike, cache: Optional[CornerCache] = None) -> Corners:
    """The three corner unit vectors of a trixel."""
    tid = TrixelId.parse(id)

    # Prefixes from the root down to tid itself.
    chain: List[TrixelId] = [TrixelId(tid.root, tid.path[:n]) for n in range(tid.depth + 1)]

    start = 0
    current: Optional[Corners] = None
    if cache is not None:
        for n in range(len(chain) - 1, -1, -1):
            hit = cache.get(chain[n].encode())
            if hit is not None:
                start, current = n, hit
                break
    if current is None:
        current = root_corners(tid.root)
        start = 0

    for n in range(start + 1, len(chain)):
        k = chain[n].path[-1]
        current = subdivide(current)[k - 1]
        if cache is not None:
            cache.put(chain[n].encode(), current)

    return current


def centroid_vector(id: IdLike, cache: Optional[CornerCache] = None) -> Vec3:
    c0, c1, c2 = corners(id, cache)
    return v_normalize(v_add(v_add(c0, c1), c2))


def centroid(id: IdLike, cache: Optional[CornerCache] = None) -> SphericalCoord:
    """Spherical centroid of a trixel's corners."""
    return to_spherical(centroid_vector(id, cache))


@dataclass(frozen=True)
class Boundary:
    """Closed (lon, lat) ring of a trixel, or an empty ring if not renderable."""

    id: int
    ring: Tuple[LonLat, ...] = ()

    @property
    def is_empty(self) -> bool:
        return len(self.ring) < MIN_RING_POINTS

    def __bool__(self) -> bool:
        return not self.is_empty

    def __len__(self) -> int:
        return len(self.ring)

    def bbox(self) -> ViewRect:
        return bbox_of_ring(self.ring)

    def centroid(self) -> SphericalCoord:
        """Spherical mean of the ring's points (closing point excluded)."""
        if self.is_empty:
            raise ValueError(f"trixel {self.id} has no renderable boundary")
        sx = sy = sz = 0.0
        for lon, lat in self.ring[:-1]:
            lon_r = math.radians(wrap_lon(lon))
            lat_r = math.radians(lat)
            cos_lat = math.cos(lat_r)
            sx += cos_lat * math.cos(lon_r)
            sy += cos_lat * math.sin(lon_r)
            sz += math.sin(lat_r)
        return to_spherical(v_normalize((sx, sy, sz)))

    def to_geojson(self) -> dict:
        return {"type": "Polygon", "coordinates": [[[lon, lat] for lon, lat in self.ring]]}


def _points_equal(a: LonLat, b: LonLat, tol: float = POINT_EQ_TOLERANCE_DEG) -> bool:
    return abs(normalize_lon(a[0]) - normalize_lon(b[0])) < tol and abs(a[1] - b[1]) < tol


def densify_edge(a: Vec3, b: Vec3, segments: int) -> List[Vec3]:
    """Interior points of the arc a->b in `segments` equal angular steps (endpoints excluded)."""
    return [v_normalize(slerp(a, b, j / segments)) for j in range(1, segments)]


def dedupe_ring(points: List[LonLat]) -> List[LonLat]:
    """Drop consecutive duplicates and a trailing copy of the first point."""
    out: List[LonLat] = []
    for p in points:
        if out and _points_equal(p, out[-1]):
            continue
        out.append(p)
    if len(out) > 1 and _points_equal(out[-1], out[0]):
        out.pop()
    return out


def unwrap_antimeridian(ring: List[LonLat]) -> List[LonLat]:
    """Shift longitudes by ±360 so consecutive points never differ by more than 180°."""
    if not ring:
        return []
    out: List[LonLat] = [ring[0]]
    prev_lon = ring[0][0]
    for lon, lat in ring[1:]:
        delta = lon - prev_lon
        while delta > 180.0:
            lon -= 360.0
            delta -= 360.0
        while delta < -180.0:
            lon += 360.0
            delta += 360.0
        out.append((lon, lat))
        prev_lon = lon
    return out


def split_pole_points(ring: List[LonLat]) -> List[LonLat]:
    """Replace each exact pole point by two points under its neighbours' longitudes.

    Longitude is undefined at a pole; borrowing it from the adjacent points keeps the
    ring's longitudes continuous and lets it close without a 360° drift.
    """
    n = len(ring)
    if n < 3:
        return ring
    out: List[LonLat] = []
    for i, (lon, lat) in enumerate(ring):
        if abs(lat) >= 90.0 - POLE_LAT_EPS:
            out.append((ring[i - 1][0], lat))
            out.append((ring[(i + 1) % n][0], lat))
        else:
            out.append((lon, lat))
    return dedupe_ring(out)


def _close(ring: List[LonLat]) -> List[LonLat]:
    if ring and ring[0] != ring[-1]:
        ring = ring + [ring[0]]
    return ring


def _triangle_ring(c: Corners, segments: int) -> List[LonLat]:
    raw: List[LonLat] = []
    for i in range(3):
        a = c[i]
        b = c[(i + 1) % 3]
        if i == 0:
            raw.append(vector_to_lonlat(a))
        raw.extend(vector_to_lonlat(p) for p in densify_edge(a, b, segments))
        raw.append(vector_to_lonlat(b))
    return split_pole_points(dedupe_ring(raw))


def _polar_root_ring(root: int, c: Corners, segments: int) -> List[LonLat]:
    pi = pole_index(c)
    # Equatorial corners in ring order (the corner after the pole first).
    eq = [c[(pi + 1) % 3], c[(pi + 2) % 3]]
    clamp = POLE_LAT_CLAMP if is_north_root(root) else -POLE_LAT_CLAMP

    eq1 = vector_to_lonlat(eq[0])
    eq2 = vector_to_lonlat(eq[1])

    raw: List[LonLat] = [eq1]
    for p in densify_edge(eq[0], eq[1], segments):
        lon, lat = vector_to_lonlat(p)
        if abs(lat) > POLE_LAT_CLAMP:
            lat = math.copysign(POLE_LAT_CLAMP, lat)
        raw.append((lon, lat))
    raw.append(eq2)
    raw.append((eq2[0], clamp))
    raw.append((eq1[0], clamp))
    return dedupe_ring(raw)


def boundary(
    id: IdLike,
    segments: int = DEFAULT_SEGMENTS_PER_EDGE,
    cache: Optional[CornerCache] = None,
) -> Boundary:
    """Closed, antimeridian-safe (lon, lat) ring for a trixel.

    Returns an empty Boundary when fewer than MIN_RING_POINTS points survive
    deduplication. Raises InvalidIdentifier for malformed identifiers.
    """
    if isinstance(segments, bool) or not isinstance(segments, int) or segments < 1:
        raise ValueError(f"segments must be a positive integer, got {segments!r}")

    tid = TrixelId.parse(id)
    id_int = tid.encode()
    c = corners(tid, cache)

    if tid.depth == 0 and pole_index(c) is not None:
        ring = _polar_root_ring(tid.root, c, segments)
    else:
        ring = _triangle_ring(c, segments)

    ring = _close(unwrap_antimeridian(ring))
    if len(ring) < MIN_RING_POINTS:
        logger.debug("trixel %d: only %d ring points, no renderable boundary", id_int, len(ring))
        return Boundary(id_int)
    return Boundary(id_int, tuple(ring))
