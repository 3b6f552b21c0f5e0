"""Point location: which trixel contains a (lon, lat) point at a given depth.

The walk starts at the eight roots and descends one level per step, testing the four
children in identifier order 1 -> 4 and keeping the first that contains the point.

Points that lie exactly on a shared edge are common (generated grids, the equator,
the meridians through the octahedron vertices). A tight tolerance can reject such a
point from every candidate because of rounding, so each step is tried twice: once
with PRIMARY_EPS and, only if nothing matched, again with FALLBACK_EPS.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .coords import SphericalCoord, lonlat_to_vector, to_vector
from .errors import InvalidDepth, PointNotLocated
from .mesh import ROOT_IDS, ROOT_TRIANGLES, Corners
from .subdivide import subdivide
from .trixel_id import MAX_DEPTH, TrixelId
from .vectors import Vec3, v_cross, v_dot

logger = logging.getLogger(__name__)

PRIMARY_EPS = 1e-9
FALLBACK_EPS = 1e-7


def point_in_triangle(p: Vec3, corners: Corners, eps: float = PRIMARY_EPS) -> bool:
    """True if `p` lies inside (or within `eps` of) the spherical triangle.

    Corners must be counter-clockwise seen from outside: for each edge the point has
    to be on the same side of the edge's great-circle plane as the interior.
    """
    v0, v1, v2 = corners
    if v_dot(v_cross(v0, v1), p) < -eps:
        return False
    if v_dot(v_cross(v1, v2), p) < -eps:
        return False
    if v_dot(v_cross(v2, v0), p) < -eps:
        return False
    return True


def _pick(p: Vec3, candidates: Sequence[Tuple[int, Corners]]) -> Optional[Tuple[int, Corners]]:
    for eps in (PRIMARY_EPS, FALLBACK_EPS):
        for label, corners in candidates:
            if point_in_triangle(p, corners, eps):
                return label, corners
    return None


def _check_depth(depth: int) -> int:
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise InvalidDepth(f"depth must be an integer, got {depth!r}")
    if depth < 0 or depth > MAX_DEPTH:
        raise InvalidDepth(f"depth must be within [0, {MAX_DEPTH}], got {depth}")
    return depth


def locate_vector(p: Vec3, depth: int) -> int:
    """Identifier of the depth-`depth` trixel containing unit vector `p`."""
    _check_depth(depth)

    found = _pick(p, [(r, ROOT_TRIANGLES[r]) for r in ROOT_IDS])
    if found is None:
        raise PointNotLocated(f"no root trixel contains point {p}")
    root, corners = found

    tid = TrixelId(root)
    for level in range(1, depth + 1):
        kids = subdivide(corners)
        found = _pick(p, [(k, kids[k - 1]) for k in (1, 2, 3, 4)])
        if found is None:
            raise PointNotLocated(
                f"no child trixel at level {level} contains point {p} (parent {tid.tag()})"
            )
        k, corners = found
        tid = tid.child(k)

    return tid.encode()


def locate(coord: SphericalCoord, depth: int) -> int:
    """Identifier of the trixel at `depth` containing `coord`.

    Raises InvalidDepth, InvalidCoordinate or PointNotLocated.
    """
    _check_depth(depth)
    return locate_vector(to_vector(coord), depth)


def locate_lonlat(lon: float, lat: float, depth: int) -> int:
    _check_depth(depth)
    return locate_vector(lonlat_to_vector(lon, lat), depth)


def locate_many(coords: Iterable[SphericalCoord], depth: int) -> List[int]:
    """Locate a batch of points; results are in input order."""
    _check_depth(depth)
    out = [locate(c, depth) for c in coords]
    logger.debug("located %d points at depth %d", len(out), depth)
    return out
