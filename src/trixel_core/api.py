"""Hierarchical Triangular Mesh (HTM) indexing on the sphere.

The four operations most callers need:

- `locate(coord, depth)`        -> identifier of the containing trixel
- `boundary(id)`                -> closed (lon, lat) ring, possibly empty
- `ancestors(id)`               -> ancestor identifiers, nearest first
- `select_view(depth, region)`  -> identifiers to draw at a level of detail

Everything here is pure: no I/O, no shared mutable state.
"""

from __future__ import annotations

from trixel_core.boundary import Boundary, CornerCache, boundary, centroid, corners
from trixel_core.coords import SphericalCoord, to_spherical, to_vector
from trixel_core.errors import (
    DepthExceeded,
    InvalidCoordinate,
    InvalidDepth,
    InvalidIdentifier,
    PointNotLocated,
    TrixelError,
)
from trixel_core.locate import locate, locate_lonlat
from trixel_core.region import ViewRect
from trixel_core.trixel_id import MAX_DEPTH, TrixelId, ancestors, child, depth
from trixel_core.view import select_view

__all__ = [
    "Boundary",
    "CornerCache",
    "DepthExceeded",
    "InvalidCoordinate",
    "InvalidDepth",
    "InvalidIdentifier",
    "MAX_DEPTH",
    "PointNotLocated",
    "SphericalCoord",
    "TrixelError",
    "TrixelId",
    "ViewRect",
    "ancestors",
    "boundary",
    "centroid",
    "child",
    "corners",
    "depth",
    "locate",
    "locate_lonlat",
    "select_view",
    "to_spherical",
    "to_vector",
]
