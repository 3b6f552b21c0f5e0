"""The fixed octahedral base mesh.

Six axis vertices form eight root spherical triangles ("trixels"). Each root has a
stable identifier 1-8:

- roots 1-4 share the South Pole (-Z) and tile the southern hemisphere
- roots 5-8 share the North Pole (+Z) and tile the northern hemisphere

Corners are listed counter-clockwise as seen from outside the sphere, which is what
the containment test in `trixel_core.locate` relies on.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .errors import InvalidIdentifier
from .vectors import Vec3

Corners = Tuple[Vec3, Vec3, Vec3]

NORTH_POLE: Vec3 = (0.0, 0.0, 1.0)
POS_X: Vec3 = (1.0, 0.0, 0.0)  # lon 0
POS_Y: Vec3 = (0.0, 1.0, 0.0)  # lon 90
NEG_X: Vec3 = (-1.0, 0.0, 0.0)  # lon 180
NEG_Y: Vec3 = (0.0, -1.0, 0.0)  # lon 270 / -90
SOUTH_POLE: Vec3 = (0.0, 0.0, -1.0)

OCTAHEDRON_VERTICES: Tuple[Vec3, ...] = (NORTH_POLE, POS_X, POS_Y, NEG_X, NEG_Y, SOUTH_POLE)

ROOT_IDS: Tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8)

ROOT_TRIANGLES: Dict[int, Corners] = {
    # South cap
    1: (POS_X, SOUTH_POLE, POS_Y),
    2: (POS_Y, SOUTH_POLE, NEG_X),
    3: (NEG_X, SOUTH_POLE, NEG_Y),
    4: (NEG_Y, SOUTH_POLE, POS_X),
    # North cap
    5: (POS_X, NORTH_POLE, NEG_Y),
    6: (NEG_Y, NORTH_POLE, NEG_X),
    7: (NEG_X, NORTH_POLE, POS_Y),
    8: (POS_Y, NORTH_POLE, POS_X),
}


def root_corners(root: int) -> Corners:
    try:
        return ROOT_TRIANGLES[root]
    except KeyError:
        raise InvalidIdentifier(f"root trixel must be 1-8, got {root!r}") from None


def is_pole(v: Vec3) -> bool:
    return v == NORTH_POLE or v == SOUTH_POLE


def pole_index(corners: Corners) -> Optional[int]:
    """Index of the exact pole corner, if any (only root trixels carry one exactly)."""
    for i, v in enumerate(corners):
        if is_pole(v):
            return i
    return None


def is_north_root(root: int) -> bool:
    return 5 <= root <= 8
