from __future__ import annotations

from typing import Tuple

from .mesh import Corners
from .vectors import v_mid

CHILD_INDICES: Tuple[int, ...] = (1, 2, 3, 4)


def midpoints(corners: Corners) -> Corners:
    """Return (w0, w1, w2): the normalized midpoints opposite p0, p1, p2."""
    p0, p1, p2 = corners
    return (v_mid(p1, p2), v_mid(p0, p2), v_mid(p0, p1))


def subdivide(corners: Corners) -> Tuple[Corners, Corners, Corners, Corners]:
    """Split a trixel into its four children.

    The order is fixed and matches the identifier digits 1-4:
      1 = (p0, w2, w1)
      2 = (p1, w0, w2)
      3 = (p2, w1, w0)
      4 = (w0, w1, w2)   (central child)
    """
    p0, p1, p2 = corners
    w0, w1, w2 = midpoints(corners)
    return (
        (p0, w2, w1),
        (p1, w0, w2),
        (p2, w1, w0),
        (w0, w1, w2),
    )


def child_corners(corners: Corners, k: int) -> Corners:
    """Corners of child `k` (1-4) only."""
    if k not in CHILD_INDICES:
        raise ValueError(f"child index must be 1-4, got {k!r}")
    return subdivide(corners)[k - 1]
