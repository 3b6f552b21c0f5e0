from __future__ import annotations

import math
from typing import Tuple

Vec3 = Tuple[float, float, float]

# Below this length a vector is treated as zero.
ZERO_LENGTH_EPS = 1e-15

# Below this angle (radians) slerp endpoints are considered identical / antipodal.
SLERP_ANGLE_EPS = 1e-10


def v_add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def v_dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def v_cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def v_length(v: Vec3) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def v_normalize(v: Vec3) -> Vec3:
    """Scale `v` to unit length. A (near-)zero vector comes back as (0, 0, 0)."""
    n = v_length(v)
    if n < ZERO_LENGTH_EPS:
        return (0.0, 0.0, 0.0)
    return (v[0] / n, v[1] / n, v[2] / n)


def v_mid(a: Vec3, b: Vec3) -> Vec3:
    """Great-circle midpoint of two unit vectors."""
    return v_normalize(v_add(a, b))


def angle_between(a: Vec3, b: Vec3) -> float:
    """Angle in radians between two unit vectors (dot clamped to [-1, 1])."""
    d = max(-1.0, min(1.0, v_dot(a, b)))
    return math.acos(d)


def slerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    """Spherical linear interpolation from `a` (t=0) to `b` (t=1).

    Identical or antipodal endpoints have no unique arc; `a` is returned for both.
    """
    omega = angle_between(a, b)
    if omega < SLERP_ANGLE_EPS:
        return a
    sin_omega = math.sin(omega)
    if abs(sin_omega) < SLERP_ANGLE_EPS:
        return a
    k0 = math.sin((1.0 - t) * omega) / sin_omega
    k1 = math.sin(t * omega) / sin_omega
    return (
        a[0] * k0 + b[0] * k1,
        a[1] * k0 + b[1] * k1,
        a[2] * k0 + b[2] * k1,
    )
