from __future__ import annotations


class TrixelError(ValueError):
    """Base class for every error raised by the mesh engine."""


class InvalidCoordinate(TrixelError):
    """Longitude/right ascension or latitude/declination out of range."""


class InvalidIdentifier(TrixelError):
    """Malformed trixel identifier (bad digit sequence, non-positive, non-int)."""


class InvalidDepth(TrixelError):
    """Requested subdivision depth outside [0, MAX_DEPTH]."""


class DepthExceeded(TrixelError):
    """Producing a child would overflow the identifier range."""


class PointNotLocated(TrixelError):
    """No containing trixel was found, even with the relaxed tolerance.

    Should be unreachable for valid unit-sphere inputs; if it happens it points at a
    topology or floating-point bug.
    """


__all__ = [
    "TrixelError",
    "InvalidCoordinate",
    "InvalidIdentifier",
    "InvalidDepth",
    "DepthExceeded",
    "PointNotLocated",
]
