"""Spherical <-> Cartesian coordinate conversion.

Angles are degrees on the outside and radians only inside the trig calls.

Axis orientation is the usual Earth-centered frame:
- +X points to (lon=0°, lat=0°)
- +Y points to (lon=90°E, lat=0°)
- +Z points to the North Pole (lat=90°)

Both longitude conventions are accepted on input:
- geographic longitude in [-180, 180]
- right ascension in [0, 360]  (360 itself is tolerated and equals 0)

Outputs use geographic longitude in (-180, 180] (`to_spherical`) or right ascension in
[0, 360) (`to_radec`). At the exact poles longitude is undefined; atan2 returns 0 there
and callers must tolerate any value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple, Union

from .errors import InvalidCoordinate
from .vectors import Vec3

LON_MIN = -180.0
LON_MAX = 360.0
LAT_MIN = -90.0
LAT_MAX = 90.0

NumberLike = Union[int, float]


@dataclass(frozen=True)
class SphericalCoord:
    """A (longitude, latitude) pair in degrees.

    `ra`/`dec` are provided as aliases for sky coordinates.
    """

    lon: float
    lat: float

    @property
    def ra(self) -> float:
        return self.lon

    @property
    def dec(self) -> float:
        return self.lat

    @staticmethod
    def from_radec(ra: NumberLike, dec: NumberLike) -> "SphericalCoord":
        return SphericalCoord(float(ra), float(dec))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lon, self.lat)


def _to_float(name: str, v: NumberLike) -> float:
    if isinstance(v, bool):
        raise InvalidCoordinate(f"{name} must be a number, got {v!r}")
    try:
        f = float(v)
    except (TypeError, ValueError) as e:
        raise InvalidCoordinate(f"{name} must be a number, got {v!r}") from e
    if not math.isfinite(f):
        raise InvalidCoordinate(f"{name} must be finite, got {v!r}")
    return f


def validate(lon: NumberLike, lat: NumberLike) -> Tuple[float, float]:
    """Return (lon, lat) as floats or raise InvalidCoordinate."""
    lon_f = _to_float("longitude", lon)
    lat_f = _to_float("latitude", lat)
    if lon_f < LON_MIN or lon_f > LON_MAX:
        raise InvalidCoordinate(f"longitude {lon_f} outside [{LON_MIN}, {LON_MAX}]")
    if lat_f < LAT_MIN or lat_f > LAT_MAX:
        raise InvalidCoordinate(f"latitude {lat_f} outside [{LAT_MIN}, {LAT_MAX}]")
    return lon_f, lat_f


def lonlat_to_vector(lon: NumberLike, lat: NumberLike) -> Vec3:
    lon_f, lat_f = validate(lon, lat)
    lon_r = math.radians(lon_f)
    lat_r = math.radians(lat_f)
    cos_lat = math.cos(lat_r)
    return (cos_lat * math.cos(lon_r), cos_lat * math.sin(lon_r), math.sin(lat_r))


def to_vector(coord: SphericalCoord) -> Vec3:
    """Convert a spherical coordinate to a unit Cartesian vector."""
    return lonlat_to_vector(coord.lon, coord.lat)


def vector_to_lonlat(v: Vec3) -> Tuple[float, float]:
    """Return (lon, lat) in degrees; lon in (-180, 180]."""
    x, y, z = v
    # Clamp to absorb drift slightly past unit length.
    zc = max(-1.0, min(1.0, z))
    return (math.degrees(math.atan2(y, x)), math.degrees(math.asin(zc)))


def to_spherical(v: Vec3) -> SphericalCoord:
    lon, lat = vector_to_lonlat(v)
    return SphericalCoord(lon, lat)


def to_radec(v: Vec3) -> SphericalCoord:
    """Like `to_spherical` but with right ascension in [0, 360)."""
    lon, lat = vector_to_lonlat(v)
    if lon < 0.0:
        lon += 360.0
    if lon >= 360.0:
        lon -= 360.0
    return SphericalCoord(lon, lat)


def wrap_lon(lon: float) -> float:
    """Wrap longitude to [-180, 180)."""
    return ((lon + 180.0) % 360.0) - 180.0


def normalize_lon(lon: float) -> float:
    """Fold longitude into [-180, 180] keeping +180 as +180."""
    out = math.fmod(lon, 360.0)
    if out > 180.0:
        out -= 360.0
    if out < -180.0:
        out += 360.0
    return out
