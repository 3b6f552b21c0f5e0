from __future__ import annotations

from typing import List, Tuple

from trixel_core.region import ViewRect


def _parse_floats(value: str, *, what: str) -> List[float]:
    parts = [p.strip() for p in value.split(",")]
    if any(not p for p in parts):
        raise ValueError(f"empty number in {what}")
    try:
        return [float(p) for p in parts]
    except ValueError as e:
        raise ValueError(f"invalid number in {what}") from e


def parse_lonlat(value: str) -> Tuple[float, float]:
    """Parse "lon,lat" (degrees).

    Note: a leading negative longitude looks like an option flag on the command line;
    use `trixel locate -- -122.4194,37.7749` or the --lon/--lat options instead.
    """
    nums = _parse_floats(value.strip(), what="lon,lat")
    if len(nums) != 2:
        raise ValueError("expected 'lon,lat' (two comma-separated numbers)")
    return nums[0], nums[1]


def parse_bbox(value: str) -> ViewRect:
    """Parse "west,south,east,north" into a ViewRect.

    west > east is allowed and means the box crosses the antimeridian.
    """
    nums = _parse_floats(value.strip(), what="bbox")
    if len(nums) != 4:
        raise ValueError("expected 'west,south,east,north' (four comma-separated numbers)")
    west, south, east, north = nums
    for lat in (south, north):
        if lat < -90.0 or lat > 90.0:
            raise ValueError(f"latitude {lat} outside [-90, 90]")
    if south > north:
        raise ValueError("south must not be greater than north")
    return ViewRect(west, south, east, north)


def parse_id_list(value: str) -> List[int]:
    """Parse a comma/whitespace separated list of integer identifiers."""
    out: List[int] = []
    for tok in value.replace(",", " ").split():
        try:
            out.append(int(tok))
        except ValueError as e:
            raise ValueError(f"invalid identifier: {tok!r}") from e
    if not out:
        raise ValueError("no identifiers given")
    return out
