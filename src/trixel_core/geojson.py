"""GeoJSON-shaped dicts for trixel boundaries.

Features carry the identifier twice: as a string `id` (handy for map libraries that
promote a property to the feature id) and as `numeric_id`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from .boundary import DEFAULT_SEGMENTS_PER_EDGE, CornerCache, boundary

logger = logging.getLogger(__name__)


def trixel_feature(
    id: int,
    *,
    segments: int = DEFAULT_SEGMENTS_PER_EDGE,
    cache: Optional[CornerCache] = None,
) -> Optional[Dict[str, Any]]:
    """A Polygon Feature for one trixel, or None if it has no renderable boundary."""
    b = boundary(id, segments, cache)
    if b.is_empty:
        return None
    level = len(str(b.id)) - 1
    return {
        "type": "Feature",
        "geometry": b.to_geojson(),
        "properties": {"id": str(b.id), "numeric_id": b.id, "level": level},
    }


def feature_collection(
    ids: Iterable[int],
    *,
    segments: int = DEFAULT_SEGMENTS_PER_EDGE,
    cache: Optional[CornerCache] = None,
) -> Dict[str, Any]:
    """FeatureCollection for many trixels; unrenderable ones are skipped."""
    features: List[Dict[str, Any]] = []
    skipped = 0
    for id in ids:
        f = trixel_feature(id, segments=segments, cache=cache)
        if f is None:
            skipped += 1
            continue
        features.append(f)
    if skipped:
        logger.warning("skipped %d trixels without a renderable boundary", skipped)
    return {"type": "FeatureCollection", "features": features}
