"""Level-of-detail trixel selection.

Breadth-first expansion from the eight roots down to a target depth. Trixels at the
target depth are emitted; shallower ones are replaced by their four children.

Work is bounded twice, so any target depth terminates with bounded memory:
- at most `max_processed` queue entries are examined
- at most `max_results` identifiers are emitted

With a view region, a trixel whose boundary bounding box misses the region is pruned
together with its whole subtree. Pruning only saves work: without a region every
trixel at the target depth is returned (the "always include" mode).
"""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

from .boundary import DEFAULT_SEGMENTS_PER_EDGE, CornerCache, boundary
from .mesh import ROOT_IDS
from .region import ViewRect
from .trixel_id import MAX_DEPTH, TrixelId

logger = logging.getLogger(__name__)

MAX_OUTPUT_TRIXELS = 20_000
MAX_BFS_QUEUE_PROCESSING = 50_000

# Seed search: a coarse pass over a generously expanded region.
SEED_EXPANSION_DEG = 20.0
MAX_SEED_QUEUE_PROCESSING = 5_000
SEED_RESOLUTION_OFFSET = 3

# Sampled ring points can sit slightly inside the true great-circle edges.
CULL_MARGIN_DEG = 0.1

# (upper zoom bound, depth); zooms at or past the last bound map to ZOOM_MAX_DEPTH.
_ZOOM_TABLE = (
    (1.0, 0),
    (1.5, 1),
    (2.0, 2),
    (2.5, 3),
    (3.0, 4),
    (4.0, 5),
    (5.0, 6),
    (6.0, 7),
    (7.0, 8),
    (8.0, 9),
)
ZOOM_MAX_DEPTH = 10


@dataclass
class ViewSelection:
    target_depth: int
    ids: List[int] = field(default_factory=list)
    processed: int = 0
    pruned: int = 0
    truncated: bool = False

    def __len__(self) -> int:
        return len(self.ids)


def clamp_depth(depth: int) -> int:
    return min(max(0, int(depth)), MAX_DEPTH)


def _keep(tid: TrixelId, region: Optional[ViewRect], segments: int, cache: Optional[CornerCache]) -> bool:
    if region is None or tid.depth == 0:
        # Root rings stop at the clamped pole latitude, so their boxes miss the caps.
        return True
    b = boundary(tid, segments, cache)
    if b.is_empty:
        # Nothing to test against; keep it rather than lose a subtree.
        return True
    return b.bbox().expanded(CULL_MARGIN_DEG).intersects(region)


def traverse_view(
    target_depth: int,
    region: Optional[ViewRect] = None,
    *,
    max_results: int = MAX_OUTPUT_TRIXELS,
    max_processed: int = MAX_BFS_QUEUE_PROCESSING,
    segments: int = DEFAULT_SEGMENTS_PER_EDGE,
    cache: Optional[CornerCache] = None,
) -> ViewSelection:
    """Run the bounded breadth-first selection and report how it went.

    `target_depth` is clamped into [0, MAX_DEPTH].
    """
    if max_results < 0 or max_processed < 0:
        raise ValueError("max_results and max_processed must be >= 0")

    depth = clamp_depth(target_depth)
    sel = ViewSelection(target_depth=depth)
    queue: Deque[TrixelId] = deque(TrixelId(r) for r in ROOT_IDS)

    while queue and len(sel.ids) < max_results and sel.processed < max_processed:
        sel.processed += 1
        tid = queue.popleft()

        if not _keep(tid, region, segments, cache):
            sel.pruned += 1
            continue

        if tid.depth == depth:
            sel.ids.append(tid.encode())
        else:
            queue.extend(tid.child(k) for k in (1, 2, 3, 4))

    if queue:
        sel.truncated = True
        if sel.processed >= max_processed:
            logger.warning("view selection hit the processing cap (%d) at depth %d", max_processed, depth)
        if len(sel.ids) >= max_results:
            logger.warning("view selection hit the result cap (%d) at depth %d", max_results, depth)

    logger.debug(
        "view selection depth=%d ids=%d processed=%d pruned=%d",
        depth,
        len(sel.ids),
        sel.processed,
        sel.pruned,
    )
    return sel


def select_view(
    target_depth: int,
    region: Optional[ViewRect] = None,
    *,
    max_results: int = MAX_OUTPUT_TRIXELS,
    max_processed: int = MAX_BFS_QUEUE_PROCESSING,
    segments: int = DEFAULT_SEGMENTS_PER_EDGE,
    cache: Optional[CornerCache] = None,
) -> List[int]:
    """Identifiers at `target_depth`, optionally limited to those touching `region`."""
    return traverse_view(
        target_depth,
        region,
        max_results=max_results,
        max_processed=max_processed,
        segments=segments,
        cache=cache,
    ).ids


def seed_trixels(
    region: ViewRect,
    target_depth: int,
    *,
    cache: Optional[CornerCache] = None,
) -> List[int]:
    """Coarse trixels around a region, SEED_RESOLUTION_OFFSET levels above target_depth.

    The region is grown by SEED_EXPANSION_DEG on every side first.
    """
    seed_depth = clamp_depth(target_depth - SEED_RESOLUTION_OFFSET)
    return select_view(
        seed_depth,
        region.expanded(SEED_EXPANSION_DEG),
        max_processed=MAX_SEED_QUEUE_PROCESSING,
        cache=cache,
    )


def resolution_for_zoom(zoom: float) -> int:
    """Map a (latitude-normalized) map zoom level to a trixel depth."""
    for bound, depth in _ZOOM_TABLE:
        if zoom < bound:
            return min(depth, MAX_DEPTH)
    return min(ZOOM_MAX_DEPTH, MAX_DEPTH)


def normalized_zoom(zoom: float, center_lat: float) -> float:
    """Zoom adjusted for Mercator stretching at `center_lat` (degrees)."""
    c = math.cos(math.radians(center_lat))
    if c <= 1e-12:
        return math.inf
    return zoom + math.log2(1.0 / c)
