"""
Ring segmentation at the antimeridian.

Splits a sampled ring plus its synthesized seam points into batches that can
each be drawn as a plain line without wrapping around the globe.

With two crossings the ring has a near side (the part holding point 0) and a far
side beyond the seam:
- batch 0: from point 0 up to the first exit point
- batch 1: first entry point up to (not including) the far side's apex
- batch 2: from the apex to the second exit point
- batch 3: second entry point back round to the closing point

Concatenating the batches in order gives back the whole augmented ring.
"""

from __future__ import annotations

from typing import Sequence

from geocircles.circles.errors import UnsupportedCrossingCount, WrappingBatch
from geocircles.circles.ring import (
    SEAM_OFFSET,
    Batch,
    BoundaryPoint,
    CrossingEvent,
    MultiBatch,
    RingGeometry,
    SingleBatch,
    crosses_seam,
)


def augment_ring(points: Sequence[BoundaryPoint], crossings: Sequence[CrossingEvent]) -> list[BoundaryPoint]:
    """Merge sampled points with each crossing's exit/entry points, ordered by `seq`."""
    merged = list(points)
    for event in crossings:
        merged.append(event.exit_point)
        merged.append(event.entry_point)
    return sorted(merged, key=lambda p: p.seq)


def ensure_non_wrapping(batch: Sequence[BoundaryPoint], *, batch_id: int) -> None:
    for a, b in zip(batch, batch[1:]):
        if crosses_seam(a, b):
            raise WrappingBatch(f"batch {batch_id} wraps between points {a.seq} and {b.seq}")


def _apex_position(region: Sequence[BoundaryPoint]) -> int:
    """Position of the sampled point farthest from the seam (never the leading entry point)."""
    best_pos = 1
    best_gap = -1.0
    for pos, p in enumerate(region):
        if p.synthetic:
            continue
        gap = 180.0 - abs(p.lon)
        if gap > best_gap:
            best_pos, best_gap = pos, gap
    return best_pos


def segment_ring(points: Sequence[BoundaryPoint], crossings: Sequence[CrossingEvent]) -> RingGeometry:
    """Partition a ring into one batch (no crossings) or four batches (two crossings)."""
    if not crossings:
        batch: Batch = tuple(points)
        ensure_non_wrapping(batch, batch_id=0)
        return SingleBatch(points=batch)

    if len(crossings) != 2:
        # The four-batch model only covers an entry and an exit (e.g. not rings around a pole).
        raise UnsupportedCrossingCount(f"expected 0 or 2 antimeridian crossings, got {len(crossings)}")

    ring = augment_ring(points, crossings)
    first = min(c.anchor for c in crossings) - SEAM_OFFSET
    last = max(c.anchor for c in crossings) - SEAM_OFFSET

    head = tuple(p for p in ring if p.seq < first)
    far_side = tuple(p for p in ring if first <= p.seq < last)
    tail = tuple(p for p in ring if p.seq >= last)
    apex = _apex_position(far_side)

    batches = (head, far_side[:apex], far_side[apex:], tail)
    for batch_id, batch in enumerate(batches):
        ensure_non_wrapping(batch, batch_id=batch_id)
    return MultiBatch(batches=batches)
