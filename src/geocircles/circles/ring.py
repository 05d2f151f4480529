"""
Ring value types.

These are the per-circle intermediate shapes passed between the sampler, the
crossing detector, the segmenter and the assembler. They are scoped to one
location's computation and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

# Synthesized seam points sit between the two sampled points of a crossing pair:
# the pair (i-1, i) is split at i - SEAM_OFFSET, with the exit point just before
# and the entry point just after. Sampled points keep their integer indexes.
SEAM_OFFSET = 0.5
SIDE_OFFSET = 0.1

Direction = Literal["eastbound", "westbound"]


@dataclass(frozen=True)
class BoundaryPoint:
    """One point of a circle boundary, in decimal degrees."""

    seq: float
    lat: float
    lon: float
    synthetic: bool = False


@dataclass(frozen=True)
class CrossingEvent:
    """An antimeridian crossing between sampled points `anchor - 1` and `anchor`.

    `lon` is the seam longitude on the later point's side (+180 or -180) and
    `lat` the interpolated latitude there. The ring leaves through `exit_point`
    (earlier point's side) and reappears at `entry_point`.
    """

    anchor: int
    lat: float
    lon: float
    direction: Direction

    @property
    def seam_seq(self) -> float:
        return self.anchor - SEAM_OFFSET

    @property
    def exit_point(self) -> BoundaryPoint:
        return BoundaryPoint(seq=self.seam_seq - SIDE_OFFSET, lat=self.lat, lon=-self.lon, synthetic=True)

    @property
    def entry_point(self) -> BoundaryPoint:
        return BoundaryPoint(seq=self.seam_seq + SIDE_OFFSET, lat=self.lat, lon=self.lon, synthetic=True)


Batch = tuple[BoundaryPoint, ...]


@dataclass(frozen=True)
class SingleBatch:
    """A ring that never touches the antimeridian."""

    points: Batch
    kind: Literal["single"] = "single"

    @property
    def batches(self) -> tuple[Batch, ...]:
        return (self.points,)


@dataclass(frozen=True)
class MultiBatch:
    """A ring split at the antimeridian into four non-wrapping batches.

    Order: pre-crossing region, far-side region (two halves), post region.
    """

    batches: tuple[Batch, Batch, Batch, Batch]
    kind: Literal["multi"] = "multi"

    @property
    def points(self) -> Batch:
        return tuple(p for batch in self.batches for p in batch)


RingGeometry = Union[SingleBatch, MultiBatch]


def crosses_seam(a: BoundaryPoint, b: BoundaryPoint) -> bool:
    """True when the shorter path between two consecutive points passes through +-180."""
    return abs(b.lon - a.lon) > 180.0
