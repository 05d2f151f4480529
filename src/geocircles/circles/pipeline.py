from __future__ import annotations

# This module is the "orchestrator" for the circle pipeline.
# Per location it runs: sample boundary -> detect seam crossings -> segment ring.
# Across locations it fans out on a thread pool; each location is independent.
#
# Failure policy:
# - A CircleError (bad radius, pole center, unsupported crossing count, ...) only
#   fails its own location; it is recorded and the rest of the run continues.
# - Any other exception is a bug and propagates.

import concurrent.futures
import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence, TypeVar

from geocircles.circles.crossings import Interpolation, detect_crossings
from geocircles.circles.errors import CircleError
from geocircles.circles.flat import FlatPoint, sample_flat
from geocircles.circles.ring import BoundaryPoint, CrossingEvent, RingGeometry
from geocircles.circles.sampler import sample_boundary
from geocircles.circles.segmenter import segment_ring
from geocircles.config.settings import Settings, get_settings
from geocircles.domain.models import FlatLocation, Location

logger = logging.getLogger(__name__)

L = TypeVar("L", Location, FlatLocation)
R = TypeVar("R")


@dataclass(frozen=True)
class CircleResult:
    location: Location
    points: list[BoundaryPoint]
    crossings: list[CrossingEvent]
    geometry: RingGeometry


@dataclass(frozen=True)
class FlatCircleResult:
    location: FlatLocation
    points: list[FlatPoint]


@dataclass(frozen=True)
class CircleFailure:
    location_id: str
    code: str
    message: str

    @classmethod
    def from_error(cls, location_id: str, error: CircleError) -> "CircleFailure":
        return cls(location_id=location_id, code=error.code, message=str(error))


@dataclass
class CircleRun:
    """Partial result set: every location lands in exactly one of the two lists."""

    results: list = field(default_factory=list)
    errors: list[CircleFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def build_circle(
    location: Location,
    *,
    point_count: int,
    earth_radius_m: float,
    interpolation: Interpolation = "reference",
) -> CircleResult:
    """Run the full spherical pipeline for one location."""
    points = sample_boundary(
        location.latitude,
        location.longitude,
        location.radius_m,
        earth_radius_m=earth_radius_m,
        point_count=point_count,
    )
    crossings = detect_crossings(points, interpolation=interpolation)
    geometry = segment_ring(points, crossings)
    logger.debug(
        "Circle %s: points=%d crossings=%d batches=%d",
        location.id,
        len(points),
        len(crossings),
        len(geometry.batches),
    )
    return CircleResult(location=location, points=points, crossings=crossings, geometry=geometry)


def build_flat_circle(location: FlatLocation, *, point_count: int, rescaling_divisor: float) -> FlatCircleResult:
    points = sample_flat(
        location.x,
        location.y,
        location.radius,
        point_count=point_count,
        rescaling_divisor=rescaling_divisor,
    )
    return FlatCircleResult(location=location, points=points)


def _run_isolated(
    locations: Sequence[L],
    build: Callable[[L], R],
    *,
    max_workers: int,
) -> CircleRun:
    run = CircleRun()
    if not locations:
        return run

    workers = max(1, min(int(max_workers), len(locations)))
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as pool:
        # Submit in input order and collect in input order so output is deterministic.
        futures = [pool.submit(build, loc) for loc in locations]
        for loc, future in zip(locations, futures):
            try:
                run.results.append(future.result())
            except CircleError as e:
                logger.warning("Circle failed for location %s: %s (%s)", loc.id, e, e.code)
                run.errors.append(CircleFailure.from_error(loc.id, e))

    logger.info("Computed %d circles (%d failed)", len(run.results), len(run.errors))
    return run


def compute_circles(
    locations: Sequence[Location],
    *,
    settings: Settings | None = None,
    max_workers: int | None = None,
) -> CircleRun:
    """Compute circles for many locations concurrently, isolating per-location failures."""
    settings = settings or get_settings()
    cfg = settings.sampling

    def build(location: Location) -> CircleResult:
        return build_circle(
            location,
            point_count=cfg.point_count,
            earth_radius_m=cfg.earth_radius_m,
            interpolation=cfg.crossing_interpolation,
        )

    return _run_isolated(locations, build, max_workers=max_workers or settings.pipeline.max_workers)


def compute_flat_circles(
    locations: Sequence[FlatLocation],
    *,
    settings: Settings | None = None,
    max_workers: int | None = None,
) -> CircleRun:
    """Flat-plane counterpart of `compute_circles`."""
    settings = settings or get_settings()
    cfg = settings.flat

    def build(location: FlatLocation) -> FlatCircleResult:
        return build_flat_circle(location, point_count=cfg.point_count, rescaling_divisor=cfg.rescaling_divisor)

    return _run_isolated(locations, build, max_workers=max_workers or settings.pipeline.max_workers)
