"""
Antimeridian crossing detection.

A consecutive pair of boundary points whose longitudes differ by more than 180
degrees is taken to cross the +-180 seam rather than the prime meridian. For each
such pair we work in a shifted [0, 360) longitude space (no discontinuity at the
seam), fit a straight line through the two points, and read off the latitude at
the seam.

Two interpolation modes are supported:
- "reference": reproduces the established formula exactly, including its extra
  x180 factor on the seam longitude. Kept as the default for compatibility; the
  latitudes it yields are frequently outside [-90, 90] and are logged for review.
- "linear": the textbook straight-line latitude at shifted longitude 180.
"""

from __future__ import annotations

import logging
from typing import Iterable, Literal

from geocircles.circles.errors import DegenerateCrossing
from geocircles.circles.ring import BoundaryPoint, CrossingEvent, crosses_seam
from geocircles.core.geo import shift_longitude

logger = logging.getLogger(__name__)

Interpolation = Literal["reference", "linear"]


def crossing_between(
    previous: BoundaryPoint, current: BoundaryPoint, *, interpolation: Interpolation = "reference"
) -> CrossingEvent:
    """Build the crossing event for one flagged pair of consecutive points."""
    # -1: passing from +180 to -180 (eastbound); +1: the reverse.
    modifier = -1 if current.lon < previous.lon else 1
    shifted_delta = shift_longitude(current.lon) - shift_longitude(previous.lon)
    if shifted_delta == 0:
        raise DegenerateCrossing(
            f"zero longitude delta between points {previous.seq} and {current.seq} flagged as a crossing"
        )
    gradient = (current.lat - previous.lat) / shifted_delta
    seam_lon = modifier * 180.0

    if interpolation == "reference":
        intercept = current.lat - gradient * current.lon
        lat = gradient * seam_lon * 180 + intercept
        if not -90.0 <= lat <= 90.0:
            logger.warning(
                "Reference crossing latitude out of range: anchor=%s lat=%.3f", int(current.seq), lat
            )
    elif interpolation == "linear":
        lat = previous.lat + gradient * (180.0 - shift_longitude(previous.lon))
    else:
        raise ValueError(f"Unknown interpolation mode: {interpolation!r}")

    return CrossingEvent(
        anchor=int(current.seq),
        lat=lat,
        lon=seam_lon,
        direction="eastbound" if modifier < 0 else "westbound",
    )


def detect_crossings(
    points: Iterable[BoundaryPoint], *, interpolation: Interpolation = "reference"
) -> list[CrossingEvent]:
    """Scan consecutive point pairs and return crossing events in ring order."""
    events: list[CrossingEvent] = []
    previous: BoundaryPoint | None = None
    for point in points:
        if previous is not None and crosses_seam(previous, point):
            events.append(crossing_between(previous, point, interpolation=interpolation))
        previous = point
    return events
