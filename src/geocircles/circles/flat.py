"""
Flat-plane circles.

The same bearing walk as the spherical sampler, on a 2D plane: no angular
distance, no longitude wrapping. Inputs are divided by a rescaling divisor so
the resulting coordinates stay well inside the geographic coordinate range and
can go through the same geometry constructors.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from shapely.geometry import Polygon

from geocircles.circles.sampler import bearing_radians, validate_sampling


@dataclass(frozen=True)
class FlatPoint:
    seq: float
    x: float
    y: float


def sample_flat(
    x: float,
    y: float,
    radius: float,
    *,
    point_count: int,
    rescaling_divisor: float,
) -> list[FlatPoint]:
    """Return `point_count + 1` rescaled boundary points (closed ring)."""
    r = validate_sampling(radius, scale=rescaling_divisor, point_count=point_count)
    cx = float(x) / float(rescaling_divisor)
    cy = float(y) / float(rescaling_divisor)

    points: list[FlatPoint] = []
    for i in range(int(point_count) + 1):
        theta = bearing_radians(i, int(point_count))
        points.append(FlatPoint(seq=float(i), x=cx + r * math.sin(theta), y=cy + r * math.cos(theta)))
    return points


def flat_polygon(points: Sequence[FlatPoint]) -> Polygon:
    return Polygon([(p.x, p.y) for p in points])
