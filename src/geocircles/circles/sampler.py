"""
Boundary sampling on a sphere.

Walks around the center in equal bearing steps and places each boundary point
with the great-circle destination formula (bearing + angular distance). The
bearing for `i == point_count` wraps to 0, so the last point repeats the first
and the ring comes out closed without a special case.
"""

from __future__ import annotations

import math

from geocircles.circles.errors import InvalidCenter, InvalidPointCount, InvalidRadius
from geocircles.circles.ring import BoundaryPoint
from geocircles.core.geo import normalize_longitude

MIN_POINT_COUNT = 3
POLE_TOLERANCE_DEG = 1e-9


def bearing_radians(index: int, point_count: int) -> float:
    """Bearing of boundary point `index` out of `point_count`, in radians (0 = north)."""
    return math.radians((360.0 * index / point_count) % 360.0)


def validate_sampling(radius: float, *, scale: float, point_count: int) -> float:
    """Validate inputs shared by the spherical and flat samplers; return radius / scale."""
    if int(point_count) != point_count or point_count < MIN_POINT_COUNT:
        raise InvalidPointCount(f"point_count must be an integer >= {MIN_POINT_COUNT}, got {point_count!r}")
    if float(scale) <= 0:
        raise InvalidRadius(f"scale must be > 0, got {scale!r}")
    if float(radius) <= 0:
        raise InvalidRadius(f"radius must be > 0, got {radius!r}")
    return float(radius) / float(scale)


def sample_boundary(
    center_lat: float,
    center_lon: float,
    radius_m: float,
    *,
    earth_radius_m: float,
    point_count: int,
) -> list[BoundaryPoint]:
    """Return `point_count + 1` boundary points (closed ring) around a center."""
    angular_distance = validate_sampling(radius_m, scale=earth_radius_m, point_count=point_count)
    if angular_distance >= math.pi:
        raise InvalidRadius(
            f"radius {radius_m} m wraps past the antipode (angular distance {angular_distance:.4f} rad)"
        )
    if abs(float(center_lat)) >= 90.0 - POLE_TOLERANCE_DEG:
        raise InvalidCenter(f"bearing is undefined for a center on a pole (lat={center_lat})")

    lat1 = math.radians(float(center_lat))
    lon1 = math.radians(float(center_lon))
    sin_lat1 = math.sin(lat1)
    cos_lat1 = math.cos(lat1)
    sin_d = math.sin(angular_distance)
    cos_d = math.cos(angular_distance)

    points: list[BoundaryPoint] = []
    for i in range(int(point_count) + 1):
        theta = bearing_radians(i, int(point_count))
        lat2 = math.asin(sin_lat1 * cos_d + cos_lat1 * sin_d * math.cos(theta))
        lon2 = lon1 + math.atan2(
            math.sin(theta) * sin_d * cos_lat1,
            cos_d - sin_lat1 * math.sin(lat2),
        )
        points.append(
            BoundaryPoint(seq=float(i), lat=math.degrees(lat2), lon=normalize_longitude(math.degrees(lon2)))
        )
    return points
