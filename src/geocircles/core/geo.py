from __future__ import annotations
from dataclasses import dataclass
from math import asin, cos, radians, sin, sqrt

"""
Geospatial helpers.

Spherical-Earth primitives shared by the circle pipeline and the quality report.
Everything here works in decimal degrees at the edges and radians inside.
"""

# Mean Earth radius used when callers do not pass one explicitly.
EARTH_RADIUS_M = 6_371_009


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float


def normalize_longitude(lon: float) -> float:
    """Map any longitude (degrees) into the canonical [-180, 180) range.

    The outer `% 360` is not redundant: for tiny negative inputs `x % 360` can
    round up to exactly 360.0, which the second pass folds back to 0.
    """
    return ((float(lon) + 180.0) % 360.0 + 360.0) % 360.0 - 180.0


def shift_longitude(lon: float) -> float:
    """Map a longitude into [0, 360) so the antimeridian is no longer a discontinuity."""
    return (float(lon) + 360.0) % 360.0


def haversine_m(a: GeoPoint, b: GeoPoint, *, earth_radius_m: float = EARTH_RADIUS_M) -> float:
    """Compute great-circle distance in meters between two points."""
    r = float(earth_radius_m)
    lat1 = radians(a.lat)
    lon1 = radians(a.lon)
    lat2 = radians(b.lat)
    lon2 = radians(b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # Clamp: rounding can push h a hair above 1 for near-antipodal pairs.
    return 2 * r * asin(sqrt(min(1.0, h)))
