import math

import pytest

from geocircles.circles.errors import CircleError, InvalidCenter, InvalidPointCount, InvalidRadius
from geocircles.circles.sampler import sample_boundary
from geocircles.core.geo import GeoPoint, haversine_m

EARTH_RADIUS_M = 6_371_009

# (lat, lon, radius_m) of the catalog locations.
CENTERS = [
    (51.5072, -0.1276, 900_000),
    (40.4832, -96.4044, 2_400_000),
    (28.3636, 77.1348, 5_000_000),
    (-18.1, 178.27, 200_000),
    (67.017, -178.242, 450_000),
]


def test_ring_is_closed_for_all_catalog_centers():
    for lat, lon, radius in CENTERS:
        for point_count in (3, 7, 120):
            points = sample_boundary(lat, lon, radius, earth_radius_m=EARTH_RADIUS_M, point_count=point_count)
            assert len(points) == point_count + 1
            assert [p.seq for p in points] == [float(i) for i in range(point_count + 1)]
            assert abs(points[0].lat - points[-1].lat) <= 1e-9
            assert abs(points[0].lon - points[-1].lon) <= 1e-9


def test_longitudes_are_normalized():
    points = sample_boundary(67.017, -178.242, 450_000, earth_radius_m=EARTH_RADIUS_M, point_count=120)
    assert all(-180.0 <= p.lon < 180.0 for p in points)
    # The ring spills over the seam, so both signs show up.
    assert any(p.lon > 170 for p in points)
    assert any(p.lon < -170 for p in points)


def test_boundary_points_sit_at_the_radius():
    points = sample_boundary(51.5072, -0.1276, 900_000, earth_radius_m=EARTH_RADIUS_M, point_count=120)
    center = GeoPoint(lat=51.5072, lon=-0.1276)
    for p in points:
        d = haversine_m(center, GeoPoint(lat=p.lat, lon=p.lon), earth_radius_m=EARTH_RADIUS_M)
        assert d == pytest.approx(900_000, rel=1e-7)


def test_north_and_south_points_are_symmetric_about_the_center():
    lat, lon, radius = 51.5072, -0.1276, 900_000
    points = sample_boundary(lat, lon, radius, earth_radius_m=EARTH_RADIUS_M, point_count=120)
    north, south = points[0], points[60]
    delta_deg = math.degrees(radius / EARTH_RADIUS_M)

    assert north.lon == pytest.approx(lon, abs=1e-9)
    assert south.lon == pytest.approx(lon, abs=1e-9)
    assert north.lat - lat == pytest.approx(delta_deg, abs=1e-9)
    assert lat - south.lat == pytest.approx(delta_deg, abs=1e-9)


def test_half_rotation_point_is_due_south():
    points = sample_boundary(28.3636, 77.1348, 5_000_000, earth_radius_m=EARTH_RADIUS_M, point_count=120)
    south = points[60]
    assert south.lat < 28.3636
    assert abs(south.lon - 77.1348) < 1e-6


@pytest.mark.parametrize("lat", [90.0, -90.0])
def test_polar_center_fails_cleanly(lat):
    with pytest.raises(InvalidCenter):
        sample_boundary(lat, 0.0, 100_000, earth_radius_m=EARTH_RADIUS_M, point_count=120)


@pytest.mark.parametrize("point_count", [2, 0, -5, 3.5])
def test_rejects_bad_point_count(point_count):
    with pytest.raises(InvalidPointCount):
        sample_boundary(10.0, 10.0, 1000, earth_radius_m=EARTH_RADIUS_M, point_count=point_count)


@pytest.mark.parametrize("radius", [0, -1.0, EARTH_RADIUS_M * 3.2, EARTH_RADIUS_M * 4])
def test_rejects_bad_radius(radius):
    with pytest.raises(InvalidRadius):
        sample_boundary(10.0, 10.0, radius, earth_radius_m=EARTH_RADIUS_M, point_count=120)


def test_errors_are_value_errors_with_codes():
    with pytest.raises(ValueError) as exc:
        sample_boundary(10.0, 10.0, 1000, earth_radius_m=0, point_count=120)
    assert isinstance(exc.value, CircleError)
    assert exc.value.code == "INVALID_RADIUS"
