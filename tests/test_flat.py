import math

import pytest

from geocircles.circles.errors import InvalidPointCount, InvalidRadius
from geocircles.circles.flat import flat_polygon, sample_flat


def test_flat_ring_is_closed_and_rescaled():
    points = sample_flat(-50, 200, 32, point_count=120, rescaling_divisor=10_000)

    assert len(points) == 121
    assert (points[0].x, points[0].y) == (points[-1].x, points[-1].y)
    # Bearing 0 points along +y.
    assert points[0].x == pytest.approx(-0.005)
    assert points[0].y == pytest.approx(0.02 + 0.0032)


def test_flat_scale_invariance():
    base = sample_flat(25, 15, 20, point_count=120, rescaling_divisor=10_000)
    scaled = sample_flat(25 * 7, 15 * 7, 20 * 7, point_count=120, rescaling_divisor=10_000)

    assert [p.x for p in scaled] == pytest.approx([7 * p.x for p in base], abs=1e-12)
    assert [p.y for p in scaled] == pytest.approx([7 * p.y for p in base], abs=1e-12)


def test_flat_polygon_area_approaches_circle_area():
    points = sample_flat(-80, 165, 40, point_count=120, rescaling_divisor=10_000)
    r = 40 / 10_000
    assert flat_polygon(points).area == pytest.approx(math.pi * r * r, rel=1e-3)


def test_flat_validation():
    with pytest.raises(InvalidRadius):
        sample_flat(0, 0, 0, point_count=120, rescaling_divisor=10_000)
    with pytest.raises(InvalidRadius):
        sample_flat(0, 0, 5, point_count=120, rescaling_divisor=0)
    with pytest.raises(InvalidPointCount):
        sample_flat(0, 0, 5, point_count=2, rescaling_divisor=10_000)
