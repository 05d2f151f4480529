import pytest

from geocircles.circles.crossings import detect_crossings
from geocircles.circles.errors import UnsupportedCrossingCount, WrappingBatch
from geocircles.circles.ring import BoundaryPoint, MultiBatch, SingleBatch, crosses_seam
from geocircles.circles.sampler import sample_boundary
from geocircles.circles.segmenter import augment_ring, segment_ring

EARTH_RADIUS_M = 6_371_009


def _ring(lat: float, lon: float, radius_m: float):
    points = sample_boundary(lat, lon, radius_m, earth_radius_m=EARTH_RADIUS_M, point_count=120)
    return points, detect_crossings(points)


def _assert_non_wrapping(batch):
    for a, b in zip(batch, batch[1:]):
        assert not crosses_seam(a, b)


def test_single_batch_when_ring_stays_off_the_seam():
    points, crossings = _ring(51.5072, -0.1276, 900_000)
    geometry = segment_ring(points, crossings)

    assert isinstance(geometry, SingleBatch)
    assert len(geometry.batches) == 1
    assert list(geometry.points) == points
    assert len(geometry.points) == 121
    assert geometry.points[0] == geometry.points[-1]


def test_four_batches_reconstruct_the_augmented_ring():
    points, crossings = _ring(67.017, -178.242, 450_000)
    geometry = segment_ring(points, crossings)

    assert isinstance(geometry, MultiBatch)
    assert len(geometry.batches) == 4
    assert all(len(b) >= 1 for b in geometry.batches)

    concatenated = [p for batch in geometry.batches for p in batch]
    assert concatenated == augment_ring(points, crossings)
    assert len(concatenated) == 121 + 2 * len(crossings)
    for batch in geometry.batches:
        _assert_non_wrapping(batch)


def test_batches_follow_the_seam_sides():
    points, crossings = _ring(67.017, -178.242, 450_000)
    head, far_start, far_end, tail = segment_ring(points, crossings).batches

    # Point 0 is due north of a western-hemisphere center: head and tail stay negative.
    assert head[0] == points[0]
    assert head[-1] == crossings[0].exit_point
    assert tail[0] == crossings[1].entry_point
    assert tail[-1] == points[-1]
    assert all(p.lon < 0 for p in head + tail)

    assert far_start[0] == crossings[0].entry_point
    assert far_end[-1] == crossings[1].exit_point
    assert all(p.lon > 0 for p in far_start + far_end)


def test_far_side_splits_at_its_apex():
    points, crossings = _ring(-18.1, 178.27, 200_000)
    _, far_start, far_end, _ = segment_ring(points, crossings).batches

    apex = far_end[0]
    assert not apex.synthetic
    genuine = [p for p in far_start + far_end if not p.synthetic]
    assert 180 - abs(apex.lon) == max(180 - abs(p.lon) for p in genuine)


def test_unsupported_crossing_count():
    points, crossings = _ring(67.017, -178.242, 450_000)
    with pytest.raises(UnsupportedCrossingCount):
        segment_ring(points, crossings[:1])
    with pytest.raises(UnsupportedCrossingCount):
        segment_ring(points, [*crossings, crossings[0]])


def test_wrapping_single_batch_is_rejected():
    points = [
        BoundaryPoint(seq=0.0, lat=10.0, lon=179.0),
        BoundaryPoint(seq=1.0, lat=10.5, lon=-179.0),
        BoundaryPoint(seq=2.0, lat=10.0, lon=179.0),
    ]
    with pytest.raises(WrappingBatch):
        segment_ring(points, [])
