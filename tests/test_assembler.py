from shapely.geometry import LineString, MultiPolygon, Point, Polygon

from geocircles.circles.assembler import assemble, make_line, make_polygon, ring_line, to_feature
from geocircles.circles.crossings import detect_crossings
from geocircles.circles.sampler import sample_boundary
from geocircles.circles.segmenter import segment_ring

EARTH_RADIUS_M = 6_371_009


def _geometry(lat, lon, radius_m, interpolation="linear"):
    points = sample_boundary(lat, lon, radius_m, earth_radius_m=EARTH_RADIUS_M, point_count=120)
    crossings = detect_crossings(points, interpolation=interpolation)
    return segment_ring(points, crossings)


def test_single_batch_becomes_a_polygon_around_the_center():
    geometry = _geometry(51.5072, -0.1276, 900_000)
    polygon = assemble(geometry)

    assert isinstance(polygon, Polygon)
    assert polygon.is_valid
    assert len(polygon.exterior.coords) == 121
    assert polygon.contains(Point(-0.1276, 51.5072))
    assert polygon.equals(make_polygon(ring_line(geometry)))


def test_seam_ring_becomes_two_part_multipolygon():
    geometry = _geometry(67.017, -178.242, 450_000)
    shape = assemble(geometry)

    assert isinstance(shape, MultiPolygon)
    near, far = shape.geoms
    assert near.is_valid and far.is_valid
    assert near.bounds[0] == -180.0 and near.bounds[2] < 0
    assert far.bounds[0] > 0 and far.bounds[2] == 180.0
    assert near.contains(Point(-178.242, 67.017))


def test_ring_line_joins_batches_in_order():
    geometry = _geometry(-18.1, 178.27, 200_000)
    line = ring_line(geometry)

    assert isinstance(line, LineString)
    assert len(line.coords) == 121 + 4
    assert list(line.coords) == [(p.lon, p.lat) for p in geometry.points]


def test_make_line_accepts_points_and_lines():
    geometry = _geometry(51.5072, -0.1276, 900_000)
    pts = geometry.points
    nested = make_line(pts[:10], make_line(pts[10:]))
    assert list(nested.coords) == list(make_line(pts).coords)


def test_to_feature_renders_geojson():
    feature = to_feature(assemble(_geometry(67.017, -178.242, 450_000)), properties={"id": "chukotka"})
    assert feature["type"] == "Feature"
    assert feature["geometry"]["type"] == "MultiPolygon"
    assert feature["properties"] == {"id": "chukotka"}
