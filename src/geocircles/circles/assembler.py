"""
Polygon assembly (shapely).

Turns segmented rings into shapely geometries. Coordinates are handed to
shapely in (lon, lat) order.

Two assembly strategies:
- `ring_line` + `make_polygon`: the nested line join
  `make_line(batch_0, make_line(batch_1, make_line(batch_2, batch_3)))` followed by
  a polygon over the joined line.
- `assemble`: a `Polygon` for single-batch rings, and for four-batch rings a
  `MultiPolygon` with one part per side of the seam, each closed along +-180.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence, Union

from shapely.geometry import LineString, MultiPolygon, Polygon, mapping

from geocircles.circles.ring import BoundaryPoint, MultiBatch, RingGeometry, SingleBatch

LinePart = Union[LineString, Sequence[BoundaryPoint]]


def to_coords(points: Iterable[BoundaryPoint]) -> list[tuple[float, float]]:
    return [(p.lon, p.lat) for p in points]


def make_line(*parts: LinePart) -> LineString:
    """Join point sequences and/or existing lines into one line, in argument order."""
    coords: list[tuple[float, float]] = []
    for part in parts:
        if isinstance(part, LineString):
            coords.extend((x, y) for x, y in part.coords)
        else:
            coords.extend(to_coords(part))
    return LineString(coords)


def make_polygon(line: LineString) -> Polygon:
    return Polygon(line.coords)


def ring_line(geometry: RingGeometry) -> LineString:
    """Join a ring's batches into a single line by nesting `make_line` calls."""
    *leading, last = geometry.batches
    line = make_line(last)
    for batch in reversed(leading):
        line = make_line(batch, line)
    return line


def assemble(geometry: RingGeometry) -> Polygon | MultiPolygon:
    """Build the seam-aware polygon for a ring."""
    if isinstance(geometry, SingleBatch):
        return make_polygon(make_line(geometry.points))
    if not isinstance(geometry, MultiBatch):
        raise TypeError(f"Unsupported ring geometry: {type(geometry).__name__}")

    head, far_start, far_end, tail = geometry.batches
    # tail ends on the closing point, which is head[0] again.
    near = make_polygon(make_line(tail, head[1:]))
    far = make_polygon(make_line(far_start, far_end))
    return MultiPolygon([near, far])


def to_feature(geometry: Polygon | MultiPolygon, *, properties: dict[str, Any] | None = None) -> dict[str, Any]:
    """Render a shapely geometry as a GeoJSON Feature dict."""
    return {
        "type": "Feature",
        "geometry": mapping(geometry),
        "properties": dict(properties or {}),
    }


def feature_collection(features: Iterable[dict[str, Any]]) -> dict[str, Any]:
    return {"type": "FeatureCollection", "features": list(features)}
