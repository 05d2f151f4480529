"""
Output shaping for circle runs.

Used by the CLI and the API to turn pipeline results into the `CircleCollection`
model, GeoJSON feature collections, and compact one-line summaries.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from geocircles.circles.assembler import assemble, feature_collection, to_feature
from geocircles.circles.flat import flat_polygon
from geocircles.circles.pipeline import CircleResult, CircleRun, FlatCircleResult
from geocircles.domain.models import CircleCollection, CircleFailureItem, CircleFeature


def circle_feature(result: CircleResult) -> CircleFeature:
    polygon = assemble(result.geometry)
    return CircleFeature(
        location_id=result.location.id,
        kind=result.geometry.kind,
        crossing_count=len(result.crossings),
        batch_count=len(result.geometry.batches),
        point_count=len(result.geometry.points),
        geometry=to_feature(polygon)["geometry"],
    )


def build_collection(run: CircleRun, *, meta: dict[str, Any] | None = None) -> CircleCollection:
    return CircleCollection(
        generated_at=datetime.now(timezone.utc),
        features=[circle_feature(r) for r in run.results],
        errors=[CircleFailureItem(location_id=e.location_id, code=e.code, message=e.message) for e in run.errors],
        meta=dict(meta or {}),
    )


def to_geojson(run: CircleRun) -> dict[str, Any]:
    """GeoJSON FeatureCollection for spherical or flat runs (failures are left out)."""
    features = []
    for r in run.results:
        if isinstance(r, FlatCircleResult):
            features.append(to_feature(flat_polygon(r.points), properties={"id": r.location.id}))
            continue
        features.append(
            to_feature(
                assemble(r.geometry),
                properties={"id": r.location.id, "crossings": len(r.crossings), "batches": len(r.geometry.batches)},
            )
        )
    return feature_collection(features)


def one_line_summary(result: CircleResult) -> str:
    loc = result.location
    return (
        f"{loc.id}: center=({loc.latitude:.4f}, {loc.longitude:.4f}) radius={loc.radius_m:.0f}m "
        f"points={len(result.points)} crossings={len(result.crossings)} batches={len(result.geometry.batches)}"
    )
