"""
Offline circle quality report.

Goal: a deterministic view of "are the catalog and the circles we build from it sane?"
Used by:
- CLI debugging (`geocircles quality-report`)
- reviewing the seam-latitude formula: out-of-range crossing latitudes show up here
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from geocircles.catalog.loader import duplicate_ids, load_locations
from geocircles.circles.pipeline import CircleResult, compute_circles
from geocircles.circles.ring import crosses_seam
from geocircles.config.settings import Settings
from geocircles.core.geo import GeoPoint, haversine_m
from geocircles.domain.models import Location


@dataclass(frozen=True)
class Issue:
    severity: str  # "info" | "warning" | "error"
    code: str
    message: str
    count: int = 1
    sample: list[str] | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "severity": self.severity,
            "code": self.code,
            "message": self.message,
            "count": int(self.count),
            "sample": list(self.sample or []),
        }


def circle_issues(result: CircleResult, settings: Settings) -> list[Issue]:
    """Check one computed circle for closure, wrapping, radius drift and crossing latitudes."""
    issues: list[Issue] = []
    loc = result.location
    first, last = result.points[0], result.points[-1]
    tol = settings.quality.closure_tolerance_deg
    if abs(first.lat - last.lat) > tol or abs(first.lon - last.lon) > tol:
        issues.append(Issue(severity="error", code="RING_NOT_CLOSED", message=f"{loc.id}: first and last points differ"))

    wrapping = [
        str(batch_id)
        for batch_id, batch in enumerate(result.geometry.batches)
        if any(crosses_seam(a, b) for a, b in zip(batch, batch[1:]))
    ]
    if wrapping:
        issues.append(
            Issue(
                severity="error",
                code="BATCH_WRAPS",
                message=f"{loc.id}: batches cross the antimeridian internally",
                count=len(wrapping),
                sample=wrapping,
            )
        )

    center = GeoPoint(lat=loc.latitude, lon=loc.longitude)
    earth_radius_m = settings.sampling.earth_radius_m
    max_drift = max(
        abs(haversine_m(center, GeoPoint(lat=p.lat, lon=p.lon), earth_radius_m=earth_radius_m) - loc.radius_m)
        for p in result.points
    )
    if max_drift > loc.radius_m * settings.quality.radius_tolerance_ratio:
        issues.append(
            Issue(
                severity="warning",
                code="RADIUS_DRIFT",
                message=f"{loc.id}: boundary drifts up to {max_drift:.3f} m from the radius",
            )
        )

    bad_lats = [f"{c.anchor}:{c.lat:.3f}" for c in result.crossings if not -90.0 <= c.lat <= 90.0]
    if bad_lats:
        issues.append(
            Issue(
                severity="warning",
                code="CROSSING_LATITUDE_OUT_OF_RANGE",
                message=f"{loc.id}: seam latitude outside [-90, 90] "
                f"(interpolation={settings.sampling.crossing_interpolation})",
                count=len(bad_lats),
                sample=bad_lats[:5],
            )
        )
    return issues


def location_issues(locations: Sequence[Location], settings: Settings) -> list[Issue]:
    issues: list[Issue] = []
    dup = duplicate_ids(locations)
    if dup:
        issues.append(
            Issue(severity="error", code="DUPLICATE_ID", message="Duplicate location ids", count=len(dup), sample=dup[:10])
        )

    run = compute_circles(locations, settings=settings)
    if run.errors:
        issues.append(
            Issue(
                severity="error",
                code="LOCATION_FAILED",
                message="Some locations could not be turned into circles",
                count=len(run.errors),
                sample=[f"{e.location_id}: {e.code}" for e in run.errors[:10]],
            )
        )
    for result in run.results:
        issues.extend(circle_issues(result, settings))
    return issues


def build_quality_report(settings: Settings, *, locations: Sequence[Location] | None = None) -> dict[str, Any]:
    """Build the report for explicit locations, or for the configured catalog."""
    if locations is None:
        try:
            locations = load_locations(settings.catalog.locations_path)
        except Exception as e:
            issue = Issue(severity="error", code="CATALOG_LOAD_FAILED", message=str(e))
            return {"location_count": 0, "issues": [issue.as_dict()]}

    issues = location_issues(locations, settings)
    return {
        "location_count": len(locations),
        "sampling": settings.sampling.model_dump(mode="json"),
        "issues": [i.as_dict() for i in issues],
    }
