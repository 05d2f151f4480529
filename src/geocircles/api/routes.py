"""
API routes.

Endpoints:
- GET  `/api/locations`: the configured location catalog.
- POST `/api/circles`: build circles for posted locations (or the catalog).
- GET  `/api/settings`: effective sampling/flat settings.
"""

from __future__ import annotations

import time

from fastapi import APIRouter, HTTPException

from geocircles.catalog.loader import load_locations
from geocircles.circles.export import build_collection
from geocircles.circles.pipeline import compute_circles
from geocircles.config.overrides import apply_settings_overrides
from geocircles.config.settings import get_settings
from geocircles.domain.models import CircleCollection, CircleRequest, Location

router = APIRouter()


@router.get("/api/locations")
def get_locations() -> list[Location]:
    settings = get_settings()
    try:
        return load_locations(settings.catalog.locations_path)
    except (OSError, ValueError) as e:
        raise HTTPException(status_code=500, detail=f"Location catalog unavailable: {e}") from e


@router.get("/api/settings")
def get_public_settings() -> dict:
    settings = get_settings()
    return {
        "app": settings.app.model_dump(mode="json"),
        "sampling": settings.sampling.model_dump(mode="json"),
        "flat": settings.flat.model_dump(mode="json"),
    }


@router.post("/api/circles")
def post_circles(request: CircleRequest) -> CircleCollection:
    """Build circles; per-location failures are returned in `errors`, not as HTTP errors."""
    started = time.perf_counter()
    try:
        settings = apply_settings_overrides(get_settings(), request.settings_overrides)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    locations = request.locations if request.locations is not None else get_locations()
    run = compute_circles(locations, settings=settings)
    return build_collection(
        run,
        meta={
            "location_count": len(locations),
            "point_count": settings.sampling.point_count,
            "crossing_interpolation": settings.sampling.crossing_interpolation,
            "api_ms": int((time.perf_counter() - started) * 1000),
        },
    )
