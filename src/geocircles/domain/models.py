"""
Domain models (Pydantic).

These types are the stable contract between layers:
- catalog entities (`Location`, `FlatLocation`)
- API/CLI inputs (`CircleRequest`)
- serialized circle output (`CircleCollection`)

Keeping them in one place gives early validation (bad coordinates or radii are
rejected at load time) and one JSON shape across CLI and API.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """A circle center on the sphere, with its radius in meters."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    radius_m: float = Field(..., gt=0)


class FlatLocation(BaseModel):
    """A circle center on a flat plane (arbitrary consistent units)."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    x: float
    y: float
    radius: float = Field(..., gt=0)


class CircleRequest(BaseModel):
    """API payload: explicit locations (or the catalog when omitted) plus tuning overrides."""

    locations: list[Location] | None = None
    settings_overrides: dict[str, Any] | None = None


class CircleFeature(BaseModel):
    """One successfully computed circle."""

    location_id: str
    kind: Literal["single", "multi"]
    crossing_count: int = Field(..., ge=0)
    batch_count: int = Field(..., ge=1)
    point_count: int = Field(..., ge=1)
    geometry: dict[str, Any]


class CircleFailureItem(BaseModel):
    """One location that could not be turned into a circle."""

    location_id: str
    code: str
    message: str


class CircleCollection(BaseModel):
    """All circles of a run, plus per-location failures."""

    generated_at: datetime
    features: list[CircleFeature]
    errors: list[CircleFailureItem] = Field(default_factory=list)
    meta: dict[str, Any] = Field(default_factory=dict)
