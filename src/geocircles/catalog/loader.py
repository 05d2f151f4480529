"""
Location catalog loader.

The catalog is a local JSON file (default: `data/locations/locations.json`) that
lists circle centers with their radii. We validate it into typed Pydantic models
so the circle pipeline can assume coordinates are in range and radii positive.
"""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Sequence

from pydantic import TypeAdapter

from geocircles.core.env import resolve_project_path
from geocircles.domain.models import FlatLocation, Location


_LOCATIONS_ADAPTER = TypeAdapter(list[Location])
_FLAT_LOCATIONS_ADAPTER = TypeAdapter(list[FlatLocation])


def duplicate_ids(items: Sequence[Location | FlatLocation]) -> list[str]:
    counts = Counter(item.id for item in items)
    return sorted(i for i, n in counts.items() if n > 1)


def _ensure_unique(items: Sequence[Location | FlatLocation], *, path: Path) -> None:
    dup = duplicate_ids(items)
    if dup:
        raise ValueError(f"Duplicate location ids in {path}: {', '.join(dup)}")


def load_locations(path: str | Path) -> list[Location]:
    """Load and validate a spherical location catalog JSON file."""
    resolved = resolve_project_path(path)
    payload = json.loads(resolved.read_text(encoding="utf-8"))
    locations = _LOCATIONS_ADAPTER.validate_python(payload)
    _ensure_unique(locations, path=resolved)
    return locations


def load_flat_locations(path: str | Path) -> list[FlatLocation]:
    """Load and validate a flat-plane location catalog JSON file."""
    resolved = resolve_project_path(path)
    payload = json.loads(resolved.read_text(encoding="utf-8"))
    locations = _FLAT_LOCATIONS_ADAPTER.validate_python(payload)
    _ensure_unique(locations, path=resolved)
    return locations
