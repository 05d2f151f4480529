# src/geocircles/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/geocircles/config/defaults.yaml`, then optionally overridden by:
- environment variables (e.g., `GEOCIRCLES_LOG_LEVEL`, `GEOCIRCLES_LOCATIONS_PATH`)
- an external YAML file via `GEOCIRCLES_CONFIG_PATH`

Design rule:
- Accuracy/scale knobs (point count, Earth radius, rescaling divisor) live in YAML and
  are passed explicitly into the circle functions, never read as globals there.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Literal
from geocircles.core.env import load_dotenv_if_present

import yaml
from pydantic import BaseModel, Field


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `geocircles.config`."""
    text = resources.files("geocircles.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "GeoCircles"
    log_level: str = "INFO"


class SamplingSettings(BaseModel):
    point_count: int = Field(120, ge=3)
    earth_radius_m: float = Field(6_371_009, gt=0)
    crossing_interpolation: Literal["reference", "linear"] = "reference"


class FlatSettings(BaseModel):
    point_count: int = Field(120, ge=3)
    rescaling_divisor: float = Field(10_000, gt=0)


class CatalogSettings(BaseModel):
    locations_path: str = "data/locations/locations.json"
    flat_locations_path: str = "data/locations/flat_locations.json"


class PipelineSettings(BaseModel):
    max_workers: int = Field(8, ge=1)


class QualitySettings(BaseModel):
    # Allowed |haversine(center, boundary) - radius| relative to the radius.
    radius_tolerance_ratio: float = Field(1e-6, gt=0)
    closure_tolerance_deg: float = Field(1e-9, gt=0)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    sampling: SamplingSettings = Field(default_factory=SamplingSettings)
    flat: FlatSettings = Field(default_factory=FlatSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)
    quality: QualitySettings = Field(default_factory=QualitySettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    Only the log level and the catalog path are read from the environment.
    """
    load_dotenv_if_present()
    data = dict(data)
    log_level = os.getenv("GEOCIRCLES_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    locations_path = os.getenv("GEOCIRCLES_LOCATIONS_PATH")
    if locations_path:
        data.setdefault("catalog", {})["locations_path"] = locations_path

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GEOCIRCLES_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
