"""
GeoCircles CLI entrypoint.

This CLI is intended for quick local runs and debugging without the API.
It delegates all circle logic to `geocircles.circles.pipeline`.
"""

from __future__ import annotations

import argparse
import json
from typing import Any

from geocircles.catalog.loader import load_flat_locations, load_locations
from geocircles.circles.export import build_collection, one_line_summary, to_geojson
from geocircles.circles.pipeline import CircleRun, compute_circles, compute_flat_circles
from geocircles.config.settings import SamplingSettings, Settings, get_settings
from geocircles.core.logging import configure_logging
from geocircles.domain.models import Location
from geocircles.quality.report import build_quality_report


def _settings_from_args(args: argparse.Namespace) -> Settings:
    """Apply CLI accuracy flags on top of the loaded settings."""
    settings = get_settings()
    updates: dict[str, Any] = {}
    if getattr(args, "point_count", None) is not None:
        updates["point_count"] = int(args.point_count)
    if getattr(args, "interpolation", None):
        updates["crossing_interpolation"] = args.interpolation
    if getattr(args, "earth_radius", None) is not None:
        updates["earth_radius_m"] = float(args.earth_radius)
    if not updates:
        return settings
    sampling = SamplingSettings.model_validate({**settings.sampling.model_dump(), **updates})
    return settings.model_copy(update={"sampling": sampling})


def _print_run(run: CircleRun, args: argparse.Namespace) -> int:
    if args.geojson:
        print(json.dumps(to_geojson(run), indent=2))
    elif args.json:
        print(json.dumps(build_collection(run).model_dump(mode="json"), indent=2))
    else:
        for result in run.results:
            print(one_line_summary(result))
        for err in run.errors:
            print(f"{err.location_id}: FAILED {err.code}: {err.message}")
    return 0 if run.ok else 1


def _cmd_circles(args: argparse.Namespace) -> int:
    """Handle the `circles` subcommand."""
    settings = _settings_from_args(args)
    locations = load_locations(args.location_file or settings.catalog.locations_path)
    run = compute_circles(locations, settings=settings, max_workers=args.max_workers)
    return _print_run(run, args)


def _cmd_circle(args: argparse.Namespace) -> int:
    settings = _settings_from_args(args)
    location = Location(id=args.id, latitude=args.lat, longitude=args.lon, radius_m=args.radius)
    run = compute_circles([location], settings=settings)
    return _print_run(run, args)


def _cmd_flat(args: argparse.Namespace) -> int:
    settings = get_settings()
    locations = load_flat_locations(args.location_file or settings.catalog.flat_locations_path)
    run = compute_flat_circles(locations, settings=settings)
    if args.geojson:
        print(json.dumps(to_geojson(run), indent=2))
        return 0 if run.ok else 1
    for result in run.results:
        print(f"{result.location.id}: points={len(result.points)}")
    for err in run.errors:
        print(f"{err.location_id}: FAILED {err.code}: {err.message}")
    return 0 if run.ok else 1


def _cmd_quality_report(args: argparse.Namespace) -> int:
    settings = _settings_from_args(args)
    report = build_quality_report(settings)
    print(json.dumps(report, indent=2))
    return 0


def _add_sampling_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--point-count", type=int, default=None, help="Boundary points per circle (>= 3).")
    p.add_argument("--earth-radius", type=float, default=None, help="Sphere radius in meters.")
    p.add_argument(
        "--interpolation",
        choices=["reference", "linear"],
        default=None,
        help="Seam-latitude formula for antimeridian crossings.",
    )


def _add_output_args(p: argparse.ArgumentParser) -> None:
    out = p.add_mutually_exclusive_group()
    out.add_argument("--json", action="store_true", help="Output the machine-readable circle collection")
    out.add_argument("--geojson", action="store_true", help="Output a GeoJSON FeatureCollection")


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the GeoCircles CLI."""
    parser = argparse.ArgumentParser(prog="geocircles")
    sub = parser.add_subparsers(dest="command", required=True)

    many = sub.add_parser("circles", help="Build circles for every location in a catalog file.")
    many.add_argument("--location-file", type=str, default=None, help="Defaults to catalog.locations_path")
    many.add_argument("--max-workers", type=int, default=None)
    _add_sampling_args(many)
    _add_output_args(many)
    many.set_defaults(func=_cmd_circles)

    one = sub.add_parser("circle", help="Build a single circle from a center and radius.")
    one.add_argument("--lat", required=True, type=float)
    one.add_argument("--lon", required=True, type=float)
    one.add_argument("--radius", required=True, type=float, help="Radius in meters")
    one.add_argument("--id", type=str, default="circle")
    _add_sampling_args(one)
    _add_output_args(one)
    one.set_defaults(func=_cmd_circle)

    flat = sub.add_parser("flat", help="Build flat-plane circles from a flat catalog file.")
    flat.add_argument("--location-file", type=str, default=None, help="Defaults to catalog.flat_locations_path")
    flat.add_argument("--geojson", action="store_true", help="Output a GeoJSON FeatureCollection")
    flat.set_defaults(func=_cmd_flat)

    q = sub.add_parser("quality-report", help="Offline sanity report for the catalog's circles.")
    _add_sampling_args(q)
    q.set_defaults(func=_cmd_quality_report)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m geocircles.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    return int(func(args))


if __name__ == "__main__":
    raise SystemExit(main())
