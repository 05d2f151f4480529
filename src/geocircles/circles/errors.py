"""
Circle computation errors.

All failures are local input-validation problems for a single location. The
pipeline catches `CircleError` per location and reports it next to the
successful results; anything else is a bug and propagates.
"""

from __future__ import annotations


class CircleError(ValueError):
    """Base class for per-location circle failures."""

    code = "CIRCLE_ERROR"


class InvalidRadius(CircleError):
    code = "INVALID_RADIUS"


class InvalidPointCount(CircleError):
    code = "INVALID_POINT_COUNT"


class InvalidCenter(CircleError):
    code = "INVALID_CENTER"


class DegenerateCrossing(CircleError):
    code = "DEGENERATE_CROSSING"


class UnsupportedCrossingCount(CircleError):
    code = "UNSUPPORTED_CROSSING_COUNT"


class WrappingBatch(CircleError):
    code = "WRAPPING_BATCH"
