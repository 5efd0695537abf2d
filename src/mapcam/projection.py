"""Web-Mercator helpers for the fixed reference-zoom pixel space.

Pixel space places the whole world on a square ``2 ** 21 * 256`` pixels wide,
with ``x`` growing eastwards and ``y`` growing southwards.  The forward and
inverse functions are exact inverses of each other for longitudes in
``(-180, 180)`` and latitudes inside the Mercator band (roughly ``±85``
degrees); latitudes outside the band are clamped before projecting.
"""

from __future__ import annotations

import math

from .config import MERCATOR_LAT_BOUND, MERCATOR_OFFSET, MERCATOR_RADIUS
from .errors import InvalidScaleError
from .geometry import GeoPoint, PixelPoint


def longitude_to_pixel_x(longitude: float) -> float:
    """Map *longitude* linearly onto the world pixel width."""

    return MERCATOR_OFFSET + MERCATOR_RADIUS * math.radians(longitude)


def latitude_to_pixel_y(latitude: float) -> float:
    """Project *latitude* onto the world pixel height."""

    latitude = max(min(float(latitude), MERCATOR_LAT_BOUND), -MERCATOR_LAT_BOUND)
    sin_lat = math.sin(math.radians(latitude))
    return MERCATOR_OFFSET - MERCATOR_RADIUS * math.log((1 + sin_lat) / (1 - sin_lat)) / 2.0


def pixel_x_to_longitude(pixel_x: float) -> float:
    return math.degrees((pixel_x - MERCATOR_OFFSET) / MERCATOR_RADIUS)


def pixel_y_to_latitude(pixel_y: float) -> float:
    return math.degrees(
        math.pi / 2.0 - 2.0 * math.atan(math.exp((pixel_y - MERCATOR_OFFSET) / MERCATOR_RADIUS))
    )


def geo_to_pixel(point: GeoPoint) -> PixelPoint:
    """Project a :class:`GeoPoint` into pixel space."""

    return PixelPoint(longitude_to_pixel_x(point.longitude), latitude_to_pixel_y(point.latitude))


def pixel_to_geo(point: PixelPoint) -> GeoPoint:
    return GeoPoint(pixel_y_to_latitude(point.y), pixel_x_to_longitude(point.x))


def log_base(value: float, base: float) -> float:
    """Return ``log(value) / log(base)``.

    Raises :class:`InvalidScaleError` for a non-positive *value* (or an unusable
    *base*) instead of letting a domain error or ``nan`` escape.
    """

    if not value > 0:
        raise InvalidScaleError(f"Scale ratio must be positive, got {value!r}")
    if not base > 0 or base == 1:
        raise InvalidScaleError(f"Logarithm base must be positive and not 1, got {base!r}")
    return math.log(value) / math.log(base)


def round_half_away_from_zero(value: float) -> float:
    """Round to the nearest integer, resolving ties away from zero.

    Python's :func:`round` uses banker's rounding, which would turn ``2.5``
    into ``2`` and change which zoom levels snap to zero.
    """

    return math.copysign(math.floor(abs(value) + 0.5), value)


def round_to_two_decimals(value: float) -> float:
    """Round a zoom level for display."""

    return round_half_away_from_zero(value * 100.0) / 100.0


__all__ = [
    "geo_to_pixel",
    "latitude_to_pixel_y",
    "log_base",
    "longitude_to_pixel_x",
    "pixel_to_geo",
    "pixel_x_to_longitude",
    "pixel_y_to_latitude",
    "round_half_away_from_zero",
    "round_to_two_decimals",
]
