"""Viewport computations between zoom levels and geographic spans."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .config import REFERENCE_ZOOM, SPAN_ZOOM_OFFSET
from .errors import InvalidScaleError
from .geometry import GeoPoint, GeoRect, GeoSpan, MapRect, ViewportSize
from .projection import (
    latitude_to_pixel_y,
    log_base,
    longitude_to_pixel_x,
    pixel_x_to_longitude,
    pixel_y_to_latitude,
    round_to_two_decimals,
)


def span_for_zoom(zoom_level: float) -> GeoSpan:
    """Approximate the degrees covered by one screen at *zoom_level*.

    The span ignores the view size and the latitude distortion and is always
    square.  The offset aligns it with :func:`span_for_zoom_with_viewport` at
    mid zoom levels.
    """

    corrected_zoom = zoom_level - SPAN_ZOOM_OFFSET
    clamped_zoom = max(0.0, min(corrected_zoom, float(REFERENCE_ZOOM)))
    delta = 360.0 / (2.0 ** clamped_zoom)
    return GeoSpan(latitude_delta=delta, longitude_delta=delta)


def _scaled_footprint(
    center: GeoPoint,
    zoom_level: float,
    viewport: ViewportSize,
) -> tuple[float, float, float, float]:
    """Return ``(top_left_x, top_left_y, width, height)`` in pixel space."""

    center_pixel_x = longitude_to_pixel_x(center.longitude)
    center_pixel_y = latitude_to_pixel_y(center.latitude)

    zoom_scale = 2.0 ** (REFERENCE_ZOOM - zoom_level)
    scaled_width = float(viewport.width) * zoom_scale
    scaled_height = float(viewport.height) * zoom_scale

    top_left_x = center_pixel_x - scaled_width / 2.0
    top_left_y = center_pixel_y - scaled_height / 2.0
    return top_left_x, top_left_y, scaled_width, scaled_height


def span_for_zoom_with_viewport(
    center: GeoPoint,
    zoom_level: int,
    viewport: ViewportSize,
) -> GeoSpan:
    """Compute the span a *viewport* shows around *center* at *zoom_level*.

    ``latitude_delta`` is reported as ``-(max_lat - min_lat)`` where
    ``min_lat`` belongs to the top edge; callers rely on that sign.
    """

    top_left_x, top_left_y, width, height = _scaled_footprint(center, int(zoom_level), viewport)

    min_lng = pixel_x_to_longitude(top_left_x)
    max_lng = pixel_x_to_longitude(top_left_x + width)
    min_lat = pixel_y_to_latitude(top_left_y)
    max_lat = pixel_y_to_latitude(top_left_y + height)

    return GeoSpan(latitude_delta=-1.0 * (max_lat - min_lat), longitude_delta=max_lng - min_lng)


def visible_region(center: GeoPoint, current_zoom: float, viewport: ViewportSize) -> GeoRect:
    """Return the rectangle visible in *viewport* at *current_zoom*.

    A view that has not been laid out yet reports the zero rectangle.
    """

    if viewport.is_empty:
        return GeoRect.zero()

    top_left_x, top_left_y, width, height = _scaled_footprint(center, current_zoom, viewport)

    min_lng = pixel_x_to_longitude(top_left_x)
    min_lat = pixel_y_to_latitude(top_left_y)
    max_lng = pixel_x_to_longitude(top_left_x + width)
    max_lat = pixel_y_to_latitude(top_left_y + height)

    return GeoRect(
        northeast=GeoPoint(min_lat, max_lng),
        southwest=GeoPoint(max_lat, min_lng),
    )


def calculated_zoom_level(center: GeoPoint, span: GeoSpan, viewport: ViewportSize) -> float:
    """Recover the zoom level from the geometry the native view renders.

    Raises :class:`InvalidScaleError` when the view has no width or the span
    has no horizontal extent, since no scale ratio exists in either case.
    """

    if viewport.width <= 0:
        raise InvalidScaleError(f"Viewport width must be positive, got {viewport.width!r}")

    center_pixel_x = longitude_to_pixel_x(center.longitude)
    left_longitude = center.longitude - span.longitude_delta / 2.0
    left_pixel_x = longitude_to_pixel_x(left_longitude)
    pixel_space_width = abs(center_pixel_x - left_pixel_x) * 2.0
    if pixel_space_width <= 0:
        raise InvalidScaleError("Span has no horizontal extent")

    zoom_scale = pixel_space_width / float(viewport.width)
    zoom_exponent = log_base(zoom_scale, 2)
    return round_to_two_decimals(REFERENCE_ZOOM - zoom_exponent)


def bounding_map_rect(points: Sequence[GeoPoint]) -> MapRect | None:
    """Return the smallest pixel-space rectangle containing *points*."""

    if not points:
        return None

    xs = np.fromiter((longitude_to_pixel_x(p.longitude) for p in points), dtype=float, count=len(points))
    ys = np.fromiter((latitude_to_pixel_y(p.latitude) for p in points), dtype=float, count=len(points))

    min_x = float(xs.min())
    min_y = float(ys.min())
    return MapRect(
        x=min_x,
        y=min_y,
        width=float(xs.max()) - min_x,
        height=float(ys.max()) - min_y,
    )


__all__ = [
    "bounding_map_rect",
    "calculated_zoom_level",
    "span_for_zoom",
    "span_for_zoom_with_viewport",
    "visible_region",
]
