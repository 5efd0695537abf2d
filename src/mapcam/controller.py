"""Camera controller that drives one native map view."""

from __future__ import annotations

import logging
import math
from typing import Callable, Protocol

from .camera import CameraSnapshot, CameraState
from .config import DEFAULT_ANIMATED, ZOOM_IN_SNAP_FLOOR, ZOOM_OUT_SNAP_CEILING
from .errors import InvalidScaleError, InvalidZoomRangeError
from .geometry import EdgePadding, GeoPoint, GeoRect, GeoSpan, MapRect, Region, ViewportSize
from .projection import round_half_away_from_zero
from .requests import SetBoundsRequest, SetCenterCoordinateRequest
from .viewport import bounding_map_rect, calculated_zoom_level, span_for_zoom, visible_region

LOGGER = logging.getLogger(__name__)


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidZoomRangeError(f"{name} must be a finite number, got {value!r}")


class SupportsNativeMap(Protocol):
    """Minimal interface the controller expects from the native map control."""

    def center_coordinate(self) -> GeoPoint:  # pragma: no cover - interface definition only
        ...

    def region_span(self) -> GeoSpan:  # pragma: no cover - interface definition only
        ...

    def viewport_size(self) -> ViewportSize:  # pragma: no cover - interface definition only
        ...

    def set_region(self, region: Region, animated: bool) -> None:  # pragma: no cover - interface definition only
        ...

    def set_visible_map_rect(
        self, rect: MapRect, padding: EdgePadding, animated: bool
    ) -> None:  # pragma: no cover - interface definition only
        ...

    def set_camera_orientation(self, pitch: float, heading: float) -> None:  # pragma: no cover - interface definition only
        ...


class MapCameraController:
    """Translate zoom-level commands into regions for a native map view.

    The controller owns the :class:`CameraState` of exactly one view.  All
    methods are synchronous and expect to be called from the thread that owns
    the view; concurrent calls from several threads are not supported.
    """

    def __init__(self, view: SupportsNativeMap, state: CameraState | None = None) -> None:
        self._view = view
        self._state = state or CameraState()
        self._camera_listeners: list[Callable[[CameraSnapshot], None]] = []

    # ------------------------------------------------------------------
    @property
    def state(self) -> CameraSnapshot:
        return self._state.snapshot()

    # ------------------------------------------------------------------
    @property
    def zoom_level(self) -> float:
        """Last zoom level commanded or derived, without touching the view."""

        return self._state.zoom_level

    # ------------------------------------------------------------------
    @property
    def calculated_zoom_level(self) -> float:
        """Zoom level recomputed from the geometry the view currently renders.

        The result is also written back as the stored zoom level.  A view that
        has not been laid out yet keeps reporting the stored value.
        """

        try:
            zoom_level = calculated_zoom_level(
                self._view.center_coordinate(),
                self._view.region_span(),
                self._view.viewport_size(),
            )
        except InvalidScaleError as exc:
            LOGGER.debug("Keeping stored zoom %s: %s", self._state.zoom_level, exc)
            return self._state.zoom_level
        self._state.zoom_level = zoom_level
        return zoom_level

    # ------------------------------------------------------------------
    @property
    def min_zoom_level(self) -> float:
        return self._state.min_zoom_level

    # ------------------------------------------------------------------
    @property
    def max_zoom_level(self) -> float:
        return self._state.max_zoom_level

    # ------------------------------------------------------------------
    def set_zoom_limits(self, min_zoom: float, max_zoom: float) -> CameraSnapshot:
        """Replace the zoom range without moving the camera."""

        _require_finite("min_zoom", min_zoom)
        _require_finite("max_zoom", max_zoom)
        if min_zoom > max_zoom:
            raise InvalidZoomRangeError(f"Minimum zoom {min_zoom} exceeds maximum zoom {max_zoom}")
        self._state.min_zoom_level = min_zoom
        self._state.max_zoom_level = max_zoom
        LOGGER.debug("Zoom limits set to [%s, %s]", min_zoom, max_zoom)
        return self._notify_camera_changed()

    # ------------------------------------------------------------------
    def add_camera_listener(self, callback: Callable[[CameraSnapshot], None]) -> None:
        """Register *callback* to receive the camera after each mutation."""

        if callback not in self._camera_listeners:
            self._camera_listeners.append(callback)

    # ------------------------------------------------------------------
    def remove_camera_listener(self, callback: Callable[[CameraSnapshot], None]) -> None:
        try:
            self._camera_listeners.remove(callback)
        except ValueError:
            pass

    # ------------------------------------------------------------------
    def set_center_coordinate(
        self, request: SetCenterCoordinateRequest
    ) -> tuple[CameraSnapshot, Region]:
        """Move to the requested center, keeping the stored zoom when absent."""

        center = request.target or self._view.center_coordinate()
        if request.zoom is not None:
            self._state.zoom_level = request.zoom

        self._flatten()
        region = Region(center=center, span=span_for_zoom(self._state.zoom_level))
        self._view.set_region(region, request.animated)
        LOGGER.debug("Centered on %s at zoom %s", center, self._state.zoom_level)
        return self._notify_camera_changed(), region

    # ------------------------------------------------------------------
    def set_center_coordinate_region(
        self, center: GeoPoint, zoom_level: float, animated: bool = DEFAULT_ANIMATED
    ) -> Region:
        """Store *zoom_level* as-is and show the matching region around *center*."""

        self._state.zoom_level = zoom_level
        self._flatten()
        region = Region(center=center, span=span_for_zoom(zoom_level))
        self._view.set_region(region, animated)
        return region

    # ------------------------------------------------------------------
    def set_bounds(self, request: SetBoundsRequest) -> MapRect | None:
        """Fit every target point inside the view; empty targets are ignored."""

        rect = bounding_map_rect(request.target)
        if rect is None:
            LOGGER.debug("Ignoring setBounds without target points")
            return None

        self._view.set_visible_map_rect(rect, EdgePadding.uniform(request.padding), request.animated)
        LOGGER.debug("Showing %s with padding %s", rect, request.padding)
        return rect

    # ------------------------------------------------------------------
    def zoom_in(self, animated: bool = DEFAULT_ANIMATED) -> CameraSnapshot:
        """Zoom in one level; levels below the snap floor jump to it first."""

        state = self._state
        if not state.zoom_level - 1 <= state.max_zoom_level:
            LOGGER.warning(
                "Zoom in ignored: zoom %s is beyond the maximum %s",
                state.zoom_level,
                state.max_zoom_level,
            )
            return state.snapshot()

        if state.zoom_level < ZOOM_IN_SNAP_FLOOR:
            state.zoom_level = ZOOM_IN_SNAP_FLOOR
        return self._apply_zoom(state.zoom_level + 1, animated)

    # ------------------------------------------------------------------
    def zoom_out(self, animated: bool = DEFAULT_ANIMATED) -> CameraSnapshot:
        """Zoom out one level; results that round to the snap ceiling drop to 0."""

        state = self._state
        if not state.zoom_level - 1 >= state.min_zoom_level:
            LOGGER.warning(
                "Zoom out ignored: zoom %s is already at the minimum %s",
                state.zoom_level,
                state.min_zoom_level,
            )
            return state.snapshot()

        zoom_level = state.zoom_level - 1
        if round_half_away_from_zero(zoom_level) <= ZOOM_OUT_SNAP_CEILING:
            zoom_level = 0.0
        return self._apply_zoom(zoom_level, animated)

    # ------------------------------------------------------------------
    def zoom_to(self, zoom_level: float, animated: bool = DEFAULT_ANIMATED) -> CameraSnapshot:
        """Jump to *zoom_level* limited to the configured range."""

        _require_finite("zoom_level", zoom_level)
        return self._apply_zoom(self._state.clamp(zoom_level), animated)

    # ------------------------------------------------------------------
    def zoom_by(self, delta: float, animated: bool = DEFAULT_ANIMATED) -> CameraSnapshot:
        """Change the zoom by *delta* limited to the configured range."""

        _require_finite("delta", delta)
        return self._apply_zoom(self._state.clamp(self._state.zoom_level + delta), animated)

    # ------------------------------------------------------------------
    def reapply_zoom(self, animated: bool = DEFAULT_ANIMATED) -> CameraSnapshot:
        """Show the stored zoom again around the current center, without clamping."""

        return self._apply_zoom(self._state.zoom_level, animated)

    # ------------------------------------------------------------------
    def update_stored_camera_values(self, zoom_level: float, pitch: float, heading: float) -> CameraSnapshot:
        """Resynchronise the stored camera after the user moved the view.

        No clamping is applied; the values describe what the view already shows.
        """

        self._state.zoom_level = zoom_level
        self._state.pitch = pitch
        self._state.heading = heading
        return self._notify_camera_changed()

    # ------------------------------------------------------------------
    def visible_region(self) -> GeoRect:
        """Return the rectangle visible at the stored zoom level."""

        return visible_region(
            self._view.center_coordinate(),
            self._state.zoom_level,
            self._view.viewport_size(),
        )

    # ------------------------------------------------------------------
    def _apply_zoom(self, zoom_level: float, animated: bool) -> CameraSnapshot:
        """Show *zoom_level* around the view's current center."""

        self.set_center_coordinate_region(self._view.center_coordinate(), zoom_level, animated)
        LOGGER.debug("Zoom level is now %s", zoom_level)
        return self._notify_camera_changed()

    # ------------------------------------------------------------------
    def _flatten(self) -> None:
        self._state.flatten()
        self._view.set_camera_orientation(0.0, 0.0)

    # ------------------------------------------------------------------
    def _notify_camera_changed(self) -> CameraSnapshot:
        """Send the current camera to listeners and return it."""

        snapshot = self._state.snapshot()
        for callback in list(self._camera_listeners):
            try:
                callback(snapshot)
            except Exception:
                LOGGER.warning("Camera listener %r failed", callback, exc_info=True)
                continue
        return snapshot


__all__ = ["MapCameraController", "SupportsNativeMap"]
