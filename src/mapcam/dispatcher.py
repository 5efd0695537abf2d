"""Route host framework method calls to the controller of each map view."""

from __future__ import annotations

import logging
from typing import Any, Hashable

from .camera import CameraState
from .controller import MapCameraController, SupportsNativeMap
from .errors import CommandError, UnknownCommandError, UnknownViewError
from .requests import (
    QueryRequest,
    SetBoundsRequest,
    SetCenterCoordinateRequest,
    SetZoomLimitsRequest,
    UpdateCameraRequest,
    ZoomByRequest,
    ZoomInRequest,
    ZoomOutRequest,
    ZoomToRequest,
    parse_request,
)
from .settings import Settings, default_settings

LOGGER = logging.getLogger(__name__)

# Commands whose reply is the camera after the command ran.
CAMERA_COMMANDS: frozenset[str] = frozenset(
    {"setCenterCoordinate", "zoomIn", "zoomOut", "zoomTo", "zoomBy", "updateCamera", "setZoomLimits"}
)


class MapCameraDispatcher:
    """Keep one :class:`MapCameraController` per attached map view.

    Views are identified by whatever hashable id the host framework uses.  The
    camera state of a view lives exactly as long as its attachment.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or default_settings()
        self._controllers: dict[Hashable, MapCameraController] = {}

    # ------------------------------------------------------------------
    @property
    def settings(self) -> Settings:
        return self._settings

    # ------------------------------------------------------------------
    def attach(self, view_id: Hashable, view: SupportsNativeMap) -> MapCameraController:
        """Create fresh camera state for *view* and return its controller."""

        if view_id in self._controllers:
            LOGGER.warning("Map view %r attached twice, resetting its camera state", view_id)
        camera = self._settings.camera
        state = CameraState(min_zoom_level=camera.min_zoom, max_zoom_level=camera.max_zoom)
        controller = MapCameraController(view, state)
        self._controllers[view_id] = controller
        LOGGER.debug("Attached map view %r", view_id)
        return controller

    # ------------------------------------------------------------------
    def detach(self, view_id: Hashable) -> None:
        """Drop the camera state of *view_id*; unknown ids are ignored."""

        if self._controllers.pop(view_id, None) is not None:
            LOGGER.debug("Detached map view %r", view_id)

    # ------------------------------------------------------------------
    def controller(self, view_id: Hashable) -> MapCameraController:
        try:
            return self._controllers[view_id]
        except KeyError:
            raise UnknownViewError(f"No map view attached with id {view_id!r}") from None

    # ------------------------------------------------------------------
    def view_ids(self) -> list[Hashable]:
        return list(self._controllers)

    # ------------------------------------------------------------------
    def handle(self, view_id: Hashable, method: str, payload: object = None) -> Any:
        """Run *method* against the view and return a JSON-friendly reply."""

        try:
            controller = self.controller(view_id)
            request = parse_request(method, payload, animated=self._settings.camera.default_animated)
            LOGGER.debug("View %r handling %s", view_id, request)
            return self._execute(controller, request)
        except CommandError as exc:
            LOGGER.error("Cannot handle %s for view %r: %s", method, view_id, exc)
            raise

    # ------------------------------------------------------------------
    def _execute(self, controller: MapCameraController, request: object) -> Any:
        if isinstance(request, SetCenterCoordinateRequest):
            snapshot, _region = controller.set_center_coordinate(request)
            return snapshot.to_dict()
        if isinstance(request, SetBoundsRequest):
            rect = controller.set_bounds(request)
            return rect.to_dict() if rect is not None else None
        if isinstance(request, ZoomInRequest):
            return controller.zoom_in(request.animated).to_dict()
        if isinstance(request, ZoomOutRequest):
            return controller.zoom_out(request.animated).to_dict()
        if isinstance(request, ZoomToRequest):
            if request.zoom is None:
                return controller.reapply_zoom(request.animated).to_dict()
            return controller.zoom_to(request.zoom, request.animated).to_dict()
        if isinstance(request, ZoomByRequest):
            return controller.zoom_by(request.delta, request.animated).to_dict()
        if isinstance(request, UpdateCameraRequest):
            return controller.update_stored_camera_values(
                request.zoom, request.pitch, request.heading
            ).to_dict()
        if isinstance(request, SetZoomLimitsRequest):
            min_zoom = controller.min_zoom_level if request.min_zoom is None else request.min_zoom
            max_zoom = controller.max_zoom_level if request.max_zoom is None else request.max_zoom
            return controller.set_zoom_limits(min_zoom, max_zoom).to_dict()
        if isinstance(request, QueryRequest):
            return self._query(controller, request.name)
        raise UnknownCommandError(f"Unsupported request {request!r}")

    # ------------------------------------------------------------------
    def _query(self, controller: MapCameraController, name: str) -> Any:
        if name == "getZoomLevel":
            return controller.zoom_level
        if name == "getCalculatedZoomLevel":
            return controller.calculated_zoom_level
        if name == "getVisibleRegion":
            return controller.visible_region().to_dict()
        if name == "getCameraState":
            return controller.state.to_dict()
        raise UnknownCommandError(f"Unknown map query: {name}")


__all__ = ["CAMERA_COMMANDS", "MapCameraDispatcher"]
