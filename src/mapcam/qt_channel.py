"""Qt front-end that exposes the dispatcher through signals and slots."""

from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QObject, Signal, Slot

from .dispatcher import CAMERA_COMMANDS, MapCameraDispatcher
from .errors import MapCameraError
from .requests import normalize_method

LOGGER = logging.getLogger(__name__)


class MapCameraChannel(QObject):
    """Receive method calls from a Qt host and broadcast camera changes."""

    cameraChanged = Signal(object, object)
    """Signal emitted with ``(view_id, camera_dict)`` after the camera moved."""

    errorOccurred = Signal(object, str, str)
    """Signal emitted with ``(view_id, method, message)`` when a call fails."""

    def __init__(self, dispatcher: MapCameraDispatcher | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._dispatcher = dispatcher or MapCameraDispatcher()

    # ------------------------------------------------------------------
    @property
    def dispatcher(self) -> MapCameraDispatcher:
        return self._dispatcher

    # ------------------------------------------------------------------
    @Slot(object, str, "QVariant", result="QVariant")
    def handleMethodCall(self, view_id: Any, method: str, payload: Any = None) -> Any:
        """Run *method* for *view_id* and return the reply, or ``None`` on error."""

        try:
            reply = self._dispatcher.handle(view_id, method, payload)
        except MapCameraError as exc:
            self.errorOccurred.emit(view_id, method, str(exc))
            return None

        if normalize_method(method) in CAMERA_COMMANDS:
            self.cameraChanged.emit(view_id, reply)
        return reply

    # ------------------------------------------------------------------
    @Slot(object, float, float, float)
    def notifyCameraMoved(self, view_id: Any, zoom: float, pitch: float, heading: float) -> None:
        """Record a camera change the user made directly on the native view."""

        try:
            controller = self._dispatcher.controller(view_id)
        except MapCameraError as exc:
            LOGGER.warning("Ignoring camera move: %s", exc)
            self.errorOccurred.emit(view_id, "notifyCameraMoved", str(exc))
            return
        snapshot = controller.update_stored_camera_values(zoom, pitch, heading)
        self.cameraChanged.emit(view_id, snapshot.to_dict())


__all__ = ["MapCameraChannel"]
