"""Per-view camera state that the native map control does not track itself."""

from __future__ import annotations

from dataclasses import dataclass

from .config import DEFAULT_MAX_ZOOM, DEFAULT_MIN_ZOOM


@dataclass(frozen=True)
class CameraSnapshot:
    """Immutable copy of a :class:`CameraState` handed back to callers."""

    zoom_level: float
    pitch: float
    heading: float
    min_zoom_level: float
    max_zoom_level: float

    def to_dict(self) -> dict[str, float]:
        return {
            "zoom": self.zoom_level,
            "pitch": self.pitch,
            "heading": self.heading,
            "minZoom": self.min_zoom_level,
            "maxZoom": self.max_zoom_level,
        }


@dataclass
class CameraState:
    """Mutable camera values owned by exactly one map view.

    ``pitch`` and ``heading`` only become non-zero through
    :meth:`~mapcam.controller.MapCameraController.update_stored_camera_values`;
    every command flattens them again.
    """

    zoom_level: float = 0.0
    pitch: float = 0.0
    heading: float = 0.0
    min_zoom_level: float = DEFAULT_MIN_ZOOM
    max_zoom_level: float = DEFAULT_MAX_ZOOM

    def clamp(self, zoom_level: float) -> float:
        """Return *zoom_level* limited to ``[min_zoom_level, max_zoom_level]``."""

        if zoom_level < self.min_zoom_level:
            return self.min_zoom_level
        if zoom_level > self.max_zoom_level:
            return self.max_zoom_level
        return zoom_level

    def flatten(self) -> None:
        self.pitch = 0.0
        self.heading = 0.0

    def snapshot(self) -> CameraSnapshot:
        return CameraSnapshot(
            zoom_level=self.zoom_level,
            pitch=self.pitch,
            heading=self.heading,
            min_zoom_level=self.min_zoom_level,
            max_zoom_level=self.max_zoom_level,
        )


__all__ = ["CameraSnapshot", "CameraState"]
