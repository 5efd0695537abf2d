"""Zoom level and region conversions for driving native map views.

The Qt front-end lives in :mod:`mapcam.qt_channel` and is not imported here so
that the projection helpers stay usable without PySide6.
"""

from .camera import CameraSnapshot, CameraState
from .controller import MapCameraController, SupportsNativeMap
from .dispatcher import MapCameraDispatcher
from .geometry import EdgePadding, GeoPoint, GeoRect, GeoSpan, MapRect, PixelPoint, Region, ViewportSize

__all__ = [
    "CameraSnapshot",
    "CameraState",
    "EdgePadding",
    "GeoPoint",
    "GeoRect",
    "GeoSpan",
    "MapCameraController",
    "MapCameraDispatcher",
    "MapRect",
    "PixelPoint",
    "Region",
    "SupportsNativeMap",
    "ViewportSize",
]
