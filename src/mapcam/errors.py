"""Custom exception hierarchy for mapcam."""

from __future__ import annotations


class MapCameraError(Exception):
    """Base class for all custom errors raised by mapcam."""


# --- Projection errors ---

class ProjectionError(MapCameraError):
    """Base class for failures in the pixel-space projection helpers."""


class InvalidScaleError(ProjectionError):
    """Raised when a zoom-scale ratio is not strictly positive."""


# --- Command errors ---

class CommandError(MapCameraError):
    """Base class for errors raised while routing host commands."""


class UnknownCommandError(CommandError):
    """Raised when the host sends a method name the dispatcher does not know."""


class UnknownViewError(CommandError):
    """Raised when a command targets a map view that was never attached."""


class InvalidZoomRangeError(CommandError):
    """Raised when the minimum zoom level exceeds the maximum zoom level."""


# --- Settings errors ---

class SettingsError(MapCameraError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""


__all__ = [
    "CommandError",
    "InvalidScaleError",
    "InvalidZoomRangeError",
    "MapCameraError",
    "ProjectionError",
    "SettingsError",
    "SettingsLoadError",
    "SettingsValidationError",
    "UnknownCommandError",
    "UnknownViewError",
]
