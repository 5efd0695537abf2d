"""Tests for the custom error hierarchy."""

from mapcam.errors import (
    CommandError,
    InvalidScaleError,
    InvalidZoomRangeError,
    MapCameraError,
    ProjectionError,
    SettingsError,
    SettingsLoadError,
    SettingsValidationError,
    UnknownCommandError,
    UnknownViewError,
)


def test_projection_errors():
    assert issubclass(ProjectionError, MapCameraError)
    assert isinstance(InvalidScaleError("x"), ProjectionError)


def test_command_errors():
    for error_type in (UnknownCommandError, UnknownViewError, InvalidZoomRangeError):
        assert issubclass(error_type, CommandError)
        assert isinstance(error_type("x"), MapCameraError)


def test_settings_errors():
    assert issubclass(SettingsLoadError, SettingsError)
    assert issubclass(SettingsValidationError, SettingsError)
    assert issubclass(SettingsError, MapCameraError)


def test_error_message():
    err = UnknownViewError("view 7 not attached")
    assert str(err) == "view 7 not attached"
