"""Settings loading for mapcam."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import ValidationError

from ..errors import SettingsLoadError, SettingsValidationError
from .schema import DEFAULT_SETTINGS, merge_with_defaults

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CameraSettings:
    """Camera defaults applied to every newly attached map view."""

    min_zoom: float
    max_zoom: float
    default_animated: bool


@dataclass(frozen=True)
class Settings:
    camera: CameraSettings
    log_level: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        camera = data["camera"]
        return cls(
            camera=CameraSettings(
                min_zoom=float(camera["min_zoom"]),
                max_zoom=float(camera["max_zoom"]),
                default_animated=bool(camera["default_animated"]),
            ),
            log_level=str(data["logging"].get("level", "WARNING")),
        )


def default_settings() -> Settings:
    return Settings.from_dict(merge_with_defaults(None))


def load_settings(path: Path | str | None = None) -> Settings:
    """Read settings from *path*, falling back to defaults when it is missing."""

    if path is None:
        return default_settings()

    path = Path(path)
    if not path.exists():
        LOGGER.info("Settings file %s not found, using defaults", path)
        return default_settings()

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise SettingsLoadError(f"Could not read settings from {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise SettingsLoadError(f"Settings in {path} must be a JSON object")

    try:
        merged = merge_with_defaults(payload)
    except ValidationError as exc:
        raise SettingsValidationError(exc.message) from exc

    camera = merged["camera"]
    if camera["min_zoom"] > camera["max_zoom"]:
        raise SettingsValidationError(
            f"camera.min_zoom {camera['min_zoom']} exceeds camera.max_zoom {camera['max_zoom']}"
        )
    return Settings.from_dict(merged)


__all__ = ["CameraSettings", "DEFAULT_SETTINGS", "Settings", "default_settings", "load_settings"]
