"""Schema helpers for the mapcam settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import DEFAULT_ANIMATED, DEFAULT_MAX_ZOOM, DEFAULT_MIN_ZOOM, REFERENCE_ZOOM

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "mapcam/settings.schema.json",
    "type": "object",
    "required": ["schema", "camera", "logging"],
    "properties": {
        "schema": {"const": "mapcam/settings@1"},
        "camera": {
            "type": "object",
            "required": ["min_zoom", "max_zoom", "default_animated"],
            "properties": {
                "min_zoom": {"type": "number", "minimum": 0, "maximum": REFERENCE_ZOOM},
                "max_zoom": {"type": "number", "minimum": 0, "maximum": REFERENCE_ZOOM},
                "default_animated": {"type": "boolean"},
            },
            "additionalProperties": False,
        },
        "logging": {
            "type": "object",
            "properties": {
                "level": {
                    "type": "string",
                    "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                },
            },
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "mapcam/settings@1",
    "camera": {
        "min_zoom": DEFAULT_MIN_ZOOM,
        "max_zoom": DEFAULT_MAX_ZOOM,
        "default_animated": DEFAULT_ANIMATED,
    },
    "logging": {
        "level": "WARNING",
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key in {"camera", "logging"} and isinstance(value, dict):
                target = merged.setdefault(key, {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults"]
