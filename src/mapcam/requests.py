"""Typed command requests built from the host framework's loose payloads.

Every request exposes ``from_payload`` which accepts whatever mapping the host
sent.  Missing or malformed fields fall back to their documented defaults and
are reported at debug level; building a request never raises.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from .config import DEFAULT_ANIMATED
from .errors import UnknownCommandError
from .geometry import GeoPoint

LOGGER = logging.getLogger(__name__)

_MISSING = object()


def _as_mapping(payload: object) -> Mapping[str, Any]:
    if isinstance(payload, Mapping):
        return payload
    if payload is not None:
        LOGGER.debug("Ignoring non-mapping payload %r", payload)
    return {}


def _number(payload: Mapping[str, Any], key: str, default: Any) -> Any:
    """Return ``payload[key]`` as a finite float, or *default*."""

    value = payload.get(key, _MISSING)
    if value is _MISSING or value is None:
        return default
    # ``bool`` is an ``int`` subclass but never a meaningful zoom or padding.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        LOGGER.debug("Ignoring non-numeric %s=%r", key, value)
        return default
    value = float(value)
    if not math.isfinite(value):
        LOGGER.debug("Ignoring non-finite %s=%r", key, value)
        return default
    return value


def _flag(payload: Mapping[str, Any], key: str, default: bool) -> bool:
    value = payload.get(key, _MISSING)
    if isinstance(value, bool):
        return value
    if value is not _MISSING and value is not None:
        LOGGER.debug("Ignoring non-boolean %s=%r", key, value)
    return default


def parse_lat_lng(value: object) -> GeoPoint | None:
    """Convert a ``[lat, lng]`` pair into a :class:`GeoPoint`.

    Returns ``None`` for anything that is not a pair of finite numbers inside
    the valid latitude/longitude ranges.
    """

    if not isinstance(value, (list, tuple)) or len(value) < 2:
        return None
    lat, lng = value[0], value[1]
    if isinstance(lat, bool) or isinstance(lng, bool):
        return None
    if not isinstance(lat, (int, float)) or not isinstance(lng, (int, float)):
        return None
    lat = float(lat)
    lng = float(lng)
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return None
    if not -90.0 <= lat <= 90.0 or not -180.0 <= lng <= 180.0:
        return None
    return GeoPoint(lat, lng)


@dataclass(frozen=True)
class SetCenterCoordinateRequest:
    """Move the camera to ``target`` (or keep the current center)."""

    target: GeoPoint | None = None
    zoom: float | None = None
    animated: bool = DEFAULT_ANIMATED

    @classmethod
    def from_payload(cls, payload: object, *, animated: bool = DEFAULT_ANIMATED) -> "SetCenterCoordinateRequest":
        data = _as_mapping(payload)
        raw_target = data.get("target")
        target = parse_lat_lng(raw_target)
        if raw_target is not None and target is None:
            LOGGER.debug("Ignoring malformed target %r", raw_target)
        return cls(
            target=target,
            zoom=_number(data, "zoom", None),
            animated=_flag(data, "animated", animated),
        )


@dataclass(frozen=True)
class SetBoundsRequest:
    """Fit ``target`` inside the view with a uniform ``padding``."""

    target: tuple[GeoPoint, ...] = ()
    padding: float = 0.0
    animated: bool = DEFAULT_ANIMATED

    @classmethod
    def from_payload(cls, payload: object, *, animated: bool = DEFAULT_ANIMATED) -> "SetBoundsRequest":
        data = _as_mapping(payload)
        raw_points = data.get("target")
        points: list[GeoPoint] = []
        if isinstance(raw_points, (list, tuple)):
            for raw_point in raw_points:
                point = parse_lat_lng(raw_point)
                if point is None:
                    LOGGER.debug("Skipping malformed bounds point %r", raw_point)
                    continue
                points.append(point)
        elif raw_points is not None:
            LOGGER.debug("Ignoring malformed bounds target %r", raw_points)
        padding = _number(data, "padding", 0.0)
        if padding < 0:
            LOGGER.debug("Ignoring negative padding %r", padding)
            padding = 0.0
        return cls(target=tuple(points), padding=padding, animated=_flag(data, "animated", animated))


@dataclass(frozen=True)
class ZoomInRequest:
    animated: bool = DEFAULT_ANIMATED

    @classmethod
    def from_payload(cls, payload: object, *, animated: bool = DEFAULT_ANIMATED) -> "ZoomInRequest":
        return cls(animated=_flag(_as_mapping(payload), "animated", animated))


@dataclass(frozen=True)
class ZoomOutRequest:
    animated: bool = DEFAULT_ANIMATED

    @classmethod
    def from_payload(cls, payload: object, *, animated: bool = DEFAULT_ANIMATED) -> "ZoomOutRequest":
        return cls(animated=_flag(_as_mapping(payload), "animated", animated))


@dataclass(frozen=True)
class ZoomToRequest:
    """Jump to ``zoom``; ``None`` re-applies the stored zoom level."""

    zoom: float | None = None
    animated: bool = DEFAULT_ANIMATED

    @classmethod
    def from_payload(cls, payload: object, *, animated: bool = DEFAULT_ANIMATED) -> "ZoomToRequest":
        data = _as_mapping(payload)
        zoom = _number(data, "newZoomLevel", None)
        if zoom is None:
            zoom = _number(data, "zoom", None)
        return cls(zoom=zoom, animated=_flag(data, "animated", animated))


@dataclass(frozen=True)
class ZoomByRequest:
    delta: float = 0.0
    animated: bool = DEFAULT_ANIMATED

    @classmethod
    def from_payload(cls, payload: object, *, animated: bool = DEFAULT_ANIMATED) -> "ZoomByRequest":
        data = _as_mapping(payload)
        return cls(delta=_number(data, "zoomBy", 0.0), animated=_flag(data, "animated", animated))


@dataclass(frozen=True)
class UpdateCameraRequest:
    """Camera values observed on the native view after a user gesture."""

    zoom: float = 0.0
    pitch: float = 0.0
    heading: float = 0.0

    @classmethod
    def from_payload(cls, payload: object, *, animated: bool = DEFAULT_ANIMATED) -> "UpdateCameraRequest":
        data = _as_mapping(payload)
        return cls(
            zoom=_number(data, "zoom", 0.0),
            pitch=_number(data, "pitch", 0.0),
            heading=_number(data, "heading", 0.0),
        )


@dataclass(frozen=True)
class SetZoomLimitsRequest:
    """New zoom range; a missing limit keeps the view's current one."""

    min_zoom: float | None = None
    max_zoom: float | None = None

    @classmethod
    def from_payload(cls, payload: object, *, animated: bool = DEFAULT_ANIMATED) -> "SetZoomLimitsRequest":
        data = _as_mapping(payload)
        return cls(
            min_zoom=_number(data, "minZoom", None),
            max_zoom=_number(data, "maxZoom", None),
        )


@dataclass(frozen=True)
class QueryRequest:
    """Read-only command; ``name`` selects the value to report."""

    name: str


CommandRequest = (
    SetCenterCoordinateRequest
    | SetBoundsRequest
    | ZoomInRequest
    | ZoomOutRequest
    | ZoomToRequest
    | ZoomByRequest
    | UpdateCameraRequest
    | SetZoomLimitsRequest
    | QueryRequest
)

_REQUEST_TYPES: dict[str, Callable[..., Any]] = {
    "setCenterCoordinate": SetCenterCoordinateRequest.from_payload,
    "setBounds": SetBoundsRequest.from_payload,
    "zoomIn": ZoomInRequest.from_payload,
    "zoomOut": ZoomOutRequest.from_payload,
    "zoomTo": ZoomToRequest.from_payload,
    "zoomBy": ZoomByRequest.from_payload,
    "updateCamera": UpdateCameraRequest.from_payload,
    "setZoomLimits": SetZoomLimitsRequest.from_payload,
}

QUERY_METHODS: frozenset[str] = frozenset(
    {"getZoomLevel", "getCalculatedZoomLevel", "getVisibleRegion", "getCameraState"}
)


def normalize_method(method: str) -> str:
    """Strip the optional ``map#`` channel prefix."""

    return method.split("#", 1)[1] if method.startswith("map#") else method


def parse_request(method: str, payload: object = None, *, animated: bool = DEFAULT_ANIMATED) -> CommandRequest:
    """Build the typed request for *method* from a loose *payload*."""

    name = normalize_method(method)
    if name in QUERY_METHODS:
        return QueryRequest(name)
    factory = _REQUEST_TYPES.get(name)
    if factory is None:
        raise UnknownCommandError(f"Unknown map command: {method}")
    return factory(payload, animated=animated)


__all__ = [
    "CommandRequest",
    "QUERY_METHODS",
    "QueryRequest",
    "SetBoundsRequest",
    "SetCenterCoordinateRequest",
    "SetZoomLimitsRequest",
    "UpdateCameraRequest",
    "ZoomByRequest",
    "ZoomInRequest",
    "ZoomOutRequest",
    "ZoomToRequest",
    "normalize_method",
    "parse_lat_lng",
    "parse_request",
]
