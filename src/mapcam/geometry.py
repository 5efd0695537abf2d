"""Immutable value types shared by the projection and camera helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    """Geographic coordinate in degrees."""

    latitude: float
    longitude: float

    def to_list(self) -> list[float]:
        """Return the ``[lat, lng]`` pair the host framework expects."""

        return [self.latitude, self.longitude]


@dataclass(frozen=True)
class PixelPoint:
    """Position in the reference-zoom pixel space."""

    x: float
    y: float


@dataclass(frozen=True)
class GeoSpan:
    """Angular height and width of a viewport."""

    latitude_delta: float
    longitude_delta: float


@dataclass(frozen=True)
class GeoRect:
    """Geographic bounding box described by two opposite corners."""

    northeast: GeoPoint
    southwest: GeoPoint

    @classmethod
    def zero(cls) -> "GeoRect":
        origin = GeoPoint(0.0, 0.0)
        return cls(northeast=origin, southwest=origin)

    def to_dict(self) -> dict[str, list[float]]:
        return {
            "northeast": self.northeast.to_list(),
            "southwest": self.southwest.to_list(),
        }


@dataclass(frozen=True)
class ViewportSize:
    """Size of the rendered map view in device points."""

    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        """``True`` before the view has been laid out."""

        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class Region:
    """Center and span handed to the native control."""

    center: GeoPoint
    span: GeoSpan


@dataclass(frozen=True)
class EdgePadding:
    """Inset applied around a rectangle shown by the native control."""

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> "EdgePadding":
        return cls(top=value, left=value, bottom=value, right=value)


@dataclass(frozen=True)
class MapRect:
    """Axis-aligned rectangle in the reference-zoom pixel space."""

    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def to_geo_rect(self) -> GeoRect:
        """Convert the rectangle back into geographic corners."""

        # Imported lazily, ``projection`` depends on this module.
        from .projection import pixel_x_to_longitude, pixel_y_to_latitude

        return GeoRect(
            northeast=GeoPoint(pixel_y_to_latitude(self.y), pixel_x_to_longitude(self.max_x)),
            southwest=GeoPoint(pixel_y_to_latitude(self.max_y), pixel_x_to_longitude(self.x)),
        )

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


__all__ = [
    "EdgePadding",
    "GeoPoint",
    "GeoRect",
    "GeoSpan",
    "MapRect",
    "PixelPoint",
    "Region",
    "ViewportSize",
]
