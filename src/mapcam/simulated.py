"""In-memory map view used by the CLI replay command and the tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import EdgePadding, GeoPoint, GeoSpan, MapRect, Region, ViewportSize
from .projection import pixel_x_to_longitude, pixel_y_to_latitude


@dataclass
class SimulatedMapView:
    """Record what the controller asks a native view to show.

    The view applies regions instantly, so ``center_coordinate`` and
    ``region_span`` always report the last request.
    """

    center: GeoPoint = field(default_factory=lambda: GeoPoint(0.0, 0.0))
    span: GeoSpan = field(default_factory=lambda: GeoSpan(360.0, 360.0))
    size: ViewportSize = field(default_factory=lambda: ViewportSize(0.0, 0.0))
    pitch: float = 0.0
    heading: float = 0.0
    regions: list[tuple[Region, bool]] = field(default_factory=list)
    map_rects: list[tuple[MapRect, EdgePadding, bool]] = field(default_factory=list)

    def center_coordinate(self) -> GeoPoint:
        return self.center

    def region_span(self) -> GeoSpan:
        return self.span

    def viewport_size(self) -> ViewportSize:
        return self.size

    def set_region(self, region: Region, animated: bool) -> None:
        self.center = region.center
        self.span = region.span
        self.regions.append((region, animated))

    def set_visible_map_rect(self, rect: MapRect, padding: EdgePadding, animated: bool) -> None:
        # Padding is expressed in view points and does not change the center.
        corners = rect.to_geo_rect()
        self.center = GeoPoint(
            pixel_y_to_latitude(rect.y + rect.height / 2.0),
            pixel_x_to_longitude(rect.x + rect.width / 2.0),
        )
        self.span = GeoSpan(
            latitude_delta=corners.northeast.latitude - corners.southwest.latitude,
            longitude_delta=corners.northeast.longitude - corners.southwest.longitude,
        )
        self.map_rects.append((rect, padding, animated))

    def set_camera_orientation(self, pitch: float, heading: float) -> None:
        self.pitch = pitch
        self.heading = heading


__all__ = ["SimulatedMapView"]
