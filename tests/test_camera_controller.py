import pytest

from mapcam.camera import CameraState
from mapcam.controller import MapCameraController
from mapcam.errors import InvalidZoomRangeError
from mapcam.geometry import EdgePadding, GeoPoint, GeoSpan, ViewportSize
from mapcam.requests import SetBoundsRequest, SetCenterCoordinateRequest
from mapcam.simulated import SimulatedMapView
from mapcam.viewport import span_for_zoom, span_for_zoom_with_viewport


@pytest.fixture
def controller(map_view):
    return MapCameraController(map_view)


def test_defaults(controller):
    state = controller.state
    assert state.zoom_level == 0.0
    assert state.pitch == 0.0
    assert state.heading == 0.0
    assert state.min_zoom_level == 0.0
    assert state.max_zoom_level == 21.0


def test_zoom_in_snaps_low_levels_to_three(controller, map_view):
    controller.update_stored_camera_values(1.0, 0.0, 0.0)
    assert controller.zoom_in().zoom_level == 3.0
    region, animated = map_view.regions[-1]
    assert region.span == span_for_zoom(3.0)
    assert animated is True


def test_zoom_in_adds_one(controller):
    controller.update_stored_camera_values(5.0, 0.0, 0.0)
    assert controller.zoom_in(animated=False).zoom_level == 6.0


def test_zoom_in_guard_checks_previous_level(controller, map_view):
    # 22 - 1 <= 21 still passes, so the zoom may exceed the maximum.
    controller.update_stored_camera_values(22.0, 0.0, 0.0)
    assert controller.zoom_in().zoom_level == 23.0

    regions_before = len(map_view.regions)
    assert controller.zoom_in().zoom_level == 23.0
    assert len(map_view.regions) == regions_before


def test_zoom_out_snaps_to_zero(controller):
    controller.update_stored_camera_values(3.0, 0.0, 0.0)
    assert controller.zoom_out().zoom_level == 0.0


def test_zoom_out_subtracts_one(controller):
    controller.update_stored_camera_values(10.0, 0.0, 0.0)
    assert controller.zoom_out().zoom_level == 9.0


def test_zoom_out_rounds_ties_away_from_zero(controller):
    # 2.5 rounds to 3, which is above the snap ceiling.
    controller.update_stored_camera_values(3.5, 0.0, 0.0)
    assert controller.zoom_out().zoom_level == 2.5

    controller.update_stored_camera_values(3.4, 0.0, 0.0)
    assert controller.zoom_out().zoom_level == 0.0


def test_zoom_out_guard_keeps_state(controller, map_view):
    controller.update_stored_camera_values(0.5, 0.0, 0.0)
    assert controller.zoom_out().zoom_level == 0.5
    assert map_view.regions == []


@pytest.mark.parametrize("requested, expected", [(-5.0, 0.0), (0.0, 0.0), (7.5, 7.5), (21.0, 21.0), (40.0, 21.0)])
def test_zoom_to_clamps(controller, requested, expected):
    assert controller.zoom_to(requested).zoom_level == expected


def test_zoom_to_respects_custom_limits(controller):
    controller.set_zoom_limits(3.0, 15.0)
    assert controller.zoom_to(1.0).zoom_level == 3.0
    assert controller.zoom_to(18.0).zoom_level == 15.0


def test_zoom_by_clamps(controller):
    controller.update_stored_camera_values(10.0, 0.0, 0.0)
    assert controller.zoom_by(2.5).zoom_level == 12.5
    assert controller.zoom_by(-20.0).zoom_level == 0.0
    assert controller.zoom_by(50.0).zoom_level == 21.0


def test_zoom_operations_keep_view_center(controller, map_view):
    center = map_view.center
    controller.zoom_to(12.0)
    region, _ = map_view.regions[-1]
    assert region.center == center


def test_zoom_operations_flatten_camera(controller, map_view):
    controller.update_stored_camera_values(8.0, 45.0, 120.0)
    snapshot = controller.zoom_by(1.0)
    assert snapshot.pitch == 0.0
    assert snapshot.heading == 0.0
    assert (map_view.pitch, map_view.heading) == (0.0, 0.0)


def test_update_stored_camera_values_does_not_clamp(controller, map_view):
    snapshot = controller.update_stored_camera_values(30.0, 60.0, 270.0)
    assert snapshot.zoom_level == 30.0
    assert snapshot.pitch == 60.0
    assert snapshot.heading == 270.0
    assert map_view.regions == []


def test_set_center_coordinate_flattens_and_stores_zoom(controller, map_view):
    controller.update_stored_camera_values(4.0, 30.0, 90.0)
    target = GeoPoint(35.6762, 139.6503)

    snapshot, region = controller.set_center_coordinate(
        SetCenterCoordinateRequest(target=target, zoom=11.0, animated=False)
    )

    assert snapshot.zoom_level == 11.0
    assert snapshot.pitch == 0.0
    assert snapshot.heading == 0.0
    assert region.center == target
    assert region.span == span_for_zoom(11.0)
    assert map_view.regions[-1] == (region, False)


def test_set_center_coordinate_defaults(controller, map_view):
    controller.update_stored_camera_values(6.0, 0.0, 0.0)
    center = map_view.center

    snapshot, region = controller.set_center_coordinate(SetCenterCoordinateRequest())

    assert snapshot.zoom_level == 6.0
    assert region.center == center
    assert region.span == span_for_zoom(6.0)


def test_set_center_coordinate_does_not_clamp(controller):
    snapshot, _ = controller.set_center_coordinate(SetCenterCoordinateRequest(zoom=25.0))
    assert snapshot.zoom_level == 25.0


def test_set_bounds_without_points_is_a_noop(controller, map_view):
    controller.update_stored_camera_values(9.0, 0.0, 0.0)
    before = controller.state

    assert controller.set_bounds(SetBoundsRequest()) is None
    assert controller.state == before
    assert map_view.map_rects == []
    assert map_view.regions == []


def test_set_bounds_applies_uniform_padding(controller, map_view):
    points = (GeoPoint(52.52, 13.405), GeoPoint(48.8566, 2.3522))
    rect = controller.set_bounds(SetBoundsRequest(target=points, padding=24.0, animated=False))

    assert rect is not None
    shown, padding, animated = map_view.map_rects[-1]
    assert shown == rect
    assert padding == EdgePadding(24.0, 24.0, 24.0, 24.0)
    assert animated is False


def test_calculated_zoom_level_reads_view_geometry():
    center = GeoPoint(40.7128, -74.0060)
    size = ViewportSize(390, 844)
    view = SimulatedMapView(center=center, span=span_for_zoom_with_viewport(center, 14, size), size=size)
    controller = MapCameraController(view)

    assert controller.zoom_level == 0.0
    assert controller.calculated_zoom_level == pytest.approx(14.0, abs=0.01)
    # The recomputed value becomes the stored one.
    assert controller.zoom_level == pytest.approx(14.0, abs=0.01)


def test_calculated_zoom_level_of_unsized_view_keeps_stored_value():
    view = SimulatedMapView(span=GeoSpan(10.0, 10.0))
    controller = MapCameraController(view, CameraState(zoom_level=7.0))
    assert controller.calculated_zoom_level == 7.0


def test_visible_region_uses_stored_zoom(controller, map_view):
    controller.update_stored_camera_values(12.0, 0.0, 0.0)
    region = controller.visible_region()
    assert region.northeast.latitude > map_view.center.latitude > region.southwest.latitude
    assert region.southwest.longitude < map_view.center.longitude < region.northeast.longitude


def test_visible_region_of_unsized_view():
    controller = MapCameraController(SimulatedMapView())
    assert controller.visible_region().to_dict() == {"northeast": [0.0, 0.0], "southwest": [0.0, 0.0]}


def test_set_zoom_limits_rejects_inverted_range(controller):
    with pytest.raises(InvalidZoomRangeError):
        controller.set_zoom_limits(10.0, 5.0)


def test_camera_listeners_receive_snapshots(controller):
    received = []
    controller.add_camera_listener(received.append)
    controller.add_camera_listener(received.append)

    controller.zoom_to(4.0)
    controller.remove_camera_listener(received.append)
    controller.zoom_to(5.0)

    assert [snapshot.zoom_level for snapshot in received] == [4.0]


def test_failing_listener_does_not_interrupt(controller):
    def broken(_snapshot):
        raise RuntimeError("listener failure")

    received = []
    controller.add_camera_listener(broken)
    controller.add_camera_listener(received.append)

    assert controller.zoom_to(9.0).zoom_level == 9.0
    assert received[-1].zoom_level == 9.0


def test_controllers_do_not_share_state():
    first = MapCameraController(SimulatedMapView())
    second = MapCameraController(SimulatedMapView())
    first.zoom_to(10.0)
    assert second.zoom_level == 0.0


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_zoom_is_rejected(controller, map_view, value):
    controller.update_stored_camera_values(6.0, 0.0, 0.0)

    with pytest.raises(InvalidZoomRangeError):
        controller.zoom_to(value)
    with pytest.raises(InvalidZoomRangeError):
        controller.zoom_by(value)

    assert controller.zoom_level == 6.0
    assert map_view.regions == []


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_zoom_limits_are_rejected(controller, value):
    with pytest.raises(InvalidZoomRangeError):
        controller.set_zoom_limits(value, 10.0)
    with pytest.raises(InvalidZoomRangeError):
        controller.set_zoom_limits(0.0, value)

    assert (controller.min_zoom_level, controller.max_zoom_level) == (0.0, 21.0)


def test_reapply_zoom_keeps_stored_level(controller, map_view):
    controller.update_stored_camera_values(23.0, 10.0, 10.0)
    snapshot = controller.reapply_zoom(animated=False)
    assert snapshot.zoom_level == 23.0
    assert snapshot.pitch == 0.0
    assert map_view.regions[-1][1] is False
