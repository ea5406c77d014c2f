import logging

import pytest

from tilemap.config import MAXIMUM_ZOOM_LEVEL
from tilemap.errors import InvalidViewportError, TileMapError
from tilemap.geometry import Rect
from tilemap.viewport import compute_view_state


def test_centered_view(centered_view):
    assert centered_view.zoom == 2.0
    assert centered_view.view_half_width == 400.0
    assert centered_view.view_half_height == 300.0
    assert centered_view.width == 800.0
    assert centered_view.height == 600.0
    assert centered_view.scroll_x == 0.0
    assert centered_view.scroll_y == 0.0
    assert centered_view.intrinsic_screen_rect == Rect(-400.0, -300.0, 400.0, 300.0)
    assert centered_view.screen_rect == centered_view.intrinsic_screen_rect


def test_bounding_box_of_centered_view(centered_view):
    box = centered_view.bounding_box
    assert box.west == pytest.approx(-140.625)
    assert box.east == pytest.approx(140.625)
    assert box.north > 0.0
    assert box.south == pytest.approx(-box.north)
    assert box.contains(0.0, 0.0)


def test_scroll_follows_center():
    view = compute_view_state(0.0, 90.0, 1.0, 100, 100)
    # A quarter of the 512 px world east of the centre.
    assert view.scroll_x == pytest.approx(128.0)
    assert view.scroll_y == pytest.approx(0.0)


def test_rotated_screen_rect_is_bounding_rect():
    view = compute_view_state(0.0, 0.0, 3.0, 800, 600, orientation=90.0)
    assert view.orientation == 90.0
    assert view.intrinsic_screen_rect == Rect(-400.0, -300.0, 400.0, 300.0)
    rect = view.screen_rect
    assert rect.left == pytest.approx(-300.0)
    assert rect.right == pytest.approx(300.0)
    assert rect.top == pytest.approx(-400.0)
    assert rect.bottom == pytest.approx(400.0)


def test_view_wider_than_world_spans_all_longitudes():
    view = compute_view_state(0.0, 0.0, 0.0, 1000, 200)
    assert view.bounding_box.west == -180.0
    assert view.bounding_box.east == 180.0


def test_antimeridian_view_keeps_west_before_east():
    view = compute_view_state(0.0, 179.0, 4.0, 400, 300)
    box = view.bounding_box
    assert box.west < 179.0 < box.east
    assert box.east > 180.0


def test_view_centred_on_antimeridian_contains_both_sides():
    view = compute_view_state(0.0, 180.0, 4.0, 400, 300)
    box = view.bounding_box
    assert box.contains(0.0, 179.0)
    assert box.contains(0.0, -179.0)
    assert box.contains(0.0, 180.0)
    assert not box.contains(0.0, 0.0)


@pytest.mark.parametrize("zoom", [-0.5, float("nan")])
def test_invalid_zoom_is_rejected(zoom):
    with pytest.raises(InvalidViewportError):
        compute_view_state(0.0, 0.0, zoom, 100, 100)


def test_negative_size_is_rejected():
    with pytest.raises(TileMapError):
        compute_view_state(0.0, 0.0, 2.0, -1, 100)


def test_zoom_above_maximum_is_clamped(caplog):
    with caplog.at_level(logging.WARNING, logger="tilemap.viewport"):
        view = compute_view_state(0.0, 0.0, MAXIMUM_ZOOM_LEVEL + 3, 100, 100)
    assert view.zoom == MAXIMUM_ZOOM_LEVEL
    assert "Clamping zoom" in caplog.text


def test_view_state_is_frozen(centered_view):
    with pytest.raises(AttributeError):
        centered_view.zoom = 3.0  # type: ignore[misc]
