import pytest

from minesweeper.camera import MAX_SCALE, MIN_SCALE, Camera2D


def test_pan_moves_x_with_cursor_and_y_against_it():
    camera = Camera2D()
    camera.pan(5.0, 3.0)
    assert camera.x == 5.0
    assert camera.y == -3.0


def test_pan_round_trip():
    camera = Camera2D(x=2.0, y=7.0)
    camera.pan(11.0, -4.0)
    camera.pan(-11.0, 4.0)
    assert (camera.x, camera.y) == (2.0, 7.0)


def test_zoom_lines_in_and_out_returns_to_start():
    camera = Camera2D()
    camera.zoom_lines(1.0)
    assert camera.scale < 1.0
    camera.zoom_lines(-1.0)
    assert camera.scale == pytest.approx(1.0)


def test_zoom_lines_step_size():
    camera = Camera2D()
    camera.zoom_lines(2.0)
    assert camera.scale == pytest.approx(0.8)


def test_zoom_lines_out_of_range_is_ignored():
    camera = Camera2D()
    camera.zoom_lines(100.0)
    assert camera.scale == 1.0
    camera.zoom_lines(-100.0)
    assert camera.scale == 1.0


def test_pinch_clamps_to_limits():
    camera = Camera2D()
    camera.pinch(1000.0)
    assert camera.scale == MIN_SCALE
    camera.pinch(0.0001)
    assert camera.scale == MAX_SCALE


def test_pinch_rejects_non_positive_factor():
    with pytest.raises(ValueError):
        Camera2D().pinch(0.0)


def test_viewport_center_maps_to_camera_position():
    camera = Camera2D(x=12.0, y=-4.0, scale=2.0)
    assert camera.screen_to_world((400.0, 300.0), (800.0, 600.0)) == (12.0, -4.0)


def test_screen_world_round_trip():
    camera = Camera2D(x=3.0, y=9.0, scale=0.5)
    viewport = (640.0, 480.0)
    world = camera.screen_to_world((17.0, 250.0), viewport)
    back = camera.world_to_screen(world, viewport)
    assert back == pytest.approx((17.0, 250.0))


def test_screen_top_is_world_up():
    camera = Camera2D()
    top = camera.screen_to_world((100.0, 0.0), (200.0, 200.0))
    bottom = camera.screen_to_world((100.0, 200.0), (200.0, 200.0))
    assert top[1] > bottom[1]