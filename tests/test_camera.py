import pytest

from wireframe.camera import (
    HEIGHT,
    Camera,
    Controls,
    Key,
    MouseButton,
    Projection,
    default_camera,
)


def test_default_camera_fits_map_height():
    camera = default_camera(1)
    assert camera.zoom == HEIGHT // 2
    assert camera.projection is Projection.ISO
    assert camera.z_height == 1.0
    assert (camera.alpha, camera.beta, camera.gamma) == (0.0, 0.0, 0.0)
    assert (camera.x_offset, camera.y_offset) == (0, 0)


def test_default_camera_zoom_shrinks_with_height():
    assert default_camera(2).zoom <= default_camera(1).zoom
    assert default_camera(HEIGHT).zoom == 0


@pytest.mark.parametrize("rows", [0, -3])
def test_default_camera_rejects_empty(rows):
    with pytest.raises(ValueError):
        default_camera(rows)


def test_zoom_in_and_out_round_trip():
    camera = Camera(zoom=5)
    camera.zoom_step(Key.PLUS)
    camera.zoom_step(Key.MINUS)
    assert camera.zoom == 5
    camera.zoom_step(MouseButton.SCROLL_DOWN)
    camera.zoom_step(MouseButton.SCROLL_UP)
    assert camera.zoom == 5


def test_zoom_never_below_one():
    camera = Camera(zoom=1)
    camera.zoom_step(Key.MINUS)
    assert camera.zoom == 1
    camera = Camera(zoom=0)
    camera.zoom_step(Key.ESC)
    assert camera.zoom == 1


@pytest.mark.parametrize(
    "key, attr, sign",
    [
        (Key.TWO, "alpha", 1),
        (Key.EIGHT, "alpha", -1),
        (Key.FOUR, "beta", -1),
        (Key.SIX, "beta", 1),
        (Key.THREE, "gamma", 1),
        (Key.SEVEN, "gamma", -1),
    ],
)
def test_rotate_steps(key, attr, sign):
    camera = Camera(zoom=1)
    camera.rotate(key)
    assert getattr(camera, attr) == pytest.approx(sign * 0.1)


def test_rotate_opposite_keys_cancel():
    camera = Camera(zoom=1)
    for key in (Key.TWO, Key.EIGHT, Key.FOUR, Key.SIX, Key.THREE, Key.SEVEN):
        camera.rotate(key)
    assert camera.alpha == pytest.approx(0.0)
    assert camera.beta == pytest.approx(0.0)
    assert camera.gamma == pytest.approx(0.0)


def test_pit_changes_and_clamps():
    camera = Camera(zoom=1)
    camera.pit(Key.MORE)
    assert camera.z_height == pytest.approx(1.1)
    for _ in range(30):
        camera.pit(Key.LESS)
    assert camera.z_height == pytest.approx(0.1)


def test_toggle_projection_resets_angles():
    camera = Camera(zoom=1, alpha=0.5, beta=0.3, gamma=-0.2)
    camera.toggle_projection(Key.P)
    assert camera.projection is Projection.PARALLEL
    assert (camera.alpha, camera.beta, camera.gamma) == (0.0, 0.0, 0.0)
    camera.toggle_projection(Key.I)
    assert camera.projection is Projection.ISO


def test_translate_directions():
    camera = Camera(zoom=1)
    camera.translate(Key.ARROW_LEFT)
    camera.translate(Key.ARROW_UP)
    assert (camera.x_offset, camera.y_offset) == (10, 10)
    camera.translate(Key.ARROW_RIGHT)
    camera.translate(Key.ARROW_DOWN)
    assert (camera.x_offset, camera.y_offset) == (0, 0)


def test_handle_key_escape_requests_quit():
    controls = Controls(Camera(zoom=3))
    assert controls.handle_key(Key.ESC) is False
    assert controls.quit_requested is True


def test_handle_key_dispatches_and_notifies():
    calls = []
    controls = Controls(Camera(zoom=3), on_change=lambda: calls.append(1))
    assert controls.handle_key(Key.PLUS) is True
    assert controls.camera.zoom == 4
    assert controls.handle_key(Key.P) is True
    assert controls.camera.projection is Projection.PARALLEL
    assert len(calls) == 2


def test_handle_key_ignores_unknown_and_five():
    calls = []
    camera = Camera(zoom=3)
    controls = Controls(camera, on_change=lambda: calls.append(1))
    assert controls.handle_key(Key.FIVE) is False
    assert controls.handle_key(999) is False
    assert calls == []
    assert camera == Camera(zoom=3)


def test_mouse_scroll_zooms():
    controls = Controls(Camera(zoom=3))
    assert controls.mouse_press(MouseButton.SCROLL_DOWN) is True
    assert controls.camera.zoom == 4
    assert controls.is_pressed is False


def test_mouse_drag_rotates_only_while_pressed():
    calls = []
    controls = Controls(Camera(zoom=3), on_change=lambda: calls.append(1))
    assert controls.mouse_move(100, 100) is False
    assert controls.camera.beta == 0.0
    assert controls.mouse_press(MouseButton.LEFT) is False
    assert controls.is_pressed is True
    assert controls.mouse_move(140, 80) is True
    assert controls.camera.beta == pytest.approx(40 * 0.0025)
    assert controls.camera.alpha == pytest.approx(-20 * 0.0025)
    assert (controls.prev_x, controls.prev_y) == (100, 100)
    controls.mouse_release()
    assert controls.mouse_move(200, 200) is False
    assert controls.camera.beta == pytest.approx(40 * 0.0025)
    assert len(calls) == 1