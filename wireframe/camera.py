"""Camera state and the keyboard and mouse controls that change it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable, Optional

HEIGHT = 1024
WIDTH = 1920
MENU_WIDTH = 250

ANGLE_STEP = 0.1
HEIGHT_STEP = 0.1
MIN_Z_HEIGHT = 0.1
PAN_STEP = 10
MOUSE_SENSITIVITY = 0.0025


class Projection(Enum):
    """How the rotated map is flattened onto the screen."""

    ISO = 0
    PARALLEL = 1


class Key(IntEnum):
    """Keyboard codes the viewer reacts to."""

    ESC = 53
    I = 34  # noqa: E741
    P = 35
    ONE = 18
    TWO = 19
    THREE = 20
    FOUR = 21
    FIVE = 23
    SIX = 22
    SEVEN = 26
    EIGHT = 28
    PLUS = 27
    MINUS = 24
    LESS = 40
    MORE = 37
    ARROW_UP = 126
    ARROW_DOWN = 125
    ARROW_LEFT = 123
    ARROW_RIGHT = 124


class MouseButton(IntEnum):
    """Mouse button codes, including the scroll wheel."""

    LEFT = 1
    RIGHT = 2
    THIRD = 3
    SCROLL_UP = 4
    SCROLL_DOWN = 5
    SCROLL_LEFT = 6
    SCROLL_RIGHT = 7


_ZOOM_IN = {Key.PLUS, MouseButton.SCROLL_DOWN}
_ZOOM_OUT = {Key.MINUS, MouseButton.SCROLL_UP}
_PAN_KEYS = {Key.ARROW_LEFT, Key.ARROW_RIGHT, Key.ARROW_UP, Key.ARROW_DOWN}
_ROTATE_KEYS = {Key.TWO, Key.THREE, Key.FOUR, Key.SIX, Key.SEVEN, Key.EIGHT}
_PIT_KEYS = {Key.LESS, Key.MORE}
_PROJECTION_KEYS = {Key.P, Key.I}


@dataclass
class Camera:
    """View parameters: zoom, height scale, rotation angles and panning."""

    zoom: int
    z_height: float = 1.0
    projection: Projection = Projection.ISO
    alpha: float = 0.0
    beta: float = 0.0
    gamma: float = 0.0
    x_offset: int = 0
    y_offset: int = 0

    def zoom_step(self, key: int) -> None:
        """Zoom in or out by one step; the zoom never drops below 1."""
        if key in _ZOOM_IN:
            self.zoom += 1
        elif key in _ZOOM_OUT:
            self.zoom -= 1
        if self.zoom < 1:
            self.zoom = 1

    def rotate(self, key: int) -> None:
        """Turn around the x (2/8), y (4/6) or z (3/7) axis."""
        if key == Key.TWO:
            self.alpha += ANGLE_STEP
        elif key == Key.EIGHT:
            self.alpha -= ANGLE_STEP
        elif key == Key.FOUR:
            self.beta -= ANGLE_STEP
        elif key == Key.SIX:
            self.beta += ANGLE_STEP
        elif key == Key.THREE:
            self.gamma += ANGLE_STEP
        elif key == Key.SEVEN:
            self.gamma -= ANGLE_STEP

    def pit(self, key: int) -> None:
        """Change the height divisor; it never drops below 0.1."""
        if key == Key.LESS:
            self.z_height -= HEIGHT_STEP
        elif key == Key.MORE:
            self.z_height += HEIGHT_STEP
        if self.z_height < MIN_Z_HEIGHT:
            self.z_height = MIN_Z_HEIGHT

    def toggle_projection(self, key: int) -> None:
        """Reset the rotation and pick isometric (I) or parallel (P)."""
        self.alpha = 0.0
        self.beta = 0.0
        self.gamma = 0.0
        if key == Key.I:
            self.projection = Projection.ISO
        elif key == Key.P:
            self.projection = Projection.PARALLEL

    def translate(self, key: int) -> None:
        """Pan the view; any key other than left, right or up pans down."""
        if key == Key.ARROW_LEFT:
            self.x_offset += PAN_STEP
        elif key == Key.ARROW_RIGHT:
            self.x_offset -= PAN_STEP
        elif key == Key.ARROW_UP:
            self.y_offset += PAN_STEP
        else:
            self.y_offset -= PAN_STEP


def default_camera(map_height: int) -> Camera:
    """Return the starting camera for a map with ``map_height`` rows."""
    if map_height <= 0:
        raise ValueError("map height must be positive")
    return Camera(zoom=HEIGHT // map_height // 2)


@dataclass
class Controls:
    """Routes key and mouse events to a camera.

    ``on_change`` is called after every event that changes the view;
    Escape sets ``quit_requested`` instead.
    """

    camera: Camera
    on_change: Optional[Callable[[], None]] = None
    quit_requested: bool = False
    is_pressed: bool = False
    x: int = 0
    y: int = 0
    prev_x: int = 0
    prev_y: int = 0
    _unused: None = field(default=None, repr=False, compare=False)

    def _changed(self) -> bool:
        if self.on_change is not None:
            self.on_change()
        return True

    def handle_key(self, key: int) -> bool:
        """Apply a key press; return whether the view changed."""
        if key == Key.ESC:
            self.quit_requested = True
            return False
        if key in (Key.PLUS, Key.MINUS):
            self.camera.zoom_step(key)
        elif key in _PAN_KEYS:
            self.camera.translate(key)
        elif key in _ROTATE_KEYS:
            self.camera.rotate(key)
        elif key in _PIT_KEYS:
            self.camera.pit(key)
        elif key in _PROJECTION_KEYS:
            self.camera.toggle_projection(key)
        else:
            return False
        return self._changed()

    def mouse_press(self, button: int) -> bool:
        """Zoom on scroll, start dragging on the left button."""
        if button in (MouseButton.SCROLL_UP, MouseButton.SCROLL_DOWN):
            self.camera.zoom_step(button)
            return self._changed()
        if button == MouseButton.LEFT:
            self.is_pressed = True
        return False

    def mouse_release(self) -> None:
        """Stop dragging."""
        self.is_pressed = False

    def mouse_move(self, x: int, y: int) -> bool:
        """Track the pointer; while dragging, rotate around x and y."""
        self.prev_x, self.prev_y = self.x, self.y
        self.x, self.y = x, y
        if not self.is_pressed:
            return False
        self.camera.beta += (x - self.prev_x) * MOUSE_SENSITIVITY
        self.camera.alpha += (y - self.prev_y) * MOUSE_SENSITIVITY
        return self._changed()