"""Projecting a height map and drawing it as an anti-aliased wireframe."""

from __future__ import annotations

from array import array
from dataclasses import dataclass, field
from itertools import accumulate
from typing import NamedTuple

from .camera import HEIGHT, WIDTH, Camera, Projection
from .colors import BACKGROUND, MENU_BACKGROUND, default_color, gradient_color
from .geometry import Point, coverage, fractional, isometric, rotate_x, rotate_y, rotate_z
from .parsing import NO_COLOR, HeightMap

_COLOR_MASK = 0xFFFFFF


@dataclass
class Canvas:
    """A 0xRRGGBB pixel buffer; columns left of ``menu_width`` are never drawn on."""

    width: int = WIDTH
    height: int = HEIGHT
    menu_width: int = 0
    pixels: array = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("canvas size must be positive")
        if self.menu_width < 0:
            raise ValueError("menu width must not be negative")
        self.pixels = array("L", [0]) * (self.width * self.height)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; points outside the drawable area are ignored."""
        if self.menu_width <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color & _COLOR_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at ``(x, y)``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self.pixels[y * self.width + x]

    def fill(self, color: int, menu_color: int | None = None) -> None:
        """Paint the whole canvas, the menu columns with ``menu_color`` if given."""
        menu_columns = min(self.menu_width, self.width)
        side = color if menu_color is None else menu_color
        row = (array("L", [side & _COLOR_MASK]) * menu_columns
               + array("L", [color & _COLOR_MASK]) * (self.width - menu_columns))
        self.pixels = row * self.height


def project(point: Point, camera: Camera, heightmap: HeightMap, menu_width: int = 0) -> Point:
    """Map a grid point to screen coordinates, centred in the area right of the menu."""
    zoom = camera.zoom
    x = point.x * zoom - (heightmap.width * zoom) // 2
    y = point.y * zoom - (heightmap.height * zoom) // 2
    z = int(point.z * (zoom / camera.z_height))
    y, z = rotate_x(y, z, camera.alpha)
    x, z = rotate_y(x, z, camera.beta)
    x, y = rotate_z(x, y, camera.gamma)
    if camera.projection is Projection.ISO:
        x, y = isometric(x, y, z)
    x += (WIDTH - menu_width) // 2 + camera.x_offset + menu_width
    y += (HEIGHT + heightmap.height * zoom) // 2 + camera.y_offset
    return Point(x, y, z, point.color)


def draw_line(canvas: Canvas, start: Point, end: Point) -> None:
    """Draw an anti-aliased line with a colour gradient between two screen points."""
    x0, y0, x1, y1 = start.x, start.y, end.x, end.y
    c0, c1 = start.color, end.color
    steep = abs(y1 - y0) > abs(x1 - x0)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0
        c0, c1 = c1, c0
    dx = x1 - x0
    slope = (y1 - y0) / dx if dx else 1.0
    first = Point(x0, y0, start.z, c0)
    last = Point(x1, y1, end.z, c1)
    inter_y = float(y0)
    for x in range(x0, x1 + 1):
        row = int(inter_y)
        near = gradient_color(x, first, last, coverage(inter_y))
        far = gradient_color(x, first, last, fractional(inter_y))
        if steep:
            canvas.put_pixel(row, x, near)
            canvas.put_pixel(row + 1, x, far)
        else:
            canvas.put_pixel(x, row, near)
            canvas.put_pixel(x, row + 1, far)
        inter_y += slope


def render(canvas: Canvas, heightmap: HeightMap, camera: Camera) -> None:
    """Clear the canvas and draw every edge of the map's grid."""
    canvas.fill(BACKGROUND, MENU_BACKGROUND)

    def screen_point(x: int, y: int) -> Point:
        point = heightmap.point(x, y)
        if point.color == NO_COLOR:
            point.color = default_color(point.z, heightmap.z_min, heightmap.z_max)
        return project(point, camera, heightmap, canvas.menu_width)

    grid = [[screen_point(x, y) for x in range(heightmap.width)]
            for y in range(heightmap.height)]
    for y, row in enumerate(grid):
        below = grid[y + 1] if y + 1 < len(grid) else None
        for x, point in enumerate(row):
            if x + 1 < len(row):
                draw_line(canvas, point, row[x + 1])
            if below is not None:
                draw_line(canvas, point, below[x])


class MenuLine(NamedTuple):
    """One line of help text and the window position it is drawn at."""

    x: int
    y: int
    text: str


_MENU = (
    (80, 20, "Controls"),
    (15, 40, "Zoom: Scroll or */-"),
    (15, 30, "Move: Arrows"),
    (15, 30, "Elevation: K Keys"),
    (15, 30, "Pit: L Keys"),
    (15, 30, "Projection:"),
    (57, 25, "ISO: I Key"),
    (57, 25, "Parallel: P Key"),
    (15, 30, "Rotate with Keyboard:"),
    (57, 25, "X-Axis - 2/8"),
    (57, 25, "Y-Axis - 4/6"),
    (57, 25, "Z-Axis - 3/7"),
    (30, 39, "Rotate with Mouse:"),
    (57, 30, "Press & Move"),
    (90, 40, "!!FDF!!"),
)


def menu_lines() -> list[MenuLine]:
    """Return the help menu's lines, top to bottom."""
    rows = accumulate(step for _, step, _ in _MENU)
    return [MenuLine(x, y, text) for (x, _, text), y in zip(_MENU, rows)]