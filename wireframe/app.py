"""The wireframe viewer window and the command that opens a map in it."""

from __future__ import annotations

import sys
from array import array
from typing import Any, Sequence

from .camera import MENU_WIDTH, Controls, Key, default_camera
from .colors import TEXT_COLOR
from .parsing import HeightMap, MapError, load_map
from .printf import printf
from .render import Canvas, menu_lines, render

TITLE = "Facetint_FDF"
_FRAME_RATE = 60
_FONT_SIZE = 20


def _key_table(pygame: Any) -> dict[int, Key]:
    """Map pygame key constants to the viewer's key codes."""
    table = {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_i: Key.I,
        pygame.K_p: Key.P,
        pygame.K_k: Key.LESS,
        pygame.K_l: Key.MORE,
        pygame.K_PLUS: Key.PLUS,
        pygame.K_EQUALS: Key.PLUS,
        pygame.K_KP_PLUS: Key.PLUS,
        pygame.K_ASTERISK: Key.PLUS,
        pygame.K_KP_MULTIPLY: Key.PLUS,
        pygame.K_MINUS: Key.MINUS,
        pygame.K_KP_MINUS: Key.MINUS,
        pygame.K_UP: Key.ARROW_UP,
        pygame.K_DOWN: Key.ARROW_DOWN,
        pygame.K_LEFT: Key.ARROW_LEFT,
        pygame.K_RIGHT: Key.ARROW_RIGHT,
    }
    digits = {
        1: Key.ONE, 2: Key.TWO, 3: Key.THREE, 4: Key.FOUR,
        5: Key.FIVE, 6: Key.SIX, 7: Key.SEVEN, 8: Key.EIGHT,
    }
    for number, key in digits.items():
        table[getattr(pygame, f"K_{number}")] = key
        table[getattr(pygame, f"K_KP{number}")] = key
    return table


class Viewer:
    """Holds a map, its camera and the canvas it is drawn on.

    With ``interactive`` set the viewer has the help menu and reacts to
    zoom, pan, rotation, height and projection keys and to the mouse;
    otherwise only Escape and closing the window do anything.
    """

    def __init__(self, heightmap: HeightMap, *, interactive: bool = True) -> None:
        self.heightmap = heightmap
        self.interactive = interactive
        self.camera = default_camera(heightmap.height)
        self.canvas = Canvas(menu_width=MENU_WIDTH if interactive else 0)
        self.controls = Controls(self.camera, on_change=self._redraw)
        self.frames = 0
        self._dirty = False
        self._redraw()

    def _redraw(self) -> None:
        render(self.canvas, self.heightmap, self.camera)
        self.frames += 1
        self._dirty = True

    def _on_key(self, key: Key) -> None:
        if key == Key.ESC or self.interactive:
            self.controls.handle_key(key)

    def _surface(self, pygame: Any) -> Any:
        data = array("I", self.canvas.pixels).tobytes()
        layout = "BGRA" if sys.byteorder == "little" else "ARGB"
        image = pygame.image.frombuffer(data, (self.canvas.width, self.canvas.height), layout)
        return image.convert()

    def _present(self, pygame: Any, screen: Any, font: Any) -> None:
        screen.blit(self._surface(pygame), (0, 0))
        if font is not None:
            red, green, blue = (TEXT_COLOR >> 16) & 0xFF, (TEXT_COLOR >> 8) & 0xFF, TEXT_COLOR & 0xFF
            for line in menu_lines():
                screen.blit(font.render(line.text, True, (red, green, blue)), (line.x, line.y))
        pygame.display.flip()
        self._dirty = False

    def run(self) -> None:
        """Open the window and handle events until it is closed or Escape is pressed."""
        import pygame

        pygame.init()
        try:
            screen = pygame.display.set_mode((self.canvas.width, self.canvas.height))
            pygame.display.set_caption(TITLE)
            font = pygame.font.Font(None, _FONT_SIZE) if self.interactive else None
            keys = _key_table(pygame)
            clock = pygame.time.Clock()
            self._dirty = True
            while not self.controls.quit_requested:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    if event.type == pygame.KEYDOWN:
                        key = keys.get(event.key)
                        if key is not None:
                            self._on_key(key)
                    elif not self.interactive:
                        continue
                    elif event.type == pygame.MOUSEBUTTONDOWN:
                        self.controls.mouse_press(event.button)
                    elif event.type == pygame.MOUSEBUTTONUP:
                        self.controls.mouse_release()
                    elif event.type == pygame.MOUSEMOTION:
                        self.controls.mouse_move(*event.pos)
                if self._dirty:
                    self._present(pygame, screen, font)
                clock.tick(_FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the map named by the single argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        printf("Incorrect Argument Number!\n")
        return 0
    try:
        heightmap = load_map(args[0])
    except MapError as exc:
        if exc.exit_code == 0:
            return 0
        return printf("Map loading error\n")
    except OSError:
        return printf("Incorrect Map File!\n")
    Viewer(heightmap).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())