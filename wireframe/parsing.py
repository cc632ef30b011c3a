"""Reading height maps: one row per line, cells ``z`` or ``z,0xRRGGBB``."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import IO, Iterable, Iterator, Union

from .geometry import Point
from .tokens import parse_cell, split_words

NO_COLOR = -1
"""Colour value of a cell that gives none; it is drawn with the default palette."""


class MapError(Exception):
    """A map could not be loaded.

    ``exit_code`` is the status the viewer exits with: 0 for an empty map,
    which is closed quietly, and 1 for a malformed one.
    """

    def __init__(self, message: str = "Map loading error", exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(frozen=True)
class HeightMap:
    """A rectangular grid of heights and colours stored row by row."""

    width: int
    height: int
    heights: tuple[int, ...]
    colors: tuple[int, ...]
    z_min: int
    z_max: int

    def __post_init__(self) -> None:
        cells = self.width * self.height
        if len(self.heights) != cells or len(self.colors) != cells:
            raise ValueError(
                f"expected {cells} cells for a {self.width}x{self.height} map"
            )

    def point(self, x: int, y: int) -> Point:
        """Return the grid point at column ``x`` and row ``y``.

        Its colour is :data:`NO_COLOR` when the map gives none.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"point ({x}, {y}) is outside the map")
        index = y * self.width + x
        return Point(x, y, self.heights[index], self.colors[index])


def read_lines(stream: IO[str] | IO[bytes] | Iterable[Union[str, bytes]]) -> Iterator[str]:
    """Yield the lines of ``stream`` with their line endings kept.

    Byte lines are decoded as UTF-8; empty lines of length zero are never
    produced, so the end of input simply ends the iteration.
    """
    for line in stream:
        if isinstance(line, bytes):
            line = line.decode("utf-8", errors="replace")
        if line:
            yield line


def _strip_ending(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a :class:`HeightMap` from the lines of a map file.

    Cells are separated by spaces. Every row must have the same number of
    cells. The height range always includes zero.
    """
    heights: list[int] = []
    colors: list[int] = []
    width = 0
    row_count = 0
    for line in lines:
        cells = split_words(_strip_ending(line), " ")
        if not cells:
            raise MapError(f"row {row_count + 1} has no cells")
        if row_count and len(cells) != width:
            raise MapError(
                f"row {row_count + 1} has {len(cells)} cells, expected {width}"
            )
        width = len(cells)
        for cell in cells:
            try:
                z, color = parse_cell(cell)
            except ValueError as exc:
                raise MapError(str(exc)) from exc
            heights.append(z)
            colors.append(NO_COLOR if color is None else color)
        row_count += 1
    if not row_count:
        raise MapError("map is empty", exit_code=0)
    return HeightMap(
        width=width,
        height=row_count,
        heights=tuple(heights),
        colors=tuple(colors),
        z_min=min(0, *heights),
        z_max=max(0, *heights),
    )


def load_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read and parse the map file at ``path``.

    Raises :class:`OSError` if the file cannot be opened and
    :class:`MapError` if its contents are not a valid map.
    """
    with open(path, encoding="utf-8", errors="replace", newline="") as stream:
        return parse_map(read_lines(stream))