"""Palette, height-based default colours and colour gradients along lines."""

from __future__ import annotations

from .geometry import Point

BLUE = 0x3F5EFB
DARK_PURPLE = 0x615AE1
PURPLE = 0x9453BA
PINKY = 0xC94C92
PINK = 0xFC466B

BACKGROUND = 0x131313
MENU_BACKGROUND = 0x1C0F45
TEXT_COLOR = 0xF5F5F5


def percent(start: int, end: int, current: int) -> float:
    """Where ``current`` lies between ``start`` and ``end``; 1.0 for an empty range."""
    distance = end - start
    if distance == 0:
        return 1.0
    return (current - start) / distance


def default_color(z: int, z_min: int, z_max: int) -> int:
    """Colour of a point with no colour of its own, chosen by its relative height."""
    share = percent(z_min, z_max, z)
    if share < 0.2:
        return BLUE
    if share < 0.4:
        return DARK_PURPLE
    if share < 0.6:
        return PURPLE
    return PINK


def interpolate(first: int, second: int, ratio: float) -> int:
    """Blend two channel values; the result is truncated towards zero."""
    if first == second:
        return first
    return int(first + (second - first) * ratio)


def _channel(color: int, shift: int) -> int:
    return (color >> shift) & 0xFF


def gradient_color(x: int, start: Point, end: Point, brightness: float) -> int:
    """Colour at column ``x`` of a line from ``start`` to ``end``, scaled by ``brightness``.

    The colour is ``start``'s at ``start.x`` and ``end``'s at ``end.x``. A line
    with no horizontal extent takes ``start``'s colour. The result is not
    clipped, so channels may spill when ``brightness`` is outside [0, 1].
    """
    span = abs(end.x - start.x)
    position = 1.0 if span == 0 else 1.0 - abs(x - start.x) / span
    red, green, blue = (
        int(interpolate(_channel(end.color, shift), _channel(start.color, shift), position)
            * brightness)
        for shift in (16, 8, 0)
    )
    return (red << 16) | (green << 8) | blue