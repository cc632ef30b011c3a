"""Points, rotations and the isometric projection on integer screen coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass

ISO_ANGLE = 0.523599


@dataclass
class Point:
    """A map point: grid or screen position, height and 0xRRGGBB colour."""

    x: int
    y: int
    z: int
    color: int


def rotate_x(y: int, z: int, angle: float) -> tuple[int, int]:
    """Rotate around the x axis; results are truncated towards zero."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return int(y * cos_a + z * sin_a), int(-y * sin_a + z * cos_a)


def rotate_y(x: int, z: int, angle: float) -> tuple[int, int]:
    """Rotate around the y axis; results are truncated towards zero."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return int(x * cos_a + z * sin_a), int(-x * sin_a + z * cos_a)


def rotate_z(x: int, y: int, angle: float) -> tuple[int, int]:
    """Rotate around the z axis; results are truncated towards zero."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return int(x * cos_a - y * sin_a), int(x * sin_a + y * cos_a)


def isometric(x: int, y: int, z: int) -> tuple[int, int]:
    """Project a 3D point to 2D with the isometric angle."""
    return (
        int((x - y) * math.cos(ISO_ANGLE)),
        int(-z + (x + y) * math.sin(ISO_ANGLE)),
    )


def fractional(n: float) -> float:
    """Fractional part used for anti-aliasing.

    Non-positive values are shifted down by one, so ``fractional(0.0)`` is -1.
    """
    if n > 0.0:
        return n - int(n)
    return n - (int(n) + 1.0)


def coverage(n: float) -> float:
    """Intensity of the nearer of the two pixels a line passes between."""
    return 1.0 - fractional(n)