"""Colour conversion, curve geometry and the layout constants of the table."""

from __future__ import annotations

import math

CELL_SIZE = 150.0
"""Width and height of one curve cell."""

CELL_SPACING = 50.0
"""Gap between neighbouring cells."""

PRECISION = 600
"""Number of trail heads used to trace one curve."""

COLUMNS = 9
ROWS = 5

MAX_SIZE = 5.0
"""Largest radius of a trail head."""

INIT_X_OFFSET = 150.0
INIT_Y_OFFSET = 150.0


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[int, int, int]:
    """Convert a hue (0-360), saturation (0-1) and value (0-1) to an RGB triple."""
    c = v * s
    x = c * (1 - abs(math.fmod(h / 60.0, 2) - 1))
    m = v - c

    if 0 <= h < 60:
        r, g, b = c, x, 0.0
    elif 60 <= h < 120:
        r, g, b = x, c, 0.0
    elif 120 <= h < 180:
        r, g, b = 0.0, c, x
    elif 180 <= h < 240:
        r, g, b = 0.0, x, c
    elif 240 <= h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return int((r + m) * 255), int((g + m) * 255), int((b + m) * 255)


def parametric_point(
    time: float,
    x_oscillations: int,
    y_oscillations: int,
    x_offset: float,
    y_offset: float,
) -> tuple[float, float]:
    """Return the point of a Lissajous curve at ``time`` (one period per unit)."""
    angle = time * 2 * math.pi
    return (
        math.cos(angle * x_oscillations) * CELL_SIZE / 2 + x_offset,
        math.sin(angle * y_oscillations) * CELL_SIZE / 2 + y_offset,
    )