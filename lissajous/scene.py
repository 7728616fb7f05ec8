"""The shapes making up one frame of the curve table, in drawing order."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from lissajous.controls import ViewState
from lissajous.curves import (
    CELL_SIZE,
    CELL_SPACING,
    COLUMNS,
    INIT_X_OFFSET,
    INIT_Y_OFFSET,
    MAX_SIZE,
    PRECISION,
    ROWS,
    parametric_point,
)

Color = tuple[int, int, int]
Position = tuple[float, float]

LINE_LENGTH = 100000.0
VERTICAL_LINE = (MAX_SIZE, LINE_LENGTH)
HORIZONTAL_LINE = (LINE_LENGTH, MAX_SIZE)

INSTRUCTIONS = (
    "P/M to change size. Left and right arrows to switch modes, "
    "up and down to change speed."
)


@dataclass(frozen=True, slots=True)
class TrailHead:
    """A hexagon of ``radius`` whose bounding box starts at ``position``."""

    position: Position
    radius: float
    color: Color


@dataclass(frozen=True, slots=True)
class LineTrail:
    """A long rectangle following the moving point of a reference curve."""

    position: Position
    size: tuple[float, float]
    color: Color


@dataclass(frozen=True, slots=True)
class Label:
    """White outlined text placed at ``position``."""

    position: Position
    text: str


Shape = TrailHead | LineTrail | Label


def _cell_offset(index: int, start: float) -> float:
    return (CELL_SIZE + CELL_SPACING) * index + start


def _curve(
    period_time: float,
    x_oscillations: int,
    y_oscillations: int,
    x_offset: float,
    y_offset: float,
    colors: Iterable[Color],
    radii: Iterable[float],
) -> Iterator[TrailHead]:
    for i, (color, radius) in enumerate(zip(colors, radii)):
        point = parametric_point(
            period_time + i / PRECISION, x_oscillations, y_oscillations, x_offset, y_offset
        )
        yield TrailHead(point, radius, color)


def build_scene(view: ViewState, period_time: float) -> Iterator[Shape]:
    """Yield every shape of one frame in the order it is drawn."""
    colors = [view.color_for(i * 360 / PRECISION) for i in range(PRECISION)]
    sizes = [view.trail_head_size(i) for i in range(PRECISION)]
    # The reference circles keep the radius last set on the shared trail head.
    reference_radius = sizes[-1]
    line_color = view.color_for(0)

    for row in range(1, ROWS + 1):
        row_y = _cell_offset(row, INIT_Y_OFFSET)
        yield from _curve(
            period_time, row, row, CELL_SIZE, row_y, colors, itertools.repeat(reference_radius)
        )
        yield Label((CELL_SIZE, row_y), str(row))

        for column in range(1, COLUMNS + 1):
            column_x = _cell_offset(column, INIT_X_OFFSET)
            yield from _curve(period_time, column, row, column_x, row_y, colors, sizes)
            if row == 1:
                yield from _curve(
                    period_time,
                    column,
                    column,
                    column_x,
                    CELL_SIZE,
                    colors,
                    itertools.repeat(reference_radius),
                )
                yield Label((column_x, CELL_SIZE), str(column))
                yield LineTrail(
                    parametric_point(period_time, column, column, column_x, CELL_SIZE),
                    VERTICAL_LINE,
                    line_color,
                )

        yield LineTrail(
            parametric_point(period_time, row, row, CELL_SIZE, row_y),
            HORIZONTAL_LINE,
            line_color,
        )

    yield Label((0.0, 0.0), INSTRUCTIONS)