"""Interactive settings of the curve table and how user actions change them."""

from __future__ import annotations

import dataclasses
import enum

from lissajous.curves import COLUMNS, MAX_SIZE, PRECISION, ROWS, hsv_to_rgb

_LAST_MODE = 3
_CYCLE_STEP = 1000
_SCALE_STEP = 0.0005
_BLACK = (0, 0, 0)


class Action(enum.Enum):
    """Something the user asked the display to do."""

    PREVIOUS_MODE = "previous_mode"
    NEXT_MODE = "next_mode"
    SLOWER = "slower"
    FASTER = "faster"
    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"


@dataclasses.dataclass(frozen=True)
class ViewState:
    """Display mode, cycle length in milliseconds and zoom scale.

    Even modes draw in rainbow colours, odd modes in black; modes 2 and 3
    make the trail fade out towards its head.
    """

    state: int = 0
    cycle_time: int = 10000
    scale: float = 0.005

    def apply(self, action: Action) -> ViewState:
        """Return the settings after ``action``."""
        if action is Action.PREVIOUS_MODE:
            if self.state > 0:
                return dataclasses.replace(self, state=self.state - 1)
        elif action is Action.NEXT_MODE:
            if self.state < _LAST_MODE:
                return dataclasses.replace(self, state=self.state + 1)
        elif action is Action.SLOWER:
            return dataclasses.replace(self, cycle_time=self.cycle_time + _CYCLE_STEP)
        elif action is Action.FASTER:
            if self.cycle_time - _CYCLE_STEP > 0:
                return dataclasses.replace(self, cycle_time=self.cycle_time - _CYCLE_STEP)
        elif action is Action.ZOOM_IN:
            return dataclasses.replace(self, scale=self.scale + _SCALE_STEP)
        elif action is Action.ZOOM_OUT:
            return dataclasses.replace(self, scale=self.scale - _SCALE_STEP)
        return self

    def color_for(self, hue: float) -> tuple[int, int, int]:
        """Colour of a trail head at ``hue`` in the current mode."""
        if self.state % 2 == 0:
            return hsv_to_rgb(hue, 1, 1)
        return _BLACK

    def trail_head_size(self, index: int) -> float:
        """Radius of the trail head at ``index`` along a curve."""
        phase = self.state % 8
        if 2 <= phase <= 3:
            return MAX_SIZE * (index / PRECISION)
        if 5 <= phase <= 6:
            return MAX_SIZE if index == 0 else 1.0
        return MAX_SIZE

    def view_size(self) -> tuple[float, float]:
        """Width and height of the visible world area."""
        return COLUMNS / self.scale, ROWS / self.scale