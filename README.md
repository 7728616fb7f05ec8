# lissajous

An animated Lissajous curve table drawn with pygame. The window shows a
grid of 9 columns by 5 rows of parametric curves. The curve in column `x`
and row `y` traces

    (cos(2π·x·t)·75 + x_offset, sin(2π·y·t)·75 + y_offset)

using 600 trail heads spread over one period. The top row and the left
column show the generating circles, labelled with their frequency, and
guide lines follow the moving point of each circle across the table.

The package also contains a solver for closed knight's tours on a 5×6 board.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
lissajous
```

The command takes no options besides `--help`. It opens a window and
animates the table until the window is closed.

### Controls

| Key   | Action (`lissajous.controls.Action`) | Effect                                          |
|-------|--------------------------------------|-------------------------------------------------|
| Right | `NEXT_MODE`                          | Next drawing mode (up to mode 3)                |
| Left  | `PREVIOUS_MODE`                      | Previous drawing mode (down to mode 0)          |
| Up    | `FASTER`                             | Shorten the cycle by 1000 ms, while it stays above 0 |
| Down  | `SLOWER`                             | Lengthen the cycle by 1000 ms                   |
| M     | `ZOOM_IN`                            | Raise the scale by 0.0005: everything is drawn larger |
| P     | `ZOOM_OUT`                           | Lower the scale by 0.0005: everything is drawn smaller |

Drawing modes:

- 0: rainbow colours
- 1: black
- 2: rainbow colours, trail heads shrinking towards the start of the trail
- 3: black, trail heads shrinking towards the start of the trail

The cycle starts at 10000 ms per period and the scale at 0.005.

## Library use

The pieces behind the window work without opening one:

```python
from lissajous.curves import hsv_to_rgb, parametric_point
from lissajous.controls import Action, ViewState
from lissajous.scene import build_scene

hsv_to_rgb(120, 1, 1)                    # (0, 255, 0)
parametric_point(0.0, 1, 1, 0.0, 0.0)    # (75.0, 0.0)

view = ViewState().apply(Action.NEXT_MODE)   # ViewState is immutable
view.color_for(90)                           # (0, 0, 0) in mode 1
view.trail_head_size(300)                    # radius of trail head 300
view.view_size()                             # visible world width and height

for shape in build_scene(view, period_time=0.25):
    ...
```

`build_scene` is a generator. It yields `TrailHead`, `LineTrail` and `Label`
objects for one frame in drawing order, ending with the instructions label.
These objects do not depend on any drawing backend.

In `lissajous.app`, `key_action` maps a pygame key code to an `Action` or
`None`, and `advance_period` moves the curve time forward by a number of
elapsed milliseconds.

## Knight's tours

`lissajous.knights.all_complete_moves()` finds every knight's tour of a
5×6 board that starts in the top-left corner and ends on a square one
knight's move away from it. Each tour is returned as a board of rows of move
numbers 1 to 30. `format_board` renders a board with each number
right-aligned in three columns:

```python
from lissajous.knights import all_complete_moves, format_board

for number, board in enumerate(all_complete_moves(), start=1):
    print(f"Solution #{number}:")
    print(format_board(board))
```

The solver has no command of its own; it is used from Python only.