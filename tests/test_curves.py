import math

import pytest

from lissajous.curves import CELL_SIZE, hsv_to_rgb, parametric_point


@pytest.mark.parametrize(
    "hue, expected",
    [
        (0, (255, 0, 0)),
        (60, (255, 255, 0)),
        (120, (0, 255, 0)),
        (180, (0, 255, 255)),
        (240, (0, 0, 255)),
        (300, (255, 0, 255)),
        (360, (255, 0, 0)),
    ],
)
def test_primary_and_secondary_hues(hue, expected):
    assert hsv_to_rgb(hue, 1, 1) == expected


def test_zero_saturation_is_grey():
    r, g, b = hsv_to_rgb(200, 0, 1)
    assert r == g == b == 255


def test_zero_value_is_black():
    assert hsv_to_rgb(123, 1, 0) == (0, 0, 0)


@pytest.mark.parametrize("hue", [h * 7.5 for h in range(48)])
def test_components_in_byte_range(hue):
    rgb = hsv_to_rgb(hue, 1, 1)
    assert all(0 <= channel <= 255 for channel in rgb)
    assert max(rgb) == 255


def test_point_at_time_zero():
    x, y = parametric_point(0, 3, 4, 10, 20)
    assert x == pytest.approx(10 + CELL_SIZE / 2)
    assert y == pytest.approx(20)


def test_point_at_quarter_period():
    x, y = parametric_point(0.25, 1, 1, 0, 0)
    assert x == pytest.approx(0, abs=1e-9)
    assert y == pytest.approx(CELL_SIZE / 2)


@pytest.mark.parametrize("xo, yo", [(1, 1), (2, 3), (5, 4), (9, 5)])
def test_point_is_periodic(xo, yo):
    a = parametric_point(0.137, xo, yo, 300, 400)
    b = parametric_point(1.137, xo, yo, 300, 400)
    assert a == pytest.approx(b)


@pytest.mark.parametrize("t", [0.0, 0.1, 0.33, 0.5, 0.77])
def test_point_stays_in_cell(t):
    x, y = parametric_point(t, 3, 2, 100, 200)
    assert abs(x - 100) <= CELL_SIZE / 2 + 1e-9
    assert abs(y - 200) <= CELL_SIZE / 2 + 1e-9


def test_equal_oscillations_trace_a_circle():
    for t in (0.05, 0.3, 0.6):
        x, y = parametric_point(t, 2, 2, 0, 0)
        assert math.hypot(x, y) == pytest.approx(CELL_SIZE / 2)