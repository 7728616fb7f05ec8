import pygame
import pytest

from lissajous.app import advance_period, key_action, main
from lissajous.controls import Action


@pytest.mark.parametrize(
    "key, action",
    [
        (pygame.K_LEFT, Action.PREVIOUS_MODE),
        (pygame.K_RIGHT, Action.NEXT_MODE),
        (pygame.K_DOWN, Action.SLOWER),
        (pygame.K_UP, Action.FASTER),
        (pygame.K_m, Action.ZOOM_IN),
        (pygame.K_p, Action.ZOOM_OUT),
    ],
)
def test_bound_keys(key, action):
    assert key_action(key) is action


@pytest.mark.parametrize("key", [pygame.K_a, pygame.K_SPACE, pygame.K_ESCAPE])
def test_unbound_keys(key):
    assert key_action(key) is None


def test_advance_full_cycle():
    assert advance_period(0.0, 10000, 10000) == pytest.approx(1.0)


def test_advance_is_additive():
    once = advance_period(0.5, 400, 2000)
    twice = advance_period(advance_period(0.5, 150, 2000), 250, 2000)
    assert once == pytest.approx(twice)


def test_advance_without_time_is_unchanged():
    assert advance_period(0.75, 0, 3000) == 0.75


def test_main_rejects_unknown_options():
    with pytest.raises(SystemExit) as info:
        main(["--no-such-option"])
    assert info.value.code == 2