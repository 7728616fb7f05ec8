"""Window, input handling and drawing loop of the Lissajous table."""

from __future__ import annotations

import argparse
import math
import os
from collections.abc import Iterable, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from lissajous.controls import Action, ViewState  # noqa: E402
from lissajous.curves import CELL_SIZE, COLUMNS, ROWS  # noqa: E402
from lissajous.scene import Label, LineTrail, Shape, TrailHead, build_scene  # noqa: E402

_KEY_ACTIONS = {
    pygame.K_LEFT: Action.PREVIOUS_MODE,
    pygame.K_RIGHT: Action.NEXT_MODE,
    pygame.K_DOWN: Action.SLOWER,
    pygame.K_UP: Action.FASTER,
    pygame.K_m: Action.ZOOM_IN,
    pygame.K_p: Action.ZOOM_OUT,
}

_BACKGROUND = (255, 255, 255)
_TEXT_COLOR = (255, 255, 255)
_OUTLINE_COLOR = (0, 0, 0)
_CHARACTER_SIZE = 30
_OUTLINE_THICKNESS = 2
_HEXAGON_POINTS = 6
_FRAME_RATE = 60


def key_action(key: int) -> Action | None:
    """Return the action bound to a pygame key code, or None."""
    return _KEY_ACTIONS.get(key)


def advance_period(period_time: float, elapsed_ms: int, cycle_time: int) -> float:
    """Advance the curve time by ``elapsed_ms`` of a ``cycle_time`` ms cycle."""
    return period_time + elapsed_ms / cycle_time


class _Renderer:
    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def draw(self, view: ViewState, shapes: Iterable[Shape]) -> None:
        factor = self._surface.get_width() / view.view_size()[0]
        for shape in shapes:
            if isinstance(shape, TrailHead):
                self._hexagon(shape, factor)
            elif isinstance(shape, LineTrail):
                self._line(shape, factor)
            elif isinstance(shape, Label):
                self._label(shape, factor)

    def _hexagon(self, head: TrailHead, factor: float) -> None:
        radius = head.radius * factor
        if radius <= 0:
            return
        left, top = head.position[0] * factor, head.position[1] * factor
        points = [
            (
                left + radius + radius * math.cos(k * 2 * math.pi / _HEXAGON_POINTS - math.pi / 2),
                top + radius + radius * math.sin(k * 2 * math.pi / _HEXAGON_POINTS - math.pi / 2),
            )
            for k in range(_HEXAGON_POINTS)
        ]
        pygame.draw.polygon(self._surface, head.color, points)

    def _line(self, line: LineTrail, factor: float) -> None:
        width, height = line.size
        rect = pygame.Rect(
            int(line.position[0] * factor),
            int(line.position[1] * factor),
            max(1, int(width * factor)),
            max(1, int(height * factor)),
        )
        pygame.draw.rect(self._surface, line.color, rect)

    def _label(self, label: Label, factor: float) -> None:
        font = self._font(max(1, int(_CHARACTER_SIZE * factor)))
        x, y = label.position[0] * factor, label.position[1] * factor
        outline = max(1, round(_OUTLINE_THICKNESS * factor))
        shadow = font.render(label.text, True, _OUTLINE_COLOR)
        for dx in (-outline, 0, outline):
            for dy in (-outline, 0, outline):
                if dx or dy:
                    self._surface.blit(shadow, (x + dx, y + dy))
        self._surface.blit(font.render(label.text, True, _TEXT_COLOR), (x, y))


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and animate the table until it is closed."""
    parser = argparse.ArgumentParser(
        prog="lissajous",
        description="Animated table of Lissajous curves.",
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        window = pygame.display.set_mode((int(CELL_SIZE * COLUMNS), int(CELL_SIZE * ROWS)))
        pygame.display.set_caption("Lissajous table")
        renderer = _Renderer(window)
        clock = pygame.time.Clock()
        view = ViewState()
        period_time = 0.0
        clock.tick()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    action = key_action(event.key)
                    if action is not None:
                        view = view.apply(action)
            if not running:
                break

            window.fill(_BACKGROUND)
            period_time = advance_period(period_time, clock.tick(_FRAME_RATE), view.cycle_time)
            renderer.draw(view, build_scene(view, period_time))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())