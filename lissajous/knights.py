"""Closed knight's tours of a 5 by 6 board starting in the top-left corner."""

from __future__ import annotations

from dataclasses import dataclass

ROWS = 5
COLUMNS = 6
_SQUARES = ROWS * COLUMNS


@dataclass(frozen=True)
class Point:
    """A board square, or a move offset, by row and column."""

    row: int
    col: int


OFFSETS = (
    Point(-2, -1),
    Point(-2, 1),
    Point(-1, -2),
    Point(-1, 2),
    Point(1, -2),
    Point(1, 2),
    Point(2, -1),
    Point(2, 1),
)

_START = Point(0, 0)
_ENDS = (Point(1, 2), Point(2, 1))


def _index(point: Point) -> int:
    return point.row * COLUMNS + point.col


def _moves_from(index: int) -> tuple[int, ...]:
    row, col = divmod(index, COLUMNS)
    return tuple(
        (row + offset.row) * COLUMNS + col + offset.col
        for offset in OFFSETS
        if 0 <= row + offset.row < ROWS and 0 <= col + offset.col < COLUMNS
    )


_MOVES = tuple(_moves_from(index) for index in range(_SQUARES))
_MOVE_MASKS = tuple(sum(1 << target for target in moves) for moves in _MOVES)
_END_MASK = sum(1 << _index(end) for end in _ENDS)


def _can_finish(current: int, unvisited: int) -> bool:
    """Cheap necessary test that a tour can still cover ``unvisited``."""
    if not unvisited & _END_MASK:
        return False
    if unvisited & (unvisited - 1) == 0:
        return True
    first_steps = _MOVE_MASKS[current] & unvisited
    if not first_steps:
        return False
    # The remaining path runs through the unvisited squares; any square with
    # at most one unvisited neighbour must be its first or last square.
    loose = 0
    loose_inner = 0
    remaining = unvisited
    while remaining:
        bit = remaining & -remaining
        remaining ^= bit
        degree = (_MOVE_MASKS[bit.bit_length() - 1] & unvisited).bit_count()
        if degree == 0:
            return False
        if degree == 1:
            loose += 1
            if not bit & _END_MASK:
                if not bit & first_steps:
                    return False
                loose_inner += 1
            if loose > 2 or loose_inner > 1:
                return False
    return True


def all_complete_moves() -> list[list[list[int]]]:
    """Return every closed tour from the corner as boards of move numbers.

    Each board lists, row by row, the number of the move that lands on each
    square; tours are found in the order of ``OFFSETS``.
    """
    numbers = [0] * _SQUARES
    solutions: list[list[list[int]]] = []

    def visit(square: int, number: int, unvisited: int) -> None:
        numbers[square] = number
        if number == _SQUARES:
            if _END_MASK >> square & 1:
                solutions.append(
                    [numbers[row * COLUMNS : (row + 1) * COLUMNS] for row in range(ROWS)]
                )
        elif _can_finish(square, unvisited):
            for target in _MOVES[square]:
                if unvisited >> target & 1:
                    visit(target, number + 1, unvisited & ~(1 << target))
        numbers[square] = 0

    start = _index(_START)
    visit(start, 1, ((1 << _SQUARES) - 1) & ~(1 << start))
    return solutions


def format_board(board: list[list[int]]) -> str:
    """Render a board with each number right-aligned in three columns."""
    return "".join("".join(f"{value:>3}" for value in row) + "\n" for row in board)