import pytest

from lissajous.knights import COLUMNS, OFFSETS, ROWS, Point, all_complete_moves, format_board


@pytest.fixture(scope="module")
def tours():
    return all_complete_moves()


def _positions(board):
    return {
        value: Point(r, c) for r, row in enumerate(board) for c, value in enumerate(row)
    }


def test_tours_are_found(tours):
    assert len(tours) > 0


def test_tours_are_distinct(tours):
    keys = {tuple(tuple(row) for row in board) for board in tours}
    assert len(keys) == len(tours)


def test_board_shape(tours):
    for board in tours:
        assert len(board) == ROWS
        assert all(len(row) == COLUMNS for row in board)


def test_every_square_numbered_once(tours):
    for board in tours:
        assert sorted(v for row in board for v in row) == list(range(1, ROWS * COLUMNS + 1))


def test_tour_starts_in_corner(tours):
    assert all(board[0][0] == 1 for board in tours)


def test_consecutive_numbers_are_knight_moves(tours):
    moves = {(o.row, o.col) for o in OFFSETS}
    for board in tours:
        where = _positions(board)
        for n in range(1, ROWS * COLUMNS):
            a, b = where[n], where[n + 1]
            assert (b.row - a.row, b.col - a.col) in moves


def test_tour_closes_next_to_start(tours):
    for board in tours:
        assert _positions(board)[ROWS * COLUMNS] in (Point(1, 2), Point(2, 1))


def test_reversed_tours_are_also_found(tours):
    found = {tuple(tuple(row) for row in board) for board in tours}
    last = ROWS * COLUMNS
    for board in tours:
        reversed_board = tuple(
            tuple(1 if v == 1 else last + 2 - v for v in row) for row in board
        )
        assert reversed_board in found


def test_format_board_pads_to_three_columns():
    assert format_board([[1, 2], [30, 4]]) == "  1  2\n 30  4\n"


def test_format_board_of_tour(tours):
    text = format_board(tours[0])
    lines = text.splitlines()
    assert len(lines) == ROWS
    assert all(len(line) == 3 * COLUMNS for line in lines)
    assert [int(tok) for tok in lines[0].split()] == tours[0][0]


def test_format_empty_board():
    assert format_board([]) == ""