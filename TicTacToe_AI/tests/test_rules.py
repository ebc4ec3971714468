"""Winner detection in all orientations and window geometry."""

import pytest

from TicTacToe_AI.Board import Board, Mark
from TicTacToe_AI.engine import rules


def _line(board, start, step, length, mark):
    r, c = start
    dr, dc = step
    for k in range(length):
        board.set(r + dr * k, c + dc * k, mark)


@pytest.mark.parametrize(
    "start, step",
    [
        ((4, 2), (0, 1)),    # horizontal
        ((1, 9), (1, 0)),    # vertical
        ((3, 3), (1, 1)),    # diagonal
        ((2, 15), (1, -1)),  # anti-diagonal
    ],
)
def test_check_winner_all_orientations(start, step):
    b = Board()
    _line(b, start, step, 5, Mark.B)
    assert rules.check_winner(b) is Mark.B


@pytest.mark.parametrize("step", [(0, 1), (1, 0), (1, 1), (1, -1)])
def test_run_of_four_is_not_a_win(step):
    b = Board()
    _line(b, (8, 8), step, 4, Mark.A)
    assert rules.check_winner(b) is None


def test_overline_counts_as_win():
    b = Board()
    _line(b, (0, 0), (0, 1), 6, Mark.A)
    assert rules.check_winner(b) is Mark.A


def test_win_at_board_edge():
    b = Board()
    _line(b, (19, 15), (0, 1), 5, Mark.A)
    assert rules.check_winner(b) is Mark.A


def test_broken_line_is_not_a_win():
    b = Board()
    for col in (0, 1, 2, 4, 5):
        b.set(7, col, Mark.B)
    assert rules.check_winner(b) is None


def test_first_winner_in_row_major_order():
    b = Board()
    _line(b, (10, 0), (0, 1), 5, Mark.A)
    _line(b, (2, 0), (0, 1), 5, Mark.B)
    assert rules.check_winner(b) is Mark.B


def test_window_counts():
    # 5x5: one window per row/col and one per diagonal direction
    assert len(rules.window_coords(5)) == 12
    # 20x20: 2 * 20 * 16 straight + 2 * 16 * 16 diagonal
    assert len(rules.window_coords(20)) == 1152
    assert rules.window_coords(4) == ()


def test_window_order_direction_then_row_then_col():
    windows = rules.window_coords(6)
    assert windows[0] == ((0, 0), (0, 1), (0, 2), (0, 3), (0, 4))
    assert windows[1] == ((0, 1), (0, 2), (0, 3), (0, 4), (0, 5))
    assert windows[2] == ((1, 0), (1, 1), (1, 2), (1, 3), (1, 4))
    anti = [w for w in windows if w[1] == (w[0][0] + 1, w[0][1] - 1)]
    assert anti[0][0] == (0, 4)


def test_iter_windows_reports_marks():
    b = Board(size=5)
    b.set(0, 2, Mark.A)
    coords, marks = next(rules.iter_windows(b))
    assert coords[2] == (0, 2)
    assert marks == [Mark.EMPTY, Mark.EMPTY, Mark.A, Mark.EMPTY, Mark.EMPTY]


def test_is_win_after_move():
    b = Board()
    for col in range(3, 7):
        b.place(5, col, Mark.A)
    assert not rules.is_win_after_move(b, 5, 6)
    b.place(5, 7, Mark.A)
    assert rules.is_win_after_move(b, 5, 7)
    assert rules.is_win_after_move(b, 5, 3)
    assert not rules.is_win_after_move(b, 0, 0)
