"""Root-level tactical shortcuts: immediate wins, open-four setups, threat blocks."""

from ..Board import Mark, Move, WIN_LENGTH
from ..engine import rules

BOUNDARY_INDICES = (0, WIN_LENGTH - 1)

# Threat priorities for find_threat_blocking_move
PRIORITY_FOUR = 3
PRIORITY_OPEN_THREE = 2
PRIORITY_THREE = 1


def find_immediate_winning_move(board, mark):
    """First empty cell (row-major) where placing `mark` produces a winner of `mark`."""
    for r in range(board.size):
        for c in range(board.size):
            if board.cells[r][c] != Mark.EMPTY:
                continue
            latest = board.latest[r][c]
            board._push_stone(r, c, mark)
            try:
                is_win = rules.check_winner(board) == mark
            finally:
                board._pop_stone(r, c)
                board.latest[r][c] = latest
            if is_win:
                return Move(r, c)
    return None


def find_open_four_setup_move(board, mark):
    """
    Find a _XXX_ window: three of `mark`, no opponent stones, and both empty
    cells on the window boundary. Playing either end makes an open four.
    """
    opponent = mark.opponent
    for coords, marks in rules.iter_windows(board):
        if opponent in marks or marks.count(mark) != 3:
            continue
        empties = [i for i, m in enumerate(marks) if m == Mark.EMPTY]
        if len(empties) != 2:
            continue
        if all(i in BOUNDARY_INDICES for i in empties):
            return Move(*coords[empties[0]])
    return None


def find_threat_blocking_move(board, opponent):
    """
    Pick a blocking cell from the most urgent opponent window:
    four stones (3), open three (2), any other three (1).
    Earlier windows win ties; boundary empties are preferred within a window.
    """
    own = opponent.opponent
    best_priority = 0
    best_move = None
    for coords, marks in rules.iter_windows(board):
        if own in marks:
            continue
        opponent_count = marks.count(opponent)
        if opponent_count < 3:
            continue
        empties = [i for i, m in enumerate(marks) if m == Mark.EMPTY]
        if not empties:
            continue
        boundary = [i for i in empties if i in BOUNDARY_INDICES]

        if opponent_count == 4:
            priority = PRIORITY_FOUR
        elif len(boundary) == 2:
            priority = PRIORITY_OPEN_THREE
        else:
            priority = PRIORITY_THREE

        if priority > best_priority:
            chosen = boundary[0] if boundary else empties[0]
            best_priority = priority
            best_move = Move(*coords[chosen])
    return best_move
