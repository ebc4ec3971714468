"""Five-in-a-row rule: winner detection and the 5-cell window geometry shared by the AI."""

import functools

from ..Board import Mark, WIN_LENGTH

# (d_row, d_col): right, down, down-right, down-left
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


def check_winner(board):
    """Return the first mark with a run of WIN_LENGTH (row-major, then direction), else None."""
    size = board.size
    cells = board.cells
    for r in range(size):
        row = cells[r]
        for c in range(size):
            mark = row[c]
            if mark == Mark.EMPTY:
                continue
            for dr, dc in DIRECTIONS:
                count = 1
                nr, nc = r + dr, c + dc
                while count < WIN_LENGTH and 0 <= nr < size and 0 <= nc < size and cells[nr][nc] == mark:
                    count += 1
                    nr += dr
                    nc += dc
                if count >= WIN_LENGTH:
                    return mark
    return None


@functools.lru_cache(maxsize=None)
def window_coords(size, length=WIN_LENGTH):
    """All on-board windows as coordinate tuples, ordered by direction, row, col."""
    windows = []
    for dr, dc in DIRECTIONS:
        for r in range(size):
            for c in range(size):
                end_r = r + dr * (length - 1)
                end_c = c + dc * (length - 1)
                if not (0 <= end_r < size and 0 <= end_c < size):
                    continue
                windows.append(tuple((r + dr * k, c + dc * k) for k in range(length)))
    return tuple(windows)


def iter_windows(board):
    """Yield (coords, marks) for every window that fits on the board."""
    cells = board.cells
    for coords in window_coords(board.size):
        yield coords, [cells[r][c] for r, c in coords]


def is_win_after_move(board, row, col):
    """Assumes the stone is already placed; five or more through (row, col) wins."""
    mark = board.cells[row][col]
    if mark == Mark.EMPTY:
        return False
    for dr, dc in DIRECTIONS:
        forward = _count_dir(board, row, col, dr, dc, mark)
        backward = _count_dir(board, row, col, -dr, -dc, mark)
        if 1 + forward + backward >= WIN_LENGTH:
            return True
    return False


def _count_dir(board, row, col, dr, dc, mark):
    """Count contiguous stones of mark from (row, col) (exclusive) along (dr, dc)."""
    count = 0
    r, c = row + dr, col + dc
    while board.in_bounds(r, c) and board.cells[r][c] == mark:
        count += 1
        r += dr
        c += dc
    return count
