"""Board state container: 20x20 grid of marks plus per-cell 'latest' highlight flags."""

import enum
from typing import NamedTuple

BOARD_SIZE = 20
WIN_LENGTH = 5


class Mark(enum.IntEnum):
    EMPTY = 0
    A = 1    # engine's own mark ("O")
    B = -1   # opponent's mark ("X")

    @property
    def opponent(self):
        if self is Mark.EMPTY:
            return Mark.EMPTY
        return Mark.B if self is Mark.A else Mark.A

    @property
    def zobrist_index(self):
        return 1 if self is Mark.A else 0


class Move(NamedTuple):
    row: int
    col: int


class Board:
    def __init__(self, size=BOARD_SIZE):
        # cells[row][col] holds a Mark; latest[row][col] is presentation only
        self.size = size
        self.cells = [[Mark.EMPTY] * size for _ in range(size)]
        self.latest = [[False] * size for _ in range(size)]
        self.move_count = 0

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row, col):
        return self.cells[row][col]

    def set(self, row, col, mark, latest=False):
        """Overwrite one cell. No validation; callers guard coordinates."""
        before = self.cells[row][col]
        if before == Mark.EMPTY and mark != Mark.EMPTY:
            self.move_count += 1
        elif before != Mark.EMPTY and mark == Mark.EMPTY:
            self.move_count -= 1
        self.cells[row][col] = Mark(mark)
        self.latest[row][col] = bool(latest)

    def is_empty(self):
        """True iff no cell carries a mark."""
        return self.move_count == 0

    def is_full(self):
        return self.move_count == self.size * self.size

    def is_free(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == Mark.EMPTY

    def place(self, row, col, mark):
        """Place a stone for play; raise if out of bounds, occupied or not a player mark."""
        if mark not in (Mark.A, Mark.B):
            raise ValueError("mark must be Mark.A or Mark.B")
        if not self.in_bounds(row, col):
            raise ValueError("move out of bounds")
        if self.cells[row][col] != Mark.EMPTY:
            raise ValueError("cell already occupied")
        self.clear_latest()
        self.set(row, col, mark, latest=True)

    def clear(self, row, col):
        self.set(row, col, Mark.EMPTY, latest=False)

    def clear_latest(self):
        for row in self.latest:
            for col in range(self.size):
                row[col] = False

    def occupied(self):
        """Yield (row, col, mark) for every stone in row-major order."""
        for r in range(self.size):
            row = self.cells[r]
            for c in range(self.size):
                if row[c] != Mark.EMPTY:
                    yield r, c, row[c]

    def clone(self):
        new_board = Board(self.size)
        new_board.cells = [row[:] for row in self.cells]
        new_board.latest = [row[:] for row in self.latest]
        new_board.move_count = self.move_count
        return new_board

    def swapped(self):
        """Copy with A and B exchanged, so the engine can search for the B side."""
        new_board = self.clone()
        new_board.cells = [[mark.opponent for mark in row] for row in self.cells]
        return new_board

    def _push_stone(self, row, col, mark):
        """Search-time apply; pair with _pop_stone."""
        self.cells[row][col] = mark
        self.latest[row][col] = True
        self.move_count += 1

    def _pop_stone(self, row, col):
        self.cells[row][col] = Mark.EMPTY
        self.latest[row][col] = False
        self.move_count -= 1
