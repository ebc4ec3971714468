"""Abstract player interface for human or AI controllers."""

from .Board import Move


class Player:
    def __init__(self, mark):
        self.mark = mark

    def next_move(self, board):
        """Return Move(row, col), or None to concede that no move is left."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, mark, input_fn=input):
        super().__init__(mark)
        self.input_fn = input_fn

    def next_move(self, board):
        """Text-input player; expects 'row col' (0-indexed)."""
        raw = self.input_fn(f"{self.mark.name} move as 'row col' (0-indexed): ").strip()
        try:
            row_str, col_str = raw.split()
            return Move(int(row_str), int(col_str))
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc
