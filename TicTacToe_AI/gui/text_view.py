"""Terminal renderer: prints the grid with the latest stone highlighted."""

from ..Board import Mark

SYMBOLS = {Mark.EMPTY: ".", Mark.A: "O", Mark.B: "X"}


def render_text(board):
    """Return the board as text; the latest stone is wrapped in brackets."""
    header = "    " + "".join(f"{c:>3}" for c in range(board.size))
    lines = [header]
    for r in range(board.size):
        cells = []
        for c in range(board.size):
            symbol = SYMBOLS[board.cells[r][c]]
            cells.append(f"[{symbol}]" if board.latest[r][c] else f" {symbol} ")
        lines.append(f"{r:>3} " + "".join(cells))
    return "\n".join(lines)


class TextView:
    def __init__(self, out=print):
        self.out = out

    def render(self, board, last_move, mark, game_result):
        self.out(render_text(board))
        if game_result is None:
            self.out(f"{SYMBOLS[mark]} to move")
        elif game_result == Mark.EMPTY:
            self.out("Draw")
        else:
            self.out(f"{SYMBOLS[game_result]} wins")
