"""Game loop and turn management: B ("X") opens, A ("O") answers, five in a row wins."""

from .Board import BOARD_SIZE, Board, Mark
from .engine import referee, rules
from .utils.logger import log_event


class TicTacToeGame:
    def __init__(self, players, board_size=BOARD_SIZE, logger=log_event, renderer=None, first=Mark.B):
        self.board = Board(size=board_size)
        self.players = dict(players)
        self.logger = logger
        self.renderer = renderer
        self.first = first
        self.move_index = 0

    def play(self):
        """Run a single game. Returns the winning Mark, or Mark.EMPTY for a draw."""
        mark = self.first
        game_result = None
        last_move = None
        while game_result is None:
            if self.renderer:
                self.renderer(self.board, last_move, mark, game_result)

            player = self.players[mark]
            try:
                move = player.next_move(self.board)
            except ValueError as exc:
                self.logger(f"Disqualification: {mark.name} - {exc}")
                game_result = mark.opponent
                break

            if move is None:
                self.logger(f"Result: Draw ({mark.name} has no move)")
                game_result = Mark.EMPTY
                break

            try:
                referee.check_move(move, self.board)
            except ValueError as exc:
                self.logger(f"Disqualification: {mark.name} - {exc}")
                game_result = mark.opponent
                break

            row, col = move
            self.board.place(row, col, mark)
            last_move = move
            self.logger(f"Move {self.move_index + 1}: {mark.name} ({row}, {col})")

            if rules.is_win_after_move(self.board, row, col):
                self.logger(f"Winner: {mark.name}")
                game_result = mark
            elif self.board.is_full():
                self.logger("Result: Draw (board full)")
                game_result = Mark.EMPTY

            mark = mark.opponent
            self.move_index += 1

        if self.renderer:
            self.renderer(self.board, last_move, mark, game_result)
        return game_result
