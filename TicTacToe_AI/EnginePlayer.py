"""Search-engine player. One SearchContext per game session, reused across its moves."""

from .Board import Mark
from .Player import Player
from .ai import difficulty, search_minimax, transposition


class EnginePlayer(Player):
    def __init__(self, mark=Mark.A, level=difficulty.DEFAULT_LEVEL, table=None,
                 max_entries=transposition.MAX_TRANSPOSITION_ENTRIES):
        super().__init__(mark)
        self.level = level
        self.settings = difficulty.get_difficulty_settings(level, table=table)
        self.max_entries = max_entries
        self.context = None
        self.stats = []

    def next_move(self, board):
        if self.context is None or self.context.size != board.size:
            self.context = search_minimax.SearchContext(size=board.size, max_entries=self.max_entries)

        # The engine always searches as Mark.A; mirror the board to play B.
        view = board if self.mark == Mark.A else board.swapped()
        return search_minimax.find_best_move(
            view,
            max_depth=self.settings.depth,
            radius=self.settings.range,
            candidate_limit=self.settings.candidate_limit,
            context=self.context,
            stats=self.stats,
        )
