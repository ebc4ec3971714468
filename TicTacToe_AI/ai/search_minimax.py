"""Minimax with alpha-beta pruning and a transposition table, behind a root tactical cascade."""

import logging
import time

from ..Board import BOARD_SIZE, Mark, Move
from ..engine import rules
from . import heuristic
from . import move_selector
from . import tactics
from . import transposition

LOGGER = logging.getLogger(__name__)

MAX_SCORE = 1_000_000
INF = float("inf")
# Inner nodes always expand this neighbourhood, whatever the root parameters are.
SUBSEARCH_RADIUS = 2
SUBSEARCH_LIMIT = 15


class SearchContext:
    """Zobrist table plus transposition cache, owned by one game session or one call."""

    def __init__(self, size=BOARD_SIZE, zobrist_table=None, max_entries=transposition.MAX_TRANSPOSITION_ENTRIES):
        self.size = size
        self.zobrist_table = transposition.default_zobrist(size) if zobrist_table is None else zobrist_table
        self.cache = transposition.TranspositionTable(max_entries)


class MinimaxSearcher:
    """Encapsulates the state and logic for one search from the engine's (Mark.A) side."""

    def __init__(self, context, depth, radius, candidate_limit, stats=None):
        self.context = context
        self.color = Mark.A
        self.depth = depth
        self.radius = radius
        self.candidate_limit = candidate_limit
        self.cache = context.cache
        self.zobrist_table = context.zobrist_table
        self.stats_list = stats

        self.node_counter = 0
        self.start_time = None

    def choose_move(self, board):
        """Return the best move for Mark.A, or None when nothing is left to play."""
        self.start_time = time.time()
        self.node_counter = 0

        if board.is_empty():
            center = board.size // 2
            return Move(center, center)

        # Tactical guardrails, root only: the recursive search never applies them.
        win_move = tactics.find_immediate_winning_move(board, self.color)
        if win_move is not None:
            LOGGER.debug("Immediate win at %s", win_move)
            return win_move
        block_move = tactics.find_immediate_winning_move(board, self.color.opponent)
        if block_move is not None:
            LOGGER.debug("Blocking immediate loss at %s", block_move)
            return block_move
        setup_move = tactics.find_open_four_setup_move(board, self.color)
        if setup_move is not None:
            LOGGER.debug("Open-four setup at %s", setup_move)
            return setup_move
        threat_move = tactics.find_threat_blocking_move(board, self.color.opponent)
        if threat_move is not None:
            LOGGER.debug("Blocking threat at %s", threat_move)
            return threat_move

        best_move = self._search_root(board)

        if self.stats_list is not None:
            self._record_stats()

        return best_move

    def _search_root(self, board):
        root_hash = transposition.hash_board(board, self.zobrist_table)
        candidates = move_selector.generate_candidates(
            board,
            radius=self.radius,
            limit=self.candidate_limit,
            color=self.color,
        )
        if not candidates:
            return None

        best_move = None
        best_score = -INF
        for move in candidates:
            row, col = move
            board._push_stone(row, col, self.color)
            next_hash = transposition.apply_move_hash(root_hash, row, col, self.color, self.zobrist_table)
            try:
                if rules.check_winner(board) == self.color:
                    return move
                score = self.alphabeta(board, self.depth - 1, -INF, INF, False, next_hash)
            finally:
                board._pop_stone(row, col)

            if score > best_score:
                best_score = score
                best_move = move

        LOGGER.debug("Search picked %s (score %s, %d nodes)", best_move, best_score, self.node_counter)
        return best_move

    def alphabeta(self, board, depth, alpha, beta, maximizing, current_hash):
        self.node_counter += 1

        cached = self.cache.lookup(current_hash, maximizing, depth)
        if cached is not None:
            return cached

        # Remaining depth is added so faster wins and slower losses score higher.
        winner = rules.check_winner(board)
        if winner == self.color:
            return MAX_SCORE + depth
        if winner == self.color.opponent:
            return -MAX_SCORE - depth
        if depth <= 0:
            return heuristic.evaluate(board, self.color)

        moves = move_selector.generate_candidates(
            board,
            radius=SUBSEARCH_RADIUS,
            limit=SUBSEARCH_LIMIT,
            color=self.color,
        )
        if not moves:
            return 0.0  # draw

        node_color = self.color if maximizing else self.color.opponent
        value = -INF if maximizing else INF
        for row, col in moves:
            board._push_stone(row, col, node_color)
            next_hash = transposition.apply_move_hash(current_hash, row, col, node_color, self.zobrist_table)
            try:
                score = self.alphabeta(board, depth - 1, alpha, beta, not maximizing, next_hash)
            finally:
                board._pop_stone(row, col)

            if maximizing:
                value = max(value, score)
                alpha = max(alpha, value)
            else:
                value = min(value, score)
                beta = min(beta, value)
            if alpha >= beta:
                break

        self.cache.store(current_hash, maximizing, depth, value)
        return value

    def _record_stats(self):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
        })


def find_best_move(board, max_depth=5, radius=2, candidate_limit=15, context=None, stats=None):
    """
    Public function to start a search. Builds a per-call SearchContext unless one is given.
    The board is restored before returning; the returned move is not applied.
    """
    if context is None:
        context = SearchContext(size=board.size)
    elif context.size != board.size:
        raise ValueError(f"search context is for size {context.size}, board is {board.size}")
    searcher = MinimaxSearcher(
        context,
        depth=max_depth,
        radius=radius,
        candidate_limit=candidate_limit,
        stats=stats,
    )
    return searcher.choose_move(board)
