"""Engine boundary: {board, difficulty} request in, {row, col} | None out."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .Board import BOARD_SIZE, Board, Mark
from .ai import difficulty as difficulty_mod
from .ai import search_minimax

LOGGER = logging.getLogger(__name__)

# Wire labels: "A"/"B" plus the "O"/"X" spelling used by the game frontend.
MARK_LABELS = {
    None: Mark.EMPTY,
    "A": Mark.A,
    "O": Mark.A,
    "B": Mark.B,
    "X": Mark.B,
}
WIRE_LABELS = {Mark.EMPTY: None, Mark.A: "A", Mark.B: "B"}


class InvalidRequestError(ValueError):
    """Raised when a move request does not describe a well-formed board."""


@dataclass
class MoveRequest:
    board: Board
    difficulty: float = difficulty_mod.DEFAULT_LEVEL


def board_from_rows(rows, size=BOARD_SIZE) -> Board:
    """Build a Board from [[{"mark": ..., "latest": ...}, ...], ...]; fail fast on bad shape."""
    if not isinstance(rows, list) or len(rows) != size:
        raise InvalidRequestError(f"board must be a list of {size} rows")
    board = Board(size)
    for r, row in enumerate(rows):
        if not isinstance(row, list) or len(row) != size:
            raise InvalidRequestError(f"row {r} must be a list of {size} cells")
        for c, cell in enumerate(row):
            if not isinstance(cell, dict):
                raise InvalidRequestError(f"cell ({r}, {c}) must be an object")
            label = cell.get("mark")
            if not (label is None or isinstance(label, str)) or label not in MARK_LABELS:
                raise InvalidRequestError(f"cell ({r}, {c}) has unknown mark {label!r}")
            board.set(r, c, MARK_LABELS[label], latest=bool(cell.get("latest", False)))
    return board


def board_to_rows(board: Board) -> list[list[dict]]:
    return [
        [{"mark": WIRE_LABELS[board.cells[r][c]], "latest": board.latest[r][c]} for c in range(board.size)]
        for r in range(board.size)
    ]


def parse_request(payload, size=BOARD_SIZE) -> MoveRequest:
    if not isinstance(payload, dict):
        raise InvalidRequestError("request must be an object")
    if "board" not in payload:
        raise InvalidRequestError("request is missing 'board'")
    level = payload.get("difficulty")
    if level is None:
        level = difficulty_mod.DEFAULT_LEVEL
    elif isinstance(level, bool) or not isinstance(level, (int, float)):
        raise InvalidRequestError("difficulty must be a number")
    return MoveRequest(board=board_from_rows(payload["board"], size=size), difficulty=level)


def compute_ai_move(request: MoveRequest, context=None, table=None) -> dict | None:
    """Pick Mark.A's reply. The request board is left exactly as it came in."""
    settings = difficulty_mod.get_difficulty_settings(request.difficulty, table=table)
    LOGGER.debug("Difficulty %s -> %s", request.difficulty, settings)
    move = search_minimax.find_best_move(
        request.board,
        max_depth=settings.depth,
        radius=settings.range,
        candidate_limit=settings.candidate_limit,
        context=context,
    )
    if move is None:
        return None
    return {"row": move.row, "col": move.col}


def handle_payload(payload, context=None, table=None) -> dict | None:
    """Parse a raw request mapping and answer it."""
    return compute_ai_move(parse_request(payload), context=context, table=table)
