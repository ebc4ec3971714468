"""Move validation for the local game loop."""


def check_move(move, board):
    """
    Validate a move against bounds and occupancy.
    Raises ValueError on invalid moves.
    """
    if move is None:
        raise ValueError("No move given")
    try:
        row, col = move
    except (TypeError, ValueError) as exc:
        raise ValueError("Move must be a (row, col) pair") from exc
    if not board.in_bounds(row, col):
        raise ValueError("Move out of bounds")
    if not board.is_free(row, col):
        raise ValueError("Cell already occupied")
    return True
