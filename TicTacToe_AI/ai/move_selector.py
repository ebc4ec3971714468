"""Candidate move generation (proximity-scored, top-N filtering)."""

from ..Board import Mark, Move

OWN_NEIGHBOR_SCORE = 3.0
OPPONENT_NEIGHBOR_SCORE = 4.0  # defensive bias: opponent stones pull harder


def distance_weight(distance):
    """1.0 for an adjacent stone, halving with every further Chebyshev step."""
    return 0.5 ** (distance - 1)


def generate_candidates(board, radius=2, limit=15, color=Mark.A):
    """
    Return up to `limit` empty cells that have a stone within Chebyshev `radius`.
    - Score = sum of base score (own vs opponent) * distance weight per neighbor.
    - Sorted by score, descending; equal scores keep row-major order.
    - An empty board yields no candidates (the caller plays the center instead).
    """
    size = board.size
    cells = board.cells
    scored = []

    for r in range(size):
        r_lo, r_hi = max(0, r - radius), min(size - 1, r + radius)
        for c in range(size):
            if cells[r][c] != Mark.EMPTY:
                continue
            c_lo, c_hi = max(0, c - radius), min(size - 1, c + radius)
            has_neighbor = False
            score = 0.0
            for nr in range(r_lo, r_hi + 1):
                row = cells[nr]
                for nc in range(c_lo, c_hi + 1):
                    neighbor = row[nc]
                    if neighbor == Mark.EMPTY:
                        continue
                    has_neighbor = True
                    distance = max(abs(nr - r), abs(nc - c))
                    base = OWN_NEIGHBOR_SCORE if neighbor == color else OPPONENT_NEIGHBOR_SCORE
                    score += base * distance_weight(distance)
            if has_neighbor:
                scored.append((Move(r, c), score))

    ranked = sorted(scored, key=lambda kv: kv[1], reverse=True)
    return [mv for mv, _ in ranked[:limit]]
