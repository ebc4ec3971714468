"""Sliding-window evaluation for five-in-a-row positions."""

from ..Board import Mark
from ..engine import rules

WINDOW_BASE = 10


def window_score(marks, color):
    """Score one window for `color`: 10**k for k own stones, -10**k for k opponent stones, 0 if contested."""
    own = marks.count(color)
    opp = marks.count(color.opponent)
    if own and opp:
        return 0
    if own:
        return WINDOW_BASE ** own
    if opp:
        return -(WINDOW_BASE ** opp)
    return 0


def evaluate(board, color=Mark.A):
    """
    Static score of a non-terminal position. Positive favors `color`.
    Only windows that fit entirely on the board count; there is no positional term.
    """
    total = 0.0
    for _, marks in rules.iter_windows(board):
        total += window_score(marks, color)
    return total
