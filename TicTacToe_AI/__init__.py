"""TicTacToe_AI package exports."""

from .Board import Board, Mark, Move
from .Game import TicTacToeGame
from .Player import Player, HumanPlayer
from .EnginePlayer import EnginePlayer
from .api import InvalidRequestError, MoveRequest, compute_ai_move, parse_request

# Subpackages for rules, AI search, terminal view, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "Mark",
    "Move",
    "TicTacToeGame",
    "Player",
    "HumanPlayer",
    "EnginePlayer",
    "InvalidRequestError",
    "MoveRequest",
    "compute_ai_move",
    "parse_request",
    "ai",
    "engine",
    "gui",
    "utils",
]
