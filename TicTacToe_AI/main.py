"""Entry point. Load config, then play a terminal game or answer one move request."""

import json
import logging
import sys
from pathlib import Path

import yaml

from .Board import BOARD_SIZE, Mark
from .EnginePlayer import EnginePlayer
from .Game import TicTacToeGame
from .Player import HumanPlayer
from .ai import difficulty, transposition
from .api import InvalidRequestError, compute_ai_move, parse_request
from .gui.text_view import TextView
from .utils.cli import parse_args
from .utils.logger import configure_logging, log_event

LOGGER = logging.getLogger(__name__)

PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path):
    """Resolve a package-relative path when invoked from outside `TicTacToe_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        LOGGER.warning("Settings file %s not found; using defaults", path)
        return {}


def read_request(source):
    if source == "-":
        return json.load(sys.stdin)
    with open(source, "r", encoding="utf-8") as f:
        return json.load(f)


def solve(args, settings, table):
    board_size = args.board_size or settings.get("board_size", BOARD_SIZE)
    try:
        request = parse_request(read_request(args.request), size=board_size)
    except (InvalidRequestError, FileNotFoundError, json.JSONDecodeError) as exc:
        print(f"Invalid request: {exc}", file=sys.stderr)
        return 2
    move = compute_ai_move(request, table=table)
    print(json.dumps(move))
    return 0


def build_players(mode, level, table, max_entries):
    def engine(mark):
        return EnginePlayer(mark=mark, level=level, table=table, max_entries=max_entries)

    if mode == "human-vs-ai":
        return {Mark.B: HumanPlayer(Mark.B), Mark.A: engine(Mark.A)}
    if mode == "ai-vs-human":
        return {Mark.B: engine(Mark.B), Mark.A: HumanPlayer(Mark.A)}
    if mode == "ai-vs-ai":
        return {Mark.B: engine(Mark.B), Mark.A: engine(Mark.A)}
    if mode == "human-vs-human":
        return {Mark.B: HumanPlayer(Mark.B), Mark.A: HumanPlayer(Mark.A)}
    raise ValueError(f"Unsupported mode: {mode}")


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)
    configure_logging(args.log_level or settings.get("log_level", "WARNING"))

    table = difficulty.table_from_mapping(settings.get("difficulty_levels") or {})
    if args.mode == "solve":
        return solve(args, settings, table)

    board_size = args.board_size or settings.get("board_size", BOARD_SIZE)
    level = args.difficulty if args.difficulty is not None else settings.get("difficulty", difficulty.DEFAULT_LEVEL)
    max_entries = settings.get("max_transposition_entries", transposition.MAX_TRANSPOSITION_ENTRIES)

    players = build_players(args.mode, level, table, max_entries)
    view = TextView()
    game = TicTacToeGame(players, board_size=board_size, logger=log_event, renderer=view.render)
    result = game.play()
    outcome = {Mark.B: "X wins", Mark.A: "O wins", Mark.EMPTY: "Draw"}
    print(outcome.get(result, "Unknown result"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
