"""CLI options for selecting players, difficulty, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Tic-tac-toe five-in-a-row engine (20x20)")
    parser.add_argument(
        "--mode",
        choices=["human-vs-ai", "ai-vs-human", "ai-vs-ai", "human-vs-human", "solve"],
        default="human-vs-ai",
        help="Play mode (who plays X/O), or 'solve' to answer one move request",
    )
    parser.add_argument("--difficulty", type=float, help="AI difficulty 1-5 (default from settings)")
    parser.add_argument("--board-size", type=int, help="Board size (default from settings, 20)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--request", default="-", help="Move request JSON for --mode solve ('-' for stdin)")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)
