"""Difficulty level (1-5) to search parameters; `difficulty_levels` settings override the table."""

import math
from dataclasses import dataclass


MIN_LEVEL = 1
MAX_LEVEL = 5
DEFAULT_LEVEL = 3


@dataclass(frozen=True)
class DifficultySettings:
    depth: int
    range: int
    candidate_limit: int


DEFAULT_TABLE = {
    1: DifficultySettings(depth=1, range=1, candidate_limit=6),
    2: DifficultySettings(depth=2, range=2, candidate_limit=10),
    3: DifficultySettings(depth=3, range=2, candidate_limit=15),
    4: DifficultySettings(depth=4, range=3, candidate_limit=20),
    5: DifficultySettings(depth=5, range=3, candidate_limit=25),
}


def clamp_level(level):
    """Clamp into [1, 5], then round half-up. NaN maps to the default level."""
    level = float(level)
    if math.isnan(level):
        return DEFAULT_LEVEL
    level = min(MAX_LEVEL, max(MIN_LEVEL, level))
    return int(math.floor(level + 0.5))


def get_difficulty_settings(level, table=None):
    table = table or DEFAULT_TABLE
    return table[clamp_level(level)]


def table_from_mapping(levels):
    """Merge a {level: {depth, range, candidate_limit}} mapping over the defaults."""
    table = dict(DEFAULT_TABLE)
    for level, item in levels.items():
        level = int(level)
        if not MIN_LEVEL <= level <= MAX_LEVEL or not item:
            continue
        base = DEFAULT_TABLE[level]
        table[level] = DifficultySettings(
            depth=int(item.get("depth", base.depth)),
            range=int(item.get("range", base.range)),
            candidate_limit=int(item.get("candidate_limit", base.candidate_limit)),
        )
    return table
