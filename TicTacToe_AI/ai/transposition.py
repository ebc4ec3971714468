"""Zobrist hashing and transposition table helpers."""

import functools
import logging

LOGGER = logging.getLogger(__name__)

ZOBRIST_SEED = 0x9E3779B1
MULBERRY_INCREMENT = 0x6D2B79F5
MASK32 = 0xFFFFFFFF
MAX_TRANSPOSITION_ENTRIES = 100_000


class Mulberry32:
    """Deterministic 32-bit generator (mulberry32)."""

    def __init__(self, seed):
        self.state = seed & MASK32

    def next_uint32(self):
        self.state = (self.state + MULBERRY_INCREMENT) & MASK32
        t = self.state
        t = ((t ^ (t >> 15)) * (t | 1)) & MASK32
        t ^= (t + ((t ^ (t >> 7)) * (t | 61))) & MASK32
        return (t ^ (t >> 14)) & MASK32


def zobrist_init(size=20, seed=ZOBRIST_SEED):
    """Build a size x size x 2 table; draws run row-major, index 0 before 1 per cell."""
    rng = Mulberry32(seed)
    table = []
    for _ in range(size):
        row = []
        for _ in range(size):
            row.append((rng.next_uint32(), rng.next_uint32()))
        table.append(row)
    return table


@functools.lru_cache(maxsize=None)
def default_zobrist(size=20):
    """Process-wide table for `size`, built once and treated as read-only."""
    return tuple(tuple(row) for row in zobrist_init(size))


def hash_board(board, table):
    """Compute the Zobrist hash of every occupied cell."""
    h = 0
    for r, c, mark in board.occupied():
        h ^= table[r][c][mark.zobrist_index]
    return h


def apply_move_hash(h, row, col, mark, table):
    """XOR one cell/mark entry into the running hash; applying it twice undoes it."""
    return h ^ table[row][col][mark.zobrist_index]


class TranspositionTable:
    """(hash, maximizing) -> (depth, value), wiped wholesale once it grows past its cap."""

    def __init__(self, max_entries=MAX_TRANSPOSITION_ENTRIES):
        self.max_entries = max_entries
        self._entries = {}

    def __len__(self):
        return len(self._entries)

    def lookup(self, h, maximizing, depth):
        """Return the cached value only if it was searched at least `depth` plies deep."""
        cached = self._entries.get((h, maximizing))
        if cached is None:
            return None
        cached_depth, cached_value = cached
        if cached_depth >= depth:
            return cached_value
        return None

    def store(self, h, maximizing, depth, value):
        if len(self._entries) > self.max_entries:
            LOGGER.debug("Transposition table exceeded %d entries; clearing", self.max_entries)
            self._entries.clear()
        self._entries[(h, maximizing)] = (depth, value)
