"""Seed patterns, stored as (dx, dy) offsets from an anchor cell."""
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

import numpy as np

from .grid import Board, CellState, PosLike, Position


Offsets = Tuple[Tuple[int, int], ...]

PATTERNS: Dict[str, Offsets] = {
    # Methuselah, stabilizes after 1103 generations on an unbounded plane
    "r-pentomino": ((1, 0), (2, 0), (0, 1), (1, 1), (1, 2)),
    # Still lifes
    "square": ((0, 0), (1, 0), (0, 1), (1, 1)),
    "beehive": ((1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)),
    # Period 2 oscillators
    "blinker": ((0, 0), (0, 1), (0, 2)),
    "toad": ((1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)),
    "beacon": ((0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)),
    # Spaceships
    "glider": ((1, 0), (2, 1), (0, 2), (1, 2), (2, 2)),
    "lwss": ((1, 0), (4, 0), (0, 1), (0, 2), (4, 2), (0, 3), (1, 3), (2, 3), (3, 3)),
}


def pattern_names() -> List[str]:
    return sorted(PATTERNS)


def get_pattern(name: str) -> Offsets:
    """Return the offsets of a named pattern."""
    try:
        return PATTERNS[name]
    except KeyError:
        raise ValueError(f"Pattern '{name}' not found. Available patterns: {pattern_names()}") from None


def place_cells(board: Board, offsets: Iterable[Tuple[int, int]], anchor: PosLike) -> None:
    ax, ay = anchor
    for dx, dy in offsets:
        board.set(Position(ax + dx, ay + dy), CellState.ALIVE)


def place_pattern(board: Board, name: str, anchor: PosLike) -> None:
    """Set the cells of pattern `name` alive relative to `anchor`.

    Placement wraps around the board edges like any other write.
    """
    place_cells(board, get_pattern(name), anchor)


def seed_random(board: Board, density: float, rng: np.random.Generator) -> None:
    """Set each cell alive with probability `density`; live cells stay alive."""
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be in [0, 1], got {density}")
    mask = rng.random(board.shape) < density
    board.cells[mask] = CellState.ALIVE
