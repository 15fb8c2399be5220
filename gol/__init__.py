from .grid import Board, CellState, Position, get_cell, set_cell, wrap
from .life import (
    NEIGHBOR_OFFSETS,
    advance,
    advance_array,
    count_live,
    life_step,
    neighbor_counts,
    next_cell_state,
    next_state,
)
from .patterns import PATTERNS, get_pattern, pattern_names, place_cells, place_pattern, seed_random
from .render import CLEAR_SCREEN, render_board

__all__ = [
    "Board",
    "CellState",
    "Position",
    "get_cell",
    "set_cell",
    "wrap",
    "NEIGHBOR_OFFSETS",
    "advance",
    "advance_array",
    "count_live",
    "life_step",
    "neighbor_counts",
    "next_cell_state",
    "next_state",
    "PATTERNS",
    "get_pattern",
    "pattern_names",
    "place_cells",
    "place_pattern",
    "seed_random",
    "CLEAR_SCREEN",
    "render_board",
]
