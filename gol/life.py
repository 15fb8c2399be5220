from __future__ import annotations

from typing import Optional

import numpy as np

from .grid import Board, CellState, PosLike, Position


NEIGHBOR_OFFSETS = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def count_live(board: Board, pos: PosLike) -> int:
    """Number of live cells among the 8 neighbors of `pos`, in [0, 8].

    Each neighbor is looked up through the board accessor, so cells on an
    edge or corner see the opposite edge or corner.
    """
    x, y = pos
    return sum(int(board.get(Position(x + dx, y + dy))) for dx, dy in NEIGHBOR_OFFSETS)


def next_state(state: CellState, live_count: int) -> CellState:
    """Conway's Life (B3/S23) for a single cell.

    Birth: a dead cell with exactly three live neighbors becomes alive.
    Isolation: a live cell with one or fewer live neighbors dies.
    Overcrowding: a live cell with four or more live neighbors dies.
    Survival: a live cell with two or three live neighbors stays alive.
    """
    if CellState(state) is CellState.ALIVE:
        if live_count <= 1 or live_count >= 4:
            return CellState.DEAD
        return CellState.ALIVE
    if live_count == 3:
        return CellState.ALIVE
    return CellState.DEAD


def next_cell_state(board: Board, pos: PosLike) -> CellState:
    return next_state(board.get(pos), count_live(board, pos))


def advance(board: Board, scratch: Optional[Board] = None) -> Board:
    """Advance `board` by one generation in place.

    All next states are computed into `scratch` against the unchanged board,
    then committed together. Writing into `board` during the scan would let
    later cells see already-updated neighbors.

    Args:
        board: the current generation; overwritten with the next one.
        scratch: working buffer of the same shape, reused across calls.
            Allocated when omitted.

    Returns:
        `board`.
    """
    if scratch is None:
        scratch = Board(board.width, board.height)
    elif scratch.shape != board.shape:
        raise ValueError(f"scratch shape {scratch.shape} does not match board shape {board.shape}")
    for y in range(board.height):
        for x in range(board.width):
            pos = Position(x, y)
            scratch.set(pos, next_cell_state(board, pos))
    board.copy_from(scratch)
    return board


def neighbor_counts(cells: np.ndarray) -> np.ndarray:
    """Live-neighbor count of every cell of a (H, W) array on the torus.

    Each offset in NEIGHBOR_OFFSETS is one `np.roll` of the whole array, so
    rows and columns wrap exactly like `count_live`.
    """
    if cells.ndim != 2:
        raise ValueError(f"cells must be 2D, got shape {cells.shape}")
    live = (cells == CellState.ALIVE).astype(np.int16)
    counts = np.zeros(cells.shape, dtype=np.int16)
    for dx, dy in NEIGHBOR_OFFSETS:
        # the neighbor at (x + dx, y + dy) moves onto (x, y)
        counts += np.roll(live, (-dy, -dx), axis=(0, 1))
    return counts


def life_step(cells: np.ndarray) -> np.ndarray:
    """Next generation of a whole (H, W) array, as uint8 CellState values."""
    counts = neighbor_counts(cells)
    alive = cells == CellState.ALIVE
    nxt = np.full(cells.shape, CellState.DEAD, dtype=np.uint8)
    nxt[alive & ((counts == 2) | (counts == 3))] = CellState.ALIVE
    nxt[~alive & (counts == 3)] = CellState.ALIVE
    return nxt


def advance_array(board: Board) -> Board:
    """Same generation as `advance`, computed on the whole array at once."""
    np.copyto(board.cells, life_step(board.cells))
    return board
