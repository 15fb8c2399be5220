from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple, Tuple, Union

import numpy as np


class CellState(IntEnum):
    DEAD = 0
    ALIVE = 1


class Position(NamedTuple):
    x: int
    y: int


PosLike = Union[Position, Tuple[int, int]]


def wrap(pos: PosLike, width: int, height: int) -> Position:
    """Map any integer (x, y) onto [0, width) x [0, height).

    Python's % is floored, so x = -1 on width 64 gives 63.
    """
    x, y = pos
    return Position(int(x) % width, int(y) % height)


class Board:
    """Fixed-size toroidal grid of cell states.

    Cells live in a uint8 array of shape (height, width) indexed [y, x].
    Every read and write goes through `wrap`, so no position is out of bounds.
    """

    def __init__(self, width: int, height: int):
        for name, v in (("width", width), ("height", height)):
            try:
                integral = not isinstance(v, bool) and int(v) == v
            except (TypeError, ValueError, OverflowError):
                integral = False
            if not integral:
                raise ValueError(f"{name} must be an integer, got {v!r}")
            if v <= 0:
                raise ValueError(f"{name} must be positive, got {v!r}")
        self.width = int(width)
        self.height = int(height)
        self.cells = np.zeros((self.height, self.width), dtype=np.uint8)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cells.shape

    def get(self, pos: PosLike) -> CellState:
        x, y = wrap(pos, self.width, self.height)
        return CellState(int(self.cells[y, x]))

    def set(self, pos: PosLike, state: CellState) -> None:
        x, y = wrap(pos, self.width, self.height)
        self.cells[y, x] = CellState(state)

    def clear(self) -> None:
        self.cells.fill(CellState.DEAD)

    def copy(self) -> "Board":
        out = Board(self.width, self.height)
        out.cells[...] = self.cells
        return out

    def copy_from(self, other: "Board") -> None:
        """Replace this board's contents with `other`'s in one step."""
        if other.shape != self.shape:
            raise ValueError(f"shape mismatch: expected {self.shape}, got {other.shape}")
        np.copyto(self.cells, other.cells)

    def population(self) -> int:
        return int(np.count_nonzero(self.cells))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.cells, other.cells))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, population={self.population()})"


def get_cell(board: Board, pos: PosLike) -> CellState:
    return board.get(pos)


def set_cell(board: Board, pos: PosLike, state: CellState) -> None:
    board.set(pos, state)
