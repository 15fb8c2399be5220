from __future__ import annotations

from typing import Iterable, Optional, Tuple

import numpy as np

from .base import BaseSim, StepResult
from gol.grid import Board
from gol.life import advance, advance_array
from gol.patterns import place_pattern, seed_random
from gol.render import render_board

METHODS = ("cell", "array")

# (pattern name, anchor or None for the board centre)
Placement = Tuple[str, Optional[Tuple[int, int]]]


class LifeSimulation(BaseSim):
    """Game of Life on a fixed toroidal board.

    Owns the current board and a scratch board of the same size. The scratch
    board is allocated once and reused by every `step`.

    Placements: (name, anchor) pairs applied on `reset`; a None anchor means
    (width // 2, height // 2).
    Method: "cell" advances cell by cell through the board accessor,
    "array" uses the whole-array stepper. Both produce the same generation.
    """

    def __init__(
        self,
        width: int = 64,
        height: int = 32,
        placements: Iterable[Placement] = (("r-pentomino", None),),
        density: float = 0.0,
        method: str = "cell",
        seed: Optional[int] = None,
    ):
        super().__init__(seed=seed)
        if method not in METHODS:
            raise ValueError(f"method must be one of {METHODS}, got {method!r}")
        self.board = Board(width, height)
        self._scratch = Board(width, height)
        self.width = self.board.width
        self.height = self.board.height
        self.placements = list(placements)
        self.density = float(density)
        self.method = method

    @property
    def center(self) -> Tuple[int, int]:
        return self.width // 2, self.height // 2

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed, options=options)
        self.board.clear()
        for name, anchor in self.placements:
            place_pattern(self.board, name, anchor if anchor is not None else self.center)
        if self.density > 0:
            seed_random(self.board, self.density, self.np_random)
        return self.board.cells.copy()

    def step(self) -> StepResult:
        if self.method == "array":
            advance_array(self.board)
        else:
            advance(self.board, self._scratch)
        self.generation += 1
        return StepResult(
            board=self.board.cells.copy(),
            generation=self.generation,
            population=self.board.population(),
            info={"method": self.method},
        )

    def rollout(self, steps: int) -> np.ndarray:
        """Return (steps + 1, H, W): the current board then `steps` generations."""
        traj = np.empty((steps + 1, self.height, self.width), dtype=np.uint8)
        traj[0] = self.board.cells
        for t in range(1, steps + 1):
            traj[t] = self.step().board
        return traj

    def render(self, alive: str = "O", dead: str = " ", border: str = "#") -> str:
        return render_board(self.board, alive=alive, dead=dead, border=border)
