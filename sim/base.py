from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import numpy as np


@dataclass
class StepResult:
    board: np.ndarray
    generation: int
    population: int
    info: Dict[str, Any] = field(default_factory=dict)


class BaseSim:
    """Generation counter plus a seeded random source.

    Subclasses fill the board in `reset` and advance it in `step`.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self.np_random = np.random.default_rng(seed)
        self.generation = 0

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        if seed is not None:
            self._seed = int(seed)
        # A fixed seed replays the same random fill after every reset.
        self.np_random = np.random.default_rng(self._seed)
        self.generation = 0
        return None

    def step(self) -> StepResult:
        raise NotImplementedError
