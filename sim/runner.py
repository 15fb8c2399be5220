from __future__ import annotations

import os
import sys
import threading
from typing import Optional, TextIO

from gol.render import CLEAR_SCREEN
from .config import SimConfig
from .life_sim import LifeSimulation


def make_simulation(config: SimConfig) -> LifeSimulation:
    sim = LifeSimulation(
        width=config.width,
        height=config.height,
        placements=config.placements(),
        density=config.density,
        method=config.method,
        seed=config.seed,
    )
    sim.reset()
    return sim


def run(
    config: SimConfig,
    *,
    out: Optional[TextIO] = None,
    stop_event: Optional[threading.Event] = None,
) -> LifeSimulation:
    """Render, advance and wait until stopped.

    Stops when `stop_event` is set (checked every tick and during the wait)
    or after `config.max_generations` advances. With no limit and no event
    the loop only ends on an exception such as KeyboardInterrupt.

    Returns the simulation in its final state.
    """
    out = out if out is not None else sys.stdout
    stop = stop_event if stop_event is not None else threading.Event()
    sim = make_simulation(config)

    # Prepare logging
    if config.log_csv:
        os.makedirs(os.path.dirname(config.log_csv) or ".", exist_ok=True)
        with open(config.log_csv, "w") as f:
            f.write("generation,population\n")
            f.write(f"{sim.generation},{sim.board.population()}\n")

    while not stop.is_set():
        if config.max_generations is not None and sim.generation >= config.max_generations:
            break
        frame = sim.render(alive=config.alive, dead=config.dead, border=config.border)
        if config.clear_screen:
            out.write(CLEAR_SCREEN)
        out.write(frame + "\n")
        if config.stats:
            out.write(f"generation={sim.generation} population={sim.board.population()}\n")
        out.flush()

        res = sim.step()
        if config.log_csv:
            with open(config.log_csv, "a") as f:
                f.write(f"{res.generation},{res.population}\n")

        # Best-effort delay; returns early once the event is set.
        if config.delay > 0:
            stop.wait(config.delay)
    return sim
