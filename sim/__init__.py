from .base import BaseSim, StepResult
from .life_sim import LifeSimulation, METHODS
from .config import ConfigError, PatternPlacement, SimConfig, build_config, load_config, parse_placement
from .runner import make_simulation, run

__all__ = [
    "BaseSim",
    "StepResult",
    "LifeSimulation",
    "METHODS",
    "ConfigError",
    "PatternPlacement",
    "SimConfig",
    "build_config",
    "load_config",
    "parse_placement",
    "make_simulation",
    "run",
]
