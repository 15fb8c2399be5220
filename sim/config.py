from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml

from gol.patterns import PATTERNS, pattern_names
from .life_sim import METHODS


class ConfigError(ValueError):
    """Invalid configuration; the simulation cannot start."""


@dataclass
class PatternPlacement:
    name: str
    x: Optional[int] = None
    y: Optional[int] = None

    @property
    def anchor(self) -> Optional[Tuple[int, int]]:
        if self.x is None or self.y is None:
            return None
        return self.x, self.y

    def __str__(self) -> str:
        if self.anchor is None:
            return self.name
        return f"{self.name}@{self.x},{self.y}"


@dataclass
class SimConfig:
    width: int = 64
    height: int = 32
    delay: float = 0.1
    alive: str = "O"
    dead: str = " "
    border: str = "#"
    patterns: List[PatternPlacement] = field(default_factory=lambda: [PatternPlacement("r-pentomino")])
    density: float = 0.0
    seed: Optional[int] = None
    method: str = "cell"
    max_generations: Optional[int] = None
    clear_screen: bool = False
    stats: bool = True
    log_csv: str = ""

    def placements(self) -> List[Tuple[str, Optional[Tuple[int, int]]]]:
        return [(p.name, p.anchor) for p in self.patterns]


_PLACEMENT_RE = re.compile(r"^\s*([A-Za-z0-9_-]+)\s*(?:@\s*(-?\d+)\s*,\s*(-?\d+))?\s*$")


def parse_placement(text: str) -> PatternPlacement:
    """Parse "name" or "name@x,y" into a PatternPlacement."""
    m = _PLACEMENT_RE.match(text)
    if not m:
        raise ConfigError(f"bad pattern placement {text!r}; expected name or name@x,y")
    name, x, y = m.groups()
    if x is None:
        return PatternPlacement(name)
    return PatternPlacement(name, int(x), int(y))


def _placement(item: Any) -> PatternPlacement:
    if isinstance(item, PatternPlacement):
        p = item
    elif isinstance(item, str):
        p = parse_placement(item)
    elif isinstance(item, Mapping):
        extra = set(item) - {"name", "x", "y"}
        if extra or "name" not in item:
            raise ConfigError(f"pattern entry needs 'name' and optional 'x', 'y': {dict(item)!r}")
        if ("x" in item) != ("y" in item):
            raise ConfigError(f"pattern entry needs both 'x' and 'y' or neither: {dict(item)!r}")
        try:
            x = int(item["x"]) if "x" in item else None
            y = int(item["y"]) if "y" in item else None
        except (TypeError, ValueError):
            raise ConfigError(f"pattern anchor must be integers: {dict(item)!r}") from None
        p = PatternPlacement(str(item["name"]), x, y)
    else:
        raise ConfigError(f"bad pattern entry {item!r}")
    if p.name not in PATTERNS:
        raise ConfigError(f"unknown pattern {p.name!r}; available: {', '.join(pattern_names())}")
    return p


def _int(name: str, v: Any) -> int:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ConfigError(f"{name} must be an integer, got {v!r}")
    if isinstance(v, float) and not v.is_integer():
        raise ConfigError(f"{name} must be an integer, got {v!r}")
    return int(v)


def _positive_int(name: str, v: Any) -> int:
    n = _int(name, v)
    # zero would make the wraparound modulus undefined
    if n <= 0:
        raise ConfigError(f"{name} must be positive, got {v!r}")
    return n


def _single_char(name: str, v: Any) -> str:
    if not isinstance(v, str) or len(v) != 1:
        raise ConfigError(f"{name} symbol must be a single character, got {v!r}")
    return v


def _flag(name: str, v: Any) -> bool:
    if not isinstance(v, bool):
        raise ConfigError(f"{name} must be true or false, got {v!r}")
    return v


def build_config(overrides: Optional[Mapping[str, Any]] = None) -> SimConfig:
    """Merge `overrides` over the defaults and validate.

    Keys whose value is None keep their default. Unknown keys are an error.
    """
    cfg = SimConfig()
    known = set(SimConfig.__dataclass_fields__)
    values = {k: v for k, v in dict(overrides or {}).items() if v is not None}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")

    cfg.width = _positive_int("width", values.get("width", cfg.width))
    cfg.height = _positive_int("height", values.get("height", cfg.height))

    try:
        cfg.delay = float(values.get("delay", cfg.delay))
    except (TypeError, ValueError):
        raise ConfigError(f"delay must be a number, got {values['delay']!r}") from None
    if cfg.delay < 0:
        raise ConfigError(f"delay must be >= 0, got {cfg.delay}")

    cfg.alive = _single_char("alive", values.get("alive", cfg.alive))
    cfg.dead = _single_char("dead", values.get("dead", cfg.dead))
    cfg.border = _single_char("border", values.get("border", cfg.border))

    if "patterns" in values:
        items = values["patterns"]
        if isinstance(items, (str, Mapping, PatternPlacement)):
            items = [items]
        if not isinstance(items, (list, tuple)):
            raise ConfigError(f"patterns must be a list of placements, got {items!r}")
        cfg.patterns = [_placement(it) for it in items]

    try:
        cfg.density = float(values.get("density", cfg.density))
    except (TypeError, ValueError):
        raise ConfigError(f"density must be a number, got {values['density']!r}") from None
    if not 0.0 <= cfg.density <= 1.0:
        raise ConfigError(f"density must be in [0, 1], got {cfg.density}")

    if "seed" in values:
        cfg.seed = _int("seed", values["seed"])
        if cfg.seed < 0:
            raise ConfigError(f"seed must be >= 0, got {cfg.seed}")

    cfg.method = values.get("method", cfg.method)
    if cfg.method not in METHODS:
        raise ConfigError(f"method must be one of {', '.join(METHODS)}, got {cfg.method!r}")

    if "max_generations" in values:
        n = _int("max_generations", values["max_generations"])
        if n < 0:
            raise ConfigError(f"max_generations must be >= 0, got {n}")
        cfg.max_generations = n

    cfg.clear_screen = _flag("clear_screen", values.get("clear_screen", cfg.clear_screen))
    cfg.stats = _flag("stats", values.get("stats", cfg.stats))
    cfg.log_csv = str(values.get("log_csv", cfg.log_csv))
    return cfg


def load_config(path: str) -> Dict[str, Any]:
    with open(path, "r") as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"{path}: top level must be a mapping, got {type(cfg).__name__}")
    return cfg
