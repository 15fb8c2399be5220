from __future__ import annotations

import argparse
import os
import sys
from typing import Any, Dict, List, Optional

# Ensure repo root on path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from gol.patterns import PATTERNS, pattern_names
from sim.config import ConfigError, build_config, parse_placement
from sim.runner import run


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Conway's Game of Life on a toroidal board, rendered to the terminal.")
    ap.add_argument("--width", type=int, help="board width (default 64)")
    ap.add_argument("--height", type=int, help="board height (default 32)")
    ap.add_argument("--delay", type=float, help="seconds between generations (default 0.1)")
    ap.add_argument("--alive", type=str, help="symbol for live cells (default 'O')")
    ap.add_argument("--dead", type=str, help="symbol for dead cells (default ' ')")
    ap.add_argument("--border", type=str, help="symbol for the frame (default '#')")
    ap.add_argument("--pattern", action="append", dest="patterns", metavar="NAME[@X,Y]",
                    help="seed pattern, repeatable; anchored at the centre unless X,Y given (default r-pentomino)")
    ap.add_argument("--density", type=float, help="random fill probability in [0, 1]")
    ap.add_argument("--seed", type=int, help="random seed for --density")
    ap.add_argument("--method", choices=["cell", "array"], help="advance cell by cell or on the whole array")
    ap.add_argument("--max-generations", type=int, help="stop after this many generations (default: run forever)")
    ap.add_argument("--clear", action="store_true", dest="clear_screen", default=None, help="clear the terminal before each frame")
    ap.add_argument("--no-stats", action="store_false", dest="stats", default=None, help="do not print the generation/population line")
    ap.add_argument("--log-csv", type=str, help="append generation,population rows to this CSV file")
    ap.add_argument("--list-patterns", action="store_true", help="list the available seed patterns and exit")
    return ap


def overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    cfg = {k: v for k, v in vars(args).items() if k != "list_patterns"}
    if args.patterns:
        cfg["patterns"] = [parse_placement(p) for p in args.patterns]
    return cfg


def list_patterns() -> None:
    for name in pattern_names():
        print(f"{name}: {len(PATTERNS[name])} cells")


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.list_patterns:
        list_patterns()
        return 0
    try:
        overrides = overrides_from_args(args)
        config = build_config(overrides)
    except ConfigError as e:
        ap.error(str(e))
    try:
        run(config)
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
