from __future__ import annotations

import argparse
import os
import sys
from typing import Any, Dict, List, Optional

# Ensure repo root on path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from sim.config import ConfigError, build_config, load_config
from sim.runner import run


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", type=str, required=True, help="YAML config file")
    # Optional overrides
    ap.add_argument("--max-generations", type=int)
    ap.add_argument("--delay", type=float)
    args = ap.parse_args(argv)

    try:
        cfg: Dict[str, Any] = load_config(args.config)
        # Override from CLI if provided
        if args.max_generations is not None:
            cfg["max_generations"] = args.max_generations
        if args.delay is not None:
            cfg["delay"] = args.delay
        config = build_config(cfg)
    except (ConfigError, OSError) as e:
        ap.error(str(e))

    try:
        run(config)
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
