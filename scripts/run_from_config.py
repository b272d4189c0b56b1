from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, Dict

import yaml

# Ensure repo root on path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from scripts.run_life import run


def load_config(path: str) -> argparse.Namespace:
    with open(path, "r") as f:
        cfg: Dict[str, Any] = yaml.safe_load(f) or {}

    # Build argparse.Namespace compatible object
    defaults = dict(
        width=cfg.get("width", 10),
        height=cfg.get("height", 5),
        size=cfg.get("size", 0),
        pattern=cfg.get("patterns", []),
        random=cfg.get("random", False),
        density=cfg.get("density", 0.3),
        seed=cfg.get("seed", 42),
        generations=cfg.get("generations", 10),
        stop_when_extinct=cfg.get("stop_when_extinct", False),
        log_csv=cfg.get("log_csv", ""),
        log_level=cfg.get("log_level", "WARNING"),
    )
    return argparse.Namespace(**defaults)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", type=str, required=True, help="YAML config file")
    # Optional overrides
    ap.add_argument("--generations", type=int)
    ap.add_argument("--seed", type=int)
    args = ap.parse_args()

    ns = load_config(args.config)
    if args.generations is not None:
        ns.generations = args.generations
    if args.seed is not None:
        ns.seed = args.seed

    logging.basicConfig(level=str(ns.log_level).upper(), format="%(levelname)s %(name)s: %(message)s")
    run(ns)


if __name__ == "__main__":
    main()
