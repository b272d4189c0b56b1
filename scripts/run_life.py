from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Tuple

# Ensure repo root on path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from life import Table
from trajectories import place_pattern, random_table

logger = logging.getLogger(__name__)


def parse_placement(spec: str) -> Tuple[str, int, int]:
    """Parse ``name`` or ``name@x,y`` into (name, x, y)."""
    name, _, at = spec.partition("@")
    if not at:
        return name, 0, 0
    x, _, y = at.partition(",")
    return name, int(x), int(y)


def build_table(args: argparse.Namespace) -> Table:
    width = args.size or args.width
    height = args.size or args.height
    if args.random:
        table = random_table(width, height, density=args.density, seed=args.seed)
    else:
        table = Table.of_size(width, height)
    for spec in args.pattern or []:
        name, x, y = parse_placement(spec)
        place_pattern(table, name, x=x, y=y)
    return table


def run(args: argparse.Namespace) -> List[int]:
    """Print each generation and return the population history."""
    table = build_table(args)
    logger.info("starting %dx%d table, population=%d", table.width, table.height, table.population())

    if args.log_csv:
        os.makedirs(os.path.dirname(args.log_csv) or ".", exist_ok=True)
        with open(args.log_csv, "w") as f:
            f.write("generation,population\n")

    history = []
    for gen in range(args.generations):
        pop = table.population()
        history.append(pop)
        print(f"generation={gen} population={pop}")
        print(table.render())
        if args.log_csv:
            with open(args.log_csv, "a") as f:
                f.write(f"{gen},{pop}\n")
        if args.stop_when_extinct and not table.is_alive_anywhere():
            logger.info("extinct at generation %d", gen)
            break
        table.tick()
    return history


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Run Conway's Game of Life on a toroidal grid")
    ap.add_argument("--width", type=int, default=10)
    ap.add_argument("--height", type=int, default=5)
    ap.add_argument("--size", type=int, default=0, help="square grid side; overrides width/height")
    ap.add_argument("--pattern", action="append", help="pattern to place, e.g. glider@1,1 (repeatable)")
    ap.add_argument("--random", action="store_true", help="start from a random board")
    ap.add_argument("--density", type=float, default=0.3)
    ap.add_argument("--seed", type=int, default=42)
    ap.add_argument("--generations", type=int, default=10)
    ap.add_argument("--stop-when-extinct", action="store_true")
    ap.add_argument("--log-csv", type=str, default="")
    ap.add_argument("--log-level", type=str, default="WARNING")
    return ap


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    run(args)


if __name__ == "__main__":
    main()
