from __future__ import annotations

import numpy as np
from typing import Optional

from life import Table


def random_table(width: int, height: int, *, density: float = 0.5, seed: Optional[int] = None) -> Table:
    """Return a table whose cells are alive with probability ``density``."""
    if not (0.0 <= density <= 1.0):
        raise ValueError("density must be in [0,1]")
    rng = np.random.default_rng(seed)
    board = (rng.random((height, width)) < density).astype(np.uint8)
    return Table.from_array(board)


def rollout(table: Table, generations: int) -> np.ndarray:
    """Return frames (T, H, W) with frame 0 the current state; ``table`` is left untouched."""
    if generations < 1:
        raise ValueError("generations must be >= 1")
    t = table.copy()
    frames = np.empty((generations, t.height, t.width), dtype=np.uint8)
    frames[0] = t.to_array()
    for i in range(1, generations):
        t.tick()
        frames[i] = t.to_array()
    return frames


def run_until_extinct(table: Table, max_generations: int) -> int:
    """Tick ``table`` in place until no cell is alive; return generations run."""
    n = 0
    while n < max_generations and table.is_alive_anywhere():
        table.tick()
        n += 1
    return n
