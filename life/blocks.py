from __future__ import annotations

from itertools import cycle, islice
from typing import Iterator, NamedTuple, Tuple

import numpy as np

from .cell_state import CellState
from .rows import Rows


class Block(NamedTuple):
    """A cell's current state paired with its live-neighbor count (0..8)."""

    value: CellState
    live_count: int


def row_triples(buffer: np.ndarray, width: int) -> Iterator[Tuple[np.ndarray, np.ndarray, np.ndarray]]:
    """Yield (prev, curr, next) row views for every row, wrapping top and bottom.

    Row 0 is paired with the last row as its predecessor, and the last row
    with row 0 as its successor.
    """
    rows = Rows(buffer, width)
    height = rows.row_count
    prev_rows = islice(cycle(rows.clone()), height - 1, 2 * height - 1)
    next_rows = islice(cycle(rows.clone()), 1, height + 1)
    return zip(prev_rows, rows, next_rows)


def row_counts(prev: np.ndarray, curr: np.ndarray, nxt: np.ndarray) -> np.ndarray:
    """Live-neighbor counts for the cells of ``curr``, wrapping left and right."""
    column = prev.astype(np.int16) + curr + nxt
    # np.roll(column, 1)[c] is column[c - 1]
    return np.roll(column, 1) + column + np.roll(column, -1) - curr


def neighbor_counts(buffer: np.ndarray, width: int) -> np.ndarray:
    """Return an (H, W) array of toroidal live-neighbor counts."""
    return np.stack([row_counts(p, c, n) for p, c, n in row_triples(buffer, width)], axis=0)


def blocks(buffer: np.ndarray, width: int) -> Iterator[Block]:
    """Yield one Block per cell, row-major."""
    for prev, curr, nxt in row_triples(buffer, width):
        counts = row_counts(prev, curr, nxt)
        for value, count in zip(curr.tolist(), counts.tolist()):
            yield Block(CellState(value), int(count))


def next_state(block: Block) -> CellState:
    """Conway's rules (B3/S23) applied to a single block."""
    if block.value is CellState.ALIVE:
        if block.live_count in (2, 3):
            return CellState.ALIVE
        return CellState.DEAD
    if block.live_count == 3:
        return CellState.ALIVE
    return CellState.DEAD
