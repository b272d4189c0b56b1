from __future__ import annotations

from typing import Dict, Tuple

from life import CellState, Point, Table


# Offsets are (x, y) relative to the pattern's top-left corner.
PATTERNS: Dict[str, Tuple[Point, ...]] = {
    "block": (Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1)),
    "blinker": (Point(0, 0), Point(1, 0), Point(2, 0)),
    "glider": (Point(1, 0), Point(2, 1), Point(0, 2), Point(1, 2), Point(2, 2)),
    "beehive": (Point(1, 0), Point(2, 0), Point(0, 1), Point(3, 1), Point(1, 2), Point(2, 2)),
    "toad": (Point(1, 0), Point(2, 0), Point(3, 0), Point(0, 1), Point(1, 1), Point(2, 1)),
}


def place_pattern(table: Table, name: str, *, x: int = 0, y: int = 0) -> Table:
    """Switch on the cells of a named pattern, wrapping around the table edges."""
    if name not in PATTERNS:
        raise KeyError(f"unknown pattern {name!r}; known: {sorted(PATTERNS)}")
    for p in PATTERNS[name]:
        table.set_point(Point((x + p.x) % table.width, (y + p.y) % table.height), CellState.ALIVE)
    return table
