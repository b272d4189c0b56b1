from __future__ import annotations

from enum import IntEnum


class CellState(IntEnum):
    """State of a single cell.

    Values double as live-count contributions, so ``sum(states)`` is the
    number of live cells among them.
    """

    DEAD = 0
    ALIVE = 1

    @classmethod
    def from_bool(cls, value: bool) -> "CellState":
        return cls.ALIVE if value else cls.DEAD

    @classmethod
    def from_count(cls, value: int) -> "CellState":
        """Decode a byte from a flat buffer; anything but 1 is dead."""
        return cls.ALIVE if int(value) == 1 else cls.DEAD

    def to_bool(self) -> bool:
        return self is CellState.ALIVE

    def to_count(self) -> int:
        return int(self.value)

    def display_glyph(self) -> str:
        return "*" if self is CellState.ALIVE else " "

    def __str__(self) -> str:
        return self.display_glyph()
