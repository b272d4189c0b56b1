from .cell_state import CellState
from .point import Point
from .rows import Rows
from .blocks import Block, blocks, neighbor_counts, next_state, row_triples
from .table import Table
from .errors import (
    TableError,
    GridTooSmallError,
    RaggedGridError,
    CellOutOfRangeError,
    BufferSizeError,
)

__all__ = [
    "CellState",
    "Point",
    "Rows",
    "Block",
    "blocks",
    "neighbor_counts",
    "next_state",
    "row_triples",
    "Table",
    "TableError",
    "GridTooSmallError",
    "RaggedGridError",
    "CellOutOfRangeError",
    "BufferSizeError",
]
