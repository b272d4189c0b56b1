from __future__ import annotations

import logging
import operator
from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np

from .blocks import Block, blocks, neighbor_counts, next_state
from .cell_state import CellState
from .errors import BufferSizeError, CellOutOfRangeError, GridTooSmallError, RaggedGridError
from .point import Point
from .rows import Rows

logger = logging.getLogger(__name__)

MIN_SIDE = 3

CellLike = Union[CellState, bool, int]


def _check_side(name: str, value: int) -> int:
    value = operator.index(value)
    if value < MIN_SIDE:
        raise GridTooSmallError(f"{name} must be >= {MIN_SIDE}, got {value}")
    return value


class Table:
    """Toroidal Game of Life grid.

    Cells live in a single row-major uint8 buffer of ``width * height``
    entries; cell (x, y) is at ``y * width + x``. Every edge wraps to the
    opposite one, so each cell has exactly eight neighbors. Both sides are
    at least 3 so that a cell's previous and next row (or column) are never
    the cell's own.

    Construct with ``Table.new``, ``Table.of_size``, ``Table.from_boolean_grid``,
    ``Table.from_bytes`` or ``Table.from_array``.
    """

    def __init__(self, width: int, height: int):
        self._width = _check_side("width", width)
        self._height = _check_side("height", height)
        self._values = np.zeros(self._width * self._height, dtype=np.uint8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # construction

    @classmethod
    def new(cls, size: int) -> "Table":
        """Square table of ``size`` x ``size`` dead cells."""
        return cls(size, size)

    @classmethod
    def of_size(cls, width: int, height: int) -> "Table":
        return cls(width, height)

    @classmethod
    def from_boolean_grid(cls, rows: Sequence[Sequence[bool]]) -> "Table":
        """Build a table from row-major nested booleans.

        The width is taken from the first row; every other row must match it.
        """
        if len(rows) < MIN_SIDE:
            raise GridTooSmallError(f"grid needs at least {MIN_SIDE} rows, got {len(rows)}")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise RaggedGridError(f"row {i} has {len(row)} cells, expected {width}")
        table = cls(width, len(rows))
        table._values[:] = np.asarray(rows, dtype=bool).reshape(-1)
        return table

    @classmethod
    def from_bytes(cls, values: Sequence[int], width: int, height: int) -> "Table":
        """Build a table from a flat row-major buffer of 0/1 bytes."""
        table = cls(width, height)
        if len(values) != len(table):
            raise BufferSizeError(f"buffer has {len(values)} cells, expected {width}*{height}={len(table)}")
        table._values[:] = [CellState.from_count(v).to_count() for v in values]
        return table

    @classmethod
    def from_array(cls, board: np.ndarray) -> "Table":
        """Build a table from a 2D array; nonzero entries are alive."""
        board = np.asarray(board)
        if board.ndim != 2:
            raise ValueError("board must be 2D")
        height, width = board.shape
        table = cls(width, height)
        table._values[:] = (board != 0).reshape(-1)
        return table

    def copy(self) -> "Table":
        other = Table(self.width, self.height)
        other._values[:] = self._values
        return other

    # export

    def to_boolean_grid(self) -> List[List[bool]]:
        return self.to_array().astype(bool).tolist()

    def to_array(self) -> np.ndarray:
        """(H, W) uint8 copy of the cells."""
        return self._values.reshape(self.height, self.width).copy()

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the flat cell buffer."""
        view = self._values.view()
        view.flags.writeable = False
        return view

    # cell access

    def index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise CellOutOfRangeError(f"cell ({x}, {y}) outside {self.width}x{self.height} table")
        return y * self.width + x

    def get(self, x: int, y: int) -> CellState:
        return CellState(int(self._values[self.index(x, y)]))

    def set(self, x: int, y: int, state: CellLike) -> None:
        if not isinstance(state, CellState):
            state = CellState.from_bool(bool(state))
        self._values[self.index(x, y)] = state.to_count()

    def get_point(self, point: Point) -> CellState:
        return self.get(point.x, point.y)

    def set_point(self, point: Point, state: CellLike) -> None:
        self.set(point.x, point.y, state)

    def __getitem__(self, key: Union[Point, Tuple[int, int]]) -> CellState:
        x, y = (key.x, key.y) if isinstance(key, Point) else key
        return self.get(x, y)

    def __setitem__(self, key: Union[Point, Tuple[int, int]], state: CellLike) -> None:
        x, y = (key.x, key.y) if isinstance(key, Point) else key
        self.set(x, y, state)

    def __len__(self) -> int:
        return self._values.shape[0]

    def __iter__(self) -> Iterator[CellState]:
        return (CellState(v) for v in self._values.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and bool(np.array_equal(self._values, other._values))
        )

    def __repr__(self) -> str:
        return f"Table(width={self.width}, height={self.height}, population={self.population()})"

    def is_alive_anywhere(self) -> bool:
        return bool(self._values.any())

    def population(self) -> int:
        return int(self._values.sum())

    def rows(self) -> Rows:
        return Rows(self._values, self.width)

    # generations

    def blocks(self) -> List[Block]:
        return list(blocks(self._values, self.width))

    def neighbor_counts(self) -> np.ndarray:
        return neighbor_counts(self._values, self.width)

    def tick(self) -> None:
        """Advance one generation in place.

        Every successor state is computed from the current buffer before any
        of them is written back.
        """
        successor = np.fromiter(
            (next_state(block).to_count() for block in blocks(self._values, self.width)),
            dtype=np.uint8,
            count=len(self),
        )
        self._values[:] = successor
        logger.debug("tick %dx%d population=%d", self.width, self.height, self.population())

    # rendering

    def render(self) -> str:
        border = "+-" + "-" * self.width + "-+"
        lines = [border]
        for row in self.rows():
            glyphs = "".join(CellState(v).display_glyph() for v in row.tolist())
            lines.append(f"| {glyphs} |")
        lines.append(border)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
