from __future__ import annotations


class TableError(Exception):
    """Base class for grid precondition violations."""


class GridTooSmallError(TableError, ValueError):
    pass


class RaggedGridError(TableError, ValueError):
    pass


class CellOutOfRangeError(TableError, IndexError):
    pass


class BufferSizeError(TableError, ValueError):
    pass
