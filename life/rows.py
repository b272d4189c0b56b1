from __future__ import annotations

from typing import Iterator, Optional

import numpy as np


class Rows:
    """Row-at-a-time view over a flat, row-major cell buffer.

    Rows are yielded as read-only numpy slices of the underlying buffer, so
    walking a grid this way never copies it. The forward cursor (``next``)
    and the backward cursor (``next_back``) move independently.

    A view is a finite sequence; restart by taking ``clone()``, which starts
    over at the view's original bounds regardless of how far this one got.
    """

    def __init__(self, buffer: np.ndarray, width: int):
        if buffer.ndim != 1:
            raise ValueError("buffer must be 1D")
        if width <= 0:
            raise ValueError("width must be positive")
        if buffer.shape[0] % width != 0:
            raise ValueError("buffer length must be a multiple of width")
        view = buffer.view()
        view.flags.writeable = False
        self._buffer = view
        self.width = int(width)
        self.length = int(buffer.shape[0])
        self._cursor = 0
        self._reverse_cursor = self.length

    @property
    def row_count(self) -> int:
        return self.length // self.width

    def __iter__(self) -> "Rows":
        return self

    def __next__(self) -> np.ndarray:
        if self._cursor == self.length:
            raise StopIteration
        start = self._cursor
        self._cursor += self.width
        return self._buffer[start:self._cursor]

    def next_back(self) -> Optional[np.ndarray]:
        """Return the next row from the end, or None once exhausted."""
        if self._reverse_cursor == 0:
            return None
        end = self._reverse_cursor
        self._reverse_cursor -= self.width
        return self._buffer[self._reverse_cursor:end]

    def __reversed__(self) -> Iterator[np.ndarray]:
        view = self.clone()
        while True:
            row = view.next_back()
            if row is None:
                return
            yield row

    def clone(self) -> "Rows":
        return Rows(self._buffer, self.width)

    __copy__ = clone
