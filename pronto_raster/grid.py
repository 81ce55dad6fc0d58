"""In-memory rasters with row-major iteration and shared-storage sub-rasters."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Raster:
    """A two-dimensional grid of values, iterated row by row.

    Sub-rasters share storage with the raster they are taken from, so writing
    through a sub-raster changes the parent and vice versa.
    """

    __slots__ = ("_data", "_stride", "_offset", "_rows", "_cols")

    def __init__(self, rows: int, cols: int, fill: Any = 0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"raster dimensions must be non-negative, got {rows}x{cols}")
        self._data: list[Any] = [fill] * (rows * cols)
        self._stride = cols
        self._offset = 0
        self._rows = rows
        self._cols = cols

    @classmethod
    def from_rows(cls, data: Iterable[Iterable[Any]]) -> Raster:
        """Build a raster from an iterable of equally long rows."""
        rows = [list(row) for row in data]
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        raster = cls(len(rows), width)
        raster._data = [value for row in rows for value in row]
        return raster

    @classmethod
    def _view(cls, data: list[Any], stride: int, offset: int, rows: int, cols: int) -> Raster:
        view = cls.__new__(cls)
        view._data = data
        view._stride = stride
        view._offset = offset
        view._rows = rows
        view._cols = cols
        return view

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def sub_raster(self, first_row: int, first_col: int, rows: int, cols: int) -> Raster:
        """Return a rectangular window that shares storage with this raster."""
        if min(first_row, first_col, rows, cols) < 0:
            raise ValueError("sub-raster position and size must be non-negative")
        if first_row + rows > self._rows or first_col + cols > self._cols:
            raise ValueError(
                f"sub-raster ({first_row}, {first_col}, {rows}, {cols}) exceeds "
                f"raster of {self._rows}x{self._cols}"
            )
        offset = self._offset + first_row * self._stride + first_col
        return Raster._view(self._data, self._stride, offset, rows, cols)

    def _positions(self) -> Iterator[int]:
        for row in range(self._rows):
            start = self._offset + row * self._stride
            yield from range(start, start + self._cols)

    def assign(self, values: Iterable[Any]) -> None:
        """Overwrite every cell, in row-major order, with the given values."""
        values = list(values)
        if len(values) != len(self):
            raise ValueError(f"expected {len(self)} values, got {len(values)}")
        for position, value in zip(self._positions(), values):
            self._data[position] = value

    def __iter__(self) -> Iterator[Any]:
        for row in range(self._rows):
            start = self._offset + row * self._stride
            yield from self._data[start:start + self._cols]

    def __len__(self) -> int:
        return self._rows * self._cols

    def _position(self, index: int | tuple[int, int]) -> int:
        if isinstance(index, tuple):
            row, col = index
            if not (0 <= row < self._rows and 0 <= col < self._cols):
                raise IndexError(f"cell ({row}, {col}) outside raster of {self._rows}x{self._cols}")
        else:
            size = len(self)
            if index < 0:
                index += size
            if not 0 <= index < size:
                raise IndexError(f"index outside raster of {size} cells")
            row, col = divmod(index, self._cols)
        return self._offset + row * self._stride + col

    def __getitem__(self, index: int | tuple[int, int] | slice) -> Any:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        return self._data[self._position(index)]

    def __setitem__(self, index: int | tuple[int, int], value: Any) -> None:
        self._data[self._position(index)] = value

    def __repr__(self) -> str:
        return f"Raster(rows={self._rows}, cols={self._cols})"


def create_temp(rows: int, cols: int, fill: Any = 0) -> Raster:
    """Create a new in-memory raster filled with ``fill``."""
    return Raster(rows, cols, fill)


class RasterAllocator:
    """Allocates temporary rasters for algorithms that need scratch space."""

    def allocate(self, rows: int, cols: int) -> Raster:
        return create_temp(rows, cols)