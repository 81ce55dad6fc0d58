"""Lazy raster views: uniform, padded, offset and combined rasters."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import islice, repeat
from typing import Any


class _View:
    """Shared shape handling and indexing for the views in this module."""

    _rows: int
    _cols: int

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def __len__(self) -> int:
        return self._rows * self._cols

    def _cell(self, index: int | tuple[int, int]) -> tuple[int, int]:
        if isinstance(index, tuple):
            row, col = index
            if not (0 <= row < self._rows and 0 <= col < self._cols):
                raise IndexError(
                    f"cell ({row}, {col}) outside raster of {self._rows}x{self._cols}"
                )
            return row, col
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f"index outside raster of {size} cells")
        return divmod(index, self._cols)

    def _check_window(self, first_row: int, first_col: int, rows: int, cols: int) -> None:
        if min(first_row, first_col, rows, cols) < 0:
            raise ValueError("sub-raster position and size must be non-negative")
        if first_row + rows > self._rows or first_col + cols > self._cols:
            raise ValueError(
                f"sub-raster ({first_row}, {first_col}, {rows}, {cols}) exceeds "
                f"raster of {self._rows}x{self._cols}"
            )

    def _get(self, cell: tuple[int, int]) -> Any:
        raise NotImplementedError

    def __getitem__(self, index: int | tuple[int, int] | slice) -> Any:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        return self._get(self._cell(index))


class UniformRasterView(_View):
    """A raster in which every cell holds the same value."""

    def __init__(self, rows: int, cols: int, value: Any) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"raster dimensions must be non-negative, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self.value = value

    def sub_raster(self, first_row: int, first_col: int, rows: int, cols: int) -> UniformRasterView:
        return UniformRasterView(rows, cols, self.value)

    def __iter__(self) -> Iterator[Any]:
        return repeat(self.value, len(self))

    def __len__(self) -> int:
        return self._rows * self._cols

    def _get(self, cell: tuple[int, int]) -> Any:
        return self.value

    def __getitem__(self, index: int | tuple[int, int] | slice) -> Any:
        return super().__getitem__(index)

    def __repr__(self) -> str:
        return f"UniformRasterView(rows={self._rows}, cols={self._cols}, value={self.value!r})"


def uniform(rows: int, cols: int, value: Any) -> UniformRasterView:
    """Return a raster of the given shape holding ``value`` everywhere."""
    return UniformRasterView(rows, cols, value)


class PaddedRasterView(_View):
    """A raster surrounded by bands of a constant pad value."""

    def __init__(
        self,
        raster: Any,
        leading_rows: int,
        trailing_rows: int,
        leading_cols: int,
        trailing_cols: int,
        pad_value: Any,
    ) -> None:
        if min(leading_rows, trailing_rows, leading_cols, trailing_cols) < 0:
            raise ValueError("padding must be non-negative")
        self.raster = raster
        self.leading_rows = leading_rows
        self.trailing_rows = trailing_rows
        self.leading_cols = leading_cols
        self.trailing_cols = trailing_cols
        self.pad_value = pad_value
        self._rows = leading_rows + raster.rows + trailing_rows
        self._cols = leading_cols + raster.cols + trailing_cols

    @staticmethod
    def _split(first: int, length: int, leading: int, inner: int) -> tuple[int, int, int, int]:
        """Split a window along one axis into leading pad, inner span and trailing pad."""
        lo = min(max(first - leading, 0), inner)
        hi = min(max(first + length - leading, lo), inner)
        lead = min(length, max(0, leading - first))
        trail = length - lead - (hi - lo)
        return lead, lo, hi - lo, trail

    def sub_raster(self, first_row: int, first_col: int, rows: int, cols: int) -> PaddedRasterView:
        self._check_window(first_row, first_col, rows, cols)
        lead_r, inner_r0, inner_rows, trail_r = self._split(
            first_row, rows, self.leading_rows, self.raster.rows
        )
        lead_c, inner_c0, inner_cols, trail_c = self._split(
            first_col, cols, self.leading_cols, self.raster.cols
        )
        inner = self.raster.sub_raster(inner_r0, inner_c0, inner_rows, inner_cols)
        return PaddedRasterView(inner, lead_r, trail_r, lead_c, trail_c, self.pad_value)

    def __iter__(self) -> Iterator[Any]:
        pad = self.pad_value
        yield from repeat(pad, self.leading_rows * self._cols)
        inner = iter(self.raster)
        inner_cols = self.raster.cols
        for _ in range(self.raster.rows):
            yield from repeat(pad, self.leading_cols)
            yield from islice(inner, inner_cols)
            yield from repeat(pad, self.trailing_cols)
        yield from repeat(pad, self.trailing_rows * self._cols)

    def __len__(self) -> int:
        return self._rows * self._cols

    def _get(self, cell: tuple[int, int]) -> Any:
        row = cell[0] - self.leading_rows
        col = cell[1] - self.leading_cols
        if 0 <= row < self.raster.rows and 0 <= col < self.raster.cols:
            return self.raster[row, col]
        return self.pad_value

    def __getitem__(self, index: int | tuple[int, int] | slice) -> Any:
        return super().__getitem__(index)


def pad(
    raster: Any,
    leading_rows: int,
    trailing_rows: int,
    leading_cols: int,
    trailing_cols: int,
    pad_value: Any,
) -> PaddedRasterView:
    """Surround ``raster`` with rows and columns of ``pad_value``."""
    return PaddedRasterView(
        raster, leading_rows, trailing_rows, leading_cols, trailing_cols, pad_value
    )


def offset(raster: Any, row_offset: int, col_offset: int, pad_value: Any) -> PaddedRasterView:
    """Shift a raster so that cell (r, c) shows (r + row_offset, c + col_offset).

    Cells that fall outside the original raster show ``pad_value``.
    """
    sub = raster.sub_raster(
        max(0, row_offset),
        max(0, col_offset),
        max(0, raster.rows - abs(row_offset)),
        max(0, raster.cols - abs(col_offset)),
    )
    return pad(
        sub,
        max(0, -row_offset),
        max(0, row_offset),
        max(0, -col_offset),
        max(0, col_offset),
        pad_value,
    )


def _common_shape(rasters: Sequence[Any]) -> tuple[int, int]:
    if not rasters:
        return 0, 0
    rows, cols = rasters[0].rows, rasters[0].cols
    for raster in rasters[1:]:
        if (raster.rows, raster.cols) != (rows, cols):
            raise ValueError(
                f"rasters differ in shape: {rows}x{cols} and {raster.rows}x{raster.cols}"
            )
    return rows, cols


class TupleRasterView(_View):
    """Zips several rasters; each cell is a tuple of their values."""

    def __init__(self, *args: Any) -> None:
        self.rasters = tuple(args)
        self._rows, self._cols = _common_shape(self.rasters)

    def sub_raster(self, first_row: int, first_col: int, rows: int, cols: int) -> TupleRasterView:
        return TupleRasterView(
            *(r.sub_raster(first_row, first_col, rows, cols) for r in self.rasters)
        )

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        return zip(*self.rasters)

    def __len__(self) -> int:
        return self._rows * self._cols

    def _get(self, cell: tuple[int, int]) -> tuple[Any, ...]:
        return tuple(r[cell] for r in self.rasters)

    def __getitem__(self, index: int | tuple[int, int] | slice) -> Any:
        return super().__getitem__(index)

    def __setitem__(self, index: int | tuple[int, int], value: Sequence[Any]) -> None:
        if len(value) != len(self.rasters):
            raise ValueError(f"expected {len(self.rasters)} values, got {len(value)}")
        cell = self._cell(index)
        for raster, item in zip(self.rasters, value):
            raster[cell] = item


def raster_tuple(*args: Any) -> TupleRasterView:
    """Zip rasters of equal shape into one raster of tuples."""
    return TupleRasterView(*args)


class PairRasterView(_View):
    """Zips two rasters; each cell is a pair of their values."""

    def __init__(self, first: Any, second: Any) -> None:
        self.first = first
        self.second = second
        self._rows, self._cols = _common_shape((first, second))

    def sub_raster(self, first_row: int, first_col: int, rows: int, cols: int) -> PairRasterView:
        return PairRasterView(
            self.first.sub_raster(first_row, first_col, rows, cols),
            self.second.sub_raster(first_row, first_col, rows, cols),
        )

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return zip(self.first, self.second)

    def __len__(self) -> int:
        return self._rows * self._cols

    def _get(self, cell: tuple[int, int]) -> tuple[Any, Any]:
        return self.first[cell], self.second[cell]

    def __getitem__(self, index: int | tuple[int, int] | slice) -> Any:
        return super().__getitem__(index)

    def __setitem__(self, index: int | tuple[int, int], value: Sequence[Any]) -> None:
        first, second = value
        cell = self._cell(index)
        self.first[cell] = first
        self.second[cell] = second


class VectorOfRasterView(_View):
    """Combines any number of rasters; each cell is a list of their values."""

    def __init__(self, rasters: Sequence[Any]) -> None:
        self.rasters = list(rasters)
        self._rows, self._cols = _common_shape(self.rasters)

    def sub_raster(
        self, first_row: int, first_col: int, rows: int, cols: int
    ) -> VectorOfRasterView:
        return VectorOfRasterView(
            [r.sub_raster(first_row, first_col, rows, cols) for r in self.rasters]
        )

    def __iter__(self) -> Iterator[list[Any]]:
        return (list(values) for values in zip(*self.rasters))

    def __len__(self) -> int:
        return self._rows * self._cols

    def _get(self, cell: tuple[int, int]) -> list[Any]:
        return [r[cell] for r in self.rasters]

    def __getitem__(self, index: int | tuple[int, int] | slice) -> Any:
        return super().__getitem__(index)

    def __setitem__(self, index: int | tuple[int, int], value: Sequence[Any]) -> None:
        if len(value) != len(self.rasters):
            raise ValueError(f"expected {len(self.rasters)} values, got {len(value)}")
        cell = self._cell(index)
        for raster, item in zip(self.rasters, value):
            raster[cell] = item


def raster_vector(rasters: Sequence[Any]) -> VectorOfRasterView:
    """Combine a sequence of rasters into one raster of lists."""
    return VectorOfRasterView(rasters)