"""Moving-window indicators over a circular neighbourhood."""

from __future__ import annotations

import copy
import math
from collections.abc import Callable, Iterator
from typing import Any

from pronto_raster.indicators import add_sample, subtract_sample


class CircularWindowView:
    """A raster of indicators, each summarising the circle around its cell.

    The circle holds every cell whose offset (di, dj) from the centre satisfies
    ``dj <= int(sqrt(radius**2 - di**2))`` for ``|di| <= int(radius)``. Cells
    beyond the edge of the raster, and missing values, are left out.
    Windows are updated incrementally while moving along rows and down columns.
    """

    def __init__(
        self, raster: Any, radius: float, indicator_generator: Callable[[], Any]
    ) -> None:
        self.raster = raster
        self.radius = radius
        self.indicator_generator = indicator_generator
        self._first_row = 0
        self._first_col = 0
        self._rows = raster.rows
        self._cols = raster.cols

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def __len__(self) -> int:
        return self._rows * self._cols

    def sub_raster(
        self, first_row: int, first_col: int, rows: int, cols: int
    ) -> CircularWindowView:
        """Return the windows of a rectangular part; neighbours outside it still count."""
        if min(first_row, first_col, rows, cols) < 0:
            raise ValueError("sub-raster position and size must be non-negative")
        if first_row + rows > self._rows or first_col + cols > self._cols:
            raise ValueError(
                f"sub-raster ({first_row}, {first_col}, {rows}, {cols}) exceeds "
                f"raster of {self._rows}x{self._cols}"
            )
        view = CircularWindowView.__new__(CircularWindowView)
        view.raster = self.raster
        view.radius = self.radius
        view.indicator_generator = self.indicator_generator
        view._first_row = self._first_row + first_row
        view._first_col = self._first_col + first_col
        view._rows = rows
        view._cols = cols
        return view

    def _extents(self) -> list[tuple[int, int]]:
        """Pairs (offset, half-width) describing the circle row by row."""
        reach = int(self.radius)
        squared = self.radius * self.radius
        return [(i, int(math.sqrt(squared - i * i))) for i in range(-reach, reach + 1)]

    def __iter__(self) -> Iterator[Any]:
        if self._rows == 0 or self._cols == 0:
            return
        full_rows, full_cols = self.raster.rows, self.raster.cols
        values = list(self.raster)

        def at(row: int, col: int) -> Any:
            if 0 <= row < full_rows and 0 <= col < full_cols:
                return values[row * full_cols + col]
            return None

        extents = self._extents()
        r0, c0 = self._first_row, self._first_col

        start_of_row = self.indicator_generator()
        for i, j in extents:
            for dc in range(-j, j + 1):
                add_sample(start_of_row, at(r0 + i, c0 + dc))

        for row in range(self._rows):
            abs_row = r0 + row
            if row > 0:
                for i, j in extents:
                    add_sample(start_of_row, at(abs_row + j, c0 + i))
                for i, j in extents:
                    subtract_sample(start_of_row, at(abs_row - j - 1, c0 + i))
            current = copy.deepcopy(start_of_row)
            yield copy.deepcopy(current)
            for col in range(1, self._cols):
                abs_col = c0 + col
                for i, j in extents:
                    add_sample(current, at(abs_row + i, abs_col + j))
                for i, j in extents:
                    subtract_sample(current, at(abs_row + i, abs_col - j - 1))
                yield copy.deepcopy(current)

    def __repr__(self) -> str:
        return (
            f"CircularWindowView(rows={self._rows}, cols={self._cols}, "
            f"radius={self.radius!r})"
        )


def make_circular_window_view(
    raster: Any, radius: float, indicator_generator: Callable[[], Any]
) -> CircularWindowView:
    """Return a view of circular-window indicators over ``raster``."""
    return CircularWindowView(raster, radius, indicator_generator)