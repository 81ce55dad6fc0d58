"""Delineating patches of equal value and describing them cell by cell."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


class Contiguity(enum.Enum):
    """Which neighbours join cells into one patch."""

    QUEEN = "queen"
    ROOK = "rook"


@dataclass(frozen=True)
class PatchInfo:
    """Size, edge length and value of a patch."""

    area: int
    perimeter: int
    category: Any


_ROOK_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_DIAGONAL_STEPS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class _PatchState:
    """Patch labels shared by a transform and its sub-rasters."""

    def __init__(self, raster: Any, contiguity: Contiguity) -> None:
        self.raster = raster
        self.contiguity = contiguity
        self.index: list[int | None] = [None] * (raster.rows * raster.cols)
        self.patches: list[PatchInfo] = []


class PatchRasterTransform:
    """A raster giving, for each cell, the patch it belongs to.

    Patches are found lazily, by breadth-first flood fill, the first time the
    view is read. A flood fill may run beyond the view into the rest of the
    raster; its perimeter counts rook neighbours of another value, not the
    raster's edge.
    """

    def __init__(self, raster: Any, contiguity: Contiguity | str = Contiguity.QUEEN) -> None:
        self._state = _PatchState(raster, Contiguity(contiguity))
        self._first_row = 0
        self._first_col = 0
        self._rows = raster.rows
        self._cols = raster.cols
        self._initialized = False

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def contiguity(self) -> Contiguity:
        return self._state.contiguity

    def __len__(self) -> int:
        return self._rows * self._cols

    def sub_raster(
        self, first_row: int, first_col: int, rows: int, cols: int
    ) -> PatchRasterTransform:
        """Return a window that shares patch labels with this transform."""
        if min(first_row, first_col, rows, cols) < 0:
            raise ValueError("sub-raster position and size must be non-negative")
        if first_row + rows > self._rows or first_col + cols > self._cols:
            raise ValueError(
                f"sub-raster ({first_row}, {first_col}, {rows}, {cols}) exceeds "
                f"raster of {self._rows}x{self._cols}"
            )
        view = PatchRasterTransform.__new__(PatchRasterTransform)
        view._state = self._state
        view._first_row = self._first_row + first_row
        view._first_col = self._first_col + first_col
        view._rows = rows
        view._cols = cols
        view._initialized = self._initialized
        return view

    def _initialize(self) -> None:
        if self._initialized:
            return
        self._initialized = True
        state = self._state
        full_rows, full_cols = state.raster.rows, state.raster.cols
        values = list(state.raster)
        index = state.index
        queen = state.contiguity is Contiguity.QUEEN

        for row in range(self._first_row, self._first_row + self._rows):
            for col in range(self._first_col, self._first_col + self._cols):
                position = row * full_cols + col
                if index[position] is not None:
                    continue
                category = values[position]
                label = len(state.patches)
                index[position] = label
                area = 1
                perimeter = 0
                queue = deque([(row, col)])
                while queue:
                    cur_row, cur_col = queue.popleft()
                    for d_row, d_col in _ROOK_STEPS:
                        nb_row, nb_col = cur_row + d_row, cur_col + d_col
                        if not (0 <= nb_row < full_rows and 0 <= nb_col < full_cols):
                            continue
                        nb = nb_row * full_cols + nb_col
                        if values[nb] != category:
                            perimeter += 1
                        elif index[nb] is None:
                            queue.append((nb_row, nb_col))
                            area += 1
                            index[nb] = label
                    if queen:
                        for d_row, d_col in _DIAGONAL_STEPS:
                            nb_row, nb_col = cur_row + d_row, cur_col + d_col
                            if not (0 <= nb_row < full_rows and 0 <= nb_col < full_cols):
                                continue
                            nb = nb_row * full_cols + nb_col
                            if values[nb] == category and index[nb] is None:
                                queue.append((nb_row, nb_col))
                                area += 1
                                index[nb] = label
                state.patches.append(PatchInfo(area, perimeter, category))

    def _info(self, row: int, col: int) -> PatchInfo | None:
        state = self._state
        label = state.index[(self._first_row + row) * state.raster.cols + self._first_col + col]
        return None if label is None else state.patches[label]

    def __iter__(self) -> Iterator[PatchInfo | None]:
        self._initialize()
        for row in range(self._rows):
            for col in range(self._cols):
                yield self._info(row, col)

    def __getitem__(self, index: int | tuple[int, int] | slice) -> Any:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        if isinstance(index, tuple):
            row, col = index
            if not (0 <= row < self._rows and 0 <= col < self._cols):
                raise IndexError(
                    f"cell ({row}, {col}) outside raster of {self._rows}x{self._cols}"
                )
        else:
            size = len(self)
            if index < 0:
                index += size
            if not 0 <= index < size:
                raise IndexError(f"index outside raster of {size} cells")
            row, col = divmod(index, self._cols)
        self._initialize()
        return self._info(row, col)

    def __repr__(self) -> str:
        return (
            f"PatchRasterTransform(rows={self._rows}, cols={self._cols}, "
            f"contiguity={self.contiguity.value})"
        )


def patch_raster(raster: Any, contiguity: Contiguity | str) -> PatchRasterTransform:
    """Return the patch of each cell of ``raster`` under the given contiguity."""
    return PatchRasterTransform(raster, contiguity)