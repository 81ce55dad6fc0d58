"""Rasters whose cells reinterpret the bytes of several rasters as one value."""

from __future__ import annotations

import struct
from collections.abc import Iterator, Sequence
from typing import Any

from pronto_raster.views import TupleRasterView

_BYTE_ORDER_CHARS = "@=<>!"


def _normalise(fmt: str) -> str:
    """Use standard little-endian sizes unless the format names a byte order."""
    return fmt if fmt[:1] in _BYTE_ORDER_CHARS else "<" + fmt


def _element_layout(element_formats: Sequence[str]) -> tuple[list[str], int]:
    formats = [_normalise(fmt) for fmt in element_formats]
    return formats, sum(struct.calcsize(fmt) for fmt in formats)


def reinterpret_value_to_tuple(
    value: Any, value_format: str, element_formats: Sequence[str]
) -> tuple[Any, ...]:
    """Split the bytes of ``value`` into consecutive elements."""
    data = struct.pack(_normalise(value_format), value)
    formats, total = _element_layout(element_formats)
    if total != len(data):
        raise ValueError(
            f"value of {len(data)} bytes cannot be split into elements of {total} bytes"
        )
    elements = []
    position = 0
    for fmt in formats:
        elements.append(struct.unpack_from(fmt, data, position)[0])
        position += struct.calcsize(fmt)
    return tuple(elements)


def reinterpret_tuple_to_value(
    elements: Sequence[Any], element_formats: Sequence[str], value_format: str
) -> Any:
    """Join the bytes of consecutive elements into one value."""
    formats, total = _element_layout(element_formats)
    if len(elements) != len(formats):
        raise ValueError(f"expected {len(formats)} elements, got {len(elements)}")
    value_format = _normalise(value_format)
    if total != struct.calcsize(value_format):
        raise ValueError(
            f"elements of {total} bytes cannot form a value of "
            f"{struct.calcsize(value_format)} bytes"
        )
    data = b"".join(struct.pack(fmt, element) for fmt, element in zip(formats, elements))
    return struct.unpack(value_format, data)[0]


class ReinterpretRasterView:
    """Views several rasters of equal shape as one raster of combined values.

    The bytes of the cells of the underlying rasters, taken in order, form
    the bytes of one value of ``value_format``. Writing a value splits its
    bytes back over the underlying rasters.
    """

    def __init__(
        self, value_format: str, element_formats: Sequence[str], rasters: Sequence[Any]
    ) -> None:
        self.value_format = value_format
        self.element_formats = tuple(element_formats)
        self.rasters = tuple(rasters)
        if len(self.element_formats) != len(self.rasters):
            raise ValueError(
                f"{len(self.rasters)} rasters need as many element formats, "
                f"got {len(self.element_formats)}"
            )
        self._cells = TupleRasterView(*self.rasters)

    @property
    def rows(self) -> int:
        return self._cells.rows

    @property
    def cols(self) -> int:
        return self._cells.cols

    def _combine(self, elements: Sequence[Any]) -> Any:
        return reinterpret_tuple_to_value(elements, self.element_formats, self.value_format)

    def sub_raster(
        self, first_row: int, first_col: int, rows: int, cols: int
    ) -> ReinterpretRasterView:
        return ReinterpretRasterView(
            self.value_format,
            self.element_formats,
            [r.sub_raster(first_row, first_col, rows, cols) for r in self.rasters],
        )

    def __iter__(self) -> Iterator[Any]:
        return (self._combine(elements) for elements in self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, index: int | tuple[int, int] | slice) -> Any:
        if isinstance(index, slice):
            return [self._combine(elements) for elements in self._cells[index]]
        return self._combine(self._cells[index])

    def __setitem__(self, index: int | tuple[int, int], value: Any) -> None:
        self._cells[index] = reinterpret_value_to_tuple(
            value, self.value_format, self.element_formats
        )


def reinterpret_rasters(
    value_format: str, element_formats: Sequence[str], *args: Any
) -> ReinterpretRasterView:
    """View the given rasters as one raster of values of ``value_format``."""
    return ReinterpretRasterView(value_format, element_formats, args)