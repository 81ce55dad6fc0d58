"""Feeding raster values into indicators and reading indicator results."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from pronto_raster.optional import recursive_get_value, recursive_is_initialized


@dataclass(frozen=True)
class WeightedValue:
    """A value paired with the weight it carries in an indicator."""

    value: Any
    weight: Any


def add_sample(indicator: Any, value: Any) -> None:
    """Add a value to an indicator, skipping missing values."""
    if isinstance(value, WeightedValue):
        if recursive_is_initialized(value.value) and recursive_is_initialized(value.weight):
            indicator.add_sample(
                recursive_get_value(value.value), recursive_get_value(value.weight)
            )
    elif recursive_is_initialized(value):
        indicator.add_sample(recursive_get_value(value))


def subtract_sample(indicator: Any, value: Any) -> None:
    """Remove a value from an indicator, skipping missing values."""
    if isinstance(value, WeightedValue):
        if recursive_is_initialized(value.value) and recursive_is_initialized(value.weight):
            indicator.subtract_sample(
                recursive_get_value(value.value), recursive_get_value(value.weight)
            )
    elif recursive_is_initialized(value):
        indicator.subtract_sample(recursive_get_value(value))


def join_indicators(first: Any, second: Any) -> Any:
    """Return a new indicator holding the samples of both; inputs are unchanged."""
    joined = copy.deepcopy(first)
    joined.add_subtotal(second)
    return joined


class ExtractedView:
    """A raster of the results extracted from a raster of indicators."""

    def __init__(self, view: Any) -> None:
        self.view = view

    @property
    def rows(self) -> int:
        return self.view.rows

    @property
    def cols(self) -> int:
        return self.view.cols

    def sub_raster(self, first_row: int, first_col: int, rows: int, cols: int) -> ExtractedView:
        return ExtractedView(self.view.sub_raster(first_row, first_col, rows, cols))

    def __iter__(self) -> Iterator[Any]:
        return (indicator.extract() for indicator in self.view)

    def __len__(self) -> int:
        return self.rows * self.cols


def extract(view: Any) -> ExtractedView:
    """Map each indicator in ``view`` to its extracted result."""
    return ExtractedView(view)