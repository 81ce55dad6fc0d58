"""Moving-window indicators selected by the shape of the window."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pronto_raster.circular_window import make_circular_window_view
from pronto_raster.indicators import ExtractedView, extract
from pronto_raster.patches import Contiguity, patch_raster


@dataclass(frozen=True)
class Circle:
    """A circular window over cell values."""

    radius: float


@dataclass(frozen=True)
class PatchCircle:
    """A circular window over the patches that cells belong to."""

    radius: float


def moving_window_indicator(
    raster: Any,
    window: Circle | PatchCircle,
    indicator_generator: Callable[[], Any],
    contiguity: Contiguity | str | None = None,
) -> ExtractedView:
    """Return, for each cell, the indicator result over the window around it.

    A patch window needs a contiguity; a plain window takes none.
    """
    if isinstance(window, Circle):
        if contiguity is not None:
            raise TypeError("a circle window takes no contiguity")
        return extract(make_circular_window_view(raster, window.radius, indicator_generator))
    if isinstance(window, PatchCircle):
        if contiguity is None:
            raise TypeError("a patch window needs a contiguity")
        patches = patch_raster(raster, contiguity)
        return extract(make_circular_window_view(patches, window.radius, indicator_generator))
    raise TypeError(f"unsupported window: {window!r}")