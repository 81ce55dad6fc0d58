"""In-memory rasters, lazy raster views, distance transforms, patches and circular moving-window indicators."""

__version__ = "0.1.0"

__all__ = [
    "grid",
    "optional",
    "views",
    "reinterpret",
    "indicators",
    "distance",
    "circular_window",
    "patches",
    "moving_window",
]