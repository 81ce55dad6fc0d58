# pronto_raster

In-memory rasters and lazy views over them, written in plain Python with no outside dependencies.

## Modules

- `pronto_raster.grid`
  - `Raster` is a mutable row-major grid. Build one with `Raster(rows, cols, fill)`, `Raster.from_rows(...)` or `create_temp(rows, cols, fill)`.
  - `sub_raster(first_row, first_col, rows, cols)` returns a window that shares storage with its parent.
  - `assign(values)` overwrites every cell in row-major order.
  - Cells can be indexed by flat position, by `(row, col)` or by slice.
  - `RasterAllocator.allocate(rows, cols)` hands out scratch rasters.
- `pronto_raster.optional`: missing values are `None`.
  - `recursive_is_initialized` tells whether a value is present.
  - `recursive_get_value` returns the value, or raises `ValueError` if it is missing.
  - `optionalize_function` wraps a function so that a missing argument gives a missing result.
- `pronto_raster.views`
  - `uniform` (`UniformRasterView`): a constant raster.
  - `pad` (`PaddedRasterView`): surrounds a raster with a pad value.
  - `offset`: shifts a raster and pads the cells it uncovers.
  - `raster_tuple` (`TupleRasterView`), `PairRasterView` and `raster_vector` (`VectorOfRasterView`): walk several rasters of equal shape in step. Assigning to a cell writes through to the underlying rasters.
- `pronto_raster.reinterpret`
  - `reinterpret_rasters(value_format, element_formats, *rasters)` views several rasters as one. The bytes of their cells, taken in order, form one `struct` value.
  - `reinterpret_value_to_tuple` and `reinterpret_tuple_to_value` do the byte splitting and joining.
  - Formats without a byte-order prefix are read as little-endian.
- `pronto_raster.distance`: exact distance transforms. Each one writes into an output raster and returns `False` when the target value does not occur.
  - `euclidean_distance_transform`
  - `squared_euclidean_distance_transform`
  - `manhattan_distance_transform`
  - `chessboard_distance_transform`
  - `euclidean_distance_buffer_transform`, which marks cells inside or outside a buffer.
  - `distance_transform` is the general form. It takes a `Method` and a post-processing callable: `post_process_none`, `post_process_square_root`, `PostProcessBuffer` or `PostProcessBufferSquareRoot`.
- `pronto_raster.indicators`
  - `add_sample` and `subtract_sample` feed values into an indicator and skip missing ones. A `WeightedValue` passes a weight as well.
  - `join_indicators` merges two indicators into a new one.
  - `extract` maps a view of indicators to their results.
- `pronto_raster.circular_window`
  - `make_circular_window_view` (`CircularWindowView`) gives, for each cell, an indicator over the circle around it.
  - Cells beyond the edge and missing values are left out.
- `pronto_raster.patches`
  - `patch_raster(raster, contiguity)` (`PatchRasterTransform`) finds patches of equal value, joined by `Contiguity.QUEEN` or `Contiguity.ROOK` neighbours.
  - Each cell then gives its patch's `PatchInfo`: `area`, `perimeter` and `category`.
- `pronto_raster.moving_window`
  - `moving_window_indicator(raster, window, indicator_generator, contiguity=None)` takes a `Circle` or a `PatchCircle` window and returns the extracted results.
  - A `PatchCircle` needs a contiguity. A `Circle` takes none.

An indicator is any object with `add_sample`, `subtract_sample` and `extract` methods. Joining indicators also needs `add_subtotal`.

## Examples

```python
from pronto_raster.grid import create_temp
from pronto_raster.views import pad, raster_tuple

a = create_temp(3, 2, 0)
a.assign(range(1, 7))
print(list(pad(a, 1, 1, 1, 1, 0)))  # a 5x4 raster with a border of zeros

b = create_temp(3, 2, 0)
ab = raster_tuple(a, b)
for index, (x, _) in enumerate(ab):
    ab[index] = (x, 100 * x)
print(list(b))  # [100, 200, 300, 400, 500, 600]
```

Distance to the nearest cell holding a target value:

```python
from pronto_raster.grid import Raster, create_temp
from pronto_raster.distance import manhattan_distance_transform

land = Raster.from_rows([[0, 0, 1], [0, 0, 0]])
out = create_temp(2, 3, 0)
found = manhattan_distance_transform(land, out, 1)
print(found, list(out))
```

Counting the cells in a circular window:

```python
from pronto_raster.grid import Raster
from pronto_raster.moving_window import Circle, moving_window_indicator

class Count:
    def __init__(self):
        self.n = 0
    def add_sample(self, value):
        self.n += 1
    def subtract_sample(self, value):
        self.n -= 1
    def extract(self):
        return self.n

grid = Raster.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
print(list(moving_window_indicator(grid, Circle(1), Count)))
```

## What it does not do

- All rasters live in memory as Python lists. The package does not read or write raster files such as GeoTIFF, and it has no command-line tool.
- Cells hold arbitrary Python objects rather than typed pixel storage.
- The moving windows are circular only.

## Tests

```
pip install .[test]
pytest
```