import math

import pytest

from pronto_raster.distance import (
    Method,
    PostProcessBuffer,
    PostProcessBufferSquareRoot,
    chessboard_distance_transform,
    distance_transform,
    euclidean_distance_buffer_transform,
    euclidean_distance_transform,
    manhattan_distance_transform,
    post_process_none,
    post_process_square_root,
    squared_euclidean_distance_transform,
)
from pronto_raster.grid import Raster, create_temp

CENTRE = Raster.from_rows([[0, 0, 0], [0, 1, 0], [0, 0, 0]])

FIELD = Raster.from_rows(
    [
        [0, 0, 0, 0, 0, 0],
        [0, 1, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 1, 0],
        [0, 0, 0, 0, 0, 0],
    ]
)


def _run(transform, raster, *args):
    out = create_temp(raster.rows, raster.cols)
    found = transform(raster, out, 1, *args)
    return found, list(out)


def test_manhattan_centre():
    found, values = _run(manhattan_distance_transform, CENTRE)
    assert found is True
    assert values == [2, 1, 2, 1, 0, 1, 2, 1, 2]


def test_chessboard_centre():
    found, values = _run(chessboard_distance_transform, CENTRE)
    assert found is True
    assert values == [1, 1, 1, 1, 0, 1, 1, 1, 1]


def test_squared_euclidean_centre_matches_manhattan_on_unit_neighbours():
    _, squared = _run(squared_euclidean_distance_transform, CENTRE)
    _, manhattan = _run(manhattan_distance_transform, CENTRE)
    assert squared == manhattan


def test_chessboard_without_target_reports_false():
    raster = Raster.from_rows([[0, 0, 0]])
    found, _ = _run(chessboard_distance_transform, raster)
    assert found is False


@pytest.mark.parametrize(
    "transform",
    [
        euclidean_distance_transform,
        squared_euclidean_distance_transform,
        manhattan_distance_transform,
        chessboard_distance_transform,
    ],
)
def test_zero_exactly_at_targets(transform):
    _, values = _run(transform, FIELD)
    assert [v == 0 for v in values] == [v == 1 for v in FIELD]


def test_euclidean_is_root_of_squared():
    _, euclid = _run(euclidean_distance_transform, FIELD)
    _, squared = _run(squared_euclidean_distance_transform, FIELD)
    assert all(math.isclose(e * e, s) for e, s in zip(euclid, squared))


def test_metric_ordering():
    _, euclid = _run(euclidean_distance_transform, FIELD)
    _, manhattan = _run(manhattan_distance_transform, FIELD)
    _, chess = _run(chessboard_distance_transform, FIELD)
    for c, e, m in zip(chess, euclid, manhattan):
        assert c <= e + 1e-9
        assert e <= m + 1e-9


def test_buffer_transform_agrees_with_distance():
    _, euclid = _run(euclidean_distance_transform, FIELD)
    _, buffered = _run(euclidean_distance_buffer_transform, FIELD, 1.5, 7, 3)
    assert buffered == [7 if e <= 1.5 else 3 for e in euclid]


def test_single_row():
    raster = Raster.from_rows([[0, 1, 0, 0, 1]])
    _, manhattan = _run(manhattan_distance_transform, raster)
    _, squared = _run(squared_euclidean_distance_transform, raster)
    assert manhattan == squared


def test_generic_transform_matches_named():
    out = create_temp(FIELD.rows, FIELD.cols)
    distance_transform(FIELD, out, 1, Method.MANHATTAN, post_process_none)
    _, manhattan = _run(manhattan_distance_transform, FIELD)
    assert list(out) == manhattan


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        manhattan_distance_transform(FIELD, create_temp(2, 2), 1)


def test_post_processors():
    assert post_process_square_root(16) == 4.0
    assert post_process_none(9) == 9
    buffer = PostProcessBuffer(4)
    assert (buffer(4), buffer(5)) == (1.0, 0.0)
    root_buffer = PostProcessBufferSquareRoot(2.0, 5, 6)
    assert (root_buffer(4), root_buffer(5)) == (5, 6)