import pytest

from pronto_raster.grid import Raster, create_temp
from pronto_raster.views import (
    PairRasterView,
    PaddedRasterView,
    TupleRasterView,
    UniformRasterView,
    VectorOfRasterView,
    offset,
    pad,
    raster_tuple,
    raster_vector,
    uniform,
)


def numbered(rows, cols, step=1):
    raster = create_temp(rows, cols)
    raster.assign(range(step, step * (rows * cols + 1), step))
    return raster


# Padded rasters


def test_padded_raster_all_sides():
    a = numbered(3, 2)
    pa = pad(a, 1, 2, 3, 4, 0)
    assert (pa.rows, pa.cols) == (6, 9)
    assert list(pa) == [
        0, 0, 0, 0, 0, 0, 0, 0, 0,
        0, 0, 0, 1, 2, 0, 0, 0, 0,
        0, 0, 0, 3, 4, 0, 0, 0, 0,
        0, 0, 0, 5, 6, 0, 0, 0, 0,
        0, 0, 0, 0, 0, 0, 0, 0, 0,
        0, 0, 0, 0, 0, 0, 0, 0, 0,
    ]


def test_padded_raster_trailing_cols():
    assert list(pad(numbered(3, 2), 0, 0, 0, 2, 0)) == [1, 2, 0, 0, 3, 4, 0, 0, 5, 6, 0, 0]


def test_padded_raster_leading_cols():
    assert list(pad(numbered(3, 2), 0, 0, 2, 0, 0)) == [0, 0, 1, 2, 0, 0, 3, 4, 0, 0, 5, 6]


def test_padded_raster_trailing_rows():
    assert list(pad(numbered(3, 2), 0, 2, 0, 0, 0)) == [1, 2, 3, 4, 5, 6, 0, 0, 0, 0]


def test_padded_raster_leading_rows():
    assert list(pad(numbered(3, 2), 2, 0, 0, 0, 0)) == [0, 0, 0, 0, 1, 2, 3, 4, 5, 6]


def test_padded_indexing_matches_iteration():
    pa = pad(numbered(3, 2), 1, 2, 3, 4, -1)
    assert [pa[i] for i in range(len(pa))] == list(pa)
    assert pa[1, 3] == 1
    assert pa[0, 0] == -1


@pytest.mark.parametrize(
    "window",
    [(0, 0, 6, 9), (1, 2, 3, 3), (0, 0, 1, 9), (4, 5, 2, 4), (2, 4, 2, 1), (0, 7, 6, 2), (1, 0, 0, 3)],
)
def test_padded_sub_raster_matches_cells(window):
    pa = pad(numbered(3, 2), 1, 2, 3, 4, 0)
    first_row, first_col, rows, cols = window
    sub = pa.sub_raster(*window)
    assert (sub.rows, sub.cols) == (rows, cols)
    expected = [pa[first_row + r, first_col + c] for r in range(rows) for c in range(cols)]
    assert list(sub) == expected


def test_padded_sub_raster_out_of_bounds():
    pa = pad(numbered(3, 2), 1, 1, 1, 1, 0)
    with pytest.raises(ValueError):
        pa.sub_raster(3, 0, 3, 2)


def test_padded_negative_padding_rejected():
    with pytest.raises(ValueError):
        PaddedRasterView(numbered(2, 2), -1, 0, 0, 0, 0)


def test_padded_index_out_of_range():
    pa = pad(numbered(2, 2), 1, 1, 1, 1, 0)
    assert len(pa) == 16
    assert pa[15] == 0
    with pytest.raises(IndexError):
        pa.__getitem__(len(pa))


# Offset


def test_offset_positive_shift():
    a = Raster.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    shifted = offset(a, 1, 1, 0)
    assert list(shifted) == [5, 6, 0, 8, 9, 0, 0, 0, 0]


def test_offset_negative_shift():
    a = Raster.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    shifted = offset(a, -1, 0, -9)
    assert list(shifted) == [-9, -9, -9, 1, 2, 3, 4, 5, 6]
    assert (shifted.rows, shifted.cols) == (3, 3)


def test_offset_zero_is_identity():
    a = numbered(3, 4)
    assert list(offset(a, 0, 0, 0)) == list(a)


# Uniform


def test_uniform_values_and_shape():
    u = uniform(2, 3, 7)
    assert list(u) == [7] * 6
    assert len(u) == 6
    assert u[1, 2] == 7
    assert u[-1] == 7


def test_uniform_sub_raster_keeps_value():
    u = UniformRasterView(4, 5, 2.5)
    sub = u.sub_raster(1, 1, 2, 2)
    assert (sub.rows, sub.cols) == (2, 2)
    assert list(sub) == [2.5] * 4


def test_uniform_index_error():
    with pytest.raises(IndexError):
        uniform(2, 2, 1)[4]


def test_uniform_negative_shape_rejected():
    with pytest.raises(ValueError):
        uniform(-1, 2, 0)


# Tuple rasters


def test_basic_tuple_raster():
    a = create_temp(3, 2)
    b = create_temp(3, 2, 0.0)
    c = create_temp(3, 2)
    ab = raster_tuple(a, b)
    abc = raster_tuple(a, b, c)
    for index in range(len(ab)):
        v = index + 1
        ab[index] = (v, 100 * v)
    for index, (x, y, _) in enumerate(abc):
        abc[index] = (x, y, x + y)
    assert list(c) == [101, 202, 303, 404, 505, 606]


def test_basic_tuple_raster_subraster():
    a = create_temp(8, 7)
    b = create_temp(8, 7, 0.0)
    c = create_temp(8, 7)
    ab = raster_tuple(a, b)
    abc = raster_tuple(a, b, c)
    for index in range(len(ab)):
        v = index + 1
        ab[index] = (v, 100 * v)
    sub_abc = abc.sub_raster(2, 3, 4, 3)
    for index, (x, y, _) in enumerate(sub_abc):
        sub_abc[index] = (x, y, x + y)
    assert list(c.sub_raster(2, 3, 4, 3)) == [
        1818, 1919, 2020,
        2525, 2626, 2727,
        3232, 3333, 3434,
        3939, 4040, 4141,
    ]


def test_empty_tuple_raster():
    t = TupleRasterView()
    assert (t.rows, t.cols, len(t)) == (0, 0, 0)
    assert list(t) == []


def test_tuple_raster_wrong_arity():
    t = raster_tuple(create_temp(2, 2, 1), create_temp(2, 2, 2))
    with pytest.raises(ValueError):
        t.__setitem__(0, (1, 2, 3))
    assert t[1] == (1, 2)
    assert (t.rows, t.cols, len(t)) == (2, 2, 4)


def test_tuple_raster_shape_mismatch():
    with pytest.raises(ValueError):
        raster_tuple(create_temp(2, 2), create_temp(2, 3))


# Pair rasters


def test_pair_raster_iteration_and_write():
    a = numbered(2, 2)
    b = numbered(2, 2, 10)
    p = PairRasterView(a, b)
    assert list(p) == [(1, 10), (2, 20), (3, 30), (4, 40)]
    p[1, 0] = (-3, -30)
    assert a[1, 0] == -3
    assert b[2] == -30


def test_pair_raster_sub_raster():
    p = PairRasterView(numbered(3, 3), numbered(3, 3, 2))
    sub = p.sub_raster(1, 1, 2, 2)
    assert list(sub) == [(5, 10), (6, 12), (8, 16), (9, 18)]
    assert sub[3] == (9, 18)


# Vector of rasters


def test_vector_raster_iteration():
    v = raster_vector([numbered(2, 2), numbered(2, 2, 10), numbered(2, 2, 100)])
    assert list(v) == [[1, 10, 100], [2, 20, 200], [3, 30, 300], [4, 40, 400]]
    assert len(v) == 4


def test_vector_raster_write_and_sub_raster():
    rasters = [numbered(3, 3), numbered(3, 3, 10)]
    v = VectorOfRasterView(rasters)
    v[0, 0] = [0, 0]
    assert rasters[0][0] == 0 and rasters[1][0] == 0
    sub = v.sub_raster(0, 0, 2, 1)
    assert list(sub) == [[0, 0], [4, 40]]


def test_empty_vector_raster():
    v = raster_vector([])
    assert (v.rows, v.cols) == (0, 0)
    assert list(v) == []


def test_vector_raster_wrong_arity():
    v = raster_vector([create_temp(1, 2, 5)])
    with pytest.raises(ValueError):
        v.__setitem__(0, [1, 2])
    assert v[1] == [5]
    assert len(v) == 2