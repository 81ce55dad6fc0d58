"""Exact distance transforms on rasters, by the separable method of Meijster."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable
from typing import Any


class Method(enum.Enum):
    """The distance metric of a transform."""

    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"
    CHESSBOARD = "chessboard"


def post_process_square_root(distance_squared: int) -> float:
    """Turn a squared Euclidean distance into a distance."""
    return math.sqrt(distance_squared)


def post_process_none(distance: int) -> int:
    """Leave a distance as it is."""
    return distance


class PostProcessBufferSquareRoot:
    """Marks cells within a Euclidean distance as ``inside``, others ``outside``."""

    def __init__(self, distance: float, inside: int = 1, outside: int = 0) -> None:
        self.threshold = int(distance * distance)
        self.inside = inside
        self.outside = outside

    def __call__(self, distance_squared: int) -> int:
        return self.inside if distance_squared <= self.threshold else self.outside


class PostProcessBuffer:
    """Marks cells within ``threshold`` as 1.0 and others as 0.0."""

    def __init__(self, threshold: int) -> None:
        self.threshold = threshold

    def __call__(self, distance: int) -> float:
        return 1.0 if distance <= self.threshold else 0.0


def _div(numerator: int, denominator: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def _f_euclidean(x: int, i: int, g: list[int]) -> int:
    dx = x - i
    dy = g[i]
    return dx * dx + dy * dy


def _f_manhattan(x: int, i: int, g: list[int]) -> int:
    return abs(x - i) + g[i]


def _f_chessboard(x: int, i: int, g: list[int]) -> int:
    return max(abs(x - i), g[i])


def _sep_euclidean(i: int, u: int, g: list[int], inf: int) -> int:
    return _div((u - i) * (u + i) + (g[u] - g[i]) * (g[u] + g[i]), 2 * (u - i))


def _sep_manhattan(i: int, u: int, g: list[int], inf: int) -> int:
    if g[u] >= g[i] + u - i:
        return inf
    if g[i] > g[u] + u - i:
        return -inf
    return _div(g[u] - g[i] + u + i, 2)


def _sep_chessboard(i: int, u: int, g: list[int], inf: int) -> int:
    if g[i] <= g[u]:
        return max(i + g[u], _div(i + u, 2))
    return min(u - g[i], _div(i + u, 2))


_METRICS = {
    Method.EUCLIDEAN: (_f_euclidean, _sep_euclidean),
    Method.MANHATTAN: (_f_manhattan, _sep_manhattan),
    Method.CHESSBOARD: (_f_chessboard, _sep_chessboard),
}


def _process_line(
    row: Any, inf: int, method: Method, post_process: Callable[[int], Any]
) -> bool:
    """Resolve the distances along one row in place; tell whether a target was reached."""
    f, sep = _METRICS[method]
    g = [int(v) for v in reversed(list(row))]
    m = len(g)
    if m == 0:
        return False
    segments: list[tuple[int, int]] = [(0, 0)]  # (s, t)
    for u in range(1, m):
        while segments and f(segments[-1][1], segments[-1][0], g) > f(segments[-1][1], u, g):
            segments.pop()
        if not segments:
            segments.append((u, 0))
        else:
            w = 1 + sep(segments[-1][0], u, g, inf)
            if w < m:
                segments.append((u, w))

    has_target = f(m - 1, segments[-1][0], g) != inf
    results = []
    for u in range(m - 1, -1, -1):
        s, t = segments[-1]
        results.append(post_process(f(u, s, g)))
        if u == t:
            segments.pop()
    row.assign(results)
    return has_target


def distance_transform(
    raster: Any,
    out: Any,
    target: Any,
    method: Method,
    post_process: Callable[[int], Any],
) -> bool:
    """Write the distance of each cell to the nearest ``target`` cell into ``out``.

    Returns False if the target was not found in the raster, True otherwise.
    """
    rows, cols = raster.rows, raster.cols
    if (out.rows, out.cols) != (rows, cols):
        raise ValueError(
            f"output raster of {out.rows}x{out.cols} does not match input of {rows}x{cols}"
        )
    if rows == 0 or cols == 0:
        return False
    inf = rows + cols

    def row_of(r: Any, index: int) -> Any:
        return r.sub_raster(index, 0, 1, cols)

    out_rows = [row_of(out, r) for r in range(rows)]

    out_rows[0].assign(0 if a == target else inf for a in row_of(raster, 0))
    for r in range(1, rows):
        above = list(out_rows[r - 1])
        out_rows[r].assign(
            0 if a == target else inf if b == inf else int(b) + 1
            for a, b in zip(row_of(raster, r), above)
        )

    for r in range(rows - 2, -1, -1):
        below = list(out_rows[r + 1])
        out_rows[r].assign(min(a, b + 1) for a, b in zip(list(out_rows[r]), below))
        _process_line(out_rows[r + 1], inf, method, post_process)

    return _process_line(out_rows[0], inf, method, post_process)


def euclidean_distance_transform(raster: Any, out: Any, target: Any) -> bool:
    """Euclidean distance to the nearest target cell."""
    return distance_transform(raster, out, target, Method.EUCLIDEAN, post_process_square_root)


def euclidean_distance_buffer_transform(
    raster: Any, out: Any, target: Any, buffer: float, inside: int = 1, outside: int = 0
) -> bool:
    """Mark cells within ``buffer`` Euclidean distance of a target cell."""
    return distance_transform(
        raster,
        out,
        target,
        Method.EUCLIDEAN,
        PostProcessBufferSquareRoot(buffer, inside, outside),
    )


def squared_euclidean_distance_transform(raster: Any, out: Any, target: Any) -> bool:
    """Squared Euclidean distance to the nearest target cell."""
    return distance_transform(raster, out, target, Method.EUCLIDEAN, post_process_none)


def manhattan_distance_transform(raster: Any, out: Any, target: Any) -> bool:
    """Manhattan distance to the nearest target cell."""
    return distance_transform(raster, out, target, Method.MANHATTAN, post_process_none)


def chessboard_distance_transform(raster: Any, out: Any, target: Any) -> bool:
    """Chessboard distance to the nearest target cell."""
    return distance_transform(raster, out, target, Method.CHESSBOARD, post_process_none)