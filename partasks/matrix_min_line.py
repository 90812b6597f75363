"""Per-row minima of a matrix stored as a flat row-major sequence."""

from __future__ import annotations

import functools
import random
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

DEFAULT_WORKERS = 4
VALUE_LIMIT = 100
ROW_MIN_START = 101


def random_vector(rows: int, cols: int) -> list[int]:
    """Return ``rows * cols`` random values in ``[0, 100)``."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    rng = random.Random()
    return [rng.randrange(VALUE_LIMIT) for _ in range(rows * cols)]


def min_search(a: int, b: int) -> int:
    """Return the smaller of two values, preferring ``a`` on a tie."""
    return a if a <= b else b


def _row_min(row: Sequence[int]) -> int:
    return functools.reduce(min_search, row, ROW_MIN_START)


def _rows(values: Sequence[int], cols: int, start: int, stop: int):
    for row in range(start, stop):
        yield values[row * cols:(row + 1) * cols]


def _check(values: Sequence[int], rows: int, cols: int) -> None:
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    if len(values) != rows * cols:
        raise ValueError("matrix size does not match its dimensions")


def sequential_row_minima(values: Sequence[int], rows: int, cols: int) -> list[int]:
    """Return the minimum of each row, never above 101."""
    _check(values, rows, cols)
    return [_row_min(row) for row in _rows(values, cols, 0, rows)]


def parallel_row_minima(
    values: Sequence[int], rows: int, cols: int, workers: int = DEFAULT_WORKERS
) -> list[int]:
    """Return the minimum of each row, splitting whole rows among workers.

    Each worker handles ``rows // workers`` consecutive rows; the rows left
    over are handled afterwards by the caller's side. A non-empty matrix with
    fewer rows than workers is an error.
    """
    if workers < 1:
        raise ValueError("at least one worker is required")
    _check(values, rows, cols)
    delta = rows // workers
    if rows and delta == 0:
        raise ValueError("fewer rows than workers")

    def work(rank: int) -> list[int]:
        start = rank * delta
        return [_row_min(row) for row in _rows(values, cols, start, start + delta)]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        gathered = [m for part in pool.map(work, range(workers)) for m in part]
    tail = [_row_min(row) for row in _rows(values, cols, workers * delta, rows)]
    return gathered + tail