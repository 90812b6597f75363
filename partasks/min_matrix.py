"""Minimum of a matrix stored as a flat row-major sequence."""

from __future__ import annotations

import random
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

DEFAULT_WORKERS = 4
VALUE_LIMIT = 1000


def random_matrix(rows: int, cols: int) -> list[int]:
    """Return ``rows * cols`` random values in ``[0, 1000)`` in row-major order."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    rng = random.Random()
    return [rng.randrange(VALUE_LIMIT) for _ in range(rows * cols)]


def linear_min(values: Sequence[int]) -> int:
    """Return the smallest value, scanning the sequence once."""
    if len(values) <= 0:
        raise ValueError("wrong size")
    return min(values)


def _chunks(total: int, workers: int) -> list[tuple[int, int]]:
    quotient, remainder = divmod(total, workers)
    bounds = [(rank * quotient, quotient) for rank in range(workers)]
    start, count = bounds[-1]
    bounds[-1] = (start, count + remainder)
    return bounds


def parallel_min(
    values: Sequence[int], rows: int, cols: int, workers: int = DEFAULT_WORKERS
) -> int:
    """Return the matrix minimum, splitting the elements evenly among workers.

    Every worker but the last takes ``rows * cols // workers`` elements; the
    last also takes the remainder. A worker left with no elements is an error.
    """
    if workers < 1:
        raise ValueError("at least one worker is required")
    total = rows * cols
    if len(values) != total:
        raise ValueError("matrix size does not match its dimensions")
    parts = [values[start:start + count] for start, count in _chunks(total, workers)]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        local_minima = list(pool.map(linear_min, parts))
    return min(local_minima)