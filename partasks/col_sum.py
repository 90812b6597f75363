"""Sum of all matrix elements, with whole columns dealt out to workers."""

from __future__ import annotations

import random
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

DEFAULT_WORKERS = 4
VALUE_MIN = -100
VALUE_MAX = 100

Matrix = Sequence[Sequence[int]]


def random_vector(size: int) -> list[int]:
    """Return ``size`` random values in ``[-100, 100]``."""
    if size < 0:
        raise ValueError("size must not be negative")
    rng = random.Random()
    return [rng.randint(VALUE_MIN, VALUE_MAX) for _ in range(size)]


def random_matrix(rows: int, cols: int) -> list[list[int]]:
    """Return a ``rows`` x ``cols`` matrix of random values in ``[-100, 100]``."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    return [random_vector(cols) for _ in range(rows)]


def _check(matrix: Matrix, rows: int, cols: int) -> None:
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    if rows > len(matrix) or any(len(row) < cols for row in matrix[:rows]):
        raise ValueError("matrix is smaller than its stated dimensions")


def sequential_sum(matrix: Matrix, rows: int, cols: int) -> int:
    """Return the sum of the first ``rows`` x ``cols`` elements."""
    _check(matrix, rows, cols)
    return sum(sum(row[:cols]) for row in matrix[:rows])


def parallel_sum(
    matrix: Matrix, rows: int, cols: int, workers: int = DEFAULT_WORKERS
) -> int:
    """Return the matrix sum, dealing columns round-robin among workers.

    Worker ``rank`` sums columns ``rank, rank + workers, ...``; the partial
    sums are then added together.
    """
    if workers < 1:
        raise ValueError("at least one worker is required")
    _check(matrix, rows, cols)

    def work(rank: int) -> int:
        return sum(
            matrix[row][col] for col in range(rank, cols, workers) for row in range(rows)
        )

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return sum(pool.map(work, range(workers)))