"""Minimum of a matrix held as a list of rows, split among workers by rows."""

from __future__ import annotations

import itertools
import random
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

DEFAULT_WORKERS = 4
RAND_MAX = 2**31 - 1

Matrix = Sequence[Sequence[int]]


def fill_random_matrix(rows: int, cols: int) -> list[list[int]]:
    """Return a ``rows`` x ``cols`` matrix of random values in ``[0, RAND_MAX]``."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    rng = random.Random()
    return [[rng.randint(0, RAND_MAX) for _ in range(cols)] for _ in range(rows)]


def single_find_minimum(matrix: Matrix) -> int:
    """Return the smallest element of the whole matrix."""
    try:
        return min(itertools.chain.from_iterable(matrix))
    except ValueError:
        raise ValueError("matrix is empty") from None


def parallel_find_minimum(matrix: Matrix, workers: int = DEFAULT_WORKERS) -> int:
    """Return the matrix minimum, handing each worker a band of rows.

    Each worker gets ``rows // workers`` rows; the first worker also keeps the
    ``rows % workers`` extra rows at the top. A worker without rows is an error.
    """
    if workers < 1:
        raise ValueError("at least one worker is required")
    rows = len(matrix)
    package, excess = divmod(rows, workers)
    bands = [matrix[: package + excess]]
    for rank in range(1, workers):
        start = excess + package * rank
        bands.append(matrix[start:start + package])
    with ThreadPoolExecutor(max_workers=workers) as pool:
        local_minima = list(pool.map(single_find_minimum, bands))
    return min(local_minima)