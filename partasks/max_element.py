"""Maximum element of a vector, split among workers."""

from __future__ import annotations

import random
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

DEFAULT_WORKERS = 4
INT_MIN = -(2**31)


def random_vector(size: int, max_possible: int) -> list[int]:
    """Return ``size`` random values in ``[0, max_possible)``."""
    if size < 0:
        raise ValueError("size must not be negative")
    if max_possible <= 0:
        raise ValueError("max_possible must be positive")
    rng = random.Random()
    return [rng.getrandbits(32) % max_possible for _ in range(size)]


def _local_max(chunk: Sequence[int]) -> int:
    return max(chunk, default=INT_MIN)


def parallel_max(
    values: Sequence[int], size: int, workers: int = DEFAULT_WORKERS
) -> int:
    """Return the largest value, splitting the vector among workers.

    The first ``size % workers`` workers take one element more than the rest.
    A worker left without elements contributes the smallest 32-bit integer,
    which is therefore also the result for an empty vector.
    """
    if workers < 1:
        raise ValueError("at least one worker is required")
    if size != len(values):
        raise ValueError("size does not match the vector length")
    base, extra = divmod(size, workers)
    chunks = []
    start = 0
    for rank in range(workers):
        count = base + 1 if rank < extra else base
        chunks.append(values[start:start + count])
        start += count
    with ThreadPoolExecutor(max_workers=workers) as pool:
        local_maxima = list(pool.map(_local_max, chunks))
    return max(local_maxima, default=INT_MIN)