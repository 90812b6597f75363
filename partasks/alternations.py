"""Counting sign alternations between neighbouring elements of a vector."""

from __future__ import annotations

import random
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

DEFAULT_WORKERS = 4
_UINT32 = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value >= (1 << 31) else value


def count_alternations(values: Sequence[int]) -> int:
    """Count neighbours where a strictly positive and a strictly negative value meet."""
    return sum(
        1
        for left, right in zip(values, values[1:])
        if (left > 0 and right < 0) or (left < 0 and right > 0)
    )


def count_alternations_signbit(values: Sequence[int]) -> int:
    """Count neighbours whose sign bits differ; zero counts as non-negative."""
    return sum(1 for left, right in zip(values, values[1:]) if (left ^ right) < 0)


def _chunks(length: int, workers: int) -> list[tuple[int, int]]:
    base, extra = divmod(length, workers)
    counts = [base + 1 if rank < extra else base for rank in range(workers)]
    bounds = []
    start = 0
    for rank, count in enumerate(counts):
        # Every chunk but the last overlaps the next by one element.
        stop = start + count + (1 if rank < workers - 1 else 0)
        bounds.append((start, stop))
        start += count
    return bounds


def parallel_count(values: Sequence[int], workers: int = DEFAULT_WORKERS) -> int:
    """Count sign-bit alternations, splitting the vector among workers.

    Vectors shorter than two elements per worker are counted in one pass.
    """
    if workers < 1:
        raise ValueError("at least one worker is required")
    if len(values) < workers * 2:
        return count_alternations_signbit(values)
    parts = [values[start:stop] for start, stop in _chunks(len(values), workers)]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return sum(pool.map(count_alternations_signbit, parts))


def random_nonzero_values(length: int) -> list[int]:
    """Return ``length`` random non-zero 32-bit signed values of either sign."""
    if length < 0:
        raise ValueError("length must not be negative")
    rng = random.Random()
    result = []
    while len(result) < length:
        magnitude = _to_int32(rng.randint(1, _UINT32))
        sign = -1 if _to_int32(rng.randint(1, _UINT32)) & 1 else 1
        value = _to_int32(magnitude * sign)
        if value:
            result.append(value)
    return result