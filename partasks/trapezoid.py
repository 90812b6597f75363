"""Definite integrals by the composite trapezoidal rule."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

DEFAULT_WORKERS = 4

Function = Callable[[float], float]


def _check(n: int) -> None:
    if n < 1:
        raise ValueError("the number of intervals must be positive")


def _trapezoid(a: float, width: float, index: int, f: Function) -> float:
    x1 = a + index * width
    x2 = a + (index + 1) * width
    return 0.5 * (x2 - x1) * (f(x1) + f(x2))


def sequential_integral(a: float, b: float, n: int, f: Function) -> float:
    """Integrate ``f`` over ``[a, b]`` using ``n`` equal trapezoids."""
    _check(n)
    width = (b - a) / n
    total = 0.0
    for index in range(n):
        total += _trapezoid(a, width, index, f)
    return total


def parallel_integral(
    a: float, b: float, n: int, f: Function, workers: int = DEFAULT_WORKERS
) -> float:
    """Integrate ``f`` over ``[a, b]``, dealing the trapezoids out round-robin.

    Worker ``rank`` sums the trapezoids ``rank, rank + workers, ...``; the
    partial sums are then added in rank order.
    """
    if workers < 1:
        raise ValueError("at least one worker is required")
    _check(n)
    width = (b - a) / n

    def work(rank: int) -> float:
        local = 0.0
        for index in range(rank, n, workers):
            local += _trapezoid(a, width, index, f)
        return local

    with ThreadPoolExecutor(max_workers=workers) as pool:
        partial_sums = list(pool.map(work, range(workers)))
    total = 0.0
    for partial in partial_sums:
        total += partial
    return total