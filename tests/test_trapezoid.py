import math

import pytest

from partasks.trapezoid import parallel_integral, sequential_integral

FUNCTIONS = [
    lambda x: x * x,
    lambda x: x * x * x,
    math.sin,
    lambda x: x * x - 5 * x + 4,
    math.cos,
]


@pytest.mark.parametrize("f", FUNCTIONS)
def test_parallel_matches_sequential(f):
    reference = sequential_integral(0, 10, 100, f)
    result = parallel_integral(0, 10, 100, f)
    assert result == pytest.approx(reference, rel=1e-12, abs=1e-12)


@pytest.mark.parametrize("workers", [1, 2, 3, 7, 150])
def test_parallel_any_worker_count(workers):
    reference = sequential_integral(0, 10, 100, math.sin)
    result = parallel_integral(0, 10, 100, math.sin, workers)
    assert result == pytest.approx(reference, rel=1e-12, abs=1e-12)


def test_linear_function_is_exact():
    assert sequential_integral(0, 10, 100, lambda x: x) == pytest.approx(50.0)


def test_constant_function():
    assert parallel_integral(0, 10, 100, lambda x: 1.0) == pytest.approx(10.0)


def test_convex_function_overestimates():
    result = sequential_integral(0, 10, 100, lambda x: x * x)
    assert result > 1000 / 3
    assert result == pytest.approx(1000 / 3, rel=1e-3)


def test_reversed_interval_changes_sign():
    forward = sequential_integral(0, 10, 100, math.cos)
    backward = sequential_integral(10, 0, 100, math.cos)
    assert backward == pytest.approx(-forward)


def test_zero_intervals_rejected():
    with pytest.raises(ValueError):
        sequential_integral(0, 1, 0, math.sin)
    with pytest.raises(ValueError):
        parallel_integral(0, 1, 0, math.sin)


def test_zero_workers_rejected():
    with pytest.raises(ValueError):
        parallel_integral(0, 1, 10, math.sin, 0)