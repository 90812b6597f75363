import pytest

from partasks.alternations import (
    count_alternations,
    count_alternations_signbit,
    parallel_count,
    random_nonzero_values,
)


def _borders(length):
    values = [1] * length
    values[0] = values[-1] = -1
    return values


def _middle(length, index):
    values = [1] * length
    values[index] = -1
    return values


@pytest.mark.parametrize(
    "values",
    [_borders(200), _middle(200, 100), [-1] * 200, [1] * 200],
)
def test_parallel_matches_sequential_fixed(values):
    assert parallel_count(values) == count_alternations(values)


@pytest.mark.parametrize("length", [100000, 110, 11, 8])
def test_parallel_matches_sequential_random(length):
    values = random_nonzero_values(length)
    assert parallel_count(values) == count_alternations(values)


@pytest.mark.parametrize("workers", [1, 2, 3, 5, 6, 64])
def test_parallel_any_worker_count(workers):
    values = random_nonzero_values(110)
    assert parallel_count(values, workers) == count_alternations(values)


def test_sequential_versions_two_at_borders():
    values = _borders(1000)
    assert count_alternations(values) == count_alternations_signbit(values) == 2


def test_sequential_versions_one_in_middle():
    values = _middle(1000, 400)
    assert count_alternations(values) == count_alternations_signbit(values) == 2


@pytest.mark.parametrize("fill", [-1, 1])
def test_sequential_versions_uniform(fill):
    values = [fill] * 1000
    assert count_alternations(values) == count_alternations_signbit(values) == 0


def test_sequential_versions_random():
    values = random_nonzero_values(1000)
    assert count_alternations(values) == count_alternations_signbit(values)


def test_zero_treated_differently():
    values = [-1, 0, -1]
    assert count_alternations(values) == 0
    assert count_alternations_signbit(values) == 2


def test_short_vectors():
    assert parallel_count([]) == 0
    assert parallel_count([5]) == 0
    assert parallel_count([1, -1, 1]) == 2


def test_random_values_never_zero():
    for _ in range(10):
        values = random_nonzero_values(1000)
        assert len(values) == 1000
        assert values.count(0) == 0


def test_random_values_have_both_signs():
    for _ in range(30):
        values = random_nonzero_values(30)
        assert any(v > 0 for v in values)
        assert any(v < 0 for v in values)


def test_random_values_fit_32_bits():
    values = random_nonzero_values(500)
    assert len(values) == 500
    assert all(-(2**31) <= v < 2**31 for v in values)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        random_nonzero_values(-1)


def test_zero_workers_rejected():
    with pytest.raises(ValueError):
        parallel_count([1, -1], 0)