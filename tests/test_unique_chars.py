import pytest

from partasks.unique_chars import (
    count_unique,
    distribute_jobs,
    random_string,
    split_comm,
    unique_chars_parallel,
    unique_chars_sequential,
)

STRS1 = ["apple", "", "", "orange", "kkk"]
STRS2 = ["orange", "apple", "", "orange", "mmm"]
ANSWERS = [6, 4, 0, 0, 2]
MAXSIZE = 200
STEP = 20


@pytest.mark.parametrize("first, second, expected", zip(STRS1, STRS2, ANSWERS))
def test_sequential(first, second, expected):
    assert unique_chars_sequential(first, second) == expected


@pytest.mark.parametrize("first, second, expected", zip(STRS1, STRS2, ANSWERS))
@pytest.mark.parametrize("workers", [1, 2, 3, 4, 7])
def test_parallel(first, second, expected, workers):
    assert unique_chars_parallel(first, second, workers) == expected


@pytest.mark.parametrize("size", range(0, MAXSIZE, STEP))
def test_parallel_random_same_size(size):
    first, second = random_string(size), random_string(size)
    assert unique_chars_parallel(first, second) == unique_chars_sequential(first, second)


@pytest.mark.parametrize("size", range(0, MAXSIZE, STEP))
def test_parallel_random_different_size(size):
    first, second = random_string(size), random_string(MAXSIZE - size)
    assert unique_chars_parallel(first, second) == unique_chars_sequential(first, second)


def test_random_string_letters():
    text = random_string(300)
    assert len(text) == 300
    assert all("a" <= ch <= "z" for ch in text)


def test_random_string_negative():
    with pytest.raises(ValueError):
        random_string(-1)


def test_count_unique_counts_first_occurrence_only():
    assert count_unique("kkk", 0, 3, "") == 1
    assert count_unique("kkk", 1, 2, "") == 0


def test_count_unique_excludes_shared():
    assert count_unique("apple", 0, 5, "orange") == 2


@pytest.mark.parametrize("size", [1, 3, 4, 9])
@pytest.mark.parametrize("jobs", [0, 1, 5, 17])
def test_distribute_jobs_partitions(size, jobs):
    shares = [distribute_jobs(rank, size, jobs) for rank in range(size)]
    expected_start = 0
    for start, count in shares:
        assert start == expected_start
        expected_start += count
    assert expected_start == jobs
    counts = [count for _, count in shares]
    assert max(counts) - min(counts) <= 1


def test_distribute_jobs_requires_worker():
    with pytest.raises(ValueError):
        distribute_jobs(0, 0, 5)


def test_split_comm_empty_string():
    assert split_comm(4, 0, 10) == 1
    assert split_comm(4, 10, 0) == 1


@pytest.mark.parametrize("global_size", [1, 2, 4, 8])
@pytest.mark.parametrize("sizes", [(1, 1), (5, 100), (100, 5), (30, 40)])
def test_split_comm_bounds(global_size, sizes):
    split = split_comm(global_size, *sizes)
    assert 1 <= split <= max(global_size - 1, 1)


def test_parallel_requires_worker():
    with pytest.raises(ValueError):
        unique_chars_parallel("a", "b", 0)