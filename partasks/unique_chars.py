"""Counting characters that occur in only one of two strings."""

from __future__ import annotations

import random
from concurrent.futures import ThreadPoolExecutor

DEFAULT_WORKERS = 4


def random_string(size: int) -> str:
    """Return ``size`` random lowercase ASCII letters."""
    if size < 0:
        raise ValueError("size must not be negative")
    rng = random.Random()
    return "".join(chr(rng.randint(97, 122)) for _ in range(size))


def count_unique(text: str, pos: int, length: int, other: str) -> int:
    """Count distinct characters of ``text[pos:pos + length]`` absent from ``other``.

    A character is counted only at its first occurrence in the whole ``text``.
    """
    return sum(
        1
        for index in range(pos, pos + length)
        if text[index] not in other and text.index(text[index]) == index
    )


def unique_chars_sequential(first: str, second: str) -> int:
    """Count distinct characters found in exactly one of the two strings."""
    return count_unique(first, 0, len(first), second) + count_unique(
        second, 0, len(second), first
    )


def distribute_jobs(rank: int, size: int, jobs: int) -> tuple[int, int]:
    """Return ``(start, count)`` of the contiguous share of ``jobs`` for ``rank``.

    The first ``jobs % size`` ranks take one job more than the rest.
    """
    if size < 1:
        raise ValueError("at least one worker is required")
    count, rest = divmod(jobs, size)
    if rank < rest:
        count += 1
        return count * rank, count
    return (count + 1) * rest + count * (rank - rest), count


def split_comm(global_size: int, first_size: int, second_size: int) -> int:
    """Return how many workers should handle the longer string."""
    if first_size == 0 or second_size == 0:
        return 1
    local_size = max(first_size, second_size) * global_size // (first_size + second_size)
    return local_size or 1


def unique_chars_parallel(first: str, second: str, workers: int = DEFAULT_WORKERS) -> int:
    """Count unique characters, splitting workers into two groups.

    The first group scans the longer string against the shorter one; any
    remaining workers scan the shorter string against the longer one. When all
    workers fall into one group, that group scans both strings.
    """
    if workers < 1:
        raise ValueError("at least one worker is required")
    split = split_comm(workers, len(first), len(second))
    longer, shorter = (first, second) if len(first) > len(second) else (second, first)

    groups = [(split, longer, shorter)]
    if workers > split:
        groups.append((workers - split, shorter, longer))
    single_group = len(groups) == 1

    tasks = [
        (rank, size, own, other)
        for size, own, other in groups
        for rank in range(size)
    ]

    def work(task: tuple[int, int, str, str]) -> int:
        rank, size, own, other = task
        count = count_unique(own, *distribute_jobs(rank, size, len(own)), other)
        if single_group:
            count += count_unique(other, *distribute_jobs(rank, size, len(other)), own)
        return count

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return sum(pool.map(work, tasks))