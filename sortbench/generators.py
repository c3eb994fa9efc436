"""Input arrays of the kinds the benchmark sorts."""

from __future__ import annotations

import random


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"array size must not be negative: {size}")


def random_array(size: int, rng: random.Random | None = None) -> list[int]:
    """Return `size` uniform random integers in the range [0, size - 1]."""
    _check_size(size)
    rng = rng or random.Random()
    return [rng.randint(0, size - 1) for _ in range(size)]


def sorted_array(size: int) -> list[int]:
    """Return 0, 1, ..., size - 1."""
    _check_size(size)
    return list(range(size))


def partially_sorted_array(
    size: int, num_swaps: int, rng: random.Random | None = None
) -> list[int]:
    """Return a sorted array disturbed by `num_swaps` random transpositions."""
    arr = sorted_array(size)
    rng = rng or random.Random()
    for _ in range(num_swaps):
        a = rng.randint(0, size - 1)
        b = rng.randint(0, size - 1)
        if a != b:
            arr[a], arr[b] = arr[b], arr[a]
    return arr


def reverse_sorted_array(size: int) -> list[int]:
    """Return size - 1, ..., 1, 0."""
    _check_size(size)
    return list(range(size - 1, -1, -1))