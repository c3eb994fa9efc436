"""Counters and timing shared by the sorting algorithms."""

from __future__ import annotations

import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class Metrics:
    """Comparison, swap and auxiliary-memory counters plus a wall-clock timer."""

    comparisons: int = 0
    swaps: int = 0
    auxiliary_bytes: int = 0
    _start: float | None = field(default=None, repr=False, compare=False)

    def reset(self) -> None:
        """Zero the comparison, swap and auxiliary-memory counters."""
        self.comparisons = 0
        self.swaps = 0
        self.auxiliary_bytes = 0

    def start_timer(self) -> None:
        """Remember the current instant as the start of a measurement."""
        self._start = time.perf_counter()

    def stop_timer(self) -> float:
        """Return the milliseconds elapsed since the last start_timer()."""
        if self._start is None:
            raise RuntimeError("timer was never started")
        return (time.perf_counter() - self._start) * 1000.0

    def report(self) -> str:
        """Describe the comparison and swap counters."""
        return f"Comparações: {self.comparisons}\nTrocas: {self.swaps}"


def is_sorted(arr: Sequence[int]) -> bool:
    """Return True if no element is smaller than the one before it."""
    return all(prev <= cur for prev, cur in zip(arr, arr[1:]))


def format_array(arr: Iterable[int]) -> str:
    """Render the elements each followed by a space."""
    return "".join(f"{elem} " for elem in arr)