"""In-place sorting algorithms that record their work in a Metrics object."""

from __future__ import annotations

from collections.abc import MutableSequence

from .metrics import Metrics

INT_SIZE = 4  # bytes per element of the temporary merge buffers


def bubble_sort(arr: MutableSequence[int], metrics: Metrics | None = None) -> None:
    """Sort by repeated adjacent swaps, stopping early once a pass swaps nothing."""
    metrics = metrics if metrics is not None else Metrics()
    n = len(arr)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            metrics.comparisons += 1
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
                metrics.swaps += 1
        if not swapped:
            break
    metrics.auxiliary_bytes = 0


def insertion_sort(arr: MutableSequence[int], metrics: Metrics | None = None) -> None:
    """Sort by inserting each element into the sorted prefix; one move counts as a swap."""
    metrics = metrics if metrics is not None else Metrics()
    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        while j >= 0:
            metrics.comparisons += 1
            if arr[j] > key:
                arr[j + 1] = arr[j]
                j -= 1
            else:
                break
        if j + 1 != i:
            metrics.swaps += 1
        arr[j + 1] = key
    metrics.auxiliary_bytes = 0


def selection_sort(arr: MutableSequence[int], metrics: Metrics | None = None) -> None:
    """Sort by moving the minimum of the unsorted suffix to its front."""
    metrics = metrics if metrics is not None else Metrics()
    n = len(arr)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            metrics.comparisons += 1
            if arr[j] < arr[smallest]:
                smallest = j
        if smallest != i:
            arr[i], arr[smallest] = arr[smallest], arr[i]
            metrics.swaps += 1
    metrics.auxiliary_bytes = 0


def merge(
    arr: MutableSequence[int],
    left: int,
    middle: int,
    right: int,
    metrics: Metrics | None = None,
) -> None:
    """Merge the sorted runs arr[left..middle] and arr[middle+1..right]; each write counts as a swap."""
    metrics = metrics if metrics is not None else Metrics()
    left_run = list(arr[left : middle + 1])
    right_run = list(arr[middle + 1 : right + 1])
    i = j = 0
    k = left
    while i < len(left_run) and j < len(right_run):
        metrics.comparisons += 1
        if left_run[i] <= right_run[j]:
            arr[k] = left_run[i]
            i += 1
        else:
            arr[k] = right_run[j]
            j += 1
        metrics.swaps += 1
        k += 1
    for value in (*left_run[i:], *right_run[j:]):
        arr[k] = value
        metrics.swaps += 1
        k += 1


def _merge_sort_range(
    arr: MutableSequence[int], left: int, right: int, metrics: Metrics
) -> None:
    if left >= right:
        return
    middle = left + (right - left) // 2
    _merge_sort_range(arr, left, middle, metrics)
    _merge_sort_range(arr, middle + 1, right, metrics)
    merge(arr, left, middle, right, metrics)


def merge_sort(arr: MutableSequence[int], metrics: Metrics | None = None) -> None:
    """Top-down merge sort; records one buffer's worth of auxiliary memory."""
    metrics = metrics if metrics is not None else Metrics()
    if len(arr) <= 1:
        return
    _merge_sort_range(arr, 0, len(arr) - 1, metrics)
    metrics.auxiliary_bytes = len(arr) * INT_SIZE


def partition(
    arr: MutableSequence[int], low: int, high: int, metrics: Metrics | None = None
) -> int:
    """Lomuto partition around arr[high]; return the pivot's final index."""
    metrics = metrics if metrics is not None else Metrics()
    pivot = arr[high]
    i = low - 1
    for j in range(low, high):
        metrics.comparisons += 1
        if arr[j] <= pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
            metrics.swaps += 1
    metrics.swaps += 1
    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    return i + 1


def quick_sort(arr: MutableSequence[int], metrics: Metrics | None = None) -> None:
    """Quick sort with the last element as pivot."""
    metrics = metrics if metrics is not None else Metrics()
    # An explicit stack keeps sorted inputs from exhausting the recursion limit.
    pending = [(0, len(arr) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = partition(arr, low, high, metrics)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))
    metrics.auxiliary_bytes = 0