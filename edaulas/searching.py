"""Sequential, block-indexed and binary search over integer lists, with timing."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Iterable, Optional

from edaulas.advanced_sorts import heap_sort, merge_sort

DEFAULT_BLOCK_SIZE = 4


@dataclass(frozen=True)
class SearchResult:
    """Where the target sits in ``values`` (the sorted list searched), and the time taken."""

    index: Optional[int]
    values: list[int]
    milliseconds: float

    @property
    def found(self) -> bool:
        return self.index is not None


def descending_values(size: int) -> list[int]:
    """Return ``size, size - 1, ..., 1``."""
    return list(range(size, 0, -1))


def exchange_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, swapping each position with any smaller later value."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        for j in range(i + 1, size):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


def sequential_search(values: Iterable[int], target: int) -> SearchResult:
    """Merge sort the values, then scan them from the start for ``target``.

    The reported time covers both the sort and the scan.
    """
    start = time.perf_counter()
    items = merge_sort(values)
    index = next((i for i, value in enumerate(items) if value == target), None)
    return SearchResult(index, items, _elapsed_ms(start))


def indexed_search(
    values: Iterable[int], target: int, block_size: int = DEFAULT_BLOCK_SIZE
) -> SearchResult:
    """Merge sort the values, pick the first block whose range holds ``target``, scan it.

    The reported time covers the sort, the block lookup and the scan.
    """
    if block_size <= 0:
        raise ValueError("block_size must be positive")
    start = time.perf_counter()
    items = merge_sort(values)
    starts = range(0, len(items), block_size)
    bounds = [(first, min(first + block_size, len(items))) for first in starts]
    block = next(
        ((first, end) for first, end in bounds if items[first] <= target <= items[end - 1]),
        None,
    )
    index = None
    if block is not None:
        first, end = block
        index = next((i for i in range(first, end) if items[i] == target), None)
    return SearchResult(index, items, _elapsed_ms(start))


def binary_search(values: Iterable[int], target: int) -> SearchResult:
    """Heap sort a copy of the values, then halve the range until ``target`` is met.

    The reported time covers only the search, not the sort.
    """
    items = heap_sort(values)
    start = time.perf_counter()
    low, high = 0, len(items) - 1
    index = None
    while low <= high:
        middle = (low + high) // 2
        if items[middle] == target:
            index = middle
            break
        if target < items[middle]:
            high = middle - 1
        else:
            low = middle + 1
    return SearchResult(index, items, _elapsed_ms(start))