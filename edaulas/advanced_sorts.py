"""Divide-and-conquer and heap-based sorts: merge sort, quicksort and heapsort."""

from __future__ import annotations

from typing import Iterable, MutableSequence


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, splitting in halves and merging them back stably."""
    items = list(values)
    if len(items) < 2:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def partition(values: MutableSequence[int], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` in place around its last element.

    Values less than or equal to the pivot end up before it; the pivot's
    final index is returned.
    """
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] <= pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using quicksort with the last element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = partition(items, low, high)
            pending.append((pivot_index + 1, high))
            pending.append((low, pivot_index - 1))
    return items


def heapify(values: MutableSequence[int], size: int, index: int) -> None:
    """Sift ``values[index]`` down so the first ``size`` items form a max-heap below it."""
    while True:
        largest = index
        left = 2 * index + 1
        right = 2 * index + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy: build a max-heap, then move the maximum to the end repeatedly."""
    items = list(values)
    size = len(items)
    for i in range(size // 2 - 1, -1, -1):
        heapify(items, size, i)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)
    return items