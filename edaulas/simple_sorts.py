"""Elementary comparison sorts: bubble, selection, insertion and cocktail shaker."""

from __future__ import annotations

import random
from typing import Iterable, Optional, Sequence

DEFAULT_COUNT = 10
VALUE_LIMIT = 100


def random_values(count: int = DEFAULT_COUNT, rng: Optional[random.Random] = None) -> list[int]:
    """Return ``count`` random integers between 0 and 99."""
    generator = rng if rng is not None else random.Random()
    return [generator.randrange(VALUE_LIMIT) for _ in range(count)]


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, swapping adjacent out-of-order pairs pass after pass."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, moving the smallest remaining value into place each pass."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        smallest = min(range(i, size), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, inserting each value into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def cocktail_shaker_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, bubbling alternately forwards and backwards."""
    items = list(values)
    start, end = 0, len(items) - 1
    swapped = True
    while swapped:
        swapped = False
        for i in range(start, end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
        end -= 1
        swapped = False
        for i in range(end - 1, start - 1, -1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        start += 1
    return items


def format_values(values: Sequence[int]) -> str:
    """Render values separated by spaces, each followed by one space."""
    return "".join(f"{value} " for value in values)