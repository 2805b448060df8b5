"""Shell sort with Knuth gaps, a move-counting comparison with insertion sort, and bar drawings."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

COMPARISON_SIZE = 10000
COMPARISON_LIMIT = 10000


@dataclass(frozen=True)
class SortRun:
    """Outcome of a sort: the sorted values, how many shifts it made, and its time."""

    values: list[int]
    iterations: int
    seconds: float = 0.0


def knuth_gaps(size: int) -> list[int]:
    """Gaps of the 3x+1 sequence used for a list of ``size`` items, largest first."""
    gap = 1
    while True:
        gap = 3 * gap + 1
        if gap >= size:
            break
    gaps = []
    while True:
        gap //= 3
        gaps.append(gap)
        if gap <= 1:
            break
    return gaps


def _gapped_insertion(items: list[int], gap: int) -> int:
    moves = 0
    for i in range(gap, len(items)):
        value = items[i]
        j = i - gap
        while j >= 0 and value < items[j]:
            items[j + gap] = items[j]
            j -= gap
            moves += 1
        items[j + gap] = value
    return moves


def shell_sort(values: Iterable[int]) -> SortRun:
    """Sort a copy with Shell sort, counting the element shifts made."""
    items = list(values)
    moves = sum(_gapped_insertion(items, gap) for gap in knuth_gaps(len(items)))
    return SortRun(items, moves)


def insertion_sort_count(values: Iterable[int]) -> SortRun:
    """Sort a copy with insertion sort, counting the element shifts made."""
    items = list(values)
    moves = _gapped_insertion(items, 1)
    return SortRun(items, moves)


def shell_sort_steps(values: Iterable[int]) -> Iterator[tuple[int, int, list[int]]]:
    """Shell sort a copy, yielding ``(gap, index, snapshot)`` after each insertion."""
    items = list(values)
    for gap in knuth_gaps(len(items)):
        for i in range(gap, len(items)):
            value = items[i]
            j = i
            while j >= gap and items[j - gap] > value:
                items[j] = items[j - gap]
                j -= gap
            items[j] = value
            yield gap, i, list(items)


def render_bars(values: Sequence[int], title: str) -> str:
    """Draw each value as a row of '#' characters under a title line."""
    rows = "".join(f"{value:2d}: {'#' * value}\n" for value in values)
    return f"\n{title}\n{rows}"


def _timed(sort, values: list[int]) -> SortRun:
    start = time.perf_counter()
    run = sort(values)
    elapsed = time.perf_counter() - start
    return SortRun(run.values, run.iterations, elapsed)


def compare_shell_insertion(
    size: int = COMPARISON_SIZE, rng: Optional[random.Random] = None
) -> tuple[SortRun, SortRun]:
    """Sort the same random list with Shell sort and insertion sort, timing both."""
    generator = rng if rng is not None else random.Random()
    original = [generator.randrange(COMPARISON_LIMIT) for _ in range(size)]
    return _timed(shell_sort, original), _timed(insertion_sort_count, original)