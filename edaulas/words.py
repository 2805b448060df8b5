"""Sorting and binary search over word lists, by letter position or by code point."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

Comparator = Callable[[str, str], int]

FRUITS: tuple[str, ...] = (
    "banana",
    "uva",
    "abacate",
    "laranja",
    "goiaba",
    "melancia",
    "abacaxi",
    "figo",
    "caju",
    "morango",
)


def letter_position(letter: str) -> int:
    """Position of a letter in the alphabet, ignoring case: a=0, b=1, ..., z=25.

    Characters that are not letters give their offset from 'a' all the same.
    """
    if len(letter) != 1:
        raise ValueError("letter_position expects a single character")
    return ord(letter.lower()) - ord("a")


def compare_words(first: str, second: str) -> int:
    """Compare two words letter by letter, case-insensitively.

    Returns -1, 0 or 1. A word that is a prefix of the other comes first.
    """
    for a, b in zip(first, second):
        pos_a, pos_b = letter_position(a), letter_position(b)
        if pos_a < pos_b:
            return -1
        if pos_a > pos_b:
            return 1
    if len(first) == len(second):
        return 0
    return -1 if len(first) < len(second) else 1


def compare_ordinal(first: str, second: str) -> int:
    """Compare two words by character code, as a plain string comparison: -1, 0 or 1."""
    return (first > second) - (first < second)


def sort_words(words: Iterable[str], compare: Comparator = compare_ordinal) -> list[str]:
    """Return a copy sorted with bubble sort under ``compare``."""
    items = list(words)
    size = len(items)
    for done in range(size - 1):
        for j in range(size - 1 - done):
            if compare(items[j], items[j + 1]) > 0:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def binary_search_words(
    words: Sequence[str], target: str, compare: Comparator = compare_ordinal
) -> Optional[int]:
    """Index of ``target`` in ``words`` (sorted under ``compare``), or None if absent."""
    low, high = 0, len(words) - 1
    while low <= high:
        middle = (low + high) // 2
        result = compare(target, words[middle])
        if result == 0:
            return middle
        if result < 0:
            high = middle - 1
        else:
            low = middle + 1
    return None