"""Comb sort, numeric string ordering, cocktail selection sort and bucket sort."""

from __future__ import annotations

from typing import Iterable, TypeVar

T = TypeVar("T")


def next_gap(gap: int) -> int:
    """Shrink a comb sort gap by the factor 1.3, never going below 1."""
    return max(1, gap * 10 // 13)


def comb_sort(values: Iterable[T]) -> list[T]:
    """Return the values in ascending order, sorted by comb sort."""
    items = list(values)
    gap = len(items)
    swapped = True
    while gap != 1 or swapped:
        gap = next_gap(gap)
        swapped = False
        for i in range(len(items) - gap):
            if items[i] > items[i + gap]:
                items[i], items[i + gap] = items[i + gap], items[i]
                swapped = True
    return items


def numeric_key(text: str) -> tuple[int, str]:
    """Sort key that orders digit strings by numeric value, ignoring leading zeros."""
    stripped = text.lstrip("0")
    return len(stripped), stripped


def numeric_sort(strings: Iterable[str]) -> list[str]:
    """Return digit strings in numeric rather than alphabetical order."""
    return sorted(strings, key=numeric_key)


def cocktail_selection_sort(values: Iterable[T]) -> list[T]:
    """Return the values sorted by selecting the minimum and maximum on each pass."""
    items = list(values)
    low, high = 0, len(items) - 1
    while low < high:
        min_index, max_index = low, high
        for i in range(low, high + 1):
            if items[i] >= items[max_index]:
                max_index = i
            if items[i] <= items[min_index]:
                min_index = i
        items[low], items[min_index] = items[min_index], items[low]
        if max_index == low:
            max_index = min_index
        items[high], items[max_index] = items[max_index], items[high]
        low += 1
        high -= 1
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Return values from the interval [0, 1) sorted with one bucket per element."""
    items = list(values)
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(count * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]