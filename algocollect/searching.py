"""Substring location and ternary search over sorted sequences."""

from __future__ import annotations

from typing import Any, Optional, Sequence

ABSOLUTE_PRECISION = 10
"""Ranges narrower than this are scanned linearly by the ternary searches."""


def find_word(paragraph: str, word: str) -> Optional[int]:
    """Return the index of the first occurrence of ``word`` in ``paragraph``.

    Returns None when the word does not occur. An empty paragraph has
    nothing to search and raises ValueError.
    """
    if not paragraph:
        raise ValueError("the paragraph is empty")
    index = paragraph.find(word)
    return None if index < 0 else index


def _thirds(left: int, right: int) -> tuple[int, int]:
    third = (right - left) // 3
    return left + third, right - third


def three_part_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of ``target`` in ascending ``values``, or None.

    Each step probes two points that cut the range into three parts and
    recurses into the part that can still hold the target.
    """

    def search(low: int, high: int) -> Optional[int]:
        if low > high:
            return None
        first, second = _thirds(low, high)
        if values[first] == target:
            return first
        if values[second] == target:
            return second
        if target < values[first]:
            return search(low, first - 1)
        if target > values[second]:
            return search(second + 1, high)
        return search(first + 1, second - 1)

    return search(0, len(values) - 1)


def _scan(values: Sequence[Any], target: Any, left: int, right: int) -> Optional[int]:
    return next((i for i in range(left, right + 1) if values[i] == target), None)


def ternary_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Iterative ternary search; narrow ranges are finished with a linear scan."""
    left, right = 0, len(values) - 1
    while left <= right:
        if right - left < ABSOLUTE_PRECISION:
            return _scan(values, target, left, right)
        first, second = _thirds(left, right)
        if values[first] == target:
            return first
        if values[second] == target:
            return second
        if target > values[second]:
            left = second + 1
        elif target < values[first]:
            right = first - 1
        else:
            left, right = first + 1, second - 1
    return None


def ternary_search_recursive(values: Sequence[Any], target: Any) -> Optional[int]:
    """Recursive ternary search; narrow ranges are finished with a linear scan."""

    def search(left: int, right: int) -> Optional[int]:
        if left > right:
            return None
        if right - left < ABSOLUTE_PRECISION:
            return _scan(values, target, left, right)
        first, second = _thirds(left, right)
        if values[first] == target:
            return first
        if values[second] == target:
            return second
        if target < values[first]:
            return search(left, first - 1)
        if target > values[second]:
            return search(second + 1, right)
        return search(first + 1, second - 1)

    return search(0, len(values) - 1)