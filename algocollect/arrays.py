"""Merging of sorted sequences and spiral traversal of matrices."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")


def sorted_intersection(first: Sequence[T], second: Sequence[T]) -> list[T]:
    """Return the elements common to two ascending sequences, in order."""
    result: list[T] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            i += 1
        elif first[i] > second[j]:
            j += 1
        else:
            result.append(first[i])
            i += 1
            j += 1
    return result


def sorted_union(first: Sequence[T], second: Sequence[T]) -> list[T]:
    """Merge two ascending sequences, taking matching pairs only once."""
    result: list[T] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            result.append(first[i])
            i += 1
        elif first[i] > second[j]:
            result.append(second[j])
            j += 1
        else:
            result.append(first[i])
            i += 1
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def numbered_matrix(rows: int, cols: int) -> list[list[int]]:
    """Return a ``rows`` x ``cols`` matrix filled row by row with 1, 2, 3, ..."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    return [list(range(r * cols + 1, (r + 1) * cols + 1)) for r in range(rows)]


def spiral_order(matrix: Sequence[Sequence[T]]) -> list[T]:
    """Return the matrix elements read clockwise from the top-left corner inwards."""
    grid = [list(row) for row in matrix]
    if not grid:
        return []
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("matrix rows must all have the same length")

    total = len(grid) * width
    result: list[T] = []
    top, bottom, left, right = 0, len(grid) - 1, 0, width - 1
    while top <= bottom and left <= right:
        result.extend(grid[top][left : right + 1])
        top += 1

        result.extend(grid[r][right] for r in range(top, bottom + 1))
        right -= 1
        if len(result) == total:
            break

        result.extend(grid[bottom][c] for c in range(right, left - 1, -1))
        bottom -= 1
        if len(result) == total:
            break

        result.extend(grid[r][left] for r in range(bottom, top - 1, -1))
        left += 1
    return result