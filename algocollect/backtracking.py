"""Backtracking solvers for a rat-in-a-maze path and for sudoku."""

from __future__ import annotations

from typing import Optional, Sequence

Grid = list[list[int]]

SUDOKU_SIZE = 9
_BOX = 3


def solve_maze(maze: Sequence[Sequence[int]]) -> Optional[Grid]:
    """Find a path of open cells from the top-left to the bottom-right corner.

    Cells holding 1 are open; the rat moves only right or down, trying
    right first. Returns a grid marking the path with 1, or None.
    """
    grid = [list(row) for row in maze]
    if not grid or not grid[0]:
        raise ValueError("maze must not be empty")
    rows, cols = len(grid), len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("maze rows must all have the same length")

    solution = [[0] * cols for _ in range(rows)]

    def walk(row: int, col: int) -> bool:
        solution[row][col] = 1
        if row == rows - 1 and col == cols - 1:
            return True
        if col < cols - 1 and grid[row][col + 1] == 1 and walk(row, col + 1):
            return True
        if row < rows - 1 and grid[row + 1][col] == 1 and walk(row + 1, col):
            return True
        solution[row][col] = 0
        return False

    return solution if walk(0, 0) else None


def _checked_copy(grid: Sequence[Sequence[int]]) -> Grid:
    board = [list(row) for row in grid]
    if len(board) != SUDOKU_SIZE or any(len(row) != SUDOKU_SIZE for row in board):
        raise ValueError("a sudoku grid must be 9 x 9")
    if any(not 0 <= cell <= SUDOKU_SIZE for row in board for cell in row):
        raise ValueError("sudoku cells must hold 0 (empty) or 1-9")
    return board


def is_possible(grid: Sequence[Sequence[int]], row: int, col: int, number: int) -> bool:
    """Return True if ``number`` is absent from the cell's row, column and box."""
    if any(grid[row][x] == number or grid[x][col] == number for x in range(SUDOKU_SIZE)):
        return False
    top, left = row // _BOX * _BOX, col // _BOX * _BOX
    return all(
        grid[r][c] != number
        for r in range(top, top + _BOX)
        for c in range(left, left + _BOX)
    )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Optional[Grid]:
    """Return a solved copy of the grid (0 marks an empty cell), or None."""
    board = _checked_copy(grid)
    cells = SUDOKU_SIZE * SUDOKU_SIZE

    def fill(position: int) -> bool:
        if position == cells:
            return True
        row, col = divmod(position, SUDOKU_SIZE)
        if board[row][col]:
            return fill(position + 1)
        for number in range(1, SUDOKU_SIZE + 1):
            if is_possible(board, row, col, number):
                board[row][col] = number
                if fill(position + 1):
                    return True
        board[row][col] = 0
        return False

    return board if fill(0) else None


def format_sudoku(grid: Sequence[Sequence[int]]) -> str:
    """Render the grid with a tab after every box column and a blank line after every box row."""
    board = _checked_copy(grid)
    lines = []
    for index, row in enumerate(board, start=1):
        line = "".join(
            f"{cell} " + ("\t" if col % _BOX == 0 else "")
            for col, cell in enumerate(row, start=1)
        )
        lines.append(line + "\n")
        if index % _BOX == 0:
            lines.append("\n")
    return "".join(lines)