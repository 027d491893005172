"""
Grid helpers.

A grid is a list of rows, each a list of cell strings. Rows may be ragged;
the column count of a grid is its longest row.
"""

from typing import List, Sequence, Tuple

from .exceptions import CellOutOfRangeError

Grid = List[List[str]]


def column_count(grid: Sequence[Sequence[str]]) -> int:
    return max((len(row) for row in grid), default=0)


def grid_dimensions(grid: Sequence[Sequence[str]]) -> Tuple[int, int]:
    """Return (row_count, column_count)."""
    return len(grid), column_count(grid)


def is_empty_grid(grid: Sequence[Sequence[str]] | None) -> bool:
    """True for no rows, or a single row holding one empty cell."""
    if not grid:
        return True
    return len(grid) == 1 and len(grid[0]) <= 1 and (not grid[0] or grid[0][0] == "")


def copy_grid(grid: Sequence[Sequence[str]]) -> Grid:
    return [list(row) for row in grid]


def pad_grid(grid: Sequence[Sequence[str]], width: int | None = None) -> Grid:
    """Return a rectangular copy, short rows filled with empty strings."""
    target = column_count(grid) if width is None else width
    return [list(row) + [""] * (target - len(row)) for row in grid]


def set_cell(grid: Sequence[Sequence[str]], row: int, column: int, value: str) -> Grid:
    """
    Return a new grid with `value` written at (row, column).

    Missing rows and cells are created as empty strings. The input grid is
    left untouched.
    """
    if row < 0 or column < 0:
        raise CellOutOfRangeError(row, column)
    updated = copy_grid(grid)
    while len(updated) <= row:
        updated.append([])
    target = updated[row]
    while len(target) <= column:
        target.append("")
    target[column] = value
    return updated
