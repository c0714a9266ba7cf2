"""Operations on rectangular integer matrices stored as lists of rows."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import islice
from typing import Optional

__all__ = [
    "set_element",
    "delete_row",
    "total_and_average",
    "fill_matrix",
    "sort_pass",
    "search_matrix",
    "format_matrix",
]

Matrix = list[list[int]]


def _columns(matrix: Sequence[Sequence[int]]) -> int:
    """Return the row width, checking that every row has it."""
    if not matrix:
        return 0
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return width


def _copy(matrix: Sequence[Sequence[int]]) -> Matrix:
    return [list(row) for row in matrix]


def set_element(matrix: Sequence[Sequence[int]], row: int, col: int, value: int) -> Matrix:
    """Return a copy of ``matrix`` with ``value`` stored at ``(row, col)``."""
    cols = _columns(matrix)
    if not (0 <= row < len(matrix) and 0 <= col < cols):
        raise IndexError(f"Invalid matrix position ({row}, {col})")
    result = _copy(matrix)
    result[row][col] = value
    return result


def delete_row(matrix: Sequence[Sequence[int]], row: int) -> Matrix:
    """Return a copy of ``matrix`` with the given row removed and later rows moved up."""
    _columns(matrix)
    if not 0 <= row < len(matrix):
        raise IndexError(f"Invalid matrix row {row}")
    result = _copy(matrix)
    del result[row]
    return result


def total_and_average(matrix: Sequence[Sequence[int]]) -> tuple[int, float]:
    """Return the sum of all elements and their mean."""
    cols = _columns(matrix)
    count = len(matrix) * cols
    if count == 0:
        raise ValueError("cannot average an empty matrix")
    total = sum(sum(row) for row in matrix)
    return total, total / count


def fill_matrix(n: int, values: Iterable[int]) -> Matrix:
    """Build an ``n`` by ``n`` matrix, row by row, from the first ``n * n`` values."""
    if n < 0:
        raise ValueError(f"matrix size must not be negative, got {n}")
    source = iter(values)
    result: Matrix = []
    for _ in range(n):
        row = list(islice(source, n))
        if len(row) < n:
            raise ValueError(f"not enough values to fill a {n}x{n} matrix")
        result.append(row)
    return result


def sort_pass(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Run one bubble-sort pass over the elements in row-major order.

    Each adjacent pair is swapped when out of order, so the largest element
    ends up in the last cell; the matrix as a whole is not fully sorted.
    """
    cols = _columns(matrix)
    flat = [value for row in matrix for value in row]
    for j in range(len(flat) - 1):
        if flat[j] > flat[j + 1]:
            flat[j], flat[j + 1] = flat[j + 1], flat[j]
    return [flat[start:start + cols] for start in range(0, len(flat), cols)] if cols else _copy(matrix)


def search_matrix(matrix: Sequence[Sequence[int]], value: int) -> Optional[int]:
    """Return the row-major index of the first cell equal to ``value``, or None."""
    cols = _columns(matrix)
    for i, row in enumerate(matrix):
        for j, cell in enumerate(row):
            if cell == value:
                return i * cols + j
    return None


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render each row as its values followed by a space, one row per line."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)