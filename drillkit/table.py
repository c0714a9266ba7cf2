"""Operations on fixed-length integer tables (one-dimensional arrays)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import islice
from typing import Optional

__all__ = ["insert_at", "delete_at", "edit_at", "search_table", "table_average", "fill_table"]


def _check_index(table: Sequence[int], index: int) -> None:
    if not 0 <= index < len(table):
        raise IndexError(f"index {index} out of range for table of length {len(table)}")


def insert_at(table: Sequence[int], value: int, index: int) -> list[int]:
    """Insert ``value`` at ``index`` keeping the length fixed; the last element falls off."""
    _check_index(table, index)
    result = list(table)
    result.insert(index, value)
    result.pop()
    return result


def delete_at(table: Sequence[int], index: int) -> list[int]:
    """Return the table without the element at ``index``, later elements moved left."""
    _check_index(table, index)
    result = list(table)
    del result[index]
    return result


def edit_at(table: Sequence[int], index: int, value: int) -> list[int]:
    """Return a copy of the table with the element at ``index`` replaced."""
    _check_index(table, index)
    result = list(table)
    result[index] = value
    return result


def search_table(table: Iterable[int], value: int) -> Optional[int]:
    """Return the index of the first element equal to ``value``, or None."""
    return next((i for i, item in enumerate(table) if item == value), None)


def table_average(values: Sequence[int]) -> int:
    """Return the integer mean of the values, truncated toward zero."""
    if not values:
        raise ValueError("cannot average an empty table")
    total = sum(values)
    quotient = abs(total) // len(values)
    return -quotient if total < 0 else quotient


def fill_table(n: int, values: Iterable[int]) -> list[int]:
    """Build a table from the first ``n`` values."""
    if n < 0:
        raise ValueError(f"table size must not be negative, got {n}")
    result = list(islice(values, n))
    if len(result) < n:
        raise ValueError(f"not enough values to fill a table of {n}")
    return result