"""Classic comparison sorts and binary search over sorted sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Optional

__all__ = ["bubble_sort", "insertion_sort", "selection_sort", "binary_search"]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, sorted by bubble sort."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, sorted by insertion sort."""
    items: list[Any] = []
    for key in values:
        j = len(items) - 1
        items.append(key)
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, sorted by selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def binary_search(values: Sequence[Any], key: Any) -> Optional[int]:
    """Return an index of ``key`` in the ascending ``values``, or None."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = (left + right) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            left = mid + 1
        else:
            right = mid - 1
    return None