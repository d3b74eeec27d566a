"""Classic comparison sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "merge_sort",
    "selection_sort",
    "bubble_sort_descending",
    "selection_sort_descending",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort ascending by bubbling the largest item right on each pass.

    Stops early once a pass makes no swap.
    """
    items = list(values)
    n = len(items)
    for done in range(n):
        swapped = False
        for j in range(n - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort ascending by inserting each item into a growing sorted result."""
    result: list[Any] = []
    for value in values:
        result.append(value)
        pos = len(result) - 1
        while pos > 0 and result[pos] < result[pos - 1]:
            result[pos], result[pos - 1] = result[pos - 1], result[pos]
            pos -= 1
    return result


def _merge(first: list[Any], second: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort ascending by recursively splitting in halves and merging them."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort ascending by moving the smallest remaining item into place."""
    items = list(values)
    n = len(items)
    for i in range(n):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def bubble_sort_descending(values: Iterable[Any]) -> list[Any]:
    """Sort descending by swapping each item left past smaller neighbours."""
    items = list(values)
    for current in range(1, len(items)):
        pos = current
        while pos > 0 and items[pos] > items[pos - 1]:
            items[pos], items[pos - 1] = items[pos - 1], items[pos]
            pos -= 1
    return items


def selection_sort_descending(values: Iterable[Any]) -> list[Any]:
    """Sort descending, swapping any later larger item into each position."""
    items = list(values)
    n = len(items)
    for i in range(n):
        for j in range(i + 1, n):
            if items[j] > items[i]:
                items[i], items[j] = items[j], items[i]
    return items