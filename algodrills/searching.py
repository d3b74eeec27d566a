"""Binary-search based lookups and a sliding-window maximum."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from typing import Any

__all__ = [
    "binary_search",
    "first_and_last_position",
    "is_allocation_possible",
    "find_pages",
    "find_pivot_left",
    "find_pivot_right",
    "search_rotated",
    "max_window_sum",
]


def _index_in(values: Sequence[Any], target: Any, lo: int, hi: int) -> int | None:
    pos = bisect_left(values, target, lo, hi)
    if pos < hi and values[pos] == target:
        return pos
    return None


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of ``target`` in ascending ``values``, or None."""
    return _index_in(values, target, 0, len(values))


def first_and_last_position(values: Sequence[Any], target: Any) -> tuple[int, int]:
    """Return the first and last index of ``target``; (-1, -1) when absent."""
    first = bisect_left(values, target)
    if first == len(values) or values[first] != target:
        return (-1, -1)
    return (first, bisect_right(values, target) - 1)


def is_allocation_possible(pages: Sequence[int], students: int, limit: int) -> bool:
    """Tell whether books, taken in order, fit ``students`` readers of at most ``limit`` pages."""
    load = 0
    readers = 1
    for book in pages:
        if load + book <= limit:
            load += book
            continue
        readers += 1
        if readers > students or book > limit:
            return False
        load = book
    return True


def find_pages(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum pages any student must read.

    Raises ValueError when there are more students than books.
    """
    if students > len(pages):
        raise ValueError("each student needs at least one book")
    low, high = 0, sum(pages)
    answer = -1
    while low <= high:
        mid = low + (high - low) // 2
        if is_allocation_possible(pages, students, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def _rotation_point(values: Sequence[Any]) -> int:
    """Index of the smallest item in a rotated ascending sequence."""
    if not values:
        raise ValueError("sequence is empty")
    low, high = 0, len(values) - 1
    while low < high:
        mid = low + (high - low) // 2
        if values[mid] > values[high]:
            low = mid + 1
        else:
            high = mid
    return low


def find_pivot_left(values: Sequence[Any]) -> Any:
    """Return the last item of the first ascending run (the largest item)."""
    return values[_rotation_point(values) - 1]


def find_pivot_right(values: Sequence[Any]) -> Any:
    """Return the first item of the second ascending run (the smallest item)."""
    return values[_rotation_point(values)]


def search_rotated(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of ``target`` in a rotated ascending sequence, or None."""
    if not values:
        return None
    split = _rotation_point(values)
    if split == 0:
        return _index_in(values, target, 0, len(values))
    if target < values[0]:
        return _index_in(values, target, split, len(values))
    return _index_in(values, target, 0, split)


def max_window_sum(values: Sequence[int], k: int) -> tuple[int, list[int]]:
    """Return the largest sum of ``k`` consecutive items and the earliest such window."""
    if k < 1 or k > len(values):
        raise ValueError(f"window size must be between 1 and {len(values)}")
    total = sum(values[:k])
    best, best_start = total, 0
    for start in range(1, len(values) - k + 1):
        total += values[start + k - 1] - values[start - 1]
        if total > best:
            best, best_start = total, start
    return best, list(values[best_start:best_start + k])