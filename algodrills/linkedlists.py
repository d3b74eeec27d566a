"""Singly linked lists and the usual exercises on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "Node",
    "LinkedList",
    "build_list",
    "iterate_nodes",
    "delete_middle_node",
    "delete_value",
    "find_intersection",
    "is_palindrome",
    "partition",
    "partition_nodes",
    "remove_duplicates",
    "sort_and_dedupe",
    "sum_lists",
]


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list; nodes compare by identity."""

    data: Any
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """A singly linked list that appends at the tail and removes by value."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``.

        Raises ValueError when the list is empty or holds no such value.
        """
        if self.head is None:
            raise ValueError("list is empty")
        previous: Node | None = None
        for node in iterate_nodes(self.head):
            if node.data == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
                return
            previous = node
        raise ValueError(f"{value!r} is not in the list")

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in iterate_nodes(self.head))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def build_list(values: Iterable[Any]) -> Node | None:
    """Link ``values`` into nodes and return the head, or None if there are none."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def iterate_nodes(head: Node | None) -> Iterator[Node]:
    """Yield every node from ``head`` to the end of the chain."""
    node = head
    while node is not None:
        yield node
        node = node.next


def delete_middle_node(node: Node) -> None:
    """Delete ``node`` given only that node, by pulling its successor into it.

    Raises ValueError for the last node, which cannot be removed this way.
    """
    successor = node.next
    if successor is None:
        raise ValueError("the last node cannot be deleted without its predecessor")
    node.data = successor.data
    node.next = successor.next


def delete_value(values: Iterable[Any], target: Any) -> list[Any]:
    """Return the items with the first occurrence of ``target`` removed.

    Raises ValueError when ``target`` does not occur.
    """
    items = list(values)
    try:
        items.remove(target)
    except ValueError:
        raise ValueError(f"{target!r} is not in the list") from None
    return items


def find_intersection(first: Node | None, second: Node | None) -> Node | None:
    """Return the first node of ``second`` that is also part of ``first``, or None."""
    seen = {id(node) for node in iterate_nodes(first)}
    return next((node for node in iterate_nodes(second) if id(node) in seen), None)


def is_palindrome(head: Node | None) -> bool:
    """Tell whether the chain reads the same forwards and backwards."""
    values = [node.data for node in iterate_nodes(head)]
    return values == values[::-1]


def _partition_in_place(items: list[Any], pivot: Any) -> None:
    first, second = 0, 1
    while second < len(items):
        if items[first] < pivot:
            first += 1
            second = max(second, first)
        else:
            items[first], items[second] = items[second], items[first]
            second += 1


def partition(values: Iterable[Any], pivot: Any) -> list[Any]:
    """Return the items rearranged so those below ``pivot`` come first."""
    items = list(values)
    _partition_in_place(items, pivot)
    return items


def partition_nodes(head: Node | None, pivot: Any) -> Node | None:
    """Rearrange node values in place so those below ``pivot`` come first; return head."""
    nodes = list(iterate_nodes(head))
    items = [node.data for node in nodes]
    _partition_in_place(items, pivot)
    for node, value in zip(nodes, items):
        node.data = value
    return head


def remove_duplicates(values: Iterable[Any]) -> list[Any]:
    """Return the items keeping only the first occurrence of each value."""
    return list(dict.fromkeys(values))


def sort_and_dedupe(head: Node | None) -> Node | None:
    """Selection-sort node values in place, then unlink repeated values; return head."""
    for node in iterate_nodes(head):
        smallest = min(iterate_nodes(node), key=lambda candidate: candidate.data)
        node.data, smallest.data = smallest.data, node.data

    previous = head
    while previous is not None and previous.next is not None:
        if previous.next.data == previous.data:
            previous.next = previous.next.next
        else:
            previous = previous.next
    return head


def _digits_to_int(digits: Iterable[int]) -> int:
    return sum(digit * 10**place for place, digit in enumerate(digits))


def sum_lists(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Add two numbers stored least-significant digit first; return the digits likewise.

    A zero total gives an empty list.
    """
    total = _digits_to_int(first) + _digits_to_int(second)
    digits: list[int] = []
    while total != 0:
        total, digit = divmod(total, 10)
        digits.append(digit)
    return digits