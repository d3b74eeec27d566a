"""Fixed-capacity and linked containers: heap, queues, stacks, an animal shelter."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any

__all__ = [
    "MaxHeap",
    "ArrayQueue",
    "LinkedQueue",
    "BoundedStack",
    "MinStack",
    "AnimalKind",
    "AnimalShelter",
    "sort_stack",
]


class MaxHeap:
    """A binary max-heap stored level by level in a list of at most 99 items."""

    CAPACITY = 99

    def __init__(self) -> None:
        self._items: list[Any] = []

    def insert(self, value: Any) -> None:
        """Add ``value`` and sift it up past smaller parents.

        Raises OverflowError when the heap already holds CAPACITY items.
        """
        if len(self._items) >= self.CAPACITY:
            raise OverflowError("heap is full")
        self._items.append(value)
        index = len(self._items)  # 1-based position
        while index > 1:
            parent = index // 2
            child_value = self._items[index - 1]
            parent_value = self._items[parent - 1]
            if child_value > parent_value:
                self._items[index - 1], self._items[parent - 1] = parent_value, child_value
                index = parent
            else:
                return

    def __iter__(self) -> Iterator[Any]:
        """Yield the items in level order, root first."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"MaxHeap({self._items!r})"


class ArrayQueue:
    """A queue over a fixed array whose slots are never reused.

    One slot of the array is kept in reserve, so over its whole lifetime
    the queue accepts at most ``capacity - 1`` values.
    """

    MAX_CAPACITY = 100

    def __init__(self, capacity: int) -> None:
        if not 1 <= capacity <= self.MAX_CAPACITY:
            raise ValueError(f"capacity must be between 1 and {self.MAX_CAPACITY}")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear; raises OverflowError when no slot is left."""
        if len(self._slots) == self.capacity - 1:
            raise OverflowError("queue is full")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raises IndexError when empty."""
        if self._front >= len(self._slots):
            raise IndexError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        return value

    def __iter__(self) -> Iterator[Any]:
        """Yield the queued values from front to rear."""
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front


class LinkedQueue:
    """An unbounded first-in first-out queue."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(values)

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the back."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raises IndexError when empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from front to back."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class BoundedStack:
    """A last-in first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raises OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raises IndexError when empty."""
        if self.is_empty():
            raise IndexError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it; raises IndexError when empty."""
        if self.is_empty():
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        return reversed(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class MinStack:
    """A bounded stack that reports its smallest value in constant time."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: list[tuple[Any, Any]] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raises OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("stack is full")
        if self._entries and not value < self._entries[-1][1]:
            smallest = self._entries[-1][1]
        else:
            smallest = value
        self._entries.append((value, smallest))

    def pop(self) -> Any:
        """Remove and return the top value; raises IndexError when empty."""
        if self.is_empty():
            raise IndexError("stack is empty")
        return self._entries.pop()[0]

    def minimum(self) -> Any:
        """Return the smallest value on the stack; raises IndexError when empty."""
        if self.is_empty():
            raise IndexError("stack is empty")
        return self._entries[-1][1]

    def is_full(self) -> bool:
        return len(self._entries) == self.capacity

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)


class AnimalKind(Enum):
    CAT = "c"
    DOG = "d"


class AnimalShelter:
    """Keeps cats and dogs in arrival order and hands them out first come, first served.

    A request for any kind other than cat or dog picks one in turn: a cat when
    the number of admissions and adoptions so far is even, otherwise a dog.
    """

    def __init__(self) -> None:
        self._queues: dict[AnimalKind, deque[str]] = {kind: deque() for kind in AnimalKind}
        self._turn = 0

    @staticmethod
    def _kind(kind: AnimalKind | str) -> AnimalKind:
        try:
            return AnimalKind(kind)
        except ValueError:
            raise ValueError(f"unknown animal kind {kind!r}") from None

    def add(self, kind: AnimalKind | str, name: str) -> None:
        """Admit an animal of ``kind`` ('c' or 'd'); raises ValueError for other kinds."""
        self._queues[self._kind(kind)].append(name)
        self._turn += 1

    def adopt(self, kind: AnimalKind | str | None = None) -> str:
        """Hand out the longest-waiting animal of ``kind`` and return its name.

        Any kind other than cat or dog chooses one in turn. Raises LookupError
        when no animal of the chosen kind is left; the attempt still counts.
        """
        try:
            chosen = AnimalKind(kind)
        except ValueError:
            chosen = AnimalKind.CAT if self._turn % 2 == 0 else AnimalKind.DOG
        self._turn += 1
        queue = self._queues[chosen]
        if not queue:
            raise LookupError(f"no {chosen.name.lower()} left")
        return queue.popleft()

    def waiting(self, kind: AnimalKind | str) -> list[str]:
        """Return the names of waiting animals of ``kind`` in arrival order."""
        return list(self._queues[self._kind(kind)])


def sort_stack(values: Iterable[Any]) -> list[Any]:
    """Sort a stack using one auxiliary stack; return it top first, smallest on top.

    ``values`` are pushed in order, so the last one starts on top.
    """
    stack = list(values)
    if not stack:
        return []
    ordered = [stack.pop()]
    while stack:
        value = stack.pop()
        if value <= ordered[-1]:
            ordered.append(value)
            continue
        while ordered and value > ordered[-1]:
            stack.append(ordered.pop())
        ordered.append(value)
    return ordered[::-1]