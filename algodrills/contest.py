"""Solutions to a handful of short competitive-programming problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "is_lucky_ticket",
    "counting_ways",
    "search_comparisons",
    "moves_to_one",
    "fill_beautiful",
    "queue_after",
    "fix_case",
    "is_equilibrium",
]


def is_lucky_ticket(ticket: str) -> bool:
    """Tell whether the first three characters sum to the same as the next three."""
    if len(ticket) < 6:
        raise ValueError("a ticket has six characters")
    return sum(map(ord, ticket[:3])) == sum(map(ord, ticket[3:6]))


def counting_ways(fingers: Sequence[int]) -> int:
    """Count how many of 1..5 fingers keep Dima from being the one counted last.

    ``fingers`` holds what each friend shows; Dima is one extra person.
    """
    total = sum(fingers)
    people = len(fingers) + 1
    return sum(1 for own in range(1, 6) if (total + own) % people != 1)


def search_comparisons(array: Sequence[int], queries: Iterable[int]) -> tuple[int, int]:
    """Return comparisons made by a forward and a backward linear search.

    An item that appears more than once is located at its last position;
    a query that is absent counts as found at position 0.
    """
    position = {value: index for index, value in enumerate(array)}
    n = len(array)
    forward = backward = 0
    for query in queries:
        index = position.get(query, 0)
        forward += index + 1
        backward += n - index
    return forward, backward


def moves_to_one(n: int) -> int:
    """Return the moves needed to reach 1, or -1 if it cannot be reached.

    A move halves n when even, takes it to 2n/3 when divisible by 3,
    or to 4n/5 when divisible by 5, tried in that order.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    moves = 0
    while n != 1:
        if n % 2 == 0:
            n //= 2
        elif n % 3 == 0:
            n = 2 * n // 3
        elif n % 5 == 0:
            n = 4 * n // 5
        else:
            return -1
        moves += 1
    return moves


_NEXT_LETTER = {"a": "b", "b": "c"}

_BETWEEN = {
    ("a", "b"): "c",
    ("a", "c"): "b",
    ("b", "a"): "c",
    ("b", "c"): "a",
    ("c", "a"): "b",
    ("c", "b"): "a",
    ("a", "a"): "b",
    ("b", "b"): "c",
    ("c", "c"): "a",
}


def _differ_from(neighbour: str) -> str:
    return _NEXT_LETTER.get(neighbour, "a")


def fill_beautiful(text: str) -> str | None:
    """Replace every '?' with a, b or c so no two neighbours are equal.

    Returns None when two fixed neighbours are already equal.
    """
    if any(left != "?" and left == right for left, right in zip(text, text[1:])):
        return None
    chars = list(text)
    last = len(chars) - 1
    for i, ch in enumerate(chars):
        if ch != "?":
            continue
        if i == 0:
            chars[i] = _differ_from(chars[1]) if last > 0 else "a"
        elif i == last or chars[i + 1] == "?":
            chars[i] = _differ_from(chars[i - 1])
        else:
            chars[i] = _BETWEEN.get((chars[i - 1], chars[i + 1]), ch)
    return "".join(chars)


def queue_after(queue: str, seconds: int) -> str:
    """Return the queue after each boy lets the girl behind him pass, once per second."""
    people = list(queue)
    for _ in range(seconds):
        i = 0
        while i < len(people) - 1:
            if people[i] == "B" and people[i + 1] == "G":
                people[i], people[i + 1] = people[i + 1], people[i]
                i += 2
            else:
                i += 1
    return "".join(people)


def fix_case(word: str) -> str:
    """Upper-case the word if it has more capitals than other characters, else lower-case it."""
    upper = sum(1 for ch in word if "A" <= ch < "a")
    lower = len(word) - upper
    return word.upper() if upper > lower else word.lower()


def is_equilibrium(forces: Iterable[tuple[int, int, int]]) -> bool:
    """Tell whether the force vectors add up to zero."""
    sum_x = sum_y = sum_z = 0
    for x, y, z in forces:
        sum_x += x
        sum_y += y
        sum_z += z
    return sum_x == 0 and sum_y == 0 and sum_z == 0