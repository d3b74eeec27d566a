"""Small numeric and sequence exercises usually written recursively."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "factorial",
    "fibonacci",
    "recursive_sum",
    "recursive_gcd",
    "recursive_max",
    "recursive_power",
    "reverse_string",
    "sum_to_n",
]


def _require_positive(name: str, value: int) -> None:
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")


def factorial(n: int) -> int:
    """Return n! for n >= 1."""
    _require_positive("n", n)
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(1) == fibonacci(2) == 1."""
    _require_positive("n", n)
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def recursive_sum(values: Iterable[int]) -> int:
    """Return the sum of all items; an empty input sums to 0."""
    total = 0
    for value in values:
        total += value
    return total


def recursive_gcd(a: int, b: int) -> int:
    """Return the largest n in 1..min(a, b) dividing both, or 1 if there is none."""
    limit = min(a, b)
    return next(
        (n for n in range(limit, 0, -1) if a % n == 0 and b % n == 0),
        1,
    )


def recursive_max(values: Sequence[Any]) -> Any:
    """Return the largest item; on ties the earliest one wins."""
    if not values:
        raise ValueError("sequence is empty")
    best = values[-1]
    for value in reversed(values[:-1]):
        if not value < best:
            best = value
    return best


def recursive_power(base: int, power: int) -> int:
    """Return base raised to a positive integer power."""
    _require_positive("power", power)
    result = base
    for _ in range(power - 1):
        result *= base
    return result


def reverse_string(text: str) -> str:
    """Return the characters of ``text`` in reverse order."""
    return "".join(reversed(text))


def sum_to_n(n: int) -> int:
    """Return 1 + 2 + ... + n for n >= 1."""
    _require_positive("n", n)
    return sum(range(1, n + 1))