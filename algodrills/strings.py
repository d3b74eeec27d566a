"""String exercises: URL encoding of spaces, permutations, uniqueness, a number pattern."""

from __future__ import annotations

from itertools import combinations

__all__ = [
    "urlify",
    "is_permutation",
    "is_unique_pairwise",
    "is_unique_sorted",
    "special_pattern",
]


def urlify(text: str) -> str:
    """Replace each space with '%20', treating trailing spaces as spare room."""
    return text.rstrip(" ").replace(" ", "%20")


def is_permutation(first: str, second: str) -> bool:
    """Tell whether one string is a rearrangement of the other."""
    return sorted(first) == sorted(second)


def is_unique_pairwise(text: str) -> bool:
    """Tell whether all characters differ, comparing every pair."""
    return not any(a == b for a, b in combinations(text, 2))


def is_unique_sorted(text: str) -> bool:
    """Tell whether all characters differ, comparing neighbours after sorting."""
    ordered = sorted(text)
    return not any(a == b for a, b in zip(ordered, ordered[1:]))


def special_pattern(n: int) -> list[str]:
    """Return the rows of the two-sided number triangle for ``n``.

    Row i is indented by 2*i spaces and holds n-i numbers counting up from
    the front followed by n-i numbers from the back block, each followed by
    a space.
    """
    rows: list[str] = []
    start = 1
    end = n * n + 1
    for i, width in enumerate(range(n, 0, -1)):
        front = range(start, start + width)
        back = range(end, end + width)
        rows.append(" " * (2 * i) + "".join(f"{v} " for v in (*front, *back)))
        start += width
        end += width - 2 * (width - 1) - 1
    return rows