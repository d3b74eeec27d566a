"""Classic algorithm and data-structure exercises: sorts, searches, recursion, strings, linked lists and containers."""

__version__ = "0.1.0"
__all__ = [
    "sorting",
    "searching",
    "recursion",
    "contest",
    "taxes",
    "strings",
    "linkedlists",
    "containers",
]