"""Slab-based income tax."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["calc_tax"]


def calc_tax(slabs: Sequence[float], rates: Sequence[float], salary: int) -> float:
    """Return the tax on ``salary`` for ascending slab limits and their percentage rates.

    Income above the last slab is taxed at the last rate. When the salary
    falls inside a slab, that slab is charged in full up to its limit.
    """
    slabs = list(slabs)
    rates = list(rates)
    if not slabs:
        raise ValueError("at least one tax slab is required")
    if len(slabs) != len(rates):
        raise ValueError("every slab needs exactly one rate")
    if salary < 0:
        raise ValueError("salary cannot be negative")

    tax = 0.0
    covered = 0
    for limit, rate in zip(slabs, rates):
        if covered >= salary:
            break
        tax += (limit - covered) * rate / 100
        if salary < limit:
            return tax
        covered = int(limit)
    if covered < salary:
        tax += (salary - covered) * rates[-1] / 100
    return tax