import math

import pytest
from hypothesis import given, strategies as st

from algodrills.recursion import (
    factorial,
    fibonacci,
    recursive_gcd,
    recursive_max,
    recursive_power,
    recursive_sum,
    reverse_string,
    sum_to_n,
)


@pytest.mark.parametrize("n", [1, 2, 5, 8, 12])
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


@pytest.mark.parametrize("bad", [0, -3])
def test_factorial_rejects_non_positive(bad):
    with pytest.raises(ValueError):
        factorial(bad)


def test_fibonacci_base_cases():
    assert fibonacci(1) == 1
    assert fibonacci(2) == 1


@pytest.mark.parametrize("n", range(3, 30))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_rejects_zero():
    with pytest.raises(ValueError):
        fibonacci(0)


def test_recursive_sum_source_example():
    values = [2, 2, 3, 4, 5, 10]
    assert recursive_sum(values) == sum(values)


def test_recursive_sum_empty():
    assert recursive_sum([]) == 0


@given(st.integers(1, 500), st.integers(1, 500))
def test_recursive_gcd_matches_math(a, b):
    assert recursive_gcd(a, b) == math.gcd(a, b)


def test_recursive_gcd_source_example():
    assert recursive_gcd(6, 15) == 3


def test_recursive_gcd_without_candidates_is_one():
    assert recursive_gcd(0, 12) == 1


@given(st.lists(st.integers(), min_size=1))
def test_recursive_max_matches_builtin(values):
    assert recursive_max(values) == max(values)


def test_recursive_max_tie_keeps_earliest():
    result = recursive_max([1, 1.0])
    assert result == 1 and type(result) is int


def test_recursive_max_empty_raises():
    with pytest.raises(ValueError):
        recursive_max([])


@given(st.integers(-10, 10), st.integers(1, 12))
def test_recursive_power_matches_operator(base, power):
    assert recursive_power(base, power) == base**power


def test_recursive_power_rejects_zero_power():
    with pytest.raises(ValueError):
        recursive_power(4, 0)


def test_reverse_string_source_example():
    assert reverse_string("shreyans") == "snayerhs"


@given(st.text())
def test_reverse_string_is_involution(text):
    assert reverse_string(reverse_string(text)) == text
    assert reverse_string(text) == text[::-1]


@given(st.integers(1, 300))
def test_sum_to_n_matches_range_sum(n):
    assert sum_to_n(n) == sum(range(n + 1))


def test_sum_to_n_rejects_zero():
    with pytest.raises(ValueError):
        sum_to_n(0)