# algodrills

Classic algorithm and data-structure exercises as small, dependency-free
Python functions and classes.

## Install

```
pip install .
pip install ".[test]"   # with pytest and hypothesis
```

## Modules

- `algodrills.sorting`: `bubble_sort`, `insertion_sort`, `merge_sort` and
  `selection_sort` sort ascending; `bubble_sort_descending` and
  `selection_sort_descending` sort descending. Each takes any iterable and
  returns a new list.
- `algodrills.searching`:
  - `binary_search(values, target)` returns an index or `None`.
  - `first_and_last_position(values, target)` returns `(first, last)`, or
    `(-1, -1)` when the target is absent.
  - `find_pages(pages, students)` returns the smallest possible maximum number
    of pages one student reads when books are handed out in order. It raises
    `ValueError` when there are more students than books.
    `is_allocation_possible(pages, students, limit)` is the check it uses.
  - `find_pivot_left` returns the largest item of a rotated ascending sequence.
    `find_pivot_right` returns the smallest. `search_rotated` returns an index
    or `None`.
  - `max_window_sum(values, k)` returns the best sum of `k` consecutive items
    together with the earliest window that reaches it.
- `algodrills.recursion`: `factorial`, `fibonacci`, `recursive_sum`,
  `recursive_gcd`, `recursive_max`, `recursive_power`, `reverse_string`,
  `sum_to_n`. The functions that take a count or a power raise `ValueError`
  when it is below 1.
- `algodrills.contest`: short contest problems:
  - `is_lucky_ticket` and `counting_ways`.
  - `search_comparisons` returns forward and backward linear-search counts.
  - `moves_to_one` returns the number of moves, or -1 when 1 cannot be reached.
  - `fill_beautiful` returns `None` when no filling is possible.
  - `queue_after`, `fix_case` and `is_equilibrium`.
- `algodrills.taxes`: `calc_tax(slabs, rates, salary)` computes slab-based
  income tax. Rates are percentages, and income above the last slab is taxed at
  the last rate.
- `algodrills.strings`: `urlify`, `is_permutation`, `is_unique_pairwise`,
  `is_unique_sorted`, and `special_pattern(n)`, which returns the rows of a
  two-sided number triangle.
- `algodrills.linkedlists`:
  - `Node` and `LinkedList`, which supports `append`, `remove`, iteration and
    `len`.
  - Helpers that work on chains of nodes: `build_list`, `iterate_nodes`,
    `delete_middle_node`, `find_intersection`, `is_palindrome`,
    `partition_nodes` and `sort_and_dedupe`.
  - Helpers that take plain sequences and return lists: `delete_value`,
    `partition`, `remove_duplicates` and `sum_lists`. `sum_lists` works on
    digits stored least significant first.
- `algodrills.containers`:
  - `MaxHeap` holds at most 99 items.
  - `ArrayQueue(capacity)` is a fixed-array queue. Its slots are never reused.
  - `LinkedQueue` is unbounded.
  - `BoundedStack(capacity)` and `MinStack(capacity)`. `MinStack.minimum()`
    returns the smallest value on the stack.
  - `AnimalShelter` with `AnimalKind`.
  - `sort_stack`, which sorts using one auxiliary stack.

## Examples

```python
from algodrills.sorting import merge_sort
from algodrills.searching import first_and_last_position, find_pages
from algodrills.containers import MinStack

merge_sort([5, 2, 7, 9, 6])                       # [2, 5, 6, 7, 9]
first_and_last_position([1, 2, 2, 2, 3], 2)       # (1, 3)
find_pages([10, 20, 30, 40], 2)                   # 60

stack = MinStack(5)
for value in (5, 3, 5, 2):
    stack.push(value)
stack.minimum()                                   # 2
```

## Errors and mutation

Functions that take sequences return new lists and leave their arguments
alone. The node helpers `delete_middle_node`, `partition_nodes` and
`sort_and_dedupe` are the exception: they change the nodes they are given.

Misuse raises exceptions:

- Pushing onto a full stack, or inserting into a full queue or heap, raises
  `OverflowError`.
- Popping or dequeuing from an empty container raises `IndexError`.
- Adopting from an empty shelter queue raises `LookupError`.

## What it does not do

This is a library only. It has no command-line program and no interactive
menus. Every operation is a function call or a method call.

## Running the tests

```
pytest
```