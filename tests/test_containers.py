import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.containers import (
    AnimalKind,
    AnimalShelter,
    ArrayQueue,
    BoundedStack,
    LinkedQueue,
    MaxHeap,
    MinStack,
    sort_stack,
)


# MaxHeap

def test_heap_worked_example():
    heap = MaxHeap()
    for value in (33, 44, 30, 50):
        heap.insert(value)
    assert list(heap) == [50, 44, 30, 33]
    assert len(heap) == 4


@given(st.lists(st.integers(), max_size=99))
def test_heap_property_holds(values):
    heap = MaxHeap()
    for value in values:
        heap.insert(value)
    items = list(heap)
    assert sorted(items) == sorted(values)
    for index in range(1, len(items)):
        assert items[(index - 1) // 2] >= items[index]


def test_heap_overflow():
    heap = MaxHeap()
    for value in range(MaxHeap.CAPACITY):
        heap.insert(value)
    with pytest.raises(OverflowError):
        heap.insert(1000)
    assert len(heap) == MaxHeap.CAPACITY


# ArrayQueue

def test_array_queue_fifo():
    queue = ArrayQueue(10)
    for value in (4, 8, 15):
        queue.enqueue(value)
    assert list(queue) == [4, 8, 15]
    assert queue.dequeue() == 4
    assert list(queue) == [8, 15]
    assert len(queue) == 2


def test_array_queue_reserves_one_slot():
    queue = ArrayQueue(3)
    queue.enqueue(1)
    queue.enqueue(2)
    with pytest.raises(OverflowError):
        queue.enqueue(3)
    assert list(queue) == [1, 2]


def test_array_queue_slots_not_reused():
    queue = ArrayQueue(3)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    with pytest.raises(OverflowError):
        queue.enqueue(3)


def test_array_queue_empty_dequeue():
    queue = ArrayQueue(5)
    with pytest.raises(IndexError):
        queue.dequeue()
    queue.enqueue(7)
    assert queue.dequeue() == 7
    with pytest.raises(IndexError):
        queue.dequeue()


@pytest.mark.parametrize("capacity", [0, 101, -3])
def test_array_queue_bad_capacity(capacity):
    with pytest.raises(ValueError):
        ArrayQueue(capacity)


# LinkedQueue

@given(st.lists(st.integers()))
def test_linked_queue_round_trip(values):
    queue = LinkedQueue()
    for value in values:
        queue.enqueue(value)
    assert len(queue) == len(values)
    assert list(queue) == values
    assert [queue.dequeue() for _ in values] == values
    assert len(queue) == 0


def test_linked_queue_empty_dequeue():
    queue = LinkedQueue()
    with pytest.raises(IndexError):
        queue.dequeue()


# BoundedStack

def test_bounded_stack_source_session():
    stack = BoundedStack(5)
    for value in (1, 2, 3, 4, 5):
        stack.push(value)
    with pytest.raises(OverflowError):
        stack.push(1)
    assert stack.is_full()
    assert list(stack) == [5, 4, 3, 2, 1]
    assert stack.peek() == 5
    assert stack.pop() == 5
    assert stack.peek() == 4
    assert len(stack) == 4
    assert [stack.pop() for _ in range(4)] == [4, 3, 2, 1]
    assert stack.is_empty()
    with pytest.raises(IndexError):
        stack.pop()


def test_bounded_stack_peek_empty():
    with pytest.raises(IndexError):
        BoundedStack(2).peek()


@given(st.lists(st.integers(), min_size=1, max_size=20))
def test_bounded_stack_lifo(values):
    stack = BoundedStack(len(values))
    for value in values:
        stack.push(value)
    assert stack.is_full()
    assert [stack.pop() for _ in values] == values[::-1]


# MinStack


@given(st.lists(st.integers(), min_size=1, max_size=30))
def test_min_stack_tracks_minimum(values):
    stack = MinStack(len(values))
    for value in values:
        stack.push(value)
    for remaining in range(len(values), 0, -1):
        assert stack.minimum() == min(values[:remaining])
        assert stack.pop() == values[remaining - 1]
    assert len(stack) == 0


# AnimalShelter

def test_shelter_specific_kinds():
    shelter = AnimalShelter()
    shelter.add("c", "Tom")
    shelter.add("c", "Kit")
    shelter.add(AnimalKind.DOG, "Rex")
    assert shelter.waiting("c") == ["Tom", "Kit"]
    assert shelter.adopt("d") == "Rex"
    assert shelter.adopt("c") == "Tom"
    assert shelter.waiting("c") == ["Kit"]
    assert shelter.waiting("d") == []


def test_shelter_alternates_for_any_kind():
    shelter = AnimalShelter()
    shelter.add("c", "Tom")
    shelter.add("d", "Rex")
    assert shelter.adopt("x") == "Tom"
    assert shelter.adopt("x") == "Rex"


def test_shelter_none_left_still_counts():
    shelter = AnimalShelter()
    with pytest.raises(LookupError):
        shelter.adopt("c")
    shelter.add("c", "Tom")
    shelter.add("d", "Rex")
    # one failed adoption plus two admissions: odd turn picks a dog
    assert shelter.adopt("?") == "Rex"


def test_shelter_rejects_unknown_kind():
    shelter = AnimalShelter()
    with pytest.raises(ValueError):
        shelter.add("h", "Ed")
    with pytest.raises(ValueError):
        shelter.waiting("h")


# sort_stack

@given(st.lists(st.integers()))
def test_sort_stack_orders_ascending_from_top(values):
    assert sort_stack(values) == sorted(values)


def test_sort_stack_empty():
    assert sort_stack([]) == []