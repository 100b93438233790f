"""Tests for forward iteration over a LinkedList."""

from collections.abc import Callable

import pytest

from linkeddeque import ConcurrentMutationError, Handle, LinkedList


def test_iter_yields_handles_in_order() -> None:
    """Test that iter() yields handles from head to tail."""
    lst = LinkedList(range(10))
    handles = list(lst.iter())
    assert all(isinstance(h, Handle) for h in handles)
    assert [h.value for h in handles] == list(range(10))


def test_iter_does_not_consume() -> None:
    """Test that iterating leaves the list unchanged."""
    lst = LinkedList(range(3))
    list(lst.iter())
    assert lst.len() == 3
    assert [h.value for h in lst.iter()] == [0, 1, 2]


def test_iter_empty() -> None:
    """Test iterating an empty list."""
    it = LinkedList[int]().iter()
    with pytest.raises(StopIteration):
        next(it)


def test_iter_is_fused() -> None:
    """Test that an exhausted iterator stays exhausted."""
    lst = LinkedList([1])
    it = lst.iter()
    assert next(it).value == 1
    assert next(it, None) is None
    assert next(it, None) is None

    # Mutating after exhaustion neither revives nor breaks it
    lst.push(2)
    assert next(it, None) is None


def test_iter_returns_self() -> None:
    """Test that the iterator is its own iterable."""
    it = LinkedList([1]).iter()
    assert iter(it) is it


def test_independent_iterators() -> None:
    """Test that two iterators walk independently."""
    lst = LinkedList(["a", "b", "c"])
    first = lst.iter()
    second = lst.iter()
    assert next(first).value == "a"
    assert next(first).value == "b"
    assert next(second).value == "a"
    assert next(first).value == "c"
    assert next(second).value == "b"


@pytest.mark.parametrize(
    "mutate",
    [
        lambda lst: lst.push(99),
        lambda lst: lst.push_front(99),
        lambda lst: lst.pop(),
        lambda lst: lst.pop_front(),
        lambda lst: lst.clear(),
    ],
    ids=["push", "push_front", "pop", "pop_front", "clear"],
)
def test_mutation_invalidates_live_iterator(mutate: Callable[[LinkedList[int]], object]) -> None:
    """Test that mutating the list invalidates an outstanding iterator."""
    lst = LinkedList(range(5))
    it = lst.iter()
    first = next(it)

    mutate(lst)

    with pytest.raises(ConcurrentMutationError):
        next(it)
    # Handles already yielded stay usable
    assert first.value == 0


def test_mutation_error_is_runtime_error() -> None:
    """Test that invalidation surfaces as a RuntimeError, like collections.deque."""
    lst = LinkedList(range(3))
    with pytest.raises(RuntimeError, match="mutated during iteration"):
        for item in lst:
            if item == 1:
                lst.push(3)


def test_read_only_operations_do_not_invalidate() -> None:
    """Test that peeking, len and failed pops leave iterators valid."""
    lst = LinkedList(range(3))
    it = lst.iter()
    next(it)

    lst.peek()
    lst.peek_front()
    lst.len()
    lst.is_empty()
    empty = LinkedList[int]()
    empty.pop()
    empty.clear()

    assert [h.value for h in it] == [1, 2]


def test_failed_pop_does_not_invalidate() -> None:
    """Test that popping an empty list leaves its iterators alone."""
    lst = LinkedList[int]()
    it = lst.iter()
    assert lst.pop() is None
    assert lst.pop_front() is None
    assert next(it, None) is None


def test_payload_iterator_snapshots_on_creation() -> None:
    """Test that iter(lst) is invalidated by a mutation before its first step."""
    lst = LinkedList([1, 2])
    it = iter(lst)
    lst.push(3)
    with pytest.raises(ConcurrentMutationError):
        next(it)


def test_payload_iterator_yields_payloads() -> None:
    """Test that iter(lst) yields payloads and then stops."""
    lst = LinkedList(["a", "b"])
    it = iter(lst)
    assert next(it) == "a"
    assert next(it) == "b"
    assert next(it, None) is None
