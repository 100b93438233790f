"""Doubly-linked list with O(1) push and pop at both ends."""

import logging
from collections.abc import Iterable, Iterator
from typing import Generic, TypeAlias

from linkeddeque.errors import ConcurrentMutationError
from linkeddeque.handle import Handle
from linkeddeque.types import T

log = logging.getLogger(__name__)


class Node(Generic[T]):
    """A node in the doubly-linked list. Its payload cannot be rebound."""

    __slots__ = ("_data", "prev", "next")

    def __init__(self, data: T) -> None:
        self._data = data
        self.prev: Link = None
        self.next: Link = None

    @property
    def data(self) -> T:
        """The payload; fixed when the node is created."""
        return self._data

    def handle(self) -> Handle[T]:
        """Return a new shared handle to this node's payload."""
        return Handle(self._data)


# Nullable reference to a node, shared by head/tail and the neighbours' prev/next
Link: TypeAlias = Node[T] | None


class LinkedList(Generic[T]):
    """
    Doubly-linked list with O(1) operations at both ends.

    Nodes are only linked and unlinked by the list's own methods; callers see
    payloads through read-only Handles. Not thread-safe.
    """

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        """
        Initialize the list.

        Args:
            iterable: Optional items to push, in order, onto the new list.
        """
        self._head: Link = None
        self._tail: Link = None
        self._length = 0
        self._mutations = 0  # Bumped on every change; iterators compare against it
        if iterable is not None:
            for item in iterable:
                self.push(item)

    def push(self, data: T) -> None:
        """Append data to the end of the list. O(1)."""
        node = Node(data)
        if self._tail is None:
            self._head = node
            self._tail = node
        else:
            self._tail.next = node
            node.prev = self._tail
            self._tail = node
        self._length += 1
        self._mutations += 1

    def push_front(self, data: T) -> None:
        """Prepend data to the beginning of the list. O(1)."""
        node = Node(data)
        if self._head is None:
            self._head = node
            self._tail = node
        else:
            self._head.prev = node
            node.next = self._head
            self._head = node
        self._length += 1
        self._mutations += 1

    def pop(self) -> Handle[T] | None:
        """Remove the last node and return a handle to its payload. O(1).

        Returns None if the list is empty.
        """
        node = self._tail
        if node is None:
            return None
        self._tail = node.prev
        if self._tail is None:
            # Removed the only node
            self._head = None
        else:
            self._tail.next = None
        node.prev = None
        self._length -= 1
        self._mutations += 1
        return node.handle()

    def pop_front(self) -> Handle[T] | None:
        """Remove the first node and return a handle to its payload. O(1).

        Returns None if the list is empty.
        """
        node = self._head
        if node is None:
            return None
        self._head = node.next
        if self._head is None:
            # Removed the only node
            self._tail = None
        else:
            self._head.prev = None
        node.next = None
        self._length -= 1
        self._mutations += 1
        return node.handle()

    def peek(self) -> Handle[T] | None:
        """Return a handle to the last payload without removing it."""
        return self._tail.handle() if self._tail is not None else None

    def peek_front(self) -> Handle[T] | None:
        """Return a handle to the first payload without removing it."""
        return self._head.handle() if self._head is not None else None

    def len(self) -> int:
        """Return the number of nodes in the list. O(1)."""
        return self._length

    def is_empty(self) -> bool:
        """Return True if the list holds no nodes."""
        return self._head is None and self._tail is None

    def iter(self) -> "LinkedListIter[T]":
        """Return a forward iterator of handles, starting at the current head."""
        return LinkedListIter(self)

    def clear(self) -> None:
        """Detach every node, one at a time from the head. O(n)."""
        if self._head is None:
            return
        count = self._unlink_all()
        self._mutations += 1
        log.debug("Cleared %d nodes", count)

    def check_invariants(self) -> None:
        """
        Walk the whole chain and assert the structural invariants.

        Intended for tests and debugging; O(n).

        Raises:
            AssertionError: If links, ends or the length counter are inconsistent.
        """
        assert (self._head is None) == (self._tail is None) == (self._length == 0), (
            "head, tail and length disagree about emptiness"
        )
        count = 0
        prev: Link = None
        node = self._head
        while node is not None:
            assert node.prev is prev, f"broken back-link at position {count}"
            prev = node
            node = node.next
            count += 1
        assert prev is self._tail, "tail is not the last reachable node"
        assert count == self._length, f"length is {self._length}, chain holds {count}"

    def _unlink_all(self) -> int:
        """Break every prev/next link iteratively so no teardown recurses."""
        count = 0
        node = self._head
        self._head = None
        self._tail = None
        while node is not None:
            following = node.next
            node.prev = None
            node.next = None
            node = following
            count += 1
        self._length = 0
        return count

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._length > 0

    def __iter__(self) -> Iterator[T]:
        """Return an iterator of payloads from head to tail, snapshotted now."""
        return map(Handle.get, self.iter())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __del__(self) -> None:
        # The chain is cyclic (prev/next); unlink it without recursing
        if getattr(self, "_head", None) is not None:
            self._unlink_all()


class LinkedListIter(Generic[T]):
    """
    One-shot forward cursor over a LinkedList, yielding Handles.

    The cursor starts at the list's head when the iterator is created. Once
    exhausted it stays exhausted. Mutating the list while the iterator is
    still live invalidates it.
    """

    __slots__ = ("_list", "_cursor", "_mutations")

    def __init__(self, linked_list: LinkedList[T]) -> None:
        self._list = linked_list
        self._cursor: Link = linked_list._head
        self._mutations = linked_list._mutations

    def __iter__(self) -> "LinkedListIter[T]":
        return self

    def __next__(self) -> Handle[T]:
        """
        Return a handle to the payload under the cursor and advance it.

        Raises:
            StopIteration: When the cursor has run past the tail.
            ConcurrentMutationError: If the list changed since this iterator was created.
        """
        node = self._cursor
        if node is None:
            raise StopIteration
        if self._list._mutations != self._mutations:
            raise ConcurrentMutationError("LinkedList mutated during iteration")
        handle = node.handle()
        self._cursor = node.next
        return handle
