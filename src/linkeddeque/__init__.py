"""linkeddeque - Doubly-linked deque with O(1) operations at both ends."""

from linkeddeque.errors import ConcurrentMutationError, LinkedDequeError
from linkeddeque.handle import Handle
from linkeddeque.linkedlist import Link, LinkedList, LinkedListIter, Node

__version__ = "0.0.1"

__all__ = [
    "LinkedList",
    "LinkedListIter",
    "Node",
    "Link",
    "Handle",
    "LinkedDequeError",
    "ConcurrentMutationError",
]
