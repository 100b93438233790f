"""Read-only handles to payloads held by a LinkedList."""

from dataclasses import dataclass
from typing import Generic

from linkeddeque.types import T


@dataclass(frozen=True)
class Handle(Generic[T]):
    """
    Immutable, shared reference to a single payload.

    Handles are returned by pop/peek and by iteration instead of copies, so
    payloads never need to be cloneable. A handle keeps its payload alive on
    its own; it stays valid after the node is unlinked or the list is gone.
    """

    value: T

    def get(self) -> T:
        """Return the referenced payload."""
        return self.value
