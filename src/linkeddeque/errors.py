"""Exception classes for linkeddeque."""


class LinkedDequeError(Exception):
    """Base exception for all linkeddeque errors."""


class ConcurrentMutationError(LinkedDequeError, RuntimeError):
    """Raised when a list is mutated while one of its iterators is still live."""
