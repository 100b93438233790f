"""Basic usage example for linkeddeque."""

from linkeddeque import ConcurrentMutationError, LinkedList


def main() -> None:
    """Demonstrate pushing, popping and iterating at both ends."""
    lst = LinkedList[str]()

    print("=== Basic Deque Example ===\n")

    lst.push("task-1")
    lst.push("task-2")
    lst.push_front("urgent")
    print(f"List: {lst!r}")
    print(f"Length: {lst.len()}\n")

    # Handles are read-only references to payloads
    for handle in lst.iter():
        print(f"  Next up: {handle.value}")

    last = lst.pop()
    first = lst.pop_front()
    print(f"\nPopped from back: {last.value if last else None}")
    print(f"Popped from front: {first.value if first else None}")
    print(f"Remaining: {list(lst)}\n")

    # Mutating while iterating invalidates the iterator
    it = lst.iter()
    lst.push("task-3")
    try:
        next(it)
    except ConcurrentMutationError as exc:
        print(f"Iterator invalidated: {exc}")

    while (handle := lst.pop_front()) is not None:
        print(f"  Drained {handle.value}")
    print(f"\nEmpty: {lst.is_empty()}")


if __name__ == "__main__":
    main()
