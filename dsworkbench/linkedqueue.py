"""A first-in, first-out queue built on singly linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class LinkedQueue(Generic[T]):
    """A queue that adds at the tail and removes from the head."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0

    def push(self, value: T) -> None:
        """Append ``value`` at the back of the queue."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop(self) -> T:
        """Remove and return the front value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from an empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def front(self) -> T:
        """Return the front value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("front of an empty queue")
        return self._head.value

    def back(self) -> T:
        """Return the back value; raise IndexError when empty."""
        if self._tail is None:
            raise IndexError("back of an empty queue")
        return self._tail.value

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"