"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A stack whose top is the most recently pushed value."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top value without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"