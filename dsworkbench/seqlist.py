"""A sequence list with positional insert, erase, find and modify."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class SeqList(Generic[T]):
    """An ordered list of values addressed by position."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: list[T] = list(values)

    def push_back(self, value: T) -> None:
        """Append ``value`` at the end."""
        self.insert(len(self._items), value)

    def push_front(self, value: T) -> None:
        """Put ``value`` at the start."""
        self.insert(0, value)

    def pop_front(self) -> T:
        """Remove and return the first value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop_front from an empty list")
        return self.erase(0)

    def pop_back(self) -> T:
        """Remove and return the last value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop_back from an empty list")
        return self._items.pop()

    def insert(self, pos: int, value: T) -> None:
        """Insert ``value`` at ``pos``, which may range from 0 to the length."""
        if not 0 <= pos <= len(self._items):
            raise IndexError(f"insert position {pos} out of range")
        self._items.insert(pos, value)

    def erase(self, pos: int) -> T:
        """Remove and return the value at ``pos``."""
        self._check_index(pos)
        return self._items.pop(pos)

    def find(self, value: T) -> Optional[int]:
        """Return the position of the first ``value``, or None if absent."""
        for index, item in enumerate(self._items):
            if item == value:
                return index
        return None

    def modify(self, pos: int, value: T) -> None:
        """Replace the value at ``pos`` with ``value``."""
        self._check_index(pos)
        self._items[pos] = value

    def _check_index(self, pos: int) -> None:
        if not 0 <= pos < len(self._items):
            raise IndexError(f"position {pos} out of range")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, pos: int) -> T:
        self._check_index(pos)
        return self._items[pos]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SeqList):
            return self._items == other._items
        return NotImplemented

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"SeqList({self._items!r})"