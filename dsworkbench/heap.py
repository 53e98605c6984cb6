"""A binary min-heap, the sift operations behind it, heap sort and top-k."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, MutableSequence, Sequence, TypeVar

T = TypeVar("T")


def _swap(items: MutableSequence[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def sift_up(items: MutableSequence[Any], child: int) -> None:
    """Move ``items[child]`` towards the root while it is smaller than its parent."""
    while child > 0:
        parent = (child - 1) // 2
        if items[child] < items[parent]:
            _swap(items, child, parent)
            child = parent
        else:
            break


def sift_down(items: MutableSequence[Any], size: int, parent: int) -> None:
    """Move ``items[parent]`` down a max-heap of the first ``size`` items.

    The value is swapped with its larger child until neither child is larger.
    """
    child = parent * 2 + 1
    while child < size:
        if child + 1 < size and items[child + 1] > items[child]:
            child += 1
        if items[child] > items[parent]:
            _swap(items, child, parent)
            parent = child
            child = parent * 2 + 1
        else:
            break


def _sift_down_min(items: MutableSequence[Any], size: int, parent: int) -> None:
    child = parent * 2 + 1
    while child < size:
        if child + 1 < size and items[child + 1] < items[child]:
            child += 1
        if items[child] < items[parent]:
            _swap(items, child, parent)
            parent = child
            child = parent * 2 + 1
        else:
            break


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place into ascending order."""
    n = len(items)
    for parent in range((n - 2) // 2, -1, -1):
        sift_down(items, n, parent)
    for end in range(n - 1, 0, -1):
        _swap(items, 0, end)
        sift_down(items, end, 0)


def top_k(items: Sequence[Any], k: int) -> list[Any]:
    """Return the ``k`` largest values of ``items``, arranged as a min-heap.

    Raise ValueError when ``k`` is negative or larger than the number of items.
    """
    if not 0 <= k <= len(items):
        raise ValueError(f"k must be between 0 and {len(items)}, got {k}")
    if k == 0:
        return []
    heap = list(items[:k])
    for parent in range((k - 2) // 2, -1, -1):
        _sift_down_min(heap, k, parent)
    for value in items[k:]:
        if value > heap[0]:
            heap[0] = value
            _sift_down_min(heap, k, 0)
    return heap


class Heap(Generic[T]):
    """A min-heap: the smallest value is always on top."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        for value in values:
            self.push(value)

    def push(self, value: T) -> None:
        """Add ``value`` to the heap."""
        self._items.append(value)
        sift_up(self._items, len(self._items) - 1)

    def pop(self) -> T:
        """Remove and return the smallest value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        _swap(self._items, 0, len(self._items) - 1)
        value = self._items.pop()
        _sift_down_min(self._items, len(self._items), 0)
        return value

    def top(self) -> T:
        """Return the smallest value without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return True when the heap holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the values in their stored (heap) order."""
        return iter(self._items)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"Heap({self._items!r})"