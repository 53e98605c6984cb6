"""Classic comparison sorts, counting sort and an external file merge sort.

Every sort works in place on a mutable sequence and returns None.
"""

from __future__ import annotations

import heapq
from itertools import islice
from pathlib import Path
from typing import Any, Iterable, Iterator, MutableSequence, Optional, Union

from dsworkbench.stack import Stack

__all__ = [
    "CHUNK_SIZE",
    "insert_sort",
    "shell_sort",
    "select_sort",
    "heap_sort",
    "bubble_sort",
    "partition_hoare",
    "partition_hole",
    "median_of_three",
    "partition_pointers",
    "quick_sort",
    "quick_sort_iterative",
    "merge_sort",
    "merge_sort_iterative",
    "merge_files",
    "merge_sort_file",
    "count_sort",
]

PathLike = Union[str, Path]

#: Number of values sorted in memory per chunk by :func:`merge_sort_file`.
CHUNK_SIZE = 10


def _swap(items: MutableSequence[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def insert_sort(items: MutableSequence[Any]) -> None:
    """Straight insertion sort: stable, quadratic."""
    for i in range(1, len(items)):
        value = items[i]
        end = i - 1
        while end >= 0 and value < items[end]:
            items[end + 1] = items[end]
            end -= 1
        items[end + 1] = value


def shell_sort(items: MutableSequence[Any]) -> None:
    """Shell sort with gaps shrinking as ``gap // 3 + 1`` down to 1."""
    n = len(items)
    gap = n
    while gap > 1:
        gap = gap // 3 + 1
        for i in range(n - gap):
            end = i
            value = items[end + gap]
            while end >= 0 and value < items[end]:
                items[end + gap] = items[end]
                end -= gap
            items[end + gap] = value


def select_sort(items: MutableSequence[Any]) -> None:
    """Selection sort placing both the minimum and the maximum on each pass."""
    begin, end = 0, len(items) - 1
    while begin < end:
        mini = maxi = begin
        for i in range(begin + 1, end + 1):
            if items[i] < items[mini]:
                mini = i
            if items[i] > items[maxi]:
                maxi = i
        _swap(items, begin, mini)
        if begin == maxi:
            maxi = mini
        _swap(items, end, maxi)
        begin += 1
        end -= 1


def _adjust_down(items: MutableSequence[Any], size: int, parent: int) -> None:
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


def heap_sort(items: MutableSequence[Any]) -> None:
    """Ascending heap sort: build a max-heap, then move the top to the end."""
    n = len(items)
    for parent in range((n - 2) // 2, -1, -1):
        _adjust_down(items, n, parent)
    for end in range(n - 1, 0, -1):
        _swap(items, 0, end)
        _adjust_down(items, end, 0)


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Bubble sort that stops early once a pass makes no exchange."""
    n = len(items)
    for j in range(n - 1):
        exchanged = False
        for i in range(1, n - j):
            if items[i - 1] > items[i]:
                _swap(items, i - 1, i)
                exchanged = True
        if not exchanged:
            break


def partition_hoare(items: MutableSequence[Any], begin: int, end: int) -> int:
    """Partition ``items[begin:end+1]`` around its first value (Hoare scheme).

    Return the final index of the key value.
    """
    left, right = begin, end
    key = begin
    while left < right:
        while left < right and items[right] >= items[key]:
            right -= 1
        while left < right and items[left] <= items[key]:
            left += 1
        _swap(items, left, right)
    _swap(items, key, left)
    return left


def partition_hole(items: MutableSequence[Any], begin: int, end: int) -> int:
    """Partition ``items[begin:end+1]`` around its first value by filling holes.

    Return the final index of the key value.
    """
    key = items[begin]
    hole = begin
    while begin < end:
        while begin < end and items[end] >= key:
            end -= 1
        items[hole] = items[end]
        hole = end
        while begin < end and items[begin] <= key:
            begin += 1
        items[hole] = items[begin]
        hole = begin
    items[hole] = key
    return hole


def median_of_three(items: MutableSequence[Any], begin: int, end: int) -> int:
    """Return whichever of ``begin``, the midpoint and ``end`` holds the median value."""
    mid = (begin + end) >> 1
    if items[begin] < items[mid]:
        if items[mid] < items[end]:
            return mid
        if items[begin] < items[end]:
            return end
        return begin
    if items[mid] > items[end]:
        return mid
    if items[begin] < items[end]:
        return begin
    return end


def partition_pointers(items: MutableSequence[Any], begin: int, end: int) -> int:
    """Partition ``items[begin:end+1]`` with a trailing and a leading index.

    The key is chosen by :func:`median_of_three`. Return its final index.
    """
    key = begin
    _swap(items, key, median_of_three(items, begin, end))
    prev = begin
    for cur in range(begin + 1, end + 1):
        if items[cur] < items[key]:
            prev += 1
            if prev != cur:
                _swap(items, cur, prev)
    _swap(items, key, prev)
    return prev


def _resolve_end(items: MutableSequence[Any], end: Optional[int]) -> int:
    return len(items) - 1 if end is None else end


def quick_sort(
    items: MutableSequence[Any], begin: int = 0, end: Optional[int] = None
) -> None:
    """Recursive quick sort of ``items[begin:end+1]`` (the whole sequence by default)."""
    end = _resolve_end(items, end)
    if begin >= end:
        return
    key = partition_pointers(items, begin, end)
    quick_sort(items, begin, key - 1)
    quick_sort(items, key + 1, end)


def quick_sort_iterative(
    items: MutableSequence[Any], begin: int = 0, end: Optional[int] = None
) -> None:
    """Quick sort of ``items[begin:end+1]`` driven by an explicit stack of ranges."""
    end = _resolve_end(items, end)
    if begin >= end:
        return
    ranges: Stack[tuple[int, int]] = Stack()
    ranges.push((begin, end))
    while not ranges.is_empty():
        left, right = ranges.pop()
        key = partition_pointers(items, left, right)
        if key + 1 < right:
            ranges.push((key + 1, right))
        if left < key - 1:
            ranges.push((left, key - 1))


def _merge(
    items: MutableSequence[Any],
    tmp: list[Any],
    begin1: int,
    end1: int,
    begin2: int,
    end2: int,
) -> None:
    start = i = begin1
    while begin1 <= end1 and begin2 <= end2:
        if items[begin1] < items[begin2]:
            tmp[i] = items[begin1]
            begin1 += 1
        else:
            tmp[i] = items[begin2]
            begin2 += 1
        i += 1
    while begin1 <= end1:
        tmp[i] = items[begin1]
        begin1 += 1
        i += 1
    while begin2 <= end2:
        tmp[i] = items[begin2]
        begin2 += 1
        i += 1
    items[start : end2 + 1] = tmp[start : end2 + 1]


def _merge_sort(
    items: MutableSequence[Any], begin: int, end: int, tmp: list[Any]
) -> None:
    if begin >= end:
        return
    mid = (begin + end) // 2
    _merge_sort(items, begin, mid, tmp)
    _merge_sort(items, mid + 1, end, tmp)
    _merge(items, tmp, begin, mid, mid + 1, end)


def merge_sort(items: MutableSequence[Any]) -> None:
    """Top-down recursive merge sort."""
    _merge_sort(items, 0, len(items) - 1, [None] * len(items))


def merge_sort_iterative(items: MutableSequence[Any]) -> None:
    """Bottom-up merge sort merging runs of width 1, 2, 4, ..."""
    n = len(items)
    tmp: list[Any] = [None] * n
    gap = 1
    while gap < n:
        for i in range(0, n, 2 * gap):
            end1 = i + gap - 1
            begin2 = i + gap
            if end1 >= n or begin2 >= n:
                break
            end2 = min(i + 2 * gap - 1, n - 1)
            _merge(items, tmp, i, end1, begin2, end2)
        gap *= 2


def _read_numbers(path: PathLike) -> Iterator[int]:
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            for token in line.split():
                yield int(token)


def _write_numbers(path: PathLike, numbers: Iterable[int]) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        for number in numbers:
            handle.write(f"{number}\n")


def merge_files(first: PathLike, second: PathLike, merged: PathLike) -> None:
    """Merge two files of sorted integers, one per line, into ``merged``."""
    _write_numbers(merged, heapq.merge(_read_numbers(first), _read_numbers(second)))


def _chunks(numbers: Iterable[int], size: int) -> Iterator[list[int]]:
    iterator = iter(numbers)
    while chunk := list(islice(iterator, size)):
        yield chunk


def merge_sort_file(path: PathLike, workdir: PathLike) -> Path:
    """Sort the integers in ``path`` using files in ``workdir``.

    The input is cut into chunks of :data:`CHUNK_SIZE` values; each is sorted
    in memory and written to a file named by its number ("1", "2", ...). The
    chunk files are then merged one after another into "12", "123", and so on.
    Return the path of the fully sorted file.
    """
    workdir = Path(workdir)
    chunk_paths: list[Path] = []
    for index, chunk in enumerate(_chunks(_read_numbers(path), CHUNK_SIZE), start=1):
        quick_sort(chunk)
        chunk_path = workdir / str(index)
        _write_numbers(chunk_path, chunk)
        chunk_paths.append(chunk_path)

    if not chunk_paths:
        empty = workdir / "1"
        _write_numbers(empty, [])
        return empty

    merged = chunk_paths[0]
    name = merged.name
    for index, chunk_path in enumerate(chunk_paths[1:], start=2):
        name += str(index)
        target = workdir / name
        merge_files(merged, chunk_path, target)
        merged = target
    return merged


def count_sort(items: MutableSequence[int]) -> None:
    """Counting sort for integers; memory grows with the range of values."""
    if not items:
        return
    low, high = min(items), max(items)
    counts = [0] * (high - low + 1)
    for value in items:
        counts[value - low] += 1
    position = 0
    for offset, count in enumerate(counts):
        for _ in range(count):
            items[position] = offset + low
            position += 1