"""Binary tree nodes and the traversals and measures defined over them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

from dsworkbench.linkedqueue import LinkedQueue

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """A tree node holding ``value`` and optional left and right children."""

    value: T
    left: Optional["Node[T]"] = None
    right: Optional["Node[T]"] = None


def _preorder(root: Optional[Node[T]]) -> Iterator[Optional[T]]:
    if root is None:
        yield None
        return
    yield root.value
    yield from _preorder(root.left)
    yield from _preorder(root.right)


def _inorder(root: Optional[Node[T]]) -> Iterator[Optional[T]]:
    if root is None:
        yield None
        return
    yield from _inorder(root.left)
    yield root.value
    yield from _inorder(root.right)


def _postorder(root: Optional[Node[T]]) -> Iterator[Optional[T]]:
    if root is None:
        yield None
        return
    yield from _postorder(root.left)
    yield from _postorder(root.right)
    yield root.value


def preorder(root: Optional[Node[T]]) -> list[Optional[T]]:
    """Return values root-left-right; None marks each empty subtree."""
    return list(_preorder(root))


def inorder(root: Optional[Node[T]]) -> list[Optional[T]]:
    """Return values left-root-right; None marks each empty subtree."""
    return list(_inorder(root))


def postorder(root: Optional[Node[T]]) -> list[Optional[T]]:
    """Return values left-right-root; None marks each empty subtree."""
    return list(_postorder(root))


def level_order(root: Optional[Node[T]]) -> list[T]:
    """Return values level by level, left to right."""
    result: list[T] = []
    queue: LinkedQueue[Node[T]] = LinkedQueue()
    if root is not None:
        queue.push(root)
    while not queue.is_empty():
        node = queue.pop()
        result.append(node.value)
        if node.left is not None:
            queue.push(node.left)
        if node.right is not None:
            queue.push(node.right)
    return result


def tree_size(root: Optional[Node[Any]]) -> int:
    """Return the number of nodes."""
    if root is None:
        return 0
    return tree_size(root.left) + tree_size(root.right) + 1


def leaf_count(root: Optional[Node[Any]]) -> int:
    """Return the number of nodes that have no children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return leaf_count(root.left) + leaf_count(root.right)


def level_count(root: Optional[Node[Any]], k: int) -> int:
    """Return the number of nodes on level ``k``, the root being level 1."""
    if k < 1:
        raise ValueError(f"level must be at least 1, got {k}")
    if root is None:
        return 0
    if k == 1:
        return 1
    return level_count(root.left, k - 1) + level_count(root.right, k - 1)


def find(root: Optional[Node[T]], value: T) -> Optional[Node[T]]:
    """Return the first node in preorder holding ``value``, or None."""
    if root is None:
        return None
    if root.value == value:
        return root
    found = find(root.left, value)
    if found is not None:
        return found
    return find(root.right, value)


def depth(root: Optional[Node[Any]]) -> int:
    """Return the number of levels in the tree."""
    if root is None:
        return 0
    return max(depth(root.left), depth(root.right)) + 1


def is_complete(root: Optional[Node[Any]]) -> bool:
    """Return True when the tree is a complete binary tree."""
    queue: LinkedQueue[Optional[Node[Any]]] = LinkedQueue()
    if root is not None:
        queue.push(root)
    while not queue.is_empty():
        node = queue.pop()
        if node is None:
            break
        queue.push(node.left)
        queue.push(node.right)
    return all(node is None for node in queue)