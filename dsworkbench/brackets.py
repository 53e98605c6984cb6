"""Checking that brackets in a string are balanced."""

from __future__ import annotations

from dsworkbench.stack import Stack

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_valid(text: str) -> bool:
    """Return True when every bracket in ``text`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closer and
    must match the most recent unclosed opener.
    """
    stack: Stack[str] = Stack()
    for char in text:
        if char in _OPENERS:
            stack.push(char)
            continue
        if stack.is_empty():
            return False
        if _PAIRS.get(char) != stack.pop():
            return False
    return stack.is_empty()