"""Stacks and a bracket-balance checker built on them."""

from __future__ import annotations


class Stack:
    """LIFO stack of characters; reading from an empty stack raises IndexError."""

    def __init__(self) -> None:
        self._data: list[str] = []

    def push(self, char: str) -> None:
        """Put ``char`` on top."""
        self._data.append(char)

    def pop(self) -> str:
        """Remove and return the top item."""
        if not self._data:
            raise IndexError("pop from empty stack")
        return self._data.pop()

    def peek(self) -> str:
        """Return the top item without removing it."""
        if not self._data:
            raise IndexError("peek at empty stack")
        return self._data[-1]

    def is_empty(self) -> bool:
        """Whether the stack holds no items."""
        return not self._data


class MinStack:
    """Integer stack that reports its smallest item in constant time."""

    def __init__(self) -> None:
        self._data: list[int] = []
        self._mins: list[int] = []

    def push(self, num: int) -> None:
        """Put ``num`` on top."""
        self._mins.append(min(num, self._mins[-1]) if self._mins else num)
        self._data.append(num)

    def pop(self) -> int:
        """Remove and return the top item."""
        if not self._data:
            raise IndexError("pop from empty stack")
        self._mins.pop()
        return self._data.pop()

    def peek(self) -> int:
        """Return the top item without removing it."""
        if not self._data:
            raise IndexError("peek at empty stack")
        return self._data[-1]

    def is_empty(self) -> bool:
        """Whether the stack holds no items."""
        return not self._data

    def get_min(self) -> int:
        """Return the smallest item currently on the stack."""
        if not self._mins:
            raise IndexError("min of empty stack")
        return self._mins[-1]


_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENING = frozenset(_PAIRS.values())


def is_valid(s) -> bool:
    """Whether the brackets ``()``, ``{}`` and ``[]`` in ``s`` are balanced.

    Characters other than these brackets are ignored.
    """
    stack = Stack()
    for char in s:
        if char in _OPENING:
            stack.push(char)
        elif char in _PAIRS:
            if stack.is_empty() or stack.pop() != _PAIRS[char]:
                return False
    return stack.is_empty()