"""Linked-style LIFO stack and FIFO queue of values."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, List


class Stack:
    """Last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: List[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"


class Queue:
    """First-in, first-out queue."""

    def __init__(self) -> None:
        self._items: Deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Append ``item`` at the tail of the queue."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the head item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the head item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"