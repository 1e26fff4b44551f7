"""Unbalanced binary search tree of values; duplicates go to the right."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BST:
    """Binary search tree supporting insert, search and removal."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, value: Any) -> None:
        """Add ``value``; values equal to a node go into its right subtree."""
        new = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value >= node.value:
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = new
                    return
                node = node.left

    def search(self, value: Any) -> bool:
        """Return whether ``value`` is stored in the tree."""
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.right if value > node.value else node.left
        return False

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    def remove(self, value: Any) -> None:
        """Remove one occurrence of ``value``; do nothing if it is absent."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        pending = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size