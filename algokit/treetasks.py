"""Exercises on an integer binary search tree, with an interactive menu."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO


@dataclass
class TreeNode:
    """A node of a binary search tree; equal values go to the right."""

    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def insert(root: Optional[TreeNode], value: int) -> TreeNode:
    """Insert ``value`` below ``root`` and return the (possibly new) root."""
    new = TreeNode(value)
    if root is None:
        return new
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def build_tree(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree by inserting ``values`` in order; empty input gives None."""
    root: Optional[TreeNode] = None
    for value in values:
        root = insert(root, value)
    return root


def in_order(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield the tree's values in ascending order."""
    pending: List[TreeNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node.value
        node = node.right


def tree_height(root: Optional[TreeNode]) -> int:
    """Number of levels in the tree; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(tree_height(root.left), tree_height(root.right))


def level_counts(root: Optional[TreeNode]) -> List[int]:
    """Number of nodes on each level, from the root downwards."""
    counts: List[int] = []
    level = [root] if root is not None else []
    while level:
        counts.append(len(level))
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return counts


def _divides(node: TreeNode, child: Optional[TreeNode]) -> bool:
    return child is not None and child.value != 0 and node.value % child.value == 0


def find_divisible_node(root: Optional[TreeNode]) -> Optional[int]:
    """First value, in pre-order, divisible by one of its children's values.

    Children holding zero are skipped. Returns None when there is none.
    """
    if root is None:
        return None
    if _divides(root, root.left) or _divides(root, root.right):
        return root.value
    found = find_divisible_node(root.left)
    if found is not None:
        return found
    return find_divisible_node(root.right)


def _balanced_height(node: Optional[TreeNode]) -> tuple[bool, int]:
    if node is None:
        return True, 0
    left_ok, left_height = _balanced_height(node.left)
    right_ok, right_height = _balanced_height(node.right)
    ok = left_ok and right_ok and abs(left_height - right_height) <= 1
    return ok, max(left_height, right_height) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root)[0]


def min_leaf(root: Optional[TreeNode]) -> Optional[int]:
    """Smallest value held by a leaf; None for an empty tree."""
    if root is None:
        return None
    if root.left is None and root.right is None:
        return root.value
    leaves = [m for m in (min_leaf(root.left), min_leaf(root.right)) if m is not None]
    return min(leaves)


class _Tokens:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: List[str] = []

    def next(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending = line.split()
        return self._pending.pop(0)


def _prompt(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def _read_int(tokens: _Tokens) -> int:
    token = tokens.next()
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None


def _input_tree(tokens: _Tokens, out: TextIO) -> TreeNode:
    _prompt(out, "Enter the root of the tree: ")
    root = TreeNode(_read_int(tokens))
    while True:
        _prompt(out, "Add another node? (y/n): ")
        if tokens.next()[0] not in "yY":
            return root
        _prompt(out, "Enter the node value: ")
        insert(root, _read_int(tokens))


_MENU = (
    "\nMenu:\n"
    "1. Count nodes on each level\n"
    "2. Find an element divisible by its child\n"
    "3. Check whether the tree is balanced\n"
    "4. Find the smallest leaf\n"
    "0. Exit\n"
    "Choose: "
)


def _run_choice(choice: int, tokens: _Tokens, out: TextIO) -> None:
    if choice == 1:
        out.write("\n=== Nodes per level ===\n")
        root = _input_tree(tokens, out)
        out.write("Nodes per level:\n")
        for level, count in enumerate(level_counts(root)):
            out.write(f"level {level}: {count}\n")
    elif choice == 2:
        out.write("\n=== Element divisible by its child ===\n")
        found = find_divisible_node(_input_tree(tokens, out))
        if found is None:
            out.write("Nothing found\n")
        else:
            out.write(f"Found element: {found}\n")
    elif choice == 3:
        out.write("\n=== Balance check ===\n")
        if is_balanced(_input_tree(tokens, out)):
            out.write("The tree is balanced\n")
        else:
            out.write("The tree is not balanced\n")
    elif choice == 4:
        out.write("\n=== Smallest leaf ===\n")
        smallest = min_leaf(_input_tree(tokens, out))
        if smallest is None:
            out.write("The tree is empty\n")
        else:
            out.write(f"Smallest leaf: {smallest}\n")
    else:
        out.write("Invalid choice!\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive menu on standard input and output."""
    tokens = _Tokens(sys.stdin)
    out = sys.stdout
    while True:
        _prompt(out, _MENU)
        try:
            token = tokens.next()
        except EOFError:
            out.write("\n")
            return 0
        try:
            choice = int(token)
        except ValueError:
            out.write("Invalid choice!\n")
            continue
        if choice == 0:
            out.write("Exiting.\n")
            return 0
        try:
            _run_choice(choice, tokens, out)
        except ValueError as error:
            out.write(f"Invalid input: {error}\n")
        except EOFError:
            out.write("\n")
            return 0


if __name__ == "__main__":
    sys.exit(main())