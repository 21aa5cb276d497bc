"""Unbalanced binary search tree; equal values go to the right subtree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


def _delete(node: Optional[_Node], value: Any) -> tuple[Optional[_Node], bool]:
    if node is None:
        return None, False
    if value < node.value:
        node.left, removed = _delete(node.left, value)
        return node, removed
    if value > node.value:
        node.right, removed = _delete(node.right, value)
        return node, removed
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    successor = _leftmost(node.right)
    node.value = successor.value
    node.right, _ = _delete(node.right, successor.value)
    return node, True


class BinarySearchTree:
    """A binary search tree of mutually comparable values."""

    def __init__(self, values: Iterable = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value``; duplicates are kept."""
        new = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size

    def delete(self, value: Any) -> bool:
        """Remove one occurrence of ``value``; return whether one was found."""
        self._root, removed = _delete(self._root, value)
        if removed:
            self._size -= 1
        return removed

    def min(self) -> Any:
        """Smallest value in the tree."""
        if self._root is None:
            raise ValueError("tree is empty")
        return _leftmost(self._root).value

    def max(self) -> Any:
        """Largest value in the tree."""
        if self._root is None:
            raise ValueError("tree is empty")
        return _rightmost(self._root).value

    def inorder(self) -> list:
        """Values in ascending order."""
        return list(self)

    def preorder(self) -> list:
        """Values in root, left, right order."""
        values = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            values.append(node.value)
            stack.extend(child for child in (node.right, node.left) if child is not None)
        return values

    def postorder(self) -> list:
        """Values in left, right, root order."""
        reversed_values = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            reversed_values.append(node.value)
            stack.extend(child for child in (node.left, node.right) if child is not None)
        return reversed_values[::-1]