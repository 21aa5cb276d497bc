"""Linked binary trees and the classic traversals over them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def preorder(root: Optional[TreeNode]) -> list:
    """Values in root, left, right order."""
    return list(_preorder(root))


def inorder(root: Optional[TreeNode]) -> list:
    """Values in left, root, right order."""
    return list(_inorder(root))


def postorder(root: Optional[TreeNode]) -> list:
    """Values in left, right, root order."""
    return list(_postorder(root))


def level_order(root: Optional[TreeNode]) -> list:
    """Values breadth first, level by level, left to right."""
    if root is None:
        return []
    values = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        values.append(node.value)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return values


def height(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def count_nodes(root: Optional[TreeNode]) -> int:
    """Total number of nodes."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def count_leaves(root: Optional[TreeNode]) -> int:
    """Number of nodes with no children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def mirror(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Swap the children of every node in place and return the root."""
    if root is not None:
        root.left, root.right = mirror(root.right), mirror(root.left)
    return root


def build_sample_tree() -> TreeNode:
    """Build the six-node tree A(B(D, E), C(-, F))."""
    return TreeNode(
        "A",
        TreeNode("B", TreeNode("D"), TreeNode("E")),
        TreeNode("C", None, TreeNode("F")),
    )