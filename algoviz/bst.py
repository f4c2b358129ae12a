"""Immutable binary search tree and its traversals.

Nodes are frozen; insert and remove copy the path from the root to the
changed node and share every untouched subtree, so a tree held by an
earlier snapshot is never affected by later operations.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class TreeNode:
    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "left": self.left.to_dict() if self.left else None,
            "right": self.right.to_dict() if self.right else None,
        }


def insert(root: TreeNode | None, value: Any) -> TreeNode:
    """Return the tree with *value* added; an equal value leaves it unchanged."""
    if root is None:
        return TreeNode(value)
    if value < root.value:
        left = insert(root.left, value)
        return root if left is root.left else replace(root, left=left)
    if value > root.value:
        right = insert(root.right, value)
        return root if right is root.right else replace(root, right=right)
    return root


def remove(root: TreeNode | None, value: Any) -> TreeNode | None:
    """Return the tree with *value* removed; an absent value leaves it unchanged.

    A node with two children takes the value of its in-order successor
    (the minimum of its right subtree), which is then removed from the
    right subtree.
    """
    if root is None:
        return None
    if value < root.value:
        left = remove(root.left, value)
        return root if left is root.left else replace(root, left=left)
    if value > root.value:
        right = remove(root.right, value)
        return root if right is root.right else replace(root, right=right)

    if root.left is None:
        return root.right
    if root.right is None:
        return root.left
    successor = find_min(root.right)
    return TreeNode(successor.value, root.left, remove(root.right, successor.value))


def find_min(node: TreeNode | None) -> TreeNode:
    if node is None:
        raise ValueError("find_min called on an empty tree")
    while node.left is not None:
        node = node.left
    return node


def contains(root: TreeNode | None, value: Any) -> bool:
    node = root
    while node is not None:
        if value == node.value:
            return True
        node = node.left if value < node.value else node.right
    return False


def search_path(root: TreeNode | None, value: Any) -> list[Any]:
    """Values of the nodes compared while looking for *value*."""
    path: list[Any] = []
    node = root
    while node is not None:
        path.append(node.value)
        if value == node.value:
            break
        node = node.left if value < node.value else node.right
    return path


def build_tree(values: Iterable[Any], root: TreeNode | None = None) -> TreeNode | None:
    for value in values:
        root = insert(root, value)
    return root


def size(root: TreeNode | None) -> int:
    if root is None:
        return 0
    return 1 + size(root.left) + size(root.right)


def height(root: TreeNode | None) -> int:
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


# ── Traversals ───────────────────────────────────────────────────


def inorder(root: TreeNode | None) -> list[Any]:
    if root is None:
        return []
    return inorder(root.left) + [root.value] + inorder(root.right)


def preorder(root: TreeNode | None) -> list[Any]:
    if root is None:
        return []
    return [root.value] + preorder(root.left) + preorder(root.right)


def postorder(root: TreeNode | None) -> list[Any]:
    if root is None:
        return []
    return postorder(root.left) + postorder(root.right) + [root.value]


def level_order(root: TreeNode | None) -> list[Any]:
    if root is None:
        return []
    result: list[Any] = []
    queue: deque[TreeNode] = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result
