"""Building, traversing and measuring linked binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Optional

from .nodes import TreeNode

NULL_MARK = -9999


def _require_node(node: Optional[TreeNode]) -> TreeNode:
    if node is None:
        raise ValueError("cannot attach a child to a missing node")
    return node


def insert_left(node: TreeNode, value: int) -> TreeNode:
    """Attach a new left child holding value to node and return it."""
    parent = _require_node(node)
    child = TreeNode(value, parent=parent)
    parent.left = child
    return child


def insert_right(node: TreeNode, value: int) -> TreeNode:
    """Attach a new right child holding value to node and return it."""
    parent = _require_node(node)
    child = TreeNode(value, parent=parent)
    parent.right = child
    return child


def level_order(root: Optional[TreeNode]) -> list[int]:
    """Return the values level by level, left to right."""
    if root is None:
        return []
    values = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        values.append(node.val)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return values


def pre_order(root: Optional[TreeNode]) -> list[int]:
    """Return the values in root-left-right order (recursive)."""
    if root is None:
        return []
    return [root.val, *pre_order(root.left), *pre_order(root.right)]


def in_order(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left-root-right order (recursive)."""
    if root is None:
        return []
    return [*in_order(root.left), root.val, *in_order(root.right)]


def post_order(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left-right-root order (recursive)."""
    if root is None:
        return []
    return [*post_order(root.left), *post_order(root.right), root.val]


def pre_order_iterative(root: Optional[TreeNode]) -> list[int]:
    """Return the pre-order values using an explicit stack."""
    values = []
    stack: list[TreeNode] = []
    cur = root
    while cur is not None or stack:
        if cur is not None:
            values.append(cur.val)
            stack.append(cur)
            cur = cur.left
        else:
            cur = stack.pop().right
    return values


def in_order_iterative(root: Optional[TreeNode]) -> list[int]:
    """Return the in-order values using an explicit stack."""
    values = []
    stack: list[TreeNode] = []
    cur = root
    while cur is not None or stack:
        if cur is not None:
            stack.append(cur)
            cur = cur.left
        else:
            cur = stack.pop()
            values.append(cur.val)
            cur = cur.right
    return values


def post_order_iterative(root: Optional[TreeNode]) -> list[int]:
    """Return the post-order values by reversing a root-right-left walk."""
    if root is None:
        return []
    visited = []
    stack = [root]
    while stack:
        node = stack.pop()
        visited.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    visited.reverse()
    return visited


def find(root: Optional[TreeNode], value: int) -> Optional[TreeNode]:
    """Return the first node holding value in pre-order, or None."""
    if root is None:
        return None
    if root.val == value:
        return root
    found = find(root.left, value)
    return found if found is not None else find(root.right, value)


def count(root: Optional[TreeNode]) -> int:
    """Return the number of nodes."""
    if root is None:
        return 0
    return count(root.left) + count(root.right) + 1


def height(root: Optional[TreeNode]) -> int:
    """Return the number of levels; an empty tree has height 0."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def build_from_preorder(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from pre-order values where None or -9999 marks no node."""
    stream = iter(values)

    def build(it: Iterator[Optional[int]], parent: Optional[TreeNode]) -> Optional[TreeNode]:
        try:
            value = next(it)
        except StopIteration:
            raise ValueError("pre-order sequence ended too early") from None
        if value is None or value == NULL_MARK:
            return None
        node = TreeNode(value, parent=parent)
        node.left = build(it, node)
        node.right = build(it, node)
        return node

    return build(stream, None)