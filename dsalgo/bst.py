"""A binary search tree and the rotations used to rebalance AVL trees."""

from __future__ import annotations

from typing import Optional

from .nodes import TreeNode


class BinarySearchTree:
    """A binary search tree of distinct integers."""

    def __init__(self) -> None:
        self._root: Optional[TreeNode] = None

    def root(self) -> Optional[TreeNode]:
        return self._root

    def search(self, num: int) -> Optional[TreeNode]:
        """Return the node holding num, or None."""
        cur = self._root
        while cur is not None:
            if cur.val < num:
                cur = cur.right
            elif cur.val > num:
                cur = cur.left
            else:
                return cur
        return None

    def insert(self, num: int) -> None:
        """Insert num; a value already present is ignored."""
        if self._root is None:
            self._root = TreeNode(num)
            return
        cur = self._root
        pre = cur
        while cur is not None:
            if cur.val == num:
                return
            pre = cur
            cur = cur.right if cur.val < num else cur.left
        node = TreeNode(num, parent=pre)
        if pre.val > num:
            pre.left = node
        else:
            pre.right = node

    def remove(self, num: int) -> None:
        """Remove num if present.

        A node with two children takes the largest value of its left subtree.
        """
        cur = self._root
        pre: Optional[TreeNode] = None
        while cur is not None and cur.val != num:
            pre = cur
            cur = cur.left if cur.val > num else cur.right
        if cur is None:
            return
        if cur.left is None or cur.right is None:
            child = cur.left if cur.left is not None else cur.right
            if child is not None:
                child.parent = pre
            if pre is None:
                self._root = child
            elif pre.left is cur:
                pre.left = child
            else:
                pre.right = child
        else:
            tmp = cur.left
            while tmp.right is not None:
                tmp = tmp.right
            value = tmp.val
            self.remove(value)
            cur.val = value


def rotate_right(node: Optional[TreeNode]) -> Optional[TreeNode]:
    """Rotate node right and return the new subtree root (its left child)."""
    if node is None:
        return None
    pivot = node.left
    if pivot is None:
        raise ValueError("right rotation needs a left child")
    node.left = pivot.right
    if node.left is not None:
        node.left.parent = node
    pivot.right = node
    pivot.parent = node.parent
    node.parent = pivot
    return pivot


def rotate_left(node: Optional[TreeNode]) -> Optional[TreeNode]:
    """Rotate node left and return the new subtree root (its right child)."""
    if node is None:
        return None
    pivot = node.right
    if pivot is None:
        raise ValueError("left rotation needs a right child")
    node.right = pivot.left
    if node.right is not None:
        node.right.parent = node
    pivot.left = node
    pivot.parent = node.parent
    node.parent = pivot
    return pivot