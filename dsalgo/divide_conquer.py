"""Divide and conquer: binary search, tree reconstruction and Tower of Hanoi."""

from __future__ import annotations

from typing import Optional

from .nodes import TreeNode


def binary_search(nums: list[int], target: int) -> int:
    """Return the index of target in the sorted list nums, or -1."""

    def dfs(i: int, j: int) -> int:
        if i > j:
            return -1
        m = (i + j) // 2
        if nums[m] < target:
            return dfs(m + 1, j)
        if nums[m] > target:
            return dfs(i, m - 1)
        return m

    return dfs(0, len(nums) - 1)


def build_tree(preorder: list[int], inorder: list[int]) -> Optional[TreeNode]:
    """Rebuild a binary tree of distinct values from its pre- and in-order walks."""
    if len(preorder) != len(inorder):
        raise ValueError("pre-order and in-order must have the same length")
    inorder_map = {val: i for i, val in enumerate(inorder)}
    if len(inorder_map) != len(inorder):
        raise ValueError("tree values must be distinct")
    if set(preorder) != set(inorder_map):
        raise ValueError("pre-order and in-order must hold the same values")

    def dfs(i: int, left: int, right: int, parent: Optional[TreeNode]) -> Optional[TreeNode]:
        if right < left:
            return None
        root = TreeNode(preorder[i], parent=parent)
        m = inorder_map[preorder[i]]
        root.left = dfs(i + 1, left, m - 1, root)
        root.right = dfs(i + 1 + m - left, m + 1, right, root)
        return root

    return dfs(0, 0, len(inorder) - 1, None)


def _move(src: list[int], tar: list[int]) -> None:
    tar.append(src.pop())


def solve_hanota(a: list[int], b: list[int], c: list[int]) -> None:
    """Move every disc from a to c using b, in place; list ends are the tops."""

    def dfs(i: int, src: list[int], buf: list[int], tar: list[int]) -> None:
        if i == 1:
            _move(src, tar)
            return
        dfs(i - 1, src, tar, buf)
        _move(src, tar)
        dfs(i - 1, buf, src, tar)

    if a:
        dfs(len(a), a, b, c)