"""A binary tree stored in a list by level, with None for empty slots."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional


class ArrayBinaryTree:
    """A binary tree held in array form: children of i are 2i+1 and 2i+2."""

    def __init__(self, values: Iterable[Optional[int]]) -> None:
        self._tree: list[Optional[int]] = list(values)

    def __len__(self) -> int:
        return len(self._tree)

    def val(self, i: int) -> Optional[int]:
        """Return the value at index i, or None if i is outside the array."""
        if not 0 <= i < len(self._tree):
            return None
        return self._tree[i]

    def left(self, i: int) -> int:
        return 2 * i + 1

    def right(self, i: int) -> int:
        return 2 * i + 2

    def parent(self, i: int) -> int:
        """Return the parent index; the root gives -1."""
        return (i - 1) // 2

    def level_order(self) -> list[Optional[int]]:
        """Return the stored array, empty slots included."""
        return list(self._tree)

    def _walk(self, i: int, order: str, out: list[int]) -> None:
        value = self.val(i)
        if value is None:
            return
        if order == "pre":
            out.append(value)
        self._walk(self.left(i), order, out)
        if order == "in":
            out.append(value)
        self._walk(self.right(i), order, out)
        if order == "post":
            out.append(value)

    def _traverse(self, order: str) -> list[int]:
        out: list[int] = []
        self._walk(0, order, out)
        return out

    def pre_order(self) -> list[int]:
        return self._traverse("pre")

    def in_order(self) -> list[int]:
        return self._traverse("in")

    def post_order(self) -> list[int]:
        return self._traverse("post")