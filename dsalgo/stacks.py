"""Stacks backed by a Python list and by a linked list."""

from __future__ import annotations

from typing import Optional

from .nodes import ListNode


class ArrayStack:
    """A stack stored in a list; the top is the end of the list."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def push(self, num: int) -> None:
        self._items.append(num)

    def pop(self) -> int:
        num = self.top()
        self._items.pop()
        return num

    def top(self) -> int:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def to_list(self) -> list[int]:
        """Return the elements from bottom to top."""
        return list(self._items)


class LinkedListStack:
    """A stack stored as a singly linked list; the head is the top."""

    def __init__(self) -> None:
        self._top: Optional[ListNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def push(self, num: int) -> None:
        self._top = ListNode(num, self._top)
        self._size += 1

    def pop(self) -> int:
        num = self.top()
        self._top = self._top.next
        self._size -= 1
        return num

    def top(self) -> int:
        if self._top is None:
            raise IndexError("stack is empty")
        return self._top.val

    def to_list(self) -> list[int]:
        """Return the elements from top to bottom."""
        values = []
        node = self._top
        while node is not None:
            values.append(node.val)
            node = node.next
        return values