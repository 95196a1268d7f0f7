"""Node types shared by the linked lists, queues and trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional[ListNode] = field(default=None, repr=False)


@dataclass(eq=False)
class DoublyListNode:
    """A node of a doubly linked list."""

    val: int
    next: Optional[DoublyListNode] = field(default=None, repr=False)
    pre: Optional[DoublyListNode] = field(default=None, repr=False)


@dataclass(eq=False)
class TreeNode:
    """A binary tree node with an optional parent link and a height field."""

    val: int = 0
    parent: Optional[TreeNode] = field(default=None, repr=False)
    left: Optional[TreeNode] = field(default=None, repr=False)
    right: Optional[TreeNode] = field(default=None, repr=False)
    height: int = 0