"""Operations on singly linked lists built from ListNode."""

from __future__ import annotations

from typing import Optional

from .nodes import ListNode


def list_create(*args: int) -> Optional[ListNode]:
    """Build a linked list holding the given values; return its head."""
    dummy = ListNode(0)
    tail = dummy
    for value in args:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def insert(node: ListNode, new_node: ListNode) -> None:
    """Insert new_node directly after node."""
    new_node.next = node.next
    node.next = new_node


def remove(node: ListNode) -> None:
    """Remove the node that follows node, if any."""
    if node.next is None:
        return
    node.next = node.next.next


def access(head: Optional[ListNode], index: int) -> Optional[ListNode]:
    """Return the node at position index, or None if the list is shorter."""
    for _ in range(index):
        if head is None:
            return None
        head = head.next
    return head


def find(head: Optional[ListNode], target: int) -> int:
    """Return the index of the first node holding target, or -1."""
    for index, value in enumerate(_values(head)):
        if value == target:
            return index
    return -1


def _values(head: Optional[ListNode]):
    while head is not None:
        yield head.val
        head = head.next


def to_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list in order."""
    return list(_values(head))


def reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    prev = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def merge(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Merge two sorted lists into one sorted list, reusing their nodes.

    On equal values the node from l2 comes first.
    """
    dummy = ListNode(0)
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val < l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next