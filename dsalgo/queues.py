"""Queues and double-ended queues on circular arrays and linked lists."""

from __future__ import annotations

from typing import Optional

from .nodes import DoublyListNode, ListNode


class QueueFullError(Exception):
    """Raised when pushing onto a fixed-capacity queue that is full."""


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


class ArrayQueue:
    """A FIFO queue on a fixed-size circular array."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self._nums = [0] * capacity
        self._head = 0
        self._size = 0

    def capacity(self) -> int:
        return len(self._nums)

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def push(self, num: int) -> None:
        if self._size == self.capacity():
            raise QueueFullError("queue is full")
        self._nums[(self._head + self._size) % self.capacity()] = num
        self._size += 1

    def pop(self) -> int:
        num = self.peek()
        self._head = (self._head + 1) % self.capacity()
        self._size -= 1
        return num

    def peek(self) -> int:
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._nums[self._head]

    def to_list(self) -> list[int]:
        """Return the elements from front to rear."""
        cap = self.capacity()
        return [self._nums[(self._head + i) % cap] for i in range(self._size)]


class LinkedListQueue:
    """A FIFO queue on a singly linked list."""

    def __init__(self) -> None:
        self._head: Optional[ListNode] = None
        self._tail: Optional[ListNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def push(self, num: int) -> None:
        node = ListNode(num)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop(self) -> int:
        num = self.peek()
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return num

    def peek(self) -> int:
        if self._head is None:
            raise IndexError("queue is empty")
        return self._head.val

    def to_list(self) -> list[int]:
        values = []
        node = self._head
        while node is not None:
            values.append(node.val)
            node = node.next
        return values


class ArrayDeque:
    """A double-ended queue on a fixed-size circular array."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self._nums = [0] * capacity
        self._front = 0
        self._size = 0

    def capacity(self) -> int:
        return len(self._nums)

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def _index(self, i: int) -> int:
        return i % self.capacity()

    def push_first(self, num: int) -> None:
        if self._size == self.capacity():
            raise QueueFullError("deque is full")
        self._front = self._index(self._front - 1)
        self._nums[self._front] = num
        self._size += 1

    def push_last(self, num: int) -> None:
        if self._size == self.capacity():
            raise QueueFullError("deque is full")
        self._nums[self._index(self._front + self._size)] = num
        self._size += 1

    def pop_first(self) -> int:
        num = self.peek_first()
        self._front = self._index(self._front + 1)
        self._size -= 1
        return num

    def pop_last(self) -> int:
        num = self.peek_last()
        self._size -= 1
        return num

    def peek_first(self) -> int:
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._nums[self._front]

    def peek_last(self) -> int:
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._nums[self._index(self._front + self._size - 1)]

    def to_list(self) -> list[int]:
        return [self._nums[self._index(self._front + i)] for i in range(self._size)]


class LinkedListDeque:
    """A double-ended queue on a doubly linked list."""

    def __init__(self) -> None:
        self._front: Optional[DoublyListNode] = None
        self._rear: Optional[DoublyListNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def push_first(self, num: int) -> None:
        node = DoublyListNode(num)
        if self._front is None:
            self._front = self._rear = node
        else:
            node.next = self._front
            self._front.pre = node
            self._front = node
        self._size += 1

    def push_last(self, num: int) -> None:
        node = DoublyListNode(num)
        if self._rear is None:
            self._front = self._rear = node
        else:
            node.pre = self._rear
            self._rear.next = node
            self._rear = node
        self._size += 1

    def pop_first(self) -> int:
        if self._front is None:
            raise IndexError("deque is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        else:
            self._front.pre = None
        self._size -= 1
        return node.val

    def pop_last(self) -> int:
        if self._rear is None:
            raise IndexError("deque is empty")
        node = self._rear
        self._rear = node.pre
        if self._rear is None:
            self._front = None
        else:
            self._rear.next = None
        self._size -= 1
        return node.val

    def peek_first(self) -> int:
        if self._front is None:
            raise IndexError("deque is empty")
        return self._front.val

    def peek_last(self) -> int:
        if self._rear is None:
            raise IndexError("deque is empty")
        return self._rear.val

    def to_list(self) -> list[int]:
        values = []
        node = self._front
        while node is not None:
            values.append(node.val)
            node = node.next
        return values