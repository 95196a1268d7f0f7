"""A list that stores its elements in an array and doubles it when full."""

from __future__ import annotations


class MyList:
    """A dynamic array of integers with explicit capacity growth."""

    INITIAL_CAPACITY = 10
    EXTEND_RATIO = 2

    def __init__(self) -> None:
        self._arr = [0] * self.INITIAL_CAPACITY
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._arr)

    def _check(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError("index out of range")

    def get(self, index: int) -> int:
        self._check(index)
        return self._arr[index]

    def set(self, index: int, num: int) -> None:
        self._check(index)
        self._arr[index] = num

    def __getitem__(self, index: int) -> int:
        return self.get(index)

    def __setitem__(self, index: int, num: int) -> None:
        self.set(index, num)

    def add(self, num: int) -> None:
        """Append num at the end."""
        if self._size == self.capacity():
            self.extend_capacity()
        self._arr[self._size] = num
        self._size += 1

    def insert(self, index: int, num: int) -> None:
        """Insert num before the existing element at index."""
        self._check(index)
        if self._size == self.capacity():
            self.extend_capacity()
        self._arr[index + 1:self._size + 1] = self._arr[index:self._size]
        self._arr[index] = num
        self._size += 1

    def remove(self, index: int) -> int:
        """Remove the element at index and return it."""
        self._check(index)
        num = self._arr[index]
        self._arr[index:self._size - 1] = self._arr[index + 1:self._size]
        self._size -= 1
        return num

    def extend_capacity(self) -> None:
        """Grow the backing array by EXTEND_RATIO, keeping the elements."""
        new_capacity = self.capacity() * self.EXTEND_RATIO
        self._arr = self._arr[: self._size] + [0] * (new_capacity - self._size)

    def to_list(self) -> list[int]:
        return self._arr[: self._size]