"""A bounded sequential list stored in a fixed-size array."""

from __future__ import annotations

MAX_SIZE = 100


class SequentialListFullError(Exception):
    """Raised when inserting into a sequential list that is full."""


class SequentialList:
    """A list with a fixed maximum number of elements."""

    def __init__(self, max_size: int = MAX_SIZE) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self._max_size = max_size
        self._items: list[int] = []

    def insert(self, elem: int, i: int) -> None:
        """Insert elem at position i (0 <= i <= len)."""
        if len(self._items) >= self._max_size:
            raise SequentialListFullError("sequential list is full")
        if not 0 <= i <= len(self._items):
            raise IndexError("index out of range")
        self._items.insert(i, elem)

    def delete(self, i: int) -> None:
        """Delete the element at position i."""
        if not 0 <= i < len(self._items):
            raise IndexError("index out of range")
        del self._items[i]

    def get(self, i: int) -> int:
        if not 0 <= i < len(self._items):
            raise IndexError("index out of range")
        return self._items[i]

    def find(self, elem: int) -> int:
        """Return the position of the first element equal to elem, or -1."""
        try:
            return self._items.index(elem)
        except ValueError:
            return -1

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> list[int]:
        return list(self._items)