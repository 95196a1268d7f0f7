"""A growable integer array and plain-list array operations."""

from __future__ import annotations

import random

BUFSIZE = 64


class ZArray:
    """An integer array of a given length, zero-filled, that grows on insert."""

    def __init__(self, size: int = 10) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._items = [0] * size
        self._capacity = size

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("index out of range")

    def insert(self, index: int, num: int) -> None:
        """Insert num at index, shifting later elements one place right."""
        if not 0 <= index <= len(self._items):
            raise IndexError("index out of range")
        if len(self._items) + 1 > self._capacity:
            self._capacity = len(self._items) + BUFSIZE
        self._items.insert(index, num)

    def __getitem__(self, index: int) -> int:
        self._check(index)
        return self._items[index]

    def __setitem__(self, index: int, num: int) -> None:
        self._check(index)
        self._items[index] = num

    def find(self, num: int) -> int:
        """Return the index of the first element equal to num, or -1."""
        try:
            return self._items.index(num)
        except ValueError:
            return -1

    def remove(self, index: int) -> None:
        """Remove the element at index; an index out of range is ignored."""
        if 0 <= index < len(self._items):
            del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> list[int]:
        return list(self._items)


def random_access(nums: list[int]) -> int:
    """Return a randomly chosen element of nums."""
    return random.choice(nums)


def extend(nums: list[int], enlarge: int) -> list[int]:
    """Return a new list holding nums followed by enlarge zeros."""
    if enlarge < 0:
        raise ValueError("enlarge must not be negative")
    return nums + [0] * enlarge


def _check_index(nums: list[int], index: int) -> None:
    if not 0 <= index < len(nums):
        raise IndexError("index out of range")


def insert(nums: list[int], num: int, index: int) -> None:
    """Insert num at index in place; the last element falls off the end."""
    _check_index(nums, index)
    nums[index + 1:] = nums[index:-1]
    nums[index] = num


def remove(nums: list[int], index: int) -> None:
    """Remove the element at index in place; the last slot keeps its value."""
    _check_index(nums, index)
    nums[index:-1] = nums[index + 1:]


def traverse(nums: list[int]) -> int:
    """Visit every element and return their sum."""
    count = 0
    for num in nums:
        count += num
    return count


def find(nums: list[int], target: int) -> int:
    """Return the index of the first element equal to target, or -1."""
    for index, num in enumerate(nums):
        if num == target:
            return index
    return -1