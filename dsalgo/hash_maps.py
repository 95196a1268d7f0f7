"""Hash maps: a fixed bucket array and a separate-chaining map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Pair:
    """A key-value entry."""

    key: int
    val: str


class ArrayHashMap:
    """A map of 100 buckets holding one pair each; a collision overwrites."""

    BUCKETS = 100

    def __init__(self) -> None:
        self._buckets: list[Optional[Pair]] = [None] * self.BUCKETS

    def hash_func(self, key: int) -> int:
        return key % self.BUCKETS

    def get(self, key: int) -> Optional[str]:
        """Return the value in key's bucket, or None if the bucket is empty."""
        pair = self._buckets[self.hash_func(key)]
        return None if pair is None else pair.val

    def put(self, key: int, val: str) -> None:
        self._buckets[self.hash_func(key)] = Pair(key, val)

    def remove(self, key: int) -> None:
        self._buckets[self.hash_func(key)] = None

    def pair_set(self) -> list[Pair]:
        """Return the stored pairs in bucket order."""
        return [pair for pair in self._buckets if pair is not None]


class HashMapChaining:
    """A hash map using separate chaining, doubling when the load is high."""

    INITIAL_CAPACITY = 4
    LOAD_THRESHOLD = 2.0 / 3.0
    EXTEND_RATIO = 2

    def __init__(self) -> None:
        self._capacity = self.INITIAL_CAPACITY
        self._size = 0
        self._buckets: list[list[Pair]] = [[] for _ in range(self._capacity)]

    def hash_func(self, key: int) -> int:
        return key % self._capacity

    def load_factor(self) -> float:
        return self._size / self._capacity

    def capacity(self) -> int:
        return self._capacity

    def buckets(self) -> list[list[Pair]]:
        """Return a copy of the bucket chains."""
        return [list(bucket) for bucket in self._buckets]

    def __len__(self) -> int:
        return self._size

    def get(self, key: int) -> Optional[str]:
        """Return the value for key, or None if it is absent."""
        for pair in self._buckets[self.hash_func(key)]:
            if pair.key == key:
                return pair.val
        return None

    def put(self, key: int, val: str) -> None:
        """Add or update key; grow first if the load factor is over the limit."""
        if self.load_factor() > self.LOAD_THRESHOLD:
            self.extend()
        bucket = self._buckets[self.hash_func(key)]
        for pair in bucket:
            if pair.key == key:
                pair.val = val
                return
        bucket.append(Pair(key, val))
        self._size += 1

    def remove(self, key: int) -> None:
        """Remove key if present."""
        bucket = self._buckets[self.hash_func(key)]
        for i, pair in enumerate(bucket):
            if pair.key == key:
                del bucket[i]
                self._size -= 1
                return

    def extend(self) -> None:
        """Multiply the capacity by EXTEND_RATIO and rehash every pair."""
        old = self._buckets
        self._capacity *= self.EXTEND_RATIO
        self._buckets = [[] for _ in range(self._capacity)]
        self._size = 0
        for bucket in old:
            for pair in bucket:
                self.put(pair.key, pair.val)