"""Classic comparison sorts that reorder a list in place."""

from __future__ import annotations

from typing import Any, MutableSequence


def bubble_sort(values: MutableSequence[Any]) -> None:
    """Sort values in place by repeatedly bubbling the largest element up."""
    n = len(values)
    for end in range(n - 1, 0, -1):
        for j in range(end):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]


def select_sort(values: MutableSequence[Any]) -> None:
    """Sort values in place by moving the smallest remaining element forward."""
    n = len(values)
    for i in range(n - 1):
        smallest = min(range(i, n), key=values.__getitem__)
        if smallest != i:
            values[i], values[smallest] = values[smallest], values[i]


def insert_sort(values: MutableSequence[Any]) -> None:
    """Sort values in place by inserting each element into the sorted prefix."""
    for i in range(1, len(values)):
        current = values[i]
        j = i - 1
        while j >= 0 and current < values[j]:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current


def _partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Place the first element of values[low..high] at its final position."""
    first, last = low, high
    key = values[first]
    while first < last:
        while first < last and values[last] >= key:
            last -= 1
        if first < last:
            values[first] = values[last]
            first += 1
        while first < last and values[first] <= key:
            first += 1
        if first < last:
            values[last] = values[first]
            last -= 1
    values[first] = key
    return first


def quick_sort(values: MutableSequence[Any]) -> None:
    """Sort values in place by quicksort with the first element as pivot."""
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        mid = _partition(values, low, high)
        pending.append((low, mid - 1))
        pending.append((mid + 1, high))


def _sift_down(values: MutableSequence[Any], start: int, end: int) -> None:
    """Restore the max-heap property below start, within indices up to end."""
    dad = start
    son = 2 * dad + 1
    while son <= end:
        if son + 1 <= end and values[son] < values[son + 1]:
            son += 1
        if values[dad] > values[son]:
            return
        values[dad], values[son] = values[son], values[dad]
        dad = son
        son = 2 * dad + 1


def heap_sort(values: MutableSequence[Any]) -> None:
    """Sort values in place with a max-heap."""
    n = len(values)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(values, i, n - 1)
    for i in range(n - 1, 0, -1):
        values[0], values[i] = values[i], values[0]
        _sift_down(values, 0, i - 1)