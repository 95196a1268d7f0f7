import random

import pytest

from dsalgo.sorting import bubble_sort, heap_sort, insert_sort, quick_sort, select_sort


@pytest.mark.parametrize("sort", [bubble_sort, select_sort, insert_sort, quick_sort, heap_sort])
def test_example_from_driver(sort):
    values = [5, 4, 4, 0, 6]
    assert sort(values) is None
    assert values == [0, 4, 4, 5, 6]


@pytest.mark.parametrize("sort", [bubble_sort, select_sort, insert_sort, quick_sort, heap_sort])
@pytest.mark.parametrize("data", [[], [1], [2, 1], [1, 2], [3, 3, 3]])
def test_small_inputs(sort, data):
    values = list(data)
    sort(values)
    assert values == sorted(data)


@pytest.mark.parametrize("sort", [bubble_sort, select_sort, insert_sort, quick_sort, heap_sort])
def test_random_inputs_match_sorted(sort):
    rng = random.Random(1234)
    for _ in range(30):
        data = [rng.randint(-50, 50) for _ in range(rng.randint(0, 40))]
        values = list(data)
        sort(values)
        assert values == sorted(data)


@pytest.mark.parametrize("sort", [bubble_sort, select_sort, insert_sort, quick_sort, heap_sort])
def test_already_sorted_and_reversed(sort):
    ascending = list(range(200))
    descending = list(range(199, -1, -1))
    sort(ascending)
    sort(descending)
    assert ascending == list(range(200))
    assert descending == list(range(200))


@pytest.mark.parametrize("sort", [bubble_sort, select_sort, insert_sort, quick_sort, heap_sort])
def test_sorts_strings(sort):
    values = ["pear", "apple", "fig", "banana"]
    sort(values)
    assert values == ["apple", "banana", "fig", "pear"]


@pytest.mark.parametrize("sort", [bubble_sort, select_sort, insert_sort, quick_sort, heap_sort])
def test_keeps_multiset(sort):
    rng = random.Random(7)
    data = [rng.randint(0, 5) for _ in range(60)]
    values = list(data)
    sort(values)
    assert sorted(values) == sorted(data)
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_each_sort_directly():
    for data in ([3, 1, 2], [9, -1, 0, 9]):
        expected = sorted(data)
        values = list(data)
        bubble_sort(values)
        assert values == expected
        values = list(data)
        select_sort(values)
        assert values == expected
        values = list(data)
        insert_sort(values)
        assert values == expected
        values = list(data)
        quick_sort(values)
        assert values == expected
        values = list(data)
        heap_sort(values)
        assert values == expected