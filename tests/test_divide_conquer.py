import pytest

from dsalgo.binary_tree import in_order, level_order, pre_order
from dsalgo.divide_conquer import binary_search, build_tree, solve_hanota

NUMS = [1, 3, 6, 8, 12, 15, 23, 26, 31, 35]


@pytest.mark.parametrize("index", range(len(NUMS)))
def test_binary_search_finds_every_element(index):
    assert binary_search(NUMS, NUMS[index]) == index


@pytest.mark.parametrize("target", [0, 2, 7, 36])
def test_binary_search_missing(target):
    assert binary_search(NUMS, target) == -1


def test_binary_search_empty():
    assert binary_search([], 5) == -1


def test_build_tree_round_trip():
    preorder = [3, 9, 2, 1, 7]
    inorder = [9, 3, 1, 2, 7]
    root = build_tree(preorder, inorder)
    assert pre_order(root) == preorder
    assert in_order(root) == inorder
    assert level_order(root) == [3, 9, 2, 1, 7]


def test_build_tree_sets_parents():
    root = build_tree([3, 9, 2, 1, 7], [9, 3, 1, 2, 7])
    assert root.parent is None
    assert root.left.parent is root
    assert root.right.left.parent is root.right


def test_build_tree_empty():
    assert build_tree([], []) is None


def test_build_tree_rejects_mismatch():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1])
    with pytest.raises(ValueError):
        build_tree([1, 2], [1, 3])
    with pytest.raises(ValueError):
        build_tree([1, 1], [1, 1])


def test_hanota_moves_all_discs():
    a = [5, 4, 3, 2, 1]
    b = []
    c = []
    solve_hanota(a, b, c)
    assert a == []
    assert b == []
    assert c == [5, 4, 3, 2, 1]


@pytest.mark.parametrize("n", [1, 2, 7])
def test_hanota_keeps_order(n):
    a = list(range(n, 0, -1))
    b, c = [], []
    solve_hanota(a, b, c)
    assert c == list(range(n, 0, -1))
    assert not a and not b


def test_hanota_empty():
    a, b, c = [], [], []
    solve_hanota(a, b, c)
    assert (a, b, c) == ([], [], [])