import pytest

from dsalgo.array_binary_tree import ArrayBinaryTree

SOURCE_ARRAY = [1, 2, 3, 4, None, 6, 7, 8, 9, None, None, 12, None, None, 15]
BST_ARRAY = [4, 2, 6, 1, 3, 5, 7]


@pytest.fixture
def abt():
    return ArrayBinaryTree(SOURCE_ARRAY)


def test_level_order_is_array(abt):
    assert abt.level_order() == SOURCE_ARRAY
    assert len(abt) == len(SOURCE_ARRAY)


def test_index_relations(abt):
    for i in range(len(abt)):
        assert abt.parent(abt.left(i)) == i
        assert abt.parent(abt.right(i)) == i
        assert abt.right(i) == abt.left(i) + 1


def test_val(abt):
    assert abt.val(1) == SOURCE_ARRAY[1]
    assert abt.val(4) is None
    assert abt.val(len(SOURCE_ARRAY)) is None
    assert abt.val(-1) is None


def test_root_parent(abt):
    assert abt.val(abt.parent(0)) is None


def test_pre_order_source_example(abt):
    assert abt.pre_order() == [1, 2, 4, 8, 9, 3, 6, 12, 7, 15]


def test_traversals_cover_same_nodes(abt):
    present = sorted(v for v in SOURCE_ARRAY if v is not None)
    assert sorted(abt.pre_order()) == present
    assert sorted(abt.in_order()) == present
    assert sorted(abt.post_order()) == present
    assert abt.post_order()[-1] == SOURCE_ARRAY[0]


def test_in_order_of_search_tree_is_sorted():
    tree = ArrayBinaryTree(BST_ARRAY)
    assert tree.in_order() == sorted(BST_ARRAY)
    assert tree.pre_order()[0] == BST_ARRAY[0]


@pytest.mark.parametrize("values", [[], [None]])
def test_empty(values):
    tree = ArrayBinaryTree(values)
    assert tree.pre_order() == []
    assert tree.in_order() == []
    assert tree.post_order() == []