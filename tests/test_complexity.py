import math

import pytest

from dsalgo import complexity as cx
from dsalgo.binary_tree import count, height


@pytest.mark.parametrize("n", [1, 2, 5, 10, 37])
def test_sum_functions_agree(n):
    expected = cx.for_loop(n)
    assert cx.while_loop(n) == expected
    assert cx.recur(n) == expected
    assert cx.for_loop_recur(n) == expected
    assert cx.tail_recur(n, 0) == expected
    assert expected == n * (n + 1) // 2


def test_tail_recur_starts_from_res():
    assert cx.tail_recur(4, 100) == 100 + cx.for_loop(4)


def test_sums_of_zero():
    assert cx.for_loop(0) == 0
    assert cx.while_loop(0) == 0
    assert cx.for_loop_recur(0) == 0
    assert cx.while_loop_ii(0) == 0


def test_while_loop_ii_takes_one_then_four():
    assert cx.while_loop_ii(1) == 1
    assert cx.while_loop_ii(5) == 5


def test_nested_for_loop_format():
    assert cx.nested_for_loop(2) == "(1, 1), (1, 2), (2, 1), (2, 2), "
    assert cx.nested_for_loop(0) == ""


def test_nested_for_loop_pair_count():
    assert cx.nested_for_loop(4).count("(") == 16


def test_fib_start_and_recurrence():
    assert cx.fib(1) == 0
    assert cx.fib(2) == 1
    for n in range(3, 15):
        assert cx.fib(n) == cx.fib(n - 1) + cx.fib(n - 2)


@pytest.mark.parametrize("func", [cx.recur, cx.fib, cx.exp_recur])
def test_positive_argument_required(func):
    with pytest.raises(ValueError):
        func(0)


def test_negative_arguments_rejected():
    with pytest.raises(ValueError):
        cx.tail_recur(-1, 0)
    with pytest.raises(ValueError):
        cx.factorial_recur(-1)
    with pytest.raises(ValueError):
        cx.build_full_tree(-1)


@pytest.mark.parametrize("n", [1, 3, 5])
def test_build_full_tree_is_perfect(n):
    root = cx.build_full_tree(n)
    assert height(root) == n
    assert count(root) == 2**n - 1


def test_build_full_tree_zero_is_empty():
    assert cx.build_full_tree(0) is None


def test_constant_ignores_n():
    assert cx.constant(1) == 100000
    assert cx.constant(50) == 100000


@pytest.mark.parametrize("n", [0, 1, 8, 20])
def test_linear_and_quadratic_counts(n):
    assert cx.linear(n) == n
    assert cx.array_traversal([0] * n) == n
    assert cx.quadratic(n) == n * n


def test_bubble_sort_count_sorts_and_counts_swaps():
    nums = [8, 7, 6, 5, 4, 3, 2, 1]
    result = cx.bubble_sort_count(nums)
    assert nums == sorted(nums)
    n = len(nums)
    assert result == 3 * n * (n - 1) // 2


def test_bubble_sort_count_sorted_input_costs_nothing():
    nums = [1, 2, 3, 4]
    assert cx.bubble_sort_count(nums) == 0
    assert nums == [1, 2, 3, 4]


@pytest.mark.parametrize("n", [1, 4, 8])
def test_exponential_counts_agree(n):
    assert cx.exponential(n) == cx.exp_recur(n)
    assert cx.exponential(n) == 2**n - 1


@pytest.mark.parametrize("k", [0, 1, 3, 6])
def test_logarithmic_counts(k):
    n = float(2**k)
    assert cx.logarithmic(n) == k
    assert cx.log_recur(n) == k


def test_linear_log_recur_base_and_growth():
    assert cx.linear_log_recur(1.0) == 1
    values = [cx.linear_log_recur(float(2**k)) for k in range(6)]
    assert values == sorted(values)
    assert cx.linear_log_recur(8.0) > cx.linear(8)


@pytest.mark.parametrize("n", [0, 1, 4, 6])
def test_factorial_recur(n):
    assert cx.factorial_recur(n) == math.factorial(n)


def test_random_numbers_is_permutation():
    nums = cx.random_numbers(100)
    assert sorted(nums) == list(range(1, 101))


def test_find_one_locates_one():
    nums = cx.random_numbers(50)
    index = cx.find_one(nums)
    assert nums[index] == 1


def test_find_one_missing():
    assert cx.find_one([2, 3, 4]) == -1
    assert cx.find_one([]) == -1