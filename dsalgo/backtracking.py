"""Backtracking searches: n-queens, permutations, subset sums and tree paths."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from .nodes import TreeNode


def n_queens(n: int) -> list[list[list[str]]]:
    """Return every placement of n queens on an n-by-n board.

    Each board is a list of rows; "Q" marks a queen and "#" an empty square.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    state = [["#"] * n for _ in range(n)]
    cols = [False] * n
    diags1 = [False] * max(2 * n - 1, 0)
    diags2 = [False] * max(2 * n - 1, 0)
    res: list[list[list[str]]] = []

    def backtrack(row: int) -> None:
        if row == n:
            res.append([list(r) for r in state])
            return
        for col in range(n):
            d1 = row - col + n - 1
            d2 = row + col
            if cols[col] or diags1[d1] or diags2[d2]:
                continue
            state[row][col] = "Q"
            cols[col] = diags1[d1] = diags2[d2] = True
            backtrack(row + 1)
            state[row][col] = "#"
            cols[col] = diags1[d1] = diags2[d2] = False

    backtrack(0)
    return res


def _permutations(choices: list[int], skip_equal: bool) -> list[list[int]]:
    state: list[int] = []
    selected = [False] * len(choices)
    res: list[list[int]] = []

    def backtrack() -> None:
        if len(state) == len(choices):
            res.append(list(state))
            return
        tried: set[int] = set()
        for i, choice in enumerate(choices):
            if selected[i] or (skip_equal and choice in tried):
                continue
            tried.add(choice)
            selected[i] = True
            state.append(choice)
            backtrack()
            selected[i] = False
            state.pop()

    backtrack()
    return res


def permutations_i(nums: Iterable[int]) -> list[list[int]]:
    """Return all permutations of nums, treating every element as distinct."""
    return _permutations(list(nums), skip_equal=False)


def permutations_ii(nums: Iterable[int]) -> list[list[int]]:
    """Return all distinct permutations of nums, which may hold repeats."""
    return _permutations(list(nums), skip_equal=True)


def _require_positive(choices: list[int]) -> None:
    if any(c <= 0 for c in choices):
        raise ValueError("all numbers must be positive")


def subset_sum_i(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return the combinations of nums (each usable any number of times)
    summing to target, without duplicate combinations."""
    choices = sorted(nums)
    _require_positive(choices)
    state: list[int] = []
    res: list[list[int]] = []

    def backtrack(remaining: int, start: int) -> None:
        if remaining == 0:
            res.append(list(state))
            return
        for i in range(start, len(choices)):
            if remaining - choices[i] < 0:
                break
            state.append(choices[i])
            backtrack(remaining - choices[i], i)
            state.pop()

    backtrack(target, 0)
    return res


def subset_sum_i_naive(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return every ordered sequence of nums (with repetition) summing to
    target; the same combination may appear in several orders."""
    choices = list(nums)
    _require_positive(choices)
    state: list[int] = []
    res: list[list[int]] = []

    def backtrack(total: int) -> None:
        if total == target:
            res.append(list(state))
            return
        for choice in choices:
            if total + choice > target:
                continue
            state.append(choice)
            backtrack(total + choice)
            state.pop()

    backtrack(0)
    return res


def subset_sum_ii(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return the combinations of nums (each element used at most once)
    summing to target, without duplicate combinations."""
    choices = sorted(nums)
    state: list[int] = []
    res: list[list[int]] = []

    def backtrack(remaining: int, start: int) -> None:
        if remaining == 0:
            res.append(list(state))
            return
        for i in range(start, len(choices)):
            if remaining - choices[i] < 0:
                break
            if i > start and choices[i] == choices[i - 1]:
                continue
            state.append(choices[i])
            backtrack(remaining - choices[i], i + 1)
            state.pop()

    backtrack(target, 0)
    return res


def find_value_nodes(root: Optional[TreeNode], value: int) -> list[TreeNode]:
    """Return the nodes holding value, in pre-order."""
    res: list[TreeNode] = []

    def pre_order(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        if node.val == value:
            res.append(node)
        pre_order(node.left)
        pre_order(node.right)

    pre_order(root)
    return res


def _paths(root: Optional[TreeNode], value: int, blocked: Optional[int]) -> list[list[TreeNode]]:
    path: list[TreeNode] = []
    res: list[list[TreeNode]] = []

    def pre_order(node: Optional[TreeNode]) -> None:
        if node is None or (blocked is not None and node.val == blocked):
            return
        path.append(node)
        if node.val == value:
            res.append(list(path))
        pre_order(node.left)
        pre_order(node.right)
        path.pop()

    pre_order(root)
    return res


def paths_to_value(root: Optional[TreeNode], value: int) -> list[list[TreeNode]]:
    """Return every root-to-node path ending at a node holding value."""
    return _paths(root, value, None)


def paths_to_value_avoiding(
    root: Optional[TreeNode], value: int, blocked: int
) -> list[list[TreeNode]]:
    """Return root-to-node paths ending at value that pass no node holding blocked."""
    return _paths(root, value, blocked)


def paths_by_template(root: Optional[TreeNode], value: int, blocked: int) -> list[list[TreeNode]]:
    """Same search as paths_to_value_avoiding, written as a generic
    backtracking template over states and choices."""
    res: list[list[TreeNode]] = []

    def is_solution(state: list[TreeNode]) -> bool:
        return bool(state) and state[-1].val == value

    def is_valid(choice: Optional[TreeNode]) -> bool:
        return choice is not None and choice.val != blocked

    def backtrack(state: list[TreeNode], choices: list[Optional[TreeNode]]) -> None:
        if is_solution(state):
            res.append(list(state))
        for choice in choices:
            if not is_valid(choice):
                continue
            state.append(choice)
            backtrack(state, [choice.left, choice.right])
            state.pop()

    backtrack([], [root])
    return res