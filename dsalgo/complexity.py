"""Small functions that show how running time and memory grow with input size."""

from __future__ import annotations

import math
import random
from typing import Optional

from .nodes import TreeNode


def for_loop(n: int) -> int:
    """Return 1 + 2 + ... + n using a for loop."""
    res = 0
    for i in range(1, n + 1):
        res += i
    return res


def while_loop(n: int) -> int:
    """Return 1 + 2 + ... + n using a while loop."""
    res = 0
    i = 1
    while i <= n:
        res += i
        i += 1
    return res


def while_loop_ii(n: int) -> int:
    """Sum 1, 4, 10, ...: after each step i is incremented and then doubled."""
    res = 0
    i = 1
    while i <= n:
        res += i
        i += 1
        i *= 2
    return res


def nested_for_loop(n: int) -> str:
    """Return every pair (i, j) with 1 <= i, j <= n, each followed by ", "."""
    return "".join(
        f"({i}, {j}), " for i in range(1, n + 1) for j in range(1, n + 1)
    )


def _require_positive(n: int) -> None:
    if n < 1:
        raise ValueError("n must be at least 1")


def recur(n: int) -> int:
    """Return 1 + 2 + ... + n by recursion."""
    _require_positive(n)
    if n == 1:
        return 1
    return n + recur(n - 1)


def for_loop_recur(n: int) -> int:
    """Return 1 + 2 + ... + n, simulating recursion with an explicit stack."""
    stack = list(range(n, 0, -1))
    res = 0
    while stack:
        res += stack.pop()
    return res


def tail_recur(n: int, res: int = 0) -> int:
    """Return res + 1 + 2 + ... + n by tail recursion."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return res
    return tail_recur(n - 1, res + n)


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(1) = 0 and fib(2) = 1."""
    _require_positive(n)
    if n in (1, 2):
        return n - 1
    return fib(n - 1) + fib(n - 2)


def build_full_tree(n: int) -> Optional[TreeNode]:
    """Build a perfect binary tree of n levels whose nodes all hold 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return None
    root = TreeNode(0)
    root.left = build_full_tree(n - 1)
    root.right = build_full_tree(n - 1)
    for child in (root.left, root.right):
        if child is not None:
            child.parent = root
    return root


def constant(n: int) -> int:
    """Count a fixed 100000 operations, whatever n is."""
    count = 0
    for _ in range(100000):
        count += 1
    return count


def linear(n: int) -> int:
    """Count n operations."""
    count = 0
    for _ in range(n):
        count += 1
    return count


def array_traversal(nums: list[int]) -> int:
    """Count one operation per element of nums."""
    count = 0
    for _ in nums:
        count += 1
    return count


def quadratic(n: int) -> int:
    """Count n * n operations with two nested loops."""
    count = 0
    for _ in range(n):
        for _ in range(n):
            count += 1
    return count


def bubble_sort_count(nums: list[int]) -> int:
    """Bubble-sort nums in place and count three operations per swap."""
    count = 0
    for i in range(len(nums) - 1, 0, -1):
        for j in range(i):
            if nums[j] > nums[j + 1]:
                nums[j], nums[j + 1] = nums[j + 1], nums[j]
                count += 3
    return count


def exponential(n: int) -> int:
    """Count 1 + 2 + 4 + ... + 2^(n-1) operations with loops."""
    count = 0
    base = 1
    for _ in range(n):
        for _ in range(base):
            count += 1
        base *= 2
    return count


def exp_recur(n: int) -> int:
    """Count the calls of a recursion that splits in two at each level."""
    _require_positive(n)
    if n == 1:
        return 1
    return exp_recur(n - 1) + exp_recur(n - 1) + 1


def logarithmic(n: float) -> int:
    """Count how many times n can be halved while it is above 1."""
    count = 0
    while n > 1:
        n = n / 2
        count += 1
    return count


def log_recur(n: float) -> int:
    """Count halvings of n down to at most 1, by recursion."""
    if n <= 1:
        return 0
    return log_recur(n / 2) + 1


def linear_log_recur(n: float) -> int:
    """Count the operations of a halving recursion doing linear work per call."""
    if n <= 1:
        return 1
    count = linear_log_recur(n / 2) + linear_log_recur(n / 2)
    for _ in range(math.ceil(n)):
        count += 1
    return count


def factorial_recur(n: int) -> int:
    """Count the leaves of a recursion that splits into n branches at level n."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 1
    count = 0
    for _ in range(n):
        count += factorial_recur(n - 1)
    return count


def random_numbers(n: int) -> list[int]:
    """Return the numbers 1..n in a random order."""
    nums = list(range(1, n + 1))
    random.shuffle(nums)
    return nums


def find_one(nums: list[int]) -> int:
    """Return the index of the number 1 in nums, or -1."""
    for i, num in enumerate(nums):
        if num == 1:
            return i
    return -1