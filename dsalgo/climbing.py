"""Counting ways up a staircase, and the cheapest way up, several ways."""

from __future__ import annotations

from collections.abc import Sequence


def _require_positive(n: int) -> None:
    if n < 1:
        raise ValueError("n must be at least 1")


def climbing_stairs_backtrack(n: int) -> int:
    """Count the ways to climb n stairs taking 1 or 2 at a time, by backtracking."""
    if n < 0:
        raise ValueError("n must not be negative")
    choices = (1, 2)
    count = 0

    def backtrack(state: int) -> None:
        nonlocal count
        if state == n:
            count += 1
        for choice in choices:
            if state + choice > n:
                continue
            backtrack(state + choice)

    backtrack(0)
    return count


def climbing_stairs_dfs(n: int) -> int:
    """Count the ways to climb n stairs by plain recursive search."""
    _require_positive(n)

    def dfs(i: int) -> int:
        if i in (1, 2):
            return i
        return dfs(i - 1) + dfs(i - 2)

    return dfs(n)


def climbing_stairs_dfs_mem(n: int) -> int:
    """Count the ways to climb n stairs by memoised recursive search."""
    _require_positive(n)
    mem = [-1] * (n + 1)

    def dfs(i: int) -> int:
        if i in (1, 2):
            return i
        if mem[i] != -1:
            return mem[i]
        mem[i] = dfs(i - 1) + dfs(i - 2)
        return mem[i]

    return dfs(n)


def climbing_stairs_dp(n: int) -> int:
    """Count the ways to climb n stairs with a dynamic-programming table."""
    _require_positive(n)
    if n in (1, 2):
        return n
    dp = [0] * (n + 1)
    dp[1], dp[2] = 1, 2
    for i in range(3, n + 1):
        dp[i] = dp[i - 1] + dp[i - 2]
    return dp[n]


def climbing_stairs_dp_comp(n: int) -> int:
    """Count the ways to climb n stairs keeping only the last two results."""
    _require_positive(n)
    if n in (1, 2):
        return n
    a, b = 1, 2
    for _ in range(3, n + 1):
        a, b = b, a + b
    return b


def climbing_stairs_constraint_dp(n: int) -> int:
    """Count the ways to climb n stairs by 1 or 2 steps, never two 1-steps in a row."""
    _require_positive(n)
    if n in (1, 2):
        return 1
    # dp[i][1]: arrived at i with a 1-step; dp[i][2]: arrived with a 2-step.
    dp = [[0, 0, 0] for _ in range(n + 1)]
    dp[1][1], dp[1][2] = 1, 0
    dp[2][1], dp[2][2] = 0, 1
    for i in range(3, n + 1):
        dp[i][1] = dp[i - 1][2]
        dp[i][2] = dp[i - 2][1] + dp[i - 2][2]
    return dp[n][1] + dp[n][2]


def _stairs(cost: Sequence[int]) -> int:
    n = len(cost) - 1
    if n < 1:
        raise ValueError("cost must list the ground and at least one stair")
    return n


def min_cost_climbing_stairs_dp(cost: Sequence[int]) -> int:
    """Return the least total cost to reach the top stair.

    cost[0] is the ground; cost[i] is paid on landing on stair i.
    """
    n = _stairs(cost)
    if n in (1, 2):
        return cost[n]
    dp = [0] * (n + 1)
    dp[1], dp[2] = cost[1], cost[2]
    for i in range(3, n + 1):
        dp[i] = min(dp[i - 1], dp[i - 2]) + cost[i]
    return dp[n]


def min_cost_climbing_stairs_dp_comp(cost: Sequence[int]) -> int:
    """Return the least total cost to reach the top, keeping two results only."""
    n = _stairs(cost)
    if n in (1, 2):
        return cost[n]
    a, b = cost[1], cost[2]
    for i in range(3, n + 1):
        a, b = b, min(a, b) + cost[i]
    return b