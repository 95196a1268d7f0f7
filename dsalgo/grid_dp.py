"""Edit distance between strings and minimum path sum through a grid."""

from __future__ import annotations

import math
from collections.abc import Sequence


def edit_distance_dfs(s: str, t: str) -> int:
    """Return the fewest inserts, deletes and replaces turning s into t, by search."""

    def dfs(i: int, j: int) -> int:
        if i == 0:
            return j
        if j == 0:
            return i
        if s[i - 1] == t[j - 1]:
            return dfs(i - 1, j - 1)
        return min(dfs(i, j - 1), dfs(i - 1, j), dfs(i - 1, j - 1)) + 1

    return dfs(len(s), len(t))


def edit_distance_dfs_mem(s: str, t: str) -> int:
    """Return the edit distance from s to t by memoised search."""
    mem = [[-1] * (len(t) + 1) for _ in range(len(s) + 1)]

    def dfs(i: int, j: int) -> int:
        if i == 0:
            return j
        if j == 0:
            return i
        if mem[i][j] != -1:
            return mem[i][j]
        if s[i - 1] == t[j - 1]:
            return dfs(i - 1, j - 1)
        mem[i][j] = min(dfs(i, j - 1), dfs(i - 1, j), dfs(i - 1, j - 1)) + 1
        return mem[i][j]

    return dfs(len(s), len(t))


def edit_distance_dp(s: str, t: str) -> int:
    """Return the edit distance from s to t with a full table."""
    n, m = len(s), len(t)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        dp[i][0] = i
    for j in range(1, m + 1):
        dp[0][j] = j
    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if s[i - 1] == t[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = min(dp[i][j - 1], dp[i - 1][j], dp[i - 1][j - 1]) + 1
    return dp[n][m]


def edit_distance_dp_comp(s: str, t: str) -> int:
    """Return the edit distance from s to t keeping a single row."""
    m = len(t)
    dp = list(range(m + 1))
    for i, sc in enumerate(s, start=1):
        leftup = dp[0]
        dp[0] = i
        for j in range(1, m + 1):
            temp = dp[j]
            if sc == t[j - 1]:
                dp[j] = leftup
            else:
                dp[j] = min(dp[j - 1], dp[j], leftup) + 1
            leftup = temp
    return dp[m]


def _check_grid(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")
    return len(grid), width


def min_path_sum_dfs(grid: Sequence[Sequence[int]]) -> int:
    """Return the least sum on a path from top-left to bottom-right moving
    only right or down, by exhaustive search."""
    n, m = _check_grid(grid)

    def dfs(i: int, j: int) -> float:
        if i == 0 and j == 0:
            return grid[0][0]
        if i < 0 or j < 0:
            return math.inf
        return min(dfs(i - 1, j), dfs(i, j - 1)) + grid[i][j]

    return int(dfs(n - 1, m - 1))


def min_path_sum_dfs_mem(grid: Sequence[Sequence[int]]) -> int:
    """Return the least path sum by memoised search."""
    n, m = _check_grid(grid)
    mem: list[list[float | None]] = [[None] * m for _ in range(n)]

    def dfs(i: int, j: int) -> float:
        if i == 0 and j == 0:
            return grid[0][0]
        if i < 0 or j < 0:
            return math.inf
        cached = mem[i][j]
        if cached is not None:
            return cached
        mem[i][j] = min(dfs(i - 1, j), dfs(i, j - 1)) + grid[i][j]
        return mem[i][j]

    return int(dfs(n - 1, m - 1))


def min_path_sum_dp(grid: Sequence[Sequence[int]]) -> int:
    """Return the least path sum with a full table."""
    n, m = _check_grid(grid)
    dp = [[0] * m for _ in range(n)]
    dp[0][0] = grid[0][0]
    for j in range(1, m):
        dp[0][j] = dp[0][j - 1] + grid[0][j]
    for i in range(1, n):
        dp[i][0] = dp[i - 1][0] + grid[i][0]
    for i in range(1, n):
        for j in range(1, m):
            dp[i][j] = min(dp[i][j - 1], dp[i - 1][j]) + grid[i][j]
    return dp[n - 1][m - 1]


def min_path_sum_dp_comp(grid: Sequence[Sequence[int]]) -> int:
    """Return the least path sum keeping a single row."""
    n, m = _check_grid(grid)
    dp = [0] * m
    dp[0] = grid[0][0]
    for j in range(1, m):
        dp[j] = dp[j - 1] + grid[0][j]
    for i in range(1, n):
        dp[0] += grid[i][0]
        for j in range(1, m):
            dp[j] = min(dp[j - 1], dp[j]) + grid[i][j]
    return dp[m - 1]