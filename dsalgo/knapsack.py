"""0-1 and unbounded knapsack, and the two coin-change problems."""

from __future__ import annotations

from collections.abc import Sequence


def _check_items(wgt: Sequence[int], val: Sequence[int], cap: int) -> None:
    if len(wgt) != len(val):
        raise ValueError("weights and values must have the same length")
    if cap < 0:
        raise ValueError("capacity must not be negative")
    if any(w < 0 for w in wgt):
        raise ValueError("weights must not be negative")


def _check_coins(coins: Sequence[int], amt: int) -> None:
    if amt < 0:
        raise ValueError("amount must not be negative")
    if any(c <= 0 for c in coins):
        raise ValueError("coins must be positive")


def knapsack_dfs(wgt: Sequence[int], val: Sequence[int], cap: int) -> int:
    """Return the best 0-1 knapsack value by exhaustive search."""
    _check_items(wgt, val, cap)

    def dfs(i: int, c: int) -> int:
        if i == 0 or c == 0:
            return 0
        if wgt[i - 1] > c:
            return dfs(i - 1, c)
        return max(dfs(i - 1, c), dfs(i - 1, c - wgt[i - 1]) + val[i - 1])

    return dfs(len(wgt), cap)


def knapsack_dfs_mem(wgt: Sequence[int], val: Sequence[int], cap: int) -> int:
    """Return the best 0-1 knapsack value by memoised search."""
    _check_items(wgt, val, cap)
    mem = [[-1] * (cap + 1) for _ in range(len(wgt) + 1)]

    def dfs(i: int, c: int) -> int:
        if i == 0 or c == 0:
            return 0
        if mem[i][c] != -1:
            return mem[i][c]
        if wgt[i - 1] > c:
            return dfs(i - 1, c)
        mem[i][c] = max(dfs(i - 1, c), dfs(i - 1, c - wgt[i - 1]) + val[i - 1])
        return mem[i][c]

    return dfs(len(wgt), cap)


def knapsack_dp(wgt: Sequence[int], val: Sequence[int], cap: int) -> int:
    """Return the best 0-1 knapsack value with a full table."""
    _check_items(wgt, val, cap)
    n = len(wgt)
    dp = [[0] * (cap + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        for c in range(1, cap + 1):
            if wgt[i - 1] > c:
                dp[i][c] = dp[i - 1][c]
            else:
                dp[i][c] = max(dp[i - 1][c], dp[i - 1][c - wgt[i - 1]] + val[i - 1])
    return dp[n][cap]


def knapsack_dp_comp(wgt: Sequence[int], val: Sequence[int], cap: int) -> int:
    """Return the best 0-1 knapsack value with a single row, filled right to left."""
    _check_items(wgt, val, cap)
    dp = [0] * (cap + 1)
    for w, v in zip(wgt, val):
        for c in range(cap, 0, -1):
            if w <= c:
                dp[c] = max(dp[c], dp[c - w] + v)
    return dp[cap]


def unbounded_knapsack_dp(wgt: Sequence[int], val: Sequence[int], cap: int) -> int:
    """Return the best knapsack value when every item may be taken any number of times."""
    _check_items(wgt, val, cap)
    n = len(wgt)
    dp = [[0] * (cap + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        for c in range(1, cap + 1):
            if wgt[i - 1] > c:
                dp[i][c] = dp[i - 1][c]
            else:
                dp[i][c] = max(dp[i - 1][c], dp[i][c - wgt[i - 1]] + val[i - 1])
    return dp[n][cap]


def unbounded_knapsack_dp_comp(wgt: Sequence[int], val: Sequence[int], cap: int) -> int:
    """Return the unbounded knapsack value with a single row, filled left to right."""
    _check_items(wgt, val, cap)
    dp = [0] * (cap + 1)
    for w, v in zip(wgt, val):
        for c in range(1, cap + 1):
            if w <= c:
                dp[c] = max(dp[c], dp[c - w] + v)
    return dp[cap]


def coin_change_dp(coins: Sequence[int], amt: int) -> int:
    """Return the fewest coins that make amt, or -1 if it cannot be made."""
    _check_coins(coins, amt)
    n = len(coins)
    unreachable = amt + 1
    dp = [[0] * (amt + 1) for _ in range(n + 1)]
    for a in range(1, amt + 1):
        dp[0][a] = unreachable
    for i in range(1, n + 1):
        coin = coins[i - 1]
        for a in range(1, amt + 1):
            if coin > a:
                dp[i][a] = dp[i - 1][a]
            else:
                dp[i][a] = min(dp[i - 1][a], dp[i][a - coin] + 1)
    return dp[n][amt] if dp[n][amt] != unreachable else -1


def coin_change_dp_comp(coins: Sequence[int], amt: int) -> int:
    """Return the fewest coins that make amt using a single row, or -1."""
    _check_coins(coins, amt)
    unreachable = amt + 1
    dp = [unreachable] * (amt + 1)
    dp[0] = 0
    for coin in coins:
        for a in range(coin, amt + 1):
            dp[a] = min(dp[a], dp[a - coin] + 1)
    return dp[amt] if dp[amt] != unreachable else -1


def coin_change_ii_dp(coins: Sequence[int], amt: int) -> int:
    """Return the number of coin combinations that make amt."""
    _check_coins(coins, amt)
    n = len(coins)
    dp = [[0] * (amt + 1) for _ in range(n + 1)]
    for row in dp:
        row[0] = 1
    for i in range(1, n + 1):
        coin = coins[i - 1]
        for a in range(1, amt + 1):
            if coin > a:
                dp[i][a] = dp[i - 1][a]
            else:
                dp[i][a] = dp[i - 1][a] + dp[i][a - coin]
    return dp[n][amt]


def coin_change_ii_dp_comp(coins: Sequence[int], amt: int) -> int:
    """Return the number of coin combinations that make amt using a single row."""
    _check_coins(coins, amt)
    dp = [0] * (amt + 1)
    dp[0] = 1
    for coin in coins:
        for a in range(coin, amt + 1):
            dp[a] += dp[a - coin]
    return dp[amt]