"""Substring search by brute force and by Knuth-Morris-Pratt.

Positions are 1-based: start 1 searches from the first character, and a
match is reported at the 1-based position where it begins.
"""

from __future__ import annotations


def _check_start(text: str, start: int) -> None:
    if not 1 <= start <= len(text) + 1:
        raise IndexError("start position out of range")


def index_bf(text: str, pattern: str, start: int = 1) -> int:
    """Return the 1-based position of pattern in text from start, or -1."""
    _check_start(text, start)
    size = len(pattern)
    for pos in range(start, len(text) - size + 2):
        if text[pos - 1:pos - 1 + size] == pattern:
            return pos
    return -1


def kmp_next(pattern: str) -> list[int]:
    """Return the KMP next array: next[0] is -1, next[j] is the length of
    the longest proper prefix of pattern[:j] that is also its suffix."""
    m = len(pattern)
    if m == 0:
        return []
    nxt = [0] * m
    nxt[0] = -1
    i, j = 0, -1
    while i < m - 1:
        if j == -1 or pattern[i] == pattern[j]:
            i += 1
            j += 1
            nxt[i] = j
        else:
            j = nxt[j]
    return nxt


def index_kmp(text: str, pattern: str, start: int = 1) -> int:
    """Return the 1-based position of pattern in text from start, or -1."""
    _check_start(text, start)
    nxt = kmp_next(pattern)
    n, m = len(text), len(pattern)
    i, j = start - 1, 0
    while i < n and j < m:
        if j == -1 or text[i] == pattern[j]:
            i += 1
            j += 1
        else:
            j = nxt[j]
    return i - m + 1 if j == m else -1