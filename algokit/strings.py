"""String algorithms: prefix and Z functions, KMP search, Manacher, suffix arrays."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def prefix_function(pattern: Sequence[Any]) -> list[int]:
    """Return ``pi`` where ``pi[i]`` is the longest proper border of ``pattern[:i + 1]``."""
    pi = [0] * len(pattern)
    k = 0
    for i in range(1, len(pattern)):
        while k and pattern[i] != pattern[k]:
            k = pi[k - 1]
        if pattern[i] == pattern[k]:
            k += 1
        pi[i] = k
    return pi


def kmp_search(text: Sequence[Any], pattern: Sequence[Any]) -> list[int]:
    """Return the 0-based start of every (possibly overlapping) match of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    pi = prefix_function(pattern)
    m = len(pattern)
    matches: list[int] = []
    k = 0
    for i, ch in enumerate(text):
        while k and pattern[k] != ch:
            k = pi[k - 1]
        if pattern[k] == ch:
            k += 1
        if k == m:
            matches.append(i - m + 1)
            k = pi[k - 1]
    return matches


def z_function(s: Sequence[Any]) -> list[int]:
    """Return ``z`` where ``z[i]`` is the longest common prefix of ``s`` and ``s[i:]`` (``z[0] == 0``)."""
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right and z[i - left] < right - i + 1:
            z[i] = z[i - left]
            continue
        length = max(0, right - i + 1)
        while i + length < n and s[length] == s[i + length]:
            length += 1
        z[i] = length
        if i + length - 1 > right:
            left, right = i, i + length - 1
    return z


def manacher(s: Sequence[Any]) -> list[int]:
    """Return palindrome radii over ``s`` with a separator around every item.

    The result has ``2 * len(s) + 1`` entries; entry ``i`` is the length of the
    longest palindrome of ``s`` centred at that position (even indices are gaps
    between items, odd indices are items), so its maximum is the length of the
    longest palindromic substring.
    """
    gap = object()
    t: list[Any] = [gap]
    for ch in s:
        t.append(ch)
        t.append(gap)
    m = len(t)
    radii = [0] * m
    left, right = 0, -1
    for i in range(m):
        k = 0 if i > right else min(right - i, radii[left + right - i])
        while i - k - 1 >= 0 and i + k + 1 < m and t[i - k - 1] == t[i + k + 1]:
            k += 1
        radii[i] = k
        if i + k > right:
            left, right = i - k, i + k
    return radii


def suffix_array(s: Sequence[Any]) -> list[int]:
    """Return the 0-based start positions of the suffixes of ``s`` in sorted order."""
    n = len(s)
    if n == 0:
        return []
    alphabet = {ch: r for r, ch in enumerate(sorted(set(s)))}
    rank = [alphabet[ch] for ch in s]
    sa = list(range(n))
    k = 1
    while True:
        def key(i: int, k: int = k) -> tuple[int, int]:
            return rank[i], rank[i + k] if i + k < n else -1

        sa.sort(key=key)
        new_rank = [0] * n
        for prev, cur in zip(sa, sa[1:]):
            new_rank[cur] = new_rank[prev] + (key(prev) != key(cur))
        rank = new_rank
        if rank[sa[-1]] == n - 1:
            return sa
        k <<= 1


def lcp_array(s: Sequence[Any], sa: Sequence[int]) -> list[int]:
    """Return ``lcp`` where ``lcp[i]`` is the common prefix of suffixes ``sa[i - 1]`` and ``sa[i]``.

    ``lcp[0]`` is 0.
    """
    n = len(s)
    if sorted(sa) != list(range(n)):
        raise ValueError("sa is not a permutation of the suffix positions")
    rank = [0] * n
    for r, i in enumerate(sa):
        rank[i] = r
    lcp = [0] * n
    h = 0
    for i in range(n):
        if rank[i] == 0:
            h = 0
            continue
        j = sa[rank[i] - 1]
        while i + h < n and j + h < n and s[i + h] == s[j + h]:
            h += 1
        lcp[rank[i]] = h
        if h:
            h -= 1
    return lcp