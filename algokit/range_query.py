"""Static and point-update range query structures (0-based, inclusive bounds)."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def _check_range(left: int, right: int, n: int) -> None:
    if not 0 <= left <= right < n:
        raise IndexError(f"invalid range [{left}, {right}] for length {n}")


class SegmentTree:
    """Immutable segment tree combining values with an associative function."""

    def __init__(self, values: Iterable[Any], combine: Callable[[Any, Any], Any]) -> None:
        self._values = list(values)
        self._n = len(self._values)
        if not self._n:
            raise ValueError("values must not be empty")
        self._combine = combine
        self._data: list[Any] = [None] * (4 * self._n)
        self._build(0, self._n - 1, 1)

    def _build(self, lo: int, hi: int, node: int) -> None:
        if lo == hi:
            self._data[node] = self._values[lo]
            return
        mid = (lo + hi) // 2
        self._build(lo, mid, 2 * node)
        self._build(mid + 1, hi, 2 * node + 1)
        self._data[node] = self._combine(self._data[2 * node], self._data[2 * node + 1])

    def query(self, left: int, right: int) -> Any:
        """Combine the values at positions ``left..right``."""
        _check_range(left, right, self._n)
        return self._query(left, right, 0, self._n - 1, 1)

    def _query(self, left: int, right: int, lo: int, hi: int, node: int) -> Any:
        if left <= lo and hi <= right:
            return self._data[node]
        mid = (lo + hi) // 2
        if right <= mid:
            return self._query(left, right, lo, mid, 2 * node)
        if left > mid:
            return self._query(left, right, mid + 1, hi, 2 * node + 1)
        return self._combine(
            self._query(left, right, lo, mid, 2 * node),
            self._query(left, right, mid + 1, hi, 2 * node + 1),
        )

    def __len__(self) -> int:
        return self._n


class ZkwTree:
    """Bottom-up segment tree of sums with point additions."""

    def __init__(self, values: Iterable[int]) -> None:
        vals = list(values)
        self._n = len(vals)
        m = 1
        while m < self._n + 2:
            m <<= 1
        self._m = m
        self._sum = [0] * (2 * m)
        for i, v in enumerate(vals):
            self._sum[m + 1 + i] = v
        for i in range(m - 1, 0, -1):
            self._sum[i] = self._sum[2 * i] + self._sum[2 * i + 1]

    def modify(self, target: int, delta: int) -> None:
        """Add ``delta`` to the value at ``target``."""
        if not 0 <= target < self._n:
            raise IndexError(f"index {target} out of range")
        i = target + self._m + 1
        while i:
            self._sum[i] += delta
            i >>= 1

    def query(self, left: int, right: int) -> int:
        """Return the sum of positions ``left..right``."""
        _check_range(left, right, self._n)
        lo, hi = left + self._m, right + self._m + 2
        result = 0
        while lo ^ hi ^ 1:
            if not lo & 1:
                result += self._sum[lo ^ 1]
            if hi & 1:
                result += self._sum[hi ^ 1]
            lo >>= 1
            hi >>= 1
        return result

    def __len__(self) -> int:
        return self._n


class SparseTable:
    """Static table for idempotent range queries such as max or min."""

    def __init__(self, values: Iterable[Any], combine: Callable[[Any, Any], Any] = max) -> None:
        base = list(values)
        if not base:
            raise ValueError("values must not be empty")
        self._n = len(base)
        self._combine = combine
        self._table = [base]
        j = 1
        while (1 << j) <= self._n:
            prev, half = self._table[-1], 1 << (j - 1)
            self._table.append(
                [combine(prev[i], prev[i + half]) for i in range(self._n - (1 << j) + 1)]
            )
            j += 1

    def query(self, left: int, right: int) -> Any:
        """Combine the values at positions ``left..right``."""
        _check_range(left, right, self._n)
        k = (right - left + 1).bit_length() - 1
        row = self._table[k]
        return self._combine(row[left], row[right - (1 << k) + 1])

    def __len__(self) -> int:
        return self._n