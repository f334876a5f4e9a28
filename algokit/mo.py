"""Offline distinct-value counting over ranges with point assignments (Mo's algorithm with time)."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict
from collections.abc import Hashable, Iterable, Sequence


def distinct_counts(
    values: Sequence[Hashable], operations: Iterable[tuple[str, int, object]]
) -> list[int]:
    """Answer range queries interleaved with point assignments.

    Each operation is ``("Q", left, right)`` asking how many distinct values lie in
    positions ``left..right`` (0-based, inclusive), or ``("R", pos, value)``
    assigning ``value`` to ``pos``. Returns the query answers in order.
    """
    arr = list(values)
    n = len(arr)
    queries: list[tuple[int, int, int, int]] = []
    changes: list[list] = []
    for op in operations:
        kind, a, b = op
        if kind == "Q":
            if not 0 <= a <= b < n:
                raise IndexError(f"invalid range [{a}, {b}]")
            queries.append((a, b, len(changes), len(queries)))
        elif kind == "R":
            if not 0 <= a < n:
                raise IndexError(f"position {a} out of range")
            changes.append([a, b])
        else:
            raise ValueError(f"unknown operation {kind!r}")

    block = max(1, int(n ** (2 / 3)))

    def order(q: tuple[int, int, int, int]) -> tuple[int, int, int]:
        lb, rb = q[0] // block, q[1] // block
        return lb, rb if lb % 2 else -rb, q[2]

    counts: defaultdict[Hashable, int] = defaultdict(int)
    distinct = 0

    def add(value: Hashable) -> None:
        nonlocal distinct
        counts[value] += 1
        if counts[value] == 1:
            distinct += 1

    def remove(value: Hashable) -> None:
        nonlocal distinct
        counts[value] -= 1
        if counts[value] == 0:
            distinct -= 1

    answers = [0] * len(queries)
    lo, hi, time = 0, -1, 0

    def toggle(change: list, left: int, right: int) -> None:
        pos, value = change
        if left <= pos <= right:
            remove(arr[pos])
            add(value)
        change[1], arr[pos] = arr[pos], value

    for left, right, at, index in sorted(queries, key=order):
        while lo > left:
            lo -= 1
            add(arr[lo])
        while hi < right:
            hi += 1
            add(arr[hi])
        while lo < left:
            remove(arr[lo])
            lo += 1
        while hi > right:
            remove(arr[hi])
            hi -= 1
        while time < at:
            toggle(changes[time], lo, hi)
            time += 1
        while time > at:
            time -= 1
            toggle(changes[time], lo, hi)
        answers[index] = distinct
    return answers


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n m``, ``n`` values and ``m`` lines ``Q l r`` / ``R pos value`` (1-based) from stdin."""
    parser = argparse.ArgumentParser(description="Count distinct values over ranges with updates.")
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    n, m = int(tokens[0]), int(tokens[1])
    values = [int(t) for t in tokens[2 : 2 + n]]
    ops = []
    pos = 2 + n
    for _ in range(m):
        kind, a, b = tokens[pos], int(tokens[pos + 1]), int(tokens[pos + 2])
        pos += 3
        ops.append((kind, a - 1, b - 1) if kind == "Q" else (kind, a - 1, b))
    for answer in distinct_counts(values, ops):
        print(answer)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())