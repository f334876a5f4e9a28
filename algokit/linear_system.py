"""Gauss-Jordan elimination for square linear systems."""

from __future__ import annotations

import sys
from collections.abc import Sequence

EPS = 1e-8


class NoSolutionError(ValueError):
    """The system is inconsistent."""


class InfiniteSolutionsError(ValueError):
    """The system has infinitely many solutions."""


def solve_linear_system(augmented: Sequence[Sequence[float]]) -> list[float]:
    """Solve an ``n x (n+1)`` augmented system and return the unique solution."""
    a = [[float(v) for v in row] for row in augmented]
    n = len(a)
    if any(len(row) != n + 1 for row in a):
        raise ValueError("augmented matrix must be n x (n+1)")
    cur = 0
    for j in range(n + 1):
        if cur == n:
            break
        pivot = next((i for i in range(cur, n) if abs(a[i][j]) > EPS), None)
        if pivot is None:
            continue
        a[cur], a[pivot] = a[pivot], a[cur]
        p = a[cur][j]
        a[cur] = [v / p for v in a[cur]]
        for i, row in enumerate(a):
            factor = row[j]
            if i != cur and factor:
                a[i] = [v - factor * c for v, c in zip(row, a[cur])]
        cur += 1
    rank = sum(any(abs(v) > EPS for v in row[:n]) for row in a)
    augmented_rank = sum(any(abs(v) > EPS for v in row) for row in a)
    if rank != augmented_rank:
        raise NoSolutionError("the system has no solution")
    if rank < n:
        raise InfiniteSolutionsError("the system has infinitely many solutions")
    return [row[n] for row in a]


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n`` and an augmented matrix from stdin and print the solution."""
    tokens = sys.stdin.read().split()
    n = int(tokens[0])
    values = [float(t) for t in tokens[1 : 1 + n * (n + 1)]]
    rows = [values[i * (n + 1) : (i + 1) * (n + 1)] for i in range(n)]
    try:
        solution = solve_linear_system(rows)
    except NoSolutionError:
        sys.stdout.write("-1")
        return 0
    except InfiniteSolutionsError:
        sys.stdout.write("0")
        return 0
    for i, x in enumerate(solution, start=1):
        print(f"x{i}={x:.2f}")
    return 0