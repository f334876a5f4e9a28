"""Polynomial multiplication via the fast Fourier transform."""

from __future__ import annotations

import cmath
import math
import sys
from collections.abc import Sequence


def fft(values: Sequence[complex], invert: bool = False) -> list[complex]:
    """Return the discrete Fourier transform of ``values`` (length a power of two)."""
    a = [complex(v) for v in values]
    n = len(a)
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a power of two")
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j |= bit
        if i < j:
            a[i], a[j] = a[j], a[i]
    sign = -1 if invert else 1
    length = 2
    while length <= n:
        wn = cmath.exp(sign * 2j * math.pi / length)
        half = length // 2
        for start in range(0, n, length):
            w = 1 + 0j
            for k in range(start, start + half):
                u, t = a[k], w * a[k + half]
                a[k], a[k + half] = u + t, u - t
                w *= wn
        length <<= 1
    if invert:
        a = [v / n for v in a]
    return a


def multiply(a: Sequence[float], b: Sequence[float]) -> list[int]:
    """Return the integer coefficients of the product of two polynomials."""
    if not a or not b:
        return []
    size = len(a) + len(b) - 1
    lim = 1
    while lim < size:
        lim <<= 1
    fa = fft(list(a) + [0] * (lim - len(a)))
    fb = fft(list(b) + [0] * (lim - len(b)))
    product = fft([x * y for x, y in zip(fa, fb)], invert=True)
    return [math.floor(v.real + 0.5) for v in product[:size]]


def main(argv: Sequence[str] | None = None) -> int:
    """Read degrees and coefficients from stdin and print the product's coefficients."""
    tokens = sys.stdin.read().split()
    n, m = int(tokens[0]), int(tokens[1])
    coefficients = [float(t) for t in tokens[2:]]
    f = coefficients[: n + 1]
    g = coefficients[n + 1 : n + m + 2]
    print(" ".join(str(c) for c in multiply(f, g)))
    return 0