"""Number-theory helpers: sieves, modular arithmetic and a XOR linear basis."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from math import prod


def euler_phi_sieve(n: int) -> list[int]:
    """Return Euler's totient for every integer in ``0..n`` using a linear sieve."""
    if n < 0:
        raise ValueError("n must be non-negative")
    phi = [0] * (n + 1)
    if n >= 1:
        phi[1] = 1
    composite = bytearray(n + 1)
    primes: list[int] = []
    for i in range(2, n + 1):
        if not composite[i]:
            primes.append(i)
            phi[i] = i - 1
        for p in primes:
            if p * i > n:
                break
            composite[p * i] = 1
            if i % p == 0:
                phi[p * i] = phi[i] * p
                break
            phi[p * i] = phi[p] * phi[i]
    return phi


def exgcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` such that ``a*x + b*y == g == gcd(a, b)``."""
    if b == 0:
        return a, 1, 0
    g, x1, y1 = exgcd(b, a % b)
    return g, y1, x1 - (a // b) * y1


def mod_inverse(a: int, p: int) -> int:
    """Return the inverse of ``a`` modulo ``p``; raise ValueError if none exists."""
    g, x, _ = exgcd(a, p)
    if abs(g) != 1:
        raise ValueError(f"{a} has no inverse modulo {p}")
    return x % p


def crt(moduli: Sequence[int], remainders: Sequence[int]) -> int:
    """Solve ``x = remainders[i] (mod moduli[i])`` for pairwise coprime moduli."""
    if len(moduli) != len(remainders):
        raise ValueError("moduli and remainders must have the same length")
    total = prod(moduli)
    x = 0
    for modulus, remainder in zip(moduli, remainders):
        r = total // modulus
        x += remainder * r * mod_inverse(r, modulus) % total
    return x % total


def power_mod(a: int, b: int, mod: int) -> int:
    """Return ``a ** b % mod`` by binary exponentiation."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    if mod <= 0:
        raise ValueError("modulus must be positive")
    base, result = a % mod, 1
    while b:
        if b & 1:
            result = result * base % mod
        base = base * base % mod
        b >>= 1
    return result % mod


def _factorials(p: int) -> list[int]:
    fac = [1] * max(p, 2)
    for i in range(2, p):
        fac[i] = fac[i - 1] * i % p
    return fac


def lucas(m: int, n: int, p: int) -> int:
    """Return the binomial coefficient C(m, n) modulo the prime ``p``."""
    if m < 0 or n < 0:
        raise ValueError("arguments must be non-negative")
    if p < 2:
        raise ValueError("p must be a prime")
    fac = _factorials(p)
    result = 1 % p
    while n:
        mi, ni = m % p, n % p
        if mi < ni:
            return 0
        term = fac[mi] * pow(fac[ni], p - 2, p) % p * pow(fac[mi - ni], p - 2, p) % p
        result = result * term % p
        m //= p
        n //= p
    return result


def xor_prefix(x: int) -> int:
    """Return ``0 ^ 1 ^ ... ^ x`` (0 for negative ``x``)."""
    if x < 0:
        return 0
    return (x, 1, x + 1, 0)[x % 4]


def divisor_blocks(n: int) -> Iterator[tuple[int, int, int]]:
    """Yield ``(l, r, v)`` blocks where ``n // i == v`` for every ``l <= i <= r``."""
    left = 1
    while left <= n:
        value = n // left
        right = n // value
        yield left, right, value
        left = right + 1


class LinearBasis:
    """Reduced XOR basis of non-negative integers."""

    def __init__(self, values: Sequence[int] = ()) -> None:
        self._basis: list[int] = []
        for value in values:
            self.insert(value)

    def insert(self, x: int) -> bool:
        """Add ``x`` to the span; return True if it enlarged the basis."""
        for c in self._basis:
            x = min(x, c ^ x)
        self._basis = [min(c, c ^ x) for c in self._basis]
        if x:
            self._basis.append(x)
            return True
        return False

    def max_xor(self) -> int:
        """Return the largest XOR obtainable from the inserted values."""
        result = 0
        for c in self._basis:
            result ^= c
        return result

    def __len__(self) -> int:
        return len(self._basis)

    def __iter__(self) -> Iterator[int]:
        return iter(self._basis)