"""Exact rational numbers with an explicit simplification step."""

from __future__ import annotations

import math
from functools import total_ordering


@total_ordering
class Fraction:
    """A fraction ``numerator/denominator`` with a positive denominator."""

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        if denominator == 0:
            raise ZeroDivisionError("denominator must not be zero")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        self._num = numerator
        self._den = denominator

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    @staticmethod
    def _coerce(other: object) -> Fraction | None:
        if isinstance(other, Fraction):
            return other
        if isinstance(other, int):
            return Fraction(other)
        return None

    def simplify(self) -> Fraction:
        """Reduce to lowest terms in place and return self."""
        g = math.gcd(self._num, self._den)
        self._num //= g
        self._den //= g
        return self

    def value(self) -> float:
        return self._num / self._den

    def __add__(self, other: object) -> Fraction:
        f = self._coerce(other)
        if f is None:
            return NotImplemented
        return Fraction(self._num * f._den + self._den * f._num, self._den * f._den).simplify()

    __radd__ = __add__

    def __neg__(self) -> Fraction:
        return Fraction(-self._num, self._den)

    def __sub__(self, other: object) -> Fraction:
        f = self._coerce(other)
        if f is None:
            return NotImplemented
        return self + (-f)

    def __rsub__(self, other: object) -> Fraction:
        f = self._coerce(other)
        if f is None:
            return NotImplemented
        return f - self

    def __mul__(self, other: object) -> Fraction:
        f = self._coerce(other)
        if f is None:
            return NotImplemented
        return Fraction(self._num * f._num, self._den * f._den).simplify()

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Fraction:
        f = self._coerce(other)
        if f is None:
            return NotImplemented
        if f._num == 0:
            raise ZeroDivisionError("division by a zero fraction")
        return Fraction(self._num * f._den, self._den * f._num).simplify()

    def __lt__(self, other: object) -> bool:
        f = self._coerce(other)
        if f is None:
            return NotImplemented
        return self._num * f._den < self._den * f._num

    def __eq__(self, other: object) -> bool:
        f = self._coerce(other)
        if f is None:
            return NotImplemented
        return self._num * f._den == self._den * f._num

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        return f"Fraction({self._num}, {self._den})"