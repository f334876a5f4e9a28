"""Dense matrices with optional modular arithmetic."""

from __future__ import annotations

from collections.abc import Iterable


class Matrix:
    """A rectangular matrix; when ``mod`` is non-zero every entry is kept reduced."""

    def __init__(self, rows: Iterable[Iterable[int]], mod: int = 0) -> None:
        data = [list(row) for row in rows]
        if not data or not data[0] or any(len(row) != len(data[0]) for row in data):
            raise ValueError("matrix rows must be non-empty and of equal length")
        self.mod = mod
        self._rows = [[self._reduce(v) for v in row] for row in data]

    def _reduce(self, value):
        return value % self.mod if self.mod else value

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._rows), len(self._rows[0])

    @property
    def rows(self) -> list[list]:
        return [row[:] for row in self._rows]

    @classmethod
    def identity(cls, n: int, mod: int = 0) -> Matrix:
        return cls([[int(i == j) for j in range(n)] for i in range(n)], mod)

    def __getitem__(self, index: int) -> list:
        if not 0 <= index < len(self._rows):
            raise IndexError("subscript invalid")
        return self._rows[index]

    def _elementwise(self, other: Matrix, op) -> Matrix:
        if self.shape != other.shape:
            raise ValueError("matrix shapes differ")
        mod = self.mod or other.mod
        return Matrix(
            ([op(a, b) for a, b in zip(r1, r2)] for r1, r2 in zip(self._rows, other._rows)),
            mod,
        )

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, lambda a, b: a + b)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, lambda a, b: a - b)

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape[1] != other.shape[0]:
            raise ValueError("inner dimensions differ")
        mod = self.mod or other.mod
        columns = list(zip(*other._rows))
        return Matrix(
            ([sum(a * b for a, b in zip(row, col)) for col in columns] for row in self._rows),
            mod,
        )

    def __pow__(self, k: int) -> Matrix:
        n, m = self.shape
        if n != m:
            raise ValueError("only square matrices can be raised to a power")
        if k < 0:
            raise ValueError("exponent must be non-negative")
        result = Matrix.identity(n, self.mod)
        base = self
        while k:
            if k & 1:
                result = result * base
            base = base * base
            k >>= 1
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join("".join(f"{v} " for v in row) for row in self._rows)

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r}, mod={self.mod})"