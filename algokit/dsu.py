"""Disjoint-set union structures."""

from __future__ import annotations


class DSU:
    """Disjoint sets over ``0..n-1`` with path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._parent = list(range(n))

    def find(self, a: int) -> int:
        """Return the representative of the set holding ``a``."""
        root = a
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[a] != root:
            self._parent[a], a = root, self._parent[a]
        return root

    def merge(self, a: int, b: int) -> None:
        """Join the set of ``b`` under the representative of ``a``."""
        self._parent[self.find(b)] = self.find(a)

    def check(self, a: int, b: int) -> bool:
        """Return True if ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)

    def __len__(self) -> int:
        return len(self._parent)


class SizeDSU(DSU):
    """Disjoint sets that attach the smaller set under the larger one."""

    def __init__(self, n: int) -> None:
        super().__init__(n)
        self._size = [1] * n

    def merge(self, a: int, b: int) -> None:
        a, b = self.find(a), self.find(b)
        if a == b:
            return
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]