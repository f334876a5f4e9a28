"""Queries on rooted trees: lowest common ancestors and heavy-light decomposition.

Vertices are ``0..n-1``; a tree is given by its ``n - 1`` undirected edges.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from algokit.range_query import SparseTable


def _root_tree(n: int, edges: Iterable[tuple[int, int]], root: int):
    edge_list = list(edges)
    if n < 1 or len(edge_list) != n - 1:
        raise ValueError("a tree on n vertices needs exactly n - 1 edges")
    if not 0 <= root < n:
        raise IndexError(f"root {root} out of range")
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edge_list:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) out of range")
        adj[u].append(v)
        adj[v].append(u)
    parent = [-1] * n
    depth = [0] * n
    seen = [False] * n
    seen[root] = True
    order: list[int] = []
    stack = [root]
    while stack:
        u = stack.pop()
        order.append(u)
        for v in adj[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                depth[v] = depth[u] + 1
                stack.append(v)
    if len(order) != n:
        raise ValueError("edges do not form a tree")
    children = [[v for v in adj[u] if v != parent[u]] for u in range(n)]
    return children, parent, depth, order


class BinaryLiftingLCA:
    """Lowest common ancestors by jumping powers of two."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 0) -> None:
        _, parent, self._depth, _ = _root_tree(n, edges, root)
        first = [p if p >= 0 else root for p in parent]
        self._up = [first]
        for _ in range(1, max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append([prev[prev[v]] for v in range(n)])

    def lca(self, u: int, v: int) -> int:
        depth = self._depth
        if depth[u] < depth[v]:
            u, v = v, u
        diff = depth[u] - depth[v]
        for row in self._up:
            if not diff:
                break
            if diff & 1:
                u = row[u]
            diff >>= 1
        if u == v:
            return u
        for row in reversed(self._up):
            if row[u] != row[v]:
                u, v = row[u], row[v]
        return self._up[0][u]


class EulerTourLCA:
    """Lowest common ancestors by range minimum over the Euler tour."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 0) -> None:
        children, _, depth, _ = _root_tree(n, edges, root)
        tour = [root]
        self._first = [0] * n
        work = [iter(children[root])]
        path = [root]
        while work:
            for v in work[-1]:
                self._first[v] = len(tour)
                tour.append(v)
                path.append(v)
                work.append(iter(children[v]))
                break
            else:
                work.pop()
                path.pop()
                if path:
                    tour.append(path[-1])
        self._table = SparseTable([(depth[v], v) for v in tour], min)

    def lca(self, u: int, v: int) -> int:
        left, right = sorted((self._first[u], self._first[v]))
        return self._table.query(left, right)[1]


class _LazySumTree:
    def __init__(self, values: Sequence[int], mod: int | None) -> None:
        self._n = len(values)
        self._mod = mod
        self._sum = [0] * (4 * self._n)
        self._tag = [0] * (4 * self._n)
        self._build(values, 1, 0, self._n - 1)

    def _norm(self, x: int) -> int:
        return x % self._mod if self._mod else x

    def _build(self, values, node, lo, hi) -> None:
        if lo == hi:
            self._sum[node] = self._norm(values[lo])
            return
        mid = (lo + hi) // 2
        self._build(values, 2 * node, lo, mid)
        self._build(values, 2 * node + 1, mid + 1, hi)
        self._sum[node] = self._norm(self._sum[2 * node] + self._sum[2 * node + 1])

    def _apply(self, node, lo, hi, delta) -> None:
        self._sum[node] = self._norm(self._sum[node] + (hi - lo + 1) * delta)
        self._tag[node] = self._norm(self._tag[node] + delta)

    def _push(self, node, lo, hi) -> None:
        if self._tag[node]:
            mid = (lo + hi) // 2
            self._apply(2 * node, lo, mid, self._tag[node])
            self._apply(2 * node + 1, mid + 1, hi, self._tag[node])
            self._tag[node] = 0

    def add(self, left: int, right: int, delta: int, node=1, lo=0, hi=None) -> None:
        if hi is None:
            hi = self._n - 1
        if left <= lo and hi <= right:
            self._apply(node, lo, hi, delta)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        if left <= mid:
            self.add(left, right, delta, 2 * node, lo, mid)
        if right > mid:
            self.add(left, right, delta, 2 * node + 1, mid + 1, hi)
        self._sum[node] = self._norm(self._sum[2 * node] + self._sum[2 * node + 1])

    def total(self, left: int, right: int, node=1, lo=0, hi=None) -> int:
        if hi is None:
            hi = self._n - 1
        if left <= lo and hi <= right:
            return self._sum[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        result = 0
        if left <= mid:
            result += self.total(left, right, 2 * node, lo, mid)
        if right > mid:
            result += self.total(left, right, 2 * node + 1, mid + 1, hi)
        return self._norm(result)


class HeavyLightDecomposition:
    """Path and subtree additions and sums on a rooted tree, optionally modulo ``mod``."""

    def __init__(
        self,
        n: int,
        edges: Iterable[tuple[int, int]],
        root: int,
        values: Sequence[int],
        mod: int | None = None,
    ) -> None:
        if len(values) != n:
            raise ValueError("one value per vertex is required")
        children, self._parent, self._depth, order = _root_tree(n, edges, root)
        self._size = [1] * n
        for u in reversed(order):
            if self._parent[u] >= 0:
                self._size[self._parent[u]] += self._size[u]
        self._pos = [0] * n
        self._top = [0] * n
        self._top[root] = root
        counter = 0
        stack = [root]
        while stack:
            u = stack.pop()
            self._pos[u] = counter
            counter += 1
            kids = children[u]
            if not kids:
                continue
            heavy = max(kids, key=self._size.__getitem__)
            for v in kids:
                if v != heavy:
                    self._top[v] = v
                    stack.append(v)
            self._top[heavy] = self._top[u]
            stack.append(heavy)
        base = [0] * n
        for u in range(n):
            base[self._pos[u]] = values[u]
        self._mod = mod
        self._tree = _LazySumTree(base, mod)

    def _segments(self, x: int, y: int):
        top, depth, pos = self._top, self._depth, self._pos
        while top[x] != top[y]:
            if depth[top[x]] < depth[top[y]]:
                x, y = y, x
            yield pos[top[x]], pos[x]
            x = self._parent[top[x]]
        if depth[x] > depth[y]:
            x, y = y, x
        yield pos[x], pos[y]

    def add_path(self, x: int, y: int, delta: int) -> None:
        """Add ``delta`` to every vertex on the path from ``x`` to ``y``."""
        for left, right in self._segments(x, y):
            self._tree.add(left, right, delta)

    def path_sum(self, x: int, y: int) -> int:
        """Return the sum of the values on the path from ``x`` to ``y``."""
        total = sum(self._tree.total(left, right) for left, right in self._segments(x, y))
        return total % self._mod if self._mod else total

    def add_subtree(self, u: int, delta: int) -> None:
        """Add ``delta`` to every vertex in the subtree of ``u``."""
        self._tree.add(self._pos[u], self._pos[u] + self._size[u] - 1, delta)

    def subtree_sum(self, u: int) -> int:
        """Return the sum of the values in the subtree of ``u``."""
        return self._tree.total(self._pos[u], self._pos[u] + self._size[u] - 1)