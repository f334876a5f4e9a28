"""Minimum spanning tree weight of an undirected weighted graph.

Vertices are ``0..n-1``; edges are ``(u, v, weight)`` triples.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable
from operator import itemgetter

from algokit.dsu import DSU

Edge = tuple[int, int, float]


def _check(n: int, edges: Iterable[Edge]) -> list[Edge]:
    if n < 1:
        raise ValueError("graph must have at least one vertex")
    edge_list = list(edges)
    for u, v, _ in edge_list:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) out of range")
    return edge_list


def _adjacency(n: int, edges: list[Edge]) -> list[list[tuple[int, float]]]:
    adj: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for u, v, w in edges:
        adj[u].append((v, w))
        adj[v].append((u, w))
    return adj


def kruskal(n: int, edges: Iterable[Edge]) -> float:
    """Return the MST weight; raise ValueError if the graph is disconnected."""
    edge_list = _check(n, edges)
    dsu = DSU(n)
    total, count = 0, 0
    for u, v, w in sorted(edge_list, key=itemgetter(2)):
        if count == n - 1:
            break
        if not dsu.check(u, v):
            dsu.merge(u, v)
            total += w
            count += 1
    if count != n - 1:
        raise ValueError("graph is not connected")
    return total


def prim(n: int, edges: Iterable[Edge]) -> float:
    """Return the MST weight using a heap; raise ValueError if disconnected."""
    adj = _adjacency(n, _check(n, edges))
    best: list[float] = [math.inf] * n
    best[0] = 0
    in_tree = [False] * n
    heap: list[tuple[float, int]] = [(0, 0)]
    total, count = 0, 0
    while heap and count < n:
        w, u = heapq.heappop(heap)
        if in_tree[u]:
            continue
        in_tree[u] = True
        count += 1
        total += w
        for v, weight in adj[u]:
            if not in_tree[v] and weight < best[v]:
                best[v] = weight
                heapq.heappush(heap, (weight, v))
    if count != n:
        raise ValueError("graph is not connected")
    return total


def prim_dense(n: int, edges: Iterable[Edge]) -> float:
    """Return the MST weight with the quadratic scan; raise ValueError if disconnected."""
    adj = _adjacency(n, _check(n, edges))
    best: list[float] = [math.inf] * n
    best[0] = 0
    in_tree = [False] * n
    total = 0
    for _ in range(n):
        candidates = [v for v in range(n) if not in_tree[v] and best[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=best.__getitem__)
        in_tree[u] = True
        total += best[u]
        for v, w in adj[u]:
            if not in_tree[v] and w < best[v]:
                best[v] = w
    return total