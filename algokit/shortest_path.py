"""Single-source and all-pairs shortest paths on directed weighted graphs.

Vertices are ``0..n-1``; edges are ``(u, v, weight)`` triples. Unreachable
vertices get a distance of ``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

INF = math.inf

Edge = tuple[int, int, float]


class NegativeCycleError(ValueError):
    """The graph holds a cycle of negative total weight."""


def _check_vertex(n: int, vertex: int) -> None:
    if not 0 <= vertex < n:
        raise IndexError(f"vertex {vertex} out of range for {n} vertices")


def _adjacency(n: int, edges: Iterable[Edge]) -> list[list[tuple[int, float]]]:
    adj: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for u, v, w in edges:
        _check_vertex(n, u)
        _check_vertex(n, v)
        adj[u].append((v, w))
    return adj


def _require_non_negative(adj: Sequence[Sequence[tuple[int, float]]]) -> None:
    if any(w < 0 for row in adj for _, w in row):
        raise ValueError("edge weights must be non-negative")


def dijkstra(n: int, edges: Iterable[Edge], source: int) -> list[float]:
    """Return distances from ``source`` using a binary heap."""
    _check_vertex(n, source)
    adj = _adjacency(n, edges)
    _require_non_negative(adj)
    dist: list[float] = [INF] * n
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d != dist[u]:
            continue
        for v, w in adj[u]:
            nd = d + w
            if nd < dist[v]:
                dist[v] = nd
                heapq.heappush(heap, (nd, v))
    return dist


def dijkstra_dense(n: int, edges: Iterable[Edge], source: int) -> list[float]:
    """Return distances from ``source`` with the quadratic selection scan."""
    _check_vertex(n, source)
    adj = _adjacency(n, edges)
    _require_non_negative(adj)
    dist: list[float] = [INF] * n
    dist[source] = 0
    done = [False] * n
    for _ in range(n):
        candidates = [v for v in range(n) if not done[v] and dist[v] < INF]
        if not candidates:
            break
        u = min(candidates, key=dist.__getitem__)
        done[u] = True
        for v, w in adj[u]:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
    return dist


def bellman_ford(n: int, edges: Iterable[Edge], source: int) -> list[float]:
    """Return distances from ``source``; negative weights are allowed.

    Raises NegativeCycleError if a negative cycle is reachable from ``source``.
    """
    _check_vertex(n, source)
    edge_list = list(edges)
    for u, v, _ in edge_list:
        _check_vertex(n, u)
        _check_vertex(n, v)
    dist: list[float] = [INF] * n
    dist[source] = 0
    for _ in range(n):
        changed = False
        for u, v, w in edge_list:
            if dist[u] < INF and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            return dist
    raise NegativeCycleError("negative cycle reachable from the source")


def johnson(n: int, edges: Iterable[Edge]) -> list[list[float]]:
    """Return the matrix of all-pairs distances; negative weights are allowed.

    Raises NegativeCycleError if the graph holds any negative cycle.
    """
    edge_list = list(edges)
    potential = bellman_ford(n + 1, edge_list + [(n, v, 0) for v in range(n)], n)[:n]
    reweighted = [(u, v, w + potential[u] - potential[v]) for u, v, w in edge_list]
    matrix: list[list[float]] = []
    for u in range(n):
        row = dijkstra(n, reweighted, u)
        matrix.append(
            [d + potential[v] - potential[u] if d < INF else INF for v, d in enumerate(row)]
        )
    return matrix