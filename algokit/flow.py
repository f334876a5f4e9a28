"""Network flow: min-cost max-flow (Dinic style) and ISAP maximum flow."""

from __future__ import annotations

import math
from collections import deque


class _Network:
    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("network must have at least one vertex")
        self._n = n
        self._to: list[int] = []
        self._cap: list[int] = []
        self._adj: list[list[int]] = [[] for _ in range(n)]

    def _check(self, *vertices: int) -> None:
        for v in vertices:
            if not 0 <= v < self._n:
                raise IndexError(f"vertex {v} out of range")

    def _add_arc(self, u: int, v: int, capacity: int) -> None:
        self._adj[u].append(len(self._to))
        self._to.append(v)
        self._cap.append(capacity)


class Dinic(_Network):
    """Minimum-cost maximum flow using shortest-path (by cost) blocking flows."""

    def __init__(self, n: int) -> None:
        super().__init__(n)
        self._cost: list[int] = []

    def add_edge(self, u: int, v: int, capacity: int, cost: int = 0) -> None:
        """Add a directed edge ``u -> v`` with a capacity and a unit cost."""
        self._check(u, v)
        self._add_arc(u, v, capacity)
        self._cost.append(cost)
        self._add_arc(v, u, 0)
        self._cost.append(-cost)

    def _shortest(self, source: int, sink: int) -> list[float] | None:
        dist: list[float] = [math.inf] * self._n
        dist[source] = 0
        queued = [False] * self._n
        queued[source] = True
        queue = deque([source])
        while queue:
            u = queue.popleft()
            queued[u] = False
            for e in self._adj[u]:
                v = self._to[e]
                if self._cap[e] > 0 and dist[u] + self._cost[e] < dist[v]:
                    dist[v] = dist[u] + self._cost[e]
                    if not queued[v]:
                        queued[v] = True
                        queue.append(v)
        return dist if dist[sink] < math.inf else None

    def _augment(self, u, sink, flow, dist, arc, on_path) -> int:
        if u == sink:
            return flow
        on_path[u] = True
        used = 0
        arcs = self._adj[u]
        while arc[u] < len(arcs):
            e = arcs[arc[u]]
            v = self._to[e]
            if (
                self._cap[e] > 0
                and not on_path[v]
                and dist[v] == dist[u] + self._cost[e]
            ):
                pushed = self._augment(v, sink, min(flow - used, self._cap[e]), dist, arc, on_path)
                if pushed:
                    self._cap[e] -= pushed
                    self._cap[e ^ 1] += pushed
                    self._total_cost += pushed * self._cost[e]
                    used += pushed
                    if used == flow:
                        break
            arc[u] += 1
        on_path[u] = False
        return used

    def run(self, source: int, sink: int) -> tuple[int, int]:
        """Push as much flow as possible at least cost; return ``(flow, cost)``."""
        self._check(source, sink)
        if source == sink:
            raise ValueError("source and sink must differ")
        total_flow = 0
        self._total_cost = 0
        while (dist := self._shortest(source, sink)) is not None:
            arc = [0] * self._n
            on_path = [False] * self._n
            phase = 0
            while pushed := self._augment(source, sink, math.inf, dist, arc, on_path):
                phase += pushed
            if not phase:
                break
            total_flow += phase
        return total_flow, self._total_cost


class ISAP(_Network):
    """Maximum flow by improved shortest augmenting paths with the gap heuristic."""

    def add_edge(self, u: int, v: int, capacity: int, bidirectional: bool = False) -> None:
        """Add an edge ``u -> v``; with ``bidirectional`` the reverse gets the same capacity."""
        self._check(u, v)
        self._add_arc(u, v, capacity)
        self._add_arc(v, u, capacity if bidirectional else 0)

    def _label(self, sink: int) -> None:
        self._depth = [-1] * self._n
        self._gap = [0] * (self._n + 3)
        self._depth[sink] = 0
        self._gap[0] = 1
        queue = deque([sink])
        while queue:
            u = queue.popleft()
            for e in self._adj[u]:
                v = self._to[e]
                if self._depth[v] == -1:
                    self._depth[v] = self._depth[u] + 1
                    self._gap[self._depth[v]] += 1
                    queue.append(v)

    def _augment(self, u: int, flow: float) -> int:
        if u == self._sink:
            return flow
        depth, arcs = self._depth, self._adj[u]
        used = 0
        while self._arc[u] < len(arcs):
            e = arcs[self._arc[u]]
            v = self._to[e]
            if self._cap[e] and depth[v] + 1 == depth[u]:
                pushed = self._augment(v, min(flow - used, self._cap[e]))
                if pushed:
                    self._cap[e] -= pushed
                    self._cap[e ^ 1] += pushed
                    used += pushed
                    if used == flow:
                        return used
            self._arc[u] += 1
        self._gap[depth[u]] -= 1
        if not self._gap[depth[u]]:
            depth[self._source] = self._n + 1
        depth[u] += 1
        self._gap[depth[u]] += 1
        return used

    def max_flow(self, source: int, sink: int) -> int:
        """Return the maximum flow from ``source`` to ``sink``."""
        self._check(source, sink)
        if source == sink:
            raise ValueError("source and sink must differ")
        self._source, self._sink = source, sink
        self._label(sink)
        if self._depth[source] == -1:
            return 0
        total = 0
        while self._depth[source] < self._n:
            self._arc = [0] * self._n
            total += self._augment(source, math.inf)
        return total