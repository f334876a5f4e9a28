"""Graph connectivity: strongly connected components, cut vertices, bridges,
block-cut trees and Euler trails. Vertices are ``0..n-1``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def strongly_connected_components(n: int, adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Return a component id per vertex (ids in reverse topological order)."""
    index = [0] * n
    low = [0] * n
    comp = [-1] * n
    timer = 0
    count = 0
    pending: list[int] = []
    for root in range(n):
        if index[root]:
            continue
        timer += 1
        index[root] = low[root] = timer
        pending.append(root)
        work = [(root, iter(adjacency[root]))]
        while work:
            u, it = work[-1]
            for v in it:
                if not index[v]:
                    timer += 1
                    index[v] = low[v] = timer
                    pending.append(v)
                    work.append((v, iter(adjacency[v])))
                    break
                if comp[v] == -1:
                    low[u] = min(low[u], index[v])
            else:
                work.pop()
                if work:
                    p = work[-1][0]
                    low[p] = min(low[p], low[u])
                if low[u] == index[u]:
                    while True:
                        x = pending.pop()
                        comp[x] = count
                        if x == u:
                            break
                    count += 1
    return comp


def cut_vertices(n: int, adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Return the articulation points of an undirected graph, in increasing order."""
    dfn = [0] * n
    low = [0] * n
    cut = [False] * n
    timer = 0
    for root in range(n):
        if dfn[root]:
            continue
        timer += 1
        dfn[root] = low[root] = timer
        children = 0
        work = [(root, iter(adjacency[root]))]
        while work:
            u, it = work[-1]
            for v in it:
                if not dfn[v]:
                    timer += 1
                    dfn[v] = low[v] = timer
                    work.append((v, iter(adjacency[v])))
                    break
                low[u] = min(low[u], dfn[v])
            else:
                work.pop()
                if work:
                    p = work[-1][0]
                    low[p] = min(low[p], low[u])
                    if p == root:
                        children += 1
                    elif low[u] >= dfn[p]:
                        cut[p] = True
        if children >= 2:
            cut[root] = True
    return [v for v in range(n) if cut[v]]


def bridges(n: int, adjacency: Sequence[Iterable[int]]) -> list[tuple[int, int]]:
    """Return the bridges of an undirected graph as sorted ``(min, max)`` pairs."""
    dfn = [0] * n
    low = [0] * n
    timer = 0
    found: list[tuple[int, int]] = []
    for root in range(n):
        if dfn[root]:
            continue
        timer += 1
        dfn[root] = low[root] = timer
        work = [(root, -1, iter(adjacency[root]))]
        while work:
            u, parent, it = work[-1]
            for v in it:
                if not dfn[v]:
                    timer += 1
                    dfn[v] = low[v] = timer
                    work.append((v, u, iter(adjacency[v])))
                    break
                if v != parent:
                    low[u] = min(low[u], dfn[v])
            else:
                work.pop()
                if work:
                    p = work[-1][0]
                    low[p] = min(low[p], low[u])
                    if low[u] > dfn[p]:
                        found.append((min(p, u), max(p, u)))
    return sorted(found)


def block_cut_tree(n: int, adjacency: Sequence[Iterable[int]]) -> list[list[int]]:
    """Return the round-square tree as adjacency lists.

    Nodes ``0..n-1`` are the original vertices; each node from ``n`` on stands
    for one biconnected block and is joined to the vertices it contains.
    """
    tree: list[list[int]] = [[] for _ in range(n)]
    dfn = [0] * n
    low = [0] * n
    timer = 0
    pending: list[int] = []
    for root in range(n):
        if dfn[root]:
            continue
        timer += 1
        dfn[root] = low[root] = timer
        pending.append(root)
        work = [(root, iter(adjacency[root]))]
        while work:
            u, it = work[-1]
            for v in it:
                if not dfn[v]:
                    timer += 1
                    dfn[v] = low[v] = timer
                    pending.append(v)
                    work.append((v, iter(adjacency[v])))
                    break
                low[u] = min(low[u], dfn[v])
            else:
                work.pop()
                if not work:
                    continue
                p = work[-1][0]
                low[p] = min(low[p], low[u])
                if low[u] == dfn[p]:
                    block = len(tree)
                    tree.append([])
                    while True:
                        x = pending.pop()
                        tree[block].append(x)
                        tree[x].append(block)
                        if x == u:
                            break
                    tree[block].append(p)
                    tree[p].append(block)
        pending.pop()
    return tree


def euler_circuit(n: int, edges: Sequence[tuple[int, int]], start: int) -> list[int]:
    """Return the vertices of a trail from ``start`` using every undirected edge once.

    Raises ValueError if no such trail exists.
    """
    if not 0 <= start < n:
        raise IndexError(f"vertex {start} out of range")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    degree = [0] * n
    for i, (u, v) in enumerate(edges):
        adj[u].append((v, i))
        adj[v].append((u, i))
        degree[u] += 1
        degree[v] += 1
    odd = [v for v in range(n) if degree[v] % 2]
    if odd and (len(odd) != 2 or start not in odd):
        raise ValueError("no Euler trail starts at this vertex")
    used = [False] * len(edges)
    pointer = [0] * n
    stack = [start]
    path: list[int] = []
    while stack:
        u = stack[-1]
        while pointer[u] < len(adj[u]) and used[adj[u][pointer[u]][1]]:
            pointer[u] += 1
        if pointer[u] == len(adj[u]):
            path.append(stack.pop())
        else:
            v, i = adj[u][pointer[u]]
            used[i] = True
            stack.append(v)
    if len(path) != len(edges) + 1:
        raise ValueError("edges are not connected")
    path.reverse()
    return path