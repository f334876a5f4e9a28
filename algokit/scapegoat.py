"""A scapegoat tree with lazy deletion."""

from __future__ import annotations

ALPHA = 0.7


class _Node:
    __slots__ = ("value", "left", "right", "size", "valid", "alive")

    def __init__(self, value: int) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.size = 1
        self.valid = 1
        self.alive = 1


def _size(node: _Node | None) -> int:
    return node.size if node else 0


def _valid(node: _Node | None) -> int:
    return node.valid if node else 0


def _update(node: _Node) -> None:
    node.size = node.alive + _size(node.left) + _size(node.right)
    node.valid = node.alive + _valid(node.left) + _valid(node.right)


def _needs_rebuild(node: _Node) -> bool:
    limit = ALPHA * node.size
    return _size(node.left) > limit or _size(node.right) > limit


def _flatten(node: _Node | None) -> list[_Node]:
    nodes: list[_Node] = []
    stack: list[_Node] = []
    while stack or node:
        while node:
            stack.append(node)
            node = node.left
        node = stack.pop()
        if node.alive:
            nodes.append(node)
        node = node.right
    return nodes


def _build(nodes: list[_Node], lo: int, hi: int) -> _Node | None:
    if lo >= hi:
        return None
    mid = (lo + hi) // 2
    node = nodes[mid]
    node.left = _build(nodes, lo, mid)
    node.right = _build(nodes, mid + 1, hi)
    _update(node)
    return node


class ScapegoatTree:
    """Ordered multiset of integers with rank and order-statistic queries."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def __len__(self) -> int:
        return _valid(self._root)

    def insert(self, value: int) -> None:
        self._root = self._insert(self._root, value)

    def _insert(self, node: _Node | None, value: int) -> _Node | None:
        if node is None:
            return _Node(value)
        node.size += 1
        node.valid += 1
        if value >= node.value:
            node.right = self._insert(node.right, value)
        else:
            node.left = self._insert(node.left, value)
        if _needs_rebuild(node):
            nodes = _flatten(node)
            return _build(nodes, 0, len(nodes))
        return node

    def delete(self, value: int) -> None:
        """Remove one occurrence of ``value``; raise KeyError if absent."""
        r = self.rank(value)
        if r > len(self) or self.kth(r) != value:
            raise KeyError(value)
        node = self._root
        while node:
            if node.alive and r == _valid(node.left) + 1:
                node.alive = 0
                node.valid -= 1
                return
            node.valid -= 1
            if r <= _valid(node.left) + node.alive:
                node = node.left
            else:
                r -= _valid(node.left) + node.alive
                node = node.right

    def rank(self, value: int) -> int:
        """Return one more than the number of stored values below ``value``."""
        answer, node = 1, self._root
        while node:
            if node.value >= value:
                node = node.left
            else:
                answer += _valid(node.left) + node.alive
                node = node.right
        return answer

    def _count_at_most(self, value: int) -> int:
        count, node = 0, self._root
        while node:
            if node.value > value:
                node = node.left
            else:
                count += _valid(node.left) + node.alive
                node = node.right
        return count

    def kth(self, k: int) -> int:
        """Return the value at 1-based position ``k`` in sorted order."""
        if not 1 <= k <= len(self):
            raise IndexError(f"position {k} out of range")
        node = self._root
        while node:
            left = _valid(node.left)
            if node.alive and left + 1 == k:
                return node.value
            if left >= k:
                node = node.left
            else:
                k -= left + node.alive
                node = node.right
        raise IndexError("position out of range")

    def predecessor(self, value: int) -> int | None:
        """Return the largest stored value below ``value``, or None."""
        r = self.rank(value) - 1
        return self.kth(r) if r >= 1 else None

    def successor(self, value: int) -> int | None:
        """Return the smallest stored value above ``value``, or None."""
        count = self._count_at_most(value)
        return self.kth(count + 1) if count < len(self) else None