"""A treap: a randomised balanced binary search tree with duplicate counts."""

from __future__ import annotations

import random


class _Node:
    __slots__ = ("value", "count", "priority", "size", "left", "right")

    def __init__(self, value: int, priority: float) -> None:
        self.value = value
        self.count = 1
        self.priority = priority
        self.size = 1
        self.left: _Node | None = None
        self.right: _Node | None = None


def _size(node: _Node | None) -> int:
    return node.size if node else 0


def _update(node: _Node) -> None:
    node.size = node.count + _size(node.left) + _size(node.right)


def _rotate_right(node: _Node) -> _Node:
    top = node.left
    node.left = top.right
    top.right = node
    _update(node)
    _update(top)
    return top


def _rotate_left(node: _Node) -> _Node:
    top = node.right
    node.right = top.left
    top.left = node
    _update(node)
    _update(top)
    return top


class Treap:
    """Ordered multiset with rank and order-statistic queries."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._root: _Node | None = None

    def __len__(self) -> int:
        return _size(self._root)

    def insert(self, value: int) -> None:
        self._root = self._insert(self._root, value)

    def _insert(self, node: _Node | None, value: int) -> _Node:
        if node is None:
            return _Node(value, self._rng.random())
        node.size += 1
        if value == node.value:
            node.count += 1
        elif value < node.value:
            node.left = self._insert(node.left, value)
            if node.left.priority < node.priority:
                node = _rotate_right(node)
        else:
            node.right = self._insert(node.right, value)
            if node.right.priority < node.priority:
                node = _rotate_left(node)
        return node

    def remove(self, value: int) -> bool:
        """Remove one occurrence of ``value``; return False if it was absent."""
        self._root, removed = self._remove(self._root, value)
        return removed

    def _remove(self, node: _Node | None, value: int) -> tuple[_Node | None, bool]:
        if node is None:
            return None, False
        if value == node.value:
            if node.count > 1:
                node.count -= 1
                node.size -= 1
                return node, True
            if node.left is None:
                return node.right, True
            if node.right is None:
                return node.left, True
            if node.left.priority < node.right.priority:
                node = _rotate_right(node)
            else:
                node = _rotate_left(node)
            return self._remove(node, value)
        if value < node.value:
            node.left, removed = self._remove(node.left, value)
        else:
            node.right, removed = self._remove(node.right, value)
        if removed:
            node.size -= 1
        return node, removed

    def predecessor(self, value: int) -> int | None:
        """Return the largest stored value below ``value``, or None."""
        node, answer = self._root, None
        while node:
            if value > node.value:
                answer, node = node.value, node.right
            else:
                node = node.left
        return answer

    def successor(self, value: int) -> int | None:
        """Return the smallest stored value above ``value``, or None."""
        node, answer = self._root, None
        while node:
            if value < node.value:
                answer, node = node.value, node.left
            else:
                node = node.right
        return answer

    def kth(self, rank: int) -> int:
        """Return the value at 1-based position ``rank`` in sorted order."""
        if not 1 <= rank <= len(self):
            raise IndexError(f"rank {rank} out of range")
        node, k = self._root, rank
        while node:
            left = _size(node.left)
            if left < k <= left + node.count:
                return node.value
            if left >= k:
                node = node.left
            else:
                k -= left + node.count
                node = node.right
        raise IndexError(f"rank {rank} out of range")

    def rank(self, value: int) -> int:
        """Return the 1-based position of ``value``; if absent, the count of smaller values."""
        node, smaller = self._root, 0
        while node:
            left = _size(node.left)
            if value == node.value:
                return smaller + left + 1
            if value < node.value:
                node = node.left
            else:
                smaller += left + node.count
                node = node.right
        return smaller