"""Splay trees: an ordered multiset and a sequence with range reversal."""

from __future__ import annotations

from typing import Any

_POS_INF = float("inf")
_NEG_INF = float("-inf")


class _Node:
    __slots__ = ("key", "count", "size", "parent", "ch", "data", "rev")

    def __init__(self, key: Any, data: Any = None, parent: _Node | None = None) -> None:
        self.key = key
        self.count = 1
        self.size = 1
        self.parent = parent
        self.ch: list[_Node | None] = [None, None]
        self.data = data
        self.rev = False


def _size(node: _Node | None) -> int:
    return node.size if node else 0


def _is_sentinel(node: _Node) -> bool:
    return node.key in (_POS_INF, _NEG_INF)


class SplayTree:
    """Ordered multiset backed by a splay tree with two sentinel keys."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._insert(_POS_INF, None)
        self._insert(_NEG_INF, None)

    def __len__(self) -> int:
        return self._root.size - 2

    @staticmethod
    def _push_up(x: _Node) -> None:
        x.size = _size(x.ch[0]) + _size(x.ch[1]) + x.count

    def _push_down(self, x: _Node) -> None:
        pass

    def _rotate(self, x: _Node) -> None:
        f = x.parent
        g = f.parent
        d = int(f.ch[1] is x)
        son = x.ch[d ^ 1]
        f.ch[d] = son
        if son:
            son.parent = f
        if g:
            g.ch[int(g.ch[1] is f)] = x
        x.parent = g
        x.ch[d ^ 1] = f
        f.parent = x
        self._push_up(f)
        self._push_up(x)

    def _splay(self, x: _Node, goal: _Node | None = None) -> None:
        while x.parent is not goal:
            f = x.parent
            g = f.parent
            if g is not goal:
                same_side = (f.ch[1] is x) == (g.ch[1] is f)
                self._rotate(f if same_side else x)
            self._rotate(x)
        if goal is None:
            self._root = x

    def _find(self, key: Any) -> None:
        cur = self._root
        while cur.key != key:
            nxt = cur.ch[int(key > cur.key)]
            if nxt is None:
                break
            cur = nxt
        self._splay(cur)

    def _insert(self, key: Any, data: Any) -> None:
        cur, father = self._root, None
        while cur is not None and cur.key != key:
            father = cur
            cur = cur.ch[int(key > cur.key)]
        if cur is not None:
            cur.count += 1
            self._push_up(cur)
        else:
            cur = _Node(key, data, father)
            if father:
                father.ch[int(key > father.key)] = cur
        self._splay(cur)

    def insert(self, value: Any) -> None:
        self._insert(value, None)

    def _kth_node(self, k: int) -> _Node:
        k += 1
        cur = self._root
        while True:
            self._push_down(cur)
            left = cur.ch[0]
            ls = _size(left)
            if left and k <= ls:
                cur = left
            elif k > ls + cur.count:
                k -= ls + cur.count
                cur = cur.ch[1]
            else:
                return cur

    def _check_position(self, k: int) -> None:
        if not 1 <= k <= len(self):
            raise IndexError(f"position {k} out of range")

    def kth(self, k: int) -> Any:
        """Return the value at 1-based position ``k`` in sorted order."""
        self._check_position(k)
        return self._kth_node(k).key

    def rank(self, value: Any) -> int:
        """Return one more than the number of stored values below ``value``."""
        self._find(value)
        root = self._root
        ls = _size(root.ch[0])
        return ls if root.key >= value else ls + root.count

    def _pre_node(self, value: Any) -> _Node:
        self._find(value)
        if self._root.key < value:
            return self._root
        cur = self._root.ch[0]
        while cur.ch[1]:
            cur = cur.ch[1]
        return cur

    def _succ_node(self, value: Any) -> _Node:
        self._find(value)
        if self._root.key > value:
            return self._root
        cur = self._root.ch[1]
        while cur.ch[0]:
            cur = cur.ch[0]
        return cur

    def predecessor(self, value: Any) -> Any:
        """Return the largest stored value below ``value``, or None."""
        node = self._pre_node(value)
        return None if _is_sentinel(node) else node.key

    def successor(self, value: Any) -> Any:
        """Return the smallest stored value above ``value``, or None."""
        node = self._succ_node(value)
        return None if _is_sentinel(node) else node.key

    def remove(self, value: Any) -> bool:
        """Remove one occurrence of ``value``; return False if it was absent."""
        last = self._pre_node(value)
        nxt = self._succ_node(value)
        self._splay(last)
        self._splay(nxt, last)
        target = nxt.ch[0]
        if target is None:
            return False
        if target.count > 1:
            target.count -= 1
            self._push_up(target)
            self._push_up(nxt)
            self._push_up(last)
            self._splay(target)
        else:
            nxt.ch[0] = None
            self._push_up(nxt)
            self._push_up(self._root)
        return True


class SequenceSplay(SplayTree):
    """A sequence of data items, ordered by insertion key, supporting range reversal."""

    def insert(self, key: Any, data: Any) -> None:  # type: ignore[override]
        """Insert ``data`` at the position given by ``key``."""
        self._insert(key, data)

    def _push_down(self, x: _Node) -> None:
        if x.rev:
            x.ch[0], x.ch[1] = x.ch[1], x.ch[0]
            for child in x.ch:
                if child:
                    child.rev = not child.rev
            x.rev = False

    def kth(self, k: int) -> Any:
        """Return the data item at 1-based position ``k`` of the sequence."""
        self._check_position(k)
        return self._kth_node(k).data

    def reverse(self, left: int, right: int) -> None:
        """Reverse the items at 1-based positions ``left..right``."""
        if not 1 <= left <= right <= len(self):
            raise IndexError(f"invalid range [{left}, {right}]")
        x = self._kth_node(left - 1)
        y = self._kth_node(right + 1)
        self._splay(x)
        self._splay(y, x)
        middle = y.ch[0]
        if middle:
            middle.rev = not middle.rev

    def sequence(self) -> list[Any]:
        """Return the current data items in order."""
        result: list[Any] = []
        stack: list[_Node] = []
        cur = self._root
        while stack or cur:
            while cur:
                self._push_down(cur)
                stack.append(cur)
                cur = cur.ch[0]
            cur = stack.pop()
            if not _is_sentinel(cur):
                result.append(cur.data)
            cur = cur.ch[1]
        return result