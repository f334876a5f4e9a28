"""Suffix automata (single and multi-string) and the Aho-Corasick automaton."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _walk(nexts: list[dict[str, int]], s: str) -> bool:
    state = 0
    for ch in s:
        state = nexts[state].get(ch, -1)
        if state < 0:
            return False
    return True


def _count_substrings(lengths: list[int], links: list[int]) -> int:
    return sum(lengths[v] - lengths[links[v]] for v in range(1, len(lengths)))


class _StateStore:
    def __init__(self) -> None:
        self._len: list[int] = [0]
        self._link: list[int] = [-1]
        self._next: list[dict[str, int]] = [{}]

    def _new_state(self, length: int = 0, link: int = -1, nxt: dict[str, int] | None = None) -> int:
        self._len.append(length)
        self._link.append(link)
        self._next.append(dict(nxt) if nxt else {})
        return len(self._len) - 1

    def __len__(self) -> int:
        return len(self._len)


class SuffixAutomaton(_StateStore):
    """Suffix automaton of a single string, built one character at a time."""

    def __init__(self, text: str = "") -> None:
        super().__init__()
        self._last = 0
        for ch in text:
            self.extend(ch)

    def extend(self, c: str) -> None:
        """Append the character ``c`` to the indexed string."""
        if len(c) != 1:
            raise ValueError("extend takes exactly one character")
        cur = self._new_state(self._len[self._last] + 1)
        p = self._last
        while p != -1 and c not in self._next[p]:
            self._next[p][c] = cur
            p = self._link[p]
        if p == -1:
            self._link[cur] = 0
        else:
            q = self._next[p][c]
            if self._len[p] + 1 == self._len[q]:
                self._link[cur] = q
            else:
                clone = self._new_state(self._len[p] + 1, self._link[q], self._next[q])
                while p != -1 and self._next[p].get(c) == q:
                    self._next[p][c] = clone
                    p = self._link[p]
                self._link[q] = self._link[cur] = clone
        self._last = cur

    def contains(self, s: str) -> bool:
        """Return True if ``s`` is a substring of the indexed text."""
        return _walk(self._next, s)

    def distinct_substrings(self) -> int:
        """Return the number of distinct non-empty substrings."""
        return _count_substrings(self._len, self._link)


class GeneralSuffixAutomaton(_StateStore):
    """Suffix automaton of several strings, built breadth-first over their trie."""

    def __init__(self, strings: Iterable[str]) -> None:
        super().__init__()
        for s in strings:
            state = 0
            for ch in s:
                nxt = self._next[state].get(ch)
                if nxt is None:
                    nxt = self._new_state()
                    self._next[state][ch] = nxt
                state = nxt
        self._build()

    def contains(self, s: str) -> bool:
        """Return True if ``s`` is a substring of any indexed string."""
        return _walk(self._next, s)

    def distinct_substrings(self) -> int:
        """Return the number of distinct non-empty substrings over all strings."""
        return _count_substrings(self._len, self._link)

    def _build(self) -> None:
        queue = deque((ch, 0) for ch in self._next[0])
        while queue:
            ch, last = queue.popleft()
            cur = self._extend(ch, last)
            queue.extend((c, cur) for c in self._next[cur])

    def _extend(self, c: str, last: int) -> int:
        cur = self._next[last][c]
        if self._len[cur]:
            return cur
        self._len[cur] = self._len[last] + 1
        p = self._link[last]
        while p != -1 and c not in self._next[p]:
            self._next[p][c] = cur
            p = self._link[p]
        if p == -1:
            self._link[cur] = 0
            return cur
        q = self._next[p][c]
        if self._len[p] + 1 == self._len[q]:
            self._link[cur] = q
            return cur
        kept = {ch: t for ch, t in self._next[q].items() if self._len[t]}
        clone = self._new_state(self._len[p] + 1, self._link[q], kept)
        while p != -1 and self._next[p].get(c) == q:
            self._next[p][c] = clone
            p = self._link[p]
        self._link[cur] = self._link[q] = clone
        return cur


class AhoCorasick:
    """Counts occurrences of many patterns in a text in one pass."""

    def __init__(self, patterns: Iterable[str]) -> None:
        self._children: list[dict[str, int]] = [{}]
        self._match: list[int] = []
        for pattern in patterns:
            if not pattern:
                raise ValueError("patterns must not be empty")
            node = 0
            for ch in pattern:
                nxt = self._children[node].get(ch)
                if nxt is None:
                    nxt = len(self._children)
                    self._children.append({})
                    self._children[node][ch] = nxt
                node = nxt
            self._match.append(node)
        self._fail = [0] * len(self._children)
        self._order: list[int] = []
        queue = deque(self._children[0].values())
        while queue:
            u = queue.popleft()
            self._order.append(u)
            for ch, v in self._children[u].items():
                self._fail[v] = self._step(self._fail[u], ch) if u else 0
                queue.append(v)

    def _step(self, node: int, ch: str) -> int:
        while node and ch not in self._children[node]:
            node = self._fail[node]
        return self._children[node].get(ch, 0)

    def count_occurrences(self, text: str) -> list[int]:
        """Return, per pattern in insertion order, how often it occurs in ``text``."""
        hits = [0] * len(self._children)
        node = 0
        for ch in text:
            node = self._step(node, ch)
            hits[node] += 1
        for u in reversed(self._order):
            hits[self._fail[u]] += hits[u]
        return [hits[node] for node in self._match]