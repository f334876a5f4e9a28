import bisect
import random

import pytest

from algokit.treap import Treap


def _filled(seed=5, n=150):
    rng = random.Random(seed)
    values = [rng.randint(-100, 100) for _ in range(n)]
    treap = Treap(seed=seed)
    for v in values:
        treap.insert(v)
    return treap, sorted(values)


def test_kth_returns_sorted_order():
    treap, model = _filled()
    assert len(treap) == len(model)
    assert [treap.kth(i) for i in range(1, len(model) + 1)] == model


def test_rank_of_present_and_absent_values():
    treap, model = _filled()
    for v in range(-105, 106):
        below = bisect.bisect_left(model, v)
        expected = below + 1 if v in model else below
        assert treap.rank(v) == expected


def test_predecessor_and_successor():
    treap, model = _filled()
    for v in range(-105, 106):
        i = bisect.bisect_left(model, v)
        j = bisect.bisect_right(model, v)
        assert treap.predecessor(v) == (model[i - 1] if i else None)
        assert treap.successor(v) == (model[j] if j < len(model) else None)


def test_remove_keeps_order_and_size():
    treap, model = _filled()
    rng = random.Random(11)
    for _ in range(100):
        v = rng.randint(-100, 100)
        present = v in model
        assert treap.remove(v) == present
        if present:
            model.remove(v)
        assert len(treap) == len(model)
    assert [treap.kth(i) for i in range(1, len(model) + 1)] == model


def test_empty_treap():
    treap = Treap()
    assert len(treap) == 0
    assert treap.predecessor(3) is None
    assert treap.successor(3) is None
    assert treap.remove(3) is False


def test_kth_out_of_range():
    treap, model = _filled(n=10)
    with pytest.raises(IndexError):
        treap.kth(0)
    with pytest.raises(IndexError):
        treap.kth(len(model) + 1)