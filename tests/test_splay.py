import bisect
import random

import pytest

from algokit.splay import SequenceSplay, SplayTree


def _filled(seed=2, n=200):
    rng = random.Random(seed)
    values = [rng.randint(-60, 60) for _ in range(n)]
    tree = SplayTree()
    for v in values:
        tree.insert(v)
    return tree, sorted(values)


def test_kth_returns_sorted_order():
    tree, model = _filled()
    assert len(tree) == len(model)
    assert [tree.kth(i) for i in range(1, len(model) + 1)] == model


def test_rank_counts_smaller_values():
    tree, model = _filled()
    for v in range(-65, 66):
        assert tree.rank(v) == bisect.bisect_left(model, v) + 1


def test_predecessor_and_successor():
    tree, model = _filled()
    for v in range(-65, 66):
        i = bisect.bisect_left(model, v)
        j = bisect.bisect_right(model, v)
        assert tree.predecessor(v) == (model[i - 1] if i else None)
        assert tree.successor(v) == (model[j] if j < len(model) else None)


def test_remove_matches_model():
    tree, model = _filled()
    rng = random.Random(4)
    for _ in range(150):
        v = rng.randint(-60, 60)
        present = v in model
        assert tree.remove(v) == present
        if present:
            model.remove(v)
        assert len(tree) == len(model)
    assert [tree.kth(i) for i in range(1, len(model) + 1)] == model


def test_empty_tree_queries():
    tree = SplayTree()
    assert len(tree) == 0
    assert tree.predecessor(1) is None
    assert tree.successor(1) is None
    with pytest.raises(IndexError):
        tree.kth(1)


def _sequence(n):
    seq = SequenceSplay()
    for i in range(1, n + 1):
        seq.insert(i, f"item{i}")
    return seq, [f"item{i}" for i in range(1, n + 1)]


def test_sequence_in_insertion_order():
    seq, model = _sequence(8)
    assert seq.sequence() == model
    assert len(seq) == len(model)


def test_random_reversals_match_list():
    seq, model = _sequence(30)
    rng = random.Random(6)
    for _ in range(60):
        left = rng.randint(1, 30)
        right = rng.randint(left, 30)
        seq.reverse(left, right)
        model[left - 1 : right] = model[left - 1 : right][::-1]
        assert seq.sequence() == model
    assert [seq.kth(k) for k in range(1, 31)] == model


def test_reverse_whole_sequence():
    seq, model = _sequence(5)
    seq.reverse(1, 5)
    assert seq.sequence() == model[::-1]


def test_reverse_rejects_bad_range():
    seq, _ = _sequence(4)
    with pytest.raises(IndexError):
        seq.reverse(3, 2)
    with pytest.raises(IndexError):
        seq.reverse(1, 5)