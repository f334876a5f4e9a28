import operator
import random

import pytest

from algokit.range_query import SegmentTree, SparseTable, ZkwTree


def _values(n, seed=1):
    rng = random.Random(seed)
    return [rng.randint(-50, 50) for _ in range(n)]


@pytest.mark.parametrize("combine,reducer", [(min, min), (max, max), (operator.add, sum)])
def test_segment_tree_matches_slices(combine, reducer):
    vals = _values(37)
    tree = SegmentTree(vals, combine)
    for left in range(len(vals)):
        for right in range(left, len(vals)):
            assert tree.query(left, right) == reducer(vals[left : right + 1])


def test_segment_tree_single_element():
    tree = SegmentTree([42], max)
    assert tree.query(0, 0) == 42


def test_segment_tree_rejects_bad_range():
    tree = SegmentTree([1, 2, 3], max)
    with pytest.raises(IndexError):
        tree.query(2, 1)
    with pytest.raises(IndexError):
        tree.query(0, 3)


def test_segment_tree_rejects_empty():
    with pytest.raises(ValueError):
        SegmentTree([], max)


@pytest.mark.parametrize("n", [1, 2, 5, 14, 30])
def test_zkw_sums_with_updates(n):
    vals = _values(n, seed=n)
    tree = ZkwTree(vals)
    rng = random.Random(n)
    for _ in range(50):
        pos, delta = rng.randrange(n), rng.randint(-9, 9)
        tree.modify(pos, delta)
        vals[pos] += delta
        left = rng.randrange(n)
        right = rng.randrange(left, n)
        assert tree.query(left, right) == sum(vals[left : right + 1])


def test_zkw_errors():
    tree = ZkwTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.modify(3, 1)
    with pytest.raises(IndexError):
        tree.query(-1, 2)


@pytest.mark.parametrize("combine", [max, min])
def test_sparse_table_matches_slices(combine):
    vals = _values(45, seed=3)
    table = SparseTable(vals, combine)
    for left in range(len(vals)):
        for right in range(left, len(vals)):
            assert table.query(left, right) == combine(vals[left : right + 1])


def test_sparse_table_default_is_max():
    vals = [3, 9, 1, 4]
    assert SparseTable(vals).query(0, 3) == max(vals)


def test_sparse_table_errors():
    with pytest.raises(ValueError):
        SparseTable([])
    with pytest.raises(IndexError):
        SparseTable([1]).query(0, 1)