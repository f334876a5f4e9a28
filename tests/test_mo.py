import io
import random

import pytest

from algokit.mo import distinct_counts, main


def simulate(values, operations):
    arr = list(values)
    out = []
    for kind, a, b in operations:
        if kind == "Q":
            out.append(len(set(arr[a : b + 1])))
        else:
            arr[a] = b
    return out


def test_queries_without_updates():
    values = [1, 2, 1, 3, 2, 2]
    ops = [("Q", 0, 5), ("Q", 0, 0), ("Q", 1, 3), ("Q", 4, 5)]
    assert distinct_counts(values, ops) == simulate(values, ops)


def test_updates_change_answers():
    values = [1, 1, 2]
    ops = [("Q", 0, 2), ("R", 2, 1), ("Q", 0, 2)]
    assert distinct_counts(values, ops) == simulate(values, ops)


@pytest.mark.parametrize("seed", range(5))
def test_random_against_simulation(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 30)
    values = [rng.randint(1, 6) for _ in range(n)]
    ops = []
    for _ in range(60):
        if rng.random() < 0.6:
            a = rng.randrange(n)
            b = rng.randrange(a, n)
            ops.append(("Q", a, b))
        else:
            ops.append(("R", rng.randrange(n), rng.randint(1, 6)))
    assert distinct_counts(values, ops) == simulate(values, ops)


def test_input_not_modified():
    values = [1, 2, 3]
    distinct_counts(values, [("R", 0, 9), ("Q", 0, 2)])
    assert values == [1, 2, 3]


def test_unknown_operation():
    with pytest.raises(ValueError):
        distinct_counts([1, 2], [("X", 0, 1)])


def test_bad_range():
    with pytest.raises(IndexError):
        distinct_counts([1, 2], [("Q", 1, 5)])


def test_bad_position():
    with pytest.raises(IndexError):
        distinct_counts([1, 2], [("R", 2, 1)])


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 3\n1 1 2\nQ 1 3\nR 3 1\nQ 1 3\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == ["2", "1"]