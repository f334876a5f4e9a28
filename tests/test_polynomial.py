import io

import pytest

from algokit.polynomial import fft, main, multiply


def _evaluate(coeffs, x):
    return sum(c * x ** i for i, c in enumerate(coeffs))


def test_fft_of_impulse_is_flat():
    assert fft([1, 0, 0, 0]) == pytest.approx([1, 1, 1, 1])


def test_fft_round_trip():
    values = [3, -1, 4, 1, 5, 9, 2, 6]
    assert fft(fft(values), invert=True) == pytest.approx([complex(v) for v in values])


def test_fft_requires_power_of_two():
    with pytest.raises(ValueError):
        fft([1, 2, 3])


@pytest.mark.parametrize(
    "a,b",
    [([1, 2], [1, 2, 1]), ([5], [3, 0, 7]), ([1, 1, 1, 1, 1], [2, 3, 4, 5]), ([9, 0, 8], [7, 6])],
)
def test_multiply_evaluation_identity(a, b):
    product = multiply(a, b)
    assert len(product) == len(a) + len(b) - 1
    for x in (-2, -1, 0, 1, 2, 3):
        assert _evaluate(product, x) == _evaluate(a, x) * _evaluate(b, x)


def test_multiply_empty():
    assert multiply([], [1, 2]) == []


def test_main_prints_product(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2\n1 2\n1 2 1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert [int(t) for t in out.split()] == multiply([1, 2], [1, 2, 1])