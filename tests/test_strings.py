import os

import pytest

from algokit.strings import (
    kmp_search,
    lcp_array,
    manacher,
    prefix_function,
    suffix_array,
    z_function,
)

SAMPLES = ["", "a", "aaaa", "abab", "banana", "mississippi", "abcabcabd", "abacabadabacaba"]


def test_prefix_function_worked_example():
    assert prefix_function("aabaaab") == [0, 1, 0, 1, 2, 2, 3]


@pytest.mark.parametrize("s", SAMPLES)
def test_prefix_function_is_a_border(s):
    pi = prefix_function(s)
    assert len(pi) == len(s)
    for i, k in enumerate(pi):
        assert k <= i
        assert s[:k] == s[i + 1 - k : i + 1]


@pytest.mark.parametrize(
    "text,pattern",
    [("abababa", "aba"), ("mississippi", "issi"), ("aaaa", "a"), ("abc", "d"), ("ab", "abc")],
)
def test_kmp_search_finds_every_match(text, pattern):
    found = kmp_search(text, pattern)
    for p in found:
        assert text.startswith(pattern, p)
    hits = sum(text.startswith(pattern, i) for i in range(len(text)))
    assert len(found) == hits
    assert found == sorted(found)


def test_kmp_search_overlapping():
    assert kmp_search("aaaa", "aa") == [0, 1, 2]


def test_kmp_search_empty_pattern():
    with pytest.raises(ValueError):
        kmp_search("abc", "")


@pytest.mark.parametrize("s", SAMPLES)
def test_z_function_definition(s):
    z = z_function(s)
    assert len(z) == len(s)
    if s:
        assert z[0] == 0
    for i in range(1, len(s)):
        assert z[i] == len(os.path.commonprefix([s, s[i:]]))


@pytest.mark.parametrize("s", SAMPLES)
def test_manacher_longest_palindrome(s):
    radii = manacher(s)
    assert len(radii) == 2 * len(s) + 1
    palindromes = [
        j - i for i in range(len(s)) for j in range(i + 1, len(s) + 1) if s[i:j] == s[i:j][::-1]
    ]
    assert max(radii) == max(palindromes, default=0)


def test_manacher_radii_are_palindromes():
    s = "abacabadabacaba"
    for i, k in enumerate(manacher(s)):
        start = (i - k) // 2
        piece = s[start : start + k]
        assert piece == piece[::-1]


def test_suffix_array_banana():
    assert suffix_array("banana") == [5, 3, 1, 0, 4, 2]


@pytest.mark.parametrize("s", SAMPLES)
def test_suffix_array_sorted(s):
    sa = suffix_array(s)
    assert sorted(sa) == list(range(len(s)))
    suffixes = [s[i:] for i in sa]
    assert all(a < b for a, b in zip(suffixes, suffixes[1:]))


@pytest.mark.parametrize("s", SAMPLES)
def test_lcp_array(s):
    sa = suffix_array(s)
    lcp = lcp_array(s, sa)
    assert len(lcp) == len(s)
    if s:
        assert lcp[0] == 0
    for i in range(1, len(s)):
        assert lcp[i] == len(os.path.commonprefix([s[sa[i - 1] :], s[sa[i] :]]))


def test_lcp_array_rejects_bad_permutation():
    with pytest.raises(ValueError):
        lcp_array("abc", [0, 0, 1])