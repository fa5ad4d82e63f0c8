"""Shared fixtures and reference helpers for core unit tests"""

import random

import pytest


def _reference_distance(a, b) -> int:
    """Insert/delete edit distance via the O(n*m) longest-common-subsequence table."""
    n, m = len(a), len(b)
    lcs = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        for j in range(m - 1, -1, -1):
            if a[i] == b[j]:
                lcs[i][j] = lcs[i + 1][j + 1] + 1
            else:
                lcs[i][j] = max(lcs[i + 1][j], lcs[i][j + 1])
    return n + m - 2 * lcs[0][0]


def _random_pairs(count: int, seed: int = 7) -> list[tuple[list[str], list[str]]]:
    rng = random.Random(seed)
    pairs = []
    for _ in range(count):
        a = [rng.choice("abcd") for _ in range(rng.randint(0, 12))]
        b = [rng.choice("abcd") for _ in range(rng.randint(0, 12))]
        pairs.append((a, b))
    return pairs


SAMPLE_PAIRS = [
    ([], []),
    ([], ["a"]),
    (["a"], []),
    (list("abc"), list("abc")),
    (list("abc"), list("axc")),
    (list("ABCABBA"), list("CBABAC")),
    (list("abc"), list("xy")),
    (list("abcdef"), list("abxdefg")),
    (["x"] * 5, ["x"] * 3),
] + _random_pairs(40)


@pytest.fixture(name="sample_pairs")
def sample_pairs_fixture():
    return SAMPLE_PAIRS


@pytest.fixture(name="reference_distance")
def reference_distance_fixture():
    return _reference_distance
