from itertools import combinations
from math import floor

import pytest

from algobook.binary_search import (
    aggressive_cows,
    cable_master,
    lower_bound,
    max_average,
)


def _placed(stalls, gap):
    stalls = sorted(stalls)
    placed, last = 1, stalls[0]
    for x in stalls[1:]:
        if last + gap <= x:
            placed += 1
            last = x
    return placed


def test_aggressive_cows_worked_example():
    assert aggressive_cows([1, 2, 8, 4, 9], 3) == 3


@pytest.mark.parametrize(
    "stalls, cows",
    [([1, 2, 8, 4, 9], 2), ([0, 10, 20, 30, 40], 4), ([5, 1, 9, 13, 2, 7], 3)],
)
def test_aggressive_cows_is_tight(stalls, cows):
    gap = aggressive_cows(stalls, cows)
    assert _placed(stalls, gap) >= cows
    assert _placed(stalls, gap + 1) < cows


def test_aggressive_cows_two_cows_span_everything():
    stalls = [3, 17, 8, 11]
    assert aggressive_cows(stalls, 2) == max(stalls) - min(stalls)


def test_aggressive_cows_needs_stalls():
    with pytest.raises(ValueError):
        aggressive_cows([], 2)


@pytest.mark.parametrize(
    "items, k",
    [
        ([(2, 2), (5, 3), (2, 1)], 2),
        ([(1, 5), (3, 4), (2, 8), (4, 1)], 3),
        ([(7, 3), (1, 1)], 1),
    ],
)
def test_max_average_matches_best_selection(items, k):
    best = max(
        sum(v for _, v in chosen) / sum(w for w, _ in chosen)
        for chosen in combinations(items, k)
    )
    assert max_average(items, k) == pytest.approx(best, abs=1e-6)


def test_max_average_worked_example():
    assert max_average([(2, 2), (5, 3), (2, 1)], 2) == pytest.approx(0.75, abs=1e-6)


@pytest.mark.parametrize("k", [0, 4])
def test_max_average_rejects_bad_k(k):
    with pytest.raises(ValueError):
        max_average([(1, 1), (2, 2), (3, 3)], k)


def test_cable_master_worked_example():
    assert cable_master([8.02, 7.43, 4.57, 5.39], 11) == pytest.approx(2.0, abs=1e-6)


@pytest.mark.parametrize(
    "lengths, pieces", [([10, 20, 30], 7), ([100], 3), ([5, 5, 5, 5], 9)]
)
def test_cable_master_cuts_enough(lengths, pieces):
    length = cable_master(lengths, pieces)
    assert sum(floor(x / length) for x in lengths) >= pieces
    assert sum(floor(x / (length * 1.001)) for x in lengths) < pieces


def test_lower_bound_worked_example():
    values = [2, 3, 3, 5, 6]
    index = lower_bound(values, 3)
    assert values[index] == 3
    assert all(v < 3 for v in values[:index])


@pytest.mark.parametrize("key", [-1, 0, 2, 3, 4, 5, 6, 7])
def test_lower_bound_partitions(key):
    values = [0, 2, 2, 3, 5, 5, 5, 6]
    index = lower_bound(values, key)
    assert all(v < key for v in values[:index])
    assert all(v >= key for v in values[index:])


def test_lower_bound_past_end():
    values = [1, 2, 3]
    assert lower_bound(values, 10) == len(values)