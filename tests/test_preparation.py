import random

import pytest

from algobook.preparation import (
    ants,
    contains,
    four_cards,
    four_cards_exhaustive,
    largest_triangle,
)


def test_ants_worked_example():
    assert ants(10, [2, 6, 7]) == (8, 4)


@pytest.mark.parametrize("seed", range(5))
def test_ants_is_symmetric_and_bounded(seed):
    rng = random.Random(seed)
    length = rng.randint(1, 50)
    positions = [rng.randint(0, length) for _ in range(rng.randint(1, 10))]
    latest, earliest = ants(length, positions)
    assert earliest <= latest <= length
    assert ants(length, [length - x for x in positions]) == (latest, earliest)


@pytest.mark.parametrize("seed", range(5))
def test_contains_agrees_with_membership(seed):
    rng = random.Random(seed)
    values = sorted(rng.randint(-20, 20) for _ in range(rng.randint(0, 15)))
    for x in range(-25, 26):
        assert contains(values, x) == (x in values)


def test_contains_empty():
    assert contains([], 3) is False


@pytest.mark.parametrize("seed", range(8))
def test_four_card_strategies_agree(seed):
    rng = random.Random(seed)
    cards = [rng.randint(1, 20) for _ in range(rng.randint(1, 6))]
    for total in range(0, 90, 3):
        assert four_cards(cards, total) == four_cards_exhaustive(cards, total)


def test_four_cards_reachable_and_unreachable():
    cards = [3, 8, 11, 4]
    chosen = [cards[0], cards[2], cards[2], cards[3]]
    assert four_cards(cards, sum(chosen)) is True
    assert four_cards_exhaustive(cards, sum(chosen)) is True
    too_big = 4 * max(cards) + 1
    assert four_cards(cards, too_big) is False
    assert four_cards_exhaustive(cards, too_big) is False


def test_largest_triangle_examples():
    assert largest_triangle([2, 3, 4, 5, 10]) == 12
    assert largest_triangle([4, 5, 10, 20]) == 0


def test_largest_triangle_equilateral():
    assert largest_triangle([7, 7, 7]) == 3 * 7