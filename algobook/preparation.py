"""Warm-up problems: ants on a pole, four cards reaching a total, largest triangle."""

from bisect import bisect_left
from itertools import combinations, product


def ants(length, positions):
    """Return ``(latest, earliest)``: the longest and shortest times for every
    ant on a pole of ``length`` to fall off, each ant moving one unit per step."""
    latest = 0
    earliest = 0
    for x in positions:
        near, far = (x, length - x) if 2 * x <= length else (length - x, x)
        earliest = max(earliest, near)
        latest = max(latest, far)
    return latest, earliest


def contains(sorted_values, x):
    """Binary search: tell whether ``x`` occurs in the ascending ``sorted_values``."""
    index = bisect_left(sorted_values, x)
    return index < len(sorted_values) and sorted_values[index] == x


def four_cards_exhaustive(cards, total):
    """Tell whether four cards, repeats allowed, can sum to ``total``.

    Tries every triple and binary-searches for the fourth card.
    """
    cards = sorted(cards)
    return any(
        contains(cards, total - a - b - c) for a, b, c in product(cards, repeat=3)
    )


def four_cards(cards, total):
    """Tell whether four cards, repeats allowed, can sum to ``total``.

    Sums every pair once and binary-searches among those sums.
    """
    pair_sums = sorted(a + b for a, b in product(cards, repeat=2))
    return any(contains(pair_sums, total - s) for s in pair_sums)


def largest_triangle(sticks):
    """Return the largest perimeter of a triangle made from three of the sticks, or 0."""
    return max(
        (
            sum(trio)
            for trio in combinations(sticks, 3)
            if max(trio) < sum(trio) - max(trio)
        ),
        default=0,
    )