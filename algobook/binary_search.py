"""Searching on the answer: aggressive cows, maximum average, cable master, lower bound."""

import heapq
from bisect import bisect_left
from math import floor

_DISTANCE_LIMIT = 1_000_000_001
_AVERAGE_LIMIT = 1_000_001.0
_CABLE_MIN = 0.1
_CABLE_MAX = 1_000_000.0
_ITERATIONS = 100


def aggressive_cows(positions, cows):
    """Largest minimum gap possible when placing ``cows`` in stalls at ``positions``."""
    stalls = sorted(positions)
    if not stalls:
        raise ValueError("at least one stall is needed")

    def fits(gap):
        placed = 1
        last = stalls[0]
        for x in stalls[1:]:
            if last + gap <= x:
                placed += 1
                last = x
        return placed >= cows

    low, high = 0, _DISTANCE_LIMIT
    while high - low > 1:
        mid = (low + high) // 2
        if fits(mid):
            low = mid
        else:
            high = mid
    return low


def max_average(items, k):
    """Largest value-per-weight ratio of ``k`` items chosen from ``(weight, value)`` pairs."""
    items = list(items)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must lie in 1..{len(items)}, got {k}")
    low, high = 0.0, _AVERAGE_LIMIT
    for _ in range(_ITERATIONS):
        mid = (low + high) / 2
        gains = heapq.nlargest(k, (value - weight * mid for weight, value in items))
        if sum(gains) >= 0:
            low = mid
        else:
            high = mid
    return low


def cable_master(lengths, pieces):
    """Longest piece length so that ``pieces`` equal pieces can be cut from the cables.

    Cable lengths are truncated to whole units before cutting.
    """
    whole = [int(length) for length in lengths]
    low, high = _CABLE_MIN, _CABLE_MAX
    for _ in range(_ITERATIONS):
        mid = (low + high) / 2
        if sum(floor(length / mid) for length in whole) >= pieces:
            low = mid
        else:
            high = mid
    return low


def lower_bound(values, key):
    """Index of the first element of the ascending ``values`` not less than ``key``."""
    return bisect_left(values, key)