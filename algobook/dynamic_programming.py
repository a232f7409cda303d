"""Dynamic programming: knapsacks, subsequences, combinations and partitions."""

from bisect import bisect_left
from math import inf


def _check_capacity(capacity):
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")


def knapsack(items, capacity):
    """Best total value of ``(weight, value)`` items, each used at most once,
    whose weights fit in ``capacity``."""
    _check_capacity(capacity)
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight < 0:
            raise ValueError(f"weights must not be negative, got {weight}")
        for room in range(capacity, max(weight, 1) - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def knapsack_by_value(items, capacity, max_value=100):
    """0/1 knapsack solved over value totals, for large capacities.

    Each item's value must lie in ``0..max_value``.
    """
    _check_capacity(capacity)
    items = list(items)
    for weight, value in items:
        if not 0 <= value <= max_value:
            raise ValueError(f"item value {value} outside 0..{max_value}")
        if weight < 0:
            raise ValueError(f"weights must not be negative, got {weight}")
    limit = max_value * len(items)
    lightest = [0] + [inf] * limit
    for weight, value in items:
        for total in range(limit, max(value, 1) - 1, -1):
            lightest[total] = min(lightest[total], lightest[total - value] + weight)
    return next(
        (total for total in range(limit, 0, -1) if lightest[total] <= capacity), 0
    )


def unbounded_knapsack(items, capacity):
    """Best total value when each ``(weight, value)`` item may be used any number of times."""
    _check_capacity(capacity)
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight <= 0:
            raise ValueError(f"weights must be positive, got {weight}")
        for room in range(weight, capacity + 1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def longest_common_subsequence(s, t):
    """Length of the longest common subsequence of ``s`` and ``t``."""
    previous = [0] * (len(t) + 1)
    for a in s:
        current = [0]
        for j, b in enumerate(t):
            if a == b:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def longest_increasing_subsequence_quadratic(values):
    """Length of the longest strictly increasing subsequence, in quadratic time."""
    values = list(values)
    ending = []
    for x in values:
        ending.append(
            1 + max((length for y, length in zip(values, ending) if y < x), default=0)
        )
    return max(ending, default=0)


def longest_increasing_subsequence(values):
    """Length of the longest strictly increasing subsequence, in n log n time."""
    tails = []
    for x in values:
        index = bisect_left(tails, x)
        if index == len(tails):
            tails.append(x)
        else:
            tails[index] = x
    return len(tails)


def _check_modulus(modulus):
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")


def multiset_combinations(counts, m, modulus):
    """Ways to pick ``m`` items when kind ``i`` has ``counts[i]`` identical
    items, modulo ``modulus``."""
    _check_modulus(modulus)
    if m < 0:
        raise ValueError(f"m must not be negative, got {m}")
    ways = [1] + [0] * m
    for available in counts:
        current = [1]
        for picked in range(1, m + 1):
            total = current[picked - 1] + ways[picked]
            if picked - 1 - available >= 0:
                total -= ways[picked - 1 - available]
            current.append(total % modulus)
        ways = current
    return ways[m] % modulus


def partition_count(n, m, modulus):
    """Ways to write ``n`` as a sum of at most ``m`` positive parts, modulo ``modulus``."""
    _check_modulus(modulus)
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    ways = [1] + [0] * n
    for part in range(1, m + 1):
        for total in range(part, n + 1):
            ways[total] = (ways[total] + ways[total - part]) % modulus
    return ways[n] % modulus


def bounded_subset_sum(values, counts, target):
    """Tell whether ``target`` is a sum using value ``values[i]`` at most ``counts[i]`` times."""
    if target < 0:
        raise ValueError(f"target must not be negative, got {target}")
    left = [0] + [-1] * target
    for value, count in zip(values, counts, strict=True):
        if value < 0:
            raise ValueError(f"values must not be negative, got {value}")
        current = []
        for total, previous in enumerate(left):
            if previous >= 0:
                current.append(count)
            elif value == 0 or total < value or current[total - value] <= 0:
                current.append(-1)
            else:
                current.append(current[total - value] - 1)
        left = current
    return left[target] >= 0