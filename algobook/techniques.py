"""Flipping and two-pointer techniques: cows facing forward, fliptile, shortest ranges."""

from collections import Counter
from itertools import product

_BACKWARD = "B"
_CROSS = ((-1, 0), (0, -1), (0, 0), (0, 1), (1, 0))


def _flip_count(forward, k):
    """Flips of width ``k`` needed to turn every cow forward, or None if impossible."""
    n = len(forward)
    flipped = [False] * n
    parity = 0
    count = 0
    for i, facing in enumerate(forward):
        if i + k <= n:
            if (facing + parity) % 2 == 0:
                flipped[i] = True
                count += 1
                parity ^= 1
        elif (facing + parity) % 2 == 0:
            return None
        if i - k + 1 >= 0 and flipped[i - k + 1]:
            parity ^= 1
    return count


def face_the_right_way(directions):
    """Return ``(flips, k)``: the fewest flips of ``k`` consecutive cows that turn
    every cow of ``directions`` (``'B'`` backward, anything else forward) forward,
    with the smallest such ``k``."""
    forward = [int(c != _BACKWARD) for c in directions]
    n = len(forward)
    results = []
    for k in range(1, n + 1):
        count = _flip_count(forward, k)
        results.append((n if count is None else count, k))
    return min(results, default=(n, 1))


def _colour(tiles, flips, row, column):
    width = len(tiles[0])
    value = tiles[row][column]
    for dr, dc in _CROSS:
        r, c = row + dr, column + dc
        if 0 <= r < len(flips) and 0 <= c < width:
            value += flips[r][c]
    return value % 2


def fliptile(tiles):
    """Find which cells to flip so every tile of the 0/1 grid becomes 0.

    Flipping a cell toggles it and its four neighbours. Returns the grid of
    flips with the fewest flips, the lexicographically smallest on ties, or
    None when no flips clear the grid.
    """
    grid = [list(row) for row in tiles]
    if not grid:
        return []
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all rows must have the same length")
    height = len(grid)

    best = None
    best_count = None
    for first in product((0, 1), repeat=width):
        flips = [list(first)]
        for row in range(1, height):
            flips.append([_colour(grid, flips, row - 1, c) for c in range(width)])
        if any(_colour(grid, flips, height - 1, c) for c in range(width)):
            continue
        count = sum(map(sum, flips))
        if best_count is None or count < best_count:
            best, best_count = flips, count
    return best


def shortest_subarray(values, target):
    """Length of the shortest run of consecutive ``values`` summing to at least
    ``target``, or None if there is none."""
    if target <= 0:
        raise ValueError(f"target must be positive, got {target}")
    values = list(values)
    best = None
    total = 0
    left = 0
    for right, x in enumerate(values):
        total += x
        while left <= right and total >= target:
            length = right - left + 1
            best = length if best is None else min(best, length)
            total -= values[left]
            left += 1
    return best


def shortest_covering_range(pages):
    """Length of the shortest run of consecutive ``pages`` holding every distinct item."""
    pages = list(pages)
    kinds = len(set(pages))
    seen = Counter()
    covered = 0
    best = len(pages)
    left = 0
    for right, page in enumerate(pages):
        seen[page] += 1
        if seen[page] == 1:
            covered += 1
        while covered == kinds:
            best = min(best, right - left + 1)
            seen[pages[left]] -= 1
            if seen[pages[left]] == 0:
                covered -= 1
            left += 1
    return best