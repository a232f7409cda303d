"""Greedy algorithms: best cow line, fence repair, coin change and task selection."""

import heapq
from collections import deque

COIN_VALUES = (1, 5, 10, 50, 100, 500)


def best_cow_line(s):
    """Build a string by repeatedly taking the smaller end character of ``s``;
    on a tie the back character is taken."""
    line = deque(s)
    result = []
    while line:
        result.append(line.popleft() if line[0] < line[-1] else line.pop())
    return "".join(result)


def fence_repair_sorting(boards):
    """Minimum total cost of cutting a board into ``boards``, re-sorting each step."""
    boards = list(boards)
    total = 0
    while len(boards) > 1:
        boards.sort()
        merged = boards[0] + boards[1]
        total += merged
        boards[:2] = [merged]
    return total


def fence_repair(boards):
    """Minimum total cost of cutting a board into ``boards``, using a min-heap."""
    heap = list(boards)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total


def min_coins(counts, amount):
    """Number of coins used paying ``amount`` greedily.

    ``counts`` gives how many coins of 1, 5, 10, 50, 100 and 500 are available.
    """
    counts = tuple(counts)
    if len(counts) != len(COIN_VALUES):
        raise ValueError(f"expected {len(COIN_VALUES)} coin counts, got {len(counts)}")
    used = 0
    for value, available in reversed(list(zip(COIN_VALUES, counts))):
        take = min(amount // value, available)
        used += take
        amount -= take * value
    return used


def max_tasks(starts, ends):
    """Largest number of tasks that can be done one after another.

    A task is taken when it starts strictly after the last taken task ended.
    """
    tasks = sorted(zip(ends, starts, strict=True))
    done = 0
    now = 0
    for end, start in tasks:
        if start > now:
            done += 1
            now = end
    return done