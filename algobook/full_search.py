"""Exhaustive search: flood fill, permutations, maze BFS and subset sums."""

from collections import deque

_WATER = "W"
_WALL = "#"
_START = "S"
_GOAL = "G"


def count_lakes(grid):
    """Count 8-connected groups of ``'W'`` cells in a grid of strings."""
    water = {
        (i, j)
        for i, row in enumerate(grid)
        for j, cell in enumerate(row)
        if cell == _WATER
    }
    lakes = 0
    while water:
        stack = [water.pop()]
        lakes += 1
        while stack:
            i, j = stack.pop()
            for di in (-1, 0, 1):
                for dj in (-1, 0, 1):
                    neighbour = (i + di, j + dj)
                    if neighbour in water:
                        water.remove(neighbour)
                        stack.append(neighbour)
    return lakes


def permutations_recursive(n):
    """Yield every ordering of ``0..n-1`` as a tuple, built by backtracking."""
    used = [False] * n
    current = []

    def extend():
        if len(current) == n:
            yield tuple(current)
            return
        for value, taken in enumerate(used):
            if not taken:
                used[value] = True
                current.append(value)
                yield from extend()
                current.pop()
                used[value] = False

    yield from extend()


def next_permutation(sequence):
    """Return the next permutation of ``sequence`` in lexicographic order as a
    list, or ``None`` when ``sequence`` is already the last one."""
    items = list(sequence)
    pivot = next(
        (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]),
        None,
    )
    if pivot is None:
        return None
    successor = max(
        j for j in range(pivot + 1, len(items)) if items[j] > items[pivot]
    )
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    return items


def permutations_lexicographic(n):
    """Yield every ordering of ``0..n-1`` as a tuple by repeated next_permutation."""
    current = list(range(n))
    while current is not None:
        yield tuple(current)
        current = next_permutation(current)


def maze_shortest_path(maze):
    """Return the fewest steps from ``'S'`` to ``'G'`` avoiding ``'#'``,
    or ``None`` if the goal cannot be reached."""
    start = goal = None
    for i, row in enumerate(maze):
        for j, cell in enumerate(row):
            if cell == _START:
                start = (i, j)
            elif cell == _GOAL:
                goal = (i, j)
    if start is None or goal is None:
        raise ValueError("maze needs both a start 'S' and a goal 'G'")

    distance = {start: 0}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == goal:
            break
        i, j = cell
        for ni, nj in ((i + 1, j), (i, j + 1), (i - 1, j), (i, j - 1)):
            if (
                0 <= ni < len(maze)
                and 0 <= nj < len(maze[ni])
                and maze[ni][nj] != _WALL
                and (ni, nj) not in distance
            ):
                distance[(ni, nj)] = distance[cell] + 1
                queue.append((ni, nj))
    return distance.get(goal)


def subset_sum(values, target):
    """Tell whether some subset of ``values`` sums exactly to ``target``."""
    values = tuple(values)

    def search(depth, remaining):
        if depth == len(values):
            return remaining == 0
        return search(depth + 1, remaining - values[depth]) or search(
            depth + 1, remaining
        )

    return search(0, target)