"""Shortest paths (Bellman-Ford, Dijkstra) and bipartite checking."""

import heapq
from collections import deque
from math import inf
from typing import NamedTuple


class Edge(NamedTuple):
    """A directed edge from ``start`` to ``end`` with a cost."""

    start: int
    end: int
    cost: float


def bellman_ford(vertex_count, edges, source):
    """Shortest distances from ``source``; unreachable vertices get ``inf``.

    Raises ValueError when a negative cycle is reachable from ``source``.
    """
    edges = list(edges)
    distance = [inf] * vertex_count
    distance[source] = 0
    for _ in range(vertex_count):
        updated = False
        for start, end, cost in edges:
            if distance[start] != inf and distance[end] > distance[start] + cost:
                distance[end] = distance[start] + cost
                updated = True
        if not updated:
            return distance
    raise ValueError("a negative cycle is reachable from the source")


def has_negative_loop(vertex_count, edges):
    """Tell whether the graph holds a negative cycle anywhere."""
    edges = list(edges)
    distance = [0] * vertex_count
    for round_number in range(vertex_count):
        for start, end, cost in edges:
            if distance[end] > distance[start] + cost:
                distance[end] = distance[start] + cost
                if round_number == vertex_count - 1:
                    return True
    return False


def dijkstra_dense(cost, source):
    """Shortest distances from ``source`` over a cost matrix (``inf`` for no edge)."""
    n = len(cost)
    distance = [inf] * n
    distance[source] = 0
    used = [False] * n
    while True:
        nearest = min(
            (u for u in range(n) if not used[u]),
            key=distance.__getitem__,
            default=None,
        )
        if nearest is None:
            return distance
        used[nearest] = True
        for u, step in enumerate(cost[nearest]):
            distance[u] = min(distance[u], distance[nearest] + step)


def dijkstra(adjacency, source):
    """Shortest distances from ``source`` over adjacency lists of ``(to, cost)`` pairs."""
    distance = [inf] * len(adjacency)
    distance[source] = 0
    queue = [(0, source)]
    while queue:
        d, v = heapq.heappop(queue)
        if distance[v] < d:
            continue
        for to, step in adjacency[v]:
            if distance[to] > d + step:
                distance[to] = d + step
                heapq.heappush(queue, (distance[to], to))
    return distance


def is_bipartite(vertex_count, edges):
    """Tell whether the undirected graph given by ``(s, t)`` pairs is two-colourable."""
    neighbours = [[] for _ in range(vertex_count)]
    for s, t in edges:
        neighbours[s].append(t)
        neighbours[t].append(s)
    colour = [0] * vertex_count
    for first in range(vertex_count):
        if colour[first]:
            continue
        colour[first] = 1
        queue = deque([first])
        while queue:
            v = queue.popleft()
            for u in neighbours[v]:
                if colour[u] == colour[v]:
                    return False
                if not colour[u]:
                    colour[u] = -colour[v]
                    queue.append(u)
    return True