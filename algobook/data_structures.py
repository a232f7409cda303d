"""Priority queue and union-find problems: expedition refuelling and the food chain."""

import heapq


class UnionFind:
    """Disjoint sets over ``0..n-1`` with union by size and path compression."""

    def __init__(self, n):
        self._parent = [-1] * n

    def root(self, a):
        """Return the representative of ``a``'s set."""
        path = []
        while self._parent[a] >= 0:
            path.append(a)
            a = self._parent[a]
        for node in path:
            self._parent[node] = a
        return a

    def size(self, a):
        """Return the number of elements in ``a``'s set."""
        return -self._parent[self.root(a)]

    def connect(self, a, b):
        """Merge the sets of ``a`` and ``b``; return False if already together."""
        a, b = self.root(a), self.root(b)
        if a == b:
            return False
        if self.size(a) < self.size(b):
            a, b = b, a
        self._parent[a] += self._parent[b]
        self._parent[b] = a
        return True


def expedition(positions, supplies, length, initial_fuel):
    """Fewest refuelling stops to travel ``length`` starting with ``initial_fuel``.

    Station ``i`` at ``positions[i]`` offers ``supplies[i]`` fuel. Returns
    ``None`` when the destination cannot be reached.
    """
    stations = sorted(list(zip(positions, supplies, strict=True)) + [(length, 0)])
    passed = []
    stops = 0
    position = 0
    tank = initial_fuel
    for where, fuel in stations:
        distance = where - position
        while distance > tank:
            if not passed:
                return None
            tank -= heapq.heappop(passed)
            stops += 1
        tank -= distance
        position = where
        heapq.heappush(passed, -fuel)
    return stops


def food_chain(n, statements):
    """Count false statements about ``n`` animals of three kinds.

    Each statement is ``(kind, x, y)`` with 1-based animals: kind 1 says x and y
    are the same kind, any other kind says x eats y.
    """
    groups = UnionFind(3 * n)
    false_count = 0
    for kind, x, y in statements:
        x -= 1
        y -= 1
        if not (0 <= x < n and 0 <= y < n):
            false_count += 1
            continue
        if kind == 1:
            if groups.root(x) in (groups.root(y + n), groups.root(y + 2 * n)):
                false_count += 1
            else:
                groups.connect(x, y)
                groups.connect(x + n, y + n)
                groups.connect(x + 2 * n, y + 2 * n)
        else:
            if groups.root(x) in (groups.root(y), groups.root(y + 2 * n)):
                false_count += 1
            else:
                groups.connect(x, y + n)
                groups.connect(x + n, y + 2 * n)
                groups.connect(x + 2 * n, y)
    return false_count