"""Classic contest algorithms: exhaustive search, greedy, dynamic programming,
union-find, graphs, number theory, binary search on the answer and two-pointer
techniques."""

__version__ = "0.1.0"