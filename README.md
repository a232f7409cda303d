# algobook

A collection of classic contest algorithms written as plain Python functions.
Each function takes ordinary Python values (lists, strings, tuples) and
returns its answer. There are no runtime dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algobook.preparation` | `ants`, `contains`, `four_cards_exhaustive`, `four_cards`, `largest_triangle` |
| `algobook.full_search` | `count_lakes`, `permutations_recursive`, `permutations_lexicographic`, `next_permutation`, `maze_shortest_path`, `subset_sum` |
| `algobook.greedy` | `best_cow_line`, `fence_repair_sorting`, `fence_repair`, `min_coins`, `max_tasks` |
| `algobook.data_structures` | `UnionFind`, `expedition`, `food_chain` |
| `algobook.dynamic_programming` | `knapsack`, `knapsack_by_value`, `unbounded_knapsack`, `longest_common_subsequence`, `longest_increasing_subsequence_quadratic`, `longest_increasing_subsequence`, `multiset_combinations`, `partition_count`, `bounded_subset_sum` |
| `algobook.graphs` | `Edge`, `bellman_ford`, `has_negative_loop`, `dijkstra_dense`, `dijkstra`, `is_bipartite` |
| `algobook.number_theory` | `is_prime`, `is_carmichael`, `lattice_points_between`, `count_primes`, `count_primes_in_range`, `sugoroku` |
| `algobook.contest` | `bribe_prisoners`, `crazy_rows`, `millionaire`, `minimum_scalar_product` |
| `algobook.binary_search` | `aggressive_cows`, `max_average`, `cable_master`, `lower_bound` |
| `algobook.techniques` | `face_the_right_way`, `fliptile`, `shortest_subarray`, `shortest_covering_range` |

## Examples

```python
from algobook.greedy import fence_repair, best_cow_line
from algobook.dynamic_programming import knapsack
from algobook.data_structures import UnionFind

fence_repair([8, 5, 8])                          # 34
best_cow_line("ACDBCB")                          # "ABCBCD"
knapsack([(2, 3), (1, 2), (3, 4), (2, 2)], 5)    # 7; items are (weight, value) pairs

uf = UnionFind(4)
uf.connect(0, 1)                                 # True
uf.root(0) == uf.root(1)                         # True
uf.size(0)                                       # 2
```

Graph functions take a vertex count with a list of `Edge` values, a dense
cost matrix (`math.inf` for a missing edge), or adjacency lists of
`(to, cost)` pairs, depending on the algorithm:

```python
from algobook.graphs import Edge, bellman_ford, is_bipartite

edges = [Edge(0, 1, 4), Edge(1, 2, 1), Edge(0, 2, 7)]
bellman_ford(3, edges, 0)                        # [0, 4, 5]
is_bipartite(3, [(0, 1), (1, 2), (2, 0)])        # False; edges are undirected
```

Generators yield permutations as tuples:

```python
from algobook.full_search import permutations_lexicographic, next_permutation

list(permutations_lexicographic(3))[:2]          # [(0, 1, 2), (0, 2, 1)]
next_permutation([3, 2, 1])                      # None: already the last one
```

## Results that mean "no answer"

Where a problem can have no solution, the function says so in one of these
ways:

- `None` is returned by `maze_shortest_path` (goal unreachable), `expedition`
  (destination unreachable), `fliptile` (grid cannot be cleared),
  `shortest_subarray` (no run reaches the target) and `next_permutation`
  (no later permutation).
- `bellman_ford` raises `ValueError` when a negative cycle is reachable from
  the source; `has_negative_loop` reports one anywhere in the graph.
- `sugoroku` returns `-1` when its two numbers are not coprime.
- Unreachable vertices get `math.inf` from the shortest-path functions.

Inputs that the algorithms cannot handle (negative capacities, a modulus
below 1, a probability outside `[0, 1]`, rows of unequal length and so on)
raise `ValueError`.

## What this package does not do

It is a library only. It has no command-line program and reads nothing from
standard input or files: to solve a problem from text input, parse the input
yourself and call the matching function.