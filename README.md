# algorack

Classic algorithms and data structures in plain Python, using nothing beyond
the standard library: graph algorithms, dynamic programming, matrix
exponentiation, range-query trees and a handful of number-theory and string
routines.

## Installation

From a checkout of the project:

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algorack.unionfind` | `UnionFind`: disjoint sets with path halving and union by size (`root`, `same_set`, `union`) |
| `algorack.weighted` | `WeightedGraph`, `bellman_ford`, `floyd_warshall`, `prim`, `kruskal`, `kruskal_visited`, `NegativeCycleError` |
| `algorack.traversal` | `Graph`, `dfs_order`, `bfs_order`, `is_connected_from`, `count_components`, `flood_fill`, `dominators`, `format_dominators`, `classify_edges`, `EdgeKind` |
| `algorack.queens` | `eight_queens`, `format_queens`: eight-queens solutions with one queen fixed |
| `algorack.connectivity` | `articulation_points`, `strongly_connected_components`, `is_strongly_connected`, `is_bipartite` |
| `algorack.editor` | `LineEditor`: lines, a cursor and a copy buffer (`insert`, `delete_line`, `cut_line`, `yank`, `paste`, `goto`) |
| `algorack.forest` | `leaves_after_removal`: leaf count of a parent-array tree after cutting a subtree |
| `algorack.sequences` | `longest_non_decreasing_subsequence`, `longest_increasing_subsequence_length`, `longest_common_subsequence`, `longest_common_substring`, `edit_distance`, `ugly_number`, `matrix_chain_cost`, `count_true_parenthesizations`, `can_jump`, `max_profit` |
| `algorack.optimisation` | `knapsack`, `knapsack_items`, `triangle_max_path`, `treats_max_revenue`, `max_calories`, `kth_neighbourhood_max`, `bytelandian_exchange`, `coin_game_winner`, `trapped_water`, `max_container_area` |
| `algorack.matrices` | `mat_mul`, `mat_pow`, `fibonacci_range_sum`, `fibonacci_offset_count`, `linear_recurrence`, `recurrence_range_sum`, `sumsums` |
| `algorack.strings` | `remove_vowels`, `remove_adjacent_duplicates`, `pretty_json`, `half_palindromes` |
| `algorack.segment_trees` | `MaxSubarrayTree`, `MinSegmentTree`, `SumRangeTree` (lazy range addition), `BracketTree` |
| `algorack.arithmetic` | `extended_gcd`, `chinese_remainder`, `count_divisible`, `factorial_digits`, `has_xor_zero_quadruple`, `divisible_subset`, `street_letters`, `count_multiples`, `birthday_collision`, `birthday_table` |
| `algorack.codejam` | `min_hacks`, `trouble_sort_error` |
| `algorack.fenwick` | `FenwickTree`, `count_greater_offline` |
| `algorack.blocks` | `BlockSums` (square-root decomposition), `distinct_counts` (Mo's algorithm) |
| `algorack.merge_sort_tree` | `MergeSortTree` (`count_at_most`, `count_greater`, `kth_smallest`), `online_count_greater`, `FrequencyTree` |

## Conventions

- Graph vertices are the integers `0 .. size - 1`; graphs have a fixed size
  given when they are created.
- The range-query structures (`segment_trees`, `fenwick`, `blocks`,
  `merge_sort_tree`) use zero-based indices, and their ranges include both
  ends. Out-of-range indices raise `IndexError`.
- A few functions follow a puzzle's own numbering: `eight_queens` and
  `format_queens` take 1-based rows and columns, `LineEditor.goto` takes a
  1-based line, `linear_recurrence` takes a 1-based term, and
  `divisible_subset` returns 1-based indices.
- Bad input (mismatched lengths, negative sizes, unknown operators and the
  like) raises `ValueError`. Where a puzzle has no answer, the function says
  so in its return value: `street_letters` and `min_hacks` return `None`, and
  `trouble_sort_error` returns `None` when the result is sorted.
- `bellman_ford` returns `math.inf` for unreachable vertices and raises
  `NegativeCycleError` when a negative cycle is reachable from the source.

## Examples

Disjoint sets:

```python
from algorack.unionfind import UnionFind

sets = UnionFind(5)
sets.union(0, 1)
sets.union(1, 4)
sets.same_set(0, 4)   # True
sets.same_set(1, 3)   # False
```

Shortest paths and spanning trees:

```python
from algorack.weighted import WeightedGraph, bellman_ford, kruskal

graph = WeightedGraph(3)
graph.add_edge(0, 1, 4, False)
graph.add_edge(0, 2, 1, False)
graph.add_edge(2, 1, 2, False)
bellman_ford(graph, 0)    # [0, 3, 1]
kruskal(graph)            # 3
```

Dynamic programming and recurrences:

```python
from algorack.sequences import edit_distance, ugly_number
from algorack.matrices import fibonacci_range_sum

edit_distance("kitten", "sitting")   # 3
ugly_number(10)                      # 12
fibonacci_range_sum(1, 3)            # 4, that is F(1) + F(2) + F(3)
```

Range queries:

```python
from algorack.segment_trees import MinSegmentTree
from algorack.fenwick import FenwickTree
from algorack.blocks import distinct_counts

tree = MinSegmentTree([5, 3, 8, 1])
tree.query(0, 2)          # 3
tree.update(1, 9)

sums = FenwickTree([1, 2, 3, 4])
sums.range_sum(2, 3)      # 7

distinct_counts([1, 1, 2, 1, 3], [(0, 4), (1, 3), (2, 4)])   # [3, 2, 3]
```

Numbers and strings:

```python
from algorack.arithmetic import chinese_remainder
from algorack.strings import half_palindromes

chinese_remainder([(3, 2), (5, 3), (7, 2)])   # 23
half_palindromes("abba")                      # ["abba", "baab"]
```

## What it does not do

algorack is a library only. It has no command-line programs and does not read
or write any puzzle's input or output format: callers pass Python lists,
strings and tuples and get Python values back. The only text renderers are
`format_dominators` and `format_queens`, which return strings. Graphs and
range-query structures live in memory and are not saved anywhere; the
sequences behind the range-query trees have a fixed length.