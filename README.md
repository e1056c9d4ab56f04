# algodrills

Classic algorithm exercises as plain Python functions and two small classes.
It has no dependencies outside the standard library.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## What is inside

| Module | Contents |
| --- | --- |
| `algodrills.dp_strings` | `edit_distance`, `is_interleaved`, `is_interleaved_recursive`, `lcs`, `lcs_two_rows`, `longest_palindromic_subsequence`, `longest_palindromic_subsequence_recursive`, `palindrome_partitions`, `word_break_sentences`, `count_true_evaluations` |
| `algodrills.dp_counting` | `fibonacci` (by matrix power, with `fibonacci(0) == 1`), `count_dice_ways`, `count_dice_ways_recursive`, `fence_painting_ways` |
| `algodrills.dp_sequences` | `max_subarray_sum`, `max_profit_single`, `max_profit_unlimited`, `longest_increasing_subsequence`, `longest_difference_one_subsequence`, `max_sum_increasing_subsequence`, `max_nested_envelopes`, `count_subsequences_product_at_most` |
| `algodrills.dp_optimization` | `Job`, `knapsack_max_profit`, `matrix_chain_cost`, `subset_sum_exists`, `can_partition_equal`, `can_partition_k`, `max_weighted_jobs` |
| `algodrills.heap` | `MaxHeap` with `push`, `pop`, `len()` and iteration in heap-array order |
| `algodrills.sorting` | `move_negatives_first`, `count_inversions`, `merge_sort`, `quick_sort`, `merge_sorted_in_place` |
| `algodrills.searching` | `max_cut_height`, `find_repeating_and_missing`, `median_of_sorted` |
| `algodrills.windows` | `sliding_window_maximums`, `smallest_subarray_exceeding` |
| `algodrills.maze` | `maze_paths`: every R/D/L/U path through a square 0/1 maze |
| `algodrills.array_problems` | `max_product_subarray`, `max_profit_two_transactions`, `max_two_window_sum`, `min_merges_to_palindrome`, `min_jumps`, `number_pattern` |
| `algodrills.grids` | `count_negatives`, `spiral_order`, `solve_sudoku`, `flood_fill`, `count_islands`, `word_exists` |
| `algodrills.traversal` | `bfs_order`, `dfs_order`, `arrival_departure_times`, `astronaut_pairs` |
| `algodrills.cycles` | `is_bipartite`, `has_cycle_bfs`, `has_cycle_dfs`, `has_directed_cycle`, `is_tree` |
| `algodrills.ordering` | `topological_sort_kahn`, `topological_sort_dfs`, `count_strongly_connected` |
| `algodrills.dsu` | `DisjointSet` with `find` and `union`, using union by rank and path compression |
| `algodrills.shortest_paths` | `dijkstra`, `has_negative_cycle` (Bellman-Ford), `cheapest_flight`, `knight_min_steps` |
| `algodrills.spanning_trees` | `prim_parents`, `prim_parents_heap`, `kruskal_mst` |
| `algodrills.coloring` | `can_color` |
| `algodrills.water` | `count_two_ocean_cells` |

## Conventions

- Functions take ordinary Python values (lists, strings, integers) and return
  new values; only `merge_sorted_in_place` changes its arguments.
- Graphs are given as a vertex count `n` (vertices `0..n-1`) and a list of
  edges: `(u, v)` pairs, or `(u, v, weight)` triples for weighted graphs.
  An edge naming a vertex outside that range raises `ValueError`.
- Where no answer exists, functions return `None` (for example `min_jumps`,
  `smallest_subarray_exceeding`, `cheapest_flight`, `knight_min_steps`, and
  unreachable entries of `dijkstra`) or raise `ValueError` (an unsolvable
  `solve_sudoku`, a cyclic graph given to a topological sort, a disconnected
  graph given to `prim_parents`).
- Counting functions that can grow large (`count_true_evaluations`,
  `count_dice_ways`, `fence_painting_ways`, `astronaut_pairs`) work modulo
  1 000 000 007.

## Examples

```python
from algodrills.dp_strings import edit_distance, lcs
from algodrills.sorting import merge_sort, count_inversions
from algodrills.heap import MaxHeap
from algodrills.dsu import DisjointSet
from algodrills.traversal import bfs_order
from algodrills.shortest_paths import dijkstra

edit_distance("kitten", "sitting")   # 3
lcs("abcde", "ace")                  # 3
merge_sort([5, 2, 9, 1])             # [1, 2, 5, 9]
count_inversions([2, 4, 1, 3, 5])    # 3

heap = MaxHeap([3, 1, 4, 1, 5])
heap.pop()                           # 5

sets = DisjointSet(5)
sets.union(0, 2)                     # True
sets.find(0) == sets.find(2)         # True

bfs_order(4, [(0, 1), (1, 2), (2, 3)])                # [0, 1, 2, 3]
dijkstra(3, [(0, 1, 4), (1, 2, 1), (0, 2, 7)], 0)     # [0, 4, 5]
```

## What it does not do

- There is no command-line program: nothing reads problems from standard
  input or prints answers. Call the functions from Python.
- There are no segment trees, linked lists or binary-tree utilities.