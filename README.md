# algodojo

Classic algorithms, well-known interview problems and dynamic-programming
exercises, written in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

### `algodojo.algorithm`

- `a_star.search(start, end, nodes, h)` — A* search. `nodes[i]` holds
  `(neighbour, weight)` pairs and `h` estimates the remaining cost. Returns
  `(cost, path)` or `None` when `end` cannot be reached.
- `binary_search.binary_search(xs, y)` — returns a `SearchResult(found, index)`;
  when not found, `index` is where `y` could be inserted.
- `lru_cache.LruCache(capacity)` — `insert(key, value)` and `get(key)`; the
  least recently used key is evicted once capacity is exceeded. Lookups,
  hits and misses alike, count as use.
- `traveling_salesman.solve(points)` — exact shortest closed tour over 2-D
  points, starting and ending at stop 0. Returns `(length, order)`.
- `vehicle_routing.solve(vehicle_count, points)` — exact split of 2-D stops
  among vehicles minimising total route length. Returns `(length, routes)`.
- `utility.format_table(rows)` / `utility.print_table(rows, file=None)` —
  tab-separated `repr` rendering of a table.

The exact solvers enumerate all subsets of stops, so they suit small inputs only.

### `algodojo.leetcode`

- `arrays`: `two_sum`, `find_median_sorted_arrays`, `pascal_triangle`,
  `marble_bag`.
- `linked_list`: `ListNode`, `build_list`, `list_values`, `add_two_numbers`
  (little-endian digit lists; the inputs are not modified).
- `strings`: `length_of_longest_substring`, `longest_palindrome`, `convert`
  (zigzag), `parse_int` (`atoi`-style, clamped to 32 bits), `is_match`
  (patterns with `.` and `*`).
- `numbers`: `reverse` (0 on 32-bit overflow), `is_palindrome`.

### `algodojo.tessoku`

- `basics`: prefix sums and simple counting — `range_sums`, `attendance`,
  `judge_ranges`, `shop_occupancy`, `to_binary`, `from_binary`,
  `count_triples`, `has_pair_sum`, `has_triple_of_thousand` and others.
- `dp_paths`: `min_dungeon_cost`, `min_dungeon_route`, `min_jump_cost`,
  `min_jump_route`, `min_stairs_cost`, `max_score_path`, `min_coupons`,
  `longest_increasing_subsequence`, `count_grid_paths`.
- `dp_sets`: `subset_sum`, `subset_sum_exists`, `subset_sum_choice`,
  `unbounded_subset_sum`, `knapsack`, `knapsack_max_value`,
  `knapsack_by_value`, `longest_common_subsequence`, `edit_distance`,
  `longest_palindromic_subsequence`, `block_game`, `shortest_tour`.
- `graphs`: `UnionFind` (`union`, `root`, `connected`), `adjacency_list`,
  `is_connected`, `bfs_distances`, `dijkstra`, `subordinate_counts`,
  `subtree_heights`, `offline_connectivity`. Vertices are numbered from 0.
- `cli`: `run(problem, text)` and the command-line runner below.

Invalid input raises `ValueError`.

## Example

```python
from algodojo.algorithm.a_star import search
from algodojo.algorithm.lru_cache import LruCache
from algodojo.leetcode.strings import is_match
from algodojo.tessoku.dp_sets import edit_distance
from algodojo.tessoku.graphs import UnionFind

nodes = [{(1, 1), (2, 100)}, {(2, 1)}, {(0, 1)}]
search(0, 2, nodes, lambda i: 0)   # (2, [0, 1, 2])

cache = LruCache(2)
cache.insert("a", 1)
cache.insert("b", 2)
cache.insert("c", 3)   # "a" is evicted
cache.get("a")         # None

is_match("aaa", "a*a")           # True
edit_distance("abc", "adc")      # 1

uf = UnionFind(4)
uf.union(0, 1)
uf.connected(0, 1)  # True
uf.connected(0, 2)  # False
```

## Command-line runner

`algodojo-tessoku` reads a problem's input from standard input in the usual
contest format (whitespace-separated numbers, vertices numbered from 1) and
prints the answer:

```
echo 5 | algodojo-tessoku a1
```

The problems it knows are `a1`, `a17`, `a61`, `a64`, `a66`, `b6`, `b18`,
`b23` and `b66`; `algodojo-tessoku --help` lists them. On bad input it
prints an error to standard error and exits with status 1.

## What it does not do

The runner covers only the problems listed above. The other exercises are
available as library functions only; there is no command that reads their
input formats.