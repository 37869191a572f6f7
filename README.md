# algokit

A small library of classic algorithms and data structures in plain Python.
It has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.sorting`

`cycle_sort`, `insertion_sort`, `quick_sort`, `radix_sort`, `tim_sort`,
`bubble_sort`, `count_sort`, `merge_sort` and `selection_sort`. Each one takes
any iterable and returns a new sorted list. The input is left unchanged.

- `radix_sort` accepts non-negative integers only. It raises `ValueError` for
  a negative value.
- `tim_sort(values, run=32)` insertion-sorts runs of length `run` and then
  merges them. It raises `ValueError` if `run` is not positive.

### `algokit.searching`

- `binary_search(values, target)` returns an index of `target` in an
  ascending sequence. It returns `None` if the target is absent.
- `checked_binary_search(values, target)` works the same way, but first
  raises `NotSortedError` (a `ValueError`) if the sequence is not sorted.
- `horspool_search(text, pattern)` returns `(start, end)` for the first
  match. Both indices are inclusive. It returns `None` if the pattern does not
  occur, and raises `ValueError` for an empty pattern. Matching is
  case-sensitive. The shift table ignores the case of ASCII letters.

### `algokit.linked_list`

`LinkedList(values=())` is a singly linked list built from `Node` cells. It
has these operations:

- `push(value)` inserts at the front.
- `append(value)` inserts at the end.
- `delete(key)` removes the first matching node and returns `True`. It
  returns `False` if no node matches.
- `reverse()` reverses the list in place.
- `merge_sort()` sorts the list stably by relinking its nodes.

The list also supports `len()` and iteration from head to tail.

### `algokit.binary_tree`

- `TreeNode` is a node with `data`, `left` and `right`.
- `insert_level_order(root, value)` places `value` in the first free child
  slot in level order and returns the root. A `None` root gives a new
  single-node tree.
- `inorder(root)` yields the values in left, node, right order.

### `algokit.array_queue`

`BoundedQueue(capacity=4)` is a linear array queue. It has `enqueue`,
`dequeue`, `len()` and iteration from front to rear.

A slot is never reused. Once `capacity` values have been enqueued, the next
enqueue raises `QueueOverflowError`, even if some values have been dequeued
since. Dequeueing from an empty queue raises `QueueUnderflowError`.

### `algokit.recursion`

- `tower_of_hanoi(n, source="A", target="C", auxiliary="B")` returns the list
  of `Move` objects that solves the puzzle. `str(move)` reads like
  `Move disk 1 from rod A to rod C`. It raises `ValueError` for a negative
  `n`.
- `subset_sums(values, target)` returns every subset, in ascending order, that
  sums to `target`. It finds them by backtracking over the sorted values.
  Equal values count as distinct items, so the same subset can appear more
  than once.

### `algokit.techniques`

- `eval_rpn(tokens)` evaluates integer reverse Polish notation. Division
  truncates toward zero. It raises `ValueError` for a malformed expression
  and `ZeroDivisionError` for division by zero.
- `prefix_sums(matrix)` returns `PrefixTables` with five tables: `row`,
  `column`, `diagonal`, `anti_diagonal` and `total`. Each table is indexed
  like the matrix. It raises `ValueError` if the rows differ in length.
- `to_upper_ascii`, `to_lower_ascii` and `toggle_case_ascii` change the case
  of ASCII letters by working on the case bit. All other characters are kept
  as they are.

### `algokit.graphs`

Edges can be given as `Edge(src, dest, weight)` or as plain tuples.

- `articulation_points(vertex_count, edges)` returns the cut vertices of an
  undirected graph in ascending order.
- `bellman_ford(vertex_count, edges, source)` returns the distance to each
  vertex. Unreachable vertices get `None`. It raises `NegativeCycleError` if
  a negative cycle is reachable from `source`.
- `boruvka_mst(vertex_count, edges)` returns a `SpanningTree` with `edges`
  and `total_weight`. It raises `ValueError` for a disconnected graph.
- `shortest_paths(adjacency, source)` runs Dijkstra over lists of
  `(neighbour, weight)` pairs. For each vertex it returns a `PathResult`
  with `distance` and `path`, or `None` if the vertex is unreachable.
- `flood_fill(image, row, col, color)` returns a recoloured copy of the
  4-connected region around the start cell. It raises `ValueError` if the
  start cell is outside the image.
- `prim_mst(cost_matrix)` returns a `SpanningTree` from a square cost matrix.
  A cost of zero means there is no edge.
- `dijkstra_matrix(graph, source)` returns the distance to each vertex from a
  square weight matrix. A weight of zero means there is no edge, and
  unreachable vertices get `None`.

Vertices out of range, non-square matrices and disconnected graphs (for
`prim_mst`) raise `ValueError`.

### `algokit.dynamic`

- `max_subarray_sum(values)` finds the largest contiguous sum.
  `max_subarray_product(values)` finds the largest contiguous product. Both
  raise `ValueError` for empty input.
- `knapsack_brute_force`, `knapsack_top_down` and `knapsack_bottom_up` take
  `(weights, values, capacity)` and return a `KnapsackResult`:
  - `value` is the best total.
  - `items` holds the chosen 0-based indices.
  - `count` is the work counter of the method used.
  - `table` is the DP table. The brute-force solver has no table.
- `knapsack_value(capacity, weights, values)` returns only the best value.
- `min_jumps(steps)` gives the fewest jumps to reach the last index. It
  returns `None` if the last index is unreachable.
- `matrix_chain_order(dimensions)` gives the fewest scalar multiplications
  for a chain of matrices. It raises `ValueError` if fewer than two
  dimensions are given.
- `max_loot(house_values)` gives the best total when no two neighbouring
  houses may be taken.
- `longest_common_substring(first, second)` gives the length of the longest
  common contiguous run.
- `trapped_water(heights)` gives the water held by an elevation map.

## Example

```python
from algokit.sorting import merge_sort
from algokit.searching import binary_search
from algokit.linked_list import LinkedList
from algokit.dynamic import knapsack_value

data = merge_sort([12, 11, 13, 5, 6, 7])   # [5, 6, 7, 11, 12, 13]
index = binary_search(data, 11)            # 3

items = LinkedList([2, 3, 1, 7])
items.delete(1)
items.reverse()
print(list(items))                         # [7, 3, 2]

print(knapsack_value(50, [10, 20, 30], [60, 100, 120]))  # 220
```

## What this package does not do

algokit is a library only. It has no command-line programs. Nothing in it
reads input from the terminal or prints results. Call the functions from
your own code and format their return values as you need.