# judgekit

A collection of small, self-contained solutions to classic online-judge
problems. Every solution is a plain function that takes Python values and
returns its answer. Nothing reads from standard input or prints.

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

### `judgekit.graphs`

- `transitive_closure(matrix)`: 0/1 matrix of pairs joined by a path of one
  or more edges; raises `ValueError` for a non-square matrix.
- `all_pairs_shortest_paths(node_count, edges)`: cheapest costs between all
  nodes `1..n` from `(start, end, cost)` edges; the diagonal and unreachable
  pairs hold 0.
- `shortest_distances(vertex_count, edges, start)`: Dijkstra distances to
  every vertex, `None` where unreachable.
- `cheapest_route(city_count, edges, source, target)`: cheapest cost from
  one city to another, or `None`.
- `traversal_orders(edges, start)`: DFS and BFS visiting orders over an
  undirected graph, smaller neighbours first.
- `count_loners(choices)`: how many students are in no team, where teams are
  cycles of choices.
- `tour_cost(weights, start, visited_mask)` and `travelling_salesman(weights)`:
  cheapest round trip through every city (a weight of 0 means no road);
  `math.inf` when there is none.

### `judgekit.trees`

- `leaves_after_removal(parents, removed)`: leaf count after cutting a
  subtree (`-1` marks the root).
- `parents_of(node_count, edges)`: parents of nodes `2..n` with the tree
  rooted at 1.
- `accumulated_praise(superiors, praises)`: praise totals passed down a
  hierarchy.
- `subtree_sizes(node_count, root, edges)`: size of every node's subtree.
- `traversals(nodes)`: preorder, inorder and postorder strings of a binary
  tree rooted at `'A'`, given `(name, left, right)` with `'.'` for no child.
- `max_independent_set(weights, edges)`: the heaviest independent set's
  weight and its sorted vertices.
- `min_early_adopters(node_count, edges)`: the fewest early adopters so that
  every node is one or neighbours one along every edge.

### `judgekit.dynamic`

`tilings_2xn` (mod 10007), `tilings_3xn`, `knapsack`, `max_subarray_sum`,
`sum_decompositions` (mod 10^9), `coin_combinations`, `min_coins` (`None`
when the amount cannot be paid), `apartment_residents`, `sum_of_123_ways`,
`max_consulting_profit` and `nth_decreasing_number` (`None` past the last
such number).

### `judgekit.search`

- `min_emoticon_time(target)`: fewest copy, paste and delete steps.
- `restore_permutation(digits)`: split a digit run back into a permutation
  of `1..N`; raises `ValueError` if it cannot.
- `ideal_string(length)`: an ideal string of the given length, or `None`.
- `marble_escape(board)`: fewest tilts (at most ten) that drop the red
  marble but not the blue into the hole, or `None`.

### `judgekit.game2048`

- `max_block(board)`: the largest block reachable on a square 2048 board
  within five moves.

### `judgekit.textual`

- `evaluate_min_expression(expression)`: smallest value of a `+`/`-`
  expression when brackets may be added.
- `char_at(word, position)`: 1-based character lookup; raises `IndexError`
  outside the word.
- `run_ac(commands, values)`: runs `R` (reverse) and `D` (drop first)
  commands; raises `ProgramError` when dropping from an empty list and
  `ValueError` for any other command.
- `is_vps(text)`: whether parentheses are balanced.
- `explode(text, bomb)`: removes `bomb` repeatedly; returns `"FRULA"` when
  nothing is left.

### `judgekit.arithmetic`

`min_sugar_bags` (`None` if impossible), `boundary_crossings`,
`min_merge_cost`, `count_mask_sales` and `polygon_area`.

## Example

```python
from judgekit.dynamic import knapsack
from judgekit.textual import is_vps

knapsack(7, [(6, 13), (4, 8), (3, 6), (5, 12)])  # 14
is_vps("(())()")  # True
```

## What it does not do

The package is a library only. It has no command-line program and does not
parse judge-style input text; callers pass Python values to the functions
and format the results themselves.