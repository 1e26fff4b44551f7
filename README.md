# algokit

Classic data structures and algorithms in plain Python, with no dependencies
outside the standard library.

## Contents

- `algokit.containers`: `Stack` (`push`, `pop`, `peek`, `is_empty`, `len()`)
  and `Queue` (`enqueue`, `dequeue`, `peek`, `is_empty`, `len()`). Popping,
  dequeuing or peeking at an empty container raises `IndexError`.
- `algokit.hashtable`: `HashTable`, an integer-keyed map over ten chained
  buckets (bucket = `key % 10`, new keys go to the head of their bucket).
  It supports `table[key] = value`, `table[key]`, `del table[key]`, `in`,
  `len()`, `get(key, default)`, `remove(key)` (returns whether the key was
  present), `bucket(index)` (the `(key, value)` pairs of one bucket) and
  `render()` (a text line per bucket).
- `algokit.bst`: `BST`, an unbalanced binary search tree where equal values go
  to the right. It has `insert`, `search`, `remove` (removes one occurrence,
  silently ignores absent values), `in`, `len()` and ascending iteration.
- `algokit.integral`: `adaptive_simpson(func, a, b, epsilon)` integrates by
  Simpson's rule, halving the step until two successive estimates differ by at
  most `epsilon`; if the step gets too small first it issues a
  `RuntimeWarning` and returns the last estimate. `Integral(func, a, b,
  epsilon)` computes on construction and keeps the latest value in `result`;
  `compute(a, b)` integrates over new limits.
- `algokit.graphs`:
  - `AdjacencyMatrix(n)`: undirected 0/1 matrix with `add_edge`,
    `remove_edge`, `has_edge`, `rows` and `render()`; out-of-range vertices
    are ignored.
  - `IncidenceMatrix(vertices, edges)`: `add_edge(u, v, edge)` puts `1` at
    the tail and `-1` at the head; out-of-range indices raise `IndexError`.
  - `AdjacencyList(n)`: undirected neighbour lists with `add_edge`,
    `neighbors(vertex)` (newest first) and `render()`.
  - `dfs_matrix(matrix, start)` and `dfs_list(adjacency, start)`: depth-first
    visit order.
  - `dijkstra(graph, start)`: shortest distances over a square weighted
    adjacency matrix; a zero weight means no edge and unreachable vertices get
    `math.inf`.
- `algokit.treetasks`: exercises on integer binary search trees built from
  `TreeNode`: `insert`, `build_tree`, `in_order`, `tree_height`,
  `level_counts`, `find_divisible_node` (first value in pre-order divisible by
  a non-zero child, or `None`), `is_balanced` and `min_leaf` (smallest leaf
  value, or `None` for an empty tree).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
import math
from algokit.bst import BST
from algokit.graphs import dijkstra
from algokit.integral import Integral
from algokit.treetasks import build_tree, level_counts

tree = BST()
for value in (5, 3, 8, 1):
    tree.insert(value)
print(list(tree))  # [1, 3, 5, 8]
print(3 in tree)   # True

area = Integral(math.sin, 0, math.pi, 1e-8)
print(area.result)          # close to 2
print(area.compute(0, 1))   # close to 1 - cos(1)

graph = [
    [0, 4, 1, 0],
    [0, 0, 2, 5],
    [0, 2, 0, 3],
    [0, 0, 0, 0],
]
print(dijkstra(graph, 0))  # [0, 3, 1, 4]

root = build_tree([5, 3, 8, 1, 4])
print(level_counts(root))  # [1, 2, 2]
```

## Command line

The tree exercises come with an interactive menu:

```
algokit-trees
```

Choose a task (1 to 4, or 0 to exit). The program then reads the root value
and asks whether to add another node; an answer starting with `y` or `Y` reads
one more value, anything else ends input and the result is printed. The menu
repeats until you choose 0 or input ends.