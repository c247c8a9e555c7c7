# dsalab

A small collection of classic data structures and algorithms. Each one is a plain
Python class or function that returns its results rather than printing them.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsalab.graphs` | `Graph(n, first=0)`: an undirected graph stored as an adjacency matrix, with `add_edge`, `neighbours`, `bfs`, `dfs` (recursive), `dfs_stack` (explicit stack) and `format_matrix`. Vertices are numbered from `first`; an out-of-range vertex raises `ValueError`. |
| `dsalab.bst` | `BinarySearchTree`: `insert`, `inorder`, `preorder`, `postorder`, `minimum`, `maximum` (both `None` when empty), `height`, `contains`, `mirror`. Equal values go to the right. |
| `dsalab.avl` | `AVLDictionary`: words and meanings in a self-balancing tree, with `insert`, `delete` (raises `KeyError` for a missing word), `items` and `height`. |
| `dsalab.booktree` | `Book`, `Chapter`, `Section` dataclasses for a table of contents of at most 15 children per level; `Book.render` returns the outline as text. |
| `dsalab.expression` | `parse_prefix` builds an `ExprNode` tree from a prefix expression of single-letter operands and `+ - * /`; nodes have `inorder`, `postorder` and `deletion_order`. Malformed input raises `ValueError`. |
| `dsalab.heapsort` | `heapify`, `heap_sort`, and `mark_extremes`, which returns `(maximum, minimum)` and raises `ValueError` for no marks. |
| `dsalab.obst` | `OptimalBST(keys, p, q)`: an optimal binary search tree by dynamic programming, with `root`, `cost`, `weight`, `tree_rows` and `render`. |
| `dsalab.hashing` | Ten-slot tables: `ChainedDirectory`, `PhoneBook` (adds `search` and `delete`), `LinearProbingTable`, `QuadraticProbingTable`, and `TableFullError`. |

## Examples

```python
from dsalab.graphs import Graph

g = Graph(5)
g.add_edge(0, 1)
g.add_edge(0, 2)
g.add_edge(1, 3)
print(g.bfs(0))          # [0, 1, 2, 3]
print(g.format_matrix())
```

```python
from dsalab.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
print(tree.inorder())    # [20, 30, 40, 50, 70]
print(tree.minimum(), tree.maximum(), tree.height())  # 20 70 3
print(tree.contains(40)) # True
```

```python
from dsalab.expression import parse_prefix

root = parse_prefix("+a*bc")
print(root.inorder(), root.postorder())  # a+b*c abc*+
```

```python
from dsalab.hashing import LinearProbingTable

table = LinearProbingTable()
for key in (11, 21, 31):
    table.insert(key)
print(table.slots())              # [None, 11, 21, 31, None, None, None, None, None, None]
print(table.total_comparisons())  # 6
```

## Hash tables

All tables have ten slots and hash a key by `key % 10`. Keys must be positive,
since 0 marks an empty slot; anything else raises `ValueError`. Every table's
`insert` raises `TableFullError` when no free slot can be found.
`ChainedDirectory.rows` and `PhoneBook.rows` give `(name, number, chain)` per
slot, with `("-", 0, -1)` for an empty one. `PhoneBook.search` returns
`(slot, name)` or `None`, and `PhoneBook.delete` raises `KeyError` for a number
that is not stored.

## What it does not do

There is no command-line program or interactive menu: nothing reads from the
keyboard or prints. Build the structures in code and print what the methods
return.