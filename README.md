# dsakit

A small library of classic data structures and algorithms, written in plain
Python with no dependencies.

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
| `dsakit.searching` | `binary_search`, `binary_search_recursive`, `linear_search`, `linear_search_recursive`, `SortedArray` |
| `dsakit.sorting` | `selection_sort`, `merge_sort`, `quick_sort`, `quick_sort_iterative`, `bubble_sort_recursive` |
| `dsakit.selection` | `kth_smallest`, `kth_largest`, `median`, `max_min` |
| `dsakit.tree` | `Node`, traversals (`inorder`, `preorder`, `postorder`, `level_order`), `height`, `count`, `is_balanced`, `level_sizes`, `are_siblings`, `total`, `mirror`, `maximum`, `insert_level_order` |
| `dsakit.bst` | `BinarySearchTree` with insertion, deletion, traversals, min/max, height, balance check and mirroring |
| `dsakit.graph` | `bfs`, `dfs` over an adjacency matrix |
| `dsakit.recursion` | `fibonacci`, `fibonacci_sequence`, `gcd`, `hanoi_moves`, `permutations` |
| `dsakit.huffman` | `HuffmanNode`, `build_huffman_tree`, `huffman_codes` |
| `dsakit.knapsack` | `knapsack` (0/1 dynamic programming) |
| `dsakit.matrix` | `row_sums`, `column_sums` |

## Examples

```python
from dsakit.searching import binary_search
from dsakit.sorting import merge_sort
from dsakit.selection import kth_smallest
from dsakit.bst import BinarySearchTree
from dsakit.graph import bfs
from dsakit.knapsack import knapsack

sorted_items = merge_sort([5, 2, 9, 1])      # [1, 2, 5, 9]
index = binary_search(sorted_items, 9)       # 3
third = kth_smallest([7, 3, 9, 1, 5], 3)     # 5

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.delete(30)                              # True
print(tree.inorder(), tree.height())         # [20, 40, 50, 70] 3

adjacency = [
    [0, 1, 1, 0, 0],
    [1, 0, 0, 1, 1],
    [1, 0, 0, 1, 0],
    [0, 1, 1, 0, 1],
    [0, 1, 0, 1, 0],
]
print(bfs(adjacency, 0))                     # [0, 1, 2, 3, 4]

print(knapsack(50, [10, 20, 30], [60, 100, 120]))  # 220
```

## Behaviour worth knowing

- **Searching.** The search functions return the index of the key, or `None`
  when it is absent. `SortedArray(items, capacity=100)` keeps its items in
  order: `insert` places a key after any equal ones and returns its index,
  raising `OverflowError` when the array is full; `delete` removes one
  occurrence and returns the index it held, raising `ValueError` if the key
  is not there.
- **Sorting.** Every sort takes any iterable and returns a new list; the
  input is left alone.
- **Selection.** `kth_smallest` and `kth_largest` take a 1-based `k` and raise
  `ValueError` when it is out of range. `median` returns a float (the mean of
  the two middle values for an even count). `max_min` returns
  `(maximum, minimum)`. Both raise `ValueError` on empty input.
- **Trees.** The functions in `dsakit.tree` work on `Node(key, left, right)`
  values. `height` counts levels, so an empty tree has height 0. `mirror`
  swaps children in place and returns the root; `maximum` raises `ValueError`
  on an empty tree; `insert_level_order` attaches a key at the first free slot
  in level order.
- **Binary search tree.** Equal keys go to the right. `delete` returns whether
  a key was removed; `remove` does the same but raises `KeyError` when the key
  is missing. `minimum` and `maximum` raise `ValueError` on an empty tree.
  `mirror` returns a mirrored copy of the nodes and leaves the tree unchanged.
  `len()`, iteration (in ascending order) and `in` are supported.
- **Graphs.** `bfs` and `dfs` take a square adjacency matrix in which an entry
  of 1 marks an edge, visit neighbours in increasing index order, and raise
  `IndexError` for a start vertex out of range.
- **Recursion.** `fibonacci(0)` is 0 and `fibonacci(1)` is 1; negative input
  raises `ValueError`. `gcd` returns the other argument when one is zero.
  `hanoi_moves(n, source="A", target="C", auxiliary="B")` returns a list of
  `Move(disk, source, target)` whose `str()` reads
  `"Move disk 1 from A to C"`. `permutations` is a generator yielding every
  arrangement, repeats included when the text has repeated characters.
- **Huffman.** `build_huffman_tree` and `huffman_codes` accept a mapping or
  `(symbol, weight)` pairs. Codes use 0 for left edges and 1 for right edges;
  a single symbol gets the empty code. Empty input or duplicate symbols raise
  `ValueError`.
- **Knapsack and matrices.** `knapsack` raises `ValueError` for mismatched
  lengths, a negative capacity or negative weights. `row_sums` and
  `column_sums` raise `ValueError` when rows differ in length.

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
menus for entering values; call its functions from your own code.