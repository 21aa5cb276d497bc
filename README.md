# dsakit

Small, readable implementations of classic data structures and algorithms:
sorting and searching on lists, text utilities, binary heaps, linked binary
trees, a binary search tree and an undirected graph with depth-first and
breadth-first traversals. It has no dependencies outside the standard library.

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

### `dsakit.arrays`

- `bubble_sort(values, descending=False)`, `insertion_sort(...)`,
  `selection_sort(...)`: return a new sorted list; the input is not changed.
- `insertion_sort_steps(values, descending=False)` and
  `selection_sort_steps(...)`: yield a `SortStep` (`step`, `value`,
  `snapshot`) after each pass, where `snapshot` is a tuple of the whole
  sequence at that point.
- `insert_at(values, index, value)`: new list with `value` inserted before
  `index`; raises `IndexError` unless `0 <= index <= len(values)`.
- `linear_search(values, target)`: index of the first match, or `-1`.
- `binary_search(values, target)`: an index of `target` in an ascending
  sequence, or `-1`.
- `max_min(values)`: `(largest, smallest)`; raises `ValueError` when empty.
- `reverse_in_place`, `swap_alternate`, `zeros_to_end`, `zeros_to_front`:
  rearrange a mutable sequence in place and return it. The zero moves keep
  the order of the other values; `swap_alternate` swaps positions 0 and 1,
  2 and 3, and so on, leaving an odd last element where it is.

### `dsakit.sorting`

- `heap_sort(values)`, `merge_sort(values)`, `quick_sort(values)`: return a
  new ascending list. `quick_sort` partitions around the last element.
- `merge(left, right)`: merge two ascending sequences into one list.

### `dsakit.text`

- `word_frequency(text)`: counts of lower-cased, whitespace-separated words,
  as a dict in first-seen order.
- `reverse_string(text)`: the characters in reverse order.
- `is_palindrome(text)`: whether the text reads the same both ways
  (case-sensitive, every character counts).

### `dsakit.heap`

- `MaxHeap(values=())`: `insert`, `peek`, `extract_max`, `len()`.
- `MinHeap(values=())`: `insert`, `peek`, `extract_min`, `delete(index)`
  (removes and returns the value at that heap position), `len()`.

`peek` and extraction raise `IndexError` on an empty heap, and
`MinHeap.delete` raises `IndexError` for an index outside the heap.

### `dsakit.binary_tree`

`TreeNode(value, left=None, right=None)` and functions over a root node
(`None` is the empty tree): `preorder`, `inorder`, `postorder`,
`level_order` (each returns a list of values), `height`, `count_nodes`,
`count_leaves`, `mirror` (swaps children in place and returns the root) and
`build_sample_tree()`, which builds `A(B(D, E), C(-, F))`.

### `dsakit.bst`

`BinarySearchTree(values=())` keeps duplicates (equal values go right).
It supports `insert`, `in`, iteration in ascending order, `len()`,
`delete(value)` (removes one occurrence and returns whether it was found),
`min()` and `max()` (raise `ValueError` when empty), and `inorder()`,
`preorder()`, `postorder()` returning lists.

### `dsakit.graph`

`Graph()` is an undirected adjacency list: `add_edge(u, v)`,
`neighbors(node)`, `dfs(start)` and `bfs(start)` returning the visiting
order, and `format()` rendering the adjacency list as text.

## Examples

```python
from dsakit.arrays import bubble_sort, linear_search
from dsakit.sorting import merge_sort
from dsakit.heap import MaxHeap
from dsakit.bst import BinarySearchTree
from dsakit.graph import Graph

values = bubble_sort([5, 3, 2, 3, 1, 34, 2, 55])
print(values)                      # [1, 2, 2, 3, 3, 5, 34, 55]
print(linear_search(values, 34))   # 6

print(merge_sort([5, 3, 8, 4, 2])) # [2, 3, 4, 5, 8]

heap = MaxHeap([5, 10, 3, 15])
print(heap.peek())                 # 15
print(heap.extract_max())          # 15
print(heap.peek())                 # 10

tree = BinarySearchTree([3, 5, 2, 1, 23, 54, 7])
print(list(tree))                  # [1, 2, 3, 5, 7, 23, 54]
print(7 in tree, 6 in tree)        # True False
print(tree.min(), tree.max())      # 1 54

g = Graph()
for u, v in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "E"), ("D", "E"), ("E", "F")]:
    g.add_edge(u, v)
print(g.dfs("A"))                  # ['A', 'B', 'D', 'E', 'C', 'F']
print(g.bfs("A"))                  # ['A', 'B', 'C', 'D', 'E', 'F']
print(g.format())
# Adjacency List:
# A -> [B C]
# B -> [A D]
# C -> [A E]
# D -> [B E]
# E -> [C D F]
# F -> [E]
```

## What it does not do

This is a library only: it has no command-line tool, and nothing is printed
or read from the terminal. Trees are not self-balancing.