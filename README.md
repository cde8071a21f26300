# dsakit

A small, dependency-free collection of classic data structures and algorithms
in plain Python: sorting and searching, array and string exercises,
backtracking, heaps, graph algorithms, linked lists and binary trees.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `quicksort`, `quicksort_first_pivot`, `insertion_sort`, `selection_sort`, `merge_sort`, `heapsort`, `binary_search` |
| `dsakit.arrays` | `max_subarray_sum`, `max_subarray_sum_brute`, `three_sum`, `has_dominant_element`, `find_duplicates`, `longest_arithmetic_subarray`, `merge_sorted`, `rank_positions`, `find_pair_with_sum`, `subarray_sums`, `subarray_with_sum`, `reverse_list`, `xor_swap` |
| `dsakit.strings` | `reverse_string`, `collapse_repeats`, `permutations`, `subsequences`, `subsequences_with_codes`, `is_palindrome`, `replace_pi` |
| `dsakit.recursion` | `solve_n_queens`, `fibonacci`, `first_subset_with_sum`, `subsequences`, `tower_of_hanoi` |
| `dsakit.heaps` | `sort_nearly_sorted`, `kth_smallest` |
| `dsakit.traversal` | `bfs`, `dfs_iterative`, `dfs_recursive`, `has_cycle`, `topological_sort`, `find_bridges`, `format_matrix` |
| `dsakit.disjoint_set` | `DisjointSet` |
| `dsakit.spanning_trees` | `Edge`, `kruskal`, `prim`, `spanning_tree_weight`, `total_weight` |
| `dsakit.shortest_paths` | `dijkstra_matrix`, `shortest_path_tree`, `dijkstra` |
| `dsakit.singly_linked` | `Node`, `LinkedList` and chain helpers: `from_values`, `to_values`, `length`, `reverse`, `reverse_recursive`, `reverse_in_groups`, `reverse_between`, `remove_elements`, `sort_list`, `merge_sorted`, `is_palindrome`, `make_cycle`, `has_cycle`, `remove_cycle`, `intersect`, `intersection_value` |
| `dsakit.circular_linked` | `CircularLinkedList` |
| `dsakit.doubly_linked` | `DoublyLinkedList` |
| `dsakit.avl` | `AVLTree` |
| `dsakit.trees` | `TreeNode`, `level_order`, `boundary`, `inorder_iterative`, `preorder_iterative`, `postorder_iterative` |
| `dsakit.bst` | `BinarySearchTree` |

The sorting functions never modify their input; they return a new sorted list.

## Examples

Sorting and searching:

```python
from dsakit.sorting import merge_sort, binary_search

data = merge_sort([3, 7, 0, 1, 5, 8])   # [0, 1, 3, 5, 7, 8]
binary_search(data, 5)                  # 3
binary_search(data, 4)                  # None
```

Array problems:

```python
from dsakit.arrays import max_subarray_sum, three_sum

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
three_sum([-1, 0, 1, 2, -1, -4])                    # [(-1, -1, 2), (-1, 0, 1)]
```

`max_subarray_sum` resets its running sum to zero whenever it turns negative,
so a sequence of only negative numbers gives 0; `max_subarray_sum_brute`
checks every non-empty subarray instead.

Graphs given as adjacency matrices, where 0 means "no edge":

```python
from dsakit.spanning_trees import kruskal, prim, total_weight
from dsakit.shortest_paths import dijkstra_matrix

graph = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]
total_weight(kruskal(graph))   # 16
total_weight(prim(graph))      # 16
dijkstra_matrix(graph, 0)      # [0, 2, 5, 6, 7]
```

Unreachable vertices get a distance of `None`. `dijkstra` and
`spanning_tree_weight` take adjacency lists of `(neighbour, weight)` pairs
instead of a matrix; `has_cycle`, `topological_sort` and `find_bridges` take
adjacency lists of neighbour indices.

Containers behave like ordinary Python collections:

```python
from dsakit.singly_linked import LinkedList
from dsakit.avl import AVLTree
from dsakit.disjoint_set import DisjointSet

items = LinkedList([1, 2, 3])
items.append(4)
list(items)        # [1, 2, 3, 4]
3 in items         # True
str(items)         # '1->2->3->4->NULL'

tree = AVLTree([10, 20, 30, 40, 50, 25])
tree.inorder()     # [10, 20, 25, 30, 40, 50]
tree.height()      # 3

sets = DisjointSet(8)
sets.union(2, 3)   # True
sets.connected(2, 3)
```

## Errors

Invalid input raises a regular Python exception: for example `ValueError`
for an empty sequence passed to `max_subarray_sum`, a start vertex outside a
graph, or removing a value that `LinkedList.remove` cannot find, and
`IndexError` for `pop_front` on an empty list. Searches that may simply find
nothing, such as `binary_search`, `find_pair_with_sum` or
`subarray_with_sum`, return `None` instead.

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
prompts: graphs, arrays and trees are passed in as Python data, and results
come back as return values rather than being printed (apart from
`format_matrix`, which returns a matrix rendered as text).