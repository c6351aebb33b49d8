# algokit

Classic algorithms and data structures in plain Python, with no runtime
dependencies. Every module is self-contained apart from `sorting` (which uses
`heap`) and `mst` (which uses `dsu`).

## Installation

```
pip install algokit
```

The `test` extra installs pytest for running the test suite.

## Modules

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `counting_sort`, `dutch_flag_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort`, `wave_sort`, `reverse`, `insert_at` |
| `algokit.searching` | `binary_search`, `max_subarray_sum` |
| `algokit.heap` | `max_heapify`, `min_heapify`, `build_max_heap`, `build_min_heap`, `MaxHeap` |
| `algokit.numbers` | `primes_up_to`, `binpow`, `binpow_mod`, `Binomial`, `count_digit_sum_range`, `splitmix64`, `CustomHash` |
| `algokit.strings` | `prefix_function`, `manacher`, `palindrome_radii`, `is_palindrome`, `infix_to_postfix` |
| `algokit.trie` | `Trie` |
| `algokit.combinatorics` | `permutations`, `subsets`, `solve_n_queens`, `m_coloring` |
| `algokit.linked_list` | `LinkedList` |
| `algokit.bst` | `BinarySearchTree` |
| `algokit.binary_tree` | `TreeNode`, `build_tree`, `preorder`, `inorder`, `postorder`, `level_order`, `lowest_common_ancestor` |
| `algokit.avl` | `AVLTree` |
| `algokit.fenwick` | `FenwickTree` |
| `algokit.segment_tree` | `MinSegmentTree`, `LazySumSegmentTree` |
| `algokit.mo` | `count_self_frequent` |
| `algokit.tree_queries` | `AncestorTable`, `LowestCommonAncestor` |
| `algokit.dsu` | `DisjointSet` |
| `algokit.mst` | `kruskal`, `prim` |
| `algokit.scheduling` | `Job`, `sequence_jobs` |
| `algokit.shortest_paths` | `bellman_ford`, `dijkstra`, `dijkstra_dense`, `floyd_warshall`, `multistage_shortest_path` |
| `algokit.graph` | `Graph`, `is_bipartite` |
| `algokit.connectivity` | `articulation_points`, `bridges` |

## Conventions

- The sorting functions take any iterable and return a new list.
- Range structures (`FenwickTree`, `MinSegmentTree`, `LazySumSegmentTree`,
  `count_self_frequent`) use 0-based, inclusive ranges. Bad indices raise
  `IndexError`, and `left > right` raises `ValueError`.
- Shortest-path functions return `math.inf` for unreachable vertices and
  number vertices `0..n-1`, except `floyd_warshall`, which numbers them
  `1..n`. `kruskal`, `prim` and `is_bipartite` also use `1..n`.
- `binary_search` returns `None` when the target is absent.
- Bad input raises an exception (`ValueError`, `IndexError` or `KeyError`)
  rather than returning a sentinel.

## Examples

Sorting and searching:

```python
from algokit.sorting import merge_sort
from algokit.searching import binary_search, max_subarray_sum

data = merge_sort([23, 2, 89, 5, 9])        # [2, 5, 9, 23, 89]
binary_search(data, 23)                     # 3
binary_search(data, 4)                      # None
max_subarray_sum([2, -1, 2, 3, 4, -5])      # 10
```

Range queries:

```python
from algokit.fenwick import FenwickTree
from algokit.segment_tree import MinSegmentTree

fenwick = FenwickTree([3, 2, 4, 5, 1])
fenwick.range_sum(2, 4)                     # 10

seg = MinSegmentTree([3, 2, 4, 5, 1])
seg.update(1, 9)
seg.query(0, 2)                             # 3
```

Graphs:

```python
from algokit.shortest_paths import dijkstra
from algokit.connectivity import bridges
from algokit.mst import kruskal

edges = [(0, 1, 4), (0, 7, 8), (1, 7, 11), (1, 2, 8)]
dijkstra(8, edges, 0)      # [0, 4, 12, inf, inf, inf, inf, 8]

bridges(5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4)])   # [(2, 3), (3, 4)]
kruskal(6, [(5, 4, 9), (1, 4, 1), (5, 1, 4)])          # (5, [(1, 4, 1), (5, 1, 4)])
```

Strings:

```python
from algokit.strings import infix_to_postfix, prefix_function
from algokit.trie import Trie

infix_to_postfix("a+b*c")       # "abc*+"
prefix_function("aabaaab")      # [0, 1, 0, 1, 2, 2, 3]

trie = Trie()
trie.insert("apple")
trie.search("apple")            # True
trie.starts_with("app")         # True
```

Numbers:

```python
from algokit.numbers import Binomial, count_digit_sum_range, primes_up_to

primes_up_to(20)                            # [2, 3, 5, 7, 11, 13, 17, 19]
Binomial(limit=1000).ncr(10, 3)             # 120
count_digit_sum_range("1", "12", 1, 8)      # 11
```

Each function and class carries a docstring describing its inputs, result and
the errors it raises.

## What it does not do

algokit is a library only. It has no command-line program and reads nothing
from standard input; feed the functions Python values and use the values they
return.