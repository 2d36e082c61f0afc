# algokit

A collection of classic algorithms and data structures written in plain
Python, with no runtime dependencies. Functions return their results as
values and report bad input by raising exceptions.

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

| Module | Contents |
| --- | --- |
| `algokit.modmath` | `add_mod`, `sub_mod`, `mul_mod`, `pow_mod`, `inv_mod`, `gcd`, `lcm`, `fast_power`, `factmod`, `largest_power`, `factorial_mod`, `ncr_mod` |
| `algokit.contests` | `FenwickTree`, `min_extra_changes`, `count_right_triangles`, `count_non_right_triples`, `sum_squared_distances`, `count_almost_palindromes` |
| `algokit.avl` | `AVLTree`, a self-balancing binary search tree with `insert`, `delete`, `inorder`, `height` and `in` |
| `algokit.trie` | `Trie` for words of the letters `a`-`z` |
| `algokit.huffman` | `HuffmanNode`, `build_huffman_tree`, `huffman_codes` |
| `algokit.wheel` | `wheel_rotations` for an `a`-`z` letter wheel |
| `algokit.lca` | `LowestCommonAncestor` by binary lifting (nodes numbered from 1, root 1) |
| `algokit.dsu` | `DisjointSetUnion` with path compression and union by size |
| `algokit.mst` | `RankedDisjointSets`, `kruskal_mst`, `prim_mst` |
| `algokit.graph_search` | `topological_sort`, `bfs_levels`, `count_nodes_at_level`, `dfs_order` |
| `algokit.dijkstra` | `Graph` with `add_edge` and single-source shortest paths (`dijkstra`) |
| `algokit.suffix` | `suffix_array`, `suffix_array_radix`, `lcp_array`, `count_occurrences` |
| `algokit.lcs` | `longest_common_subsequence` |
| `algokit.searching` | `binary_search`, `contains`, `lower_bound`, `upper_bound`, `all_subsets` |
| `algokit.classics` | `Job`, `eight_queens`, `bubble_sort`, `job_sequence`, `count_pairs_with_sum`, `most_water` |
| `algokit.puzzles` | `gravity_flip`, `horseshoes_to_buy`, `untreated_crimes`, `sereja_and_dima`, `black_square_calories` |

## Examples

```python
from algokit.avl import AVLTree
from algokit.modmath import ncr_mod
from algokit.searching import lower_bound, upper_bound
from algokit.suffix import suffix_array, count_occurrences
from algokit.trie import Trie

tree = AVLTree()
for key in (10, 20, 30, 25, 28, 27, 5):
    tree.insert(key)
tree.delete(28)
print(tree.inorder())                      # [5, 10, 20, 25, 27, 30]

print(ncr_mod(10, 3, 1_000_000_007))       # 120

values = [1, 2, 2, 2, 5]
print(lower_bound(values, 2), upper_bound(values, 2))   # 1 4

print(suffix_array("ababba"))              # [6, 5, 0, 2, 4, 1, 3]
print(count_occurrences("ababba", "ab"))   # 2

trie = Trie()
for word in ("bear", "bell", "bid", "bull"):
    trie.insert(word)
print(trie.search("bell"), trie.search("belly"))   # True False
```

```python
from algokit.mst import kruskal_mst, prim_mst

edges = [(0, 1, 4), (0, 7, 8), (1, 2, 8), (6, 7, 1)]
print(kruskal_mst(9, edges))
# (21, [(6, 7), (0, 1), (0, 7), (1, 2)])

matrix = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]
print(prim_mst(matrix))
# [(0, 1, 2), (1, 2, 3), (0, 3, 6), (1, 4, 5)]
```

```python
from algokit.dijkstra import Graph

g = Graph()
g.add_edge(0, 1, False, 4)
g.add_edge(1, 2, False, 8)
g.add_edge(0, 2, False, 15)
print(g.dijkstra(0))   # {0: 0, 1: 4, 2: 12}
```

## What it does not do

`algokit` is a library only: it has no command-line tool and reads no
input files, so problems are solved by calling its functions with
Python values. It offers no range-query structures beyond the
`FenwickTree` in `algokit.contests`, and no general binary-tree or
linked-list types.