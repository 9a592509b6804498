# algocollect

A small, dependency-free collection of classic algorithms and data
structures in plain Python. Every function returns its result rather
than printing it.

## What is inside

| Module | Contents |
| --- | --- |
| `algocollect.numbers` | `is_buzz`, `gcd_of`, `is_happy`, `fibonacci`, `sieve`, `prime_factorization` |
| `algocollect.arrays` | `sorted_intersection`, `sorted_union`, `numbered_matrix`, `spiral_order` |
| `algocollect.sorting` | `next_gap`, `comb_sort`, `numeric_key`, `numeric_sort`, `cocktail_selection_sort`, `bucket_sort` |
| `algocollect.searching` | `find_word`, `three_part_search`, `ternary_search`, `ternary_search_recursive` |
| `algocollect.geometry` | `Point`, `Circle`, `distance`, `triangle_area`, `encloses`, `smallest_enclosing_circle` |
| `algocollect.backtracking` | `solve_maze`, `is_possible`, `solve_sudoku`, `format_sudoku` |
| `algocollect.circular_queue` | `CircularQueue` |
| `algocollect.binary_tree` | `TreeNode`, `BinaryTree` with breadth-first, preorder, inorder and postorder traversals |
| `algocollect.morris` | `LevelOrderTree`, `morris_inorder` |
| `algocollect.avl` | `AVLTree` |
| `algocollect.trie` | `Trie` |
| `algocollect.hashing` | `ChainedHashTable` |
| `algocollect.graphs` | `DirectedGraph`, `dfs_matrix`, `dfs_stack`, `dijkstra`, `kruskal` |

## Examples

Numbers:

```python
from algocollect.numbers import is_buzz, fibonacci, sieve, prime_factorization

is_buzz(14)               # True: divisible by 7
is_buzz(27)               # True: ends in 7
fibonacci(10)             # 55
sieve(30)                 # [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
prime_factorization(360)  # [(2, 3), (3, 2), (5, 1)]
```

`is_happy(n)` repeatedly sums the decimal digits of `n` until a single
digit remains and reports whether it is 1.

Sorting strings of digits by numeric value rather than alphabetically:

```python
from algocollect.sorting import numeric_sort

numeric_sort(["1", "10", "100", "2", "20", "200", "3", "30", "300"])
# ['1', '2', '3', '10', '20', '30', '100', '200', '300']
```

The other sorts return a new sorted list. `bucket_sort` accepts only
values in `[0, 1)` and raises `ValueError` otherwise.

Merging sorted sequences:

```python
from algocollect.arrays import sorted_intersection, sorted_union, numbered_matrix, spiral_order

sorted_intersection([1, 3, 4, 5, 7], [2, 3, 5, 6])  # [3, 5]
sorted_union([1, 3, 4, 5, 7], [2, 3, 5, 6])         # [1, 2, 3, 4, 5, 6, 7]
spiral_order(numbered_matrix(3, 3))                 # [1, 2, 3, 6, 9, 8, 7, 4, 5]
```

Searching: `find_word` returns the index of the first occurrence of a
word, or `None`, and raises `ValueError` for an empty paragraph. The
ternary searches return an index of the target in an ascending
sequence, or `None`.

A self-balancing search tree:

```python
from algocollect.avl import AVLTree

tree = AVLTree()
for key in range(1, 8):
    tree.insert(key)
tree.delete(4)       # KeyError if the key is absent
4 in tree            # False
tree.level_order()   # keys in breadth-first order
tree.height()
```

A trie of lower-case words (letters `a`-`z` only; other characters
raise `ValueError` in `insert`, `search` and `delete`):

```python
from algocollect.trie import Trie

trie = Trie()
trie.insert("hello")
trie.insert("world")
"hello" in trie       # True
"word" in trie        # False
trie.delete("hello")  # True
```

A hash table with separate chaining:

```python
from algocollect.hashing import ChainedHashTable

table = ChainedHashTable(5)
table.add(12)
table.add(7)
table.find(7)      # True
table.buckets()    # [[], [], [12, 7], [], []]
print(table.display())
```

Graphs:

```python
from algocollect.graphs import DirectedGraph, dijkstra, kruskal

graph = DirectedGraph(4)
graph.add_edge(1, 2)
graph.add_edge(2, 3)
graph.add_edge(3, 4)
graph.bfs(1)                                   # [1, 2, 3, 4]

dijkstra({"a": [("b", 2), ("c", 5)], "b": [("c", 1)]}, "a")
# {'a': 0, 'b': 2, 'c': 3}

kruskal(3, [(1, 2, 4), (2, 3, 1), (1, 3, 2)])  # 3
```

Backtracking:

```python
from algocollect.backtracking import solve_maze, solve_sudoku, format_sudoku

solve_maze([[1, 0], [1, 1]])   # [[1, 0], [1, 1]], or None if there is no path

grid = [[0] * 9 for _ in range(9)]
solution = solve_sudoku(grid)  # a solved copy, or None; grid is left unchanged
if solution is not None:
    print(format_sudoku(solution))
```

The smallest enclosing circle of a set of points:

```python
from algocollect.geometry import Point, smallest_enclosing_circle

circle = smallest_enclosing_circle([Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)])
circle.center   # Point(x=1.0, y=1.0)
circle.radius   # about 1.414
```

## What it does not do

The package is a library only. It has no command-line program and no
interactive menus or prompts; read input and print results in your own
code.

## Requirements

Python 3.10 or later. There are no runtime dependencies; the test suite
uses pytest, available through the `test` extra.