# edakit

A small collection of classic data structures and algorithms in plain
Python: linked lists, stacks and queues, binary search trees (plain, AVL and
red-black), general trees, sorting and selection, maze generation and path
search, and a k-means clustering toolkit with a similarity-search benchmark.

## Installation

```
pip install edakit
```

To run the test suite:

```
pip install "edakit[test]"
pytest
```

## Modules

| Module                 | Contents                                                     |
|------------------------|--------------------------------------------------------------|
| `edakit.linked`        | `LinkedList`, `Stack`, `Queue`, `validate_parentheses`       |
| `edakit.misc`          | `is_prime`, maximum subsequence sum in cubic, quadratic and linear time |
| `edakit.sorting`       | `selection_sort`, `quick_sort`, `k_smallest`, random arrays, `linspace` |
| `edakit.maze`          | `Maze`, a randomly carved grid maze                          |
| `edakit.bst`           | `BinarySearchTree` with subtree sizes and `kth`              |
| `edakit.avl`           | `AVLTree`, a self-balancing search tree                      |
| `edakit.rbtree`        | `RBTree` (colored nodes, no rebalancing) and `read_keys`     |
| `edakit.general_tree`  | `Tree` and `TreeNode` with any number of children            |
| `edakit.labyrinth`     | `path_exists` and `find_path` on a boolean grid              |
| `edakit.vectors`       | `euclidean_distance`, `mean_abs_difference`, `argsort`       |
| `edakit.matrix`        | `Matrix`, loadable from `.npy` files with `read_npy`         |
| `edakit.cluster`       | `Cluster`, k-means over the rows of a `Matrix`               |
| `edakit.simsearch`     | `SimSearch`, nearest neighbours with and without clusters    |
| `edakit.benchmark`     | `run_benchmark`, timings of cluster-pruned search            |

## Examples

Linked lists, stacks and queues:

```python
from edakit.linked import LinkedList, Stack, Queue

items = LinkedList()
for value in (1, 3, 5, 15, 5, 17):
    items.insert_first(value)
items.remove(5)       # removes every 5
print(items)          # 17 -> 15 -> 3 -> 1 ->
print(list(items), len(items))   # [17, 15, 3, 1] 4

stack = Stack()
for value in (0, 10, 20, 30):
    stack.push(value)
print(stack.top())    # 30

queue = Queue()
queue.push("a")
queue.push("b")
print(queue.top())    # a
```

Search trees:

```python
from edakit.bst import BinarySearchTree
from edakit.avl import AVLTree

bst = BinarySearchTree()
for value in (16, 4, 2, 20, 15, 18, 35, 50):
    bst.insert(value)
bst.update_sizes()
print(bst.kth(3).data)   # 15

avl = AVLTree()
for value in (16, 32, 45, 8, 10, 15):
    avl.insert(value)
print(list(avl))         # [8, 10, 15, 16, 32, 45]
```

Sorting and selection:

```python
import random
from edakit.sorting import quick_sort

rng = random.Random(7)
values = [5.0, 1.0, 4.0, 2.0, 3.0]
quick_sort(values, rng)
print(values)            # [1.0, 2.0, 3.0, 4.0, 5.0]
```

Maximum subsequence sum:

```python
from edakit.misc import max_subsequence_sum_linear

print(max_subsequence_sum_linear([-2, 11, -1, 3, -3, -2]))
# SubsequenceSum(start=1, end=3, total=13)
```

## Commands

Installing the package provides these commands:

- `edakit-parentheses [EXPRESSION ...]` – check that the parentheses of an
  expression balance; the arguments are joined with spaces, and with no
  arguments the expression is read from standard input.
- `edakit-kth [-n SIZE] [-k K] [--seed SEED]` – draw a random integer array
  (default size 10) and print it with its element at sorted position `k`
  (0-based, default 2).
- `edakit-maze [HEIGHT] [WIDTH] [--seed SEED]` – generate and print a random
  maze (default 21 × 21).
- `edakit-labyrinth [--start ROW COL] [--end ROW COL]` – search for a route
  through the built-in 8×8 labyrinth and print it.
- `edakit-bench [PATH] [--ks K ...] [--ms M ...] [--include-self] [--seed SEED]`
  – run the cluster-pruned similarity-search benchmark on a `.npy` dataset
  (default `../data_eda.npy`).

All commands except `edakit-parentheses` accept `--help`.

## Limitations

The package does not read, threshold or display images, and it has no
command for printing text files. `RBTree` stores colored nodes but its
insertion does not rebalance the tree.