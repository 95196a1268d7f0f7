# dsalgo

Classic data structures and algorithms in plain Python. No third-party
libraries are needed at run time.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsalgo.nodes` | `ListNode`, `DoublyListNode`, `TreeNode` (with `parent`, `left`, `right`, `height`) |
| `dsalgo.linked_list` | `list_create`, `insert`, `remove`, `access`, `find`, `to_list`, `reverse`, `merge` |
| `dsalgo.stacks` | `ArrayStack`, `LinkedListStack` |
| `dsalgo.queues` | `ArrayQueue`, `LinkedListQueue`, `ArrayDeque`, `LinkedListDeque`, `QueueFullError` |
| `dsalgo.arrays` | `ZArray`, and list helpers `random_access`, `extend`, `insert`, `remove`, `traverse`, `find` |
| `dsalgo.dynamic_list` | `MyList`, a list with explicit capacity that doubles when full |
| `dsalgo.sequential_list` | `SequentialList` (100 elements at most by default), `SequentialListFullError` |
| `dsalgo.hash_maps` | `Pair`, `ArrayHashMap` (100 single-pair buckets), `HashMapChaining` |
| `dsalgo.binary_tree` | `insert_left`, `insert_right`, recursive and iterative pre/in/post-order, `level_order`, `find`, `count`, `height`, `build_from_preorder` |
| `dsalgo.array_binary_tree` | `ArrayBinaryTree`, a tree stored by level with `None` for empty slots |
| `dsalgo.bst` | `BinarySearchTree`, `rotate_left`, `rotate_right` |
| `dsalgo.strings` | `index_bf`, `kmp_next`, `index_kmp` (1-based positions) |
| `dsalgo.sorting` | in-place `bubble_sort`, `select_sort`, `insert_sort`, `quick_sort`, `heap_sort` |
| `dsalgo.backtracking` | `n_queens`, `permutations_i`, `permutations_ii`, `subset_sum_i`, `subset_sum_i_naive`, `subset_sum_ii`, and tree searches `find_value_nodes`, `paths_to_value`, `paths_to_value_avoiding`, `paths_by_template` |
| `dsalgo.complexity` | small functions showing constant, linear, quadratic, exponential, logarithmic and factorial growth; `fib`, `recur`, `tail_recur`, `build_full_tree`, `random_numbers`, `find_one` |
| `dsalgo.divide_conquer` | `binary_search`, `build_tree` (from pre- and in-order), `solve_hanota` |
| `dsalgo.climbing` | stair climbing by backtracking, search, memoised search and DP; the constrained and minimum-cost variants |
| `dsalgo.knapsack` | 0-1 and unbounded knapsack, `coin_change_dp`, `coin_change_ii_dp` and their single-row forms |
| `dsalgo.grid_dp` | edit distance and minimum path sum, each by search, memoised search, DP and single-row DP |

## Examples

```python
from dsalgo.stacks import ArrayStack
from dsalgo.queues import ArrayDeque
from dsalgo.hash_maps import HashMapChaining
from dsalgo.bst import BinarySearchTree
from dsalgo.strings import index_kmp
from dsalgo.knapsack import knapsack_dp
from dsalgo.grid_dp import edit_distance_dp

stack = ArrayStack()
for n in (1, 2, 3):
    stack.push(n)
stack.pop()            # 3

deque = ArrayDeque(10)
deque.push_last(3)
deque.push_first(1)
deque.to_list()        # [1, 3]

table = HashMapChaining()
table.put(12836, "alpha")
table.get(12836)       # "alpha"
table.get(1)           # None

tree = BinarySearchTree()
for n in (8, 4, 12):
    tree.insert(n)
tree.search(4).val     # 4

index_kmp("hello world", "world")                                  # 7
knapsack_dp([10, 20, 30, 40, 50], [50, 120, 150, 210, 240], 50)   # 270
edit_distance_dp("bag", "pack")                                    # 3
```

## Errors

- Reading or popping an empty stack, queue or deque raises `IndexError`.
- Pushing onto a full `ArrayQueue` or `ArrayDeque` raises `QueueFullError`;
  inserting into a full `SequentialList` raises `SequentialListFullError`.
- Out-of-range indices raise `IndexError` in `ZArray` item access and insert,
  `MyList`, `SequentialList` and the `dsalgo.arrays` helpers `insert` and
  `remove`. `ZArray.remove` ignores an index out of range, and
  `ArrayBinaryTree.val` returns `None` for one.
- Invalid arguments, such as negative capacities, non-positive coins or an
  empty grid, raise `ValueError`.

## What it does not do

`dsalgo` is a library only: it installs no command and prints nothing. The
hash maps take integer keys and string values, and nothing is stored on disk.