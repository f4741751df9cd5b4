# algodrills

A collection of classic algorithm and data-structure exercises. Each one is a
small, self-contained Python function or class that uses only the standard
library. Use it to study common techniques, to check your own answers, or as
ready-made building blocks.

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
| `algodrills.linked_lists` | `ListNode` (iterable over its values), `from_values`, `to_values`, `reverse_list`, `reverse_list_recursive`, `merge_two_lists`, `merge_k_lists`, `merge_k_lists_sequential` |
| `algodrills.trees` | `TreeNode`, `from_level_order`, `diameter_of_binary_tree`, `diameter_of_binary_tree_naive`, `max_depth`, `invert_tree`, `has_path_sum`, `search_bst`, `insert_into_bst`, `delete_node`, `level_order`, `right_side_view`, `inorder_traversal`, `inorder_traversal_iterative`, `build_tree`, `kth_smallest` |
| `algodrills.arrays` | `NumArray` (prefix-sum range queries), `get_concatenation`, `remove_duplicates`, `remove_duplicates_at_most_twice`, `remove_element`, `pivot_index`, `contains_nearby_duplicate`, `num_of_subarrays`, `max_area`, `min_sub_array_len`, `max_profit`, `longest_consecutive`, `arithmetic_triplets`, `single_number`, `hamming_weight` |
| `algodrills.searching` | `binary_search`, `search_matrix` |
| `algodrills.dynamic_programming` | `coin_change`, `rob`, `rob_circular`, `min_cost_climbing_stairs`, `climb_stairs`, `climb_stairs_memo`, `maximum_profit` (0/1 knapsack), `can_partition`, `find_target_sum_ways` |
| `algodrills.greedy` | `can_jump`, `jump` |
| `algodrills.containers` | `DynamicArray`, `MinStack`, `Deque`, `LinkedList`, `DoublyLinkedList`, `BrowserHistory`, `QueueStack` |
| `algodrills.simulations` | `cal_points` (baseball score record), `count_students` (lunch queue) |
| `algodrills.tree_map` | `TreeMap` (ordered map on a binary search tree), `KthLargest` (k-th largest of a stream) |

## Examples

```python
from algodrills.dynamic_programming import coin_change, climb_stairs
from algodrills.linked_lists import from_values, to_values, reverse_list
from algodrills.trees import from_level_order, max_depth, level_order
from algodrills.containers import MinStack
from algodrills.tree_map import TreeMap

coin_change([1, 2, 5], 11)          # 3
coin_change([2], 3)                 # -1
climb_stairs(5)                     # 8

head = from_values([1, 2, 3])
to_values(reverse_list(head))       # [3, 2, 1]

root = from_level_order([3, 9, 20, None, None, 15, 7])
max_depth(root)                     # 3
level_order(root)                   # [[3], [9, 20], [15, 7]]

stack = MinStack()
stack.push(5)
stack.push(2)
stack.get_min()                     # 2

tree = TreeMap()
tree.insert(2, 20)
tree.insert(1, 10)
tree.inorder_keys()                 # [1, 2]
tree.get_min()                      # 10
```

## Conventions

- Functions that compact a list in place, such as `remove_duplicates`,
  `remove_duplicates_at_most_twice` and `remove_element`, return the length of
  the kept front part of the list.
- Lookups that fail raise rather than return a marker value: `DynamicArray`,
  `LinkedList`, `DoublyLinkedList.get`, `MinStack`, `Deque` and `QueueStack`
  raise `IndexError`; `TreeMap.get` raises `KeyError`; `TreeMap.get_min` and
  `get_max` on an empty map raise `ValueError`.
- A few search-style functions keep the classic `-1` answer for "not found":
  `binary_search`, `pivot_index`, `coin_change` and `kth_smallest`.
- `DoublyLinkedList.add_at_index` and `delete_at_index` quietly ignore an
  out-of-range index, and `TreeMap.remove` ignores a missing key.

## What this package does not cover

There are no string exercises (palindromes, parentheses matching, character
windows), no sorting routines and no backtracking problems (combinations,
subsets). The package is a library only: it has no command-line tool.