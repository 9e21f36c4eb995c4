# netlogkit

Small data structures and search routines for working through network
connection records: sequential and binary search, a singly linked list with
set-like helpers, a list that keeps itself sorted, and binary trees with a
level-aware binary search tree.

## Installation

```
pip install .
```

## Searching

`netlogkit.searching` offers two functions. Both return a position, or
`None` when the value is not found.

```python
from netlogkit.searching import sequential_search, binary_search

sequential_search(["a", "b", "a"], "a")   # 0, the first match
binary_search([1, 3, 5, 7, 9], 7)         # 3; the sequence must be ascending
binary_search([1, 3, 5], 4)               # None
```

## Linked lists

`netlogkit.linked_list.LinkedList` is a singly linked list addressed by
zero-based positions. It supports `len()`, iteration, `in`, indexing and
`str()` (values joined by spaces).

```python
from netlogkit.linked_list import LinkedList

items = LinkedList([1, 2])
items.insert(5, 1)
items.insert(8, 1)
str(items)                 # "1 8 5 2"
str(items.sublist(0, 2))   # "1 8 5"  (both ends included)
items.delete_range(2, 3)   # removes positions 2 and 3
str(items)                 # "1 8"
```

Other operations: `insert_front`, `insert_back`, `remove` (by position,
returns the value), `remove_value`, `remove_front`, `remove_back`, `clear`,
`at` (returns the `Node`), `first`, `index`, `count`, `reverse` (in place),
`clone`, `union` (this list followed by the other), `intersection` and
`difference` (elements of this list kept in order).

Errors are raised rather than signalled: `at` and `remove` raise
`IndexError` for positions out of range, `index` and `remove_value` raise
`ValueError` for missing values, and `union` raises `ValueError` when the
other list is empty. Positions below 1 given to `insert` put the value at
the front; positions past the end put it at the back.

## Sorted linked lists

`netlogkit.sorted_linked_list.SortedLinkedList` keeps its values in
ascending order. `insert(value)` places each value before the first element
that is not smaller; `insert_front` and `insert_back` raise `TypeError`.
`index` and `count` stop as soon as they pass the value, and
`remove_duplicates` keeps one element of every run of equal values.

```python
from netlogkit.sorted_linked_list import SortedLinkedList

values = SortedLinkedList([5, 1, 3, 3, 1])
list(values)            # [1, 1, 3, 3, 5]
values.count(3)         # 2
values.remove_duplicates()
list(values)            # [1, 3, 5]
```

## Trees

`netlogkit.trees` provides `TreeNode`, `BinaryTree`, `BST` and the
`TraversalOrder` enum (`PRE_ORDER = 1`, `IN_ORDER = 2`, `POST_ORDER = 3`,
`LEVEL_BY_LEVEL = 4`).

`BinaryTree` fills itself through `insert_under(value, parent)` and offers
`pre_order`, `in_order`, `post_order`, `bottom_n(n)` (the first `n` values
in in-order), `leaves`, `clear` and `is_empty`.

`BST` inserts by value and rejects duplicates:

```python
from netlogkit.trees import BST, TraversalOrder

tree = BST()
for value in (10, 8, 4, 12, 6, 9, 7, 3):
    tree.insert(value)         # True for each new value, False for a repeat

tree.height()                  # 5
tree.visit(TraversalOrder.IN_ORDER)   # [3, 4, 6, 7, 8, 9, 10, 12]
tree.visit(1)                  # pre-order; plain numbers 1-4 are accepted
tree.levels()                  # [[10], [8, 12], [4, 9], [3, 6], [7]]

node = tree.search(7)          # the TreeNode, or None
tree.ancestors(node)           # [6, 4, 8, 10]
tree.level_of(node)            # 5
```

`set_levels()` recomputes every node's level and the tree's height from
scratch.

## What this package does not do

The package does not read connection-log files and has no command-line
program or ready-made reports; it provides only the search routines, lists
and trees described above, for use from Python code. It has no sorting
module either: use Python's `sorted` where ordering is needed.

## Running the tests

```
pip install .[test]
pytest
```