# algokit

Small, dependency-free implementations of classic sorting and searching
algorithms, fixed-capacity containers and binary trees.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Sorting

`algokit.sorting` provides `heap_sort`, `insertion_sort`, `merge_sort`,
`quick_sort` and `selection_sort`. Each takes any iterable and returns a new
list in ascending order. The input is left unchanged. `merge_sort` is stable.
`quick_sort` uses the first element of each range as its pivot.

```python
from algokit.sorting import heap_sort, insertion_sort, merge_sort, quick_sort, selection_sort

merge_sort([4, 7, 2, 6, 1, 9, 0])   # [0, 1, 2, 4, 6, 7, 9]
quick_sort([4, 7, 2, 6, 1])         # [1, 2, 4, 6, 7]
heap_sort((4, 7, 2, 6, 1, 9, 7))    # [1, 2, 4, 6, 7, 7, 9]
```

## Searching

- `binary_search(items, target)` returns `True` if `target` occurs in the
  ascending sequence `items`, and `False` otherwise.
- `linear_search(items, target)` returns the zero-based index of the first
  element equal to `target`, or `None` if there is none.

```python
from algokit.searching import binary_search, linear_search

binary_search([1, 3, 5, 7], 5)   # True
linear_search([9, 4, 4, 2], 4)   # 1
linear_search([9, 4, 4, 2], 8)   # None
```

## Stack

`algokit.stack.BoundedStack(capacity=5)` holds at most `capacity` items.
A capacity below 1 raises `ValueError`. Pushing onto a full stack raises
`StackOverflowError`. Popping or peeking an empty stack raises
`StackUnderflowError`, which is a subclass of `IndexError`. `len()` gives the
number of items, and iteration runs from the top down.

```python
from algokit.stack import BoundedStack

stack = BoundedStack(5)
stack.push(9)
stack.push(5)
stack.pop()    # 5
stack.peek()   # 9
```

## Queues

`algokit.queues` provides three fixed-capacity containers. Each raises
`QueueFullError` when there is no room and `QueueEmptyError` (a subclass of
`IndexError`) when removing from an empty container. A capacity below 1
raises `ValueError`. All three support `len()` and iteration from front to
rear.

- `BoundedQueue(capacity=5)`: a first-in, first-out queue with `enqueue` and
  `dequeue`. Freed slots are not reused until the queue is completely empty.
  Once `capacity` items have been enqueued since the queue was last empty,
  further enqueues raise `QueueFullError`, even if some have been dequeued.
- `BoundedPriorityQueue(capacity=5)`: `enqueue(item, priority)` keeps entries
  in ascending order of priority, and `dequeue()` returns the item with the
  lowest priority value. A new item goes ahead of items already queued with
  the same priority. Iteration yields `(item, priority)` pairs.
- `CircularDeque(capacity=7)`: a double-ended queue with `push_front`,
  `push_back`, `pop_front` and `pop_back`.

```python
from algokit.queues import BoundedPriorityQueue, BoundedQueue, CircularDeque

queue = BoundedQueue(2)
queue.enqueue("a")
queue.enqueue("b")
queue.dequeue()        # "a"

pq = BoundedPriorityQueue()
pq.enqueue("x", 2)
pq.enqueue("y", 1)
pq.enqueue("z", 2)
list(pq)               # [("y", 1), ("z", 2), ("x", 2)]
pq.dequeue()           # "y"

dq = CircularDeque(7)
dq.push_front(3)
dq.push_back(5)
list(dq)               # [3, 5]
dq.pop_back()          # 5
```

## Trees

`algokit.trees.BinarySearchTree(values=())` builds an unbalanced tree by
inserting the values in the order given. Values greater than a node go to its
right. All others, duplicates included, go to its left. `insert` adds a
value. `inorder()` and `preorder()` are generators, and iterating the tree is
the same as `inorder()`. Nodes are `Node` dataclasses with `value`, `left`
and `right` fields, reachable from the tree's `root`.

`ArrayTree(values, complete_node=None)` walks a binary tree stored level by
level in a list. The children of slot `i` are `2*i + 1` and `2*i + 2`. A
child exists only where its index is at most `complete_node`, which defaults
to the length of `values`. A slot holding `0` or `None`, or lying past the
end of the list, is empty. `left_child(index)` and `right_child(index)`
return a child's index or `None`. `preorder()`, `inorder()` and `postorder()`
yield the values.

```python
from algokit.trees import ArrayTree, BinarySearchTree

tree = BinarySearchTree([5, 3, 8, 1])
list(tree.inorder())    # [1, 3, 5, 8]
list(tree.preorder())   # [5, 3, 1, 8]

array_tree = ArrayTree([1, 2, 3, 4, 5, 6, 7], 7)
list(array_tree.postorder())   # [4, 5, 2, 6, 7, 3, 1]
```

## What it does not do

algokit is a library only. It has no command-line program and no
interactive menus for reading numbers or printing containers. To use it,
import its modules from your own code.