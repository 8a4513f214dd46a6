# dsalgo

A small collection of textbook data structures and graph algorithms. Each
one comes with a command that demonstrates it. The package has no
dependencies outside the standard library.

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

| Module                  | Contents                                                              |
|-------------------------|-----------------------------------------------------------------------|
| `dsalgo.queue_array`    | `ArrayQueue`, a bounded FIFO queue with `reverse` and `unique`        |
| `dsalgo.stack_array`    | `ArrayStack`, a bounded LIFO stack with `insert_at_bottom` and `reverse` |
| `dsalgo.singly_linked`  | `SinglyLinkedList` with positional insert, `remove_all`, `position_of` and `middle` |
| `dsalgo.doubly_linked`  | `DoublyLinkedList` with forward and backward iteration                |
| `dsalgo.bst`            | `BinarySearchTree`, including `to_greater_sum_tree`                   |
| `dsalgo.avl`            | `AVLTree`, a self-balancing search tree                               |
| `dsalgo.heap`           | `MinHeap`, `build_min_heap`, `heap_sort`, `check_heap_type`, `HeapType` |
| `dsalgo.bfs`            | `undirected_adjacency`, `bfs`, `shortest_path`, `BfsResult`           |
| `dsalgo.dfs`            | `directed_adjacency`, `dfs`, `connected_components`, `DfsResult`      |

Linked-list positions are 1-based. Tree heights count edges, so a single
node has height 0 and an empty tree has height -1.

## Examples

```python
from dsalgo.queue_array import ArrayQueue
from dsalgo.bst import BinarySearchTree
from dsalgo.heap import MinHeap, heap_sort, check_heap_type
from dsalgo.bfs import undirected_adjacency, bfs, shortest_path

queue = ArrayQueue(100)
for value in (10, 20, 30, 20):
    queue.enqueue(value)
queue.reverse()
print(list(queue))          # [20, 30, 20, 10]
print(queue.unique())       # [20, 30, 10]

tree = BinarySearchTree([10, 5, 15, 2, 7])
print(tree.inorder())       # [2, 5, 7, 10, 15]
print(7 in tree, tree.height())

heap = MinHeap([10, 5, 20, 2, 8])
print(heap.kth_smallest(3))  # 8
print(heap_sort([10, 5, 20, 2, 8]))             # [20, 10, 8, 5, 2]
print(check_heap_type([20, 15, 10, 5, 2]))      # HeapType.MAX

graph = undirected_adjacency(4, [(0, 1), (1, 2), (2, 3)])
result = bfs(graph, 0)
print(shortest_path(result, 3))  # [0, 1, 2, 3]
```

`heap_sort` works by moving each minimum to the end of a min-heap, so it
returns the values in descending order.

## Errors

Operations that cannot proceed raise exceptions rather than returning
sentinel values:

- `QueueOverflowError` / `QueueUnderflowError` for `ArrayQueue`. Slots freed
  by `dequeue` are reused only once the queue has drained completely.
- `StackOverflowError` / `StackUnderflowError` for `ArrayStack`.
- `EmptyListError` and `PositionOutOfBoundsError` for both linked lists;
  `remove` and `position_of` raise `ValueError` for a value not in the list.
- `DuplicateKeyError` when inserting a key already in a `BinarySearchTree`,
  and `KeyError` when deleting a key it does not hold. `AVLTree` ignores
  duplicate inserts and deletes of absent keys.
- `ValueError` for `minimum`/`maximum` of an empty tree and for an
  out-of-range `k` in `MinHeap.kth_smallest`; `IndexError` from
  `MinHeap.extract_min` on an empty heap.
- `NoPathError` from `shortest_path` when the target is unreachable.

## Commands

```
dsalgo-queue    # enqueue, display, de-duplicate and reverse a fixed queue
dsalgo-stack    # push four values and reverse the stack
dsalgo-sll      # interactive menu for a singly linked list
dsalgo-dll      # interactive menu for a doubly linked list
dsalgo-bst      # build a search tree, convert to a greater sum tree, delete
dsalgo-avl      # build an AVL tree, delete a key, report counts
dsalgo-heap     # build, insert into, sort and classify min heaps
dsalgo-bfs      # read an undirected graph, print distances and a shortest path
dsalgo-dfs      # read a directed graph, print DFS times and a tree count
```

The queue, stack, tree and heap commands run a fixed demonstration and read
no input. The linked-list menus and the graph commands read whitespace-
separated integers from standard input, so they can be driven from a file:

```
dsalgo-bfs < graph.txt
```

For `dsalgo-bfs` and `dsalgo-dfs` the input is the vertex count and edge
count, then one `u v` pair per edge; `dsalgo-bfs` then reads a source and a
destination vertex.

## Limitations

All structures live in memory only; nothing is saved between runs. The
component count reported by `connected_components` (and `dsalgo-dfs`) is
the number of trees in the depth-first forest of a directed graph, which
depends on vertex order and is not a count of strongly connected components.