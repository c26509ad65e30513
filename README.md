# dsakit

dsakit is a small library of classic data structures and algorithms. Each
implementation is short enough to read in one sitting, and the package needs
nothing beyond the standard library.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest from the project
directory:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.recursion` | `tail_sequence`, `head_sequence`, `tree_sequence`, `indirect_sequence`, `mccarthy91`, `CountingSum`; `sum_recursive` / `sum_iterative`, `factorial` / `factorial_iterative`, `power` / `power_fast` / `power_iterative`, `taylor_exp`, `horner_exp_iterative` / `horner_exp_recursive`, `fib_iterative` / `fib_recursive` / `fib_memo`, `ncr_factorial` / `ncr_pascal`, `hanoi` |
| `dsakit.strings` | `length`, `to_lower`, `toggle_case`, `count_vowels_consonants`, `count_words`, `is_valid`, `reverse`, `reverse_by_swap`, `compare`, `is_palindrome`, `duplicate_counts`, `duplicates_bitwise`, `is_anagram`, `permutations`, `permutations_by_swap` |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `quick_sort`, `merge_sorted`, `merge_sort_recursive`, `merge_sort_iterative`, `count_sort`, `shell_sort` |
| `dsakit.array_adt` | `Array`, a fixed-capacity integer array with linear, transposition, move-to-head and binary search, max/min/sum/average, reversal, sorted insert, rearrangement, `resize`, and `merge`, `union`, `intersection`, `difference` of sorted arrays; `ArrayFullError` |
| `dsakit.matrices` | `DiagonalMatrix`, `LowerTriangularMatrix` (indexed as `m[i, j]`) |
| `dsakit.heap` | `MaxHeap` (`push`, `pop`, `peek`), `heap_sort` |
| `dsakit.hashing` | `ChainedHashTable`, `LinearProbingHashTable`, `TableFullError` |
| `dsakit.linked_list` | `LinkedList`, `Node` |
| `dsakit.circular_linked_list` | `CircularLinkedList` |
| `dsakit.doubly_linked_list` | `DoublyLinkedList` |
| `dsakit.stacks` | `ArrayStack`, `LinkedStack`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.queues` | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsakit.binary_tree` | `BinaryTree` with recursive and iterative traversals, `TreeNode` |
| `dsakit.bst` | `BinarySearchTree`, including `from_preorder` |
| `dsakit.avl` | `AVLTree` with LL, LR, RR and RL rotations, `AVLNode` |
| `dsakit.graphs` | `bfs`, `dfs` over adjacency matrices, `prim_mst`, `kruskal_mst`, `DisjointSet` |

The sorting functions accept any iterable and return a new sorted list.

## Examples

```python
from dsakit.recursion import hanoi, fib_memo
from dsakit.sorting import quick_sort
from dsakit.linked_list import LinkedList
from dsakit.bst import BinarySearchTree
from dsakit.binary_tree import BinaryTree

list(hanoi(2, 1, 2, 3))        # [(1, 2), (1, 3), (2, 3)]
fib_memo(10)                   # 55
quick_sort([8, 5, 7, 3, 2])    # [2, 3, 5, 7, 8]

numbers = LinkedList([2, 8, 10, 15])
numbers.reverse()
str(numbers)                   # "15 --> 10 --> 8 --> 2 --> NULL"

tree = BinarySearchTree.from_preorder([30, 20, 10, 15, 25, 40, 50, 45])
tree.inorder()                 # [10, 15, 20, 25, 30, 40, 45, 50]

# None marks a missing child in level order.
t = BinaryTree.from_level_order([1, 2, 3, None, 4])
t.preorder()                   # [1, 2, 4, 3]
t.height()                     # 2
```

## Errors

Operations that cannot be carried out raise exceptions rather than printing a
message or returning a sentinel value:

- a full `ArrayStack` raises `StackOverflowError`; popping or taking the top
  of an empty stack raises `StackUnderflowError`;
- a full `ArrayQueue` or `CircularQueue` raises `QueueFullError`; dequeueing
  from an empty queue raises `QueueEmptyError`;
- a full `Array` raises `ArrayFullError`;
- a full `LinearProbingHashTable` raises `TableFullError`, and `search` for a
  missing key raises `KeyError`;
- `BinarySearchTree.delete` of a missing key raises `KeyError`;
- an index or position out of range raises `IndexError`.

Searches that simply find nothing, such as `Array.linear_search` or
`LinkedList.search`, return `None`.

## What it does not do

dsakit is a library only: it has no command-line program and reads nothing
from standard input. Trees and matrices are built from values you pass in
(`BinaryTree.from_level_order`, `LowerTriangularMatrix.fill`) rather than
typed in interactively, and results are returned as values or strings
(`str()` on lists, matrices and hash tables) rather than printed.