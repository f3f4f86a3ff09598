# dsakit

A small pure-Python library of classic data structures and algorithms:
linked lists, fixed-capacity stacks and queues, stack- and queue-based
problems, two sorting algorithms and a handful of backtracking searches.
It has no dependencies outside the standard library.

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

### `dsakit.singly`

- `Node(data, next=None)`: a node of a singly linked chain.
- `SinglyLinkedList(values=())`: keeps `head` and `tail`. Positions are
  1-based.
  - `insert_at_head(data)`, `insert_at_tail(data)`.
  - `insert_at(position, data)`: `data` ends up at `position`. Position 1
    inserts at the head, one past the end appends.
  - `delete_at(position)`: removes the node at `position` and returns its data.
  - `first()`, `last()`: the data at either end.
  - `middle()`: the data of the middle node. For an even length it is the
    second of the two middle nodes.
  - `reverse()`: reverses the list in place.
  - `len()`, iteration and `repr()`.
- Helpers that work on bare `Node` chains:
  - `find_middle(head)` counts the length first.
  - `find_middle_fast(head)` uses slow and fast pointers.
  - Both return `None` for an empty chain.
  - `reverse_iterative(head)` and `reverse_recursive(head)` reverse the chain
    in place and return the new head.

### `dsakit.doubly`

- `DoublyNode(data, prev=None, next=None)`.
- `DoublyLinkedList(values=())`: has the same `insert_at_head`,
  `insert_at_tail`, `insert_at`, `delete_at`, `first` and `last` as the singly
  linked list, with 1-based positions. It supports `len()`, forward iteration
  and `reversed()`.

### `dsakit.circular`

- `CircularNode(data, next=None)`.
- `CircularLinkedList()`: reached through its `tail` node. Iteration starts at
  the tail.
  - `insert_after(data, element)`: places `data` after the first node that
    holds `element`. On an empty list the new node becomes the only one,
    whatever `element` is.
  - `delete(element)`: removes the first node that holds `element`.

### `dsakit.queues`

- `ArrayQueue(size)`: a linear queue with `push`, `pop`, `front`, `is_empty`
  and `len()`. Slots freed by `pop` are only reused once the queue has been
  emptied completely.
- `CircularQueue(size)`: a ring-buffer FIFO with `enqueue`, `dequeue`,
  `front`, `rear`, `is_empty`, `is_full` and `len()`.
- `ArrayDeque(size)`: a ring-buffer deque with `push_front`, `push_back`,
  `pop_front`, `pop_back`, `front`, `rear`, `is_empty`, `is_full` and `len()`.
- `first_negative_in_windows(values, k)`: the first negative number in every
  window of size `k`, or 0 for a window with none.
- `reverse_queue(queue)`: reverses a `collections.deque` in place.

### `dsakit.stacks`

- `BoundedStack(size)`: `push`, `pop`, `peek`, `is_empty` and `len()`.
- `TwoStacks(size)`: two stacks that share one array and grow towards each
  other, with `push1`, `push2`, `pop1` and `pop2`.
- `KStacks(n, s)`: `s` stacks that share `n` slots through a free list. It has
  `push(element, stack)`, `pop(stack)` and `peek(stack)`. Stacks are numbered
  from 1 to `s`.
- `MinStack()`: a stack of numbers with `push`, `pop`, `top`, `get_min`,
  `is_empty` and `len()`. The minimum is available in constant time with no
  auxiliary stack.

### `dsakit.stack_algorithms`

In this module a stack is a plain `list` whose end is its top.

- `insert_at_bottom(stack, element)`, `reverse_stack(stack)` and
  `sort_stack(stack)` all change the list in place. After `sort_stack` the
  largest item is on top.
- `delete_middle(stack)`: removes and returns the item `len(stack) // 2`
  places below the top.
- `reverse_string(text)`.
- `is_valid_parentheses(text)`: `True` for a balanced sequence made only of
  `()`, `[]` and `{}`.
- `has_redundant_brackets(expression)`: `True` if some pair of parentheses
  encloses no `+ - * /` operator.
- `min_cost_to_balance(text)`: the fewest brace flips that balance a string of
  `{` and `}`.
- `next_smaller_indices(values)`, `previous_smaller_indices(values)`: the
  index of the nearest strictly smaller item on either side, or -1.
- `next_smaller_values(values)`: the next strictly smaller item, or `None`.
- `largest_rectangle_area(heights)`: the largest rectangle under a histogram.
  An empty histogram gives 0.
- `max_rectangle_in_binary_matrix(matrix)`: the area of the largest all-ones
  rectangle.
- `find_celebrity(matrix)`: the person everyone knows and who knows nobody,
  or `None`. `matrix[a][b] == 1` means that person a knows person b.

### `dsakit.sorting`

- `merge_sort(items)` and `quick_sort(items)` return a new sorted list.
  Quick sort uses the first element as the pivot.

### `dsakit.backtracking`

- `permutations(text)`: all permutations in swap-based generation order. An
  empty string gives `[]`.
- `power_set(nums)` and `subsequences(text)`: all subsets and all
  subsequences, including the empty one. At each element the branch that
  leaves it out comes first.
- `phone_keypad(digits)`: every word the digits can spell on a phone keypad.
- `rat_in_maze(grid)`: all sorted paths of `D`/`U`/`L`/`R` moves through open
  cells (value 1) of a square grid, from the top-left corner to the
  bottom-right corner.

## Errors

Operations report problems by raising an exception. None of them returns a
sentinel value.

- Popping or peeking at an empty container, and an out-of-range position,
  raise `IndexError`.
- Pushing into a full fixed-capacity container raises `OverflowError`.
- Bad arguments raise `ValueError`. Examples are an element that is missing
  from a circular list, a window size that does not fit, an odd-length brace
  string, a non-digit keypad character and a non-square maze.

## Examples

```python
from dsakit.singly import SinglyLinkedList
from dsakit.backtracking import phone_keypad, rat_in_maze
from dsakit.stack_algorithms import is_valid_parentheses, largest_rectangle_area
from dsakit.sorting import merge_sort

items = SinglyLinkedList([10, 20, 30, 40, 50, 60])
items.middle()                    # 40
items.reverse()
list(items)                       # [60, 50, 40, 30, 20, 10]

phone_keypad("23")                # ['ad', 'ae', 'af', 'bd', ...]
rat_in_maze([[1, 0, 0, 0],
             [1, 1, 0, 1],
             [1, 1, 0, 0],
             [0, 1, 1, 1]])       # ['DDRDRR', 'DRDDRR']

is_valid_parentheses("[{()}]")    # True
largest_rectangle_area([2, 4, 3, 6, 4])  # 12
merge_sort([2, 5, 1, 6, 9])       # [1, 2, 5, 6, 9]
```

## What it does not do

dsakit is a library only. It has no command-line program and no printing
helpers. Every function returns its result, and how to display it is up to
the caller.