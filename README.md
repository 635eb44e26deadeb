# dsakit

Small, readable implementations of classic data structures and array
algorithms. The package includes a singly linked list, a FIFO queue, a
character stack, an integer stack that tracks its minimum, a bracket-balance
checker, and a handful of in-place array routines. It has no dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Array routines (`dsakit.arrays`)

- `get_concatenation(nums)` returns a new list: `nums` followed by itself.
- `remove_duplicates_option1(nums)` compacts a sorted list in place, so the
  front holds each value once. It returns the number of values kept.
- `remove_duplicates_option2(nums)` does the same job. For an empty list it
  reports `1`.
- `remove_duplicates2(nums)` compacts a sorted list in place, so each value
  appears at most twice. It returns the new length. Lists shorter than three
  items are left alone.
- `remove_element(nums, val)` moves every item not equal to `val` to the
  front, keeping their order, and returns how many there are.

In every in-place routine, the items past the returned count are left as
they were.

```python
from dsakit.arrays import get_concatenation, remove_duplicates2

get_concatenation([1, 0, 3, 2])          # [1, 0, 3, 2, 1, 0, 3, 2]
remove_duplicates2([1, 2, 2, 2, 3, 4])   # 5
```

## Linked list (`dsakit.linkedlist`)

`LinkedList` is a singly linked list of `Node` objects. Each node has the
fields `val` and `next`. The list keeps `head`, `tail` and `length`.

You can build a list from any iterable. A list can be iterated over, and
`len()` works on it. `str()` renders it as `1 -> 2 -> nil`.

- `insert_at_end(val)` appends a value at the tail.
- `insert_at_head(val)` puts a value in front of the head.
- `insert_at(index, val)` inserts a value at a position from `0` to
  `len(ll)`.
- `delete_at(index)` removes the value at a position from `0` to
  `len(ll) - 1`.
- `to_list()` returns the values from head to tail.

`insert_at` and `delete_at` raise `IndexError` when the position is out of
range.

```python
from dsakit.linkedlist import LinkedList, merge_two_lists, reverse_linked_list

ll = LinkedList([1, 2, 3])
ll.insert_at_head(0)
ll.insert_at(2, 9)
ll.delete_at(0)
print(ll)            # 1 -> 9 -> 2 -> 3 -> nil
reverse_linked_list(ll)
ll.to_list()         # [3, 2, 9, 1]
len(ll)              # 4
```

`reverse_linked_list(ll)` reverses a list in place and swaps its head and
tail.

`merge_two_lists(a, b)` merges two sorted lists into a new sorted list. If
one of the two is empty, the other list itself is returned rather than a
copy.

## Queue (`dsakit.fifo`)

```python
from dsakit.fifo import Queue

q = Queue()
q.enqueue(10)
q.enqueue(20)
q.peek()      # 10
q.dequeue()   # 10
q.size()      # 1
len(q)        # 1
q.is_empty()  # False
```

On an empty queue, `dequeue()` and `peek()` raise `IndexError`.

## Stacks (`dsakit.stack`)

- `Stack` is a stack of characters with `push`, `pop`, `peek` and
  `is_empty`.
- `MinStack` is a stack of integers with the same methods plus `get_min()`.
  `get_min()` returns the smallest value on the stack in constant time.

On an empty stack, `pop`, `peek` and `get_min` raise `IndexError`.

`is_valid(s)` checks whether the brackets `()`, `{}` and `[]` in a string, or
in any sequence of characters, are balanced and properly nested. It ignores
all other characters.

```python
from dsakit.stack import MinStack, is_valid

s = MinStack()
for n in (3, 5, 2, 1):
    s.push(n)
s.get_min()   # 1
s.pop()       # 1
s.get_min()   # 2

is_valid("(){{}}")   # True
is_valid("()){{}")   # False
```

## Demo command

The package installs a small command that shows how the queue behaves once
it runs dry. It fills a queue with 1, 2 and 3, then tries to take an item
from it five times. After each attempt it prints whether an item was there,
the item (or `0` if there was none), and the size that remains:

```
dsakit-demo
```

```
true 1 2
true 2 1
true 3 0
false 0 0
false 0 0
```

The command takes no options.