# dsakit

A small collection of classic data-structure and algorithm routines, written
as plain Python functions and classes. It has no dependencies outside the
standard library.

## Installation

From the project directory:

```
pip install .
```

## What is inside

### `dsakit.numbers`

- `common_divisors(a, b)`: the divisors that `a` and `b` share, largest
  first; empty when either number is not positive
- `gcd(a, b)`: greatest common divisor of two positive integers; raises
  `ValueError` otherwise
- `lcm(a, b)`: least common multiple, computed as `a * b // gcd(a, b)`
- `fibonacci(steps)`: the first `steps` Fibonacci numbers starting at 0,
  never fewer than two
- `is_prime(n)`: `False` for anything below 2
- `digit_sum(n)`: sum of the decimal digits, negative when `n` is negative
- `largest_of_three(a, b, c)`
- `second_smallest(values)`: the second element after sorting ascending;
  raises `ValueError` for fewer than two values
- `bubble_sort(values)`: returns a new sorted list

### `dsakit.strings`

- `reverse(text)` and `is_palindrome(text)`
- `vowels(text)`: the vowels (either case) in the text, in order
- `is_balanced(text)`: whether `()`, `{}` and `[]` brackets match up; any
  other character makes the text unbalanced
- `longest_valid_parentheses(text)`: length of the longest well-formed
  parentheses substring; every character other than `(` counts as `)`

### `dsakit.patterns`

- `pyramid(height)`: the lines of a centred pyramid of `*`
- `inverted_triangle(rows)`: lines of `*` shrinking from `rows` to one
- `greeting()`: returns `"Hellow World!"`

### `dsakit.stack_ops`

These work on stacks held as Python lists, with the top of the stack at the
end of the list. Indexes count from the bottom.

- `copy_stack(stack)`: a new list with the same order
- `insert_at_bottom(stack, value)` and `remove_at_bottom(stack)`
- `insert_at_index(stack, value, index)` and `remove_at_index(stack, index)`:
  raise `IndexError` for an index out of range
- `min_value(stack)`: raises `ValueError` on an empty stack
- `next_greater(values)` and `next_smaller(values)`: for each element, the
  first later element that is greater (or smaller), or `-1`
- `stock_span(values)`: for each element, the distance back to the previous
  strictly greater element, or its position plus one if there is none

### Containers

- `dsakit.linked_list`: `Node` and `LinkedList`. A `LinkedList` can be built
  from an iterable and offers `insert_at_head`, `append`, `insert_at`,
  `update_at`, `delete_head`, `delete_tail`, `delete_at`,
  `delete_alternate` (keeps the first, third, fifth node and so on) and
  `delete_duplicates` (collapses runs of equal adjacent values). Positions
  count from zero; bad positions and deletes from an empty list raise
  `IndexError`. It supports `len()`, iteration, and `str()` in the form
  `1->2->3->NULL`.
- `dsakit.queues`: `LinkedQueue` (a chain of nodes) and `ArrayQueue` (a list
  with a moving front index), each with `enqueue`, `dequeue`, `front`,
  `is_empty` and `len()`. `dequeue` and `front` raise `IndexError` on an
  empty queue.
- `dsakit.stack`: `BoundedStack(capacity)`, with `push`, `pop`, `peek`,
  `is_empty`, `is_full` and `len()`. `push` on a full stack raises
  `OverflowError`; `pop` and `peek` on an empty one raise `IndexError`.

## Example

```python
from dsakit.numbers import gcd, lcm
from dsakit.strings import is_balanced
from dsakit.stack_ops import next_greater
from dsakit.linked_list import LinkedList

gcd(12, 18)                   # 6
lcm(4, 6)                     # 12
is_balanced("{[()]}")         # True
next_greater([4, 5, 2, 25])   # [5, 25, 25, -1]

items = LinkedList([1, 2, 3])
str(items)                    # "1->2->3->NULL"
```

## What it does not do

This is a library only. It has no command-line program and reads nothing
from standard input; call the functions and classes from your own code.

## Running the tests

```
pip install ".[test]"
pytest
```