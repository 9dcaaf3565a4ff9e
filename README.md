# dsakit

A small collection of classic data structures and algorithms in plain Python, with no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install with the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## What is inside

### `dsakit.arrays`

- `insert_at(items, pos, value)` returns a new list with `value` placed at index `pos`. `pos` may be anything from `0` to `len(items)`. Any other value raises `IndexError`.
- `delete_at(items, pos)` returns a new list without the element at index `pos`. A `pos` outside the list raises `IndexError`.
- `sparse_triplets(matrix)` lists the non-zero cells of a matrix as frozen `Triplet(row, col, value)` records, in row-major order.
- `format_triplets(triplets)` renders triplets as a table. The table has a heading line, a `Row Col Value` header, and one right-aligned line per entry.

```python
from dsakit.arrays import insert_at, delete_at, sparse_triplets, format_triplets

insert_at([10, 20, 30, 40], 2, 25)   # [10, 20, 25, 30, 40]
delete_at([10, 20, 30, 40], 1)       # [10, 30, 40]
print(format_triplets(sparse_triplets([[0, 0, 3], [0, 0, 0], [5, 0, 0], [0, 2, 0]])))
```

### `dsakit.recursion`

- `factorial(n)` returns `n!`. A negative `n` raises `ValueError`.
- `fibonacci(n)` returns the nth Fibonacci number, with `fibonacci(0) == 0` and `fibonacci(1) == 1`. A negative `n` raises `ValueError`.
- `fibonacci_series(count)` is a generator that yields the first `count` Fibonacci numbers, starting from 0.

### `dsakit.searching`

- `binary_search(items, key)` searches a sequence sorted in ascending order. It returns the index of `key`, or `None` if `key` is not there.
- `linear_search(items, key)` returns the index of the first element equal to `key`, or `None` if there is no such element.

### `dsakit.sorting`

`insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` and `shell_sort` each take an iterable and return a new list in ascending order. The input is left as it was.

```python
from dsakit.sorting import quick_sort

quick_sort([10, 7, 8, 9, 1, 5])   # [1, 5, 7, 8, 9, 10]
```

### `dsakit.stacks`

- `ArrayStack(capacity=5)` is a stack with a fixed capacity. Pushing onto a full stack raises `StackOverflow`. A capacity below 1 raises `ValueError`.
- `LinkedStack()` is an unbounded stack made of linked nodes.

Both have `push`, `pop`, `peek`, `is_empty` and `len()`. On both, popping or peeking an empty stack raises `StackUnderflow`. `StackOverflow` and `StackUnderflow` both derive from `StackError`. Iterating a stack yields its items from top to bottom.

```python
from dsakit.stacks import ArrayStack

stack = ArrayStack()
stack.push(1)
stack.push(2)
stack.peek()    # 2
list(stack)     # [2, 1]
```

## Interactive stack menu

```
dsakit
dsakit --capacity 10
dsakit --linked
```

This command starts a menu-driven session on a stack. By default it uses an `ArrayStack` with capacity 5. `--capacity` sets a different capacity, and `--linked` uses a `LinkedStack` instead. Choices are read from standard input, one per line:

1. push (the next line holds the integer to push)
2. pop
3. display, from top to bottom
4. peek
5. exit

Input that is not one of these choices is reported as invalid. The session also ends when the input runs out.

The same loop can be run from code with `dsakit.cli.run_stack_menu(stack, lines, out)`. It reads its input from any iterable of lines and writes its output to a text stream.

## What it does not do

The stack menu is the only command. The array, recursion, searching and sorting functions are offered as a library only. The menu keeps its stack in memory, and nothing is saved between sessions.