# pushswap

`pushswap` sorts a list of distinct integers with two stacks, `a` and `b`, and a small fixed set of operations, and prints the operations it used. It prints one operation per line. Applying those lines to the input in order leaves stack `a` in ascending order.

## Operations

| Move  | Effect                                                   |
|-------|----------------------------------------------------------|
| `sa`  | swap the top two elements of `a`                         |
| `sb`  | swap the top two elements of `b`                         |
| `ss`  | `sa` and `sb`                                            |
| `pa`  | move the top of `b` onto `a`                             |
| `pb`  | move the top of `a` onto `b`                             |
| `ra`  | rotate `a` up: the first element becomes the last        |
| `rb`  | rotate `b` up                                            |
| `rr`  | `ra` and `rb`                                            |
| `rra` | rotate `a` down: the last element becomes the first      |
| `rrb` | rotate `b` down                                          |
| `rrr` | `rra` and `rrb`                                          |

In `pushswap.stacks.Stacks` an operation that cannot change its stack does nothing and is not recorded. That covers a swap or rotation with fewer than two elements, and a push from an empty stack. The combined operations `ss`, `rr` and `rrr` run both single operations and record each of them, then record their own name as well.

## Installation

```
pip install .
```

## Command line

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

You may give the numbers as separate arguments, or put several numbers in one argument separated by spaces. The first number given is the top of stack `a`.

* Nothing is printed when no arguments are given or when the input is already sorted.
* Every number must consist of decimal digits only. A leading `+` or `-` sign is rejected. Each number must fit in a signed 32-bit integer, and no number may appear twice. An empty argument, or one that holds no numbers, is also rejected. On any such error, `Error` is written to standard error and the exit status is 1.

## Library use

```python
from pushswap.sorting import solve
from pushswap.stacks import Stacks

moves = solve([3, 2, 1])          # ["sa", "rra"]

stacks = Stacks([5, 1, 4])
stacks.pb()
stacks.ra()
print(stacks.a, stacks.b, stacks.operations)
```

Modules:

* `pushswap.stacks`: the `Stacks` class. It holds `a`, `b` (deques, top first) and `operations`, and has the eleven operations as methods.
* `pushswap.sorting`: the sorting steps.
  * `solve(values)` returns the list of operations.
  * `sort_stack`, `two_sort`, `three_sort`, `move_back` and `final_sort` work on a `Stacks`.
  * `plan_moves(a, b)` returns one `Move` per element of `b`, and `cheapest_move(moves)` picks the lowest-priced one.
  * `is_sorted(values)` checks ascending order.
* `pushswap.parsing`:
  * `parse_arguments(args)` turns raw argument strings into integers, or raises `ParseError`, a subclass of `ValueError`.
  * `is_number` and `parse_long` do the per-word checks.
* `pushswap.formatting`:
  * `sprintf(fmt, *args)` is a small formatter supporting `%c %s %d %i %u %x %X %p %%`, with C's 32-bit integer semantics.
  * `printf(fmt, *args, file=None)` writes the result and returns its length.
* `pushswap.textutils`: string helpers `split`, `atoi`, `strtrim`, `strnstr` and `substr`.
* `pushswap.cli`: `main(argv=None)`, the `push_swap` command. It returns the exit status.

## Algorithm

1. If `a` is not sorted and its top two elements are out of order, they are swapped.
2. Elements are pushed to `b` until three remain on `a`.
3. The elements left on `a` are put in order.
4. Each element of `b` gets a target in `a`. The target is the smallest value in `a` that is larger than the element, or the minimum of `a` if there is none. The element with the lowest combined rotation cost is rotated to the top of `b`, its target is rotated to the top of `a`, and it is pushed back.
5. When `b` is empty, `a` is rotated so that its minimum is on top.

## Limitations

The package produces operation lists only. It has no checker command that reads operations from standard input and verifies them against a starting stack. To check a result, apply the moves yourself with `Stacks`.

## Running the tests

```
pip install .[test]
pytest
```