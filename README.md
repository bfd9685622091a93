# pushswap

Sorts a list of distinct integers with two stacks, `a` and `b`, and prints
the sequence of stack operations that does it.

## Operations

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the top goes to the bottom       |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the bottom goes to the top     |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

## Command line

```
pip install .
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The numbers are given either as separate arguments or as one argument
separated by spaces. The first number is the top of stack `a`. One
operation is printed per line on standard output; input that is already
sorted prints nothing. With no arguments nothing is printed.

Each word is read as an optional leading whitespace, an optional `-` and
at least one digit; reading stops at the first character that is not a
digit. The program prints `Error` on standard error when a word does not
start with a number in that form (a `+` sign is not accepted), when a
number lies outside the 32-bit signed range, when a value repeats, or
when the only argument is empty. The exit status is 0 in every case.

## Library

```python
from pushswap.algorithm import sort_numbers
from pushswap.operations import apply_operations
from pushswap.parsing import parse_arguments, ParseError

values = parse_arguments(["3 2 5 1 4"])
ops = sort_numbers(values)
a, b = apply_operations(values, ops)
assert a == sorted(values)
assert b == []
```

- `pushswap.parsing`: `parse_arguments`, `parse_int` and `split_words`;
  invalid input raises `ParseError`, a subclass of `ValueError`.
- `pushswap.stack`: `Stack`, a linked stack of `Node` objects whose top is
  its first element, with `swap`, `push_from`, `rotate`, `reverse_rotate`,
  `smallest`, `highest`, `cheapest`, `is_sorted` and `values`.
- `pushswap.operations`: `Operation`, the eleven instruction names, and
  `Machine`, which holds stacks `a` and `b` and records every operation
  performed on them in `operations`. `apply_operations(values, operations)`
  runs operations (enum members or their names) and returns the final
  contents of `a` and `b`; an unknown name raises `ValueError`.
- `pushswap.algorithm`: `sort_numbers(values)` returns the list of
  operations that sorts `values`; `push_swap`, `sort_three` and the
  rotation helpers work on a `Machine` directly.
- `pushswap.targets`: the target selection and move pricing used while
  sorting.

The `pushswap.libft` sub-package holds small helpers: character
classification (`chars`), 32-bit decimal conversion (`numbers`), writing to
a text stream (`output`), byte-buffer operations (`memory`), string search
and comparison (`search`), string building (`transform`) and a singly
linked list (`linkedlist`).

## What it does not do

There is no command that reads a list of operations and checks whether
they sort the numbers; `apply_operations` does that job from Python only.

## Tests

```
pip install ".[test]"
pytest
```