# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and only
these operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | push the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up by one (top goes to bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down by one (bottom goes to top) |

The program prints the operations it uses, one per line. When it finishes,
`a` is sorted in ascending order with the smallest value on top.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
```

prints

```
sa
rra
```

You can give the numbers as separate arguments, as one quoted argument
with the numbers separated by spaces, or as a mix of both:

```
push-swap "4 67 3" 87 23
```

If you give no arguments, the program prints nothing. Input that is
already sorted also prints nothing. The program writes `Error` to standard
error and exits with status 1 when:

- a token is not an optional sign followed by digits,
- a number falls outside the 32-bit signed range,
- a number appears twice, or
- an argument is empty or holds only spaces.

How it sorts:

- 2 values: one swap if needed.
- 3 values: a fixed sequence of at most two operations.
- 4 and 5 values: move the smallest one or two values to `b`, sort the
  three left in `a`, then push them back.
- More values: replace each value by its rank, push the ranks to `b` in
  windows as wide as the integer square root of the count, then bring the
  largest rank left in `b` back to `a` until `b` is empty.

## Library use

```python
from pushswap.cli import solve

operations = solve([3, 2, 1])   # [Operation.SA, Operation.RRA]
```

- `pushswap.cli.solve(values)` returns the list of `Operation` members that
  sort `values`. `pushswap.cli.sort_dispatch(stacks)` sorts a `Stacks`
  object in place with the strategy that suits its size.
- `pushswap.parsing.parse_arguments(args)` turns command-line style strings
  into a list of integers and raises `pushswap.parsing.ParseError` (a
  `ValueError`) on bad input. `split_arguments`, `is_integer` and
  `parse_numbers` give access to the individual steps.
- `pushswap.stacks.Stacks(values, output=None)` holds the two stacks as
  deques, tops on the left. It has one method per operation (`sa()`,
  `pb()`, `rra()` and so on) and `apply(operation)`, which accepts an
  `Operation` or its name. Every operation applied is appended to
  `stacks.operations` and, when an output stream is given, written to it
  on its own line.
- `pushswap.small_sort` provides `is_sorted`, `move_to_top`, `sort_3`,
  `sort_4` and `sort_5`. `pushswap.chunk` provides `rank_values` and
  `chunk_sort`.

The `pushswap.ft` subpackage holds small helpers with C runtime semantics:
ASCII character tests (`chars`), `bytearray` helpers (`memory`), integer
parsing and formatting (`conversions`), NUL-terminated string functions
(`strings`, `strbuild`), stream output (`output`) and a singly linked list
(`lists`).

## What it does not do

The package finds and prints a solution. It does not read a list of
operations back and check it against the numbers. It also has no
printf-style formatted output helper.

## Tests

```
pip install ".[test]"
pytest
```