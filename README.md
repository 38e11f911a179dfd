# pushswap

`pushswap` sorts a list of integers using two stacks, `a` and `b`, and a small
set of instructions. It prints the instructions it uses, one per line:

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two values of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | shift `a`, `b`, or both up (the top goes to the bottom) |
| `rra`, `rrb`, `rrr` | shift `a`, `b`, or both down (the bottom goes to the top) |

Two or three values are sorted directly. Longer inputs are sorted with a
cost-driven strategy: values are moved to `b` one at a time, each turn picking
the value that needs the fewest rotations, then brought back to `a` in order.

## Installation

```console
pip install .
```

## Command line

Give the numbers as separate arguments or as one space-separated string:

```console
push-swap 2 1 3
push-swap "5 4 3 2 1"
```

Input that is already sorted produces no output and exit status 0.

`Error` is written to standard error and the exit status is 1 when:

- an argument reads as zero but does not begin with `0` (for example `abc`
  or `+0`); text after the leading digits is ignored, so `12abc` reads as 12,
- a value lies outside the 32-bit signed range,
- two values are equal. When the numbers come as one string, the first
  number is left out of this check.

With no arguments nothing is printed and the exit status is 1.

## Library

```python
from pushswap.cli import solve

instructions = solve(["2", "1", "3"])   # ['sa']
```

`solve` takes the arguments without a program name and returns the list of
instructions; it raises `pushswap.validation.InputError` on bad input
(`error.reported` is false when there were no arguments).

- `pushswap.stack.Stacks(a, b, emit)`: the two stacks as deques (top at
  index 0) with the methods `sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`,
  `rra`, `rrb`, `rrr`. Each instruction that takes effect is passed by name
  to `emit`.
- `pushswap.turk`: `push_swap(stacks, size)` and its parts (`sort_three`,
  `push_all_b`, `push_back_a`, `cheapest`, `move_prices`, `rotate_best`,
  `find_target`, `find_pos`).
- `pushswap.radix`: `radix_sort(stacks, size)` sorts ranks `0 .. size - 1`
  bit by bit; `max_bits(size)` gives the number of passes. The command does
  not use it.
- `pushswap.validation`: `validate`, `check_args`, `has_duplicate`,
  `split_arguments`, `split_words`, `safe_atol`, `c_atoi`.
- `pushswap.parser`: `parse_stack`, `is_sorted`, `simplify` (replace values
  by their ranks).

## Running an external sorter

`pushswap.visualizer.runner.PushSwapRunner(path)` runs `path` through the
shell with the numbers appended, and `run(numbers)` returns the lines it
printed (also kept in `commands`). `pushswap.visualizer.splitting` provides
`split_to_strings` and `split_to_ints` for delimited text.

## Helpers

`pushswap.libft` holds small helpers with classic C semantics:

- `strings`: `strlen`, `strchr`, `strrchr`, `strdup`, `strjoin`, `strlcpy`,
  `strlcat`, `strncmp`, `strnstr`, `strtrim`, `substr`, `strmapi`,
  `striteri`, `itoa`; a string ends at its first NUL.
- `chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower` for code points or one-character strings.
- `memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memchr`,
  `memcmp` on byte buffers, and `selection_sort`.
- `linked_list`: `LinkedList` with `add_front`, `add_back`, `last`, `apply`,
  `map`, `clear`, `len()` and iteration.
- `lines`: `LineReader(buffer_size).next_line(fd)` and `get_next_line(fd)`
  return one line (as bytes) per call per file descriptor.

## What it does not do

The package has no graphical display: it cannot replay an instruction list
step by step or draw the stacks. `PushSwapRunner` only collects the
instructions a sorter prints. There are no printf-style formatting or
file-descriptor printing helpers in `pushswap.libft`.