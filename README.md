# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
set of instructions. The package prints the instructions that sort the input,
and has a checker that replays instructions against a starting stack.

## Instructions

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up by one (top goes to bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down by one (bottom goes to top) |

An instruction on a stack too short for it does nothing.

## Installing

    pip install .

## Sorting

Pass the numbers either as separate arguments or as one space-separated
string. The first number is the top of stack `a`:

    push-swap 3 2 1 5 4
    push-swap "3 2 1 5 4"

One instruction is printed per line. Already sorted input prints nothing,
and so does running the command with no arguments. Input that is not an
integer (an optional `+` or `-` followed by digits), is outside the 32-bit
signed range, or contains duplicates prints `Error` on standard error and
exits with status 1.

Up to five numbers are sorted with fixed patterns. Larger inputs push every
value at or above the running average onto `b`, sort the three left in `a`,
then move each element of `b` back, always choosing the one that needs the
fewest rotations.

## Checking

The checker takes the starting numbers as arguments and reads instructions,
one per line, from standard input. It prints `OK` when `a` ends up sorted
and `b` empty, otherwise `KO`:

    push-swap 3 2 1 5 4 | push-swap-checker 3 2 1 5 4

Every instruction line must be exactly an instruction name followed by a
newline; anything else prints `Error` and exits with status 1. The checker
needs at least two numbers as separate arguments; a single argument is an
error, and no arguments at all does nothing.

## Using it from Python

```python
from pushswap.sorter import sort_values
from pushswap.checker import check

operations = sort_values([3, 2, 1, 5, 4])
print(check([3, 2, 1, 5, 4], [f"{op}\n" for op in operations]))
```

- `pushswap.stack` has the `Operation` enum, the `Stacks` pair with
  `apply()` and `is_solved()`, and the list functions `swap`, `push`,
  `rotate`, `reverse_rotate`, `is_sorted`, `min_index` and `max_index`.
- `pushswap.sorter` has `Sorter`, `sort_values`, and the helpers
  `average`, `find_target` and `move_cost`.
- `pushswap.parsing` has `parse_arguments`, `parse_string`,
  `split_numbers` and `parse_long`; bad input raises `InputError`.
- `pushswap.checker` has `parse_instruction`, `run_instructions` and
  `check`.

## Helper modules

`pushswap.libft` holds small general helpers:

- `chars`: ASCII classification (`is_alpha`, `is_digit`, ...), case
  conversion, and `atoi` / `itoa` for 32-bit integers.
- `strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `substr`, `strjoin`, `strtrim`, `split`, `strlcpy`, `strlcat`,
  `strmapi`, `striteri` and `strdup`; positions are returned as indexes,
  `None` meaning not found.
- `linked`: `Node` and `LinkedList`, a singly linked list.
- `reader`: `LineReader` and `get_next_line`, reading a text or binary
  stream line by line with a fixed read size.
- `output`: `format_printf` / `printf` with `%c %s %p %d %i %u %x %X %%`,
  and `put_char`, `put_str`, `put_endl`, `put_nbr`.

There are no raw memory helpers; use `bytearray` and slicing instead.

## Running the tests

    pip install ".[test]"
    pytest