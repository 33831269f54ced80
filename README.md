# pushswap

A small toolkit for the two-stack sorting puzzle. Integers start on stack
`a`, stack `b` is empty, and a fixed set of instructions moves values
between them. Each instruction that changes something prints its name.

## Instructions

`pushswap.stacks.PushSwap` holds the two stacks as `a` and `b` (deques,
top at index 0) and offers one method per instruction:

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two values of `a`                  |
| `sb`  | swap the top two values of `b`                  |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the top value goes to the bottom |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the bottom value goes to top   |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

An instruction that took effect returns `True` and writes its name and a
newline to the stream given as `out` (standard output by default). One that
cannot be applied, such as swapping a stack with fewer than two values,
returns `False` and writes nothing. The combined instructions `ss`, `rr`
and `rrr` act on `a` first; if `a` cannot be changed, `b` is left alone,
and if `a` changed but `b` cannot, the change to `a` stays but nothing is
written and `False` is returned.

## Command line

```
push-swap 3 1 2
push-swap "3 1 2"
```

The values come either as separate arguments or as one argument split on
spaces. Each must be a whole number in the signed 32-bit range, with an
optional leading `+` or `-`, and no value may appear twice. Otherwise the
command prints `Error` on standard output and exits with status 0. With no
arguments it prints nothing.

For valid input the command runs a fixed demonstration: `sa`, then prints
the top of `a`; `pb`, then the top of `b`; `ra`, then the top of `a`;
`rra`, then the top of `a`. Each executed instruction prints its name as
well. If a stack it needs to show is empty (for example with a single
value), it writes an error message to standard error and exits with
status 1.

## Library use

```python
import sys
from pushswap.parsing import check_args, initialize_stack
from pushswap.stacks import PushSwap

args = ["3", "1", "2"]
check_args(args)            # returns [3, 1, 2]
game = PushSwap(initialize_stack(args), sys.stdout)
game.sa()
game.pb()
game.ra()
print(list(game.a), list(game.b))
```

`pushswap.parsing` provides `is_number`, `check_args` (which raises
`InvalidArgumentsError`, a `ValueError`, on bad input and otherwise returns
the integers in order) and `initialize_stack` (which returns a
`LinkedList` with the first value on top).

Helper modules:

- `pushswap.chars`: ASCII classification and case conversion
  (`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower`,
  `toupper`), taking an int code or a one-character string.
- `pushswap.strings`: `atoi`, `itoa`, `split`, `strlen`, `strdup`,
  `strchr`, `strrchr`, `strnstr`, `strncmp`, `substr`, `strjoin`,
  `strtrim`, `strmapi`, `striteri`. Searches return an index or `None`.
- `pushswap.strcopy`: `strlcpy` and `strlcat` (each returning the result
  text and the length it would have had), `strcat`, `strncat`, `strcpy`,
  `strncpy`.
- `pushswap.memory`: `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`,
  `bzero` and `calloc` over `bytes` and `bytearray`.
- `pushswap.output`: `putchar`, `putstr`, `putendl`, `putnbr` writing to a
  text stream.
- `pushswap.linked_list`: `Node` and `LinkedList`, a singly linked list
  with `push_front`, `push_back`, `last`, `remove_front`, `clear`,
  `iterate` and `map`.

## What it does not do

There is no sorting algorithm: the package does not compute a sequence of
instructions that sorts stack `a`, and there is no checker that reads
instructions and verifies a result. The command only validates its input
and runs the fixed demonstration above.

## Tests

```
pip install -e ".[test]"
pytest
```