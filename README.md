# bytekit

Small, dependency-free helpers for byte buffers, NUL-terminated strings,
ASCII characters, writing to file descriptors and singly linked lists.
Lengths cap operations, searches return an index or `None`, and comparisons
return the signed difference of the first bytes or characters that differ.

## Installation

```
pip install bytekit
```

## Modules

- `bytekit.chars`: ASCII character classes and case mapping: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`.
  Each accepts an integer code or a one-character string. The case mappers
  return the same kind they were given.
- `bytekit.memory`: operations on mutable byte buffers (`bytearray`,
  writable `memoryview`): `memset`, `bzero`, `calloc`, `memcpy`, `memmove`,
  `memchr`, `memcmp`. A length that reaches past the end of a buffer, or is
  negative, raises `ValueError`.
- `bytekit.colors`: the `Color` enum of ANSI terminal escape sequences
  (normal, bold, underline, background, high-intensity and reset), with
  `Color.wrap(text)` to colour a string and reset afterwards.
- `bytekit.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strdup`, `atoi` on `str` values, where an embedded `"\0"` ends the
  string; `strlcpy` and `strlcat` copy into a `bytearray` destination that
  holds NUL-terminated bytes. `atoi` wraps its result to a signed 32-bit
  integer.
- `bytekit.output`: write to a file descriptor with `os.write`:
  `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`. Each returns the
  number of bytes written.
- `bytekit.transform`: `substr`, `strjoin`, `strtrim`, `split`, `itoa`,
  `strmapi`, and `striteri`, which edits a mutable sequence in place.
- `bytekit.linked`: `Node` and `LinkedList` with `push_front`, `push_back`,
  `last`, `pop_front`, `clear`, `for_each` and `map`; `len()` and iteration
  over the contents work as usual.

## Example

```python
from bytekit.transform import split, strtrim, itoa
from bytekit.strings import atoi
from bytekit.linked import LinkedList
from bytekit.colors import Color

split("  hello  world ", " ")      # ['hello', 'world']
strtrim("xxhixx", "x")             # 'hi'
atoi("   -42abc")                  # -42
itoa(-2147483648)                  # '-2147483648'

items = LinkedList(1, 2, 3)
doubled = items.map(lambda x: x * 2, None)
list(doubled)                      # [2, 4, 6]

print(Color.RED.wrap("error"))
```

## What it does not do

bytekit has no formatted-output function: there is no `printf`-style
formatter. Output is limited to the `put*_fd` helpers in `bytekit.output`.
The package provides no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```