# ftcore

`ftcore` is a small library of everyday helpers:

- **`ftcore.chars`**: ASCII classification and case conversion. Each function
  takes a one-character string or an integer code. The predicates `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_lower`, `is_upper`, `is_print`,
  `is_punct` and `is_space` return `bool`. `to_lower` and `to_upper` return a
  value of the same kind they were given and leave other characters unchanged.
- **`ftcore.numbers`**: `atoi` parses a leading decimal integer from text
  (leading whitespace and one sign allowed, trailing text ignored, no digits
  gives 0, 32-bit wrap-around). `itoa` formats a 32-bit signed integer and
  raises `OverflowError` outside that range.
- **`ftcore.memory`**: byte-buffer operations on `bytearray` or writable
  `memoryview` objects: `memset`, `bzero`, `calloc`, `memchr` (an index or
  `None`), `memcmp`, `memcpy`, `memmove` (overlap-safe copy within one buffer,
  given offsets) and `realloc`. Sizes past a buffer's end raise `ValueError`.
- **`ftcore.output`**: `put_char_fd`, `put_str_fd`, `put_endl_fd` and
  `put_nbr_fd` write characters, strings (UTF-8), lines and 32-bit integers to
  a file descriptor.
- **`ftcore.linked_list`**: a singly linked list, `LinkedList`, built of
  `Node` objects, with `push_front`, `push_back`, `last`, `clear`, `for_each`,
  `map`, `to_list`, `len()` and iteration.
- **`ftcore.line_reader`**: `LineReader` reads a file descriptor one line at a
  time in chunks of a given size, returning `bytes` lines that keep their
  trailing newline; it is also an iterator.
- **`ftcore.matrix`**: row collections in which a `None` row ends the rows:
  `count_rows`, `duplicate`, `duplicate_n`, `duplicate_strings`, `release`,
  `release_n` and `release_strings`.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Examples

```python
from ftcore.numbers import atoi, itoa
from ftcore.chars import is_digit, to_upper

atoi("   -42abc")      # -42
itoa(-2147483648)      # "-2147483648"
is_digit("7")          # True
to_upper("a")          # "A"
to_upper(ord("a"))     # 65
```

```python
from ftcore.memory import memchr, memmove

buf = bytearray(b"abcdef")
memmove(buf, 2, 0, 3)  # bytearray(b"ababcf")
memchr(buf, ord("c"), 6)  # 4
```

```python
from ftcore.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
items.push_back(4)
len(items)                          # 5
list(items.map(lambda x: x * 10))   # [0, 10, 20, 30, 40]
items.to_list(terminated=True)      # [0, 1, 2, 3, 4, None]
```

```python
import os
from ftcore.line_reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in LineReader(fd, 32):
        print(line.decode("utf-8"), end="")
finally:
    os.close(fd)
```

## What it does not do

`ftcore` is a library only: it installs no command-line program.

## Running the tests

```
pytest
```