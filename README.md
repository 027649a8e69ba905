# ftkit

Small helpers that follow the edge-case behaviour of the classic C-library
routines they are named after: ASCII character classes, byte buffers,
NUL-terminated strings, decimal conversion, writing to file descriptors,
building strings, and a singly linked list. Where a C routine would hand back
a pointer, these return an index or a new object, with `None` for "not
found"; bad lengths and sizes raise `ValueError`.

## Installation

```
pip install .
```

To install the test dependencies and run the suite:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
`to_lower`. Each takes an integer character code or a one-character `str`.
Only ASCII ranges count. `to_upper` and `to_lower` return the same type they
were given and leave anything that is not an ASCII letter unchanged.

### `ftkit.memory`

`memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`. They
work on any object with the buffer protocol (`bytes`, `bytearray`,
`memoryview`); the writing ones need a writable buffer and raise `TypeError`
for a read-only one. Lengths longer than a buffer raise `ValueError`.
`memchr` returns an index or `None`; `memcmp` returns the difference of the
first differing bytes, or 0; `calloc(count, size)` returns a zero-filled
`bytearray`.

### `ftkit.cstring`

`strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
`strdup`. Strings may be `str` or bytes-like and end at their first NUL.
`strlcpy` and `strlcat` write into a writable byte buffer and return the
length the full result would have had. `strchr`, `strrchr` and `strnstr`
return indexes or `None`; searching for NUL finds the terminator.

### `ftkit.conversion`

- `atoi(s)` skips leading whitespace, accepts one sign, reads digits up to
  the first non-digit and wraps the result to the 32-bit signed range. Text
  without digits gives 0.
- `itoa(n)` returns the decimal text of a 32-bit signed integer and raises
  `OverflowError` outside that range.

### `ftkit.output`

`put_char`, `put_str`, `put_endl`, `put_nbr` write to a file descriptor with
`os.write`. `put_str(None, fd)` writes nothing; `put_nbr` accepts only 32-bit
signed integers.

### `ftkit.text`

- `substr(s, start, length)`
- `strjoin(s1, s2)`
- `strtrim(s, charset)` strips the characters in `charset` from both ends.
- `split(s, sep)` returns the non-empty runs between the characters `sep`.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(s, f)` calls `f(index, char)` over a mutable sequence and stores
  any non-`None` result back in place.

Passing `None` as the string gives `None`, except for `strjoin` and
`striteri`.

### `ftkit.linkedlist`

`Node(content, next=None)` and `LinkedList(items=())`. A `LinkedList` supports
`len()` and iteration over its contents, and has `head`, `add_front(node)`,
`add_back(node)`, `last()`, `clear(delete=None)`, `for_each(f)` and
`map(f, delete=None)`. If `f` raises during `map`, the contents already
produced are passed to `delete` and the error propagates.

## Examples

```python
from ftkit.conversion import atoi, itoa
from ftkit.cstring import strchr, strlcpy
from ftkit.text import split, strtrim
from ftkit.linkedlist import LinkedList, Node

atoi("  -42abc")                # -42
itoa(-2147483648)               # "-2147483648"
split("  hello  world ", " ")   # ["hello", "world"]
strtrim("xxhixx", "x")          # "hi"
strchr("hello", "l")            # 2

buf = bytearray(4)
strlcpy(buf, b"hello", 4)       # 5, buf is now b"hel\x00"

items = LinkedList([1, 2, 3])
items.add_front(Node(0))
len(items)                      # 4
list(items.map(lambda v: v * 10))  # [0, 10, 20, 30]
```

```python
import sys
from ftkit.output import put_endl, put_nbr

put_nbr(-123, sys.stdout.fileno())
put_endl("", sys.stdout.fileno())
```

## What it does not do

ftkit is a library only: it installs no command-line program.