# ftlib

Helpers for characters, byte buffers and strings, functions that write to
file descriptors, a minimal `printf`, and a buffered line reader.

## Installation

```
pip install .
```

With test dependencies:

```
pip install ".[test]"
```

## Modules

- `ftlib.chars`: ASCII classification (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`), case mapping (`to_upper`, `to_lower`, which
  accept a one-character string or an int and return the same kind), and
  integer conversion: `atoi` parses a leading decimal number after
  whitespace and one optional sign, `itoa` renders a 32-bit signed integer
  (values outside that range raise `OverflowError`).
- `ftlib.memory`: operations on `bytearray`/`memoryview` buffers:
  `memset`, `bzero`, `memcpy`, `memmove`, `memchr` (returns an index or
  `None`), `memcmp` (difference of the first unequal bytes) and `calloc`
  (a zeroed `bytearray`, one byte long when either argument is zero).
  A length larger than a buffer raises `ValueError`.
- `ftlib.strings`: `strlen`, `strchr` and `strrchr` (return an index or
  `None`), `strncmp`, `strnstr`, `strlcpy` and `strlcat` (return the
  resulting text together with the attempted length), `strdup`, `substr`,
  `strjoin`, `strtrim`, `split` (drops empty pieces), `strmapi` and
  `striteri` (calls a function on each item of a mutable sequence and
  replaces the item with any non-`None` result).
- `ftlib.output`: write to a file descriptor: `putchar_fd`, `putstr_fd`
  (stops at the first NUL; `None` writes nothing), `putendl_fd`,
  `putnbr_fd` (32-bit signed) and `putnbr_unsigned_fd` (32-bit unsigned).
- `ftlib.printf`: `sprintf` returns the formatted text and `printf`
  writes it to standard output and returns its length. Supported
  conversions are `%c`, `%s`, `%d`, `%i`, `%u`, `%x`, `%X`, `%p` and `%%`.
  Integers wrap to 32 bits as C `int`/`unsigned int` would; `%s` with
  `None` gives `(null)`; `%p` with `None` or `0` gives `(nil)`, an int is
  shown as an address and any other object by its `id()`. An unknown
  conversion produces nothing and consumes no argument; too few arguments
  raise `TypeError`. The helpers `numlen_base` and `itoa_base` count and
  render digits in any base.
- `ftlib.nextline`: `LineReader(fd, buffer_size=42)` reads a descriptor in
  chunks and returns one line per `next_line()` call (keeping the newline,
  `None` at the end); it is also iterable. `get_next_line(fd)` keeps a
  reader per descriptor between calls.
- `ftlib.demo`: runs a fixed set of `printf` cases.

## Examples

```python
from ftlib.printf import sprintf
from ftlib.strings import split, strtrim

sprintf("%d in hex is %x", 255, 255)   # "255 in hex is ff"
split("a,,b,c", ",")                   # ["a", "b", "c"]
strtrim("xxhixx", "x")                 # "hi"
```

Reading a file line by line:

```python
import os
from ftlib.nextline import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in LineReader(fd, 42):
        print(line, end="")
finally:
    os.close(fd)
```

## Commands

`ftlib-demo` prints each test case with `ftlib.printf` followed by the
number of characters it wrote and the length `sprintf` gives for it.

`ftlib-lines` prints a file with each line preceded by its number:

```
ftlib-lines notes.txt
ftlib-lines --buffer-size 8 notes.txt
```

## Limitations

`printf` and `sprintf` do not handle flags, field widths, precision or
length modifiers, nor floating-point conversions; only the conversions
listed above are recognised.