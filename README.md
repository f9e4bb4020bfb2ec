# ftkit

`ftkit` is a small toolkit of everyday helpers with no dependencies. It covers
ASCII character classes, integer parsing and formatting, operations on byte
buffers, string utilities and a minimal `printf`. It also covers word
splitting, a line reader that reads in chunks and a singly linked list.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_white_space`,
`to_upper`, `to_lower`.

- Each function accepts a one-character string or an integer code point.
- `is_white_space` is true only for space, tab and newline.
- The case converters change only ASCII letters. They return a value of the
  same kind they were given.

### `ftkit.numbers`

- `atoi` and `atol` skip leading white space, accept one optional sign and then
  read digits up to the first non-digit. A string with no digits gives `0`.
- `itoa` returns the decimal text of an integer.
- `fits_in_int` checks a decimal string against the 32-bit signed limits.
- `factorial` and `power` return `0` for negative arguments.
- `fibonacci` returns `-1` for a negative index.
- `integer_sqrt` returns the exact square root of a perfect square whose root
  is at most 46340, and `0` otherwise.
- `is_prime` and `find_next_prime` test for primes and search for them.

### `ftkit.memory`

`memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`.

- Functions that write take a `bytearray` or a writable `memoryview`. Functions
  that only read take any bytes-like object.
- A length longer than a buffer raises `ValueError`.
- `memchr` returns an index, or `None` when the byte is absent.
- `calloc` returns a zero-filled `bytearray`. It raises `OverflowError` when the
  total size does not fit in 64 bits.

### `ftkit.output`

- `put_char`, `put_str`, `put_endl` and `put_nbr` write to a stream. The stream
  defaults to standard output.
- `to_base` writes a non-negative number with the digits of a given base.
  `DECIMAL`, `HEX_LOWER` and `HEX_UPPER` are ready-made bases.
- `render` returns a formatted string. It supports `%c %s %d %i %u %x %X %p %%`:
  - `%s` of `None` gives `(null)`.
  - `%p` of `0` or `None` gives `(nil)`.
  - Any other character after `%` is dropped together with the `%`.
  - Too few arguments raises `TypeError`.
- `printf` writes the rendered text to standard output and returns its length.

### `ftkit.strings`

`strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`,
`strdup`, `strjoin`, `join_optional`, `substr`, `strtrim`, `strmapi`,
`striteri`.

- The search functions return an index, or `None` when nothing is found.
  Searching for `"\0"` finds `len(s)`.
- `strlcpy` and `strlcat` return a pair: the resulting text and the length that
  was attempted.
- `striteri` updates a mutable sequence of characters in place.

### `ftkit.tabs`

- `count_words` counts the non-empty pieces of a string between separators.
- `split` returns those pieces as a list.
- `append_copy` returns a new list holding a table's strings followed by one
  more item. The original table is left unchanged.

### `ftkit.line_reader`

`LineReader(stream, buffer_size=5)` reads a text or binary stream in
`buffer_size` chunks.

- `read_line()` returns one line at a time, keeping its newline, and returns
  `None` at the end of the stream.
- `reset()` discards data that has been read ahead.
- Iterating over a reader yields every line.
- `read_lines(stream, buffer_size=5)` is a shortcut for iterating a reader.

### `ftkit.linked`

`Node` and `LinkedList` make up a singly linked list.

- `LinkedList` supports `push_front`, `push_back`, `last`, `len()`, iteration
  and `for_each`.
- `map(func, delete=None)` returns a new list. It stops at the first content
  that `func` maps to `None`.
- `clear(delete=None)` empties the list, calling `delete` on each content.

## Examples

```python
import io

from ftkit.line_reader import read_lines
from ftkit.numbers import atoi, itoa
from ftkit.output import render
from ftkit.tabs import split

atoi("  -42abc")                       # -42
itoa(-2147483648)                      # "-2147483648"
render("%d in hex is %x", 255, 255)    # "255 in hex is ff"
split("  a  bb c ", " ")               # ["a", "bb", "c"]

for line in read_lines(io.StringIO("one\ntwo\n"), 5):
    print(line, end="")
```

## Scope

`ftkit` is a library only. It has no command-line program, and it does no
input or output of its own beyond writing to the streams it is given, or to
standard output.