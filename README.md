# libft

Helpers in the style of the classic C standard library, for characters,
numbers, byte buffers, strings, descriptor output, linked lists and reading
lines from file descriptors. No third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
`to_lower`. Each takes an integer code or a one-character string. Other
strings raise `ValueError` and other types raise `TypeError`. The
classifiers return `bool` and are true only for ASCII ranges. `to_upper` and
`to_lower` change only ASCII letters and return a value of the type they
were given.

### `libft.numbers`

- `atoi(text)` skips leading whitespace (space, `\n`, `\t`, `\v`, `\f`,
  `\r`). It reads one optional sign and then digits up to the first
  non-digit. The result wraps to a 32-bit signed integer. If the magnitude
  goes past the 64-bit signed maximum, it returns `-1` for a positive number
  and `0` for a negative one.
- `itoa(n)` returns the decimal text of any integer.

### `libft.memory`

These work on `bytearray` and `memoryview` objects. Read-only arguments may
also be `bytes`. A range that runs past a buffer, or a negative length,
raises `ValueError`.

- `memset(buffer, c, length)`, `bzero(buffer, n)`
- `memcpy(dst, src, n)` copies into the start of `dst`.
- `memmove(buffer, dest, src, n)` copies between two offsets of one buffer.
  The regions may overlap.
- `memchr(data, c, n)` returns the index of the first match, or `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal bytes, or `0`.
- `calloc(count, size)` returns a zero-filled `bytearray`. It raises
  `OverflowError` when the size does not fit in 64 bits.

### `libft.strings`

Every function treats its input as ending at the first NUL character.

- `strlen`, `strdup`
- `strchr(s, c)` and `strrchr(s, c)` return an index or `None`. Searching
  for NUL gives `strlen(s)`.
- `strncmp(s1, s2, n)` returns the difference of the first mismatch.
- `strnstr(haystack, needle, length)` returns an index or `None`. An empty
  needle gives `0`.
- `strlcpy(src, dstsize)` returns `(text_that_fits, len(src))`.
- `strlcat(dst, src, dstsize)` returns `(resulting_text, length)`.
- `substr(s, start, length)`
- `strjoin(s1, s2)`: a `None` argument counts as absent. Two `None`
  arguments give `None`.
- `strtrim(s, charset)`
- `split(s, sep)` drops empty pieces.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(buffer, f)` changes a `bytearray` or a list of characters in
  place. It stops at a NUL item. Whatever `f(index, item)` returns replaces
  the item, unless it returns `None`.

### `libft.output`

`putchar_fd(c, fd)`, `putstr_fd(s, fd)`, `putendl_fd(s, fd)` and
`putnbr_fd(n, fd)` write to a raw file descriptor with `os.write`. Strings
are encoded as UTF-8 and stop at their first NUL. An integer passed to
`putchar_fd` is written as a single byte.

### `libft.linkedlist`

`LinkedList` is a singly linked list of `Node` objects, each with `content`
and `next`. It can be built from an iterable.

- `add_front(content)` and `add_back(content)` return the new node.
- `last()` returns the last node, or `None`.
- `len()` and iteration work on the contents.
- `clear(delete=None)` removes every node and calls `delete` on each content
  if `delete` is given.
- `iterate(f)` calls `f` on each content.
- `map(f, delete)` returns a new list of `f(content)`. If `f` raises,
  `delete` is called on every result made so far and the exception
  propagates.

### `libft.nextline`

`LineReader(buffer_size=42)` reads from raw file descriptors in chunks of
`buffer_size` bytes. It keeps leftover bytes separately for each descriptor.

- `read_line(fd)` returns the next line as `bytes`, including its newline.
  The last line is returned even without a newline. It returns `None` at
  end of input.
- `lines(fd)` yields the remaining lines.

A negative descriptor raises `ValueError`. When a read fails, the bytes held
for that descriptor are discarded and the `OSError` propagates.

`get_next_line(fd)` does the same with one reader that is shared between
calls.

## Example

```python
import os
from libft.strings import split, strtrim
from libft.numbers import atoi, itoa
from libft.nextline import LineReader

split("  hello  world ", " ")   # ['hello', 'world']
strtrim("xxhixx", "x")          # 'hi'
atoi("   -42abc")               # -42
itoa(-2147483648)               # '-2147483648'

reader = LineReader(buffer_size=42)
fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in reader.lines(fd):
        print(line.decode(), end="")
finally:
    os.close(fd)
```

## Not included

This is a library only. It provides no command-line program.