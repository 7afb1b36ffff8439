# cub3d

Small, dependency-free helpers for text handling: ASCII character tests,
C-style string functions, formatted output, a singly linked list and a
line-at-a-time reader for file descriptors.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `cub3d.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower` and
`to_upper`. Each takes a one-character string or an integer code.
Classifiers return a bool; the case converters return a value of the same
kind they were given and only touch ASCII letters.

```python
from cub3d.chars import is_alnum, to_upper

is_alnum("7")      # True
to_upper("q")      # "Q"
to_upper(97)       # 65
```

### `cub3d.textutil`

String helpers in the spirit of the C library. Searches return an index,
or `None` when nothing matches.

- `atoi(s)` parses a leading integer after whitespace and one sign;
  no digits gives 0.
- `itoa(n)`, `strdup(s)`, `strjoin(a, b)`, `strlen(s)` (`None` counts as empty).
- `split(s, sep)` splits on one character and drops empty pieces.
- `strchr(s, c)` / `strrchr(s, c)` find the first / last occurrence;
  `"\0"` is found at `len(s)`.
- `strncmp(a, b, n)` returns the code difference at the first mismatch.
- `strnstr(haystack, needle, n)` finds needle within the first n characters.
- `strlcpy(src, size)` and `strlcat(dest, src, size)` return the result
  together with the length the full result would have had.
- `strtrim(s, chars)`, `substr(s, start, length)`, `strmapi(s, func)`
  and `striteri(seq, func)`.

```python
from cub3d.textutil import atoi, split, strlcpy

atoi("  -42abc")        # -42
split("a,,b", ",")      # ["a", "b"]
strlcpy("hello", 3)     # ("hel", 5)
```

### `cub3d.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a given text
stream, or to standard output when none is given.

### `cub3d.printf`

`format_string(fmt, *args)` returns formatted text; `printf(fmt, *args,
stream=None)` writes it and returns the number of characters counted.
Supported conversions are `%c %s %d %i %u %x %X %p %%`. `%d`/`%i` wrap to
a signed 32-bit value, `%u`/`%x`/`%X` to an unsigned 32-bit value, a
`None` string prints `(null)` and a null pointer prints `(nil)`.

```python
from cub3d.printf import format_string

format_string("%d items, %x", 3, 255)   # "3 items, ff"
format_string("%s", None)               # "(null)"
```

### `cub3d.linkedlist`

`LinkedList` holds `Node` objects and supports `add_front`, `add_back`,
`last`, `pop_front(delete=None)`, `clear(delete=None)`, `iterate(func)`,
`len()` and iteration over contents.

```python
from cub3d.linkedlist import LinkedList

items = LinkedList([1, 2])
items.add_front(0)
list(items)         # [0, 1, 2]
items.pop_front()   # 0
len(items)          # 2
```

### `cub3d.nextline`

`LineReader(fd, buffer_size=42)` reads a file descriptor in chunks and
returns one line at a time from `readline()`, keeping each trailing
newline; it is also iterable. `get_next_line(fd, buffer_size=42)` keeps
separate pending input per descriptor and returns `None` at end of input
or on a read error.

## What this package does not do

There is no game here: no command to run, no window, no scene file
loading or validation, no player movement and no raycasting renderer.
The package consists only of the helper modules described above.