"""String helpers: numeric conversion, splitting, searching and copying.

Searches return an index into the string, or None when nothing matches.
Characters may be given as one-character strings or as integer codes, of
which only the low byte counts. The string end counts as the character
"\\0" wherever a search is asked for it.
"""

from __future__ import annotations

from itertools import takewhile
from typing import Callable, MutableSequence, Optional, Tuple, Union

from cub3d.chars import is_digit

CharLike = Union[str, int]

_WHITESPACE = " \t\n\v\f\r"
_END = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and a single sign are skipped; parsing stops at the
    first non-digit. A string without digits gives 0.
    """
    rest = s.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign, rest = -1, rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = "".join(takewhile(is_digit, rest))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Decimal text of an integer."""
    return str(n)


def split(s: str, sep: CharLike) -> list[str]:
    """Split s on a single separator character, dropping empty pieces."""
    ch = _char(sep)
    if ch == _END:
        return [s] if s else []
    return [piece for piece in s.split(ch) if piece]


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c, len(s) for "\\0", or None."""
    ch = _char(c)
    if ch == _END:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c, len(s) for "\\0", or None."""
    ch = _char(c)
    if ch == _END:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """An independent copy of s."""
    return "".join(s)


def striteri(s: MutableSequence, func: Callable[[int, MutableSequence], object]):
    """Call func(index, s) for each position of the mutable sequence s.

    func may rewrite s[index] in place. Returns s.
    """
    if func is None or s is None:
        raise TypeError("striteri needs a sequence and a function")
    for index in range(len(s)):
        func(index, s)
    return s


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    return f"{a}{b}"


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest inside a buffer of size characters including the end.

    Returns the resulting string and the length the full result would have
    had: min(len(dest), size) + len(src).
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    used = min(len(dest), size)
    total = used + len(src)
    if used >= size:
        return dest, total
    room = max(0, size - used - 1)
    return dest + src[:room], total


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most size characters of src.

    Returns the copy and len(src). A size of 0 copies nothing.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return src[:size], len(src)


def strlen(s: Optional[str]) -> int:
    """Length of s; None counts as empty."""
    return 0 if s is None else len(s)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for each character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def strncmp(a: Optional[str], b: Optional[str], n: int) -> int:
    """Compare at most n characters of a and b.

    Returns the code difference at the first mismatch, or 0. One missing
    string gives 1, two missing give 0, and a zero count gives 1.
    """
    if a is None or b is None:
        return 0 if a is b else 1
    if n == 0:
        return 1
    for index in range(n):
        x = ord(a[index]) if index < len(a) else 0
        y = ord(b[index]) if index < len(b) else 0
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of needle lying wholly within the first n characters, or None.

    An empty needle is found at 0.
    """
    if not needle:
        return 0
    limit = max(0, min(n, len(haystack)))
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def strtrim(s: str, chars: str) -> str:
    """Remove characters found in chars from both ends of s."""
    if s is None or chars is None:
        raise TypeError("strtrim needs a string and a set of characters")
    if not chars:
        return s
    return s.strip(chars)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from start; empty when start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return s[start:start + length]