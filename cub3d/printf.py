"""A small formatted printer.

Supported conversions: %c, %s, %d, %i, %u, %x, %X, %p and %%. Numbers
follow the widths of the platform types: %d and %i wrap to a signed
32-bit value, %u, %x and %X to an unsigned 32-bit value, and %p prints a
64-bit address. An unknown conversion prints nothing and takes no
argument. A lone "%" at the end of the format prints "(nil)" and ends the
output; those characters are not included in the count printf returns.
"""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO, Tuple

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF


def _next_arg(args: Iterator, spec: str):
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _require_int(value, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} needs an integer, got {type(value).__name__}")
    return value


def _signed32(n: int) -> int:
    n &= _U32
    return n - (1 << 32) if n & 0x80000000 else n


def _hex(n: int, digits: str) -> str:
    out = []
    while True:
        n, rem = divmod(n, 16)
        out.append(digits[rem])
        if n == 0:
            break
    return "".join(reversed(out))


def _convert(spec: str, args: Iterator) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        value = _next_arg(args, spec)
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError(f"%c needs a single character, got {value!r}")
            return value
        return chr(_require_int(value, spec) & 0xFF)
    if spec == "s":
        value = _next_arg(args, spec)
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s needs a string, got {type(value).__name__}")
        return value
    if spec in ("d", "i"):
        return str(_signed32(_require_int(_next_arg(args, spec), spec)))
    if spec == "u":
        return str(_require_int(_next_arg(args, spec), spec) & _U32)
    if spec in ("x", "X"):
        value = _require_int(_next_arg(args, spec), spec) & _U32
        return _hex(value, _LOWER_HEX if spec == "x" else _UPPER_HEX)
    if spec == "p":
        value = _next_arg(args, spec)
        address = value if isinstance(value, int) or value is None else id(value)
        if not address:
            return "(nil)"
        return "0x" + _hex(address & _U64, _LOWER_HEX)
    return ""


def _render(fmt: str, args: tuple) -> Tuple[str, int]:
    parts = []
    count = 0
    arg_iter = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            count += 1
            continue
        spec = next(chars, None)
        if spec is None:
            parts.append("(nil)")
            break
        piece = _convert(spec, arg_iter)
        parts.append(piece)
        count += len(piece)
    return "".join(parts), count


def format_string(fmt: str, *args) -> str:
    """Return the text that printf would write for fmt and args."""
    return _render(fmt, args)[0]


def printf(fmt: str, *args, stream: Optional[TextIO] = None) -> int:
    """Write formatted text to stream (standard output by default).

    Returns the number of characters counted as printed.
    """
    text, count = _render(fmt, args)
    (sys.stdout if stream is None else stream).write(text)
    return count