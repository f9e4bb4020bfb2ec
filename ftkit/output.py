"""Writing characters, strings and numbers, and a small printf.

The stream arguments default to standard output, looked up at call time.
:func:`render` supports the conversions ``%c %s %d %i %u %x %X %p %%``;
any other character after ``%`` is dropped together with the ``%``.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

from .numbers import itoa

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError(f"expected a single character, got {c!r}")
    _stream(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    _stream(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal representation of an integer."""
    _stream(stream).write(itoa(n))


def to_base(n: int, base: str) -> str:
    """Return non-negative ``n`` written with the digits of ``base``."""
    if len(base) < 2:
        raise ValueError("a base needs at least two digits")
    if n < 0:
        raise ValueError(f"expected a non-negative number, got {n}")
    radix = len(base)
    digits = []
    while True:
        n, remainder = divmod(n, radix)
        digits.append(base[remainder])
        if n == 0:
            break
    return "".join(reversed(digits))


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {value!r}")
    return value


def _signed_int(value: Any) -> str:
    n = (_as_int(value) + 2**31) % 2**32 - 2**31
    return itoa(n)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"expected a single character, got {value!r}")
        return value
    return chr(_as_int(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"expected a string argument, got {value!r}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    n = _as_int(value) & _ULONG_MASK
    if n == 0:
        return "(nil)"
    return "0x" + to_base(n, HEX_LOWER)


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "d": _signed_int,
    "i": _signed_int,
    "c": _char,
    "s": _string,
    "u": lambda v: to_base(_as_int(v) & _UINT_MASK, DECIMAL),
    "x": lambda v: to_base(_as_int(v) & _UINT_MASK, HEX_LOWER),
    "X": lambda v: to_base(_as_int(v) & _UINT_MASK, HEX_UPPER),
    "p": _pointer,
}


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec == "%":
            yield "%"
        elif spec in _CONVERSIONS:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            yield _CONVERSIONS[spec](value)


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``."""
    if not isinstance(fmt, str):
        raise TypeError(f"expected a format string, got {type(fmt).__name__}")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered format to standard output; return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)