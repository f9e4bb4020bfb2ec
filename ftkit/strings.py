"""String searching, copying, joining and trimming helpers.

Positions are returned as indices into the string, or ``None`` when nothing
is found. A search for the terminating character ``"\\0"`` finds the
position just past the end of the string.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]
_NUL = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of ``c`` in ``s``.

    An empty string always yields 0. Searching for ``"\\0"`` yields ``len(s)``.
    """
    ch = _char(c)
    if not s:
        return 0
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of ``c`` in ``s``.

    Searching for ``"\\0"`` yields ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code-point difference at the first mismatch, where the end of
    a string counts as code point 0, or 0 when no difference is found.
    """
    _non_negative("n", n)
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, one kept for the end.

    Returns the copied text and the length of ``src``, the length that was
    attempted; a result shorter than ``src`` means it was truncated.
    """
    _non_negative("size", size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` slots.

    Returns the resulting text and the length that was attempted:
    ``len(src)`` plus the smaller of ``size`` and ``len(dst)``.
    """
    _non_negative("size", size)
    if size == 0:
        return dst, len(src)
    room = max(size - 1 - len(dst), 0)
    attempted = len(src) + min(size, len(dst))
    return dst + src[:room], attempted


def strdup(s: Optional[str]) -> Optional[str]:
    """Return a copy of ``s``; ``None`` stays ``None``."""
    if s is None:
        return None
    return "".join(s)


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; ``None`` when either is missing."""
    if first is None or second is None:
        return None
    return first + second


def join_optional(backup: Optional[str], buffer: Optional[str]) -> Optional[str]:
    """Append ``buffer`` to ``backup``, a missing ``backup`` counting as empty.

    Returns ``None`` when ``buffer`` is missing.
    """
    if buffer is None:
        return None
    return (backup or "") + buffer


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start beyond the end gives an empty string; ``None`` stays ``None``.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if s is None:
        return None
    if start > len(s):
        return ""
    return s[start : start + length]


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters of ``charset`` from both ends of ``s``.

    Returns ``None`` when either argument is missing.
    """
    if s is None or charset is None:
        return None
    return s.strip(charset)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each element of ``chars`` in place with ``func(index, char)``."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)