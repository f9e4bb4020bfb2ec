"""Word counting, splitting on a separator and growing tables of strings."""

from __future__ import annotations

from typing import List, Optional, Sequence

_NUL = "\0"


def _separator(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise TypeError(f"expected a single separator character, got {sep!r}")
    return sep


def count_words(s: Optional[str], sep: str) -> int:
    """Count the non-empty runs of ``s`` between occurrences of ``sep``.

    A missing or empty string, or a ``"\\0"`` separator, counts no words.
    """
    sep = _separator(sep)
    if not s or sep == _NUL:
        return 0
    return sum(1 for part in s.split(sep) if part)


def split(s: Optional[str], sep: str) -> List[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces.

    A missing or empty string, or a ``"\\0"`` separator, gives an empty list.
    """
    sep = _separator(sep)
    if not s or sep == _NUL:
        return []
    return [part for part in s.split(sep) if part]


def append_copy(tab: Optional[Sequence[str]], item: Optional[str]) -> List[str]:
    """Return a new list holding the strings of ``tab`` followed by ``item``.

    The original table is left untouched. A missing ``item`` is not added,
    unless there is no table either, which raises :class:`ValueError`.
    """
    if tab is None:
        if item is None:
            raise ValueError("cannot start a table without an item")
        return [item]
    result = list(tab)
    if item is not None:
        result.append(item)
    return result