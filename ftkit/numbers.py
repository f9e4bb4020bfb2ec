"""Integer parsing, formatting and small arithmetic helpers."""

from __future__ import annotations

import math

INT_MAX = 2147483647
_INT_MAX_TEXT = "2147483647"
_INT_MIN_TEXT = "-2147483648"
_SQRT_LIMIT = 46340


def _is_parse_space(ch: str) -> bool:
    return ch == " " or "\t" <= ch <= "\r"


def atoi(text: str) -> int:
    """Parse a leading integer: skip white space, one optional sign, then digits.

    Parsing stops at the first non-digit; a string without digits gives 0.
    """
    pos = 0
    length = len(text)
    while pos < length and _is_parse_space(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < length and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return sign * value


def atol(text: str) -> int:
    """Parse a leading integer exactly as :func:`atoi` does."""
    return atoi(text)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return f"{n:d}"


def fits_in_int(text: str) -> bool:
    """Check a decimal string against the 32-bit signed integer limits.

    Strings longer than eleven characters, or eleven characters without a
    leading minus, are rejected; strings shorter than ten pass. Otherwise each
    character is compared one by one with the matching character of the limit,
    and any character greater than its counterpart rejects the string.
    """
    length = len(text)
    negative = text.startswith("-")
    if length > 11 or (length == 11 and not negative):
        return False
    if length < 10:
        return True
    start = 1 if negative else 0
    limit = _INT_MIN_TEXT if negative else _INT_MAX_TEXT
    return all(ch <= bound for ch, bound in zip(text[start:], limit[start:]))


def factorial(nb: int) -> int:
    """Return ``nb!``, or 0 for a negative argument."""
    if nb < 0:
        return 0
    return math.factorial(nb)


def fibonacci(index: int) -> int:
    """Return the Fibonacci number at ``index``, or -1 for a negative index."""
    if index < 0:
        return -1
    previous, current = 0, 1
    for _ in range(index):
        previous, current = current, previous + current
    return previous


def power(nb: int, exponent: int) -> int:
    """Return ``nb`` raised to ``exponent``, or 0 for a negative exponent."""
    if exponent < 0:
        return 0
    return nb**exponent


def integer_sqrt(nb: int) -> int:
    """Return the exact integer square root of ``nb``.

    Returns 0 when ``nb`` is negative, not a perfect square, or has a root
    above 46340.
    """
    if nb < 1:
        return 0
    root = math.isqrt(nb)
    if root * root == nb and root <= _SQRT_LIMIT:
        return root
    return 0


def is_prime(nb: int) -> bool:
    """Return whether ``nb`` is a prime number."""
    if nb <= 1:
        return False
    if nb in (2, 3, INT_MAX):
        return True
    if nb % 2 == 0:
        return False
    return all(nb % divisor for divisor in range(3, math.isqrt(nb) + 1, 2))


def find_next_prime(nb: int) -> int:
    """Return the smallest prime greater than or equal to ``nb`` (at least 2)."""
    if nb <= 2:
        return 2
    candidate = nb + 1 if nb % 2 == 0 else nb
    while not is_prime(candidate):
        candidate += 2
    return candidate