"""Character, number, memory, string, output, list and line-reading helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "numbers",
    "memory",
    "output",
    "strings",
    "tabs",
    "line_reader",
    "linked",
]