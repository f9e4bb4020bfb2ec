"""Reading a stream line by line in fixed-size chunks.

Lines keep their trailing newline; a final line without one is returned
as it is. Works with text streams (``str``) and binary streams (``bytes``).
"""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, List, Optional

BUFFER_SIZE = 5


class LineReader(Generic[AnyStr]):
    """Return successive lines of ``stream``, reading ``buffer_size`` at a time."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer size must be an integer, got {buffer_size!r}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` once the stream is exhausted."""
        parts: List[AnyStr] = []
        while True:
            if not self._pending:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    self._pending = None
                    break
                self._pending = chunk
            pending = self._pending
            newline = "\n" if isinstance(pending, str) else b"\n"
            cut = pending.find(newline)  # type: ignore[arg-type]
            if cut >= 0:
                parts.append(pending[: cut + 1])
                self._pending = pending[cut + 1 :]
                break
            parts.append(pending)
            self._pending = None
        if not parts:
            return None
        return parts[0][:0].join(parts)

    def reset(self) -> None:
        """Discard whatever has been read ahead but not yet returned."""
        self._pending = None

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream`` in order."""
    return iter(LineReader(stream, buffer_size))