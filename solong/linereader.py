"""Chunked line reading from file-like streams."""

from __future__ import annotations

import os
from typing import IO, AnyStr, Generic, Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 1


class LineReader(Generic[AnyStr]):
    """Read a stream line by line, pulling ``buffer_size`` units per read.

    Each line keeps its trailing newline, if it has one. The last line of a
    stream that does not end in a newline comes back without one. Text and
    binary streams are both accepted. Each reader keeps its own pending
    buffer, so several streams can be read side by side.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None
        self._exhausted = False

    def _fill(self) -> None:
        while not self._exhausted and (
            self._pending is None or self._newline not in self._pending
        ):
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._exhausted = True
                break
            if self._pending is None:
                self._newline = "\n" if isinstance(chunk, str) else b"\n"
                self._pending = chunk
            else:
                self._pending += chunk

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is used up."""
        self._fill()
        if not self._pending:
            return None
        index = self._pending.find(self._newline)
        if index < 0:
            line = self._pending
            self._pending = self._pending[:0]
        else:
            line = self._pending[: index + 1]
            self._pending = self._pending[index + 1 :]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def iter_lines(
    stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE
) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` one at a time."""
    yield from LineReader(stream, buffer_size)


def count_lines(path: Union[str, os.PathLike]) -> int:
    """Count the lines of the file at ``path``, a final unterminated one included."""
    with open(path, "r", encoding="utf-8", newline="") as handle:
        return sum(1 for _ in LineReader(handle, 4096))