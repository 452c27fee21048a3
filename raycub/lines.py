"""Line-by-line reading of map files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Protocol

_CHUNK_SIZE = 4096


class _Readable(Protocol):
    def read(self, size: int = -1) -> str: ...


class LineReader:
    """Read a text stream one line at a time.

    Each line keeps its terminating newline; the last line of a stream
    that does not end with a newline is returned without one. Text that
    has been read from the stream but not yet returned is kept per
    reader, so several streams can be read side by side.
    """

    def __init__(self, stream: _Readable) -> None:
        self._stream = stream
        self._buffer = ""
        self._exhausted = False

    def _fill(self) -> None:
        while "\n" not in self._buffer and not self._exhausted:
            chunk = self._stream.read(_CHUNK_SIZE)
            if not chunk:
                self._exhausted = True
            else:
                self._buffer += chunk

    def read_line(self) -> str | None:
        """Return the next line, or None once the stream is used up."""
        self._fill()
        if not self._buffer:
            return None
        end = self._buffer.find("\n")
        if end < 0:
            line, self._buffer = self._buffer, ""
        else:
            line, self._buffer = self._buffer[: end + 1], self._buffer[end + 1 :]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read every line of the file at ``path``, newlines kept."""
    with open(path, encoding="utf-8", newline="") as handle:
        return list(LineReader(handle))