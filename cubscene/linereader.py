"""Line-at-a-time reading from file descriptors, keeping leftovers per descriptor."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 1000


class LineReader:
    """Reads lines from raw file descriptors.

    Data read past the end of a line is kept for the next call on the same
    descriptor, so several descriptors can be read in turn.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE, encoding: str = "utf-8") -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._buffer_size = buffer_size
        self._encoding = encoding
        self._pending: dict[int, bytearray] = {}

    def next_line(self, fd: int) -> str | None:
        """The next line from ``fd`` with its newline, or ``None`` at end of file."""
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        pending = self._pending.pop(fd, bytearray())
        while b"\n" not in pending:
            chunk = os.read(fd, self._buffer_size)
            if not chunk:
                break
            pending += chunk
        if not pending:
            return None
        cut = pending.find(b"\n")
        end = len(pending) if cut < 0 else cut + 1
        rest = pending[end:]
        if rest:
            self._pending[fd] = rest
        return bytes(pending[:end]).decode(self._encoding)

    def lines(self, fd: int) -> Iterator[str]:
        """Yield the remaining lines of ``fd``."""
        while (line := self.next_line(fd)) is not None:
            yield line

    def clear(self) -> None:
        """Drop the data kept for every descriptor."""
        self._pending.clear()

    def __enter__(self) -> "LineReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clear()