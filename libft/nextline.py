"""Line-by-line reading from file descriptors, one buffer per descriptor."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

DEFAULT_BUFFER_SIZE = 42
_INT_MAX = 2**31 - 1


class LineReader:
    """Read lines from raw file descriptors, keeping leftover bytes per descriptor.

    Each call to :meth:`read_line` returns the next line including its
    trailing newline, the final unterminated line as it is, or None once
    the descriptor is exhausted.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if buffer_size > _INT_MAX:
            raise ValueError("buffer_size is too large")
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytes] = {}

    def _fill(self, fd: int, pending: bytes) -> bytes:
        """Read chunks until ``pending`` holds a newline or the input ends."""
        chunks = [pending]
        has_newline = b"\n" in pending
        while not has_newline:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            chunks.append(chunk)
            has_newline = b"\n" in chunk
        return b"".join(chunks)

    def read_line(self, fd: int) -> Optional[bytes]:
        """Return the next line from ``fd``, or None at end of input.

        Raises ValueError for a negative descriptor. If reading fails, the
        bytes held for ``fd`` are discarded and the OSError propagates.
        """
        if fd < 0:
            self._pending.pop(fd, None)
            raise ValueError("file descriptor must not be negative")
        try:
            data = self._fill(fd, self._pending.pop(fd, b""))
        except OSError:
            self._pending.pop(fd, None)
            raise
        if not data:
            return None
        line, newline, rest = data.partition(b"\n")
        if newline:
            if rest:
                self._pending[fd] = rest
            else:
                # An empty remainder is kept, as the stream may still grow.
                self._pending[fd] = b""
            return line + newline
        return line

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield every remaining line of ``fd`` until end of input."""
        while True:
            line = self.read_line(fd)
            if line is None:
                return
            yield line


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line of ``fd`` using a shared reader with the default buffer size."""
    return _default_reader.read_line(fd)