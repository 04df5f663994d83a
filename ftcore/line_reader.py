"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, Optional

DEFAULT_BUFFER_SIZE = 1024


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Each line keeps its trailing ``b"\\n"``; the last line of the input may
    lack one. Data is read in chunks of ``buffer_size`` bytes, and bytes read
    past the end of a line are kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size < 1:
            raise ValueError(f"buffer size must be at least 1, got {buffer_size}")
        self._fd = fd
        self._buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or ``None`` once the input is exhausted.

        Read errors raise ``OSError``.
        """
        while True:
            newline = self._pending.find(b"\n")
            if newline >= 0:
                line = bytes(self._pending[: newline + 1])
                del self._pending[: newline + 1]
                return line
            chunk = os.read(self._fd, self._buffer_size)
            if not chunk:
                if not self._pending:
                    return None
                line = bytes(self._pending)
                self._pending.clear()
                return line
            self._pending += chunk

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line