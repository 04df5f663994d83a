"""Writing characters, strings and integers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from .numbers import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: Union[str, int], fd: int) -> None:
    """Write one character to ``fd``.

    ``c`` is either a one-character string, written in UTF-8, or an integer
    byte value from 0 to 255, written as that single byte.
    """
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, not bool")
    if isinstance(c, int):
        if not 0 <= c <= 0xFF:
            raise ValueError(f"byte value out of range: {c}")
        _write_all(fd, bytes([c]))
        return
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")
    _write_all(fd, c.encode("utf-8"))


def put_str_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd`` in UTF-8; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def put_endl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``; ``None`` writes only the newline."""
    put_str_fd(s, fd)
    put_char_fd("\n", fd)


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of ``n``, a 32-bit signed integer, to ``fd``."""
    put_str_fd(itoa(n), fd)