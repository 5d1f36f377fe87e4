"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import operator
import os
from typing import Union

CharLike = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _cstr(s: str) -> str:
    return s.partition("\0")[0]


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to ``fd``; an int is written as a single byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    elif isinstance(c, int):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _write_all(fd, data)


def putstr_fd(s: str, fd: int) -> None:
    """Write ``s`` to ``fd``, up to its first NUL."""
    _write_all(fd, _cstr(s).encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    _write_all(fd, _cstr(s).encode("utf-8") + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of the integer ``n`` to ``fd``."""
    _write_all(fd, str(operator.index(n)).encode("ascii"))