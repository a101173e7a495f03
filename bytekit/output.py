"""Writing characters, strings and numbers to a file descriptor."""

from __future__ import annotations

import os
from typing import Union

CharLike = Union[int, str]


def _write_all(fd: int, data: bytes) -> int:
    """Write every byte of ``data`` to ``fd`` and return how many were written."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def putchar_fd(c: CharLike, fd: int) -> int:
    """Write one character to ``fd``; an int is written as a single byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    elif isinstance(c, int):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return _write_all(fd, data)


def putstr_fd(s: str, fd: int) -> int:
    """Write ``s`` up to its first NUL to ``fd``."""
    return _write_all(fd, s.split("\0", 1)[0].encode("utf-8"))


def putendl_fd(s: str, fd: int) -> int:
    """Write ``s`` followed by a newline to ``fd``."""
    return putstr_fd(s, fd) + putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal form of ``n`` to ``fd``."""
    return _write_all(fd, str(int(n)).encode("ascii"))