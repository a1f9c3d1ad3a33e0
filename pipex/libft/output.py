"""Writing characters, strings, lines and numbers to raw file descriptors."""

from __future__ import annotations

import operator
import os


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: int | str, fd: int) -> None:
    """Write one byte to ``fd``: an int's low 8 bits or a one-byte character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("latin-1")
    else:
        data = bytes([operator.index(c) & 0xFF])
    _write_all(fd, data)


def putstr_fd(s: str | None, fd: int) -> None:
    """Write ``s`` to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode())


def putendl_fd(s: str | None, fd: int) -> None:
    """Write ``s`` and a newline to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode() + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of ``n`` to ``fd``."""
    _write_all(fd, str(operator.index(n)).encode())