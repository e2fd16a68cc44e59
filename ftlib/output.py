"""Writing characters, strings and decimal numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from .chars import itoa

UINT_MAX = 2**32 - 1


def _write_all(fd: int, data: bytes) -> None:
    """Write every byte of ``data`` to ``fd``, retrying short writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _until_nul(s: str) -> str:
    return s.split("\0", 1)[0]


def putchar_fd(c: Union[str, int], fd: int) -> None:
    """Write one character to ``fd``.

    A string must hold exactly one character; an int is taken as a byte
    value and only its low 8 bits are written.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write_all(fd, c.encode("utf-8"))
    elif isinstance(c, int):
        _write_all(fd, bytes([c & 0xFF]))
    else:
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd`` up to its first NUL; None writes nothing."""
    if s is None:
        return
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    _write_all(fd, _until_nul(s).encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    putstr_fd(s, fd)
    _write_all(fd, b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write a 32-bit signed integer in decimal to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))


def putnbr_unsigned_fd(n: int, fd: int) -> None:
    """Write a 32-bit unsigned integer in decimal to ``fd``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not 0 <= n <= UINT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit unsigned integer")
    _write_all(fd, str(n).encode("ascii"))