"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterator
from typing import Optional

BUFFER_SIZE = 42

_readers: dict[int, "LineReader"] = {}


class LineReader:
    """Read lines from a file descriptor in chunks of ``buffer_size`` bytes.

    Each line keeps its trailing newline; the last line of the input may
    lack one. Data read past the end of a line is kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"fd must not be negative, got {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def _fill(self) -> None:
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending = b""
                raise
            if not chunk:
                return
            self._pending += chunk

    def next_line(self) -> Optional[str]:
        """Return the next line, or None once the input is exhausted."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        if end < 0:
            line, self._pending = self._pending, b""
        else:
            line, self._pending = self._pending[: end + 1], self._pending[end + 1 :]
        return line.decode("utf-8", errors="replace")

    def __iter__(self) -> Iterator[str]:
        return iter(self.next_line, None)


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line read from ``fd``, or None at the end of input.

    Unread data is remembered per descriptor between calls.
    """
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.next_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line


def main(argv: Optional[list[str]] = None) -> int:
    """Print every line of a file, each preceded by its line number."""
    parser = argparse.ArgumentParser(description="Print a file with numbered lines.")
    parser.add_argument("path", help="file to read")
    parser.add_argument(
        "--buffer-size", type=int, default=BUFFER_SIZE, help="bytes read per call"
    )
    args = parser.parse_args(argv)
    try:
        fd = os.open(args.path, os.O_RDONLY)
    except OSError as exc:
        print(f"{args.path}: {exc.strerror}", file=sys.stderr)
        return 1
    try:
        for number, line in enumerate(LineReader(fd, args.buffer_size), start=1):
            sys.stdout.write(f"{number} {line}")
    finally:
        os.close(fd)
    sys.stdout.flush()
    return 0