"""Writing characters, strings and numbers to raw file descriptors."""

from __future__ import annotations

import os

from pipex.convert import itoa

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(char: str, fd: int) -> None:
    """Write a single character to ``fd``."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _write_all(fd, char.encode())


def put_str(text: str, fd: int) -> None:
    """Write ``text`` to ``fd``."""
    _write_all(fd, text.encode())


def put_endl(text: str, fd: int) -> None:
    """Write ``text`` followed by a newline to ``fd``."""
    _write_all(fd, (text + "\n").encode())


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal text of a 32-bit signed integer to ``fd``."""
    _write_all(fd, itoa(n).encode())