"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

CharLike = Union[str, int]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _char_bytes(c: CharLike) -> bytes:
    if isinstance(c, bool):
        raise TypeError("character must be a str or an int")
    if isinstance(c, int):
        if not 0 <= c <= 255:
            raise ValueError("character code must be in 0..255")
        return bytes([c])
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c.encode("utf-8")
    raise TypeError("character must be a str or an int")


def put_char(c: CharLike, fd: int) -> None:
    """Write one character to ``fd``; an int is written as a single byte."""
    _write_all(fd, _char_bytes(c))


def put_str(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def put_endl(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8") + b"\n")


def put_number(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("n must be an int")
    _write_all(fd, str(n).encode("ascii"))