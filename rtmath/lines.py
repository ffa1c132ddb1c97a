"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import functools
import os
from typing import Any, Callable, Iterator, Optional, Union

BUFFER_SIZE = 2000

Chunk = Union[str, bytes]


class LineReader:
    """Yield the lines of a stream, each with its trailing newline.

    ``stream`` is a file descriptor or an object with a ``read(size)`` method
    returning ``str`` or ``bytes``. Reads are made ``buffer_size`` at a time.
    The final line is returned without a newline when the stream does not end
    with one; an empty remainder produces no line.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an int")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        read: Callable[[int], Chunk]
        if isinstance(stream, int) and not isinstance(stream, bool):
            if stream < 0:
                raise ValueError("file descriptor must not be negative")
            read = functools.partial(os.read, stream)
        elif callable(getattr(stream, "read", None)):
            read = stream.read
        else:
            raise TypeError("stream must be a file descriptor or have a read method")
        self._read = read
        self._buffer_size = buffer_size
        self._leftover: Optional[Chunk] = None

    def _take_line(self) -> Optional[Chunk]:
        left = self._leftover
        if left is None:
            return None
        newline = b"\n" if isinstance(left, (bytes, bytearray)) else "\n"
        index = left.find(newline)
        if index < 0:
            return None
        line = left[: index + 1]
        self._leftover = left[index + 1:] or None
        return line

    def readline(self) -> Optional[Chunk]:
        """The next line, or None once the stream is exhausted."""
        while True:
            line = self._take_line()
            if line is not None:
                return line
            try:
                chunk = self._read(self._buffer_size)
            except Exception:
                self._leftover = None
                raise
            if chunk:
                self._leftover = chunk if self._leftover is None else self._leftover + chunk
                continue
            rest = self._leftover or None
            self._leftover = None
            return rest

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.readline, None)