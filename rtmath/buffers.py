"""Byte-buffer and NUL-terminated byte-string helpers.

Buffers are ``bytearray`` objects that the functions fill in place. Read-only
arguments may be any bytes-like object. A "string" inside a buffer ends at
its first NUL byte, or at the end of the buffer when there is none.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

_NUL = 0


def _check_count(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int")
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _check_fits(buf: BytesLike, length: int, name: str) -> None:
    if length > len(buf):
        raise ValueError(f"{name} is longer than the buffer ({length} > {len(buf)})")


def str_len(data: BytesLike) -> int:
    """Number of bytes before the first NUL, or the whole length without one."""
    index = bytes(data).find(b"\0")
    return len(data) if index < 0 else index


def mem_set(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_count(length, "length")
    _check_fits(buf, length, "length")
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def zero(buf: bytearray, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    return mem_set(buf, 0, length)


def alloc_zeroed(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` elements of ``size`` bytes each.

    Raises OverflowError when the total size cannot be represented.
    """
    _check_count(count, "count")
    _check_count(size, "size")
    if count == 0 or size == 0:
        return bytearray()
    if count > sys.maxsize // size:
        raise OverflowError("requested size is too large")
    return bytearray(count * size)


def mem_copy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_count(n, "n")
    _check_fits(src, n, "n")
    _check_fits(dst, n, "n")
    if dst is src:
        return dst
    dst[:n] = bytes(src[:n])
    return dst


def mem_move(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled correctly.
    """
    _check_count(dst, "dst")
    _check_count(src, "src")
    _check_count(length, "length")
    _check_fits(buf, src + length, "source range")
    _check_fits(buf, dst + length, "destination range")
    if dst != src:
        buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def mem_find(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (modulo 256) in the first ``n`` bytes."""
    _check_count(n, "n")
    _check_fits(data, n, "n")
    index = bytes(data[:n]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def mem_compare(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns 0 when they match, otherwise the difference of the first
    differing bytes as unsigned values.
    """
    _check_count(n, "n")
    _check_fits(a, n, "n")
    _check_fits(b, n, "n")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def copy_bounded(dst: bytearray, src: BytesLike, size: int) -> int:
    """Copy the string in ``src`` into ``dst``, using at most ``size`` bytes.

    At most ``size - 1`` bytes are copied and the result is NUL-terminated;
    with ``size`` 0 nothing is written. Returns the length of the string in
    ``src``, so a result of ``size`` or more means the copy was truncated.
    """
    _check_count(size, "size")
    _check_fits(dst, size, "size")
    src_len = str_len(src)
    if size:
        count = min(src_len, size - 1)
        dst[:count] = bytes(src[:count])
        dst[count] = _NUL
    return src_len


def concat_bounded(dst: bytearray, src: BytesLike, size: int) -> int:
    """Append the string in ``src`` to the string in ``dst`` within ``size`` bytes.

    The result is NUL-terminated and never longer than ``size - 1`` bytes.
    Returns the combined length of both strings; when ``size`` is 0 the length
    of ``src``, and when ``size`` does not exceed the length of ``dst`` the
    length of ``src`` plus ``size``, leaving ``dst`` untouched.
    """
    _check_count(size, "size")
    dst_len = str_len(dst)
    src_len = str_len(src)
    if size == 0:
        return src_len
    if size <= dst_len:
        return src_len + size
    _check_fits(dst, size, "size")
    count = min(src_len, size - dst_len - 1)
    dst[dst_len:dst_len + count] = bytes(src[:count])
    dst[dst_len + count] = _NUL
    return dst_len + src_len


def duplicate(data: BytesLike) -> bytearray:
    """A new buffer holding a copy of the string in ``data``, without its NUL."""
    return bytearray(data[:str_len(data)])