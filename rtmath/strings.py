"""String search, comparison, slicing and splitting helpers.

Characters are matched by value. A search for the NUL character finds the
position just past the end of the string, where a terminated string keeps
its terminator.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[str, int]

_NUL = "\0"


def _as_char(c: CharLike) -> str:
    """Normalise a one-character string or a code point to a character."""
    if isinstance(c, bool):
        raise TypeError("character must be a str or an int")
    if isinstance(c, int):
        if c < 0:
            raise ValueError("character code must not be negative")
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    raise TypeError("character must be a str or an int")


def _check_count(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def find_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    Searching for NUL returns ``len(s)``.
    """
    ch = _as_char(c)
    if ch == _NUL and _NUL not in s:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def find_last_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    Searching for NUL returns ``len(s)``.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def compare(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns 0 when they agree, otherwise the difference of the code points at
    the first mismatch; the end of a string counts as code point 0.
    """
    _check_count(n, "n")
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return ord(a) - ord(b)
    common = min(len(s1), len(s2))
    if common >= n:
        return 0
    a = ord(s1[common]) if common < len(s1) else 0
    b = ord(s2[common]) if common < len(s2) else 0
    return a - b


def find_substring(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0. Returns None when there is no match
    lying entirely inside the searched prefix.
    """
    _check_count(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substring(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end yields an empty string.
    """
    _check_count(start, "start")
    _check_count(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def trim(s: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    ch = _as_char(sep)
    return [word for word in s.split(ch) if word]


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be strings")
    return s1 + s2