"""ASCII character classification, case mapping and per-character mapping."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, bool):
        raise TypeError("character must be a str or an int")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    raise TypeError("character must be a str or an int")


def _in_byte_range(code: int) -> bool:
    return 0 <= code <= 255


def is_alpha(c: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    if not _in_byte_range(code):
        return False
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(c)
    if not _in_byte_range(code):
        return False
    return ord("0") <= code <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; other values are returned unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; other values are returned unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def map_chars(s: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for every character of ``s``."""
    if not isinstance(s, str):
        raise TypeError("s must be a str")
    return "".join(func(i, ch) for i, ch in enumerate(s))


def iter_chars(s: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Apply ``func(index, item)`` to every item of ``s`` in place.

    When ``func`` returns a value other than None, that value replaces the
    item at ``index``.
    """
    if isinstance(s, (str, bytes, tuple)):
        raise TypeError("s must be a mutable sequence")
    for i, item in enumerate(list(s)):
        result = func(i, item)
        if result is not None:
            s[i] = result