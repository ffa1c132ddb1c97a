"""Conversions between decimal text and integers."""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace (tab, newline, vertical tab, form feed, carriage
    return, space) is skipped, then a single optional sign, then as many
    ASCII digits as follow. Anything after the digits is ignored; text with
    no digits parses as 0.
    """
    if not isinstance(text, str):
        raise TypeError("text must be a str")
    pos = 0
    end = len(text)
    while pos < end and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < end and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < end and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return sign * value


def itoa(n: int) -> str:
    """Decimal representation of ``n``, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("n must be an int")
    return str(n)