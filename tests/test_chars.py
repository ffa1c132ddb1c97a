import string

import pytest

from rtmath.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    iter_chars,
    map_chars,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", [-1, 64, 91, 96, 123, 500])
def test_is_alpha_rejects(c):
    assert is_alpha(c) is False


@pytest.mark.parametrize("c", [65, 82, 90, 97, 106, 122])
def test_is_alpha_accepts(c):
    assert is_alpha(c) is True


@pytest.mark.parametrize("c", [-1, 0, 47, 58])
def test_is_digit_rejects(c):
    assert is_digit(c) is False


@pytest.mark.parametrize("c", [48, 52, 57])
def test_is_digit_accepts(c):
    assert is_digit(c) is True


@pytest.mark.parametrize(
    "c,expected",
    [(-1, False), (0, True), (120, True), (127, True), (128, False), (300, False), (2147483647, False)],
)
def test_is_ascii(c, expected):
    assert is_ascii(c) is expected


@pytest.mark.parametrize(
    "c,expected",
    [(-3, False), (-1, False), (0, False), (31, False), (32, True), (126, True), (127, False)],
)
def test_is_print(c, expected):
    assert is_print(c) is expected


def test_is_alnum_matches_string_module():
    for code in range(256):
        ch = chr(code)
        expected = ch in string.ascii_letters or ch in string.digits
        assert is_alnum(code) is expected
        assert is_alnum(ch) is expected


def test_case_mapping_matches_ascii_tables():
    for low, up in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(low) == up
        assert to_lower(up) == low
        assert to_upper(ord(low)) == ord(up)
        assert to_lower(ord(up)) == ord(low)


@pytest.mark.parametrize("c", [0, 65, "1", "!", 200, -5])
def test_to_upper_leaves_non_lowercase(c):
    assert to_upper(c) == c


@pytest.mark.parametrize("c", [0, 97, "1", "!", 200, -5])
def test_to_lower_leaves_non_uppercase(c):
    assert to_lower(c) == c


def test_map_chars_upper():
    s = "Hello World!"
    assert map_chars(s, lambda i, ch: to_upper(ch)) == s.upper()


def test_map_chars_receives_indices():
    seen = []
    map_chars("abc", lambda i, ch: seen.append(i) or ch)
    assert seen == [0, 1, 2]


def test_iter_chars_modifies_list_in_place():
    s = "Hello World!"
    chars = list(s)
    iter_chars(chars, lambda i, ch: to_upper(ch))
    assert "".join(chars) == s.upper()


def test_iter_chars_none_keeps_item():
    buf = bytearray(b"abc")
    iter_chars(buf, lambda i, b: None)
    assert buf == bytearray(b"abc")


def test_iter_chars_rejects_str():
    with pytest.raises(TypeError):
        iter_chars("abc", lambda i, ch: ch)


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")