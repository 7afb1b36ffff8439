import string

import pytest

from cub3d.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ALL_ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("c", ALL_ASCII)
def test_is_alpha_matches_ascii_letters(c):
    assert is_alpha(c) == (c in string.ascii_letters)


@pytest.mark.parametrize("c", ALL_ASCII)
def test_is_digit_matches_digits(c):
    assert is_digit(c) == (c in string.digits)


@pytest.mark.parametrize("c", ALL_ASCII)
def test_is_alnum_is_union(c):
    assert is_alnum(c) == (is_alpha(c) or is_digit(c))


@pytest.mark.parametrize("c", ALL_ASCII)
def test_is_print_matches_printable_without_controls(c):
    expected = c in string.printable and c not in "\t\n\r\x0b\x0c"
    assert is_print(c) == expected


def test_is_ascii_bounds():
    assert all(is_ascii(i) for i in range(128))
    assert not is_ascii(128)
    assert not is_ascii(-1)
    assert not is_ascii("é")


def test_integer_codes_agree_with_strings():
    for c in ALL_ASCII:
        assert is_alpha(ord(c)) == is_alpha(c)
        assert is_print(ord(c)) == is_print(c)


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_alnum("ß")


@pytest.mark.parametrize("c", string.ascii_lowercase)
def test_to_upper_and_back(c):
    upper = to_upper(c)
    assert upper == c.upper()
    assert to_lower(upper) == c


@pytest.mark.parametrize("c", string.ascii_uppercase)
def test_to_lower_and_back(c):
    lower = to_lower(c)
    assert lower == c.lower()
    assert to_upper(lower) == c


@pytest.mark.parametrize("c", string.digits + string.punctuation + " é")
def test_case_conversion_leaves_others_unchanged(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_case_conversion_keeps_int_type():
    for c in string.ascii_letters:
        assert to_upper(ord(c)) == ord(c.upper())
        assert to_lower(ord(c)) == ord(c.lower())


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)