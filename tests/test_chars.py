import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII_CODES = range(128)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_print_matches_printable_without_control_whitespace(code):
    printable = set(string.printable) - set("\t\n\r\x0b\x0c")
    assert is_print(code) == (chr(code) in printable)


@given(st.integers(min_value=-1000, max_value=100000))
def test_is_ascii_range(code):
    assert is_ascii(code) == (0 <= code <= 127)


@given(st.integers(min_value=128, max_value=0x10FFFF))
def test_non_ascii_codes_are_never_classified(code):
    assert not is_alpha(code)
    assert not is_digit(code)
    assert not is_alnum(code)
    assert not is_print(code)


def test_string_arguments_are_accepted():
    assert is_alpha("q")
    assert is_digit("7")
    assert not is_alpha("7")
    assert is_print(" ")
    assert not is_print("\x7f")


def test_non_ascii_unicode_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_digit("²")


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_to_upper_letters(letter):
    assert to_upper(letter) == letter.upper()
    assert to_upper(ord(letter)) == ord(letter.upper())


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_to_lower_letters(letter):
    assert to_lower(letter) == letter.lower()
    assert to_lower(ord(letter)) == ord(letter.lower())


@given(st.integers(min_value=-50, max_value=0x10FFFF))
def test_case_conversion_leaves_non_letters_alone(code):
    if not is_alpha(code):
        assert to_upper(code) == code
        assert to_lower(code) == code
    else:
        assert to_lower(to_upper(code)) == to_lower(code)
        assert to_upper(to_lower(code)) == to_upper(code)


def test_case_conversion_keeps_non_ascii_letters():
    assert to_upper("ß") == "ß"
    assert to_lower("É") == "É"


def test_to_upper_returns_same_type():
    assert to_upper("a") == "A"
    assert isinstance(to_upper(ord("a")), int)


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_is_rejected():
    with pytest.raises(TypeError):
        is_digit(3.0)
    with pytest.raises(TypeError):
        to_lower(None)